"""Navigation chrome: navbars, toolbars, tabs, panels, links."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any

from f7ui.elements import f7_icon
from f7ui.exceptions import F7ArgumentError, check_choice
from f7ui.tags import Tag, TagList, flatten, tags

log = logging.getLogger(__name__)

# Gainsboro keeps cards readable on the default white page
PAGE_CONTENT_STYLE = "background-color: gainsboro;"

_UNSAFE_ID = re.compile(r"[^A-Za-z0-9_-]+")
# Ids that can be dropped into a CSS selector as is
_SAFE_ID = re.compile(r"[A-Za-z][A-Za-z0-9_-]*")


def check_id(argument: str, value: str) -> str:
    """Return value if it is a selector-safe DOM id, else raise F7ArgumentError."""
    if not isinstance(value, str) or not _SAFE_ID.fullmatch(value):
        raise F7ArgumentError(
            argument, f"{value!r} must start with a letter and use only letters, digits, - and _"
        )
    return value


def tab_id(tab_name: str) -> str:
    """DOM-safe id for a tab name: "Tab 1" -> "Tab_1"."""
    safe = _UNSAFE_ID.sub("_", str(tab_name)).strip("_")
    if not safe:
        raise F7ArgumentError("tab_name", f"{tab_name!r} has no usable characters")
    if safe != tab_name:
        log.debug("Tab name %r used as id %r", tab_name, safe)
    return safe


def _panel_opener(side: str) -> Tag:
    return tags.div(
        tags.a(
            f7_icon("bars"),
            href="#",
            class_="link icon-only panel-open",
            data_panel=side,
        ),
        class_=side,
    )


def f7_navbar(
    *content: Any,
    sub_navbar: Tag | None = None,
    title: Any = None,
    subtitle: Any = None,
    hairline: bool = True,
    shadow: bool = True,
    bigger: bool = False,
    transparent: bool = False,
    left_panel: bool = False,
    right_panel: bool = False,
) -> Tag:
    """Top navigation bar.

    Args:
        *content: Extra navbar content
        sub_navbar: Slot for f7_sub_navbar
        title: Navbar title
        subtitle: Shown under the title (ignored for large navbars)
        hairline: Whether to show the bottom hairline
        shadow: Whether to show the bottom shadow
        bigger: Large navbar with a collapsible large title
        transparent: Transparent large navbar (implies bigger)
        left_panel: Add a button opening the left panel
        right_panel: Add a button opening the right panel
    """
    large = bigger or transparent
    cls = [
        "navbar",
        None if hairline else "no-hairline",
        None if shadow else "no-shadow",
        "navbar-large" if large else None,
        "navbar-transparent" if transparent else None,
    ]

    title_tag = tags.div(
        title,
        tags.span(subtitle, class_="subtitle") if subtitle is not None and not large else None,
        class_="title",
    )
    large_title = None
    if large:
        large_title = tags.div(tags.div(title, class_="title-large-text"), class_="title-large")

    return tags.div(
        tags.div(class_="navbar-bg"),
        tags.div(
            _panel_opener("left") if left_panel else None,
            title_tag,
            _panel_opener("right") if right_panel else None,
            large_title,
            *content,
            sub_navbar,
            class_="navbar-inner sliding",
        ),
        class_=cls,
    )


def f7_sub_navbar(*content: Any) -> Tag:
    return tags.div(tags.div(*content, class_="subnavbar-inner"), class_="subnavbar")


def f7_toolbar(
    *content: Any,
    position: str = "bottom",
    hairline: bool = True,
    shadow: bool = True,
    icons: bool = False,
    scrollable: bool = False,
) -> Tag:
    """Fixed toolbar at the top or bottom of the page."""
    check_choice("position", position, ("top", "bottom"))
    cls = [
        "toolbar",
        f"toolbar-{position}",
        "tabbar-labels" if icons else None,
        "tabbar-scrollable" if scrollable else None,
        None if hairline else "no-hairline",
        None if shadow else "no-shadow",
    ]
    return tags.div(tags.div(*content, class_="toolbar-inner"), class_=cls)


@dataclass
class Tab(Tag):
    """A tab page; remembers its name and icon for the f7_tabs toolbar."""

    tab_name: str = ""
    icon: Any = None

    @property
    def active(self) -> bool:
        return self.has_class("tab-active")

    def activate(self) -> "Tab":
        self.add_class("tab-active")
        self.set_attr("data-active", "true")
        return self


def f7_tab(*content: Any, tab_name: str, icon: Any = None, active: bool = False) -> Tab:
    """A tab. Only valid inside f7_tabs."""
    tab = Tab(name="div", tab_name=tab_name, icon=icon)
    tab.add_class("page-content", "tab", "tab-active" if active else None)
    tab.set_attr("id", tab_id(tab_name))
    tab.set_attr("data-value", tab_name)
    tab.set_attr("data-active", "true" if active else "false")
    tab.set_attr("style", PAGE_CONTENT_STYLE)
    tab.append(*content)
    return tab


def f7_tab_link(
    label: Any = None,
    icon: Any = None,
    href: str | None = None,
    active: bool = False,
) -> Tag:
    """Tabbar link, for toolbars built by hand."""
    if label is None and icon is None:
        raise F7ArgumentError("label", "a tab link needs a label or an icon")
    return tags.a(
        icon,
        tags.span(label, class_="tabbar-label") if label is not None else None,
        href=href,
        class_=["tab-link", "tab-link-active" if active else None],
    )


def _tab_link(tab: Tab) -> Tag:
    return f7_tab_link(
        label=tab.tab_name,
        icon=tab.icon,
        href=f"#{tab.get_attr('id')}",
        active=tab.active,
    )


def f7_tabs(
    *tabs: Any,
    id: str | None = None,
    swipeable: bool = False,
    animated: bool = True,
) -> TagList:
    """Tabs with an automatically generated bottom tabbar.

    The first tab is activated when none is. Swipeable takes precedence over
    animated.
    """
    items = flatten(tabs)
    if not items:
        raise F7ArgumentError("tabs", "at least one f7_tab is required")
    for item in items:
        if not isinstance(item, Tab):
            raise F7ArgumentError("tabs", f"expected f7_tab, got {type(item).__name__}")

    seen: set[str] = set()
    for item in items:
        item_id = item.get_attr("id")
        if item_id in seen:
            raise F7ArgumentError("tabs", f"duplicate tab id {item_id!r}")
        seen.add(item_id)

    active = [item for item in items if item.active]
    if len(active) > 1:
        names = ", ".join(repr(item.tab_name) for item in active)
        raise F7ArgumentError("tabs", f"only one tab can be active, got {names}")

    items = [item.copy() for item in items]
    if not active:
        log.debug("No active tab, activating %r", items[0].tab_name)
        items[0].activate()

    toolbar = f7_toolbar(*[_tab_link(item) for item in items], position="bottom", icons=True)
    toolbar.add_class("tabbar")

    tabs_tag = tags.div(*items, class_="tabs", id=id)
    if swipeable:
        wrapper = tags.div(tabs_tag, class_="tabs-swipeable-wrap")
    elif animated:
        wrapper = tags.div(tabs_tag, class_="tabs-animated-wrap")
    else:
        wrapper = tabs_tag

    return TagList(toolbar, wrapper)


def f7_panel(
    *content: Any,
    id: str | None = None,
    title: Any = None,
    side: str = "left",
    theme: str = "dark",
    effect: str = "reveal",
    resizable: bool = False,
) -> Tag:
    """Slide-in side panel."""
    check_choice("side", side, ("left", "right"))
    check_choice("theme", theme, ("dark", "light"))
    check_choice("effect", effect, ("reveal", "cover"))
    return tags.div(
        tags.div(
            tags.div(
                f7_navbar(title=title) if title is not None else None,
                tags.div(*content, class_="page-content"),
                class_="page",
            ),
            class_="view",
        ),
        class_=[
            "panel",
            f"panel-{side}",
            f"panel-{effect}",
            f"theme-{theme}",
            "panel-resizable" if resizable else None,
        ],
        id=id,
        data_side=side,
    )


def f7_panel_menu(*items: Any, id: str | None = None) -> Tag:
    """Menu of f7_panel_item links, for the split layout sidebar."""
    return tags.div(tags.ul(*items, class_="f7-panel-menu", id=id), class_="list links-list")


def f7_panel_item(title: Any, tab_name: str, icon: Any = None, active: bool = False) -> Tag:
    target = f"#{tab_name}"
    return tags.li(
        tags.a(
            icon,
            tags.span(title),
            href=target,
            data_tab=target,
            class_=["tab-link", "panel-close", "tab-link-active" if active else None],
        )
    )


def f7_link(
    label: Any = None,
    href: str | None = None,
    icon: Any = None,
    external: bool = False,
) -> Tag:
    if label is None and icon is None:
        raise F7ArgumentError("label", "a link needs a label or an icon")
    return tags.a(
        icon,
        tags.span(label) if label is not None else None,
        href=href,
        class_=[
            "link",
            "external" if external else None,
            "icon-only" if label is None else None,
        ],
    )
