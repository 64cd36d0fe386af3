"""Layouts - top-level arrangements of navigation chrome and content.

Each layout is a TagList to place inside f7_page:

    appbar
    panels
    div.view.view-main
      div.page
        navbar
        toolbar / tabs
        div.page-content

The DOM hierarchy and class names are what Framework7 expects to wire up
views, panels and tabs. Do not reorder.
"""

from __future__ import annotations

import logging
from typing import Any

from f7ui.elements import f7_icon, f7_margin
from f7ui.exceptions import F7ArgumentError
from f7ui.navigation import PAGE_CONTENT_STYLE, check_id
from f7ui.tags import Tag, TagList, is_tag, singleton, tags
from f7ui.templates import render_template

log = logging.getLogger(__name__)

SIDEBAR_ID = "f7-sidebar"
SIDEBAR_VIEW_ID = "f7-sidebar-view"
SIDEBAR_WIDTH = 260


def _main_view(*page_children: Any) -> Tag:
    return tags.div(tags.div(*page_children, class_="page"), class_="view view-main")


def f7_single_layout(
    *content: Any,
    navbar: Tag,
    toolbar: Tag | None = None,
    panels: Any = None,
    appbar: Tag | None = None,
) -> TagList:
    """Single page layout.

    Args:
        *content: Page content
        navbar: Slot for f7_navbar
        toolbar: Slot for f7_toolbar
        panels: Slot for f7_panel (a TagList or list for several panels)
        appbar: Slot for f7_appbar
    """
    return TagList(
        appbar,
        panels,
        _main_view(
            navbar,
            toolbar,
            tags.div(*content, class_="page-content", style=PAGE_CONTENT_STYLE),
        ),
    )


def f7_tab_layout(
    *tabs: Any,
    navbar: Tag,
    panels: Any = None,
    appbar: Tag | None = None,
) -> TagList:
    """Tab layout. Expects f7_tabs, which brings its own toolbar.

    The page wrapper is needed for tabs to swipe properly and for the dark
    mode to apply.
    """
    return TagList(appbar, panels, _main_view(navbar, *tabs))


def _prepare_sidebar(sidebar: Any) -> Tag:
    if not is_tag(sidebar, "div", "panel"):
        raise F7ArgumentError("sidebar", "expected an f7_panel")
    if not sidebar.has_class("panel-left"):
        raise F7ArgumentError("sidebar", "the sidebar must be a left panel")

    sidebar = sidebar.copy().add_class("panel-in")
    if sidebar.get_attr("id") is None:
        sidebar.set_attr("id", SIDEBAR_ID)
    # the id is pasted into a jQuery selector by the split layout script
    check_id("sidebar", sidebar.get_attr("id"))

    view = sidebar.children[0] if sidebar.children else None
    if not is_tag(view, cls="view"):
        raise F7ArgumentError("sidebar", "panel has no view")
    # keeps the sidebar view out of the main view selectors below
    view.set_attr("id", SIDEBAR_VIEW_ID)
    return sidebar


def f7_split_layout(
    *content: Any,
    navbar: Tag,
    sidebar: Tag,
    toolbar: Tag | None = None,
    panels: Any = None,
    appbar: Tag | None = None,
) -> TagList:
    """Split layout for tablets: a single layout plus a left sidebar that stays
    visible from the breakpoint width.

    Args:
        *content: Page content, usually f7_items
        navbar: Slot for f7_navbar
        sidebar: A left f7_panel, e.g. holding an f7_panel_menu
        toolbar: Slot for f7_toolbar
        panels: Slot for a right f7_panel
        appbar: Slot for f7_appbar
    """
    sidebar = _prepare_sidebar(sidebar)
    items = f7_margin(f7_margin(tags.div(*content), side="left"), side="right")

    skeleton = f7_single_layout(
        items,
        navbar=navbar,
        toolbar=toolbar,
        panels=TagList(sidebar, panels),
        appbar=appbar,
    )

    css = singleton(tags.style(render_template("split_layout.css.j2")))
    js = singleton(
        tags.script(
            render_template(
                "split_layout.js.j2",
                sidebar_id=sidebar.get_attr("id"),
                view_id=SIDEBAR_VIEW_ID,
                sidebar_width=SIDEBAR_WIDTH,
            )
        )
    )
    log.debug("Split layout with sidebar #%s", sidebar.get_attr("id"))
    return TagList(css, js, skeleton)


def f7_items(*items: Any) -> Tag:
    """Wrapper for f7_item, in the split layout."""
    # ios-edges is needed for the iOS rendering
    return tags.div(tags.div(*items, class_="tabs ios-edges"), class_="tabs-animated-wrap")


def f7_item(*content: Any, tab_name: str) -> Tag:
    """Like f7_tab, but for the split layout."""
    return tags.div(
        *content,
        class_="page-content tab",
        id=tab_name,
        data_value=tab_name,
        style=PAGE_CONTENT_STYLE,
    )


def _panel_toggle(side: str) -> Tag:
    return tags.a(
        f7_icon("bars"),
        href="#",
        class_="button button-small panel-toggle display-flex",
        data_panel=side,
    )


def f7_appbar(*content: Any, left_panel: bool = False, right_panel: bool = False) -> Tag:
    """Bar above the main view, mostly for desktop (aurora) apps."""
    return tags.div(
        tags.div(
            tags.div(_panel_toggle("left") if left_panel else None, class_="left"),
            *content,
            tags.div(_panel_toggle("right") if right_panel else None, class_="right"),
            class_="appbar-inner",
        ),
        class_="appbar",
    )
