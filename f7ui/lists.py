"""Lists, accordions and timelines.

Framework7 styles list rows from a fixed skeleton:

    li
      div.item-content (a.item-link.item-content for links)
        div.item-media
        div.item-inner
          div.item-title / div.item-title-row
          div.item-after

Keep the nesting when editing the builders below.
"""

from __future__ import annotations

import logging
from typing import Any

from f7ui.exceptions import F7ArgumentError, check_choice
from f7ui.tags import Tag, flatten, is_tag, tags

log = logging.getLogger(__name__)

LIST_MODES = ("simple", "links", "media", "contacts")
TIMELINE_SIDES = ("left", "right")


def _require_items(argument: str, items: list[Any], name: str, cls: str, builder: str) -> None:
    for item in items:
        if not is_tag(item, name, cls):
            raise F7ArgumentError(argument, f"expected {builder}, got {item!r}")


# Lists


def _as_row(item: Any) -> Any:
    if is_tag(item, "li"):
        return item
    return tags.li(item)


def f7_list(
    *items: Any,
    mode: str | None = None,
    inset: bool = False,
    hairlines: bool = True,
    id: str | None = None,
) -> Tag:
    """List view.

    Args:
        *items: f7_list_item rows, plain content (wrapped in li), or
            f7_list_group blocks. Groups cannot be mixed with rows.
        mode: None, "simple", "links", "media" or "contacts"
        inset: Rounded list with side margins
        hairlines: Whether to draw the separators
        id: DOM id
    """
    if mode is not None:
        check_choice("mode", mode, LIST_MODES)
    rows = flatten(items)
    groups = [row for row in rows if is_tag(row, "div", "list-group")]
    if groups and len(groups) != len(rows):
        raise F7ArgumentError("items", "f7_list_group cannot be mixed with single rows")

    body = rows if groups else tags.ul(*[_as_row(row) for row in rows])
    return tags.div(
        body,
        id=id,
        class_=[
            "list",
            f"{mode}-list" if mode else None,
            "inset" if inset else None,
            None if hairlines else "no-hairlines",
        ],
    )


def f7_list_item(
    *content: Any,
    title: Any = None,
    subtitle: Any = None,
    header: Any = None,
    footer: Any = None,
    href: str | None = None,
    media: Any = None,
) -> Tag:
    """A list row.

    Without a title the content fills the row. With a title the content goes
    to the right of it. Setting a subtitle switches to the media layout, where
    the content becomes the text under the subtitle.
    """
    title_tag = None
    if title is not None or header is not None or footer is not None:
        title_tag = tags.div(
            tags.div(header, class_="item-header") if header is not None else None,
            title,
            tags.div(footer, class_="item-footer") if footer is not None else None,
            class_="item-title",
        )

    if subtitle is not None:
        inner = [
            tags.div(title_tag, class_="item-title-row"),
            tags.div(subtitle, class_="item-subtitle"),
            tags.div(*content, class_="item-text") if content else None,
        ]
    elif title_tag is not None:
        inner = [title_tag, tags.div(*content, class_="item-after") if content else None]
    else:
        inner = list(content)

    parts = [
        tags.div(media, class_="item-media") if media is not None else None,
        tags.div(*inner, class_="item-inner"),
    ]
    if href is not None:
        row = tags.a(*parts, href=href, class_="item-link item-content external")
    else:
        row = tags.div(*parts, class_="item-content")
    return tags.li(row)


def f7_list_group(*items: Any, title: Any) -> Tag:
    """Titled group of rows, for f7_list. The title sticks while scrolling."""
    return tags.div(
        tags.ul(
            tags.li(title, class_="list-group-title"),
            *[_as_row(item) for item in flatten(items)],
        ),
        class_="list-group",
    )


# Accordions


def f7_accordion(*items: Any, id: str | None = None, multi_collapse: bool = False) -> Tag:
    """Accordion of f7_accordion_item.

    Only one item stays open at a time unless multi_collapse is set.
    """
    rows = flatten(items)
    _require_items("items", rows, "li", "accordion-item", "f7_accordion_item")
    opened = [row for row in rows if row.has_class("accordion-item-opened")]
    if len(opened) > 1 and not multi_collapse:
        raise F7ArgumentError("items", "only one item can start open without multi_collapse")
    return tags.div(
        tags.ul(*rows),
        id=id,
        class_=["list", None if multi_collapse else "accordion-list"],
    )


def f7_accordion_item(*content: Any, title: Any = None, open: bool = False) -> Tag:
    return tags.li(
        tags.a(
            tags.div(tags.div(title, class_="item-title"), class_="item-inner"),
            href="#",
            class_="item-content item-link",
        ),
        tags.div(tags.div(*content, class_="block"), class_="accordion-item-content"),
        class_=["accordion-item", "accordion-item-opened" if open else None],
    )


# Timelines


def f7_timeline(*items: Any, sides: bool = False) -> Tag:
    """Vertical timeline of f7_timeline_item.

    With sides, items alternate around the center line unless they pick a side.
    """
    rows = flatten(items)
    _require_items("items", rows, "div", "timeline-item", "f7_timeline_item")
    if not sides and any(
        row.has_class(f"timeline-item-{side}") for row in rows for side in TIMELINE_SIDES
    ):
        log.warning("Timeline item side is ignored without sides=True")
    return tags.div(*rows, class_=["timeline", "timeline-sides" if sides else None])


def f7_timeline_item(
    *content: Any,
    date: Any = None,
    card: bool = False,
    time: Any = None,
    title: Any = None,
    subtitle: Any = None,
    side: str | None = None,
) -> Tag:
    if side is not None:
        check_choice("side", side, TIMELINE_SIDES)

    parts = [
        tags.div(time, class_="timeline-item-time") if time is not None else None,
        tags.div(title, class_="timeline-item-title") if title is not None else None,
        tags.div(subtitle, class_="timeline-item-subtitle") if subtitle is not None else None,
        tags.div(*content, class_="timeline-item-text") if content else None,
    ]
    if card:
        body = tags.div(tags.div(*parts, class_="card-content card-content-padding"), class_="card")
    else:
        body = tags.div(*parts, class_="timeline-item-inner")

    return tags.div(
        tags.div(date, class_="timeline-item-date"),
        tags.div(class_="timeline-item-divider"),
        tags.div(body, class_="timeline-item-content"),
        class_=["timeline-item", f"timeline-item-{side}" if side else None],
    )
