"""Small Framework7 widgets: chips, progress bars, gauges, swipers, FABs.

Gauges and swipers are set up by Framework7 itself from their data-*
attributes (gauge-init, swiper-init), so no extra JavaScript is needed.
"""

from __future__ import annotations

import logging
from numbers import Real
from typing import Any

from f7ui.config import F7_COLORS
from f7ui.elements import color_class, f7_icon
from f7ui.exceptions import F7ArgumentError, check_choice
from f7ui.navigation import check_id
from f7ui.tags import Tag, flatten, is_tag, tags
from f7ui.templates import to_json

log = logging.getLogger(__name__)

FAB_POSITIONS = (
    "right-top",
    "right-center",
    "right-bottom",
    "left-top",
    "left-center",
    "left-bottom",
    "center-top",
    "center-center",
    "center-bottom",
)
FAB_SIDES = ("left", "right", "top", "bottom", "center")


def _check_percent(argument: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, Real) or not 0 <= value <= 100:
        raise F7ArgumentError(argument, f"{value!r} must be a number between 0 and 100")
    return value


def _bool_attr(value: bool) -> str:
    return "true" if value else "false"


# Chips


def f7_chip(
    label: Any = None,
    image: str | None = None,
    icon: Any = None,
    outline: bool = False,
    color: str | None = None,
    icon_color: str | None = None,
    closable: bool = False,
) -> Tag:
    """Chip (tag). Either an image or an icon can sit before the label."""
    if image is not None and icon is not None:
        raise F7ArgumentError("icon", "cannot be combined with image")
    media = None
    if image is not None:
        media = tags.div(tags.img(src=image), class_="chip-media")
    elif icon is not None:
        media_class = None
        if icon_color is not None:
            check_choice("icon_color", icon_color, F7_COLORS)
            media_class = f"bg-color-{icon_color}"
        media = tags.div(icon, class_=["chip-media", media_class])

    return tags.div(
        media,
        tags.div(label, class_="chip-label") if label is not None else None,
        tags.a(href="#", class_="chip-delete") if closable else None,
        class_=["chip", "chip-outline" if outline else None, color_class(color)],
    )


# Progress


def f7_progress(id: str, value: float | None = None, color: str | None = None) -> Tag:
    """Determinate progress bar. value goes from 0 to 100."""
    if value is not None:
        _check_percent("value", value)
    return tags.div(
        tags.span(),
        id=check_id("id", id),
        data_progress=value,
        class_=["progressbar", color_class(color)],
    )


def f7_progress_inf(color: str | None = None, multi: bool = False) -> Tag:
    """Infinite progress bar. multi cycles through colors."""
    if color is not None and multi:
        raise F7ArgumentError("multi", "cannot be combined with color")
    return tags.span(
        class_=["progressbar-infinite", color_class(color), "color-multi" if multi else None]
    )


def f7_gauge(
    id: str,
    value: float,
    type: str = "circle",
    size: int = 200,
    bg_color: str = "transparent",
    border_bg_color: str = "#eeeeee",
    border_color: str = "#2196f3",
    border_width: int = 10,
    value_text: Any = None,
    value_text_color: str = "#2196f3",
    value_font_size: int = 31,
    value_font_weight: int = 500,
    label_text: Any = None,
    label_text_color: str = "#888888",
    label_font_size: int = 14,
    label_font_weight: int = 400,
) -> Tag:
    """Circular gauge.

    Args:
        id: Gauge id
        value: Filled share, from 0 to 100
        type: "circle" or "semicircle"
        size: Diameter in px
        value_text: Big text in the middle, "<value>%" by default
        label_text: Small text under the value
    """
    check_choice("type", type, ("circle", "semicircle"))
    _check_percent("value", value)
    if not isinstance(size, int) or isinstance(size, bool) or size <= 0:
        raise F7ArgumentError("size", "must be a positive integer")
    if value_text is None:
        value_text = f"{value:g}%"

    return tags.div(
        id=check_id("id", id),
        class_="gauge gauge-init",
        data_type=type,
        data_value=value / 100,
        data_size=size,
        data_bg_color=bg_color,
        data_border_bg_color=border_bg_color,
        data_border_color=border_color,
        data_border_width=border_width,
        data_value_text=value_text,
        data_value_text_color=value_text_color,
        data_value_font_size=value_font_size,
        data_value_font_weight=value_font_weight,
        data_label_text=label_text,
        data_label_text_color=label_text_color,
        data_label_font_size=label_font_size,
        data_label_font_weight=label_font_weight,
    )


# Swiper


def f7_slide(*content: Any) -> Tag:
    return tags.div(*content, class_="swiper-slide")


def f7_swiper(
    *slides: Any,
    id: str,
    space_between: int = 50,
    slides_per_view: int | str = "auto",
    centered: bool = True,
    speed: int = 400,
    pagination: bool = True,
    navigation: bool = False,
    scrollbar: bool = False,
) -> Tag:
    """Touch slider of f7_slide.

    Args:
        *slides: f7_slide items
        id: Swiper id
        space_between: Gap between slides in px
        slides_per_view: Number of visible slides, or "auto"
        centered: Center the active slide
        speed: Transition duration in ms
        pagination: Show the bullets
        navigation: Show the prev/next buttons
        scrollbar: Show a scrollbar
    """
    items = flatten(slides)
    if not items:
        raise F7ArgumentError("slides", "at least one f7_slide is required")
    for item in items:
        if not is_tag(item, "div", "swiper-slide"):
            raise F7ArgumentError("slides", f"expected f7_slide, got {item!r}")
    if slides_per_view != "auto":
        valid = isinstance(slides_per_view, int) and not isinstance(slides_per_view, bool)
        if not valid or slides_per_view < 1:
            raise F7ArgumentError("slides_per_view", "must be 'auto' or a positive integer")
    if space_between < 0:
        raise F7ArgumentError("space_between", "must not be negative")

    return tags.div(
        tags.div(*items, class_="swiper-wrapper"),
        tags.div(class_="swiper-pagination") if pagination else None,
        tags.div(class_="swiper-button-prev") if navigation else None,
        tags.div(class_="swiper-button-next") if navigation else None,
        tags.div(class_="swiper-scrollbar") if scrollbar else None,
        id=check_id("id", id),
        class_="swiper-container swiper-init",
        data_space_between=space_between,
        data_slides_per_view=slides_per_view,
        data_centered_slides=_bool_attr(centered),
        data_speed=speed,
        data_pagination=to_json({"el": ".swiper-pagination", "clickable": True})
        if pagination
        else None,
        data_navigation=to_json({"nextEl": ".swiper-button-next", "prevEl": ".swiper-button-prev"})
        if navigation
        else None,
        data_scrollbar=to_json({"el": ".swiper-scrollbar", "draggable": True})
        if scrollbar
        else None,
    )


# Floating action buttons


def f7_fab(input_id: str, label: Any = None, flag: Any = None) -> Tag:
    """Action button for f7_fabs. flag is a small text label next to it."""
    return tags.a(
        label,
        tags.div(flag, class_="fab-label") if flag is not None else None,
        href="#",
        id=input_id,
        class_=["f7-action-button", "fab-label-button" if flag is not None else None],
    )


def f7_fabs(
    *fabs: Any,
    id: str | None = None,
    position: str = "right-bottom",
    color: str | None = None,
    extended: bool = False,
    label: Any = None,
    side_open: str = "left",
) -> Tag:
    """Floating action button that unfolds a set of f7_fab.

    Args:
        *fabs: f7_fab buttons
        id: DOM id
        position: Where the button floats, e.g. "right-bottom"
        color: Button color
        extended: Wide button showing label
        label: Text of an extended button
        side_open: Direction the buttons unfold to
    """
    check_choice("position", position, FAB_POSITIONS)
    check_choice("side_open", side_open, FAB_SIDES)
    if label is not None and not extended:
        raise F7ArgumentError("label", "is only shown with extended=True")
    items = flatten(fabs)
    for item in items:
        if not is_tag(item, "a", "f7-action-button"):
            raise F7ArgumentError("fabs", f"expected f7_fab, got {item!r}")

    log.debug("FAB at %s with %d buttons", position, len(items))
    return tags.div(
        tags.a(
            f7_icon("plus"),
            f7_icon("xmark"),
            tags.div(label, class_="fab-text") if extended and label is not None else None,
            href="#",
        ),
        tags.div(*items, class_=["fab-buttons", f"fab-buttons-{side_open}"]) if items else None,
        id=id,
        class_=[
            "fab",
            f"fab-{position}",
            "fab-extended" if extended else None,
            color_class(color),
        ],
    )
