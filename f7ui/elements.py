"""Content containers, grid and typography helpers."""

from __future__ import annotations

from typing import Any

from f7ui.config import F7_COLORS
from f7ui.exceptions import F7ArgumentError, check_choice
from f7ui.tags import Tag, flatten, tags

SIDES = ("left", "right", "top", "bottom", "vertical", "horizontal")


def color_class(color: str | None) -> str | None:
    if color is None:
        return None
    check_choice("color", color, F7_COLORS)
    return f"color-{color}"


def _require_tag(tag: Any, argument: str = "tag") -> Tag:
    if not isinstance(tag, Tag):
        raise F7ArgumentError(argument, f"expected a Tag, got {type(tag).__name__}")
    return tag


# Icons


def f7_icon(
    name: str,
    lib: str | None = None,
    color: str | None = None,
    style: str | None = None,
) -> Tag:
    """Framework7 icon.

    Args:
        name: Icon name (e.g., "bars", "email")
        lib: None for Framework7 icons on every skin, "ios" for Framework7 icons
            on iOS only, "md" for Material icons on md only
        color: Icon color
        style: Inline CSS
    """
    if lib is None:
        cls = "icon f7-icons"
    elif lib == "ios":
        cls = "icon f7-icons ios-only"
    elif lib == "md":
        cls = "icon material-icons md-only"
    else:
        raise F7ArgumentError("lib", f"{lib!r} is not one of None, 'ios', 'md'")
    return tags.i(name, class_=[cls, color_class(color)], style=style)


# Typography


def _decorate(tag: Tag, prefix: str, side: str | None) -> Tag:
    tag = _require_tag(tag).copy()
    if side is None:
        return tag.add_class(prefix)
    check_choice("side", side, SIDES)
    return tag.add_class(f"{prefix}-{side}")


def f7_margin(tag: Tag, side: str | None = None) -> Tag:
    """Add a margin class to a copy of tag."""
    return _decorate(tag, "margin", side)


def f7_padding(tag: Tag, side: str | None = None) -> Tag:
    """Add a padding class to a copy of tag."""
    return _decorate(tag, "padding", side)


def f7_align(tag: Tag, side: str) -> Tag:
    check_choice("side", side, ("left", "center", "right", "justify"))
    return _require_tag(tag).copy().add_class(f"text-align-{side}")


def f7_float(tag: Tag, side: str) -> Tag:
    check_choice("side", side, ("left", "right"))
    return _require_tag(tag).copy().add_class(f"float-{side}")


def f7_shadow(tag: Tag, intensity: int, hover: bool = False, pressed: bool = False) -> Tag:
    """Elevate a copy of tag. Intensity goes from 0 to 24."""
    valid = isinstance(intensity, int) and not isinstance(intensity, bool)
    if not valid or not 0 <= intensity <= 24:
        raise F7ArgumentError("intensity", "must be an integer between 0 and 24")
    tag = _require_tag(tag).copy().add_class(f"elevation-{intensity}")
    if hover:
        tag.add_class(f"elevation-hover-{intensity}")
    if pressed:
        tag.add_class(f"elevation-pressed-{intensity}")
    return tag


def f7_skeleton(tag: Tag, effect: str = "fade", block: bool = False) -> Tag:
    """Turn a copy of tag into a loading placeholder.

    Text skeletons keep the text shape, block skeletons grey out the whole box.
    """
    check_choice("effect", effect, ("fade", "blink", "wave"))
    return (
        _require_tag(tag)
        .copy()
        .add_class("skeleton-block" if block else "skeleton-text", f"skeleton-effect-{effect}")
    )


# Grid


def f7_row(*cols: Any, gap: bool = True) -> Tag:
    return tags.div(*cols, class_=["row", None if gap else "no-gap"])


def f7_col(*content: Any) -> Tag:
    return tags.div(*content, class_="col")


def f7_flex(*content: Any) -> Tag:
    return tags.div(
        *content, class_="display-flex justify-content-space-between align-items-center"
    )


# Text containers


def f7_block(
    *content: Any,
    hairlines: bool = True,
    strong: bool = False,
    inset: bool = False,
    tablet: bool = False,
) -> Tag:
    cls = ["block"]
    if strong:
        cls.append("block-strong")
    if not hairlines:
        cls.append("no-hairlines")
    if inset:
        cls.append("inset")
    if tablet:
        cls.append("tablet-inset")
    return tags.div(*content, class_=cls)


def f7_block_title(title: str, size: str | None = None) -> Tag:
    cls = ["block-title"]
    if size is not None:
        check_choice("size", size, ("medium", "large"))
        cls.append(f"block-title-{size}")
    return tags.div(title, class_=cls)


def f7_block_header(*content: Any) -> Tag:
    return tags.div(*content, class_="block-header")


def f7_block_footer(*content: Any) -> Tag:
    return tags.div(*content, class_="block-footer")


def f7_card(
    *content: Any,
    title: Any = None,
    footer: Any = None,
    outline: bool = False,
    height: int | str | None = None,
) -> Tag:
    style = None
    if height is not None:
        if isinstance(height, int):
            height = f"{height}px"
        style = f"height: {height}; overflow-y: auto;"
    return tags.div(
        tags.div(title, class_="card-header") if title is not None else None,
        tags.div(*content, class_="card-content card-content-padding", style=style),
        tags.div(footer, class_="card-footer") if footer is not None else None,
        class_=["card", "card-outline" if outline else None],
    )


def f7_social_card(
    *content: Any,
    author_img: str | None = None,
    author: Any = None,
    date: Any = None,
    footer: Any = None,
) -> Tag:
    """Card with an author header, like a social network post."""
    header = tags.div(
        tags.div(
            tags.img(src=author_img, width="34", height="34"),
            class_="f7-social-card-avatar",
        )
        if author_img is not None
        else None,
        tags.div(author, class_="f7-social-card-name") if author is not None else None,
        tags.div(date, class_="f7-social-card-date") if date is not None else None,
        class_="card-header",
    )
    return tags.div(
        header,
        tags.div(*content, class_="card-content card-content-padding"),
        tags.div(footer, class_="card-footer") if footer is not None else None,
        class_="card f7-social-card",
    )


def f7_expandable_card(
    *content: Any,
    id: str | None = None,
    title: Any = None,
    subtitle: Any = None,
    color: str | None = None,
    image: str | None = None,
) -> Tag:
    """Card that expands to full screen on tap.

    The header sits on a colored band or on a background image, not both.
    """
    if color is not None and image is not None:
        raise F7ArgumentError("image", "cannot be combined with color")
    if color is not None:
        check_choice("color", color, F7_COLORS)
        band_class, band_style = f"bg-color-{color}", "height: 300px;"
    elif image is not None:
        # the url is pasted into inline CSS
        if any(c in image for c in "\"'()\\;"):
            raise F7ArgumentError("image", f"{image!r} contains quotes, parentheses or ';'")
        band_class = None
        band_style = (
            f'background: url("{image}") no-repeat center top; '
            "background-size: cover; height: 240px;"
        )
    else:
        band_class, band_style = None, None
    on_background = color is not None or image is not None

    band = tags.div(
        tags.div(
            title,
            tags.br() if subtitle is not None else None,
            tags.small(subtitle, style="opacity: 0.7;") if subtitle is not None else None,
            class_=["card-header", "display-block", "text-color-white" if on_background else None],
        ),
        tags.a(
            f7_icon("xmark_circle_fill"),
            href="#",
            class_=[
                "link card-close card-opened-fade-in",
                "color-white" if on_background else None,
            ],
            style="position: absolute; right: 15px; top: 15px;",
        ),
        class_=band_class,
        style=band_style,
    )
    return tags.div(
        tags.div(band, tags.div(*content, class_="card-content-padding"), class_="card-content"),
        id=id,
        class_="card card-expandable",
    )


# Buttons & badges


def f7_button(
    input_id: str | None = None,
    label: Any = None,
    href: str | None = None,
    color: str | None = None,
    fill: bool = True,
    outline: bool = False,
    shadow: bool = False,
    rounded: bool = False,
    size: str | None = None,
) -> Tag:
    """Button: an action button when input_id is set, a link otherwise."""
    if input_id is not None and href is not None:
        raise F7ArgumentError("href", "cannot be combined with input_id")
    cls = ["button"]
    if fill and not outline:
        cls.append("button-fill")
    if outline:
        cls.append("button-outline")
    if shadow:
        cls.append("button-raised")
    if rounded:
        cls.append("button-round")
    if size is not None:
        check_choice("size", size, ("small", "large"))
        cls.append(f"button-{size}")
    cls.append(color_class(color))

    if input_id is not None:
        cls.append("f7-action-button")
        return tags.button(label, id=input_id, type="button", class_=cls)
    return tags.a(label, href=href, class_=cls + (["external"] if href else []))


def f7_segment(
    *buttons: Any,
    raised: bool = False,
    rounded: bool = False,
    strong: bool = False,
) -> Tag:
    """Segmented button group. Expects f7_button children."""
    items = flatten(buttons)
    for item in items:
        if not isinstance(item, Tag) or not item.has_class("button"):
            raise F7ArgumentError("buttons", f"expected f7_button, got {item!r}")
    return tags.div(
        tags.div(
            *items,
            class_=[
                "segmented",
                "segmented-raised" if raised else None,
                "segmented-round" if rounded else None,
                "segmented-strong" if strong else None,
            ],
        ),
        class_="block",
    )


def f7_badge(*content: Any, color: str | None = None) -> Tag:
    return tags.span(*content, class_=["badge", color_class(color)])
