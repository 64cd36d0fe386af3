"""Form inputs.

Inputs follow the Framework7 list-item form markup. Widgets that the toolkit
initializes from JavaScript (pickers, calendars) carry their settings in a
<script type="application/json" data-for="<input id>"> block that the f7ui
bindings read at startup.
"""

from __future__ import annotations

import datetime as dt
import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any, Union

from f7ui.elements import color_class
from f7ui.exceptions import F7ArgumentError, check_choice
from f7ui.tags import Tag, TagList, tags
from f7ui.templates import render_template

log = logging.getLogger(__name__)

Choices = Union[Mapping[str, Any], Sequence[Any]]

COLOR_PICKER_MODULES = (
    "wheel",
    "sb-spectrum",
    "hs-spectrum",
    "hue-slider",
    "saturation-slider",
    "brightness-slider",
    "alpha-slider",
    "rgb-sliders",
    "hsb-sliders",
    "rgb-bars",
    "palette",
    "current-color",
    "initial-current-colors",
)

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}){1,2}$")


def _js_bool(value: bool) -> str:
    return "true" if value else "false"


def _choice_pairs(choices: Choices) -> list[tuple[str, str]]:
    """Normalize choices to (label, value) pairs. Mappings are label -> value."""
    if isinstance(choices, Mapping):
        pairs = [(str(k), str(v)) for k, v in choices.items()]
    elif isinstance(choices, (str, bytes)) or not isinstance(choices, Sequence):
        raise F7ArgumentError("choices", "expected a sequence or a mapping")
    else:
        pairs = [(str(c), str(c)) for c in choices]
    if not pairs:
        raise F7ArgumentError("choices", "must not be empty")
    return pairs


def _selected_list(selected: Any) -> list[str]:
    if selected is None:
        return []
    if isinstance(selected, (list, tuple, set)):
        return [str(s) for s in selected]
    return [str(selected)]


def _check_selected(pairs: list[tuple[str, str]], selected: list[str]) -> None:
    values = {value for _, value in pairs}
    unknown = [s for s in selected if s not in values]
    if unknown:
        raise F7ArgumentError("selected", f"not among the choices: {', '.join(unknown)}")


def _check_range(min: float, max: float, value: float, argument: str = "value") -> None:
    if min >= max:
        raise F7ArgumentError("min", f"min ({min}) must be lower than max ({max})")
    if not min <= value <= max:
        raise F7ArgumentError(argument, f"{value} is outside [{min}, {max}]")


def create_select_options(choices: Choices, selected: Any = None) -> TagList:
    """Build <option> tags. Mappings are label -> value."""
    pairs = _choice_pairs(choices)
    chosen = _selected_list(selected)
    _check_selected(pairs, chosen)
    return TagList(
        [tags.option(label, value=value, selected=value in chosen) for label, value in pairs]
    )


def _list_input(label: Any, field: Tag, wrap_class: str = "item-input-wrap") -> Tag:
    return tags.div(
        tags.ul(
            tags.li(
                tags.div(
                    tags.div(label, class_="item-title item-label"),
                    tags.div(field, class_=wrap_class),
                    class_="item-inner",
                ),
                class_="item-content item-input",
            )
        ),
        class_="list",
    )


def _config_script(input_id: str, config: dict[str, Any]) -> Tag:
    return tags.script(
        render_template("input_config.json.j2", config=config),
        type="application/json",
        data_for=input_id,
    )


# Text inputs


def _text_input(input_id: str, label: Any, value: Any, placeholder: str | None, type: str) -> Tag:
    field = TagList(
        tags.input(id=input_id, type=type, value=value, placeholder=placeholder),
        tags.span(class_="input-clear-button"),
    )
    return _list_input(label, field)


def f7_text(input_id: str, label: Any, value: Any = "", placeholder: str | None = None) -> Tag:
    return _text_input(input_id, label, value, placeholder, "text")


def f7_password(input_id: str, label: Any, value: Any = "", placeholder: str | None = None) -> Tag:
    return _text_input(input_id, label, value, placeholder, "password")


def f7_textarea(
    input_id: str,
    label: Any,
    value: Any = "",
    placeholder: str | None = None,
    resize: bool = False,
) -> Tag:
    field = tags.textarea(
        value,
        id=input_id,
        placeholder=placeholder,
        class_="resizable" if resize else None,
    )
    return _list_input(label, field)


# Choice inputs


def f7_select(input_id: str, label: Any, choices: Choices, selected: Any = None) -> Tag:
    """Dropdown select. The first choice is selected by default."""
    pairs = _choice_pairs(choices)
    if selected is None:
        selected = pairs[0][1]
    if isinstance(selected, (list, tuple, set)):
        raise F7ArgumentError("selected", "f7_select takes a single value")
    field = tags.select(
        create_select_options(choices, selected),
        id=input_id,
        class_="input-select",
    )
    return _list_input(label, field, "item-input-wrap input-dropdown-wrap")


def _choice_list(
    input_id: str,
    label: Any,
    choices: Choices,
    selected: list[str],
    kind: str,
) -> Tag:
    pairs = _choice_pairs(choices)
    _check_selected(pairs, selected)
    items = [
        tags.li(
            tags.label(
                tags.input(type=kind, name=input_id, value=value, checked=value in selected),
                tags.i(class_=f"icon icon-{kind}"),
                tags.div(tags.div(text, class_="item-title"), class_="item-inner"),
                class_=f"item-{kind} item-content",
            )
        )
        for text, value in pairs
    ]
    return tags.div(
        tags.div(label, class_="block-title"),
        tags.div(tags.ul(*items), class_="list"),
        id=input_id,
        class_=f"f7-{kind}-group",
    )


def f7_checkbox(input_id: str, label: Any, value: bool = False) -> Tag:
    return tags.div(
        tags.label(
            tags.input(type="checkbox", id=input_id, checked=bool(value)),
            tags.i(class_="icon-checkbox"),
            class_="checkbox",
        ),
        tags.span(label),
        class_="f7-checkbox",
    )


def f7_checkbox_group(input_id: str, label: Any, choices: Choices, selected: Any = None) -> Tag:
    return _choice_list(input_id, label, choices, _selected_list(selected), "checkbox")


def f7_radio(input_id: str, label: Any, choices: Choices, selected: Any = None) -> Tag:
    """Radio buttons. The first choice is selected by default."""
    if selected is None:
        selected = _choice_pairs(choices)[0][1]
    chosen = _selected_list(selected)
    if len(chosen) != 1:
        raise F7ArgumentError("selected", "f7_radio takes a single value")
    return _choice_list(input_id, label, choices, chosen, "radio")


def f7_smart_select(
    input_id: str,
    label: Any,
    choices: Choices,
    selected: Any = None,
    open_in: str = "page",
    searchbar: bool = True,
    multiple: bool = False,
    maxlength: int | None = None,
    virtual_list: bool = False,
) -> Tag:
    """Smart select: opens the options in a page, sheet, popup or popover."""
    check_choice("open_in", open_in, ("page", "sheet", "popup", "popover"))
    chosen = _selected_list(selected)
    if not multiple and len(chosen) > 1:
        raise F7ArgumentError("selected", "several values need multiple=True")
    if maxlength is not None:
        if not multiple:
            raise F7ArgumentError("maxlength", "only applies with multiple=True")
        if maxlength < 1:
            raise F7ArgumentError("maxlength", "must be at least 1")
    return tags.div(
        tags.ul(
            tags.li(
                tags.a(
                    tags.select(
                        create_select_options(choices, chosen),
                        name=input_id,
                        multiple=multiple,
                        maxlength=maxlength,
                    ),
                    tags.div(
                        tags.div(tags.div(label, class_="item-title"), class_="item-inner"),
                        class_="item-content",
                    ),
                    id=input_id,
                    class_="item-link smart-select smart-select-init",
                    data_open_in=open_in,
                    data_searchbar=_js_bool(searchbar),
                    data_searchbar_placeholder="Search",
                    data_virtual_list=_js_bool(virtual_list),
                )
            )
        ),
        class_="list",
    )


def f7_autocomplete(
    input_id: str,
    label: Any,
    choices: Choices,
    value: Any = None,
    placeholder: str | None = None,
    open_in: str = "page",
    typeahead: bool = True,
    expand_input: bool = True,
    dropdown_placeholder: str | None = None,
    multiple: bool = False,
) -> Tag:
    """Autocomplete over a fixed list of choices.

    With open_in="dropdown" the suggestions show under a text input. With "page"
    or "popup" a standalone list item opens a searchable list, and the first
    choice is picked by default.
    """
    check_choice("open_in", open_in, ("page", "popup", "dropdown"))
    values = [v for _, v in _choice_pairs(choices)]
    dropdown = open_in == "dropdown"
    if multiple and dropdown:
        raise F7ArgumentError("multiple", "not available with open_in='dropdown'")

    if value is None and not dropdown:
        value = values[0]
    chosen = _selected_list(value)
    if not multiple and len(chosen) > 1:
        raise F7ArgumentError("value", "several values need multiple=True")
    unknown = [c for c in chosen if c not in values]
    if unknown:
        raise F7ArgumentError("value", f"not among the choices: {', '.join(unknown)}")

    config: dict[str, Any] = {
        "openIn": open_in,
        "choices": values,
        "value": chosen,
        "multiple": multiple,
    }
    if dropdown:
        config["typeahead"] = typeahead
        config["expandInput"] = expand_input
        if dropdown_placeholder is not None:
            config["dropdownPlaceholderText"] = dropdown_placeholder
        field = tags.input(
            id=input_id,
            type="text",
            value=chosen[0] if chosen else None,
            placeholder=placeholder,
            class_="autocomplete-input",
        )
        return _list_input(label, field).append(_config_script(input_id, config))

    opener = tags.a(
        tags.div(
            tags.div(label, class_="item-title"),
            tags.div(", ".join(chosen), class_="item-after"),
            class_="item-inner",
        ),
        href="#",
        id=input_id,
        class_="item-link item-content autocomplete-opener",
    )
    return tags.div(tags.ul(tags.li(opener)), class_="list").append(
        _config_script(input_id, config)
    )


# Numeric inputs


def f7_slider(
    input_id: str,
    label: Any,
    min: float,
    max: float,
    value: float | Sequence[float],
    step: float = 1,
    scale: bool = False,
    scale_steps: int = 5,
    scale_sub_steps: int = 0,
    vertical: bool = False,
    vertical_reversed: bool = False,
    labels: Sequence[Any] | None = None,
    color: str | None = None,
) -> Tag:
    """Range slider. A pair of values gives a dual-handle slider.

    Args:
        labels: Optional (left, right) pair shown on either side, e.g. icons
    """
    dual = isinstance(value, (list, tuple))
    if dual:
        if len(value) != 2:
            raise F7ArgumentError("value", "a dual slider takes exactly two values")
        low, high = value
        if low > high:
            raise F7ArgumentError("value", f"{low} is greater than {high}")
        _check_range(min, max, low)
        _check_range(min, max, high)
    else:
        _check_range(min, max, value)
    if step <= 0:
        raise F7ArgumentError("step", "must be positive")
    if vertical_reversed and not vertical:
        log.debug("vertical_reversed implies vertical for slider %r", input_id)
        vertical = True

    slider = tags.div(
        tags.input(type="range", min=min, max=max, step=step, value=None if dual else value),
        id=input_id,
        class_=[
            "range-slider",
            "range-slider-init",
            "range-slider-vertical" if vertical else None,
            "range-slider-vertical-reversed" if vertical_reversed else None,
            color_class(color),
        ],
        style="height: 160px;" if vertical else None,
        data_min=min,
        data_max=max,
        data_step=step,
        data_label="true",
        data_dual=_js_bool(dual),
        data_value=None if dual else value,
        data_value_left=value[0] if dual else None,
        data_value_right=value[1] if dual else None,
        data_scale=_js_bool(scale),
        data_scale_steps=scale_steps,
        data_scale_sub_steps=scale_sub_steps,
        data_vertical=_js_bool(vertical),
        data_vertical_reversed=_js_bool(vertical_reversed),
    )

    if labels is not None:
        if len(labels) != 2:
            raise F7ArgumentError("labels", "expected a (left, right) pair")
        slider = tags.div(
            tags.ul(
                tags.li(
                    tags.div(labels[0], class_="item-cell width-auto flex-shrink-0"),
                    tags.div(slider, class_="item-cell flex-shrink-3"),
                    tags.div(labels[1], class_="item-cell width-auto flex-shrink-0"),
                    class_="item-row",
                )
            ),
            class_="list simple-list",
        )

    return tags.div(tags.div(label, class_="block-title"), slider, class_="f7-slider")


def f7_stepper(
    input_id: str,
    label: Any,
    min: float,
    max: float,
    value: float,
    step: float = 1,
    fill: bool = False,
    rounded: bool = False,
    raised: bool = False,
    size: str | None = None,
    color: str | None = None,
    wraps: bool = False,
    autorepeat: bool = True,
    manual: bool = False,
    decimal_point: int = 4,
    buttons_end_input_mode: bool = True,
) -> Tag:
    """Stepper with minus/plus buttons."""
    _check_range(min, max, value)
    if step <= 0:
        raise F7ArgumentError("step", "must be positive")
    if decimal_point < 0:
        raise F7ArgumentError("decimal_point", "must not be negative")
    if size is not None:
        check_choice("size", size, ("small", "large"))

    stepper = tags.div(
        tags.div(class_="stepper-button-minus"),
        tags.div(
            tags.input(
                type="text",
                value=value,
                min=min,
                max=max,
                step=step,
                readonly=not manual,
            ),
            class_="stepper-input-wrap",
        ),
        tags.div(class_="stepper-button-plus"),
        id=input_id,
        class_=[
            "stepper",
            "stepper-init",
            "stepper-fill" if fill else None,
            "stepper-round" if rounded else None,
            "stepper-raised" if raised else None,
            f"stepper-{size}" if size else None,
            color_class(color),
        ],
        data_min=min,
        data_max=max,
        data_step=step,
        data_value=value,
        data_wraps=_js_bool(wraps),
        data_autorepeat=_js_bool(autorepeat),
        data_manual_input_mode=_js_bool(manual),
        data_decimal_point=decimal_point,
        data_buttons_end_input_mode=_js_bool(buttons_end_input_mode),
    )
    return tags.div(tags.small(label), stepper, class_="f7-stepper")


def f7_toggle(input_id: str, label: Any, checked: bool = False, color: str | None = None) -> Tag:
    return tags.div(
        tags.ul(
            tags.li(
                tags.div(
                    tags.div(
                        tags.div(label, class_="item-title"),
                        tags.div(
                            tags.label(
                                tags.input(type="checkbox", id=input_id, checked=checked),
                                tags.span(class_="toggle-icon"),
                                class_=["toggle", "toggle-init", color_class(color)],
                            ),
                            class_="item-after",
                        ),
                        class_="item-inner",
                    ),
                    class_="item-content",
                )
            )
        ),
        class_="list",
    )


# Pickers


def _iso_date(value: Any, argument: str) -> str | None:
    if value is None:
        return None
    if isinstance(value, dt.datetime):
        return value.date().isoformat()
    if isinstance(value, dt.date):
        return value.isoformat()
    try:
        return dt.date.fromisoformat(str(value)).isoformat()
    except ValueError as e:
        raise F7ArgumentError(argument, f"{value!r} is not an ISO date") from e


def f7_date_picker(
    input_id: str,
    label: Any,
    value: Any = None,
    min: Any = None,
    max: Any = None,
    format: str = "yyyy-mm-dd",
) -> Tag:
    """Calendar date input. Dates are datetime.date or ISO strings."""
    value_iso = _iso_date(value, "value")
    min_iso = _iso_date(min, "min")
    max_iso = _iso_date(max, "max")
    if min_iso and max_iso and min_iso > max_iso:
        raise F7ArgumentError("min", f"{min_iso} is after max {max_iso}")
    if value_iso and min_iso and value_iso < min_iso:
        raise F7ArgumentError("value", f"{value_iso} is before min {min_iso}")
    if value_iso and max_iso and value_iso > max_iso:
        raise F7ArgumentError("value", f"{value_iso} is after max {max_iso}")

    field = tags.input(
        id=input_id,
        type="text",
        value=value_iso,
        placeholder="Select date",
        readonly=True,
        class_="calendar-input",
    )
    config = {
        "dateFormat": format,
        "value": [value_iso] if value_iso else [],
        "minDate": min_iso,
        "maxDate": max_iso,
    }
    return _list_input(label, field).append(_config_script(input_id, config))


def f7_picker(
    input_id: str,
    label: Any,
    choices: Sequence[Any],
    value: Any = None,
    placeholder: str | None = None,
    rotate_effect: bool = True,
    open_in: str = "auto",
    toolbar: bool = True,
    close_label: str = "Done",
) -> Tag:
    """Single column picker. The first choice is picked by default."""
    check_choice("open_in", open_in, ("auto", "popover", "sheet"))
    values = [value for _, value in _choice_pairs(choices)]
    if value is None:
        value = values[0]
    if str(value) not in values:
        raise F7ArgumentError("value", f"{value!r} is not among the choices")

    field = tags.input(
        id=input_id,
        type="text",
        value=value,
        placeholder=placeholder,
        readonly=True,
        class_="picker-input",
    )
    config = {
        "value": [str(value)],
        "rotateEffect": rotate_effect,
        "openIn": open_in,
        "toolbar": toolbar,
        "toolbarCloseText": close_label,
        "cols": [{"textAlign": "center", "values": values}],
    }
    return _list_input(label, field).append(_config_script(input_id, config))


def f7_color_picker(
    input_id: str,
    label: Any,
    value: str = "#ff0000",
    placeholder: str | None = None,
    modules: Sequence[str] = ("wheel",),
    palettes: Sequence[Sequence[str]] | None = None,
    open_in: str = "auto",
) -> Tag:
    """Color picker. Values are hex colors."""
    if not _HEX_COLOR.match(value):
        raise F7ArgumentError("value", f"{value!r} is not a hex color")
    if not modules:
        raise F7ArgumentError("modules", "at least one module is required")
    for module in modules:
        check_choice("modules", module, COLOR_PICKER_MODULES)
    check_choice("open_in", open_in, ("auto", "popover", "sheet", "popup", "page"))
    if palettes is not None and "palette" not in modules:
        log.debug("Adding palette module for color picker %r", input_id)
        modules = [*modules, "palette"]

    field = tags.input(
        id=input_id,
        type="text",
        value=value,
        placeholder=placeholder,
        readonly=True,
        class_="color-picker-input",
    )
    config: dict[str, Any] = {
        "value": {"hex": value},
        "modules": list(modules),
        "openIn": open_in,
    }
    if palettes is not None:
        config["palette"] = [list(row) for row in palettes]
    return _list_input(label, field).append(_config_script(input_id, config))
