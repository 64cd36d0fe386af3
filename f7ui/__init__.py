"""f7ui - Framework7 mobile layouts for server-side reactive apps

Functions emit markup trees; Framework7's JavaScript brings them to life.

    from f7ui import f7_page, f7_single_layout, f7_navbar, render_page

    page = f7_page(
        f7_single_layout("Hello", navbar=f7_navbar(title="My app")),
        title="My app",
    )
    html = render_page(page)
"""

from f7ui._version import __version__

# Markup model
from f7ui.tags import HTML, Tag, TagList, render, singleton, tag, tags

# Page skeleton
from f7ui.page import f7_init, f7_page, page_from_config, render_page
from f7ui.config import AppConfig, AssetConfig, InitConfig, get_f7_colors

# Layouts
from f7ui.layouts import (
    f7_appbar,
    f7_item,
    f7_items,
    f7_single_layout,
    f7_split_layout,
    f7_tab_layout,
)

# Navigation
from f7ui.navigation import (
    f7_link,
    f7_navbar,
    f7_panel,
    f7_panel_item,
    f7_panel_menu,
    f7_sub_navbar,
    f7_tab,
    f7_tab_link,
    f7_tabs,
    f7_toolbar,
)

# Inputs
from f7ui.inputs import (
    create_select_options,
    f7_autocomplete,
    f7_checkbox,
    f7_checkbox_group,
    f7_color_picker,
    f7_date_picker,
    f7_password,
    f7_picker,
    f7_radio,
    f7_select,
    f7_slider,
    f7_smart_select,
    f7_stepper,
    f7_text,
    f7_textarea,
    f7_toggle,
)

# Elements
from f7ui.elements import (
    f7_align,
    f7_badge,
    f7_block,
    f7_block_footer,
    f7_block_header,
    f7_block_title,
    f7_button,
    f7_card,
    f7_col,
    f7_expandable_card,
    f7_flex,
    f7_float,
    f7_icon,
    f7_margin,
    f7_padding,
    f7_row,
    f7_segment,
    f7_shadow,
    f7_skeleton,
    f7_social_card,
)

# Lists
from f7ui.lists import (
    f7_accordion,
    f7_accordion_item,
    f7_list,
    f7_list_group,
    f7_list_item,
    f7_timeline,
    f7_timeline_item,
)

# Widgets
from f7ui.widgets import (
    f7_chip,
    f7_fab,
    f7_fabs,
    f7_gauge,
    f7_progress,
    f7_progress_inf,
    f7_slide,
    f7_swiper,
)

from f7ui.exceptions import ConfigError, F7ArgumentError, F7Error, TemplateNotFoundError

__all__ = [
    "__version__",
    # markup
    "HTML",
    "Tag",
    "TagList",
    "render",
    "singleton",
    "tag",
    "tags",
    # page
    "f7_init",
    "f7_page",
    "page_from_config",
    "render_page",
    "AppConfig",
    "AssetConfig",
    "InitConfig",
    "get_f7_colors",
    # layouts
    "f7_appbar",
    "f7_item",
    "f7_items",
    "f7_single_layout",
    "f7_split_layout",
    "f7_tab_layout",
    # navigation
    "f7_link",
    "f7_navbar",
    "f7_panel",
    "f7_panel_item",
    "f7_panel_menu",
    "f7_sub_navbar",
    "f7_tab",
    "f7_tab_link",
    "f7_tabs",
    "f7_toolbar",
    # inputs
    "create_select_options",
    "f7_autocomplete",
    "f7_checkbox",
    "f7_checkbox_group",
    "f7_color_picker",
    "f7_date_picker",
    "f7_password",
    "f7_picker",
    "f7_radio",
    "f7_select",
    "f7_slider",
    "f7_smart_select",
    "f7_stepper",
    "f7_text",
    "f7_textarea",
    "f7_toggle",
    # elements
    "f7_align",
    "f7_badge",
    "f7_block",
    "f7_block_footer",
    "f7_block_header",
    "f7_block_title",
    "f7_button",
    "f7_card",
    "f7_col",
    "f7_expandable_card",
    "f7_flex",
    "f7_float",
    "f7_icon",
    "f7_margin",
    "f7_padding",
    "f7_row",
    "f7_segment",
    "f7_shadow",
    "f7_skeleton",
    "f7_social_card",
    # lists
    "f7_accordion",
    "f7_accordion_item",
    "f7_list",
    "f7_list_group",
    "f7_list_item",
    "f7_timeline",
    "f7_timeline_item",
    # widgets
    "f7_chip",
    "f7_fab",
    "f7_fabs",
    "f7_gauge",
    "f7_progress",
    "f7_progress_inf",
    "f7_slide",
    "f7_swiper",
    # errors
    "ConfigError",
    "F7ArgumentError",
    "F7Error",
    "TemplateNotFoundError",
]
