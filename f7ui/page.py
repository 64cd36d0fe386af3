"""Page skeleton: the html document and the Framework7 app initialization."""

from __future__ import annotations

import logging
import math
from numbers import Real
from typing import Any

from pydantic import ValidationError

from f7ui.config import AppConfig, AssetConfig, InitConfig
from f7ui.deps import add_css_deps, add_js_deps, add_pwa_deps
from f7ui.exceptions import F7ArgumentError
from f7ui.tags import Tag, render, tags
from f7ui.templates import render_template

log = logging.getLogger(__name__)

VIEWPORT = ", ".join(
    [
        "width=device-width",
        "initial-scale=1",
        "maximum-scale=1",
        "minimum-scale=1",
        "user-scalable=no",
        "viewport-fit=cover",
    ]
)


def f7_init(
    skin: str = "auto",
    theme: str = "light",
    filled: bool = False,
    color: str | None = None,
    tap_hold: bool = True,
    ios_touch_ripple: bool = False,
    ios_center_title: bool = True,
    ios_translucent_bars: bool = False,
    hide_navbar_on_scroll: bool = False,
    hide_toolbar_on_scroll: bool = False,
    service_worker: str | None = None,
    config: InitConfig | None = None,
) -> Tag:
    """Script creating the Framework7 app.

    Args:
        skin: "ios", "md", "auto" or "aurora"
        theme: "light" or "dark"
        filled: Fill the navbar and toolbar with the color
        color: Theme color, one of get_f7_colors()
        tap_hold: Enable the taphold event
        ios_touch_ripple: Ripple effect on iOS
        ios_center_title: Center navbar titles on iOS
        ios_translucent_bars: Translucent navbar and toolbar on iOS
        hide_navbar_on_scroll: Hide the navbar when scrolling down
        hide_toolbar_on_scroll: Hide the toolbar when scrolling down
        service_worker: Path to a service worker script
        config: A ready InitConfig; overrides every other argument
    """
    if config is None:
        try:
            config = InitConfig(
                skin=skin,
                theme=theme,
                filled=filled,
                color=color,
                tap_hold=tap_hold,
                ios_touch_ripple=ios_touch_ripple,
                ios_center_title=ios_center_title,
                ios_translucent_bars=ios_translucent_bars,
                hide_navbar_on_scroll=hide_navbar_on_scroll,
                hide_toolbar_on_scroll=hide_toolbar_on_scroll,
                service_worker=service_worker,
            )
        except ValidationError as e:
            err = e.errors()[0]
            argument = ".".join(str(p) for p in err["loc"]) or "init"
            raise F7ArgumentError(argument, err["msg"]) from e

    return tags.script(render_template("init.js.j2", **config.model_dump()))


def f7_page(
    *children: Any,
    init: Tag | None = None,
    title: str | None = None,
    preloader: bool = False,
    loading_duration: float = 3,
    icon: str | None = None,
    favicon: str | None = None,
    manifest: str | None = None,
    assets: AssetConfig | None = None,
) -> Tag:
    """Framework7 page.

    Args:
        *children: Skeleton elements: f7_appbar, f7_single_layout,
            f7_tab_layout, f7_split_layout
        init: App configuration, see f7_init
        title: Page title
        preloader: Whether to show a preloader before the app starts
        loading_duration: Preloader duration in seconds
        icon: 128x128 icon for PWA support (bundled one if None)
        favicon: App favicon (bundled one if None)
        manifest: Web manifest path (bundled one if None)
        assets: Where to load front-end assets from
    """
    if isinstance(loading_duration, bool) or not isinstance(loading_duration, Real):
        raise F7ArgumentError("loading_duration", "must be a number")
    if not math.isfinite(loading_duration):
        raise F7ArgumentError("loading_duration", "must be a finite number")
    if loading_duration < 0:
        raise F7ArgumentError("loading_duration", "must not be negative")
    if init is None:
        init = f7_init(skin="auto", theme="light")
    assets = assets or AssetConfig()

    onload = None
    if preloader:
        onload = render_template(
            "preloader.js.j2", duration_ms=int(loading_duration * 1000)
        )
        log.debug("Preloader enabled for %ss", loading_duration)

    body = tags.body(tags.div(*children, id="app"), onload=onload)

    return tags.html(
        tags.head(
            tags.meta(charset="utf-8"),
            tags.meta(name="viewport", content=VIEWPORT),
            add_pwa_deps(icon, favicon, manifest, assets),
            tags.title(title),
        ),
        add_css_deps(body, assets),
        # Framework7 scripts do not work from the head: they go after the body
        add_js_deps(assets),
        init,
    )


def page_from_config(config: AppConfig, *children: Any) -> Tag:
    """Build f7_page from an AppConfig."""
    return f7_page(
        *children,
        init=f7_init(config=config.init),
        title=config.title,
        preloader=config.preloader,
        loading_duration=config.loading_duration,
        icon=config.icon,
        favicon=config.favicon,
        manifest=config.manifest,
        assets=config.assets,
    )


def render_page(page: Tag) -> str:
    """Render a page to a complete HTML document."""
    return "<!DOCTYPE html>\n" + render(page)
