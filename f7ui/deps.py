"""Front-end dependencies: Framework7, icons, bindings, PWA helpers."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from f7ui._version import __version__
from f7ui.config import AssetConfig
from f7ui.tags import Tag, TagList, tags

log = logging.getLogger(__name__)

FRAMEWORK7_ICONS_SRC = "https://cdn.jsdelivr.net/npm/framework7-icons@3.0.1/css"
MATERIAL_ICONS_HREF = "https://fonts.googleapis.com/icon?family=Material+Icons"

# Bindings, styles, icons and manifest shipped with the package
WWW_DIR = Path(__file__).parent / "www"


def _join(src: str, file: str) -> str:
    if not src:
        return file
    return f"{src.rstrip('/')}/{file}"


@dataclass
class HtmlDependency:
    """A named set of scripts and stylesheets served from src."""

    name: str
    version: str
    src: str = ""
    scripts: list[str] = field(default_factory=list)
    stylesheets: list[str] = field(default_factory=list)

    def stylesheet_tags(self) -> TagList:
        return TagList(
            [tags.link(rel="stylesheet", href=_join(self.src, f)) for f in self.stylesheets]
        )

    def script_tags(self) -> TagList:
        return TagList([tags.script(src=_join(self.src, f)) for f in self.scripts])


def framework7_dependency(assets: AssetConfig | None = None) -> HtmlDependency:
    assets = assets or AssetConfig()
    return HtmlDependency(
        name="framework7",
        version=assets.framework7_version,
        src=assets.resolved_framework7_src(),
        scripts=["js/framework7.bundle.min.js"],
        stylesheets=["css/framework7.bundle.min.css"],
    )


def icons_dependency() -> HtmlDependency:
    return HtmlDependency(
        name="framework7-icons",
        version="3.0.1",
        src=FRAMEWORK7_ICONS_SRC,
        stylesheets=["framework7-icons.css"],
    )


def jquery_dependency(assets: AssetConfig | None = None) -> HtmlDependency:
    assets = assets or AssetConfig()
    return HtmlDependency(name="jquery", version="3", scripts=[assets.jquery_src])


def f7ui_dependency(assets: AssetConfig | None = None) -> HtmlDependency:
    """The library's own input bindings and styles (shipped in f7ui/www)."""
    assets = assets or AssetConfig()
    return HtmlDependency(
        name="f7ui",
        version=__version__,
        src=assets.bindings_src,
        scripts=["f7ui-bindings.js"],
        stylesheets=["f7ui.css"],
    )


def add_css_deps(body: Tag, assets: AssetConfig | None = None) -> Tag:
    """Return a copy of body with the stylesheets prepended."""
    body = body.copy()
    sheets = TagList(
        framework7_dependency(assets).stylesheet_tags(),
        icons_dependency().stylesheet_tags(),
        tags.link(rel="stylesheet", href=MATERIAL_ICONS_HREF),
        f7ui_dependency(assets).stylesheet_tags(),
    )
    body.insert(0, sheets)
    return body


def add_js_deps(assets: AssetConfig | None = None) -> TagList:
    """Scripts that must load after the body."""
    return TagList(
        jquery_dependency(assets).script_tags(),
        framework7_dependency(assets).script_tags(),
        f7ui_dependency(assets).script_tags(),
    )


def add_pwa_deps(
    icon: str | None = None,
    favicon: str | None = None,
    manifest: str | None = None,
    assets: AssetConfig | None = None,
) -> TagList:
    """Head tags for progressive web app support.

    Missing icon/favicon/manifest fall back to the bundled ones.
    Uses https://github.com/GoogleChromeLabs/pwacompat for older browsers.
    """
    assets = assets or AssetConfig()
    if icon is None or favicon is None or manifest is None:
        log.debug("Using bundled PWA resources for missing icon/favicon/manifest")
    return TagList(
        tags.link(rel="manifest", href=manifest or assets.manifest),
        tags.link(rel="icon", href=favicon or assets.favicon),
        tags.link(rel="apple-touch-icon", href=icon or assets.icon),
        tags.meta(name="apple-mobile-web-app-capable", content="yes"),
        tags.meta(
            name="apple-mobile-web-app-status-bar-style", content="black-translucent"
        ),
        tags.meta(name="theme-color", content=assets.theme_color),
        tags.script(async_=True, src=assets.pwacompat_src),
    )


def copy_assets(dest: Path) -> Path:
    """Copy the bundled www assets to dest (e.g. next to a rendered page)."""
    dest = Path(dest)
    shutil.copytree(WWW_DIR, dest, dirs_exist_ok=True)
    log.info("Copied f7ui assets to %s", dest)
    return dest
