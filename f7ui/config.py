"""Configuration models for f7ui pages.

An app config file (YAML) looks like:

    title: My app
    preloader: true
    loading_duration: 2
    init:
      skin: md
      theme: dark
      color: teal
    assets:
      framework7_version: 5.7.14
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from f7ui.exceptions import ConfigError

F7_COLORS = (
    "red",
    "green",
    "blue",
    "pink",
    "yellow",
    "orange",
    "purple",
    "deeppurple",
    "lightblue",
    "teal",
    "lime",
    "deeporange",
    "gray",
    "white",
    "black",
)


def get_f7_colors() -> list[str]:
    """Colors supported by the toolkit's color-theme/color-* classes."""
    return list(F7_COLORS)


class InitConfig(BaseModel):
    """Framework7 app initialization options"""

    model_config = ConfigDict(extra="forbid")

    skin: Literal["ios", "md", "auto", "aurora"] = "auto"
    theme: Literal["dark", "light"] = "light"
    filled: bool = False
    color: str | None = None
    tap_hold: bool = True
    ios_touch_ripple: bool = False
    ios_center_title: bool = True
    ios_translucent_bars: bool = False
    hide_navbar_on_scroll: bool = False
    hide_toolbar_on_scroll: bool = False
    service_worker: str | None = None

    @model_validator(mode="after")
    def check_color(self) -> "InitConfig":
        if self.color is not None and self.color not in F7_COLORS:
            raise ValueError(f"color must be one of {', '.join(F7_COLORS)}")
        if self.filled and self.color is None:
            raise ValueError("filled bars require a color")
        return self


class AssetConfig(BaseModel):
    """Where the front-end assets are served from"""

    framework7_version: str = "5.7.14"
    framework7_src: str | None = None  # defaults to the jsDelivr CDN
    jquery_src: str = "https://code.jquery.com/jquery-3.6.0.min.js"
    pwacompat_src: str = "https://cdn.jsdelivr.net/npm/pwacompat@2.0.17/pwacompat.min.js"
    bindings_src: str = "f7ui-assets"
    icon: str = "f7ui-assets/icons/icon.svg"
    favicon: str = "f7ui-assets/icons/icon.svg"
    manifest: str = "f7ui-assets/manifest.json"
    theme_color: str = "#2196f3"

    def resolved_framework7_src(self) -> str:
        if self.framework7_src:
            return self.framework7_src
        return f"https://cdn.jsdelivr.net/npm/framework7@{self.framework7_version}"


class AppConfig(BaseModel):
    """Full page configuration (f7ui.yaml)"""

    title: str | None = None
    init: InitConfig = Field(default_factory=InitConfig)
    preloader: bool = False
    loading_duration: float = Field(default=3, ge=0, allow_inf_nan=False)
    icon: str | None = None
    favicon: str | None = None
    manifest: str | None = None
    assets: AssetConfig = Field(default_factory=AssetConfig)

    @classmethod
    def load(cls, path: Path) -> "AppConfig":
        """Load config from yaml file"""
        if not path.exists():
            return cls()

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(path, str(e)) from e

        if not isinstance(data, dict):
            raise ConfigError(path, "top level must be a mapping")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(path, str(e)) from e
