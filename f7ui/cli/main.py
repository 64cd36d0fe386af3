"""f7ui CLI Main Entry Point

Usage:
    f7ui render app:ui                  # Print the page built from app.ui
    f7ui render app:ui -o www/index.html --copy-assets
    f7ui render app:ui -c f7ui.yaml     # Use a specific config file
    f7ui colors                         # List the toolkit colors
    f7ui --version                      # Show version
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from f7ui._version import __version__
from f7ui.cli.errors import exit_with_error, handle_error
from f7ui.cli.utils import load_ui, setup_logging
from f7ui.config import AppConfig, get_f7_colors
from f7ui.deps import copy_assets
from f7ui.page import page_from_config, render_page
from f7ui.tags import is_tag

log = logging.getLogger(__name__)

DEFAULT_CONFIG = "f7ui.yaml"

typer_app = typer.Typer(no_args_is_help=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"f7ui {__version__}")
        raise typer.Exit()


@typer_app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Build Framework7 mobile pages from f7ui layouts."""


@typer_app.command()
def render(
    ui_ref: str = typer.Argument(..., help="UI object as MODULE:ATTR, e.g. app:ui."),
    config_path: Optional[Path] = typer.Option(
        None, "-c", "--config", help=f"Path to the config file (default: ./{DEFAULT_CONFIG})."
    ),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Write the page to a file instead of stdout."
    ),
    with_assets: bool = typer.Option(
        False, "--copy-assets", help="Copy the bundled assets next to the output file."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging."),
) -> None:
    """Render a UI object to a complete HTML page.

    UI objects that are not already an f7_page are wrapped in one built from
    the config file.
    """
    setup_logging(verbose)

    if with_assets and output is None:
        exit_with_error("--copy-assets requires --output")

    if config_path is not None and not config_path.exists():
        exit_with_error(f"File not found: {config_path}")

    try:
        config = AppConfig.load(config_path or Path(DEFAULT_CONFIG))
        ui = load_ui(ui_ref)
        page = ui if is_tag(ui, "html") else page_from_config(config, ui)
        html = render_page(page)
    except Exception as exc:
        handle_error(exc)

    if output is None:
        typer.echo(html)
        raise typer.Exit()

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf-8")
    log.info("Wrote %d bytes to %s", len(html), output)

    if with_assets:
        src = config.assets.bindings_src
        if "://" in src:
            log.warning("Assets are served from %s, nothing to copy", src)
        else:
            copy_assets(output.parent / src)

    typer.echo(f"Wrote page to {output}")


@typer_app.command()
def colors() -> None:
    """List the colors accepted by color arguments."""
    for color in get_f7_colors():
        typer.echo(color)


def app() -> None:
    """Entry point for the CLI."""
    typer_app()


if __name__ == "__main__":
    app()
