"""Shared utilities for CLI commands"""

from __future__ import annotations

import importlib
import logging
import os
import sys
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

from f7ui.exceptions import F7Error

console = Console()


class UILoadError(F7Error):
    """Raised when the UI object cannot be imported."""

    def __init__(self, ref: str, reason: str):
        self.ref = ref
        super().__init__(f"Cannot load UI {ref!r}: {reason}")


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the f7ui CLI.

    Log levels:
    - Normal: Only warnings/errors shown
    - Verbose (-v): INFO level - shows written files, copied assets
    - Debug (F7UI_DEBUG=1): DEBUG level - shows layout assembly details
    """
    if os.environ.get("F7UI_DEBUG"):
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Use RichHandler for pretty output
    handler = RichHandler(
        console=console,
        show_time=verbose,
        show_path=bool(os.environ.get("F7UI_DEBUG")),
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("f7ui")
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False


def parse_ui_ref(ref: str) -> tuple[str, str]:
    """Split "module:attr" (e.g., "app:ui") into its parts."""
    module, sep, attr = ref.partition(":")
    if not sep or not module or not attr:
        raise UILoadError(ref, "expected MODULE:ATTR")
    return module, attr


def load_ui(ref: str, cwd: Path | None = None) -> Any:
    """Import the UI object named by ref.

    The attribute may be a Tag, a TagList, or a zero-argument callable
    returning one of them.
    """
    module_name, attr = parse_ui_ref(ref)
    search_dir = str(cwd or Path.cwd())
    if search_dir not in sys.path:
        sys.path.insert(0, search_dir)

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise UILoadError(ref, str(e)) from e

    try:
        ui = getattr(module, attr)
    except AttributeError as e:
        raise UILoadError(ref, f"module has no attribute {attr!r}") from e

    if callable(ui):
        ui = ui()
    return ui
