"""f7ui command line interface"""

from f7ui.cli.main import app, typer_app

__all__ = ["app", "typer_app"]
