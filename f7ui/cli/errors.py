"""Shared error handling for the f7ui CLI."""

import sys
from typing import NoReturn

import typer

from f7ui.exceptions import F7Error


def exit_with_error(message: str, exit_code: int = 1) -> NoReturn:
    """Exit the program with an error message."""
    typer.secho(f"Error: {message}", err=True, fg=typer.colors.RED)
    sys.exit(exit_code)


def handle_error(error: Exception) -> NoReturn:
    """Handle and exit on f7ui errors."""
    if isinstance(error, F7Error):
        exit_with_error(str(error))
    else:
        # Unexpected error
        typer.echo(f"Unexpected error: {error}", err=True)
        sys.exit(1)
