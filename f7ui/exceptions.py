"""f7ui Exceptions

Custom exceptions raised by the markup builders and the CLI.
"""

from __future__ import annotations

from typing import Any, Iterable


class F7Error(Exception):
    """Base exception for all f7ui errors."""

    pass


class F7ArgumentError(F7Error, ValueError):
    """Raised when a builder receives an invalid argument."""

    def __init__(self, argument: str, message: str):
        self.argument = argument
        super().__init__(f"Invalid '{argument}': {message}")


class TemplateNotFoundError(F7Error):
    """Raised when an inline script/style template does not exist."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Template not found: {name}")


class ConfigError(F7Error):
    """Raised when a config file cannot be read or validated."""

    def __init__(self, path: Any, reason: str):
        self.path = path
        super().__init__(f"Invalid config {path}: {reason}")


def check_choice(argument: str, value: Any, choices: Iterable[Any]) -> Any:
    """Return value if it is one of choices, else raise F7ArgumentError."""
    choices = tuple(choices)
    if value not in choices:
        allowed = ", ".join(repr(c) for c in choices)
        raise F7ArgumentError(argument, f"{value!r} is not one of {allowed}")
    return value
