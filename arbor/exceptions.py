# Arbor CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Arbor.

Exceptions fall in two groups: errors made by the author of a command tree, which
are detected once while the tree is built, and errors made by the person running
the program, which are detected while an argument vector is resolved.

All exceptions inherit from `ArborError`, the base exception for the toolkit.

Exception Hierarchy:
- ArborError
    ├── BuildError
    ├── CommandArgumentError
    │   ├── OptionValueError
    │   └── ResolutionError
    ├── HandlerNotFoundError
    └── PreDispatchError

`BuildError` signals a programming error and should never be caught and retried.
`ResolutionError` carries a structured `ParseFailure` for the console to render.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from arbor.outcomes import ParseFailure


class ArborError(Exception):
    """Base exception for Arbor."""


class BuildError(ArborError):
    """Exception raised when a command or option definition is invalid."""


class CommandArgumentError(ArborError):
    """Exception raised when an argument vector cannot be resolved."""


class ResolutionError(CommandArgumentError):
    """Exception raised by the resolver, carrying the structured failure."""

    def __init__(self, failure: ParseFailure):
        super().__init__(failure.message)
        self.failure = failure


class OptionValueError(CommandArgumentError):
    """Exception raised when a supplied switch value is missing or malformed."""

    def __init__(self, message: str, option: str, value: str | None = None):
        super().__init__(message)
        self.option = option
        self.value = value


class HandlerNotFoundError(ArborError):
    """Exception raised when no handler is registered for a dispatch target."""

    def __init__(self, name: str):
        super().__init__(f"No handler registered for '{name}'")
        self.name = name


class PreDispatchError(ArborError):
    """Exception raised by a pre-dispatch hook to abort dispatch."""
