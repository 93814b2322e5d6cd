# Arbor CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the three outcomes of resolving an argument vector.

- `DispatchDecision`: the handler to run, with its residual argv and options.
- `HelpRequest`: the user asked for help on a command path (not an error).
- `ParseFailure`: a terminal, user-facing error, classified by `FailureKind`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from arbor.command import Command


class FailureKind(Enum):
    """
    Enum for the kinds of resolution failure.

    Members:
        UNKNOWN_GLOBAL_OPTION: An unrecognised switch before the command.
        UNKNOWN_COMMAND: The first positional token names no top-level command.
        UNKNOWN_SUBCOMMAND: A token names no subcommand of a command that has some.
        MISSING_REQUIRED_OPTION: A required option has no value.
        TRANSFORM_ERROR: An option transform raised.
        INVALID_OPTION_VALUE: A switch value is missing or of the wrong type.
    """

    UNKNOWN_GLOBAL_OPTION = "unknown-global-option"
    UNKNOWN_COMMAND = "unknown-command"
    UNKNOWN_SUBCOMMAND = "unknown-subcommand"
    MISSING_REQUIRED_OPTION = "missing-required-option"
    TRANSFORM_ERROR = "transform-error"
    INVALID_OPTION_VALUE = "invalid-option-value"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ParseFailure:
    """
    A terminal resolution error.

    Attributes:
        kind (FailureKind): What went wrong.
        message (str): Human readable description.
        command_path (tuple[str, ...]): Commands resolved before the failure.
        option (str | None): Canonical form of the offending option, if any.
        value (Any): The offending raw value, if any.
    """

    kind: FailureKind
    message: str
    command_path: tuple[str, ...] = ()
    option: str | None = None
    value: Any = None

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


@dataclass(frozen=True)
class HelpRequest:
    """Help was requested for `path`; an empty path means top-level help."""

    path: tuple[str, ...] = ()


@dataclass(frozen=True)
class DispatchDecision:
    """
    The handler to invoke and what to invoke it with.

    Attributes:
        target (str): Dispatch target name of the leaf command.
        command (Command): The leaf command descriptor.
        path (tuple[str, ...]): Command names from the root to the leaf.
        residual_argv (list[str]): Tokens left for the handler, in order.
        options (dict[str, Any]): Fully resolved options.
    """

    target: str
    command: Command
    path: tuple[str, ...]
    residual_argv: list[str] = field(default_factory=list)
    options: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return (
            f"DispatchDecision(target='{self.target}', path={' '.join(self.path)!r}, "
            f"residual_argv={self.residual_argv}, options={self.options})"
        )


Resolution = DispatchDecision | HelpRequest | ParseFailure
