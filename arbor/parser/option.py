# Arbor CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Option` dataclass, the immutable description of a single switch or
positional argument.

An `Option` carries a name, an `OptionType`, optional help text and a read-only
mapping of flags. Only the following flags are accepted:

- `required`: the option must have a value once resolution finishes.
- `default`: value used when the option is not supplied. Never transformed.
- `alias`: single ASCII letter usable as `-a`.
- `transform`: callable applied once to every supplied value.
- `hidden`: leave the option out of help output.
- `accumulate`: collect every supplied value into a list.

Options should be created with `Option.new()`, which validates the flags and
normalizes the transform, or through `TreeBuilder`.
"""
from __future__ import annotations

import string
from dataclasses import dataclass, field
from difflib import get_close_matches
from types import MappingProxyType
from typing import Any, Mapping

from arbor.exceptions import BuildError
from arbor.parser.option_type import OptionType
from arbor.parser.utils import Transform, resolve_transform

VALID_FLAGS = ("required", "default", "alias", "transform", "hidden", "accumulate")
BOOLEAN_FLAGS = ("required", "hidden", "accumulate")

_UNSET: Any = object()


def format_switch(name: str) -> str:
    """Return the long switch for an option name, e.g. `dry_run` → `--dry-run`."""
    return f"--{name.replace('_', '-')}"


def format_alias(alias: str) -> str:
    return f"-{alias}"


def validate_name(name: Any, kind: str = "option") -> str:
    if not isinstance(name, str) or not name:
        raise BuildError(f"Invalid {kind} name {name!r}: must be a non-empty string")
    if not name.replace("_", "").isalnum() or not name.isascii():
        raise BuildError(
            f"Invalid {kind} name '{name}': letters, digits and underscores only"
        )
    if name[0].isdigit():
        raise BuildError(f"Invalid {kind} name '{name}': must not start with a digit")
    return name


def validate_flags(name: str, flags: Mapping[str, Any]) -> dict[str, Any]:
    """
    Validate the flags of option `name` and return a normalized copy.

    Raises:
        BuildError: On an unknown flag, a non-boolean boolean flag, a malformed
            alias or an unresolvable transform.
    """
    normalized: dict[str, Any] = {}
    for flag, value in flags.items():
        if flag not in VALID_FLAGS:
            closest = get_close_matches(flag, VALID_FLAGS, n=1, cutoff=0.0)
            raise BuildError(
                f"Invalid option flag '{flag}' on '{name}', did you mean '{closest[0]}'?"
            )
        if flag in BOOLEAN_FLAGS and not isinstance(value, bool):
            raise BuildError(
                f"Invalid value for '{flag}' on '{name}' - should be True or False, "
                f"got: {value!r}"
            )
        if flag == "alias" and value is not None:
            if (
                not isinstance(value, str)
                or len(value) != 1
                or value not in string.ascii_letters
            ):
                raise BuildError(
                    f"Invalid alias {value!r} on '{name}', must be one character "
                    "in the range a-zA-Z"
                )
        if flag == "transform":
            value = resolve_transform(value)
        normalized[flag] = value
    return normalized


@dataclass(frozen=True)
class Option:
    """
    Represents a switch or positional argument.

    Attributes:
        name (str): Key of the option in the resolved options.
        type (OptionType): Value type used when parsing supplied tokens.
        help (str | None): Help text for the option.
        flags (Mapping[str, Any]): Read-only validated flags.
    """

    name: str
    type: OptionType = OptionType.STRING
    help: str | None = None
    flags: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def new(
        cls,
        name: str,
        type: OptionType | str = OptionType.STRING,
        help: str | None = None,
        **flags: Any,
    ) -> Option:
        """Create a validated option."""
        validate_name(name)
        try:
            option_type = OptionType(type)
        except ValueError as error:
            raise BuildError(f"Invalid type for option '{name}': {error}") from error
        if help is not None and not isinstance(help, str):
            raise BuildError(f"Help text for option '{name}' must be a string")
        return cls(
            name=name,
            type=option_type,
            help=help,
            flags=MappingProxyType(validate_flags(name, flags)),
        )

    def with_overrides(self, help: str | None = _UNSET, **overrides: Any) -> Option:
        """
        Return an independent copy with `overrides` merged over the flags.

        `help` is replaced on its own. The type cannot be overridden.
        """
        if "type" in overrides:
            raise BuildError(
                f"Cannot override the type of option '{self.name}'; define a new "
                "option instead"
            )
        if "flags" in overrides:
            raise BuildError(f"Pass flag overrides for '{self.name}' as keywords")
        merged = {**self.flags, **validate_flags(self.name, overrides)}
        return Option(
            name=self.name,
            type=self.type,
            help=self.help if help is _UNSET else help,
            flags=MappingProxyType(merged),
        )

    @property
    def required(self) -> bool:
        return self.flags.get("required", False)

    @property
    def default(self) -> Any:
        return self.flags.get("default")

    @property
    def alias(self) -> str | None:
        return self.flags.get("alias")

    @property
    def transform(self) -> Transform | None:
        return self.flags.get("transform")

    @property
    def hidden(self) -> bool:
        return self.flags.get("hidden", False)

    @property
    def accumulate(self) -> bool:
        return self.flags.get("accumulate", False)

    @property
    def collects(self) -> bool:
        """Whether supplied values are collected into a list."""
        return self.accumulate or self.type is OptionType.REPEATED

    @property
    def switch(self) -> str:
        return format_switch(self.name)

    @property
    def short(self) -> str | None:
        return format_alias(self.alias) if self.alias else None

    def apply_transform(self, value: Any) -> Any:
        """Run `value` through the transform, element-wise for collected values."""
        transform = self.transform
        if transform is None:
            return value
        if self.collects and isinstance(value, list):
            return [transform(item) for item in value]
        return transform(value)

    def __hash__(self) -> int:
        return hash((self.name, self.type, self.help, tuple(sorted(self.flags))))

    def __str__(self) -> str:
        return f"Option(name='{self.name}', type={self.type})"
