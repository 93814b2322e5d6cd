# Arbor CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionType`, the value types a switch or positional argument can take.

Supports alias coercion for shorthand or Python-flavoured names, so definitions
can be written with whichever spelling reads best at the call site.

Example:
    OptionType("integer") → OptionType.INTEGER
    OptionType("int")     → OptionType.INTEGER (via alias)
    OptionType("keep")    → OptionType.REPEATED
"""
from __future__ import annotations

from enum import Enum


class OptionType(Enum):
    """
    Value type of an option.

    Members:
        STRING: Store the raw value (default).
        INTEGER: Store the value converted with `int`.
        FLOAT: Store the value converted with `float`.
        BOOLEAN: A flag; `--name` stores True and `--no-name` stores False.
        COUNT: A flag counting its occurrences.
        REPEATED: Collect every occurrence into a list, in order.

    Aliases:
        - "str" → "string"
        - "int" → "integer"
        - "bool" → "boolean"
        - "keep" / "append" → "repeated"
    """

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    COUNT = "count"
    REPEATED = "repeated"

    @classmethod
    def choices(cls) -> list[OptionType]:
        """Return a list of all option types."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "str": "string",
            "int": "integer",
            "bool": "boolean",
            "keep": "repeated",
            "append": "repeated",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> OptionType:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def takes_value(self) -> bool:
        """Whether a switch of this type consumes a value token."""
        return self not in (OptionType.BOOLEAN, OptionType.COUNT)

    def __str__(self) -> str:
        """Return the string representation of the option type."""
        return self.value
