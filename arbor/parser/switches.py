# Arbor CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Strict switch scanning for a single option scope.

`SwitchScanner` consumes leading switch tokens from an argument list using only
the options of one scope (the global options or a single command's options). It
stops at the first token that is not a recognised switch and reports it, so the
caller decides whether that token is an error, a command name or a positional
value.

Recognised forms:
- `--name` / `--name=value` / `--name value` for long switches (underscores in
  option names are written as dashes)
- `--no-name` to store False for a boolean option
- `-a` / `-a value` for single-letter aliases
- `-abc` bundles of boolean or count aliases

A literal `--` always stops the scan and is left in place.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Mapping

from arbor.exceptions import OptionValueError
from arbor.parser.option import Option
from arbor.parser.option_type import OptionType
from arbor.parser.utils import coerce_bool, coerce_value

NEGATIVE_NUMBER = re.compile(r"^-\d+(\.\d+)?$")


def is_switch(token: str) -> bool:
    """Whether `token` looks like a switch rather than a value."""
    if not token.startswith("-") or token in ("-", "--"):
        return False
    return not NEGATIVE_NUMBER.match(token)


@dataclass
class ScanResult:
    """Outcome of a head scan."""

    parsed: list[tuple[Option, Any]] = field(default_factory=list)
    remaining: list[str] = field(default_factory=list)
    invalid: str | None = None


class SwitchScanner:
    """
    Scans leading switches against one scope of options.

    Args:
        options (Mapping[str, Option]): The options of the scope, keyed by name.
    """

    def __init__(self, options: Mapping[str, Option]) -> None:
        self.options = options
        self._switches: dict[str, Option] = {}
        self._aliases: dict[str, Option] = {}
        for option in options.values():
            self._switches[option.switch] = option
            if option.alias:
                self._aliases[option.short] = option

    def _lookup_long(self, flag: str) -> tuple[Option | None, bool]:
        """Return the option for a long flag and whether it was negated."""
        option = self._switches.get(flag)
        if option is not None:
            return option, False
        if flag.startswith("--no-"):
            negated = self._switches.get(f"--{flag[5:]}")
            if negated is not None and negated.type is OptionType.BOOLEAN:
                return negated, True
        return None, False

    def _expand_bundle(self, token: str) -> list[Option] | None:
        """Expand `-abc` into options, or None if it is not a valid bundle."""
        options = []
        for char in token[1:]:
            option = self._aliases.get(f"-{char}")
            if option is None or option.type.takes_value:
                return None
            options.append(option)
        return options

    def _take_value(
        self, option: Option, flag: str, tokens: list[str], index: int
    ) -> tuple[Any, int]:
        """Consume the value following `flag` at `tokens[index]`."""
        if index >= len(tokens) or tokens[index] == "--" or is_switch(tokens[index]):
            raise OptionValueError(
                f"Missing value for option '{flag}'", option=option.name
            )
        return self._coerce(option, flag, tokens[index]), index + 1

    def _coerce(self, option: Option, flag: str, raw: str) -> Any:
        try:
            return coerce_value(raw, option.type)
        except ValueError as error:
            raise OptionValueError(
                f"Invalid value for option '{flag}': {error}",
                option=option.name,
                value=raw,
            ) from error

    def _flag_value(self, option: Option, flag: str, inline: str | None) -> Any:
        """Value stored for a boolean or count switch."""
        if option.type is OptionType.COUNT:
            if inline is not None:
                raise OptionValueError(
                    f"Option '{flag}' does not take a value", option.name, inline
                )
            return 1
        if inline is None:
            return True
        try:
            return coerce_bool(inline, strict=True)
        except ValueError as error:
            raise OptionValueError(
                f"Invalid value for option '{flag}': {error}", option.name, inline
            ) from error

    def scan_head(self, tokens: list[str]) -> ScanResult:
        """
        Consume switches from the start of `tokens`.

        Returns:
            ScanResult: The parsed `(option, value)` pairs in order, the tokens
            left over, and the first unrecognised switch if the scan stopped on
            one.

        Raises:
            OptionValueError: If a recognised switch has a missing or malformed
                value.
        """
        result = ScanResult()
        index = 0
        while index < len(tokens):
            token = tokens[index]
            if not is_switch(token):
                break

            if token.startswith("--"):
                flag, eq, inline = token.partition("=")
                option, negated = self._lookup_long(flag)
                if option is None:
                    result.invalid = token
                    break
                index += 1
                if negated:
                    if eq:
                        raise OptionValueError(
                            f"Option '{flag}' does not take a value", option.name, inline
                        )
                    result.parsed.append((option, False))
                elif option.type.takes_value:
                    if eq:
                        result.parsed.append((option, self._coerce(option, flag, inline)))
                    else:
                        value, index = self._take_value(option, flag, tokens, index)
                        result.parsed.append((option, value))
                else:
                    result.parsed.append(
                        (option, self._flag_value(option, flag, inline if eq else None))
                    )
                continue

            option = self._aliases.get(token)
            if option is not None:
                index += 1
                if option.type.takes_value:
                    value, index = self._take_value(option, token, tokens, index)
                    result.parsed.append((option, value))
                else:
                    result.parsed.append((option, self._flag_value(option, token, None)))
                continue

            bundle = self._expand_bundle(token) if len(token) > 2 else None
            if bundle is None:
                result.invalid = token
                break
            for option in bundle:
                result.parsed.append((option, self._flag_value(option, token, None)))
            index += 1

        result.remaining = tokens[index:]
        return result
