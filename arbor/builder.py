# Arbor CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Explicit builder API for declaring a command tree.

Every call names the scope it applies to with a `path`: a sequence of command
names, or a string of names separated by spaces. An empty path is the global
scope. Nothing is ambient; the builder holds only the drafts it has been given.

Example:
    builder = TreeBuilder()
    builder.define_option("key", "string", alias="k")
    builder.option((), "verbose", "boolean", "Turn on verbose output")
    builder.command((), "hello", "Say hello!")
    builder.argument("hello", "name", "string", "Name of person to greet")
    builder.option("hello", "greeting", "string", default="Hello")
    builder.command((), "keys", "Lists all stored key/value pairs")
    builder.command("keys", "set", "Sets a key/value pair", callback="keyset")
    builder.use_option("keys set", "key", required=True)
    tree = builder.build()

All validation happens here and raises `BuildError`; the resolver can assume the
tree it receives is well formed.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Sequence

from arbor.command import Command, CommandTree
from arbor.exceptions import BuildError
from arbor.logger import logger
from arbor.parser.option import Option
from arbor.parser.option_type import OptionType

Path = str | Sequence[str]


def normalize_path(path: Path | None) -> tuple[str, ...]:
    """Turn `"keys set"` or `["keys", "set"]` into `("keys", "set")`."""
    if path is None:
        return ()
    if isinstance(path, str):
        return tuple(path.split())
    return tuple(path)


def validate_command_name(name: Any) -> str:
    if not isinstance(name, str) or not name or name != name.strip() or " " in name:
        raise BuildError(f"Invalid command name {name!r}: must be a single word")
    if name.startswith("-"):
        raise BuildError(f"Invalid command name '{name}': must not start with '-'")
    return name


@dataclass
class _CommandDraft:
    name: str
    dispatch_target: str
    help: str | None = None
    hidden: bool = False
    options: dict[str, Option] = field(default_factory=dict)
    arguments: list[Option] = field(default_factory=list)
    subcommands: dict[str, _CommandDraft] = field(default_factory=dict)

    def freeze(self) -> Command:
        return Command(
            name=self.name,
            dispatch_target=self.dispatch_target,
            options=MappingProxyType(dict(self.options)),
            arguments=tuple(self.arguments),
            subcommands=MappingProxyType(
                {name: draft.freeze() for name, draft in self.subcommands.items()}
            ),
            help=self.help,
            hidden=self.hidden,
        )


class TreeBuilder:
    """
    Builds a `CommandTree`.

    Methods return the builder so calls can be chained.
    """

    def __init__(self) -> None:
        self._commands: dict[str, _CommandDraft] = {}
        self._global_options: dict[str, Option] = {}
        self._abstract_options: dict[str, Option] = {}

    def _draft(self, path: tuple[str, ...]) -> _CommandDraft:
        children = self._commands
        draft = None
        for depth, name in enumerate(path):
            draft = children.get(name)
            if draft is None:
                raise BuildError(f"No such command '{' '.join(path[: depth + 1])}'")
            children = draft.subcommands
        assert draft is not None, "path should not be empty"
        return draft

    def _scope_label(self, path: tuple[str, ...]) -> str:
        return f"command '{' '.join(path)}'" if path else "the global scope"

    def _register_option(self, path: tuple[str, ...], option: Option) -> None:
        if path:
            draft = self._draft(path)
            scope = draft.options
            taken = set(scope) | {arg.name for arg in draft.arguments}
        else:
            scope = self._global_options
            taken = set(scope)
        if option.name in taken:
            raise BuildError(
                f"Cannot define two options with the same name in "
                f"{self._scope_label(path)}! Duplicate of '{option.name}' found"
            )
        if option.alias:
            for existing in scope.values():
                if existing.alias == option.alias:
                    raise BuildError(
                        f"Alias '-{option.alias}' of '{option.name}' is already used "
                        f"by '{existing.name}' in {self._scope_label(path)}"
                    )
        scope[option.name] = option
        logger.debug(
            "Registered option '%s' in %s", option.name, self._scope_label(path)
        )

    def define_option(
        self,
        name: str,
        type: OptionType | str = OptionType.STRING,
        help: str | None = None,
        **flags: Any,
    ) -> TreeBuilder:
        """
        Define an abstract option for reuse with `use_option`.

        An abstract option belongs to no scope until it is imported.
        """
        option = Option.new(name, type, help, **flags)
        if name in self._abstract_options:
            raise BuildError(
                "Cannot define two options with the same name! "
                f"Duplicate of '{name}' found"
            )
        self._abstract_options[name] = option
        return self

    def option(
        self,
        path: Path | None,
        name: str,
        type: OptionType | str = OptionType.STRING,
        help: str | None = None,
        **flags: Any,
    ) -> TreeBuilder:
        """Define an option inline in the scope at `path` (global when empty)."""
        option = Option.new(name, type, help, **flags)
        self._register_option(normalize_path(path), option)
        return self

    def use_option(self, path: Path | None, name: str, **overrides: Any) -> TreeBuilder:
        """
        Import an option defined with `define_option` into the scope at `path`.

        `help` replaces the help text; any other keyword is merged over the
        original flags. The type cannot be overridden.
        """
        base = self._abstract_options.get(name)
        if base is None:
            raise BuildError(f"No such option '{name}' has been defined yet")
        self._register_option(normalize_path(path), base.with_overrides(**overrides))
        return self

    def argument(
        self,
        path: Path,
        name: str,
        type: OptionType | str = OptionType.STRING,
        help: str | None = None,
        **flags: Any,
    ) -> TreeBuilder:
        """Append a positional argument to the command at `path`."""
        path = normalize_path(path)
        if not path:
            raise BuildError("Cannot define an argument outside of a command")
        argument = Option.new(name, type, help, **flags)
        if not argument.type.takes_value:
            raise BuildError(
                f"Argument '{name}' cannot have type '{argument.type}'; "
                "positional arguments always take a value"
            )
        if argument.alias:
            raise BuildError(f"Argument '{name}' cannot have an alias")
        draft = self._draft(path)
        if name in draft.options or any(arg.name == name for arg in draft.arguments):
            raise BuildError(
                f"Cannot define two options with the same name in "
                f"{self._scope_label(path)}! Duplicate of '{name}' found"
            )
        draft.arguments.append(argument)
        return self

    def command(
        self,
        path: Path | None,
        name: str,
        help: str | None = None,
        *,
        callback: str | None = None,
        hidden: bool = False,
    ) -> TreeBuilder:
        """
        Register command `name` under `path` (top level when empty).

        Args:
            callback (str | None): Handler name to dispatch to; defaults to `name`.
            hidden (bool): Leave the command out of help output.
        """
        path = normalize_path(path)
        validate_command_name(name)
        if callback is not None and (not isinstance(callback, str) or not callback):
            raise BuildError(f"Invalid callback {callback!r} for command '{name}'")
        if not isinstance(hidden, bool):
            raise BuildError(
                f"Invalid value for 'hidden' on command '{name}' - should be True "
                f"or False, got: {hidden!r}"
            )
        siblings = self._draft(path).subcommands if path else self._commands
        if name in siblings:
            raise BuildError(
                f"Command '{' '.join(path + (name,))}' is already defined"
            )
        siblings[name] = _CommandDraft(
            name=name,
            dispatch_target=callback or name,
            help=help or None,
            hidden=hidden,
        )
        return self

    def build(self) -> CommandTree:
        """Freeze the drafts into a read-only `CommandTree`."""
        tree = CommandTree(
            commands=MappingProxyType(
                {name: draft.freeze() for name, draft in self._commands.items()}
            ),
            global_options=MappingProxyType(dict(self._global_options)),
        )
        logger.debug(
            "Built command tree with %d commands and %d global options",
            len(tree.commands),
            len(tree.global_options),
        )
        return tree
