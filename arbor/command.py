# Arbor CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Command` and `CommandTree`, the read-only structures the resolver walks.

A `Command` is one node of the tree: its own options, its ordered positional
arguments, its subcommands and the name of the handler it dispatches to. A
`CommandTree` holds the top-level commands and the global options.

Both are produced by `TreeBuilder.build()` and are never mutated afterwards;
their containers are exposed as `MappingProxyType` and tuples.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Sequence

from arbor.parser.option import Option
from arbor.parser.switches import is_switch


@dataclass(frozen=True)
class Command:
    """
    Represents a command or subcommand.

    Attributes:
        name (str): Name typed on the command line.
        dispatch_target (str): Name of the handler to invoke.
        options (Mapping[str, Option]): Switches scoped to this command.
        arguments (tuple[Option, ...]): Positional arguments, in order.
        subcommands (Mapping[str, Command]): Child commands.
        help (str | None): Help text.
        hidden (bool): Leave the command out of help output.
    """

    name: str
    dispatch_target: str
    options: Mapping[str, Option] = field(default_factory=lambda: MappingProxyType({}))
    arguments: tuple[Option, ...] = ()
    subcommands: Mapping[str, Command] = field(
        default_factory=lambda: MappingProxyType({})
    )
    help: str | None = None
    hidden: bool = False

    def visible_subcommands(self) -> list[Command]:
        return [cmd for cmd in self.subcommands.values() if not cmd.hidden]

    def visible_options(self) -> list[Option]:
        return [opt for opt in self.options.values() if not opt.hidden]

    def __hash__(self) -> int:
        return hash((self.name, self.dispatch_target))

    def __str__(self) -> str:
        return (
            f"Command(name='{self.name}', target='{self.dispatch_target}', "
            f"options={len(self.options)}, arguments={len(self.arguments)}, "
            f"subcommands={len(self.subcommands)})"
        )


@dataclass(frozen=True)
class CommandTree:
    """
    The full set of registered commands plus the global options.

    Attributes:
        commands (Mapping[str, Command]): Top-level commands.
        global_options (Mapping[str, Option]): Options accepted before the command.
    """

    commands: Mapping[str, Command] = field(default_factory=lambda: MappingProxyType({}))
    global_options: Mapping[str, Option] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def lookup(self, path: Sequence[str]) -> Command | None:
        """Return the command at `path`, or None if there is none."""
        if not path:
            return None
        children = self.commands
        command = None
        for name in path:
            command = children.get(name)
            if command is None:
                return None
            children = command.subcommands
        return command

    def scopes(self, path: Sequence[str]) -> list[Command]:
        """Return the commands along `path`, outermost first."""
        scopes = []
        children = self.commands
        for name in path:
            command = children[name]
            scopes.append(command)
            children = command.subcommands
        return scopes

    def extract_path(self, tokens: Sequence[str], start: Sequence[str] = ()) -> list[str]:
        """
        Return `start` extended by the longest run of `tokens` naming subcommands.

        Switch tokens are skipped; the walk stops at the first other token that
        is not a command name at that level.
        """
        path = list(start)
        if path:
            command = self.lookup(path)
            children = command.subcommands if command else {}
        else:
            children = self.commands
        for token in tokens:
            if is_switch(token):
                continue
            command = children.get(token)
            if command is None:
                break
            path.append(token)
            children = command.subcommands
        return path

    def walk(self) -> Iterator[tuple[tuple[str, ...], Command]]:
        """Yield every `(path, command)` pair, depth first."""
        stack = [((name,), cmd) for name, cmd in reversed(self.commands.items())]
        while stack:
            path, command = stack.pop()
            yield path, command
            stack.extend(
                (path + (name,), child)
                for name, child in reversed(command.subcommands.items())
            )
