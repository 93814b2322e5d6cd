# Arbor CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders help for a command tree with rich.

Top-level help lists the global options and the visible commands. Command help
shows the command's help text, a usage line, and its visible subcommands,
options and positional arguments. Hidden commands and hidden options are never
listed; a path that names no command falls back to top-level help.
"""
from __future__ import annotations

from typing import Sequence

from rich.table import Table
from rich.text import Text

from arbor.command import Command, CommandTree
from arbor.console import Console
from arbor.parser.option import Option
from arbor.parser.option_type import OptionType
from arbor.utils import get_program_invocation


def first_line(help_text: str | None) -> str:
    """Return the first line of `help_text`, with "..." if more lines follow."""
    lines = [line for line in (help_text or "").split("\n") if line.strip()]
    if not lines:
        return ""
    return f"{lines[0]} ..." if len(lines) > 1 else lines[0]


def format_default(option: Option) -> str | None:
    default = option.default
    if default is None:
        return None
    if option.type is OptionType.STRING:
        return f'(default: "{default}")'
    return f"(default: {default})"


def format_option_help(option: Option) -> tuple[str, str]:
    """Return the `(flag, help)` pair shown for a switch."""
    flag = option.switch
    if option.type.takes_value:
        flag = f"{flag}={option.type}"
    if option.short:
        flag = f"{option.short}, {flag}"
    help_text = " ".join(part for part in (option.help, format_default(option)) if part)
    return flag, help_text


def format_argument_help(argument: Option) -> tuple[str, str]:
    help_text = " ".join(
        part for part in (argument.help, format_default(argument)) if part
    )
    return argument.name, help_text


class HelpRenderer:
    """
    Prints help for `tree`.

    Args:
        tree (CommandTree): The tree to describe.
        program (str | None): Program name used in usage lines.
        console (Console | None): Console to print through.
        description (str | None): One-line summary shown in top-level help.
    """

    def __init__(
        self,
        tree: CommandTree,
        program: str | None = None,
        console: Console | None = None,
        description: str | None = None,
    ) -> None:
        self.tree = tree
        self.program = program or get_program_invocation()
        self.console = console or Console()
        self.description = description

    def _section(self, title: str, rows: Sequence[tuple[str, str]]) -> None:
        out = self.console.out
        out.print(Text(title, style="heading"))
        grid = Table.grid(padding=(0, 2))
        grid.add_column(no_wrap=True)
        grid.add_column()
        for left, right in rows:
            grid.add_row(Text(f"  {left}"), Text(right))
        out.print(grid)
        out.print()

    def _usage(self, usage: str) -> None:
        self.console.out.print(Text("USAGE", style="heading"))
        self.console.out.print(Text(f"  $ {self.program} {usage}"))
        self.console.out.print()

    def _command_rows(self, commands: Sequence[Command]) -> list[tuple[str, str]]:
        return [(command.name, first_line(command.help)) for command in commands]

    def render_top_level(self) -> None:
        header = self.program
        if self.description:
            header = f"{header} - {self.description}"
        self.console.out.print(Text(header, style="title"))
        self.console.out.print()
        self._usage("[global_options] <command> [options..] [args..]")

        global_options = [
            opt for opt in self.tree.global_options.values() if not opt.hidden
        ]
        if global_options:
            self._section(
                "GLOBAL OPTIONS", [format_option_help(opt) for opt in global_options]
            )

        commands = [cmd for cmd in self.tree.commands.values() if not cmd.hidden]
        if commands:
            self._section("COMMANDS", self._command_rows(commands))

    def render_command(self, path: Sequence[str], command: Command) -> None:
        if command.help:
            self.console.out.print(Text(command.help))
            self.console.out.print()

        usage = f"{' '.join(path)} [options..]"
        if command.arguments:
            usage += " [args..]"
        self._usage(usage)

        subcommands = command.visible_subcommands()
        if subcommands:
            self._section("SUBCOMMANDS", self._command_rows(subcommands))

        options = command.visible_options()
        if options:
            self._section("OPTIONS", [format_option_help(opt) for opt in options])

        arguments = [arg for arg in command.arguments if not arg.hidden]
        if arguments:
            self._section("ARGUMENTS", [format_argument_help(arg) for arg in arguments])

    def render(self, path: Sequence[str] = ()) -> None:
        """Print help for `path`; top-level help when it names no command."""
        command = self.tree.lookup(path)
        if command is None:
            self.render_top_level()
        else:
            self.render_command(path, command)
