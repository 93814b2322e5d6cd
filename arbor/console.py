# Arbor CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Console output for Arbor applications.

`console` and `err_console` are the shared rich consoles used across the toolkit.
`Console` wraps them with the small surface command handlers and the application
shell write through:

- `debug()` / `info()` / `notice()` / `success()` / `warn()` for leveled messages
- `error()` for fatal messages, which halts the invocation with exit code 1
- `table()` for tabular data
- `spinner()` / `update_spinner()` for long running work

Verbosity is either "normal" or "debug"; debug messages are only written when the
verbosity is "debug". The resolver never writes here; only the shell and the
handlers do.
"""
from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Any, Iterable, Iterator, Sequence

from rich import box
from rich.console import Console as RichConsole
from rich.status import Status
from rich.table import Table

from arbor.signals import HaltSignal
from arbor.themes import get_arbor_theme

console = RichConsole(color_system="auto", theme=get_arbor_theme())
err_console = RichConsole(color_system="auto", theme=get_arbor_theme(), stderr=True)

VERBOSITY_LEVELS = ("normal", "debug")

SPINNER_ALIASES = {
    "bouncing_bar": "bouncingBar",
    "bouncing_ball": "bouncingBall",
    "line": "line",
    "simple_dots": "simpleDots",
    "simple_dots_scrolling": "simpleDotsScrolling",
    "fancy_dots": "dots",
}


def bangify(message: str, marker: str | None = None) -> str:
    """Prefix every non-empty line of `message` with an arrow marker."""
    if marker is None:
        marker = "!" if sys.platform == "win32" else "▸"
    lines = [line for line in message.split("\n") if line]
    return "\n".join(f"{marker}  {line}" for line in lines)


class Console:
    """
    Leveled, styled output for command handlers.

    Args:
        out (rich.console.Console | None): Console for regular output.
        err (rich.console.Console | None): Console for warnings, errors and debug.
        verbosity (str): "normal" or "debug".
    """

    def __init__(
        self,
        out: RichConsole | None = None,
        err: RichConsole | None = None,
        verbosity: str = "normal",
    ) -> None:
        self.out: RichConsole = out or console
        self.err: RichConsole = err or err_console
        self.verbosity: str = "normal"
        self._status: Status | None = None
        self.configure(verbosity=verbosity)

    def configure(self, verbosity: str | None = None) -> None:
        """Update the console configuration."""
        if verbosity is None:
            return
        if verbosity not in VERBOSITY_LEVELS:
            raise ValueError(
                f"Invalid verbosity: '{verbosity}'. Must be one of: "
                f"{', '.join(VERBOSITY_LEVELS)}"
            )
        self.verbosity = verbosity

    @property
    def is_verbose(self) -> bool:
        return self.verbosity == "debug"

    def _write(self, target: RichConsole, message: Any, style: str | None) -> None:
        target.print(message, style=style, markup=False, highlight=False)

    def debug(self, message: str) -> None:
        """Print a debug message, only visible when verbose output is on."""
        if self.is_verbose:
            self._write(self.err, f"==> {message}", "debug")

    def info(self, message: str) -> None:
        self._write(self.out, message, None)

    def notice(self, message: str) -> None:
        self._write(self.out, message, "notice")

    def success(self, message: str) -> None:
        self._write(self.out, message, "success")

    def warn(self, message: str) -> None:
        self._write(self.err, message, "warn")

    def error(self, message: str) -> None:
        """Print an error message, then halt with exit code 1."""
        self.report_error(message)
        self.halt(1)

    def report_error(self, message: str) -> None:
        """Print an error message without halting."""
        self._write(self.err, bangify(message), "error")

    def halt(self, code: int = 0) -> None:
        """Stop the current invocation with the given exit code."""
        raise HaltSignal(code)

    def table(
        self,
        title: str,
        header: Sequence[str],
        rows: Iterable[Sequence[Any]],
        padding: int = 1,
    ) -> None:
        """Print `rows` as a table under `title`."""
        table = Table(
            title=title,
            title_style="title",
            header_style="heading",
            box=box.SIMPLE_HEAD,
            padding=(0, padding),
        )
        for column in header:
            table.add_column(str(column))
        for row in rows:
            table.add_row(*(str(cell) for cell in row))
        self.out.print(table)

    @contextmanager
    def spinner(self, message: str, spinner: str = "line") -> Iterator[Status]:
        """
        Show a spinner while the body of the `with` block runs.

        Example:
            with console.spinner("Loading...", spinner="simple_dots"):
                do_work()
        """
        spinner_name = SPINNER_ALIASES.get(spinner, spinner)
        with self.err.status(message, spinner=spinner_name) as status:
            self._status = status
            try:
                yield status
            finally:
                self._status = None

    def update_spinner(self, status: str) -> None:
        """Update the text of the running spinner, if any."""
        if self._status is not None:
            self._status.update(status)
