# Arbor CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
The application shell tying a command tree to its handlers.

`App` resolves an argument vector, renders help or reports failures through the
console, runs the optional pre-dispatch hook, then invokes the handler between
the lifecycle hooks of its `HookManager`. `App.run()` returns the exit code;
`App.main()` exits the process with it.

Exit codes:
    0: The handler succeeded, or help was shown.
    1: Resolution failed, no handler was found, pre-dispatch aborted, or the
       handler raised.
    130: The user interrupted the handler.
    n: The code of a `HaltSignal`, e.g. from `Console.error()` or `Console.halt()`.

Example:
    app = App(tree, handlers, program="mycli")
    app.main()
"""
from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Mapping
from typing import Any, Callable, Sequence

from arbor.command import Command, CommandTree
from arbor.console import Console
from arbor.context import DispatchContext
from arbor.debug import register_debug_hooks
from arbor.exceptions import HandlerNotFoundError, PreDispatchError
from arbor.help import HelpRenderer
from arbor.hook_manager import HookManager, HookType
from arbor.logger import logger
from arbor.outcomes import DispatchDecision, FailureKind, HelpRequest, ParseFailure
from arbor.registry import Handler, HandlerRegistry
from arbor.resolver import Resolver
from arbor.signals import HaltSignal
from arbor.utils import ensure_async, setup_logging

PreDispatch = Callable[[Command, list[str], dict[str, Any]], Any]

COMMAND_HINT_KINDS = (
    FailureKind.MISSING_REQUIRED_OPTION,
    FailureKind.INVALID_OPTION_VALUE,
    FailureKind.TRANSFORM_ERROR,
)


class App:
    """
    Runs a command tree against its handlers.

    Args:
        tree (CommandTree): The commands and global options.
        handlers (HandlerRegistry | Mapping[str, Handler]): Handlers keyed by
            dispatch target.
        program (str | None): Program name shown in help.
        pre_dispatch (PreDispatch | None): Called as `(command, argv, options)`
            before the handler; returns the options to dispatch with.
        hooks (HookManager | None): Lifecycle hooks around the handler.
        console (Console | None): Console for help and error output.
        description (str | None): One-line summary shown in top-level help.
        debug_hooks (bool): Attach the logging hooks from `arbor.debug`.
    """

    def __init__(
        self,
        tree: CommandTree,
        handlers: HandlerRegistry | Mapping[str, Handler],
        program: str | None = None,
        pre_dispatch: PreDispatch | None = None,
        hooks: HookManager | None = None,
        console: Console | None = None,
        description: str | None = None,
        debug_hooks: bool = False,
    ) -> None:
        self.tree = tree
        self.handlers = (
            handlers
            if isinstance(handlers, HandlerRegistry)
            else HandlerRegistry(handlers)
        )
        self.pre_dispatch = pre_dispatch
        self.hooks = hooks or HookManager()
        self.console = console or Console()
        self.resolver = Resolver(tree)
        self.help = HelpRenderer(tree, program, self.console, description)
        self.log_handler: logging.Handler | None = None
        if debug_hooks:
            register_debug_hooks(self.hooks)

    def _configure(self, options: Mapping[str, Any]) -> None:
        """Apply the global `verbose` option to the console and the logger."""
        if options.get("verbose"):
            self.console.configure(verbosity="debug")
            logger.setLevel(logging.DEBUG)
            if self.log_handler is not None:
                self.log_handler.setLevel(logging.DEBUG)

    def _report_failure(self, failure: ParseFailure) -> None:
        hint = "help"
        if failure.kind in COMMAND_HINT_KINDS and failure.command_path:
            hint = f"help {' '.join(failure.command_path)}"
        self.console.report_error(
            f"{failure.message}. Try '{hint}' for usage information"
        )

    async def _run_pre_dispatch(self, decision: DispatchDecision) -> dict[str, Any]:
        if self.pre_dispatch is None:
            return decision.options
        try:
            options = await ensure_async(self.pre_dispatch)(
                decision.command, list(decision.residual_argv), dict(decision.options)
            )
        except PreDispatchError:
            raise
        except Exception as error:
            raise PreDispatchError(
                f"Pre-dispatch for '{' '.join(decision.path)}' failed: {error}"
            ) from error
        if not isinstance(options, Mapping):
            raise PreDispatchError(
                f"Pre-dispatch for '{' '.join(decision.path)}' returned "
                f"{type(options).__name__}, expected a mapping of options"
            )
        return dict(options)

    async def dispatch(
        self, decision: DispatchDecision, handler: Handler, options: dict[str, Any]
    ) -> DispatchContext:
        """
        Invoke `handler` between the lifecycle hooks.

        Exceptions from the handler are recorded on the context and re-raised
        after the ON_ERROR hooks run.
        """
        context = DispatchContext(
            name=" ".join(decision.path),
            target=decision.target,
            command=decision.command,
            argv=list(decision.residual_argv),
            options=options,
        )
        context.start_timer()
        try:
            await self.hooks.trigger(HookType.BEFORE, context)
            context.result = await ensure_async(handler)(context.argv, context.options)
            await self.hooks.trigger(HookType.ON_SUCCESS, context)
        except Exception as error:
            context.exception = error
            await self.hooks.trigger(HookType.ON_ERROR, context)
            raise
        finally:
            context.stop_timer()
            await self.hooks.trigger(HookType.AFTER, context)
            await self.hooks.trigger(HookType.ON_TEARDOWN, context)
        return context

    async def run(self, argv: Sequence[str] | None = None) -> int:
        """Resolve and dispatch `argv` (default: `sys.argv[1:]`); return the exit code."""
        argv = sys.argv[1:] if argv is None else list(argv)
        try:
            outcome = self.resolver.resolve(argv)
            if isinstance(outcome, HelpRequest):
                self.help.render(outcome.path)
                return 0
            if isinstance(outcome, ParseFailure):
                self._report_failure(outcome)
                return 1

            self._configure(outcome.options)
            self.console.debug(f"Dispatching '{' '.join(outcome.path)}'")
            try:
                options = await self._run_pre_dispatch(outcome)
                handler = self.handlers.get(outcome.target)
            except (PreDispatchError, HandlerNotFoundError) as error:
                self.console.report_error(str(error))
                return 1

            try:
                await self.dispatch(outcome, handler, options)
            except (KeyboardInterrupt, EOFError):
                self.console.warn(f"'{' '.join(outcome.path)}' interrupted by user.")
                return 130
            except Exception as error:
                logger.debug("Handler '%s' failed", outcome.target, exc_info=True)
                self.console.report_error(
                    f"Command '{' '.join(outcome.path)}' failed: {error}"
                )
                return 1
            return 0
        except HaltSignal as signal:
            logger.debug("Halted with exit code %d", signal.code)
            return signal.code

    def main(self, argv: Sequence[str] | None = None) -> None:
        """
        Synchronous entry point; exits the process with the exit code.

        Logging is set up first, in the mode named by `ARBOR_LOG_MODE`.
        """
        self.log_handler = setup_logging()
        sys.exit(asyncio.run(self.run(argv)))
