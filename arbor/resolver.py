# Arbor CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Resolves an argument vector against a `CommandTree`.

Resolution runs in two phases:

1. Global prefix: a strict switch scan over the global options. The first
   positional token names the root command, or `help`.
2. Tree descent: each time the context changes to a new command, its own
   switches are scanned. Tokens are then matched, in order of priority, as a
   subcommand name, a `help` request, the value of the next positional argument,
   an unknown subcommand (when the command has subcommands), or the start of the
   residual argv handed to the handler.

When the walk ends, defaults are backfilled, supplied values are run through
their transforms, and required options are checked.

Resolution is a pure function of the tree and the argument vector. Failures are
raised internally as `ResolutionError`; `resolve()` returns the `ParseFailure`
it carries, `resolve_or_raise()` lets it propagate.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from arbor.command import Command, CommandTree
from arbor.exceptions import OptionValueError, ResolutionError
from arbor.logger import logger
from arbor.outcomes import (
    DispatchDecision,
    FailureKind,
    HelpRequest,
    ParseFailure,
    Resolution,
)
from arbor.parser.option import Option
from arbor.parser.option_type import OptionType
from arbor.parser.switches import SwitchScanner, is_switch
from arbor.parser.utils import coerce_value

PASSTHROUGH = "--"
HELP = "help"


def format_argument(name: str) -> str:
    return f"<{name}>"


@dataclass
class Supplied:
    """A value supplied on the command line, with the descriptor it matched."""

    option: Option
    value: Any
    label: str


@dataclass
class WalkState:
    """Mutable bookkeeping for a single resolution."""

    tokens: list[str]
    path: list[str] = field(default_factory=list)
    context: Command | None = None
    pending: list[Option] = field(default_factory=list)
    passthrough: list[str] = field(default_factory=list)
    supplied: dict[str, Supplied] = field(default_factory=dict)

    def supply(self, option: Option, value: Any, label: str) -> None:
        """
        Record a supplied value.

        Values supplied again against the same descriptor are summed for count
        options and appended for collecting options; anything else overwrites.
        A value supplied against a different descriptor of the same name shadows
        the earlier one.
        """
        previous = self.supplied.get(option.name)
        if previous is not None and previous.option is option:
            if option.type is OptionType.COUNT:
                value = previous.value + value
            elif option.collects:
                value = previous.value + [value]
        elif option.collects and option.type is not OptionType.COUNT:
            value = [value]
        self.supplied[option.name] = Supplied(option, value, label)


class Resolver:
    """
    Walks argument vectors against one command tree.

    The tree is never modified; one `Resolver` can serve any number of calls.
    """

    def __init__(self, tree: CommandTree) -> None:
        self.tree = tree
        self._global_scanner = SwitchScanner(tree.global_options)

    def _fail(
        self,
        state: WalkState,
        kind: FailureKind,
        message: str,
        option: str | None = None,
        value: Any = None,
    ) -> ResolutionError:
        failure = ParseFailure(
            kind=kind,
            message=message,
            command_path=tuple(state.path),
            option=option,
            value=value,
        )
        logger.debug("Resolution failed: %s", failure)
        return ResolutionError(failure)

    def _scan(self, state: WalkState, scanner: SwitchScanner, tokens: list[str]):
        try:
            result = scanner.scan_head(tokens)
        except OptionValueError as error:
            option = scanner.options[error.option]
            raise self._fail(
                state,
                FailureKind.INVALID_OPTION_VALUE,
                str(error),
                option=option.switch,
                value=error.value,
            ) from error
        for option, value in result.parsed:
            state.supply(option, value, option.switch)
        return result

    def _enter(self, state: WalkState, command: Command, tokens: list[str]) -> None:
        """Make `command` the context and scan its switches."""
        state.path.append(command.name)
        state.context = command
        state.pending = list(command.arguments)
        if PASSTHROUGH in tokens:
            index = tokens.index(PASSTHROUGH)
            state.passthrough.extend(tokens[index + 1 :])
            tokens = tokens[:index]
        result = self._scan(state, SwitchScanner(command.options), tokens)
        if result.invalid:
            logger.debug(
                "Switch '%s' is not an option of '%s'", result.invalid, command.name
            )
        state.tokens = result.remaining

    def _consume_argument(self, state: WalkState, token: str) -> None:
        argument = state.pending.pop(0)
        label = format_argument(argument.name)
        try:
            value = coerce_value(token, argument.type)
        except ValueError as error:
            raise self._fail(
                state,
                FailureKind.INVALID_OPTION_VALUE,
                f"Invalid value for argument '{label}': {error}",
                option=label,
                value=token,
            ) from error
        state.supply(argument, value, label)

    def _global_prefix(self, state: WalkState) -> Command | HelpRequest:
        result = self._scan(state, self._global_scanner, state.tokens)
        if result.invalid:
            raise self._fail(
                state,
                FailureKind.UNKNOWN_GLOBAL_OPTION,
                f"Unknown global option '{result.invalid}'",
                option=result.invalid,
            )
        tokens = result.remaining
        if tokens and tokens[0] == PASSTHROUGH:
            tokens = tokens[1:]
        if not tokens:
            return HelpRequest(())
        candidate, tokens = tokens[0], tokens[1:]
        if candidate == HELP:
            return HelpRequest(tuple(self.tree.extract_path(tokens)))
        command = self.tree.commands.get(candidate)
        if command is None:
            raise self._fail(
                state, FailureKind.UNKNOWN_COMMAND, f"Unknown command '{candidate}'"
            )
        state.tokens = tokens
        return command

    def _descend(self, state: WalkState) -> HelpRequest | list[str]:
        """Walk the tree; return a help request or the residual argv."""
        while state.tokens:
            assert state.context is not None, "descent requires a command context"
            token = state.tokens[0]
            subcommand = state.context.subcommands.get(token)
            if subcommand is not None:
                self._enter(state, subcommand, state.tokens[1:])
                continue
            if token == HELP:
                return HelpRequest(
                    tuple(self.tree.extract_path(state.tokens[1:], start=state.path))
                )
            if state.pending and is_switch(token):
                logger.debug("Dropping unknown switch '%s'", token)
                state.tokens = state.tokens[1:]
                continue
            if state.pending:
                self._consume_argument(state, token)
                state.tokens = state.tokens[1:]
                continue
            if state.context.subcommands:
                raise self._fail(
                    state,
                    FailureKind.UNKNOWN_SUBCOMMAND,
                    f"Unknown subcommand '{token}' for '{' '.join(state.path)}'",
                    value=token,
                )
            residual = state.tokens
            state.tokens = []
            return residual
        return []

    def _scopes(self, state: WalkState) -> list[tuple[list[Option], bool]]:
        """Descriptors in scope, outermost first, flagged when positional."""
        scopes = [(list(self.tree.global_options.values()), False)]
        for command in self.tree.scopes(state.path):
            scopes.append((list(command.options.values()), False))
            scopes.append((list(command.arguments), True))
        return scopes

    def _finish(self, state: WalkState, residual: list[str]) -> DispatchDecision:
        scopes = self._scopes(state)

        # The innermost scope declaring a name owns its default, even when it has none.
        options: dict[str, Any] = {}
        for descriptors, _ in scopes:
            for option in descriptors:
                if option.default is not None:
                    options[option.name] = option.default
                else:
                    options.pop(option.name, None)

        for name, supplied in state.supplied.items():
            try:
                options[name] = supplied.option.apply_transform(supplied.value)
            except Exception as error:
                raise self._fail(
                    state,
                    FailureKind.TRANSFORM_ERROR,
                    f"Could not transform value {supplied.value!r} for option "
                    f"'{supplied.label}': {error}",
                    option=supplied.label,
                    value=supplied.value,
                ) from error

        for descriptors, positional in scopes:
            for option in descriptors:
                if option.required and options.get(option.name) is None:
                    label = (
                        format_argument(option.name) if positional else option.switch
                    )
                    raise self._fail(
                        state,
                        FailureKind.MISSING_REQUIRED_OPTION,
                        f"Missing required option '{label}'",
                        option=label,
                    )

        assert state.context is not None, "dispatch requires a command context"
        return DispatchDecision(
            target=state.context.dispatch_target,
            command=state.context,
            path=tuple(state.path),
            residual_argv=residual + state.passthrough,
            options=options,
        )

    def resolve_or_raise(self, argv: Sequence[str]) -> DispatchDecision | HelpRequest:
        """
        Resolve `argv`, raising on failure.

        Raises:
            ResolutionError: Carrying the `ParseFailure`.
        """
        state = WalkState(tokens=list(argv))
        logger.debug("Resolving %s", state.tokens)

        root = self._global_prefix(state)
        if isinstance(root, HelpRequest):
            logger.debug("Help requested for %s", list(root.path))
            return root

        self._enter(state, root, state.tokens)
        outcome = self._descend(state)
        if isinstance(outcome, HelpRequest):
            logger.debug("Help requested for %s", list(outcome.path))
            return outcome

        decision = self._finish(state, outcome)
        logger.debug("Resolved %s", decision)
        return decision

    def resolve(self, argv: Sequence[str]) -> Resolution:
        try:
            return self.resolve_or_raise(argv)
        except ResolutionError as error:
            return error.failure


def resolve(tree: CommandTree, argv: Sequence[str]) -> Resolution:
    """Resolve `argv` against `tree`, returning a failure instead of raising."""
    return Resolver(tree).resolve(argv)


def resolve_or_raise(
    tree: CommandTree, argv: Sequence[str]
) -> DispatchDecision | HelpRequest:
    """Resolve `argv` against `tree`, raising `ResolutionError` on failure."""
    return Resolver(tree).resolve_or_raise(argv)
