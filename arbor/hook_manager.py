# Arbor CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Lifecycle hooks around a dispatched handler.

`App.dispatch()` triggers the phases in order: BEFORE, then ON_SUCCESS or
ON_ERROR, then AFTER and ON_TEARDOWN. Every hook receives the invocation's
`DispatchContext` and may be a plain function or a coroutine.

Usage:
    hooks = HookManager()

    @hooks.on("error")
    def report(context):
        ...
"""
from __future__ import annotations

from enum import Enum
from typing import Awaitable, Callable, Union

from arbor.context import DispatchContext
from arbor.logger import logger
from arbor.utils import ensure_async

Hook = Union[
    Callable[[DispatchContext], None], Callable[[DispatchContext], Awaitable[None]]
]


class HookType(Enum):
    """
    Phases of a handler dispatch.

    Members:
        BEFORE: The handler is about to be called.
        ON_SUCCESS: The handler returned; `context.result` is set.
        ON_ERROR: The handler raised; `context.exception` is set.
        AFTER: The handler finished either way; timings are final.
        ON_TEARDOWN: Last phase, for releasing resources.

    The `on_` prefix may be left out: `HookType("error")` is `ON_ERROR`.
    """

    BEFORE = "before"
    ON_SUCCESS = "on_success"
    ON_ERROR = "on_error"
    AFTER = "after"
    ON_TEARDOWN = "on_teardown"

    @classmethod
    def _missing_(cls, value: object) -> HookType:
        if isinstance(value, str):
            normalized = value.strip().lower().replace("-", "_")
            for candidate in (normalized, f"on_{normalized}"):
                for member in cls:
                    if member.value == candidate:
                        return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid hook type {value!r}. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value


class HookManager:
    """
    Holds the hooks of each dispatch phase and runs them.

    A hook that raises is logged and skipped, so a broken BEFORE hook never
    stops the handler. The exception is ON_ERROR: a failing error hook re-raises
    the handler's own exception, chained to the hook's.
    """

    def __init__(self) -> None:
        self._hooks: dict[HookType, list[Hook]] = {phase: [] for phase in HookType}

    def register(self, hook_type: HookType | str, hook: Hook) -> Hook:
        """Add `hook` to a phase and return it unchanged."""
        self._hooks[HookType(hook_type)].append(hook)
        return hook

    def on(self, hook_type: HookType | str) -> Callable[[Hook], Hook]:
        """Decorator form of `register`."""

        def decorator(hook: Hook) -> Hook:
            return self.register(hook_type, hook)

        return decorator

    def hooks(self, hook_type: HookType | str) -> list[Hook]:
        return list(self._hooks[HookType(hook_type)])

    def clear(self, hook_type: HookType | str | None = None) -> None:
        phases = list(HookType) if hook_type is None else [HookType(hook_type)]
        for phase in phases:
            self._hooks[phase].clear()

    async def trigger(self, hook_type: HookType, context: DispatchContext) -> None:
        for hook in self.hooks(hook_type):
            try:
                await ensure_async(hook)(context)
            except Exception as hook_error:
                logger.warning(
                    "Hook '%s' failed during %s of '%s' (target '%s'): %s",
                    getattr(hook, "__name__", repr(hook)),
                    hook_type,
                    context.name,
                    context.target,
                    hook_error,
                )
                if hook_type is HookType.ON_ERROR and isinstance(
                    context.exception, Exception
                ):
                    raise context.exception from hook_error

    def __len__(self) -> int:
        return sum(len(hooks) for hooks in self._hooks.values())
