# Arbor CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Maps dispatch target names to handler callables.

Handlers are called as `handler(argv, options)` and may be plain functions or
coroutines.

Usage:
    handlers = HandlerRegistry()

    @handlers.register()
    def hello(argv, options):
        ...

    @handlers.register("keyset")
    async def set_key(argv, options):
        ...

    handlers = HandlerRegistry.from_object(my_module, ["hello", "keyset"])
"""
from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Mapping

from arbor.exceptions import HandlerNotFoundError
from arbor.logger import logger

Handler = Callable[[list[str], dict[str, Any]], Any]


class HandlerRegistry:
    """A name → handler mapping resolved once at startup."""

    def __init__(self, handlers: Mapping[str, Handler] | None = None) -> None:
        self._handlers: dict[str, Handler] = {}
        for name, handler in (handlers or {}).items():
            self.add(name, handler)

    def add(self, name: str, handler: Handler) -> None:
        if not callable(handler):
            raise TypeError(f"Handler for '{name}' must be callable, got {handler!r}")
        if name in self._handlers:
            logger.warning("Handler '%s' is being replaced", name)
        self._handlers[name] = handler

    def register(self, name: str | None = None) -> Callable[[Handler], Handler]:
        """Decorator registering a function under `name` (default: its own name)."""

        def decorator(handler: Handler) -> Handler:
            self.add(name or handler.__name__, handler)
            return handler

        return decorator

    def get(self, name: str) -> Handler:
        """
        Return the handler for `name`.

        Raises:
            HandlerNotFoundError: If nothing is registered under `name`.
        """
        try:
            return self._handlers[name]
        except KeyError:
            raise HandlerNotFoundError(name) from None

    @classmethod
    def from_object(cls, source: Any, names: Iterable[str]) -> HandlerRegistry:
        """
        Build a registry from the public attributes of a module or object.

        Each name is looked up as is, then with dashes written as underscores.
        Names without a matching callable are skipped so that `get()` reports
        them when they are dispatched to.
        """
        registry = cls()
        for name in names:
            for attribute in (name, name.replace("-", "_")):
                if attribute.startswith("_"):
                    continue
                handler = getattr(source, attribute, None)
                if callable(handler):
                    registry.add(name, handler)
                    break
            else:
                logger.debug("No handler named '%s' on %r", name, source)
        return registry

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def __iter__(self) -> Iterator[str]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    def __str__(self) -> str:
        return f"HandlerRegistry({', '.join(self._handlers) or '—'})"
