# Arbor CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value coercion and transform helpers for Arbor option parsing.

Functions:
- coerce_bool: Convert a string to a boolean.
- coerce_value: Convert a raw token to the Python value of an `OptionType`.
- import_callable: Import a callable from a dotted path like 'my.module.func'.
- resolve_transform: Collapse the accepted transform spellings into one callable.
"""
from __future__ import annotations

import importlib
from typing import Any, Callable

from arbor.exceptions import BuildError
from arbor.parser.option_type import OptionType

Transform = Callable[[Any], Any]

TRUTHY = frozenset({"true", "t", "1", "yes", "y", "on"})
FALSY = frozenset({"false", "f", "0", "no", "n", "off"})


def coerce_bool(value: str | bool, strict: bool = False) -> bool:
    """
    Convert a string to a boolean.

    Accepts various truthy and falsy representations such as 'true', 'yes', '0',
    'off', etc.

    Args:
        value (str | bool): The input string or boolean.
        strict (bool): Raise `ValueError` for unrecognised strings instead of
            falling back to `bool(value)`.

    Returns:
        bool: Parsed boolean result.
    """
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in TRUTHY:
        return True
    elif normalized in FALSY:
        return False
    if strict:
        raise ValueError(f"Value '{value}' is not a valid boolean")
    return bool(normalized)


def coerce_value(value: str, option_type: OptionType) -> Any:
    """
    Convert a raw token to the value type of an option.

    Args:
        value (str): The raw token.
        option_type (OptionType): The declared type.

    Returns:
        Any: The coerced value.

    Raises:
        ValueError: If the token is not valid for the type.
    """
    if option_type in (OptionType.INTEGER, OptionType.COUNT):
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"Value '{value}' is not a valid integer") from None
    if option_type is OptionType.FLOAT:
        try:
            return float(value)
        except ValueError:
            raise ValueError(f"Value '{value}' is not a valid float") from None
    if option_type is OptionType.BOOLEAN:
        return coerce_bool(value, strict=True)
    return value


def import_callable(dotted_path: str) -> Callable[..., Any]:
    """Import a callable from 'package.module.func' or 'package.module:func'."""
    if ":" in dotted_path:
        module_path, _, attr = dotted_path.partition(":")
    else:
        module_path, _, attr = dotted_path.rpartition(".")
    if not module_path or not attr:
        raise BuildError(f"Invalid transform path: '{dotted_path}'")
    try:
        module = importlib.import_module(module_path)
    except ImportError as error:
        raise BuildError(f"Could not import '{dotted_path}': {error}") from error
    try:
        function = getattr(module, attr)
    except AttributeError as error:
        raise BuildError(
            f"Module '{module_path}' has no attribute '{attr}': {error}"
        ) from error
    if not callable(function):
        raise BuildError(f"Transform '{dotted_path}' is not callable")
    return function


def resolve_transform(transform: Any) -> Transform | None:
    """
    Normalize a transform declaration into a single-argument callable.

    Accepted forms:
        - None: no transform.
        - A callable taking the value.
        - A dotted path string naming such a callable.
        - A tuple `(callable_or_path, *extra_args)`; the value is passed first,
          followed by the extra arguments.

    Raises:
        BuildError: If the declaration cannot be resolved.
    """
    if transform is None:
        return None
    if isinstance(transform, str):
        return import_callable(transform)
    if isinstance(transform, tuple):
        if not transform:
            raise BuildError("Invalid transform: empty tuple")
        target, *extra_args = transform
        function = import_callable(target) if isinstance(target, str) else target
        if not callable(function):
            raise BuildError(f"Invalid transform: {target!r} is not callable")

        def bound_transform(value: Any) -> Any:
            return function(value, *extra_args)

        bound_transform.__name__ = getattr(function, "__name__", "transform")
        return bound_transform
    if callable(transform):
        return transform
    raise BuildError(
        f"Invalid transform: {transform!r}. Expected a callable, a dotted path "
        "or a (function, *args) tuple"
    )
