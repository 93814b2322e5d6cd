"""
Arbor CLI Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .app import App
from .builder import TreeBuilder
from .command import Command, CommandTree
from .console import Console
from .exceptions import (
    ArborError,
    BuildError,
    HandlerNotFoundError,
    PreDispatchError,
    ResolutionError,
)
from .hook_manager import HookManager, HookType
from .outcomes import DispatchDecision, FailureKind, HelpRequest, ParseFailure
from .parser import Option, OptionType
from .registry import HandlerRegistry
from .resolver import Resolver, resolve, resolve_or_raise
from .version import __version__

__all__ = [
    "App",
    "TreeBuilder",
    "Command",
    "CommandTree",
    "Console",
    "ArborError",
    "BuildError",
    "HandlerNotFoundError",
    "PreDispatchError",
    "ResolutionError",
    "HookManager",
    "HookType",
    "DispatchDecision",
    "FailureKind",
    "HelpRequest",
    "ParseFailure",
    "Option",
    "OptionType",
    "HandlerRegistry",
    "Resolver",
    "resolve",
    "resolve_or_raise",
    "__version__",
]
