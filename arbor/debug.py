# Arbor CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""Logging hooks for tracing handler dispatch."""
from arbor.context import DispatchContext
from arbor.hook_manager import HookManager, HookType
from arbor.logger import logger


def log_before(context: DispatchContext):
    """Log the start of a handler."""
    logger.info(
        "[%s] Dispatching -> %s(argv=%r, options=%r)",
        context.name,
        context.target,
        context.argv,
        context.options,
    )


def log_success(context: DispatchContext):
    result_str = repr(context.result)
    if len(result_str) > 100:
        result_str = f"{result_str[:100]} ..."
    logger.debug("[%s] Success -> Result: %s", context.name, result_str)


def log_after(context: DispatchContext):
    logger.debug(
        "[%s] Finished with %s in %.3fs", context.name, context.status, context.duration
    )


def log_error(context: DispatchContext):
    logger.error(
        "[%s] Error (%s): %s",
        context.name,
        type(context.exception).__name__,
        context.exception,
        exc_info=context.exception,
    )


def register_debug_hooks(hooks: HookManager):
    hooks.register(HookType.BEFORE, log_before)
    hooks.register(HookType.AFTER, log_after)
    hooks.register(HookType.ON_SUCCESS, log_success)
    hooks.register(HookType.ON_ERROR, log_error)
