# Arbor CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""Small helpers shared across Arbor: invocation name, async wrapping, logging."""
from __future__ import annotations

import functools
import inspect
import logging
import os
import shutil
import sys
from typing import Any, Awaitable, Callable, TypeVar

import pythonjsonlogger.json
from rich.console import Console as RichConsole
from rich.logging import RichHandler

T = TypeVar("T")

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
FILE_LOG_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"
LOG_MODE_ENV = "ARBOR_LOG_MODE"


def get_program_invocation() -> str:
    """Returns how the running program was invoked, for usage lines."""
    script = sys.argv[0]
    if os.path.basename(script) == "__main__.py":
        return f"python -m {os.path.basename(os.path.dirname(script))}"
    program = shutil.which(script)
    return os.path.basename(program) if program else script


def is_coroutine(function: Callable[..., Any]) -> bool:
    return inspect.iscoroutinefunction(function)


def ensure_async(function: Callable[..., T]) -> Callable[..., Awaitable[T]]:
    if is_coroutine(function):
        return function  # type: ignore

    if not callable(function):
        raise TypeError(f"{function} is not callable")

    @functools.wraps(function)
    async def async_wrapper(*args, **kwargs) -> T:
        return function(*args, **kwargs)

    return async_wrapper


CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")


def running_in_container(cgroup: str = "/proc/1/cgroup") -> bool:
    """Whether PID 1 runs under a container runtime, judged from its cgroups."""
    try:
        with open(cgroup, "r", encoding="UTF-8") as handle:
            content = handle.read()
    except OSError:
        return False
    return any(marker in content for marker in CONTAINER_MARKERS)


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    console_log_level: int = logging.WARNING,
) -> logging.Handler:
    """
    Route the `arbor` logger to stderr, and optionally to a file.

    `App.main()` calls this before dispatching; the global `verbose` option then
    lowers the level of the returned console handler to `DEBUG`.

    Args:
        mode (str | None):
            "cli" for rich console logs, "json" for one JSON object per line.
            Defaults to `ARBOR_LOG_MODE`, then to "json" inside a container
            and "cli" elsewhere.
        log_filename (str | None):
            Also log everything at `DEBUG` to this file.
        json_log_to_file (bool):
            Write the file log as JSON instead of plain text.
        console_log_level (int):
            Level of the console handler.

    Returns:
        logging.Handler: The console handler.

    Raises:
        ValueError: If `mode` is not "cli" or "json".
    """
    mode = mode or os.getenv(LOG_MODE_ENV) or (
        "json" if running_in_container() else "cli"
    )
    if mode == "cli":
        console_handler: logging.Handler = RichHandler(
            console=RichConsole(stderr=True),
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(pythonjsonlogger.json.JsonFormatter(LOG_FORMAT))
    else:
        raise ValueError(f"Invalid log mode: {mode}")
    console_handler.setLevel(console_log_level)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            pythonjsonlogger.json.JsonFormatter(LOG_FORMAT)
            if json_log_to_file
            else logging.Formatter(FILE_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
        root.addHandler(file_handler)

    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("arbor").debug("Logging to stderr in '%s' mode", mode)
    return console_handler
