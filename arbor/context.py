# Arbor CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Dispatch context for Arbor handlers.

`DispatchContext` captures everything known about a single handler invocation:
the command path, the dispatch target, the residual argv and resolved options,
the result or exception, and timing. It is passed to every lifecycle hook.
"""
from __future__ import annotations

import time
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DispatchContext(BaseModel):
    """
    Represents the runtime metadata and state for a single handler invocation.

    Attributes:
        name (str): The command path, joined with spaces.
        target (str): The dispatch target name.
        command (Command): The leaf command descriptor.
        argv (list[str]): Residual argv passed to the handler.
        options (dict): Resolved options passed to the handler.
        result (Any | None): The handler's return value, if successful.
        exception (BaseException | None): The exception raised, if it failed.
        start_time (float | None): High-resolution performance start time.
        end_time (float | None): High-resolution performance end time.
        start_wall (datetime | None): Wall-clock timestamp when the handler began.
        end_wall (datetime | None): Wall-clock timestamp when the handler ended.
        extra (dict): Free-form metadata for hooks.

    Properties:
        duration (float | None): The execution duration in seconds.
        success (bool): Whether the handler completed without raising.
        status (str): "OK" if successful, otherwise "ERROR".
    """

    name: str
    target: str
    command: Any
    argv: list[str] = Field(default_factory=list)
    options: dict[str, Any] = Field(default_factory=dict)
    result: Any | None = None
    exception: BaseException | None = None

    start_time: float | None = None
    end_time: float | None = None
    start_wall: datetime | None = None
    end_wall: datetime | None = None

    extra: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def start_timer(self):
        self.start_wall = datetime.now()
        self.start_time = time.perf_counter()

    def stop_timer(self):
        self.end_time = time.perf_counter()
        self.end_wall = datetime.now()

    @property
    def duration(self) -> float | None:
        if self.start_time is None:
            return None
        if self.end_time is None:
            return time.perf_counter() - self.start_time
        return self.end_time - self.start_time

    @property
    def success(self) -> bool:
        return self.exception is None

    @property
    def status(self) -> str:
        return "OK" if self.success else "ERROR"

    def __str__(self) -> str:
        duration_str = f"{self.duration:.3f}s" if self.duration is not None else "n/a"
        result_str = (
            f"Result: {repr(self.result)}"
            if self.success
            else f"Exception: {self.exception}"
        )
        return (
            f"<DispatchContext '{self.name}' | {self.status} | "
            f"Duration: {duration_str} | {result_str}>"
        )
