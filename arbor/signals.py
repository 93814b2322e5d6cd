# Arbor CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used internally by Arbor.

Signals interrupt the normal flow of an invocation (for example a handler asking
the console to stop the program) without being treated as ordinary errors.

All signals inherit from `FlowSignal`, which is a subclass of `BaseException`
so they bypass standard `except Exception` blocks.

Signals:
- HaltSignal: Stop the current invocation with an exit code.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in Arbor.

    These are not errors. They're used to unwind to the application shell,
    which decides what the process exit code should be.
    """


class HaltSignal(FlowSignal):
    """Raised by `Console.halt()` to stop the invocation with `code`."""

    def __init__(self, code: int = 0, message: str = "Halt signal received."):
        super().__init__(message)
        self.code = code
