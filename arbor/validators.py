# Arbor CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Input validators for use with Prompt Toolkit prompts.

Included Validators:
- yes_no_validator: Accepts yes/no answers, or an empty answer.
- regex_validator: Accepts input matching a regular expression.
- callable_validator: Adapts a function returning None or an error message.
"""
import re
from typing import Callable

from prompt_toolkit.validation import ValidationError, Validator

YES_ANSWERS = ("y", "yes")
NO_ANSWERS = ("n", "no")


def yes_no_validator(allow_empty: bool = True) -> Validator:
    """Validator for yes/no inputs."""

    def validate(text: str) -> bool:
        answer = text.strip().lower()
        if not answer:
            return allow_empty
        return answer in YES_ANSWERS or answer in NO_ANSWERS

    return Validator.from_callable(validate, error_message="Enter 'Y', 'y' or 'N', 'n'.")


def regex_validator(pattern: str | re.Pattern, error_message: str | None = None) -> Validator:
    """Validator for inputs that must fully match `pattern`."""
    compiled = re.compile(pattern)

    def validate(text: str) -> bool:
        return compiled.fullmatch(text.strip()) is not None

    if error_message is None:
        error_message = f"Invalid input. Must match {compiled.pattern}."

    return Validator.from_callable(validate, error_message=error_message)


class CallableValidator(Validator):
    """Wraps `check(text) -> str | None`; a returned string is the error message."""

    def __init__(self, check: Callable[[str], str | None]) -> None:
        self.check = check
        super().__init__()

    def validate(self, document):
        message = self.check(document.text)
        if message:
            raise ValidationError(message=message, cursor_position=len(document.text))


def callable_validator(check: Callable[[str], str | None]) -> Validator:
    return CallableValidator(check)
