# Arbor CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Utilities for interactive prompts in Arbor command handlers.

Includes:
- `ask()` / `ask_async()` for a free-form answer with default, validation and
  transform.
- `confirm()` / `confirm_async()` for a yes/no confirmation defaulting to yes.

Invalid answers are rejected in place by prompt_toolkit and the question is
asked again.
"""
from __future__ import annotations

from typing import Any, Callable

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import (
    AnyFormattedText,
    FormattedText,
    merge_formatted_text,
)
from prompt_toolkit.validation import Validator

from arbor.themes import OneColors
from arbor.validators import YES_ANSWERS, yes_no_validator

QUESTION_PREFIX = FormattedText([(OneColors.GREEN, "? ")])


def _question(message: AnyFormattedText, suffix: str) -> AnyFormattedText:
    return merge_formatted_text(
        [QUESTION_PREFIX, message, FormattedText([(OneColors.CYAN, suffix)])]
    )


def _finish_answer(
    answer: str, default: Any, transform: Callable[[str], Any] | None
) -> Any:
    if answer == "":
        return default
    return transform(answer) if transform else answer


def _is_yes(answer: str) -> bool:
    answer = answer.strip().lower()
    return answer == "" or answer in YES_ANSWERS


def ask(
    question: AnyFormattedText,
    default: Any = None,
    validator: Validator | None = None,
    transform: Callable[[str], Any] | None = None,
    session: PromptSession | None = None,
) -> Any:
    """
    Ask a question and return the answer.

    An empty answer returns `default` untransformed; anything else is run
    through `transform` when given.
    """
    session = session or PromptSession()
    answer = session.prompt(_question(question, ": "), validator=validator)
    return _finish_answer(answer.strip(), default, transform)


async def ask_async(
    question: AnyFormattedText,
    default: Any = None,
    validator: Validator | None = None,
    transform: Callable[[str], Any] | None = None,
    session: PromptSession | None = None,
) -> Any:
    session = session or PromptSession()
    answer = await session.prompt_async(_question(question, ": "), validator=validator)
    return _finish_answer(answer.strip(), default, transform)


def confirm(
    question: AnyFormattedText = "Are you sure?",
    session: PromptSession | None = None,
) -> bool:
    """Ask a yes/no question; an empty answer counts as yes."""
    session = session or PromptSession()
    answer = session.prompt(_question(question, " (Y/n) "), validator=yes_no_validator())
    return _is_yes(answer)


async def confirm_async(
    question: AnyFormattedText = "Are you sure?",
    session: PromptSession | None = None,
) -> bool:
    session = session or PromptSession()
    answer = await session.prompt_async(
        _question(question, " (Y/n) "), validator=yes_no_validator()
    )
    return _is_yes(answer)
