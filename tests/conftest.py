import logging

import pytest
from rich.console import Console as RichConsole

from arbor.console import Console
from arbor.themes import get_arbor_theme


@pytest.fixture
def console():
    """A console wide enough that messages are never wrapped."""
    return Console(
        out=RichConsole(width=200, theme=get_arbor_theme()),
        err=RichConsole(width=200, theme=get_arbor_theme(), stderr=True),
    )


@pytest.fixture(autouse=True)
def reset_logger_level():
    logger = logging.getLogger("arbor")
    level = logger.level
    yield
    logger.setLevel(level)
