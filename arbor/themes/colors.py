# Arbor CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color constants and the rich theme used by the Arbor console.

`OneColors` holds hex colors from the One Dark palette; members ending in `_b`
are the bold variants. They can be dropped directly into rich markup:

    console.print(f"[{OneColors.GREEN}]done[/]")

`get_arbor_theme()` maps the console message levels (debug, notice, success,
warn, error) to those colors.
"""
from rich.style import Style
from rich.theme import Theme


class ColorsMeta(type):
    """Adds `_b` bold variants for every color declared on the class."""

    def __new__(mcs, name, bases, namespace):
        colors = {
            key: value
            for key, value in namespace.items()
            if key.isupper() and isinstance(value, str)
        }
        for key, value in colors.items():
            namespace.setdefault(f"{key}_b", f"bold {value}")
        return super().__new__(mcs, name, bases, namespace)


class OneColors(metaclass=ColorsMeta):
    BLACK = "#282C34"
    WHITE = "#ABB2BF"
    COMMENT_GREY = "#5C6370"
    LIGHT_RED = "#E06C75"
    DARK_RED = "#BE5046"
    GREEN = "#98C379"
    LIGHT_YELLOW = "#E5C07B"
    DARK_YELLOW = "#D19A66"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"
    CYAN = "#56B6C2"


def get_arbor_theme() -> Theme:
    """Return the rich theme backing the console message levels."""
    return Theme(
        {
            "debug": Style.parse(OneColors.CYAN),
            "info": Style.parse(OneColors.WHITE),
            "notice": Style.parse(OneColors.BLUE_b),
            "success": Style.parse(OneColors.GREEN_b),
            "warn": Style.parse(OneColors.LIGHT_YELLOW),
            "error": Style.parse(OneColors.LIGHT_RED),
            "title": Style.parse(OneColors.WHITE_b),
            "heading": Style.parse(OneColors.CYAN_b),
            "muted": Style.parse(OneColors.COMMENT_GREY),
        }
    )
