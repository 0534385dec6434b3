"""Coloured console output."""

from __future__ import annotations

import os
import sys
from enum import Enum

_RESET = "\x1b[0m"


class Color(Enum):
    """Terminal foreground colours and their ANSI codes."""

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37
    BRIGHT_BLACK = 90
    BRIGHT_RED = 91
    BRIGHT_GREEN = 92
    BRIGHT_YELLOW = 93
    BRIGHT_BLUE = 94
    BRIGHT_MAGENTA = 95
    BRIGHT_CYAN = 96
    BRIGHT_WHITE = 97


def colorize(message: str, color: Color) -> str:
    """Wrap ``message`` in the ANSI escape sequence for ``color``."""
    return f"\x1b[{color.value}m{message}{_RESET}"


def _colors_enabled() -> bool:
    return not os.environ.get("NO_COLOR")


def log(message: str, color: Color = Color.WHITE) -> None:
    """Print ``message`` on its own line in ``color``."""
    text = colorize(message, color) if _colors_enabled() else message
    print(text, file=sys.stdout, flush=True)