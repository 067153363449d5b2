# src/log2u/colors.py
"""
ANSI color and text-style codes for log2u.

Two independent families:
- Color: foreground colors (30-37), their reverse-video counterparts (40-47),
  bright foregrounds (90-97) and bright reverse-video (100-107).
- Style: SGR text attributes (bold, italic, underline, ...).

See https://en.wikipedia.org/wiki/ANSI_escape_code
"""

from enum import IntEnum

ANSI_TEMPLATE = "\x1b[%dm"

# Cancels foreground styling
RESET = 0
# Cancels background (reverse-video) styling
RESET_BACK = 49


class Color(IntEnum):
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    PINK = 35
    CYAN = 36
    WHITE = 37

    REVERSE_BLACK = 40
    REVERSE_RED = 41
    REVERSE_GREEN = 42
    REVERSE_YELLOW = 43
    REVERSE_BLUE = 44
    REVERSE_PINK = 45
    REVERSE_CYAN = 46
    REVERSE_WHITE = 47

    BRIGHT_BLACK = 90
    BRIGHT_RED = 91
    BRIGHT_GREEN = 92
    BRIGHT_YELLOW = 93
    BRIGHT_BLUE = 94
    BRIGHT_PINK = 95
    BRIGHT_CYAN = 96
    BRIGHT_WHITE = 97

    BRIGHT_REVERSE_BLACK = 100
    BRIGHT_REVERSE_RED = 101
    BRIGHT_REVERSE_GREEN = 102
    BRIGHT_REVERSE_YELLOW = 103
    BRIGHT_REVERSE_BLUE = 104
    BRIGHT_REVERSE_PINK = 105
    BRIGHT_REVERSE_CYAN = 106
    BRIGHT_REVERSE_WHITE = 107


class Style(IntEnum):
    RESET = 0
    BOLD = 1
    FAINT = 2
    ITALIC = 3
    UNDERLINE = 4
    REVERSE = 7
    CONCEALED = 8
    CROSSED_OUT = 9


def ansi(code: int) -> str:
    """Return the escape sequence for `code`. Any integer is accepted."""
    return ANSI_TEMPLATE % int(code)


def wrap(text: str, code: int) -> str:
    """Colorize text, closing with the background reset then the foreground reset."""
    return f"{ansi(code)}{text}{ansi(RESET_BACK)}{ansi(RESET)}"
