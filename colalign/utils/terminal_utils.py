"""Terminal display utilities for column alignment.

This module measures how many terminal cells a piece of text occupies, handling
ANSI escape codes, emoji, combining marks and East Asian characters, and pads
text to a target width measured in cells rather than code points.
"""

import re
import unicodedata
from typing import Callable

from prompt_toolkit.utils import get_cwidth

from ..exceptions import ConfigError

# Compile regex once at module level for performance
ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m")

# Unicode ranges for emoji
EMOJI_START = 0x1F300
EMOJI_END = 0x1FAFF

DEFAULT_WIDTH_TABLE = "unicode"


def calculate_display_width(text: str) -> int:
    """Calculate the visible width of text in terminal columns.

    This function correctly handles:
    - ANSI escape codes (removed from width calculation)
    - Emoji characters (counted as 2 columns)
    - East Asian Wide/Fullwidth characters (counted as 2 columns)
    - Combining characters (counted as 0 columns)
    - Regular ASCII characters (counted as 1 column)

    The classification follows the ``unicodedata`` database shipped with the
    running interpreter.

    Args:
        text: Input text that may contain ANSI codes, emoji, or unicode characters

    Returns:
        Number of terminal columns the text will occupy when displayed

    Examples:
        >>> calculate_display_width("Hello")
        5
        >>> calculate_display_width("你好")
        4
        >>> calculate_display_width("\033[31mRed\033[0m")
        3
    """
    clean_text = ANSI_ESCAPE_RE.sub("", text)

    width = 0
    for char in clean_text:
        if unicodedata.combining(char):
            continue

        code_point = ord(char)

        if EMOJI_START <= code_point <= EMOJI_END:
            width += 2
            continue

        # W = Wide, F = Fullwidth (both occupy 2 columns)
        eaw = unicodedata.east_asian_width(char)
        if eaw in ("W", "F"):
            width += 2
        else:
            width += 1

    return width


def calculate_terminal_width(text: str) -> int:
    """Calculate the visible width of text using prompt_toolkit's wcwidth table.

    ANSI escape codes are removed first. Characters the table reports as
    non-printable count as 0 columns.
    """
    return sum(get_cwidth(char) for char in ANSI_ESCAPE_RE.sub("", text))


WIDTH_TABLES: dict[str, Callable[[str], int]] = {
    "unicode": calculate_display_width,
    "terminal": calculate_terminal_width,
}


def get_width_function(name: str = DEFAULT_WIDTH_TABLE) -> Callable[[str], int]:
    """Return the display width function registered under ``name``.

    Raises:
        ConfigError: If no width table has that name
    """
    try:
        return WIDTH_TABLES[name]
    except KeyError:
        choices = ", ".join(sorted(WIDTH_TABLES))
        raise ConfigError(f"Unknown width table: {name!r}. Must be one of: {choices}") from None


def pad_to_width(
    text: str,
    target_width: int,
    align: str = "left",
    fill_char: str = " ",
    width_func: Callable[[str], int] = calculate_display_width,
) -> str:
    """Pad text to reach target width with proper alignment.

    Args:
        text: Text to pad (may contain ANSI codes)
        target_width: Target width in terminal columns
        align: Alignment mode - "left", "right", or "center"
        fill_char: Character to use for padding (default: space)
        width_func: Function measuring the display width of ``text``

    Returns:
        Padded text

    Examples:
        >>> pad_to_width("Hello", 10)
        'Hello     '
        >>> pad_to_width("你好", 10)
        '你好      '
        >>> pad_to_width("Test", 10, align="center")
        '   Test   '
    """
    if align not in ("left", "right", "center"):
        raise ValueError(f"Invalid align value: {align}. Must be 'left', 'right', or 'center'")

    current_width = width_func(text)

    if current_width >= target_width:
        return text

    padding_needed = target_width - current_width

    if align == "left":
        return text + (fill_char * padding_needed)
    elif align == "right":
        return (fill_char * padding_needed) + text
    else:
        left_padding = padding_needed // 2
        right_padding = padding_needed - left_padding
        return (fill_char * left_padding) + text + (fill_char * right_padding)
