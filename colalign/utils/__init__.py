"""Utility modules for colalign."""

from .terminal_utils import (
    WIDTH_TABLES,
    calculate_display_width,
    calculate_terminal_width,
    get_width_function,
    pad_to_width,
)

__all__ = [
    "WIDTH_TABLES",
    "calculate_display_width",
    "calculate_terminal_width",
    "get_width_function",
    "pad_to_width",
]
