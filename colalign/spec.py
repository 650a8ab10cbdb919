"""Alignment specifier parsing.

A specifier is a compact string of directives, one per column. Each directive
is an optional minimum width followed by an alignment symbol::

    <      left-align
    >      right-align
    =      center
    12>    right-align in a column at least 12 cells wide

The last directive's alignment governs every column past the end of the
specifier, so ``"<><"`` aligns column 0 left, column 1 right and all remaining
columns left. Minimum widths apply only to the columns they are written for.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from .exceptions import InvalidSpecError

logger = logging.getLogger(__name__)


class Alignment(Enum):
    """Per-column alignment mode."""

    LEFT = "<"
    RIGHT = ">"
    CENTER = "="

    @property
    def pad_side(self) -> str:
        """Name understood by ``pad_to_width``."""
        return {"<": "left", ">": "right", "=": "center"}[self.value]


SYMBOLS = {alignment.value: alignment for alignment in Alignment}


@dataclass(frozen=True)
class AlignmentSpec:
    """Parsed specifier: one alignment and one minimum width per directive."""

    alignments: tuple[Alignment, ...] = ()
    min_widths: tuple[int, ...] = ()

    def alignment(self, index: int) -> Alignment:
        """Alignment of column ``index``; the last directive repeats."""
        if not self.alignments:
            return Alignment.LEFT
        return self.alignments[min(index, len(self.alignments) - 1)]

    def min_width(self, index: int) -> int:
        """Minimum width of column ``index``; 0 past the last directive."""
        if index < len(self.min_widths):
            return self.min_widths[index]
        return 0

    def modes(self, count: int) -> list[Alignment]:
        """Alignment of each of the first ``count`` columns."""
        return [self.alignment(i) for i in range(count)]

    def __len__(self) -> int:
        return len(self.alignments)


def parse_spec(spec: str) -> AlignmentSpec:
    """Parse a specifier string into an :class:`AlignmentSpec`.

    Args:
        spec: Directive string such as ``"<><"`` or ``"<20>="``; may be empty

    Returns:
        The parsed specifier

    Raises:
        InvalidSpecError: If ``spec`` contains a character that is neither a
            digit nor an alignment symbol, or ends with a dangling width
    """
    alignments = []
    min_widths = []
    digits = ""

    for position, char in enumerate(spec):
        if char in "0123456789":
            digits += char
            continue
        if char not in SYMBOLS:
            raise InvalidSpecError(
                f"Invalid alignment character {char!r} at position {position} in {spec!r}",
                spec=spec,
                position=position,
            )
        alignments.append(SYMBOLS[char])
        min_widths.append(int(digits) if digits else 0)
        digits = ""

    if digits:
        raise InvalidSpecError(
            f"Width {digits} is not followed by an alignment symbol in {spec!r}",
            spec=spec,
            position=len(spec) - len(digits),
        )

    parsed = AlignmentSpec(tuple(alignments), tuple(min_widths))
    logger.debug("Parsed specifier %r into %d directive(s)", spec, len(parsed))
    return parsed
