"""Core column alignment engine.

Alignment is a two-pass batch operation: every line is split into its
indentation and fields, the widest field of each column is measured across the
whole input, and only then is each line rendered with its fields padded to
those widths.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence, Union

from .spec import Alignment, AlignmentSpec, parse_spec
from .utils import calculate_display_width, get_width_function, pad_to_width

logger = logging.getLogger(__name__)

INDENT_CHARS = " \t"
LINE_TERMINATORS = ("\r\n", "\n", "\r")


@dataclass(frozen=True)
class Line:
    """One input line split into indentation and fields.

    For a blank line ``indentation`` holds the whole line content, so that it
    is reproduced exactly as received.
    """

    indentation: str
    fields: tuple[str, ...] = ()

    @property
    def is_blank(self) -> bool:
        return not self.fields


def strip_terminator(line: str) -> str:
    """Remove one trailing line terminator, if present."""
    for terminator in LINE_TERMINATORS:
        if line.endswith(terminator):
            return line[: -len(terminator)]
    return line


def split_line(line: str, until: Optional[int] = None) -> Line:
    """Split a raw input line into indentation and fields.

    Args:
        line: Raw line, with or without its terminator
        until: Maximum number of fields to split off; whatever follows them is
            kept as one final field. ``None`` splits the whole line.

    Returns:
        The split line
    """
    if until is not None and until < 0:
        raise ValueError(f"until must be non-negative, got {until}")

    content = strip_terminator(line)
    body = content.lstrip(INDENT_CHARS)

    if until is None:
        fields = body.split()
    else:
        fields = body.split(None, until)
        if len(fields) > until:
            fields[until] = fields[until].rstrip()

    if not fields:
        return Line(indentation=content)

    return Line(indentation=content[: len(content) - len(body)], fields=tuple(fields))


def compute_widths(
    lines: Iterable[Line],
    width_func: Callable[[str], int] = calculate_display_width,
    spec: Optional[AlignmentSpec] = None,
) -> list[int]:
    """Compute the display width of every column.

    A line only contributes to the columns it actually has. When ``spec`` is
    given, each column is widened to its minimum width.
    """
    widths: list[int] = []
    for line in lines:
        for index, field in enumerate(line.fields):
            width = width_func(field)
            if index == len(widths):
                widths.append(width)
            elif width > widths[index]:
                widths[index] = width

    if spec is not None:
        widths = [max(width, spec.min_width(index)) for index, width in enumerate(widths)]
    return widths


def render_line(
    line: Line,
    widths: Sequence[int],
    spec: AlignmentSpec,
    separator: str = " ",
    width_func: Callable[[str], int] = calculate_display_width,
) -> str:
    """Render one line with its fields padded to the column widths.

    The last field of a line never gets trailing padding: a left-aligned final
    field is emitted as is, a centered one only gets its leading half.
    """
    if line.is_blank:
        return line.indentation

    last = len(line.fields) - 1
    cells = []
    for index, field in enumerate(line.fields):
        alignment = spec.alignment(index)
        target = widths[index] if index < len(widths) else 0

        if index < last:
            cells.append(pad_to_width(field, target, alignment.pad_side, width_func=width_func))
        elif alignment is Alignment.LEFT:
            cells.append(field)
        else:
            padding = max(0, target - width_func(field))
            if alignment is Alignment.CENTER:
                padding //= 2
            cells.append(" " * padding + field)

    return line.indentation + separator.join(cells)


class Aligner:
    """Aligns the fields of a block of text into columns.

    The specifier is parsed when the aligner is created, so an invalid one is
    reported before any input is consumed.
    """

    def __init__(
        self,
        spec: Union[str, AlignmentSpec] = "",
        separator: str = " ",
        until: Optional[int] = None,
        width_table: str = "unicode",
    ):
        self.spec = parse_spec(spec) if isinstance(spec, str) else spec
        self.separator = separator
        self.until = until
        self.width_func = get_width_function(width_table)

    def align(self, lines: Iterable[str]) -> list[str]:
        """Align raw input lines; returns output lines without terminators."""
        split = [split_line(line, self.until) for line in lines]
        widths = compute_widths(split, self.width_func, self.spec)
        logger.debug("Aligning %d line(s) into %d column(s): widths=%s", len(split), len(widths), widths)
        return [render_line(line, widths, self.spec, self.separator, self.width_func) for line in split]


def align_lines(lines: Iterable[str], spec: Union[str, AlignmentSpec] = "", **options) -> list[str]:
    """Align raw input lines. ``options`` are passed to :class:`Aligner`."""
    return Aligner(spec, **options).align(lines)


def split_text(text: str) -> list[str]:
    """Split text into lines; a final terminator does not start a new line."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def align_text(text: str, spec: Union[str, AlignmentSpec] = "", **options) -> str:
    """Align a block of text; every output line ends with ``"\\n"``."""
    aligner = Aligner(spec, **options)
    return "".join(line + "\n" for line in aligner.align(split_text(text)))
