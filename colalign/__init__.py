"""colalign - align whitespace-separated fields into columns."""

__version__ = "0.1.0"

from .align import Aligner, Line, align_lines, align_text, compute_widths, render_line, split_line
from .exceptions import ColalignError, ConfigError, InvalidSpecError
from .spec import Alignment, AlignmentSpec, parse_spec

__all__ = [
    "Aligner",
    "Alignment",
    "AlignmentSpec",
    "ColalignError",
    "ConfigError",
    "InvalidSpecError",
    "Line",
    "align_lines",
    "align_text",
    "compute_widths",
    "parse_spec",
    "render_line",
    "split_line",
]
