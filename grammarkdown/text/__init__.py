"""Source text positions and line maps."""

from grammarkdown.text.line_map import LineMap, compute_line_starts, is_line_break
from grammarkdown.text.position import Position, Range

__all__ = [
    "LineMap",
    "Position",
    "Range",
    "compute_line_starts",
    "is_line_break",
]
