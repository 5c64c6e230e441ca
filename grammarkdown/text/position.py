"""Line/character positions within source text."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Zero-based line and character offset within a source file."""

    line: int
    character: int

    def __repr__(self) -> str:
        return f"Position({self.line}, {self.character})"


@dataclass(frozen=True, slots=True)
class Range:
    """Start and end positions of a diagnostic."""

    start: Position
    end: Position

    @staticmethod
    def empty(position: Position) -> "Range":
        """Create a Range that starts and ends at the same position."""
        return Range(position, position)

    def is_empty(self) -> bool:
        return self.start == self.end

    def __repr__(self) -> str:
        return f"Range({self.start!r}, {self.end!r})"
