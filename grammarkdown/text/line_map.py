"""Offset <-> line/character mapping for one source text."""

from __future__ import annotations

import logging
from bisect import bisect_right
from typing import Final

from grammarkdown.text.position import Position

logger = logging.getLogger(__name__)

LINE_FEED: Final[str] = "\n"
CARRIAGE_RETURN: Final[str] = "\r"
LINE_SEPARATOR: Final[str] = "\u2028"
PARAGRAPH_SEPARATOR: Final[str] = "\u2029"
NEXT_LINE: Final[str] = "\u0085"

_LINE_BREAKS: Final[frozenset[str]] = frozenset(
    (LINE_FEED, CARRIAGE_RETURN, LINE_SEPARATOR, PARAGRAPH_SEPARATOR, NEXT_LINE)
)


def is_line_break(ch: str) -> bool:
    return ch in _LINE_BREAKS


def compute_line_starts(text: str) -> list[int]:
    """Return the offset of the first character of every line in `text`.

    `\\r\\n` counts as a single terminator. The result always ends with the start
    of the text following the last terminator, even when that line is empty.
    """
    line_starts: list[int] = []
    line_start = 0
    pos = 0
    length = len(text)
    while pos < length:
        ch = text[pos]
        pos += 1
        if ch == CARRIAGE_RETURN:
            if pos < length and text[pos] == LINE_FEED:
                pos += 1
        elif ch not in _LINE_BREAKS:
            continue
        line_starts.append(line_start)
        line_start = pos
    line_starts.append(line_start)
    return line_starts


class LineMap:
    """Lazily computed line starts for an immutable source text."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._line_starts: tuple[int, ...] | None = None

    @property
    def text(self) -> str:
        return self._text

    @property
    def line_starts(self) -> tuple[int, ...]:
        """Offsets at which each line begins (computed on first access)."""
        return self._compute_line_starts()

    @property
    def line_count(self) -> int:
        return len(self._compute_line_starts())

    def format_position(self, pos: int) -> str:
        """Render `pos` as a 1-based `line,character` pair."""
        position = self.get_line_and_character_of_position(pos)
        return f"{position.line + 1},{position.character + 1}"

    def get_line_and_character_of_position(self, pos: int) -> Position:
        line_starts = self._compute_line_starts()
        # Greatest line start <= pos; positions before the first start clamp to line 0.
        line = max(bisect_right(line_starts, pos) - 1, 0)
        return Position(line, pos - line_starts[line])

    def get_position_of_line_and_character(self, position: Position) -> int | None:
        """Return the offset of `position`, or None if it is not inside a line body."""
        line_starts = self._compute_line_starts()
        line, character = position.line, position.character
        if line < 0 or character < 0 or line >= len(line_starts):
            return None

        pos = line_starts[line] + character
        line_end = line_starts[line + 1] if line + 1 < len(line_starts) else len(self._text)
        if pos >= line_end:
            return None

        if is_line_break(self._text[pos]):
            return None

        return pos

    def _compute_line_starts(self) -> tuple[int, ...]:
        if self._line_starts is None:
            self._line_starts = tuple(compute_line_starts(self._text))
            logger.debug("Computed %d line starts over %d characters", len(self._line_starts), len(self._text))
        return self._line_starts

    def __repr__(self) -> str:
        return f"LineMap(length={len(self._text)})"
