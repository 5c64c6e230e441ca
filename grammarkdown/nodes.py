"""Syntax nodes and source files, as seen by diagnostics."""

from __future__ import annotations

from dataclasses import dataclass, field

from grammarkdown.lexer import SyntaxKind
from grammarkdown.text import LineMap


@dataclass(frozen=True, slots=True)
class Node:
    """A syntax node spanning `[start, end)` in its source text."""

    kind: SyntaxKind
    start: int
    end: int


@dataclass(slots=True, eq=False)
class SourceFile:
    """A named source text whose line map is built on first use.

    Files registered without text have no line map; diagnostics attributed to
    them fall back to raw offsets.
    """

    filename: str
    text: str | None = None
    _line_map: LineMap | None = field(default=None, init=False, repr=False)

    @property
    def line_map(self) -> LineMap | None:
        if self._line_map is None and self.text is not None:
            self._line_map = LineMap(self.text)
        return self._line_map
