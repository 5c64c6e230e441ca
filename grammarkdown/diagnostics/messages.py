"""Append-only diagnostic log attributed to the source files being compiled."""

from __future__ import annotations

import logging
from bisect import bisect_right
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from grammarkdown.diagnostics.codes import CODE_PREFIX
from grammarkdown.diagnostics.diagnostic import Diagnostic
from grammarkdown.diagnostics.format import format_string, unwrap_arguments
from grammarkdown.text import Position, Range

if TYPE_CHECKING:
    from grammarkdown.nodes import Node, SourceFile

logger = logging.getLogger(__name__)

MessageCallback = Callable[[str, int], None]


@dataclass(frozen=True, slots=True)
class DiagnosticInfoOptions:
    """Controls which optional fields a DiagnosticInfo snapshot carries."""

    format_message: bool = False
    detailed_message: bool = True


_DEFAULT_INFO_OPTIONS = DiagnosticInfoOptions()


@dataclass(frozen=True, slots=True)
class DiagnosticInfo:
    """Snapshot of one reported diagnostic."""

    diagnostic_index: int
    code: int
    message: str
    message_arguments: tuple[Any, ...] | None
    warning: bool
    range: Range | None
    source_file: SourceFile | None
    node: Node | None
    pos: int | None
    formatted_message: str | None = None


@dataclass(frozen=True, slots=True)
class _Entry:
    diagnostic: Diagnostic
    arguments: tuple[Any, ...] | None = None
    pos: int | None = None
    node: Node | None = None


@dataclass(frozen=True, slots=True)
class _SourceFileOffset:
    source_file: SourceFile
    first_diagnostic_index: int


class DiagnosticLog(Protocol):
    """Capability surface shared by the real and the discarding log."""

    def set_source_file(self, source_file: SourceFile) -> None: ...

    def report(self, pos: int | None, diagnostic: Diagnostic, *args: Any) -> None: ...

    def report_node(self, node: Node | None, diagnostic: Diagnostic, *args: Any) -> None: ...

    def count(self) -> int: ...

    def get_message(self, diagnostic_index: int, *, detailed: bool = True) -> str: ...

    def get_diagnostic(self, diagnostic_index: int) -> Diagnostic | None: ...

    def get_diagnostic_arguments(self, diagnostic_index: int) -> tuple[Any, ...] | None: ...

    def get_diagnostic_node(self, diagnostic_index: int) -> Node | None: ...

    def get_diagnostic_pos(self, diagnostic_index: int) -> int | None: ...

    def get_diagnostic_source_file(self, diagnostic_index: int) -> SourceFile | None: ...

    def get_diagnostic_range(self, diagnostic_index: int) -> Range | None: ...

    def get_diagnostic_info(
        self,
        diagnostic_index: int,
        options: DiagnosticInfoOptions | None = None,
    ) -> DiagnosticInfo | None: ...

    def get_diagnostic_infos(self, options: DiagnosticInfoOptions | None = None) -> list[DiagnosticInfo]: ...

    def get_diagnostic_infos_for_source_file(
        self,
        source_file: SourceFile,
        options: DiagnosticInfoOptions | None = None,
    ) -> list[DiagnosticInfo]: ...

    def for_each(self, callback: MessageCallback) -> None: ...


class DiagnosticMessages:
    """Ordered log of reported diagnostics.

    Entries are addressed by their insertion index. Instead of storing a file per
    entry, `set_source_file` records the entry count at which a file becomes
    active; every later entry belongs to that file until the next registration.
    """

    def __init__(self) -> None:
        self._entries: list[_Entry] = []
        self._source_files: list[_SourceFileOffset] = []

    def set_source_file(self, source_file: SourceFile) -> None:
        offset = len(self._entries)
        self._source_files.append(_SourceFileOffset(source_file, offset))
        logger.debug("Attributing diagnostics from index %d to %s", offset, source_file.filename)

    def report(self, pos: int | None, diagnostic: Diagnostic, *args: Any) -> None:
        self._report_diagnostic(diagnostic, args, pos=pos)

    def report_node(self, node: Node | None, diagnostic: Diagnostic, *args: Any) -> None:
        pos = node.start if node is not None else None
        self._report_diagnostic(diagnostic, args, pos=pos, node=node)

    def count(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[DiagnosticInfo]:
        for diagnostic_index in range(len(self._entries)):
            info = self.get_diagnostic_info(diagnostic_index)
            if info is not None:
                yield info

    def get_message(self, diagnostic_index: int, *, detailed: bool = True) -> str:
        """Render one diagnostic.

        Detailed messages look like `file.grammar(3,7): error GM1001: Production expected.`;
        the position is the raw offset when the file has no line map and is left
        out when the diagnostic has no position.
        """
        entry = self._entry(diagnostic_index)
        if entry is None:
            return ""

        text = ""
        if detailed:
            source_file = self.get_diagnostic_source_file(diagnostic_index)
            text += source_file.filename if source_file is not None else ""
            if entry.pos is not None:
                line_map = source_file.line_map if source_file is not None else None
                if line_map is not None:
                    text += f"({line_map.format_position(entry.pos)})"
                else:
                    text += f"({entry.pos})"
            text += ": "
            text += entry.diagnostic.severity
            text += f" {CODE_PREFIX}{entry.diagnostic.code}: "

        message = entry.diagnostic.message
        if entry.arguments:
            message = format_string(message, entry.arguments)

        return text + message

    def get_diagnostic(self, diagnostic_index: int) -> Diagnostic | None:
        entry = self._entry(diagnostic_index)
        return entry.diagnostic if entry is not None else None

    def get_diagnostic_arguments(self, diagnostic_index: int) -> tuple[Any, ...] | None:
        entry = self._entry(diagnostic_index)
        return entry.arguments if entry is not None else None

    def get_diagnostic_node(self, diagnostic_index: int) -> Node | None:
        entry = self._entry(diagnostic_index)
        return entry.node if entry is not None else None

    def get_diagnostic_pos(self, diagnostic_index: int) -> int | None:
        entry = self._entry(diagnostic_index)
        return entry.pos if entry is not None else None

    def get_diagnostic_source_file(self, diagnostic_index: int) -> SourceFile | None:
        """Find the file that was active when the diagnostic was reported.

        Files registered back to back share an offset; the last of them wins.
        """
        # bisect_right lands past every record whose offset equals the index.
        offset = bisect_right(
            self._source_files,
            diagnostic_index,
            key=lambda record: record.first_diagnostic_index,
        )
        if offset == 0:
            return None
        return self._source_files[offset - 1].source_file

    def get_diagnostic_range(self, diagnostic_index: int) -> Range | None:
        entry = self._entry(diagnostic_index)
        if entry is None:
            return None

        source_file = self.get_diagnostic_source_file(diagnostic_index)
        if entry.node is not None:
            start, end = entry.node.start, entry.node.end
        else:
            start = end = entry.pos if entry.pos is not None else 0

        return Range(
            _line_and_character_of_position(start, source_file),
            _line_and_character_of_position(end, source_file),
        )

    def get_diagnostic_info(
        self,
        diagnostic_index: int,
        options: DiagnosticInfoOptions | None = None,
    ) -> DiagnosticInfo | None:
        entry = self._entry(diagnostic_index)
        if entry is None:
            return None

        resolved = options if options is not None else _DEFAULT_INFO_OPTIONS
        formatted_message = None
        if resolved.format_message:
            formatted_message = self.get_message(diagnostic_index, detailed=resolved.detailed_message)

        return DiagnosticInfo(
            diagnostic_index=diagnostic_index,
            code=entry.diagnostic.code,
            message=entry.diagnostic.message,
            message_arguments=entry.arguments,
            warning=entry.diagnostic.is_warning,
            range=self.get_diagnostic_range(diagnostic_index),
            source_file=self.get_diagnostic_source_file(diagnostic_index),
            node=entry.node,
            pos=entry.pos,
            formatted_message=formatted_message,
        )

    def get_diagnostic_infos(self, options: DiagnosticInfoOptions | None = None) -> list[DiagnosticInfo]:
        infos: list[DiagnosticInfo] = []
        for diagnostic_index in range(len(self._entries)):
            info = self.get_diagnostic_info(diagnostic_index, options)
            if info is not None:
                infos.append(info)
        return infos

    def get_diagnostic_infos_for_source_file(
        self,
        source_file: SourceFile,
        options: DiagnosticInfoOptions | None = None,
    ) -> list[DiagnosticInfo]:
        infos: list[DiagnosticInfo] = []
        for diagnostic_index in range(len(self._entries)):
            if self.get_diagnostic_source_file(diagnostic_index) is not source_file:
                continue
            info = self.get_diagnostic_info(diagnostic_index, options)
            if info is not None:
                infos.append(info)
        return infos

    def for_each(self, callback: MessageCallback) -> None:
        for diagnostic_index in range(len(self._entries)):
            callback(self.get_message(diagnostic_index, detailed=True), diagnostic_index)

    def _entry(self, diagnostic_index: int) -> _Entry | None:
        if 0 <= diagnostic_index < len(self._entries):
            return self._entries[diagnostic_index]
        return None

    def _report_diagnostic(
        self,
        diagnostic: Diagnostic,
        args: tuple[Any, ...],
        *,
        pos: int | None = None,
        node: Node | None = None,
    ) -> None:
        arguments = unwrap_arguments(args)
        self._entries.append(
            _Entry(
                diagnostic=diagnostic,
                arguments=arguments or None,
                pos=pos,
                node=node,
            )
        )
        logger.debug(
            "Reported %s%d at %s (index %d)",
            CODE_PREFIX,
            diagnostic.code,
            pos,
            len(self._entries) - 1,
        )


@dataclass(frozen=True, slots=True)
class NullDiagnosticMessages:
    """Log that discards everything reported to it."""

    def set_source_file(self, source_file: SourceFile) -> None:
        return None

    def report(self, pos: int | None, diagnostic: Diagnostic, *args: Any) -> None:
        return None

    def report_node(self, node: Node | None, diagnostic: Diagnostic, *args: Any) -> None:
        return None

    def count(self) -> int:
        return 0

    def __len__(self) -> int:
        return 0

    def __iter__(self) -> Iterator[DiagnosticInfo]:
        return iter(())

    def get_message(self, diagnostic_index: int, *, detailed: bool = True) -> str:
        return ""

    def get_diagnostic(self, diagnostic_index: int) -> Diagnostic | None:
        return None

    def get_diagnostic_arguments(self, diagnostic_index: int) -> tuple[Any, ...] | None:
        return None

    def get_diagnostic_node(self, diagnostic_index: int) -> Node | None:
        return None

    def get_diagnostic_pos(self, diagnostic_index: int) -> int | None:
        return None

    def get_diagnostic_source_file(self, diagnostic_index: int) -> SourceFile | None:
        return None

    def get_diagnostic_range(self, diagnostic_index: int) -> Range | None:
        return None

    def get_diagnostic_info(
        self,
        diagnostic_index: int,
        options: DiagnosticInfoOptions | None = None,
    ) -> DiagnosticInfo | None:
        return None

    def get_diagnostic_infos(self, options: DiagnosticInfoOptions | None = None) -> list[DiagnosticInfo]:
        return []

    def get_diagnostic_infos_for_source_file(
        self,
        source_file: SourceFile,
        options: DiagnosticInfoOptions | None = None,
    ) -> list[DiagnosticInfo]:
        return []

    def for_each(self, callback: MessageCallback) -> None:
        return None


NULL_DIAGNOSTIC_MESSAGES = NullDiagnosticMessages()
"""Shared discarding log for callers that do not collect diagnostics."""


def _line_and_character_of_position(pos: int, source_file: SourceFile | None) -> Position:
    line_map = source_file.line_map if source_file is not None else None
    if line_map is None:
        return Position(0, pos)
    return line_map.get_line_and_character_of_position(pos)
