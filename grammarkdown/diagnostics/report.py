"""Diagnostics helpers."""

from __future__ import annotations

from grammarkdown.diagnostics.messages import DiagnosticLog


def has_errors(messages: DiagnosticLog) -> bool:
    for diagnostic_index in range(messages.count()):
        diagnostic = messages.get_diagnostic(diagnostic_index)
        if diagnostic is not None and not diagnostic.is_warning:
            return True
    return False


def collect_messages(messages: DiagnosticLog, *, detailed: bool = True) -> list[str]:
    """Render every diagnostic in the log, in report order."""
    if detailed:
        rendered: list[str] = []
        messages.for_each(lambda message, _: rendered.append(message))
        return rendered
    return [messages.get_message(i, detailed=False) for i in range(messages.count())]


def dump_messages(messages: DiagnosticLog) -> None:
    """Print every detailed message with its index for debugging."""
    messages.for_each(lambda message, diagnostic_index: print(f"{diagnostic_index:03d} {message}"))
