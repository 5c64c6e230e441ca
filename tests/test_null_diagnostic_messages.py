from grammarkdown.diagnostics import (
    _0_EXPECTED,
    INVALID_CHARACTER,
    NULL_DIAGNOSTIC_MESSAGES,
    DiagnosticInfoOptions,
    DiagnosticLog,
    DiagnosticMessages,
    NullDiagnosticMessages,
    collect_messages,
)
from grammarkdown.lexer import SyntaxKind
from grammarkdown.nodes import Node, SourceFile


def _report_some(messages: DiagnosticLog) -> None:
    messages.set_source_file(SourceFile("test.grammar", "abc"))
    messages.report(0, INVALID_CHARACTER)
    messages.report(1, _0_EXPECTED, ["Identifier"])
    messages.report_node(Node(SyntaxKind.IDENTIFIER, 0, 3), _0_EXPECTED, "x")
    messages.report_node(None, INVALID_CHARACTER)


def test_null_log_discards_reports() -> None:
    messages = NullDiagnosticMessages()
    _report_some(messages)

    assert messages.count() == 0
    assert len(messages) == 0
    assert list(messages) == []


def test_null_log_never_calls_back() -> None:
    calls: list[int] = []
    _report_some(NULL_DIAGNOSTIC_MESSAGES)

    NULL_DIAGNOSTIC_MESSAGES.for_each(lambda _, index: calls.append(index))

    assert calls == []
    assert collect_messages(NULL_DIAGNOSTIC_MESSAGES) == []


def test_null_log_accessors_are_absent() -> None:
    messages = NULL_DIAGNOSTIC_MESSAGES
    _report_some(messages)

    assert messages.get_message(0) == ""
    assert messages.get_diagnostic(0) is None
    assert messages.get_diagnostic_arguments(0) is None
    assert messages.get_diagnostic_node(0) is None
    assert messages.get_diagnostic_pos(0) is None
    assert messages.get_diagnostic_source_file(0) is None
    assert messages.get_diagnostic_range(0) is None
    assert messages.get_diagnostic_info(0, DiagnosticInfoOptions(format_message=True)) is None
    assert messages.get_diagnostic_infos() == []
    assert messages.get_diagnostic_infos_for_source_file(SourceFile("test.grammar")) == []


def test_both_logs_satisfy_the_same_surface() -> None:
    real = DiagnosticMessages()
    for messages in (real, NULL_DIAGNOSTIC_MESSAGES):
        _report_some(messages)

    assert real.count() == 4
    assert NULL_DIAGNOSTIC_MESSAGES.count() == 0
