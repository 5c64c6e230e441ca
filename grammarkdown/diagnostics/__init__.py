"""Diagnostics."""

from grammarkdown.diagnostics.codes import (
    _0_EXPECTED,
    _0_OR_1,
    CANNOT_FIND_NAME_0,
    CODE_PREFIX,
    CONSTANT_EXPECTED,
    DIAGNOSTICS,
    DIGIT_EXPECTED,
    DUPLICATE_IDENTIFIER_0,
    DUPLICATE_TERMINAL_0,
    INVALID_CHARACTER,
    INVALID_ESCAPE_SEQUENCE,
    OBSOLETE_0,
    PRODUCTION_EXPECTED,
    UNEXPECTED_TOKEN_0,
    UNTERMINATED_IDENTIFIER_LITERAL,
    UNTERMINATED_STRING_LITERAL,
    find_diagnostic,
    validate_catalog,
)
from grammarkdown.diagnostics.diagnostic import Diagnostic, Severity
from grammarkdown.diagnostics.format import format_list, format_string, unwrap_arguments
from grammarkdown.diagnostics.messages import (
    NULL_DIAGNOSTIC_MESSAGES,
    DiagnosticInfo,
    DiagnosticInfoOptions,
    DiagnosticLog,
    DiagnosticMessages,
    NullDiagnosticMessages,
)
from grammarkdown.diagnostics.report import collect_messages, dump_messages, has_errors

__all__ = [
    "CANNOT_FIND_NAME_0",
    "CODE_PREFIX",
    "CONSTANT_EXPECTED",
    "DIAGNOSTICS",
    "DIGIT_EXPECTED",
    "DUPLICATE_IDENTIFIER_0",
    "DUPLICATE_TERMINAL_0",
    "INVALID_CHARACTER",
    "INVALID_ESCAPE_SEQUENCE",
    "NULL_DIAGNOSTIC_MESSAGES",
    "OBSOLETE_0",
    "PRODUCTION_EXPECTED",
    "UNEXPECTED_TOKEN_0",
    "UNTERMINATED_IDENTIFIER_LITERAL",
    "UNTERMINATED_STRING_LITERAL",
    "_0_EXPECTED",
    "_0_OR_1",
    "Diagnostic",
    "DiagnosticInfo",
    "DiagnosticInfoOptions",
    "DiagnosticLog",
    "DiagnosticMessages",
    "NullDiagnosticMessages",
    "Severity",
    "collect_messages",
    "dump_messages",
    "find_diagnostic",
    "format_list",
    "format_string",
    "has_errors",
    "unwrap_arguments",
    "validate_catalog",
]
