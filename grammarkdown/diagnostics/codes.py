"""Diagnostic codes and messages."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from grammarkdown.diagnostics.diagnostic import Diagnostic

CODE_PREFIX: Final[str] = "GM"
"""Prefix printed before a diagnostic code in detailed messages."""

CONSTANT_EXPECTED: Final[Diagnostic] = Diagnostic(code=1000, message="Constant expected.")
_0_EXPECTED: Final[Diagnostic] = Diagnostic(code=1001, message="{0} expected.")
_0_OR_1: Final[Diagnostic] = Diagnostic(code=0, message="{0} or {1}")
UNEXPECTED_TOKEN_0: Final[Diagnostic] = Diagnostic(code=1002, message="Unexpected token {0}.")
INVALID_CHARACTER: Final[Diagnostic] = Diagnostic(code=1003, message="Invalid character.")
UNTERMINATED_STRING_LITERAL: Final[Diagnostic] = Diagnostic(code=1004, message="Unterminated string literal.")
INVALID_ESCAPE_SEQUENCE: Final[Diagnostic] = Diagnostic(code=1005, message="Invalid escape sequence.")
DIGIT_EXPECTED: Final[Diagnostic] = Diagnostic(code=1006, message="Digit expected.")
PRODUCTION_EXPECTED: Final[Diagnostic] = Diagnostic(code=1007, message="Production expected.")
UNTERMINATED_IDENTIFIER_LITERAL: Final[Diagnostic] = Diagnostic(
    code=1008,
    message="Unterminated identifier literal.",
)
OBSOLETE_0: Final[Diagnostic] = Diagnostic(code=1009, message="Obsolete: {0}", severity="warning")
CANNOT_FIND_NAME_0: Final[Diagnostic] = Diagnostic(code=2000, message="Cannot find name: '{0}'.")
DUPLICATE_IDENTIFIER_0: Final[Diagnostic] = Diagnostic(code=2001, message="Duplicate identifier: '{0}'.")
DUPLICATE_TERMINAL_0: Final[Diagnostic] = Diagnostic(code=2002, message="Duplicate terminal: `{0}`.")

DIAGNOSTICS: Final[Mapping[str, Diagnostic]] = MappingProxyType(
    {
        "CONSTANT_EXPECTED": CONSTANT_EXPECTED,
        "_0_EXPECTED": _0_EXPECTED,
        "_0_OR_1": _0_OR_1,
        "UNEXPECTED_TOKEN_0": UNEXPECTED_TOKEN_0,
        "INVALID_CHARACTER": INVALID_CHARACTER,
        "UNTERMINATED_STRING_LITERAL": UNTERMINATED_STRING_LITERAL,
        "INVALID_ESCAPE_SEQUENCE": INVALID_ESCAPE_SEQUENCE,
        "DIGIT_EXPECTED": DIGIT_EXPECTED,
        "PRODUCTION_EXPECTED": PRODUCTION_EXPECTED,
        "UNTERMINATED_IDENTIFIER_LITERAL": UNTERMINATED_IDENTIFIER_LITERAL,
        "OBSOLETE_0": OBSOLETE_0,
        "CANNOT_FIND_NAME_0": CANNOT_FIND_NAME_0,
        "DUPLICATE_IDENTIFIER_0": DUPLICATE_IDENTIFIER_0,
        "DUPLICATE_TERMINAL_0": DUPLICATE_TERMINAL_0,
    }
)
"""Catalog in declaration order, keyed by symbolic name."""


def validate_catalog(catalog: Mapping[str, Diagnostic] = DIAGNOSTICS) -> None:
    """Raise ValueError if two reportable diagnostics share a code."""
    seen: dict[int, str] = {}
    for key, diagnostic in catalog.items():
        if diagnostic.code < 0:
            raise ValueError(f"Diagnostic {key} has a negative code: {diagnostic.code}")
        if diagnostic.code == 0:
            continue
        previous = seen.get(diagnostic.code)
        if previous is not None:
            raise ValueError(f"Duplicate diagnostic code {diagnostic.code}: {previous} and {key}")
        seen[diagnostic.code] = key


def find_diagnostic(code: int) -> Diagnostic | None:
    """Look up a reportable diagnostic by its numeric code."""
    if code == 0:
        return None
    for diagnostic in DIAGNOSTICS.values():
        if diagnostic.code == code:
            return diagnostic
    return None
