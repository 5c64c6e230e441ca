import pytest

from grammarkdown.diagnostics import (
    _0_EXPECTED,
    _0_OR_1,
    DIAGNOSTICS,
    OBSOLETE_0,
    Diagnostic,
    find_diagnostic,
    validate_catalog,
)


def test_catalog_codes_are_stable() -> None:
    assert [(key, diagnostic.code) for key, diagnostic in DIAGNOSTICS.items()] == [
        ("CONSTANT_EXPECTED", 1000),
        ("_0_EXPECTED", 1001),
        ("_0_OR_1", 0),
        ("UNEXPECTED_TOKEN_0", 1002),
        ("INVALID_CHARACTER", 1003),
        ("UNTERMINATED_STRING_LITERAL", 1004),
        ("INVALID_ESCAPE_SEQUENCE", 1005),
        ("DIGIT_EXPECTED", 1006),
        ("PRODUCTION_EXPECTED", 1007),
        ("UNTERMINATED_IDENTIFIER_LITERAL", 1008),
        ("OBSOLETE_0", 1009),
        ("CANNOT_FIND_NAME_0", 2000),
        ("DUPLICATE_IDENTIFIER_0", 2001),
        ("DUPLICATE_TERMINAL_0", 2002),
    ]


def test_only_obsolete_is_a_warning() -> None:
    warnings = [key for key, diagnostic in DIAGNOSTICS.items() if diagnostic.is_warning]

    assert warnings == ["OBSOLETE_0"]
    assert OBSOLETE_0.severity == "warning"
    assert _0_EXPECTED.severity == "error"


def test_shipped_catalog_is_valid() -> None:
    validate_catalog()


def test_validate_catalog_allows_shared_composite_code() -> None:
    validate_catalog({"A": Diagnostic(0, "{0}"), "B": Diagnostic(0, "{0} or {1}")})


def test_validate_catalog_rejects_duplicate_codes() -> None:
    catalog = {"A": Diagnostic(1000, "a"), "B": Diagnostic(1000, "b")}

    with pytest.raises(ValueError, match="Duplicate diagnostic code 1000"):
        validate_catalog(catalog)


def test_validate_catalog_rejects_negative_codes() -> None:
    with pytest.raises(ValueError, match="negative"):
        validate_catalog({"A": Diagnostic(-1, "a")})


def test_find_diagnostic_by_code() -> None:
    assert find_diagnostic(1001) is _0_EXPECTED
    assert find_diagnostic(0) is None
    assert find_diagnostic(9999) is None
    assert _0_OR_1.code == 0
