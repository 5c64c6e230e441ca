from grammarkdown.diagnostics import format_list, format_string, unwrap_arguments
from grammarkdown.lexer import SyntaxKind, string_to_token, token_to_string


def test_format_string_substitutes_positional_arguments() -> None:
    assert format_string("{0} expected.", "Identifier") == "Identifier expected."
    assert format_string("{0} or {1}", 1, 2) == "1 or 2"
    assert format_string("{1}{0}{1}", "a", "b") == "bab"
    assert format_string("No placeholders.") == "No placeholders."


def test_format_string_accepts_one_explicit_sequence() -> None:
    assert format_string("{0} expected.", ["Identifier"]) == "Identifier expected."
    assert format_string("{0} or {1}", ("x", "y")) == "x or y"


def test_format_string_unwraps_only_one_level() -> None:
    assert format_string("{0}", [["a", "b"]]) == "['a', 'b']"


def test_format_string_out_of_range_placeholder_is_empty() -> None:
    assert format_string("{5}", "only") == ""
    assert format_string("<{1}>", ["only"]) == "<>"
    assert format_string("{0} expected.") == " expected."


def test_format_string_does_not_split_strings() -> None:
    assert format_string("{0}", "abc") == "abc"
    assert unwrap_arguments(("abc",)) == ("abc",)
    assert unwrap_arguments((["a", "b"],)) == ("a", "b")
    assert unwrap_arguments((["a"], "b")) == (["a"], "b")


def test_format_list_of_display_strings() -> None:
    assert format_list([]) == ""
    assert format_list(["a"]) == "a"
    assert format_list(["a", "b"]) == "a or b"
    assert format_list(["a", "b", "c"]) == "a, b, or c"
    assert format_list(["a", "b", "c", "d"]) == "a, b, c, or d"


def test_format_list_quotes_fixed_text_tokens() -> None:
    assert format_list([SyntaxKind.COLON]) == "':'"
    assert format_list([SyntaxKind.COLON, SyntaxKind.OPEN_BRACE]) == "':' or '{'"
    assert format_list([SyntaxKind.AT, SyntaxKind.COMMA, SyntaxKind.QUESTION]) == "'@', ',', or '?'"


def test_format_list_uses_injected_renderer() -> None:
    def render(token: SyntaxKind | str, quoted: bool) -> str:
        return f'"{token}"' if quoted else str(token)

    assert format_list(["a", "b", "c"], token_to_string=render) == '"a", "b", or "c"'


def test_token_to_string() -> None:
    assert token_to_string(SyntaxKind.LOOKAHEAD_KEYWORD) == "lookahead"
    assert token_to_string(SyntaxKind.LOOKAHEAD_KEYWORD, True) == "'lookahead'"
    assert token_to_string(SyntaxKind.IDENTIFIER, True) == "«IDENTIFIER»"
    assert token_to_string("Identifier", True) == "Identifier"
    assert string_to_token("::") is SyntaxKind.COLON_COLON
    assert string_to_token("nope") is None
    assert SyntaxKind.OR_KEYWORD.is_keyword
    assert SyntaxKind.CLOSE_PAREN.is_punctuation
    assert not SyntaxKind.TERMINAL.is_keyword
