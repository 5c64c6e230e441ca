"""Grammarkdown syntax kinds and their display text."""

from enum import IntEnum
from types import MappingProxyType
from typing import Final, Mapping


class SyntaxKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    UNKNOWN = 0
    END_OF_FILE = 1
    LINE_TERMINATOR = 2
    INDENT = 3
    DEDENT = 4

    # -------------------------
    # Literals
    # -------------------------
    STRING_LITERAL = 10
    TERMINAL = 11  # `x`
    UNICODE_CHARACTER_LITERAL = 12  # <U+0000>
    PROSE = 13  # > text
    IDENTIFIER = 14

    # -------------------------
    # Keywords
    # -------------------------
    BUT_KEYWORD = 20
    DEFINE_KEYWORD = 21
    DEFAULT_KEYWORD = 22
    EMPTY_KEYWORD = 23
    FALSE_KEYWORD = 24
    GOAL_KEYWORD = 25
    HERE_KEYWORD = 26
    IMPORT_KEYWORD = 27
    LEXICAL_KEYWORD = 28
    LINE_KEYWORD = 29
    LOOKAHEAD_KEYWORD = 30
    NO_KEYWORD = 31
    NOT_KEYWORD = 32
    OF_KEYWORD = 33
    ONE_KEYWORD = 34
    OR_KEYWORD = 35
    THROUGH_KEYWORD = 36
    TRUE_KEYWORD = 37

    # -------------------------
    # Punctuation / operators
    # -------------------------
    AT = 50  # @
    COLON = 51  # :
    COLON_COLON = 52  # ::
    COLON_COLON_COLON = 53  # :::
    COMMA = 54  # ,
    EQUALS = 55  # =
    EQUALS_EQUALS = 56  # ==
    EXCLAMATION_EQUALS = 57  # !=
    NOT_EQUAL_TO = 58  # ≠
    ELEMENT_OF = 59  # ∈
    NOT_AN_ELEMENT_OF = 60  # ∉
    LESS_THAN_EXCLAMATION = 61  # <!
    LESS_THAN_MINUS = 62  # <-
    GREATER_THAN = 63  # >
    QUESTION = 64  # ?
    OPEN_BRACE = 65  # {
    CLOSE_BRACE = 66  # }
    OPEN_BRACKET = 67  # [
    CLOSE_BRACKET = 68  # ]
    OPEN_BRACKET_GREATER_THAN = 69  # [>
    OPEN_PAREN = 70  # (
    CLOSE_PAREN = 71  # )

    @property
    def is_keyword(self) -> bool:
        return SyntaxKind.BUT_KEYWORD <= self <= SyntaxKind.TRUE_KEYWORD

    @property
    def is_punctuation(self) -> bool:
        return SyntaxKind.AT <= self <= SyntaxKind.CLOSE_PAREN


_TOKEN_TEXT: Final[Mapping[SyntaxKind, str]] = MappingProxyType(
    {
        SyntaxKind.BUT_KEYWORD: "but",
        SyntaxKind.DEFINE_KEYWORD: "define",
        SyntaxKind.DEFAULT_KEYWORD: "default",
        SyntaxKind.EMPTY_KEYWORD: "empty",
        SyntaxKind.FALSE_KEYWORD: "false",
        SyntaxKind.GOAL_KEYWORD: "goal",
        SyntaxKind.HERE_KEYWORD: "here",
        SyntaxKind.IMPORT_KEYWORD: "import",
        SyntaxKind.LEXICAL_KEYWORD: "lexical",
        SyntaxKind.LINE_KEYWORD: "line",
        SyntaxKind.LOOKAHEAD_KEYWORD: "lookahead",
        SyntaxKind.NO_KEYWORD: "no",
        SyntaxKind.NOT_KEYWORD: "not",
        SyntaxKind.OF_KEYWORD: "of",
        SyntaxKind.ONE_KEYWORD: "one",
        SyntaxKind.OR_KEYWORD: "or",
        SyntaxKind.THROUGH_KEYWORD: "through",
        SyntaxKind.TRUE_KEYWORD: "true",
        SyntaxKind.AT: "@",
        SyntaxKind.COLON: ":",
        SyntaxKind.COLON_COLON: "::",
        SyntaxKind.COLON_COLON_COLON: ":::",
        SyntaxKind.COMMA: ",",
        SyntaxKind.EQUALS: "=",
        SyntaxKind.EQUALS_EQUALS: "==",
        SyntaxKind.EXCLAMATION_EQUALS: "!=",
        SyntaxKind.NOT_EQUAL_TO: "≠",
        SyntaxKind.ELEMENT_OF: "∈",
        SyntaxKind.NOT_AN_ELEMENT_OF: "∉",
        SyntaxKind.LESS_THAN_EXCLAMATION: "<!",
        SyntaxKind.LESS_THAN_MINUS: "<-",
        SyntaxKind.GREATER_THAN: ">",
        SyntaxKind.QUESTION: "?",
        SyntaxKind.OPEN_BRACE: "{",
        SyntaxKind.CLOSE_BRACE: "}",
        SyntaxKind.OPEN_BRACKET: "[",
        SyntaxKind.CLOSE_BRACKET: "]",
        SyntaxKind.OPEN_BRACKET_GREATER_THAN: "[>",
        SyntaxKind.OPEN_PAREN: "(",
        SyntaxKind.CLOSE_PAREN: ")",
    }
)

_TEXT_TOKEN: Final[Mapping[str, SyntaxKind]] = MappingProxyType({text: kind for kind, text in _TOKEN_TEXT.items()})


def token_to_string(token: SyntaxKind | str, quoted: bool = False) -> str:
    """Display text for a token kind.

    Kinds with fixed text (keywords, punctuation) are wrapped in single quotes when
    `quoted` is set. Other kinds render as a bracketed name and are never quoted.
    Plain strings are taken as already-rendered display text.
    """
    if isinstance(token, SyntaxKind):
        text = _TOKEN_TEXT.get(token)
        if text is None:
            return f"«{token.name}»"
        return f"'{text}'" if quoted else text
    return token


def string_to_token(text: str) -> SyntaxKind | None:
    """Look up the kind whose fixed text is `text`."""
    return _TEXT_TOKEN.get(text)
