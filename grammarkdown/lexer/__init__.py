"""Lexer vocabulary."""

from grammarkdown.lexer.tokens import SyntaxKind, string_to_token, token_to_string

__all__ = [
    "SyntaxKind",
    "string_to_token",
    "token_to_string",
]
