"""Message template substitution and token list formatting."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from typing import Any, Final

from grammarkdown.diagnostics.codes import _0_OR_1
from grammarkdown.lexer import SyntaxKind, token_to_string

logger = logging.getLogger(__name__)

_PLACEHOLDER: Final[re.Pattern[str]] = re.compile(r"{(\d+)}")

TokenRenderer = Callable[[SyntaxKind | str, bool], str]


def unwrap_arguments(args: Sequence[Any]) -> tuple[Any, ...]:
    """Flatten a single list/tuple argument into the argument tuple.

    `f(x, [a, b])` and `f(x, a, b)` are equivalent for reporting and formatting.
    """
    if len(args) == 1 and isinstance(args[0], (list, tuple)):
        return tuple(args[0])
    return tuple(args)


def format_string(template: str, *args: Any) -> str:
    """Substitute `{0}`, `{1}`, ... in `template` with positional arguments.

    Placeholders without a matching argument become empty text.
    """
    values = unwrap_arguments(args)

    def replace(match: re.Match[str]) -> str:
        index = int(match.group(1))
        if index >= len(values):
            logger.debug("No argument for placeholder %s in %r", match.group(0), template)
            return ""
        return str(values[index])

    return _PLACEHOLDER.sub(replace, template)


def format_list(
    tokens: Sequence[SyntaxKind | str],
    *,
    token_to_string: TokenRenderer = token_to_string,
) -> str:
    """Render tokens as `'a'`, `'a' or 'b'`, or `'a', 'b', or 'c'`."""
    if not tokens:
        return ""
    if len(tokens) == 1:
        return token_to_string(tokens[0], True)
    if len(tokens) == 2:
        return format_string(
            _0_OR_1.message,
            token_to_string(tokens[0], True),
            token_to_string(tokens[1], True),
        )

    leading = " ".join(token_to_string(token, True) + "," for token in tokens[:-1])
    return format_string(_0_OR_1.message, leading, token_to_string(tokens[-1], True))
