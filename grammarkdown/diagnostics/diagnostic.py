"""Diagnostic descriptor type."""

from dataclasses import dataclass
from typing import Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Immutable message template with a stable numeric code.

    Code 0 is reserved for composite templates that are only used to build
    other messages and are never reported on their own.
    """

    code: int
    message: str
    severity: Severity = "error"

    @property
    def is_warning(self) -> bool:
        return self.severity == "warning"
