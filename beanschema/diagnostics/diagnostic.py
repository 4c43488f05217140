"""Diagnostics core types."""

from dataclasses import dataclass
from enum import StrEnum

from beanschema.text import TextRange


class DiagnosticKind(StrEnum):
    SYNTAX = "syntax"
    SEMANTIC = "semantic"
    WARNING = "warning"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured parse error located at a token (1-based line/column)."""

    code: str
    message: str
    line: int
    column: int
    kind: DiagnosticKind = DiagnosticKind.SYNTAX
    range: TextRange = TextRange(0, 0)
    hint: str | None = None
    category: str | None = None

    @property
    def is_error(self) -> bool:
        return self.kind != DiagnosticKind.WARNING

    def as_dict(self) -> dict[str, object]:
        """Wire shape used at the external boundary: message, line, column, type."""
        return {
            "message": self.message,
            "line": self.line,
            "column": self.column,
            "type": str(self.kind),
        }
