"""Pipeline result carriers for the collaborator-facing entrypoints."""

from __future__ import annotations

from dataclasses import dataclass, field

from beanschema.diagnostics import Diagnostic, has_errors
from beanschema.extract import ClassRecord
from beanschema.options import ParseOptions
from beanschema.schema import Schema


@dataclass(slots=True)
class ClassParseResult:
    """Extracted class (or `None`) with ordered parse errors and warnings.

    `class_record` is `None` whenever there are errors, and also when the input
    simply held no class (signalled by a warning, not an error).
    """

    source_text: str
    class_record: ClassRecord | None
    errors: list[Diagnostic] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    options: ParseOptions = field(default_factory=ParseOptions)

    @property
    def has_errors(self) -> bool:
        return has_errors(self.errors)

    def to_dict(self) -> dict[str, object]:
        return {
            "classRecord": self.class_record.to_dict() if self.class_record is not None else None,
            "errors": [error.as_dict() for error in self.errors],
            "warnings": list(self.warnings),
        }


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Parse plus conversion; `schema` is `None` exactly when no class was extracted."""

    parse: ClassParseResult
    schema: Schema | None

    @property
    def errors(self) -> list[Diagnostic]:
        return self.parse.errors

    @property
    def warnings(self) -> list[str]:
        return self.parse.warnings

    @property
    def succeeded(self) -> bool:
        return self.schema is not None


@dataclass(frozen=True, slots=True)
class ValidationReport:
    valid: bool
    errors: list[Diagnostic]
    warnings: list[str]
    class_name: str | None = None
    field_count: int = 0

    def to_dict(self) -> dict[str, object]:
        return {
            "valid": self.valid,
            "errors": [error.as_dict() for error in self.errors],
            "warnings": list(self.warnings),
            "className": self.class_name,
            "fieldCount": self.field_count,
        }
