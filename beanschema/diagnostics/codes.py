"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from beanschema.diagnostics.diagnostic import DiagnosticKind


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    kind: DiagnosticKind = DiagnosticKind.SYNTAX
    category: str | None = None


PARSER_EXPECTED_CLASS_KEYWORD: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_CLASS_KEYWORD",
    message="Expected class declaration",
    hint="Only `class` declarations are extracted; interfaces and enums are skipped.",
    category="parser",
)

PARSER_EXPECTED_CLASS_NAME: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_CLASS_NAME",
    message="Expected class name",
    category="parser",
)

PARSER_EXPECTED_CLASS_BODY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_CLASS_BODY",
    message='Expected "{" after class name',
    category="parser",
)

PARSER_UNCLOSED_CLASS_BODY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNCLOSED_CLASS_BODY",
    message='Expected "}" after class body',
    category="parser",
)

PARSER_UNCLOSED_ANNOTATION_ARGUMENTS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNCLOSED_ANNOTATION_ARGUMENTS",
    message='Expected ")" after annotation parameters',
    category="parser",
)

PARSER_INTERNAL_ERROR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INTERNAL_ERROR",
    message="Unknown parsing error",
    category="parser",
)
