"""Diagnostics."""

from beanschema.diagnostics.codes import (
    PARSER_EXPECTED_CLASS_BODY,
    PARSER_EXPECTED_CLASS_KEYWORD,
    PARSER_EXPECTED_CLASS_NAME,
    PARSER_INTERNAL_ERROR,
    PARSER_UNCLOSED_ANNOTATION_ARGUMENTS,
    PARSER_UNCLOSED_CLASS_BODY,
    DiagnosticSpec,
)
from beanschema.diagnostics.diagnostic import Diagnostic, DiagnosticKind
from beanschema.diagnostics.report import format_diagnostic, has_errors

__all__ = [
    "PARSER_EXPECTED_CLASS_BODY",
    "PARSER_EXPECTED_CLASS_KEYWORD",
    "PARSER_EXPECTED_CLASS_NAME",
    "PARSER_INTERNAL_ERROR",
    "PARSER_UNCLOSED_ANNOTATION_ARGUMENTS",
    "PARSER_UNCLOSED_CLASS_BODY",
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticSpec",
    "format_diagnostic",
    "has_errors",
]
