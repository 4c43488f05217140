"""Collaborator-facing parse/convert entrypoints and result carriers."""

from beanschema.pipeline.entrypoints import convert, parse, run, validate
from beanschema.pipeline.results import ClassParseResult, ConversionResult, ValidationReport

__all__ = [
    "ClassParseResult",
    "ConversionResult",
    "ValidationReport",
    "convert",
    "parse",
    "run",
    "validate",
]
