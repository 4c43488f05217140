"""Entrypoints that run lex -> parse -> extract -> convert over one source text."""

from __future__ import annotations

from collections.abc import Mapping

from beanschema.extract import ClassRecord, extract
from beanschema.lexer import tokenize
from beanschema.options import ParseOptions, resolve_options
from beanschema.parser import parse as parse_tokens
from beanschema.pipeline.results import ClassParseResult, ConversionResult, ValidationReport
from beanschema.schema import Schema, SchemaConverter

type OptionsInput = ParseOptions | Mapping[str, object] | None


def parse(text: str, options: OptionsInput = None) -> ClassParseResult:
    """Extract the first class in `text`; never raises for malformed source."""
    resolved_options = resolve_options(options)
    parsed = parse_tokens(tokenize(text), source=text)
    warnings = list(parsed.warnings)

    class_record: ClassRecord | None = None
    if parsed.tree is not None and not parsed.has_errors:
        class_record = extract(parsed.tree, resolved_options, warnings=warnings)

    return ClassParseResult(
        source_text=text,
        class_record=class_record,
        errors=list(parsed.errors),
        warnings=warnings,
        options=resolved_options,
    )


def convert(record: ClassRecord, options: OptionsInput = None) -> Schema:
    return SchemaConverter(options).convert(record)


def run(
    text: str,
    options: OptionsInput = None,
    *,
    parsed: ClassParseResult | None = None,
) -> ConversionResult:
    """Parse and convert in one call, optionally reusing an earlier parse."""
    resolved_parse = _resolve_parse(text, options=options, parsed=parsed)
    if resolved_parse.class_record is None:
        return ConversionResult(parse=resolved_parse, schema=None)
    schema = SchemaConverter(resolved_parse.options).convert(resolved_parse.class_record)
    return ConversionResult(parse=resolved_parse, schema=schema)


def validate(text: str, options: OptionsInput = None) -> ValidationReport:
    result = parse(text, options)
    record = result.class_record
    return ValidationReport(
        valid=record is not None and not result.has_errors,
        errors=result.errors,
        warnings=result.warnings,
        class_name=record.class_name if record is not None else None,
        field_count=len(record.fields) if record is not None else 0,
    )


def _resolve_parse(
    text: str,
    *,
    options: OptionsInput,
    parsed: ClassParseResult | None,
) -> ClassParseResult:
    if parsed is not None:
        if options is not None:
            raise ValueError("Pass either parsed or options, not both")
        return parsed
    return parse(text, options)
