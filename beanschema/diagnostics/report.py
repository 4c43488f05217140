"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from beanschema.diagnostics.diagnostic import Diagnostic


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.is_error for d in diagnostics)


def format_diagnostic(diagnostic: Diagnostic, *, path: str | None = None) -> str:
    location = f"{diagnostic.line}:{diagnostic.column}"
    if path is not None:
        location = f"{path}:{location}"
    text = f"{location}: {diagnostic.kind} {diagnostic.code}: {diagnostic.message}"
    if diagnostic.hint:
        text += f" (hint: {diagnostic.hint})"
    return text
