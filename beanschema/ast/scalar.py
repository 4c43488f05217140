"""Literal interpretation helpers for annotation arguments."""

from __future__ import annotations

import re

from beanschema.ast.model import (
    AstAnnotationValue,
    AstBoolean,
    AstIdentifier,
    AstNumber,
    AstString,
)

_INTEGER_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(r"^[+-]?(?:\d+\.\d+|\d+\.\d*|\.\d+)$")
_NUMBER_SUFFIXES = "lLfFdD"

_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", '"': '"', "\\": "\\", "'": "'"}


def parse_number(text: str) -> int | float | None:
    """Parse a numeric literal, dropping a Java type suffix (`10L`, `1.5f`)."""
    normalized = text.strip()
    if normalized and normalized[-1] in _NUMBER_SUFFIXES:
        normalized = normalized[:-1]
    if not normalized:
        return None

    if _INTEGER_RE.fullmatch(normalized):
        return int(normalized)

    if _FLOAT_RE.fullmatch(normalized):
        return float(normalized)

    return None


def unquote_string(text: str) -> str:
    """Strip surrounding quotes and decode simple backslash escapes."""
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        text = text[1:-1]
    chars: list[str] = []
    index = 0
    while index < len(text):
        ch = text[index]
        if ch == "\\" and index + 1 < len(text):
            escaped = text[index + 1]
            chars.append(_ESCAPES.get(escaped, escaped))
            index += 2
            continue
        chars.append(ch)
        index += 1
    return "".join(chars)


def value_text(value: AstAnnotationValue) -> str:
    match value:
        case AstString(value=text):
            return text
        case AstNumber(value=number):
            return str(number)
        case AstBoolean(value=flag):
            return "true" if flag else "false"
        case AstIdentifier(text=text):
            return text


def value_number(value: AstAnnotationValue) -> int | float | None:
    """Numeric view of an argument; `@DecimalMin("0.01")` style strings are coerced."""
    match value:
        case AstNumber(value=number):
            return number
        case AstString(value=text):
            return parse_number(text)
        case AstBoolean() | AstIdentifier():
            return None


__all__ = ["parse_number", "unquote_string", "value_number", "value_text"]
