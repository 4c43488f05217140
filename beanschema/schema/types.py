"""Helpers over opaque declared type text such as `Map<String, List<Foo>>`."""

from __future__ import annotations

from beanschema.schema.model import SchemaType
from beanschema.schema.tables import (
    ARRAY_LIKE_TYPES,
    ENUM_SUFFIXES,
    ENUM_VALUES,
    KNOWN_TYPES,
    MAP_LIKE_TYPES,
    TYPE_MAPPING,
)

_WILDCARD_BOUND_KEYWORDS: frozenset[str] = frozenset({"extends", "super"})


def base_type_name(type_text: str) -> str:
    """Strip generic arguments, array suffixes and any package qualifier."""
    text = type_text.strip()
    start = text.find("<")
    if start != -1:
        end = text.rfind(">")
        text = text[:start] + (text[end + 1 :] if end > start else "")
    text = text.strip()
    if text.endswith("..."):
        text = text[:-3].rstrip()
    while text.endswith("[]"):
        text = text[:-2].rstrip()
    return text.rsplit(".", 1)[-1]


def generic_arguments(type_text: str) -> list[str]:
    """Top-level generic arguments: `Map<String, List<A>>` -> `["String", "List<A>"]`."""
    start = type_text.find("<")
    end = type_text.rfind(">")
    if start == -1 or end <= start:
        return []

    inner = type_text[start + 1 : end]
    arguments: list[str] = []
    depth = 0
    current: list[str] = []
    for ch in inner:
        if ch == "<":
            depth += 1
        elif ch == ">":
            depth -= 1
        elif ch == "," and depth == 0:
            arguments.append("".join(current).strip())
            current = []
            continue
        current.append(ch)
    arguments.append("".join(current).strip())
    return [argument for argument in map(_wildcard_bound, arguments) if argument]


def _wildcard_bound(argument: str) -> str:
    # The lexer drops `?`, so `? extends Foo` arrives as `extends Foo`.
    keyword, _, rest = argument.partition(" ")
    if keyword in _WILDCARD_BOUND_KEYWORDS:
        return rest.strip()
    return argument


def map_type(base_type: str) -> SchemaType:
    return TYPE_MAPPING.get(base_type, "object")


def is_known_type(base_type: str) -> bool:
    return base_type in KNOWN_TYPES


def is_array_type(type_text: str) -> bool:
    return type_text.rstrip().endswith("[]") or base_type_name(type_text) in ARRAY_LIKE_TYPES


def is_map_type(type_text: str) -> bool:
    return not type_text.rstrip().endswith("[]") and base_type_name(type_text) in MAP_LIKE_TYPES


def element_type(type_text: str) -> str | None:
    """Element type of an array (`Foo[]`) or single-argument collection (`List<Foo>`)."""
    text = type_text.rstrip()
    if text.endswith("[]"):
        return text[:-2].rstrip()
    arguments = generic_arguments(text)
    if len(arguments) == 1:
        return arguments[0]
    return None


def map_value_type(type_text: str) -> str | None:
    arguments = generic_arguments(type_text)
    if len(arguments) == 2:
        return arguments[1]
    return None


def is_enum_type(base_type: str) -> bool:
    return base_type in ENUM_VALUES or base_type.endswith(ENUM_SUFFIXES)


__all__ = [
    "base_type_name",
    "element_type",
    "generic_arguments",
    "is_array_type",
    "is_enum_type",
    "is_known_type",
    "is_map_type",
    "map_type",
    "map_value_type",
]
