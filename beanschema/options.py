"""Extraction and conversion options."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum


class RequiredFieldStrategy(StrEnum):
    """Fallback used when annotations, comments and primitive types are silent."""

    ANNOTATION = "annotation"
    ALL = "all"
    NONE = "none"


class CommentStyle(StrEnum):
    """Informational only; comment handling does not depend on it."""

    JAVADOC = "javadoc"
    INLINE = "inline"


_KEY_ALIASES: dict[str, str] = {
    "includePrivateFields": "include_private_fields",
    "requiredFieldStrategy": "required_field_strategy",
    "commentStyle": "comment_style",
}


@dataclass(frozen=True, slots=True)
class ParseOptions:
    include_private_fields: bool = True
    required_field_strategy: RequiredFieldStrategy = RequiredFieldStrategy.ANNOTATION
    comment_style: CommentStyle = CommentStyle.JAVADOC

    @staticmethod
    def from_mapping(mapping: Mapping[str, object]) -> "ParseOptions":
        """Build options from camelCase or snake_case keys.

        Unknown keys are ignored and `None` values keep the default. Invalid enum
        values raise `ValueError`.
        """
        values: dict[str, object] = {}
        for key, value in mapping.items():
            name = _KEY_ALIASES.get(key, key)
            if name not in ParseOptions.__dataclass_fields__ or value is None:
                continue
            values[name] = value

        options = ParseOptions()
        include_private = values.get("include_private_fields", options.include_private_fields)
        if not isinstance(include_private, bool):
            raise ValueError(f"includePrivateFields must be a boolean, got {include_private!r}")
        return ParseOptions(
            include_private_fields=include_private,
            required_field_strategy=RequiredFieldStrategy(
                values.get("required_field_strategy", options.required_field_strategy)
            ),
            comment_style=CommentStyle(values.get("comment_style", options.comment_style)),
        )


def resolve_options(options: "ParseOptions | Mapping[str, object] | None") -> ParseOptions:
    if options is None:
        return ParseOptions()
    if isinstance(options, ParseOptions):
        return options
    return ParseOptions.from_mapping(options)


__all__ = ["CommentStyle", "ParseOptions", "RequiredFieldStrategy", "resolve_options"]
