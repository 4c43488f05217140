"""Required-field policy."""

from collections.abc import Iterable
from typing import Final

from beanschema.options import RequiredFieldStrategy

REQUIRED_ANNOTATIONS: Final[frozenset[str]] = frozenset({"NotNull", "NotEmpty", "NotBlank"})

REQUIRED_KEYWORDS: Final[tuple[str, ...]] = ("必填", "必须", "required", "Required", "REQUIRED")
OPTIONAL_KEYWORDS: Final[tuple[str, ...]] = ("可选", "选填", "optional", "Optional", "OPTIONAL")

PRIMITIVE_TYPES: Final[frozenset[str]] = frozenset(
    {"int", "long", "float", "double", "boolean", "char", "byte", "short"}
)


def is_required(
    annotation_names: Iterable[str],
    comment: str | None,
    type_text: str,
    strategy: RequiredFieldStrategy = RequiredFieldStrategy.ANNOTATION,
) -> bool:
    """Decide whether a field is required, first matching rule wins.

    1. a required-marking annotation
    2. a required (or optional) keyword in the comment
    3. a primitive type, which can never be absent
    4. the configured fallback strategy
    """
    if any(name in REQUIRED_ANNOTATIONS for name in annotation_names):
        return True

    if comment:
        if any(keyword in comment for keyword in REQUIRED_KEYWORDS):
            return True
        if any(keyword in comment for keyword in OPTIONAL_KEYWORDS):
            return False

    if type_text in PRIMITIVE_TYPES:
        return True

    return strategy == RequiredFieldStrategy.ALL
