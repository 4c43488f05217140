"""Structural extraction from the syntax tree."""

from beanschema.extract.comments import clean_comment
from beanschema.extract.extractor import NO_CLASS_WARNING, extract, extract_field
from beanschema.extract.model import AnnotationRecord, ClassRecord, FieldRecord
from beanschema.extract.required import (
    OPTIONAL_KEYWORDS,
    PRIMITIVE_TYPES,
    REQUIRED_ANNOTATIONS,
    REQUIRED_KEYWORDS,
    is_required,
)

__all__ = [
    "NO_CLASS_WARNING",
    "OPTIONAL_KEYWORDS",
    "PRIMITIVE_TYPES",
    "REQUIRED_ANNOTATIONS",
    "REQUIRED_KEYWORDS",
    "AnnotationRecord",
    "ClassRecord",
    "FieldRecord",
    "clean_comment",
    "extract",
    "extract_field",
    "is_required",
]
