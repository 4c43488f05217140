"""Derive a ClassRecord from the first class declaration in a tree."""

from __future__ import annotations

from collections.abc import Mapping
import logging

from beanschema.ast import AstFieldDeclaration, AstNode, find_first_class
from beanschema.extract.comments import clean_comment
from beanschema.extract.model import AnnotationRecord, ClassRecord, FieldRecord
from beanschema.extract.required import is_required
from beanschema.options import ParseOptions, resolve_options

logger = logging.getLogger(__name__)

NO_CLASS_WARNING = "No class declaration found in the code"


def extract(
    tree: AstNode,
    options: ParseOptions | Mapping[str, object] | None = None,
    *,
    warnings: list[str] | None = None,
) -> ClassRecord | None:
    """Extract the first class (pre-order) in `tree`.

    Returns `None` and appends a warning to `warnings` when there is no class.
    """
    resolved = resolve_options(options)
    class_node = find_first_class(tree)
    if class_node is None:
        if warnings is not None:
            warnings.append(NO_CLASS_WARNING)
        return None

    fields = tuple(
        extract_field(field_node, resolved)
        for field_node in class_node.fields
        if resolved.include_private_fields or not field_node.is_private
    )
    logger.debug("Extracted %d field(s) from class %s", len(fields), class_node.name)
    return ClassRecord(
        class_name=class_node.name,
        class_comment=clean_comment(class_node.comment),
        fields=fields,
        annotations=tuple(AnnotationRecord.from_ast(annotation) for annotation in class_node.annotations),
    )


def extract_field(field_node: AstFieldDeclaration, options: ParseOptions) -> FieldRecord:
    annotations = tuple(AnnotationRecord.from_ast(annotation) for annotation in field_node.annotations)
    comment = clean_comment(field_node.comment) or clean_comment(field_node.trailing_comment)
    return FieldRecord(
        name=field_node.name,
        type_text=field_node.type_text,
        comment=comment,
        is_private=field_node.is_private,
        is_required=is_required(
            (annotation.name for annotation in annotations),
            comment,
            field_node.type_text,
            options.required_field_strategy,
        ),
        annotations=annotations,
        default_value=field_node.default_value,
    )
