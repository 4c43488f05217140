"""Convert a ClassRecord into a Schema."""

from __future__ import annotations

from collections.abc import Mapping
import logging

from beanschema.extract import ClassRecord, FieldRecord
from beanschema.options import ParseOptions, resolve_options
from beanschema.schema.model import Schema, SchemaProperty
from beanschema.schema.tables import (
    CLASS_DESCRIPTION_SUFFIX,
    DATE_PATTERN,
    DATE_TIME_PATTERN,
    DEFAULT_ENUM_VALUES,
    EMAIL_ANNOTATION,
    ENTITY_DESCRIPTION_PREFIX,
    ENUM_DESCRIPTION_PREFIX,
    ENUM_MAPPING_ANNOTATION,
    ENUM_VALUES,
    FIELD_DESCRIPTIONS,
    FORMAT_ANNOTATION,
    IGNORE_ANNOTATION,
    ITEM_DESCRIPTION_SUFFIX,
    LENGTH_ANNOTATIONS,
    MAXIMUM_ANNOTATIONS,
    MINIMUM_ANNOTATIONS,
    PATTERN_ANNOTATION,
    PROPERTY_NAME_ANNOTATION,
    RAW_ARRAY_ITEM_DESCRIPTION,
    RAW_MAP_VALUE_DESCRIPTION,
    TYPE_FORMATS,
    VALUE_DESCRIPTION_SUFFIX,
)
from beanschema.schema.types import (
    base_type_name,
    element_type,
    is_array_type,
    is_enum_type,
    is_known_type,
    is_map_type,
    map_type,
    map_value_type,
)

logger = logging.getLogger(__name__)


class SchemaConverter:
    """Stateless ClassRecord -> Schema mapping.

    Referenced custom types become empty object placeholders; their own fields
    are never expanded.
    """

    def __init__(self, options: ParseOptions | Mapping[str, object] | None = None) -> None:
        self._options = resolve_options(options)

    @property
    def options(self) -> ParseOptions:
        return self._options

    def convert(self, record: ClassRecord) -> Schema:
        schema = Schema(
            type="object",
            description=record.class_comment or f"{record.class_name}{CLASS_DESCRIPTION_SUFFIX}",
        )
        for field_record in record.fields:
            if not self.should_include(field_record):
                continue
            name = property_name(field_record)
            schema.properties[name] = self.convert_field(field_record)
            if field_record.is_required and name not in schema.required:
                schema.required.append(name)

        logger.debug("Converted %s into %d propert(ies)", record.class_name, len(schema.properties))
        return schema

    def should_include(self, field_record: FieldRecord) -> bool:
        if field_record.has_annotation(IGNORE_ANNOTATION):
            return False
        return self._options.include_private_fields or not field_record.is_private

    def convert_field(self, field_record: FieldRecord) -> SchemaProperty:
        type_text = field_record.type_text
        base_type = base_type_name(type_text)

        prop = SchemaProperty(
            type=map_type(base_type),
            description=field_description(field_record, base_type),
            format=field_format(field_record, base_type),
        )

        if is_enum_type(base_type):
            prop.enum = list(ENUM_VALUES.get(base_type, DEFAULT_ENUM_VALUES))

        if is_array_type(type_text):
            prop.type = "array"
            prop.items = nested_schema(element_type(type_text), ITEM_DESCRIPTION_SUFFIX, RAW_ARRAY_ITEM_DESCRIPTION)
        elif is_map_type(type_text):
            prop.type = "object"
            prop.additional_properties = nested_schema(
                map_value_type(type_text), VALUE_DESCRIPTION_SUFFIX, RAW_MAP_VALUE_DESCRIPTION
            )
        elif not is_known_type(base_type):
            prop.type = "object"
            prop.properties = {}

        apply_constraints(prop, field_record)
        return prop


def convert(record: ClassRecord, options: ParseOptions | Mapping[str, object] | None = None) -> Schema:
    return SchemaConverter(options).convert(record)


def property_name(field_record: FieldRecord) -> str:
    annotation = field_record.annotation(PROPERTY_NAME_ANNOTATION)
    if annotation is not None:
        override = annotation.text("value")
        if override:
            return override
    return field_record.name


def field_description(field_record: FieldRecord, base_type: str) -> str:
    """Enum mapping marker, then entity reference, then comment, then name table."""
    plain = field_record.comment or FIELD_DESCRIPTIONS.get(field_record.name) or field_record.name
    if field_record.has_annotation(ENUM_MAPPING_ANNOTATION):
        return f"{ENUM_DESCRIPTION_PREFIX}{plain}"
    if not is_known_type(base_type):
        return f"{ENTITY_DESCRIPTION_PREFIX}{base_type}"
    return plain


def field_format(field_record: FieldRecord, base_type: str) -> str | None:
    for annotation in field_record.annotations:
        if annotation.name == FORMAT_ANNOTATION:
            pattern = annotation.text("pattern")
            if pattern is not None:
                if DATE_TIME_PATTERN in pattern:
                    return "date-time"
                if DATE_PATTERN in pattern:
                    return "date"
        if annotation.name == EMAIL_ANNOTATION:
            return "email"
    return TYPE_FORMATS.get(base_type)


def apply_constraints(prop: SchemaProperty, field_record: FieldRecord) -> None:
    """Copy validation annotations onto `prop`.

    Size bounds only apply to strings; array item counts are not emitted.
    """
    for annotation in field_record.annotations:
        if annotation.name in LENGTH_ANNOTATIONS:
            if prop.type != "string":
                continue
            minimum = annotation.number("min")
            maximum = annotation.number("max")
            if minimum is not None:
                prop.min_length = int(minimum)
            if maximum is not None:
                prop.max_length = int(maximum)
        elif annotation.name in MINIMUM_ANNOTATIONS:
            value = annotation.number("value")
            if value is not None:
                prop.minimum = value
        elif annotation.name in MAXIMUM_ANNOTATIONS:
            value = annotation.number("value")
            if value is not None:
                prop.maximum = value
        elif annotation.name == PATTERN_ANNOTATION:
            regexp = annotation.text("regexp")
            if regexp:
                prop.pattern = regexp


def nested_schema(type_text: str | None, suffix: str, fallback_description: str) -> SchemaProperty:
    """Schema for a collection element or map value, without further recursion."""
    if type_text is None:
        return SchemaProperty(type="string", description=fallback_description)

    base_type = base_type_name(type_text)
    if not is_known_type(base_type):
        return SchemaProperty(type="object", description=f"{ENTITY_DESCRIPTION_PREFIX}{base_type}")
    return SchemaProperty(type=map_type(base_type), description=f"{type_text}{suffix}")


__all__ = [
    "SchemaConverter",
    "apply_constraints",
    "convert",
    "field_description",
    "field_format",
    "nested_schema",
    "property_name",
]
