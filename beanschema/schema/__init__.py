"""Schema model, mapping tables, converter and emission."""

from beanschema.schema.converter import SchemaConverter, convert
from beanschema.schema.emit import (
    SCHEMA_SUFFIXES,
    SchemaFormat,
    render_schema,
    schema_to_json,
    schema_to_yaml,
    validate_schema,
    write_schema,
)
from beanschema.schema.model import Schema, SchemaProperty, SchemaType
from beanschema.schema.types import base_type_name, element_type, generic_arguments, map_value_type

__all__ = [
    "SCHEMA_SUFFIXES",
    "Schema",
    "SchemaConverter",
    "SchemaFormat",
    "SchemaProperty",
    "SchemaType",
    "base_type_name",
    "convert",
    "element_type",
    "generic_arguments",
    "map_value_type",
    "render_schema",
    "schema_to_json",
    "schema_to_yaml",
    "validate_schema",
    "write_schema",
]
