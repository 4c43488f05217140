"""Constant lookup tables consulted by the converter."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from beanschema.schema.model import SchemaType

TYPE_MAPPING: Final[Mapping[str, SchemaType]] = MappingProxyType(
    {
        # integral
        "int": "integer",
        "Integer": "integer",
        "long": "integer",
        "Long": "integer",
        "byte": "integer",
        "Byte": "integer",
        "short": "integer",
        "Short": "integer",
        # floating
        "float": "number",
        "Float": "number",
        "double": "number",
        "Double": "number",
        # boolean
        "boolean": "boolean",
        "Boolean": "boolean",
        # text, decimal and date-like values travel as strings
        "char": "string",
        "Character": "string",
        "String": "string",
        "BigDecimal": "string",
        "BigInteger": "string",
        "Date": "string",
        "LocalDate": "string",
        "LocalDateTime": "string",
        "LocalTime": "string",
        "Instant": "string",
        "ZonedDateTime": "string",
        "OffsetDateTime": "string",
        # collections
        "List": "array",
        "ArrayList": "array",
        "LinkedList": "array",
        "Collection": "array",
        "Set": "array",
        "HashSet": "array",
        "LinkedHashSet": "array",
        "TreeSet": "array",
        # maps
        "Map": "object",
        "HashMap": "object",
        "LinkedHashMap": "object",
        "TreeMap": "object",
    }
)
"""Base type name -> schema type. Anything else maps to `object`."""

KNOWN_TYPES: Final[frozenset[str]] = frozenset(TYPE_MAPPING)

ARRAY_LIKE_TYPES: Final[frozenset[str]] = frozenset(
    name for name, schema_type in TYPE_MAPPING.items() if schema_type == "array"
)

MAP_LIKE_TYPES: Final[frozenset[str]] = frozenset(
    name for name, schema_type in TYPE_MAPPING.items() if schema_type == "object"
)

TYPE_FORMATS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "Date": "date-time",
        "LocalDate": "date",
        "LocalDateTime": "date-time",
        "LocalTime": "time",
        "Instant": "date-time",
        "ZonedDateTime": "date-time",
        "OffsetDateTime": "date-time",
        "BigDecimal": "decimal",
        "BigInteger": "int64",
    }
)

DATE_TIME_PATTERN: Final[str] = "yyyy-MM-dd HH:mm:ss"
DATE_PATTERN: Final[str] = "yyyy-MM-dd"

FIELD_DESCRIPTIONS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "id": "ID",
        "name": "Name",
        "username": "Username",
        "email": "Email address",
        "phone": "Phone number",
        "age": "Age",
        "gender": "Gender",
        "address": "Address",
        "createTime": "Creation time",
        "updateTime": "Last update time",
        "status": "Status",
        "enabled": "Whether enabled",
        "deleted": "Whether deleted",
        "remark": "Remark",
        "description": "Description",
    }
)

ENUM_SUFFIXES: Final[tuple[str, ...]] = ("Status", "Type", "Enum")

ENUM_VALUES: Final[Mapping[str, tuple[str, ...]]] = MappingProxyType(
    {
        "Gender": ("MALE", "FEMALE"),
        "Status": ("ACTIVE", "INACTIVE"),
        "OrderStatus": ("PENDING", "PAID", "SHIPPED", "COMPLETED", "CANCELLED"),
    }
)

DEFAULT_ENUM_VALUES: Final[tuple[str, ...]] = ("VALUE1", "VALUE2")

# Description markers
ENUM_DESCRIPTION_PREFIX: Final[str] = "enum: "
ENTITY_DESCRIPTION_PREFIX: Final[str] = "entity: "
ITEM_DESCRIPTION_SUFFIX: Final[str] = " item"
VALUE_DESCRIPTION_SUFFIX: Final[str] = " value"
RAW_ARRAY_ITEM_DESCRIPTION: Final[str] = "array item"
RAW_MAP_VALUE_DESCRIPTION: Final[str] = "map value"
CLASS_DESCRIPTION_SUFFIX: Final[str] = " entity"

# Annotation names
PROPERTY_NAME_ANNOTATION: Final[str] = "JsonProperty"
IGNORE_ANNOTATION: Final[str] = "JsonIgnore"
ENUM_MAPPING_ANNOTATION: Final[str] = "EnumDescMapping"
FORMAT_ANNOTATION: Final[str] = "JsonFormat"
EMAIL_ANNOTATION: Final[str] = "Email"
LENGTH_ANNOTATIONS: Final[frozenset[str]] = frozenset({"Size", "Length"})
MINIMUM_ANNOTATIONS: Final[frozenset[str]] = frozenset({"Min", "DecimalMin"})
MAXIMUM_ANNOTATIONS: Final[frozenset[str]] = frozenset({"Max", "DecimalMax"})
PATTERN_ANNOTATION: Final[str] = "Pattern"
