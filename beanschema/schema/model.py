"""Schema data model and its JSON shape."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

type SchemaType = Literal["object", "array", "string", "number", "integer", "boolean"]


@dataclass(slots=True)
class SchemaProperty:
    type: SchemaType
    description: str | None = None
    format: str | None = None
    enum: list[str] | None = None
    minimum: int | float | None = None
    maximum: int | float | None = None
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None
    items: SchemaProperty | None = None
    properties: dict[str, SchemaProperty] | None = None
    additional_properties: SchemaProperty | None = None

    def to_dict(self) -> dict[str, object]:
        """JSON shape with camelCase keys; absent members are omitted."""
        data: dict[str, object] = {"type": self.type}
        if self.description is not None:
            data["description"] = self.description
        if self.format is not None:
            data["format"] = self.format
        if self.enum is not None:
            data["enum"] = list(self.enum)
        if self.minimum is not None:
            data["minimum"] = self.minimum
        if self.maximum is not None:
            data["maximum"] = self.maximum
        if self.min_length is not None:
            data["minLength"] = self.min_length
        if self.max_length is not None:
            data["maxLength"] = self.max_length
        if self.pattern is not None:
            data["pattern"] = self.pattern
        if self.items is not None:
            data["items"] = self.items.to_dict()
        if self.properties is not None:
            data["properties"] = {name: prop.to_dict() for name, prop in self.properties.items()}
        if self.additional_properties is not None:
            data["additionalProperties"] = self.additional_properties.to_dict()
        return data


@dataclass(slots=True)
class Schema:
    """Class-level schema; `properties` keeps field declaration order."""

    type: SchemaType = "object"
    properties: dict[str, SchemaProperty] = field(default_factory=dict)
    required: list[str] = field(default_factory=list)
    description: str | None = None

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {
            "type": self.type,
            "properties": {name: prop.to_dict() for name, prop in self.properties.items()},
            "required": list(self.required),
        }
        if self.description is not None:
            data["description"] = self.description
        return data


__all__ = ["Schema", "SchemaProperty", "SchemaType"]
