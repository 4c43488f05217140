"""Structural records extracted from the syntax tree."""

from __future__ import annotations

from dataclasses import dataclass, field

from beanschema.ast import (
    AstAnnotation,
    AstAnnotationValue,
    AstBoolean,
    AstIdentifier,
    AstNumber,
    AstString,
    value_number,
    value_text,
)


@dataclass(frozen=True, slots=True)
class AnnotationRecord:
    name: str
    parameters: dict[str, AstAnnotationValue] = field(default_factory=dict, hash=False)

    @staticmethod
    def from_ast(annotation: AstAnnotation) -> "AnnotationRecord":
        return AnnotationRecord(name=annotation.name, parameters=dict(annotation.parameters))

    def has(self, key: str) -> bool:
        return key in self.parameters

    def text(self, key: str) -> str | None:
        value = self.parameters.get(key)
        return value_text(value) if value is not None else None

    def number(self, key: str) -> int | float | None:
        value = self.parameters.get(key)
        return value_number(value) if value is not None else None

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "parameters": {key: _plain_value(value) for key, value in self.parameters.items()},
        }


@dataclass(frozen=True, slots=True)
class FieldRecord:
    name: str
    type_text: str
    comment: str | None = None
    is_private: bool = False
    is_required: bool = False
    annotations: tuple[AnnotationRecord, ...] = ()
    default_value: str | None = None

    def annotation(self, name: str) -> AnnotationRecord | None:
        for annotation in self.annotations:
            if annotation.name == name:
                return annotation
        return None

    def has_annotation(self, name: str) -> bool:
        return self.annotation(name) is not None

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {
            "name": self.name,
            "type": self.type_text,
            "isPrivate": self.is_private,
            "isRequired": self.is_required,
            "annotations": [annotation.to_dict() for annotation in self.annotations],
        }
        if self.comment is not None:
            data["comment"] = self.comment
        if self.default_value is not None:
            data["defaultValue"] = self.default_value
        return data


@dataclass(frozen=True, slots=True)
class ClassRecord:
    class_name: str
    class_comment: str | None = None
    fields: tuple[FieldRecord, ...] = ()
    annotations: tuple[AnnotationRecord, ...] = ()

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {
            "className": self.class_name,
            "fields": [field_record.to_dict() for field_record in self.fields],
        }
        if self.class_comment is not None:
            data["classComment"] = self.class_comment
        return data


def _plain_value(value: AstAnnotationValue) -> str | int | float | bool:
    match value:
        case AstString(value=text) | AstIdentifier(text=text):
            return text
        case AstNumber(value=number):
            return number
        case AstBoolean(value=flag):
            return flag


__all__ = ["AnnotationRecord", "ClassRecord", "FieldRecord"]
