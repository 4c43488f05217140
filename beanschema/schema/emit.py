"""Schema serialization and validation."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Literal, cast

from openapi_schema_validator import OAS31Validator
from yamlium import from_dict as yaml_from_dict

from beanschema.schema.model import Schema

type SchemaFormat = Literal["json", "yaml"]

SCHEMA_SUFFIXES: dict[str, str] = {"json": ".json", "yaml": ".yaml"}


def schema_to_json(schema: Schema) -> str:
    return json.dumps(schema.to_dict(), indent=2, ensure_ascii=False)


def schema_to_yaml(schema: Schema) -> str:
    def _needs_quote(text: str) -> bool:
        return text.startswith("@") or ":" in text or text.startswith("<") or text.endswith(">")

    def _quote(text: str) -> str:
        escaped = text.replace("'", "''")
        return f"'{escaped}'"

    def _sanitize(obj: object) -> Any:
        if isinstance(obj, dict):
            return {k: _sanitize(v) for k, v in obj.items()}
        if isinstance(obj, list):
            return [_sanitize(v) for v in obj]
        if isinstance(obj, str):
            if _needs_quote(obj):
                return _quote(obj)
            return obj
        return obj

    safe_payload = cast(dict[str, Any], _sanitize(schema.to_dict()))
    return yaml_from_dict(safe_payload).to_yaml()


def validate_schema(schema: Schema) -> None:
    """Check the emitted dict against the OpenAPI 3.1 schema dialect.

    Raises `jsonschema.exceptions.SchemaError` when the schema is invalid.
    """
    OAS31Validator.check_schema(schema.to_dict())


def render_schema(schema: Schema, fmt: SchemaFormat = "json") -> str:
    if fmt == "yaml":
        return schema_to_yaml(schema)
    return schema_to_json(schema)


def write_schema(schema: Schema, path: Path, fmt: SchemaFormat = "json") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_schema(schema, fmt), encoding="utf-8")
    return path


__all__ = [
    "SCHEMA_SUFFIXES",
    "SchemaFormat",
    "render_schema",
    "schema_to_json",
    "schema_to_yaml",
    "validate_schema",
    "write_schema",
]
