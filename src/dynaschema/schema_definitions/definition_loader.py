"""Build schemas from declarative YAML/JSON schema definitions."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from dynaschema.primitive_schemas import STRING_FORMATS, StringSchema
from dynaschema.schema_factory import z
from dynaschema.validation_core import Schema

_LOGGER = logging.getLogger(__name__)

_COMMON_KEYS = frozenset({"type", "optional", "default", "coerce"})
_KIND_KEYS: Mapping[str, frozenset[str]] = {
    "string": frozenset({"min", "max", "pattern", "format", "allowed_schemes"}),
    "number": frozenset({"min", "max", "positive", "negative"}),
    "boolean": frozenset({"must_be"}),
    "enum": frozenset({"values"}),
    "array": frozenset({"items", "min", "max"}),
    "object": frozenset({"fields"}),
    "union": frozenset({"options"}),
}
_COERCIBLE_KINDS = frozenset({"string", "number", "boolean"})


class SchemaDefinitionError(Exception):
    """Raised when a schema definition is invalid."""


def load_schema_definition(definition_path: Path | str) -> Schema[Any]:
    """Load a definition file and build the schema it declares."""
    path = Path(definition_path)
    if not path.exists():
        raise SchemaDefinitionError(f"Schema definition file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SchemaDefinitionError(f"Schema definition is not valid UTF-8: {path}") from exc
    try:
        if path.suffix.lower() == ".json":
            parsed = json.loads(text)
        else:
            parsed = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SchemaDefinitionError(f"Failed to parse schema definition: {exc}") from exc

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, Mapping):
        raise SchemaDefinitionError("Schema definition root must be a mapping.")
    _LOGGER.debug("Loaded schema definition from %s", path)
    return build_schema(parsed.get("schema"), label="schema")


def build_schema(node: Any, *, label: str = "schema") -> Schema[Any]:
    """Build a schema from one in-memory definition node."""
    section = _require_mapping(node, label)
    kind = _require_non_empty_string(section.get("type"), f"{label}.type")
    if kind not in _KIND_KEYS:
        raise SchemaDefinitionError(
            f"{label}.type '{kind}' is not supported. Valid types: {sorted(_KIND_KEYS)}"
        )
    unknown = set(section) - _COMMON_KEYS - _KIND_KEYS[kind]
    if unknown:
        raise SchemaDefinitionError(f"{label} has unsupported keys: {sorted(unknown)}")

    schema = _BUILDERS[kind](section, label)

    if _optional_bool(section.get("coerce"), f"{label}.coerce"):
        if kind not in _COERCIBLE_KINDS:
            raise SchemaDefinitionError(f"{label}.coerce is only supported for primitive types.")
        schema = getattr(z.coerce, kind)(schema)
    if _optional_bool(section.get("optional"), f"{label}.optional"):
        schema = schema.optional()
    if "default" in section:
        schema = schema.default(section["default"])
    return schema


def _build_string(section: Mapping[str, Any], label: str) -> Schema[Any]:
    schema = z.string()
    if "min" in section:
        schema.min(_require_non_negative_int(section["min"], f"{label}.min"))
    if "max" in section:
        schema.max(_require_non_negative_int(section["max"], f"{label}.max"))
    if "pattern" in section:
        pattern = _require_non_empty_string(section["pattern"], f"{label}.pattern")
        try:
            schema.matches(pattern)
        except ValueError as exc:
            raise SchemaDefinitionError(f"{label}.pattern: {exc}") from exc
    if "format" in section:
        _apply_string_format(schema, section, label)
    elif "allowed_schemes" in section:
        raise SchemaDefinitionError(f"{label}.allowed_schemes requires format 'url'.")
    return schema


def _apply_string_format(schema: StringSchema, section: Mapping[str, Any], label: str) -> None:
    string_format = _require_non_empty_string(section["format"], f"{label}.format")
    if string_format not in STRING_FORMATS:
        raise SchemaDefinitionError(
            f"{label}.format '{string_format}' is not supported. "
            f"Valid formats: {list(STRING_FORMATS)}"
        )
    if string_format == "url":
        schemes = _normalize_string_sequence(
            section.get("allowed_schemes", ("http", "https")), f"{label}.allowed_schemes"
        )
        schema.url(schemes)
        return
    if "allowed_schemes" in section:
        raise SchemaDefinitionError(f"{label}.allowed_schemes requires format 'url'.")
    getattr(schema, string_format)()


def _build_number(section: Mapping[str, Any], label: str) -> Schema[Any]:
    schema = z.number()
    if "min" in section:
        schema.min(_require_number(section["min"], f"{label}.min"))
    if "max" in section:
        schema.max(_require_number(section["max"], f"{label}.max"))
    if _optional_bool(section.get("positive"), f"{label}.positive"):
        schema.positive()
    if _optional_bool(section.get("negative"), f"{label}.negative"):
        schema.negative()
    return schema


def _build_boolean(section: Mapping[str, Any], label: str) -> Schema[Any]:
    schema = z.boolean()
    must_be = section.get("must_be")
    if must_be is None:
        return schema
    if not isinstance(must_be, bool):
        raise SchemaDefinitionError(f"{label}.must_be must be true or false.")
    return schema.true_only() if must_be else schema.false_only()


def _build_enum(section: Mapping[str, Any], label: str) -> Schema[Any]:
    values = _normalize_string_sequence(section.get("values"), f"{label}.values")
    if not values:
        raise SchemaDefinitionError(f"{label}.values must contain at least one value.")
    return z.enum(values)


def _build_array(section: Mapping[str, Any], label: str) -> Schema[Any]:
    schema = z.array(build_schema(section.get("items"), label=f"{label}.items"))
    if "min" in section:
        schema.min(_require_non_negative_int(section["min"], f"{label}.min"))
    if "max" in section:
        schema.max(_require_non_negative_int(section["max"], f"{label}.max"))
    return schema


def _build_object(section: Mapping[str, Any], label: str) -> Schema[Any]:
    fields = _require_mapping(section.get("fields"), f"{label}.fields")
    return z.object(
        {
            str(key): build_schema(child, label=f"{label}.fields.{key}")
            for key, child in fields.items()
        }
    )


def _build_union(section: Mapping[str, Any], label: str) -> Schema[Any]:
    options = section.get("options")
    if not isinstance(options, Sequence) or isinstance(options, str) or not options:
        raise SchemaDefinitionError(f"{label}.options must be a non-empty list.")
    return z.union(
        [
            build_schema(option, label=f"{label}.options[{index}]")
            for index, option in enumerate(options)
        ]
    )


_BUILDERS = {
    "string": _build_string,
    "number": _build_number,
    "boolean": _build_boolean,
    "enum": _build_enum,
    "array": _build_array,
    "object": _build_object,
    "union": _build_union,
}


def _require_mapping(value: Any, label: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise SchemaDefinitionError(f"{label} must be a mapping.")
    return value


def _require_non_empty_string(value: Any, label: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise SchemaDefinitionError(f"{label} must be a non-empty string.")
    return value.strip()


def _require_non_negative_int(value: Any, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise SchemaDefinitionError(f"{label} must be a non-negative integer.")
    return value


def _require_number(value: Any, label: str) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise SchemaDefinitionError(f"{label} must be a number.")
    return float(value)


def _optional_bool(value: Any, label: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise SchemaDefinitionError(f"{label} must be true or false.")
    return value


def _normalize_string_sequence(value: Any, label: str) -> tuple[str, ...]:
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise SchemaDefinitionError(f"{label} must be a list of strings.")
    normalized = []
    for item in value:
        if not isinstance(item, str):
            raise SchemaDefinitionError(f"{label} entries must be strings.")
        normalized.append(item)
    return tuple(normalized)
