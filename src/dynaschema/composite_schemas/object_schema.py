"""Keyed mapping schema with one schema per declared field."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dynaschema.decorator_schemas import DefaultSchema, OptionalSchema
from dynaschema.validation_core import (
    ErasedValidator,
    Schema,
    SchemaKind,
    ValidationError,
    erase,
)

_MISSING = object()


class ObjectSchema(Schema[dict[str, Any]]):
    """Validates declared fields of a mapping in declaration order.

    Undeclared input keys are ignored and left out of the result. Validation
    stops at the first failing field.
    """

    kind = SchemaKind.OBJECT
    __match_args__ = ("fields",)

    def __init__(self, fields: Mapping[str, Schema[Any] | ErasedValidator]) -> None:
        self.fields: dict[str, ErasedValidator] = {
            key: erase(schema) for key, schema in fields.items()
        }

    def parse(self, value: Any) -> dict[str, Any]:
        if not isinstance(value, Mapping):
            raise ValidationError(f"Expected object, got {type(value).__name__}")

        result: dict[str, Any] = {}
        for key, validator in self.fields.items():
            if key not in value:
                result[key] = _resolve_absent_field(key, validator.schema)
                continue
            try:
                result[key] = validator.parse(value[key])
            except ValidationError as exc:
                raise exc.with_context(
                    f"[ObjectSchemaError] Field '{key}' failed validation: {exc.message}",
                    segment=key,
                ) from exc
            except Exception as exc:  # pylint: disable=broad-exception-caught
                raise ValidationError(
                    f"[ObjectSchemaError] Unknown validation error at key '{key}'."
                ) from exc
        return result


def _resolve_absent_field(key: str, schema: Schema[Any]) -> Any:
    default = _find_default(schema)
    if default is not _MISSING:
        return default
    if isinstance(schema, OptionalSchema):
        return None
    raise ValidationError(f"[ObjectSchemaError] Missing required field '{key}'", path=(key,))


def _find_default(schema: Schema[Any]) -> Any:
    # Looks through any number of optional layers.
    match schema:
        case DefaultSchema():
            return schema.default_value
        case OptionalSchema(wrapped):
            return _find_default(wrapped)
        case _:
            return _MISSING
