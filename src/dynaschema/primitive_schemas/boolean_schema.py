"""Boolean schema."""

from __future__ import annotations

from typing import Any, Self

from dynaschema.validation_core import Schema, SchemaKind, ValidationError


class BooleanSchema(Schema[bool]):
    """Validates ``bool`` values, optionally pinned to one of them."""

    kind = SchemaKind.BOOLEAN

    def __init__(self) -> None:
        self._must_be_true = False
        self._must_be_false = False

    def true_only(self) -> Self:
        self._must_be_true = True
        return self

    def false_only(self) -> Self:
        self._must_be_false = True
        return self

    def parse(self, value: Any) -> bool:
        if not isinstance(value, bool):
            raise ValidationError(f"Expected boolean, got {type(value).__name__}")
        if self._must_be_true and not value:
            raise ValidationError("[BooleanSchemaError] Expected `true` but got `false`.")
        if self._must_be_false and value:
            raise ValidationError("[BooleanSchemaError] Expected `false` but got `true`.")
        return value
