"""Fixed string literal set schema."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from dynaschema.validation_core import Schema, SchemaKind, ValidationError


class EnumSchema(Schema[str]):
    """Accepts only strings from a non-empty allow-list."""

    kind = SchemaKind.ENUM

    def __init__(self, values: Iterable[str]) -> None:
        allowed = tuple(values)
        if not allowed:
            raise ValueError("Enum must have at least one value.")
        self.allowed_values = allowed

    def parse(self, value: Any) -> str:
        if not isinstance(value, str):
            raise ValidationError(f"Expected string enum, got {type(value).__name__}")
        if value not in self.allowed_values:
            raise ValidationError(f"Expected one of {list(self.allowed_values)}, got '{value}'.")
        return value
