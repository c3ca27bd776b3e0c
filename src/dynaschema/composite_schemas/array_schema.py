"""Homogeneous sequence schema."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Generic, Self, TypeVar

from dynaschema.validation_core import Schema, SchemaKind, ValidationError

T = TypeVar("T")


def is_sequence(value: Any) -> bool:
    """Return True for sequences other than text and byte strings."""
    return isinstance(value, Sequence) and not isinstance(value, str | bytes | bytearray)


class ArraySchema(Schema[list[T]], Generic[T]):
    """Validates every element against one shared element schema, fail-fast."""

    kind = SchemaKind.ARRAY
    __match_args__ = ("element_schema",)

    def __init__(self, element_schema: Schema[T]) -> None:
        self.element_schema = element_schema
        self._min_length: int | None = None
        self._max_length: int | None = None

    def min(self, count: int) -> Self:
        if count < 0:
            raise ValueError("Minimum array length must be non-negative.")
        self._min_length = count
        return self

    def max(self, count: int) -> Self:
        if count < 0:
            raise ValueError("Maximum array length must be non-negative.")
        self._max_length = count
        return self

    def parse(self, value: Any) -> list[T]:
        if not is_sequence(value):
            raise ValidationError(f"Expected array, got {type(value).__name__}")

        if self._min_length is not None and len(value) < self._min_length:
            raise ValidationError(
                f"[ArraySchemaError] Expected at least {self._min_length} elements "
                f"but got {len(value)}."
            )
        if self._max_length is not None and len(value) > self._max_length:
            raise ValidationError(
                f"[ArraySchemaError] Expected at most {self._max_length} elements "
                f"but got {len(value)}."
            )

        validated: list[T] = []
        for index, item in enumerate(value):
            try:
                validated.append(self.element_schema.parse(item))
            except ValidationError as exc:
                raise exc.with_context(
                    f"[ArraySchemaError] Element at index {index} failed validation: "
                    f"{exc.message}",
                    segment=f"[{index}]",
                ) from exc
            except Exception as exc:  # pylint: disable=broad-exception-caught
                raise ValidationError(
                    f"[ArraySchemaError] Unknown validation error at index {index}."
                ) from exc
        return validated
