"""Optional decorator."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from dynaschema.validation_core import Schema, SchemaKind

T = TypeVar("T")


class OptionalSchema(Schema[T | None], Generic[T]):
    """Turns ``None`` into an immediate success; delegates anything else."""

    kind = SchemaKind.OPTIONAL
    __match_args__ = ("wrapped",)

    def __init__(self, wrapped: Schema[T]) -> None:
        self.wrapped = wrapped

    def parse(self, value: Any) -> T | None:
        if value is None:
            return None
        return self.wrapped.parse(value)
