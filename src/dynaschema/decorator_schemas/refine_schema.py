"""Predicate-based post-check decorator."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from dynaschema.validation_core import Schema, SchemaKind, ValidationError

T = TypeVar("T")


class RefineSchema(Schema[T], Generic[T]):
    """Runs the base schema, then a named predicate on its output."""

    kind = SchemaKind.REFINE
    __match_args__ = ("base",)

    def __init__(
        self,
        base: Schema[T],
        *,
        predicate: Callable[[T], bool],
        message: str,
        name: str = "refine",
    ) -> None:
        self.base = base
        self.name = name
        self.message = message
        self._predicate = predicate

    def parse(self, value: Any) -> T:
        parsed = self.base.parse(value)
        try:
            accepted = bool(self._predicate(parsed))
        except ValidationError:
            raise
        except Exception as exc:  # pylint: disable=broad-exception-caught
            raise ValidationError(
                f"[RefineError: {self.name}] Predicate raised {type(exc).__name__}: {exc}"
            ) from exc
        if not accepted:
            raise ValidationError(f"[RefineError: {self.name}] {self.message}")
        return parsed
