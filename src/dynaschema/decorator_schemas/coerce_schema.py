"""Pre-validation input normalisation decorator."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from dynaschema.validation_core import Schema, SchemaKind, ValidationError

from .coercers import UNCOERCIBLE

T = TypeVar("T")


class CoerceSchema(Schema[T], Generic[T]):
    """Converts raw input with ``coercer`` before the base schema runs."""

    kind = SchemaKind.COERCE
    __match_args__ = ("base",)

    def __init__(self, base: Schema[T], coercer: Callable[[Any], Any]) -> None:
        self.base = base
        self._coercer = coercer

    def parse(self, value: Any) -> T:
        coerced = self._coercer(value)
        if coerced is UNCOERCIBLE:
            raise ValidationError(
                f"[CoerceSchemaError] Failed to coerce value '{value}' to expected type."
            )

        try:
            return self.base.parse(coerced)
        except ValidationError as exc:
            raise exc.with_context(f"[CoerceSchemaError] {exc.message}") from exc
        except Exception as exc:  # pylint: disable=broad-exception-caught
            raise ValidationError(
                "[CoerceSchemaError] Unknown error while parsing coerced value."
            ) from exc
