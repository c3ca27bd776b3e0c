"""Output remapping decorator."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from dynaschema.validation_core import Schema, SchemaKind, ValidationError

T = TypeVar("T")
U = TypeVar("U")


class TransformSchema(Schema[U], Generic[T, U]):
    """Runs the base schema and maps its output through ``function``.

    A ``ValidationError`` raised by ``function`` propagates unchanged.
    """

    kind = SchemaKind.TRANSFORM
    __match_args__ = ("base",)

    def __init__(self, base: Schema[T], function: Callable[[T], U]) -> None:
        self.base = base
        self._function = function

    def parse(self, value: Any) -> U:
        parsed = self.base.parse(value)
        try:
            return self._function(parsed)
        except ValidationError:
            raise
        except Exception as exc:  # pylint: disable=broad-exception-caught
            raise ValidationError(
                f"[TransformError] Transform raised {type(exc).__name__}: {exc}"
            ) from exc
