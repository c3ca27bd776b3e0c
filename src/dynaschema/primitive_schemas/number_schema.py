"""Number schema accepting ints and floats."""

from __future__ import annotations

from typing import Any, Self

from dynaschema.validation_core import Schema, SchemaKind, ValidationError


def is_number(value: Any) -> bool:
    """Return True for ``int``/``float`` values other than ``bool``."""
    return isinstance(value, int | float) and not isinstance(value, bool)


class NumberSchema(Schema[float]):
    """Validates numbers, normalising every accepted value to ``float``."""

    kind = SchemaKind.NUMBER

    def __init__(self) -> None:
        self._min_value: float | None = None
        self._max_value: float | None = None
        self._must_be_positive = False
        self._must_be_negative = False

    def min(self, value: float) -> Self:
        """Inclusive lower bound."""
        self._min_value = float(value)
        return self

    def max(self, value: float) -> Self:
        """Inclusive upper bound."""
        self._max_value = float(value)
        return self

    def positive(self) -> Self:
        self._must_be_positive = True
        return self

    def negative(self) -> Self:
        self._must_be_negative = True
        return self

    def parse(self, value: Any) -> float:
        if not is_number(value):
            raise ValidationError(f"Expected number, got {type(value).__name__}")
        try:
            number = float(value)
        except OverflowError as exc:
            raise ValidationError("Number is outside the representable float range") from exc

        if self._min_value is not None and number < self._min_value:
            raise ValidationError(f"Expected number ≥ {self._min_value} but got {number}")
        if self._max_value is not None and number > self._max_value:
            raise ValidationError(f"Expected number ≤ {self._max_value} but got {number}")
        if self._must_be_positive and number <= 0:
            raise ValidationError(f"Expected a positive number but got {number}")
        if self._must_be_negative and number >= 0:
            raise ValidationError(f"Expected a negative number but got {number}")
        return number
