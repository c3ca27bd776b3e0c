"""Non-throwing validation outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

from .validation_error import ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class ParseSuccess(Generic[T]):
    """Validation succeeded with a typed value."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class ParseFailure:
    """Validation failed with a structured error."""

    error: ValidationError

    @property
    def is_ok(self) -> bool:
        return False


SafeParseResult: TypeAlias = ParseSuccess[T] | ParseFailure
