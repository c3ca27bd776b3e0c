"""Uniform dynamic-in, dynamic-out adapter over any schema."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .parse_outcomes import ParseFailure, ParseSuccess, SafeParseResult
from .schema_base import Schema


@dataclass(frozen=True)
class ErasedValidator:
    """Schema with its static output type discarded.

    Lets schemas of different output types share one container, such as an
    object field map or a union's alternatives. ``schema`` keeps the source
    node so containers can match on its variant.
    """

    schema: Schema[Any]
    _parse: Callable[[Any], Any]
    _safe_parse: Callable[[Any], SafeParseResult[Any]]

    def parse(self, value: Any) -> Any:
        return self._parse(value)

    def safe_parse(self, value: Any) -> SafeParseResult[Any]:
        return self._safe_parse(value)


def erase(schema: Schema[Any] | ErasedValidator) -> ErasedValidator:
    """Wrap ``schema`` in an :class:`ErasedValidator` (idempotent)."""
    if isinstance(schema, ErasedValidator):
        return schema
    if not isinstance(schema, Schema):
        raise TypeError(f"Expected a schema, got {type(schema).__name__}")

    def _safe_parse(value: Any) -> SafeParseResult[Any]:
        outcome = schema.safe_parse(value)
        if isinstance(outcome, ParseSuccess):
            return ParseSuccess(outcome.value)
        return ParseFailure(outcome.error)

    return ErasedValidator(schema=schema, _parse=schema.parse, _safe_parse=_safe_parse)
