"""String schema with length, pattern and custom rule checks."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Self

from dynaschema.validation_core import Schema, SchemaKind, ValidationError

from .string_formats import (
    ALPHANUMERIC_PATTERN,
    EMAIL_PATTERN,
    PHONE_PATTERN,
    UUID_PATTERN,
    url_predicate,
)


@dataclass(frozen=True)
class _StringRule:
    name: str
    predicate: Callable[[str], bool]
    message: str


class StringSchema(Schema[str]):
    """Validates ``str`` values.

    Checks run in a fixed order and the first failure wins: minimum length,
    maximum length, pattern, then custom rules in registration order.
    """

    kind = SchemaKind.STRING

    def __init__(self) -> None:
        self._min_length: int | None = None
        self._max_length: int | None = None
        self._pattern: re.Pattern[str] | None = None
        self._rules: list[_StringRule] = []

    def min(self, length: int) -> Self:
        if length < 0:
            raise ValueError("Minimum length must be non-negative.")
        self._min_length = length
        return self

    def max(self, length: int) -> Self:
        if length < 0:
            raise ValueError("Maximum length must be non-negative.")
        self._max_length = length
        return self

    def matches(self, pattern: str | re.Pattern[str]) -> Self:
        """Require a regex match anywhere in the string; replaces any earlier pattern."""
        if isinstance(pattern, re.Pattern):
            self._pattern = pattern
            return self
        try:
            self._pattern = re.compile(pattern)
        except re.error as exc:
            raise ValueError(f"Invalid regex pattern: {pattern}") from exc
        return self

    def custom(
        self, name: str, predicate: Callable[[str], bool], message: str | None = None
    ) -> Self:
        self._rules.append(
            _StringRule(
                name=name,
                predicate=predicate,
                message=message if message is not None else f"Failed rule '{name}'",
            )
        )
        return self

    def email(self) -> Self:
        return self.matches(EMAIL_PATTERN)

    def uuid(self) -> Self:
        return self.matches(UUID_PATTERN)

    def phone(self) -> Self:
        return self.matches(PHONE_PATTERN)

    def alphanumeric(self) -> Self:
        return self.matches(ALPHANUMERIC_PATTERN)

    def url(self, allowed_schemes: tuple[str, ...] | list[str] = ("http", "https")) -> Self:
        return self.custom("url", url_predicate(allowed_schemes), message="Invalid URL")

    def parse(self, value: Any) -> str:
        if not isinstance(value, str):
            raise ValidationError(f"Expected string, got {type(value).__name__}")

        if self._min_length is not None and len(value) < self._min_length:
            raise ValidationError(
                f"[StringSchemaError] Expected at least {self._min_length} characters "
                f"but got {len(value)}."
            )
        if self._max_length is not None and len(value) > self._max_length:
            raise ValidationError(
                f"[StringSchemaError] Expected at most {self._max_length} characters "
                f"but got {len(value)}."
            )
        if self._pattern is not None and self._pattern.search(value) is None:
            raise ValidationError(
                f"[StringSchemaError] Invalid input: '{value}' does not match pattern "
                f"'{self._pattern.pattern}'"
            )

        for rule in self._rules:
            if not _apply_rule(rule, value):
                raise ValidationError(f"[StringSchemaError] {rule.message}")
        return value


def _apply_rule(rule: _StringRule, value: str) -> bool:
    try:
        return bool(rule.predicate(value))
    except ValidationError:
        raise
    except Exception as exc:  # pylint: disable=broad-exception-caught
        raise ValidationError(
            f"[StringSchemaError] Rule '{rule.name}' raised {type(exc).__name__}: {exc}"
        ) from exc
