"""Default-value decorator."""

from __future__ import annotations

import copy
from typing import Any, Generic, TypeVar

from dynaschema.validation_core import Schema, SchemaKind

T = TypeVar("T")

_COMPOSITE_TYPES = (list, dict, set)


class DefaultSchema(Schema[T], Generic[T]):
    """Substitutes a captured default for ``None`` input.

    Composite defaults are deep-copied on every hand-out so callers never
    share one mutable instance.
    """

    kind = SchemaKind.DEFAULT
    __match_args__ = ("wrapped",)

    def __init__(self, wrapped: Schema[T], default_value: T) -> None:
        self.wrapped = wrapped
        self._default_value = default_value

    @property
    def default_value(self) -> T:
        if isinstance(self._default_value, _COMPOSITE_TYPES):
            return copy.deepcopy(self._default_value)
        return self._default_value

    def parse(self, value: Any) -> T:
        if value is None:
            return self.default_value
        return self.wrapped.parse(value)
