"""Abstract validator contract implemented by every schema kind."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from .parse_outcomes import ParseFailure, ParseSuccess, SafeParseResult
from .validation_error import ValidationError

if TYPE_CHECKING:
    from dynaschema.decorator_schemas import (
        DefaultSchema,
        OptionalSchema,
        RefineSchema,
        TransformSchema,
    )

T = TypeVar("T")
U = TypeVar("U")

_LOGGER = logging.getLogger(__name__)


class SchemaKind(str, Enum):
    """Closed set of schema variants."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ENUM = "enum"
    ARRAY = "array"
    OBJECT = "object"
    UNION = "union"
    OPTIONAL = "optional"
    DEFAULT = "default"
    REFINE = "refine"
    TRANSFORM = "transform"
    COERCE = "coerce"


class Schema(ABC, Generic[T]):
    """Base class for all schemas.

    Subclasses implement :meth:`parse`; :meth:`safe_parse` is the single
    non-throwing boundary and is never overridden.
    """

    kind: ClassVar[SchemaKind]

    @abstractmethod
    def parse(self, value: Any) -> T:
        """Validate ``value`` and return the typed result or raise ``ValidationError``."""

    def safe_parse(self, value: Any) -> SafeParseResult[T]:
        """Validate ``value`` without raising."""
        try:
            return ParseSuccess(self.parse(value))
        except ValidationError as exc:
            return ParseFailure(exc)
        except Exception:  # pylint: disable=broad-exception-caught
            _LOGGER.debug("Unexpected failure in %s.parse", type(self).__name__, exc_info=True)
            return ParseFailure(ValidationError("Unknown error"))

    def optional(self) -> OptionalSchema[T]:
        """Accept ``None`` as an absent value."""
        from dynaschema.decorator_schemas import OptionalSchema

        return OptionalSchema(self)

    def default(self, value: T) -> DefaultSchema[T]:
        """Substitute ``value`` for ``None`` or a missing object key."""
        from dynaschema.decorator_schemas import DefaultSchema

        return DefaultSchema(self, value)

    def refine(
        self, predicate: Callable[[T], bool], message: str, name: str = "refine"
    ) -> RefineSchema[T]:
        """Apply an extra named check after this schema succeeds."""
        from dynaschema.decorator_schemas import RefineSchema

        return RefineSchema(self, predicate=predicate, message=message, name=name)

    def transform(self, function: Callable[[T], U]) -> TransformSchema[T, U]:
        """Remap the validated output."""
        from dynaschema.decorator_schemas import TransformSchema

        return TransformSchema(self, function)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"
