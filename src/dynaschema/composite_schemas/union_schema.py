"""First-match-wins alternation schema."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Generic, TypeVar

from dynaschema.validation_core import (
    ErasedValidator,
    ParseSuccess,
    Schema,
    SchemaKind,
    ValidationError,
    erase,
)

T = TypeVar("T")


class UnionSchema(Schema[T], Generic[T]):
    """Tries each option in declaration order.

    The first option that succeeds with a value that is an instance of
    ``output_type`` wins.
    """

    kind = SchemaKind.UNION
    __match_args__ = ("options",)

    def __init__(
        self,
        options: Iterable[Schema[Any] | ErasedValidator],
        output_type: type[T] | tuple[type, ...] | None = None,
    ) -> None:
        erased = tuple(erase(option) for option in options)
        if not erased:
            raise ValueError("[UnionSchemaError] Union must have at least one schema.")
        self.options = erased
        self.output_type: type[Any] | tuple[type, ...] = (
            output_type if output_type is not None else object
        )

    def parse(self, value: Any) -> T:
        collected_errors: list[str] = []
        for option in self.options:
            outcome = option.safe_parse(value)
            if isinstance(outcome, ParseSuccess):
                if isinstance(outcome.value, self.output_type):
                    return outcome.value  # type: ignore[no-any-return]
                continue
            collected_errors.append(outcome.error.message)

        raise ValidationError(
            "[UnionSchemaError] Value did not match any union type: "
            + ", ".join(collected_errors)
        )
