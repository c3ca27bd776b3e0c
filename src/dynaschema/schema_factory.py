"""Single construction facade for every schema kind.

Example::

    from dynaschema import z

    user = z.object(
        {
            "id": z.string().uuid(),
            "age": z.number().min(18).max(120),
            "nickname": z.string().optional(),
        }
    )
    user.parse({"id": "123e4567-e89b-12d3-a456-426614174000", "age": 30})
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from dynaschema.composite_schemas import ArraySchema, ObjectSchema, UnionSchema
from dynaschema.decorator_schemas import (
    CoerceSchema,
    OptionalSchema,
    coerce_to_boolean,
    coerce_to_number,
    coerce_to_string,
)
from dynaschema.primitive_schemas import BooleanSchema, EnumSchema, NumberSchema, StringSchema
from dynaschema.validation_core import ErasedValidator, Schema

T = TypeVar("T")


class CoerceFactory:
    """Constructors for primitives that normalise their input first."""

    @staticmethod
    def string(base: StringSchema | None = None) -> CoerceSchema[str]:
        return CoerceSchema(base if base is not None else StringSchema(), coerce_to_string)

    @staticmethod
    def number(base: NumberSchema | None = None) -> CoerceSchema[float]:
        return CoerceSchema(base if base is not None else NumberSchema(), coerce_to_number)

    @staticmethod
    def boolean(base: BooleanSchema | None = None) -> CoerceSchema[bool]:
        return CoerceSchema(base if base is not None else BooleanSchema(), coerce_to_boolean)


class SchemaFactory:
    """Entry point constructing every schema kind."""

    coerce = CoerceFactory()

    @staticmethod
    def string() -> StringSchema:
        return StringSchema()

    @staticmethod
    def number() -> NumberSchema:
        return NumberSchema()

    @staticmethod
    def boolean() -> BooleanSchema:
        return BooleanSchema()

    @staticmethod
    def enum(values: Iterable[str]) -> EnumSchema:
        return EnumSchema(values)

    @staticmethod
    def array(element_schema: Schema[T]) -> ArraySchema[T]:
        return ArraySchema(element_schema)

    @staticmethod
    def object(fields: Mapping[str, Schema[Any] | ErasedValidator]) -> ObjectSchema:
        return ObjectSchema(fields)

    @staticmethod
    def union(
        options: Iterable[Schema[Any] | ErasedValidator],
        output_type: type[Any] | tuple[type, ...] | None = None,
    ) -> UnionSchema[Any]:
        return UnionSchema(options, output_type=output_type)

    @staticmethod
    def optional(schema: Schema[T]) -> OptionalSchema[T]:
        return OptionalSchema(schema)


z = SchemaFactory()
