"""Composable runtime schema validation."""

import logging

from .composite_schemas import ArraySchema, ObjectSchema, UnionSchema
from .decorator_schemas import (
    UNCOERCIBLE,
    CoerceSchema,
    DefaultSchema,
    OptionalSchema,
    RefineSchema,
    TransformSchema,
)
from .primitive_schemas import BooleanSchema, EnumSchema, NumberSchema, StringSchema
from .schema_factory import SchemaFactory, z
from .validation_core import (
    ErasedValidator,
    ParseFailure,
    ParseSuccess,
    SafeParseResult,
    Schema,
    SchemaKind,
    ValidationError,
    erase,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "z",
    "SchemaFactory",
    "ValidationError",
    "ParseSuccess",
    "ParseFailure",
    "SafeParseResult",
    "Schema",
    "SchemaKind",
    "ErasedValidator",
    "erase",
    "StringSchema",
    "NumberSchema",
    "BooleanSchema",
    "EnumSchema",
    "ArraySchema",
    "ObjectSchema",
    "UnionSchema",
    "OptionalSchema",
    "DefaultSchema",
    "RefineSchema",
    "TransformSchema",
    "CoerceSchema",
    "UNCOERCIBLE",
]
