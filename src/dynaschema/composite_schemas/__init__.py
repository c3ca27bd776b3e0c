"""Composite schema exports."""

from .array_schema import ArraySchema, is_sequence
from .object_schema import ObjectSchema
from .union_schema import UnionSchema

__all__ = [
    "ArraySchema",
    "ObjectSchema",
    "UnionSchema",
    "is_sequence",
]
