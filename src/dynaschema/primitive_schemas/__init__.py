"""Primitive schema exports."""

from .boolean_schema import BooleanSchema
from .enum_schema import EnumSchema
from .number_schema import NumberSchema, is_number
from .string_formats import STRING_FORMATS
from .string_schema import StringSchema

__all__ = [
    "StringSchema",
    "NumberSchema",
    "BooleanSchema",
    "EnumSchema",
    "STRING_FORMATS",
    "is_number",
]
