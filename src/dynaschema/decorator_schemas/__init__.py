"""Decorator schema exports."""

from .coerce_schema import CoerceSchema
from .coercers import UNCOERCIBLE, coerce_to_boolean, coerce_to_number, coerce_to_string
from .default_schema import DefaultSchema
from .optional_schema import OptionalSchema
from .refine_schema import RefineSchema
from .transform_schema import TransformSchema

__all__ = [
    "OptionalSchema",
    "DefaultSchema",
    "RefineSchema",
    "TransformSchema",
    "CoerceSchema",
    "UNCOERCIBLE",
    "coerce_to_string",
    "coerce_to_number",
    "coerce_to_boolean",
]
