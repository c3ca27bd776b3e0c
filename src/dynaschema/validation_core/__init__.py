"""Validation core exports."""

from .erased_validator import ErasedValidator, erase
from .parse_outcomes import ParseFailure, ParseSuccess, SafeParseResult
from .schema_base import Schema, SchemaKind
from .validation_error import ValidationError

__all__ = [
    "ValidationError",
    "ParseSuccess",
    "ParseFailure",
    "SafeParseResult",
    "Schema",
    "SchemaKind",
    "ErasedValidator",
    "erase",
]
