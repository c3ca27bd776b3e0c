"""Typed value bridge exports."""

from .dataclass_bridge import DecodingError, decode_and_validate, to_mapping, validate_instance

__all__ = [
    "DecodingError",
    "decode_and_validate",
    "to_mapping",
    "validate_instance",
]
