"""Validation helpers for dataclass instances and their JSON payloads."""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from typing import Any, TypeVar

from dynaschema.composite_schemas import ObjectSchema
from dynaschema.validation_core import ValidationError

T = TypeVar("T")


class DecodingError(Exception):
    """Raised when a payload cannot be decoded into the target dataclass."""


def to_mapping(instance: Any) -> dict[str, Any]:
    """Convert a dataclass instance into the plain mapping schemas validate."""
    if not dataclasses.is_dataclass(instance) or isinstance(instance, type):
        raise ValidationError(
            f"Failed to convert {type(instance).__name__} to dictionary for validation."
        )
    return dataclasses.asdict(instance)


def validate_instance(instance: Any, schema: ObjectSchema) -> None:
    """Validate an already constructed dataclass instance."""
    schema.parse(to_mapping(instance))


def decode_and_validate(cls: type[T], data: bytes | str, schema: ObjectSchema) -> T:
    """Decode JSON ``data`` into ``cls``, validate it, and return the instance unchanged."""
    if not dataclasses.is_dataclass(cls):
        raise TypeError(f"{cls.__name__} is not a dataclass.")
    try:
        payload = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodingError(f"Failed to decode {cls.__name__}: {exc}") from exc
    if not isinstance(payload, Mapping):
        raise DecodingError(f"Failed to decode {cls.__name__}: payload must be a JSON object.")
    try:
        decoded = cls(**payload)
    except TypeError as exc:
        raise DecodingError(f"Failed to decode {cls.__name__}: {exc}") from exc

    validate_instance(decoded, schema)
    return decoded
