"""Best-effort input conversions used by ``CoerceSchema``."""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Final

_NUMERIC_TEXT = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII)
_TRUE_WORDS = frozenset({"true", "1", "yes", "y"})
_FALSE_WORDS = frozenset({"false", "0", "no", "n"})


class _Uncoercible(Enum):
    UNCOERCIBLE = "UNCOERCIBLE"

    def __repr__(self) -> str:
        return "UNCOERCIBLE"


UNCOERCIBLE: Final = _Uncoercible.UNCOERCIBLE
"""Returned by a coercer when the input cannot be converted."""


def coerce_to_string(value: Any) -> str | _Uncoercible:
    if isinstance(value, str):
        return value
    if value is None:
        return UNCOERCIBLE
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def coerce_to_number(value: Any) -> float | _Uncoercible:
    """Accept ints, floats and trimmed decimal or scientific strings."""
    if isinstance(value, bool):
        return UNCOERCIBLE
    if isinstance(value, float):
        return value
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            return UNCOERCIBLE
    if isinstance(value, str):
        text = value.strip()
        if not _NUMERIC_TEXT.fullmatch(text):
            return UNCOERCIBLE
        return float(text)
    return UNCOERCIBLE


def coerce_to_boolean(value: Any) -> bool | _Uncoercible:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        lowered = value.lower()
        if lowered in _TRUE_WORDS:
            return True
        if lowered in _FALSE_WORDS:
            return False
    return UNCOERCIBLE
