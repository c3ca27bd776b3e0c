"""Built-in string formats layered on top of ``StringSchema``."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from urllib.parse import urlsplit

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")
UUID_PATTERN = re.compile(
    r"^[0-9A-Fa-f]{8}-[0-9A-Fa-f]{4}-[1-5][0-9A-Fa-f]{3}-[89ABab][0-9A-Fa-f]{3}-[0-9A-Fa-f]{12}$"
)
PHONE_PATTERN = re.compile(r"^\+?[0-9]{7,15}$")
ALPHANUMERIC_PATTERN = re.compile(r"^[A-Za-z0-9]+$")

STRING_FORMATS = ("email", "uuid", "url", "phone", "alphanumeric")


def url_predicate(allowed_schemes: Iterable[str]) -> Callable[[str], bool]:
    """Return a check accepting absolute URLs with a host and an allowed scheme."""
    schemes = frozenset(scheme.lower() for scheme in allowed_schemes)

    def _is_url(text: str) -> bool:
        try:
            parts = urlsplit(text)
        except ValueError:
            return False
        return bool(parts.scheme) and parts.scheme.lower() in schemes and bool(parts.hostname)

    return _is_url
