"""Validation failure value shared by every schema."""

from __future__ import annotations

from collections.abc import Iterable


class ValidationError(Exception):
    """Raised when a value does not conform to a schema.

    ``path`` holds segment tokens innermost-first: the segment closest to the
    failure comes first and parents are appended while the error unwinds.
    """

    def __init__(self, message: str, path: Iterable[str] = ()) -> None:
        self.message = message
        self.path: tuple[str, ...] = tuple(path)
        super().__init__(message)

    @property
    def formatted_path(self) -> str:
        """Return the outermost-first dotted path, e.g. ``user.address.city``."""
        return ".".join(reversed(self.path))

    @property
    def formatted_description(self) -> str:
        """Return ``path: message`` when a path exists, else the bare message."""
        formatted_path = self.formatted_path
        if not formatted_path:
            return self.message
        return f"{formatted_path}: {self.message}"

    def with_context(self, message: str, segment: str | None = None) -> ValidationError:
        """Return a new error carrying ``message`` and, if given, one more path segment."""
        path = self.path if segment is None else (*self.path, segment)
        return ValidationError(message, path)

    def __str__(self) -> str:
        return self.formatted_description

    def __repr__(self) -> str:
        return f"ValidationError({self.message!r}, path={self.path!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationError):
            return NotImplemented
        return self.message == other.message and self.path == other.path

    def __hash__(self) -> int:
        return hash((self.message, self.path))
