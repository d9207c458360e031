"""Error types raised by authkit.

Two kinds of failure exist:

- ``ValidationError``: client-supplied input broke a documented rule. The
  message is safe to show to the end user, who can retry with corrected
  input.
- ``InternalError``: the environment or a library failed (malformed stored
  hash, hashing engine failure). Callers should log it as a system fault and
  show only a generic failure.

Both derive from ``AppError`` and carry an ``ErrorKind`` tag so a boundary
layer can translate them without ``isinstance`` ladders.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Classification of an ``AppError``."""

    VALIDATION = "validation"
    INTERNAL = "internal"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


class AppError(Exception):
    """Base class for every error raised by authkit."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(AppError, ValueError):
    """Input violated a validation rule.

    Subclasses ``ValueError`` so pydantic field validators report it as a
    regular validation failure.

    Attributes:
        message: User-displayable description of the violated rule
        field: Name of the validated field, if known

    Example:
        >>> raise ValidationError("Invalid email format", field="email")
    """

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class InternalError(AppError):
    """Hashing engine or stored data is broken; not the caller's input."""

    kind = ErrorKind.INTERNAL


__all__ = [
    "AppError",
    "ErrorKind",
    "InternalError",
    "ValidationError",
]
