"""Account role validation."""

from __future__ import annotations

from enum import Enum

from authkit.core.exceptions import ValidationError


class Role(str, Enum):
    """Roles a self-registering account may take."""

    CLIENT = "client"
    TRAINER = "trainer"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


def validate_role(role: str) -> str:
    """Validate a role name case-insensitively.

    Returns:
        The lower-cased role, e.g. ``"trainer"`` for ``"Trainer"``

    Raises:
        ValidationError: If the role is neither client nor trainer
    """
    normalized = role.lower()
    try:
        return Role(normalized).value
    except ValueError:
        raise ValidationError(
            "Invalid role. Must be 'client' or 'trainer'", field="role"
        ) from None
