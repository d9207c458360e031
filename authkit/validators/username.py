"""Username validation."""

from __future__ import annotations

import re
from typing import Final

from authkit.core.exceptions import ValidationError

USERNAME_MIN_LENGTH: Final = 3
USERNAME_MAX_LENGTH: Final = 50

# Letters, digits, underscores and dots
USERNAME_PATTERN: Final[re.Pattern[str]] = re.compile(r"[a-zA-Z0-9_.]+")


def validate_username(username: str) -> None:
    """Validate a username: 3 to 50 UTF-8 bytes of ``[a-zA-Z0-9_.]``.

    Raises:
        ValidationError: On the first violated rule, length before charset
    """
    length = len(username.encode("utf-8"))
    if length < USERNAME_MIN_LENGTH:
        raise ValidationError(
            f"Username must be at least {USERNAME_MIN_LENGTH} characters long",
            field="username",
        )

    if length > USERNAME_MAX_LENGTH:
        raise ValidationError(
            f"Username is too long (max {USERNAME_MAX_LENGTH} characters)",
            field="username",
        )

    if USERNAME_PATTERN.fullmatch(username) is None:
        raise ValidationError(
            "Username can only contain letters, numbers, underscores and dots",
            field="username",
        )
