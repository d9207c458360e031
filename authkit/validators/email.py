"""Email validation and normalization.

Features:
- Basic format validation (``local@domain.tld``) with a length cap
- Normalization (lowercase, trim whitespace) for storage and comparison
"""

from __future__ import annotations

import re
from typing import Final

from authkit.core.exceptions import ValidationError

EMAIL_MAX_LENGTH: Final = 100

# Supports: local@domain, local+tag@domain, first.last@domain.co.uk
EMAIL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"
)


def validate_email(email: str) -> None:
    """Validate an email address.

    Does not verify that the address exists or that its domain resolves.

    Args:
        email: Email address to validate

    Raises:
        ValidationError: If the address is too long or malformed

    Examples:
        >>> validate_email("user.name+tag@example.co")
        >>> validate_email("user@.com")
        Traceback (most recent call last):
        ...
        authkit.core.exceptions.ValidationError: Invalid email format
    """
    if len(email.encode("utf-8")) > EMAIL_MAX_LENGTH:
        raise ValidationError(
            f"Email is too long (max {EMAIL_MAX_LENGTH} characters)", field="email"
        )

    if EMAIL_PATTERN.fullmatch(email) is None:
        raise ValidationError("Invalid email format", field="email")

    # Implied by EMAIL_PATTERN; kept so the rule stays explicit.
    if "@" not in email:
        raise ValidationError("Email must contain @ character", field="email")


def normalize_email(email: str | None) -> str:
    """Normalize an email address for storage and comparison.

    Lower-cases the address and trims surrounding whitespace. Plus tags and
    dots in the local part are preserved.

    Examples:
        >>> normalize_email("  Test@Example.COM ")
        'test@example.com'
    """
    if not email:
        return ""
    return email.strip().lower()
