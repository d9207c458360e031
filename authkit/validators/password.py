"""Password strength validation."""

from __future__ import annotations

from authkit.core.exceptions import ValidationError

PASSWORD_MIN_LENGTH = 8


def validate_password(password: str) -> None:
    """Validate password strength requirements.

    Checked in order, the first failing rule is reported:
    - At least 8 bytes of UTF-8
    - At least one ASCII digit (0-9)
    - At least one uppercase letter
    - At least one lowercase letter

    Args:
        password: Plain text password to validate

    Raises:
        ValidationError: If the password doesn't meet a requirement

    Examples:
        >>> validate_password("SecurePass123")
        >>> validate_password("securepass123")
        Traceback (most recent call last):
        ...
        authkit.core.exceptions.ValidationError: Password must contain at least one uppercase letter
    """
    if len(password.encode("utf-8")) < PASSWORD_MIN_LENGTH:
        raise ValidationError(
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters long",
            field="password",
        )
    if not any(c in "0123456789" for c in password):
        raise ValidationError(
            "Password must contain at least one digit", field="password"
        )
    if not any(c.isupper() for c in password):
        raise ValidationError(
            "Password must contain at least one uppercase letter", field="password"
        )
    if not any(c.islower() for c in password):
        raise ValidationError(
            "Password must contain at least one lowercase letter", field="password"
        )
