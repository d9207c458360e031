"""Phone number validation.

Only a basic shape check: an optional ``+`` followed by digits, spaces and
hyphens. No country-specific parsing.
"""

from __future__ import annotations

import re
from typing import Final

from authkit.core.exceptions import ValidationError

PHONE_MIN_DIGITS: Final = 6

# Unicode White_Space; Python's \s would also admit the \x1c-\x1f separators
WHITESPACE_CLASS: Final = (
    r"\t\n\x0b\x0c\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000"
)

PHONE_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"[+]?[\d{WHITESPACE_CLASS}-]{{6,20}}"
)


def validate_phone_number(phone: str) -> None:
    """Validate a phone number.

    Both the overall pattern and the digit count are enforced. The pattern
    alone admits six spaces or hyphens, so the separate count of ASCII
    digits is what guarantees a dialable number.

    Raises:
        ValidationError: If the pattern does not match or fewer than six
            digits are present

    Examples:
        >>> validate_phone_number("+48 123 456 789")
        >>> validate_phone_number("--- ---")
        Traceback (most recent call last):
        ...
        authkit.core.exceptions.ValidationError: Phone number must contain at least 6 digits
    """
    if PHONE_PATTERN.fullmatch(phone) is None:
        raise ValidationError(
            "Invalid phone number format. Use only digits, spaces, hyphens, "
            "and optionally a + prefix",
            field="phone_number",
        )

    digit_count = sum(1 for c in phone if c in "0123456789")
    if digit_count < PHONE_MIN_DIGITS:
        raise ValidationError(
            f"Phone number must contain at least {PHONE_MIN_DIGITS} digits",
            field="phone_number",
        )
