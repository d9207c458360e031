"""Full name validation.

Accepts Latin letters plus the Polish diacritics, spaces, hyphens and
apostrophes (``O'Connor``, ``Nowak-Kowalska``). This is not a general
Unicode name validator.
"""

from __future__ import annotations

import re
from typing import Final

from authkit.core.exceptions import ValidationError

FULL_NAME_MIN_LENGTH: Final = 2
FULL_NAME_MAX_LENGTH: Final = 100

POLISH_DIACRITICS: Final = "ąćęłńóśźżĄĆĘŁŃÓŚŹŻ"

FULL_NAME_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"[a-zA-Z{POLISH_DIACRITICS} '-]+"
)


def validate_full_name(full_name: str) -> None:
    """Validate a full name.

    Rules, in order:
    - 2 to 100 bytes of UTF-8 (Polish letters count twice)
    - only allowed letters, spaces, hyphens and apostrophes
    - at least two whitespace-separated parts (first and last name)

    Raises:
        ValidationError: On the first violated rule

    Examples:
        >>> validate_full_name("Anna Kowalska")
        >>> validate_full_name("Anna")
        Traceback (most recent call last):
        ...
        authkit.core.exceptions.ValidationError: Full name must include both first and last name
    """
    length = len(full_name.encode("utf-8"))
    if length < FULL_NAME_MIN_LENGTH:
        raise ValidationError(
            f"Full name must be at least {FULL_NAME_MIN_LENGTH} characters long",
            field="full_name",
        )

    if length > FULL_NAME_MAX_LENGTH:
        raise ValidationError(
            f"Full name is too long (max {FULL_NAME_MAX_LENGTH} characters)",
            field="full_name",
        )

    if FULL_NAME_PATTERN.fullmatch(full_name) is None:
        raise ValidationError(
            "Full name can only contain letters, spaces, hyphens and apostrophes",
            field="full_name",
        )

    if len(full_name.split()) < 2:
        raise ValidationError(
            "Full name must include both first and last name", field="full_name"
        )
