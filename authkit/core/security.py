"""Password hashing and verification.

This module wraps bcrypt to produce and check password digests. The work
factor comes from ``Settings.BCRYPT_ROUNDS`` (default 12) and may be
overridden per call.

Hashes use the bcrypt modular-crypt format
(``$2b$<cost>$<22 char salt><31 char digest>``), so hashes produced under an
older cost keep verifying after the configured cost changes.
``needs_rehash`` tells callers when a stored hash should be upgraded.

Error contract:
    - ``verify_password`` returns ``False`` for a wrong password
    - a malformed stored hash raises ``InternalError``; it is a data fault,
      not a failed login
    - a hashing engine failure raises ``InternalError``

Logging:
    Logs actions and outcomes only. Plaintext passwords are never logged
    and of a hash only the algorithm prefix is.
"""

from __future__ import annotations

import re
from time import perf_counter
from typing import Final

import bcrypt

from authkit.core.config import get_settings
from authkit.core.exceptions import InternalError
from authkit.core.logging import get_logger

logger = get_logger(__name__)

# bcrypt ignores input past 72 bytes; newer releases refuse it outright
BCRYPT_MAX_PASSWORD_BYTES: Final = 72
BCRYPT_CURRENT_PREFIX: Final = "2b"

BCRYPT_HASH_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\$(?P<prefix>2[abxy]?)\$(?P<rounds>\d{2})\$[./A-Za-z0-9]{53}"
)


def _prepare_password(password: str) -> bytes:
    """Encode a password, truncated to bcrypt's 72-byte input limit."""
    password_bytes = password.encode("utf-8")
    if len(password_bytes) > BCRYPT_MAX_PASSWORD_BYTES:
        password_bytes = password_bytes[:BCRYPT_MAX_PASSWORD_BYTES]
    return password_bytes


def _resolve_rounds(rounds: int | None) -> int:
    return get_settings().BCRYPT_ROUNDS if rounds is None else rounds


def hash_password(password: str, *, rounds: int | None = None) -> str:
    """Hash a password using bcrypt with a fresh random salt.

    The same password hashes differently on every call; each result still
    verifies against it.

    Note:
        Passwords longer than 72 UTF-8 bytes are truncated to 72 bytes
        before hashing.

    Args:
        password: Plain text password to hash
        rounds: bcrypt cost factor. Defaults to ``Settings.BCRYPT_ROUNDS``

    Returns:
        Bcrypt hash string (60 characters, e.g. ``$2b$12$...``)

    Raises:
        InternalError: If bcrypt cannot run with the given parameters

    Examples:
        >>> hashed = hash_password("SecurePass123")
        >>> hashed.startswith("$2b$")
        True
    """
    cost = _resolve_rounds(rounds)

    logger.debug(
        "Password hashing operation",
        extra={
            "context": {
                "action": "hash_password",
                "rounds": cost,
                "truncated": len(password.encode("utf-8"))
                > BCRYPT_MAX_PASSWORD_BYTES,
            }
        },
    )

    try:
        salt = bcrypt.gensalt(rounds=cost)
        hashed: str = bcrypt.hashpw(_prepare_password(password), salt).decode("utf-8")
    except (ValueError, TypeError) as exc:
        logger.error(
            "Password hashing failed",
            extra={
                "context": {
                    "action": "hash_password",
                    "rounds": cost,
                    "error_type": type(exc).__name__,
                    "status": "failed",
                }
            },
        )
        raise InternalError(f"Hashing error: {exc}") from exc

    logger.info(
        "Password hashed successfully",
        extra={
            "context": {
                "action": "hash_password",
                "hash_prefix": hashed[:7],
                "status": "success",
            }
        },
    )

    return hashed


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against a stored bcrypt hash.

    The salt and cost are read from ``password_hash``; digests are compared
    in constant time by bcrypt.

    Args:
        password: Plain text password to verify
        password_hash: Stored bcrypt hash to compare against

    Returns:
        True if the password matches, False otherwise

    Raises:
        InternalError: If ``password_hash`` is not a well-formed bcrypt hash

    Examples:
        >>> hashed = hash_password("SecurePass123")
        >>> verify_password("SecurePass123", hashed)
        True
        >>> verify_password("WrongPass456", hashed)
        False
    """
    if not BCRYPT_HASH_PATTERN.fullmatch(password_hash):
        _log_malformed_hash("verify_password")
        raise InternalError("Verification error: stored password hash is malformed")

    try:
        result: bool = bcrypt.checkpw(
            _prepare_password(password), password_hash.encode("utf-8")
        )
    except ValueError as exc:
        _log_malformed_hash("verify_password", exc)
        raise InternalError(f"Verification error: {exc}") from exc

    logger.info(
        "Password verification completed",
        extra={
            "context": {
                "action": "verify_password",
                "result": result,
                "status": "success",
            }
        },
    )

    return result


def needs_rehash(password_hash: str, *, rounds: int | None = None) -> bool:
    """Tell whether a stored hash was produced with outdated parameters.

    A hash needs rehashing when its cost differs from the configured one or
    it uses an older bcrypt variant prefix (``$2a$``, ``$2y$`` ...). Callers
    typically rehash right after a successful ``verify_password``.

    Raises:
        InternalError: If ``password_hash`` is not a well-formed bcrypt hash
    """
    match = BCRYPT_HASH_PATTERN.fullmatch(password_hash)
    if match is None:
        _log_malformed_hash("needs_rehash")
        raise InternalError("Stored password hash is malformed")

    return (
        match.group("prefix") != BCRYPT_CURRENT_PREFIX
        or int(match.group("rounds")) != _resolve_rounds(rounds)
    )


def _log_malformed_hash(action: str, exc: Exception | None = None) -> None:
    logger.error(
        "Stored password hash is malformed",
        extra={
            "context": {
                "action": action,
                "error_type": type(exc).__name__ if exc else "FormatMismatch",
                "status": "failed",
            }
        },
    )


def benchmark_hash_performance(
    iterations: int = 10, *, rounds: int | None = None
) -> dict[str, float]:
    """Benchmark hashing and verification at a given work factor.

    Useful when choosing ``BCRYPT_ROUNDS`` for a deployment: each extra
    round doubles the cost.

    Args:
        iterations: Number of iterations to run (default: 10)
        rounds: bcrypt cost factor. Defaults to ``Settings.BCRYPT_ROUNDS``

    Returns:
        Dictionary with 'hash_mean', 'hash_max', 'verify_mean' and
        'verify_max' in seconds
    """
    if iterations < 1:
        raise ValueError("iterations must be at least 1")

    test_password = "BenchmarkPass123"
    test_hash = hash_password(test_password, rounds=rounds)

    hash_times = []
    verify_times = []

    for _ in range(iterations):
        start = perf_counter()
        hash_password(test_password, rounds=rounds)
        hash_times.append(perf_counter() - start)

        start = perf_counter()
        verify_password(test_password, test_hash)
        verify_times.append(perf_counter() - start)

    return {
        "hash_mean": sum(hash_times) / len(hash_times),
        "hash_max": max(hash_times),
        "verify_mean": sum(verify_times) / len(verify_times),
        "verify_max": max(verify_times),
    }


__all__ = [
    "BCRYPT_HASH_PATTERN",
    "benchmark_hash_performance",
    "hash_password",
    "needs_rehash",
    "verify_password",
]
