"""Core configuration and credential utilities.

This package contains:
- Configuration management (config.py)
- Error types (exceptions.py)
- Logging setup (logging.py)
- Password hashing (security.py)
"""

from authkit.core.config import Settings, get_settings
from authkit.core.exceptions import AppError, ErrorKind, InternalError, ValidationError
from authkit.core.security import (
    benchmark_hash_performance,
    hash_password,
    needs_rehash,
    verify_password,
)

__all__ = [
    "AppError",
    "ErrorKind",
    "InternalError",
    "Settings",
    "ValidationError",
    "benchmark_hash_performance",
    "get_settings",
    "hash_password",
    "needs_rehash",
    "verify_password",
]
