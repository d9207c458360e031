"""Pydantic schemas for account input."""

from authkit.schemas.user import UserChangePassword, UserCreate, UserLogin

__all__ = [
    "UserChangePassword",
    "UserCreate",
    "UserLogin",
]
