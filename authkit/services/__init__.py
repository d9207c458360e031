"""Service layer for account credential flows."""

from authkit.services.account_service import AccountService, AuthResult, NewAccount

__all__ = [
    "AccountService",
    "AuthResult",
    "NewAccount",
]
