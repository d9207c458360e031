"""Account credential flows built on the validators and the hasher.

Covers the credential side of registration, login and password change.
Persistence and token issuance belong to the caller: this service only
returns what should be stored.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from authkit.core.exceptions import ValidationError
from authkit.core.logging import get_logger
from authkit.core.security import hash_password, needs_rehash, verify_password
from authkit.validators import normalize_email

if TYPE_CHECKING:
    from authkit.schemas.user import UserChangePassword, UserCreate


class NewAccount(BaseModel):
    """Validated registration data ready for storage. Never holds plaintext."""

    model_config = ConfigDict(frozen=True)

    username: str
    email: str
    full_name: str
    phone_number: str | None
    role: str
    password_hash: str


class AuthResult(BaseModel):
    """Outcome of a password check.

    Attributes:
        verified: Whether the password matched
        upgraded_hash: Replacement hash when the stored one used outdated
            parameters; the caller should persist it
    """

    model_config = ConfigDict(frozen=True)

    verified: bool
    upgraded_hash: str | None = None


class AccountService:
    """Credential operations for account flows.

    Logging:
        - Logs registrations and password changes
        - Logs authentication outcomes without usernames or secrets
    """

    def __init__(self, rounds: int | None = None) -> None:
        """Initialize account service.

        Args:
            rounds: bcrypt cost override; ``Settings.BCRYPT_ROUNDS`` if None
        """
        self.rounds = rounds
        self.logger = get_logger(__name__)

    def register(self, user_data: UserCreate) -> NewAccount:
        """Hash the password of already validated registration data.

        Examples:
            >>> service = AccountService()
            >>> account = service.register(
            ...     UserCreate(
            ...         username="anna.k",
            ...         email="Anna@Example.com",
            ...         password="SecurePass123",
            ...         full_name="Anna Kowalska",
            ...     )
            ... )
            >>> account.email
            'anna@example.com'
        """
        account = NewAccount(
            username=user_data.username,
            email=normalize_email(user_data.email),
            full_name=user_data.full_name,
            phone_number=user_data.phone_number,
            role=user_data.role,
            password_hash=hash_password(user_data.password, rounds=self.rounds),
        )

        self.logger.info(
            "Account registered",
            extra={
                "context": {
                    "action": "register",
                    "role": account.role,
                    "status": "success",
                }
            },
        )

        return account

    def authenticate(self, password: str, password_hash: str) -> AuthResult:
        """Check a login password against the stored hash.

        On success the stored hash is also checked against the current
        work factor; an outdated one comes back rehashed in
        ``upgraded_hash``.

        Raises:
            InternalError: If the stored hash is corrupt. This is a system
                fault and must not be reported as a failed login.
        """
        if not verify_password(password, password_hash):
            self.logger.warning(
                "Authentication failed: invalid password",
                extra={
                    "context": {
                        "action": "authenticate",
                        "status": "failed",
                        "reason": "invalid_password",
                    }
                },
            )
            return AuthResult(verified=False)

        upgraded_hash = None
        if needs_rehash(password_hash, rounds=self.rounds):
            upgraded_hash = hash_password(password, rounds=self.rounds)
            self.logger.info(
                "Password hash upgraded",
                extra={"context": {"action": "authenticate", "status": "rehashed"}},
            )

        return AuthResult(verified=True, upgraded_hash=upgraded_hash)

    def change_password(self, data: UserChangePassword, current_hash: str) -> str:
        """Verify the current password and hash the new one.

        Returns:
            The new password hash

        Raises:
            ValidationError: If the current password is wrong or the new
                password equals it
            InternalError: If ``current_hash`` is corrupt
        """
        if not verify_password(data.old_password, current_hash):
            self.logger.warning(
                "Password change failed: invalid old password",
                extra={
                    "context": {
                        "action": "change_password",
                        "status": "failed",
                        "reason": "invalid_old_password",
                    }
                },
            )
            raise ValidationError(
                "Current password is incorrect", field="old_password"
            )

        if data.new_password == data.old_password:
            raise ValidationError(
                "New password must differ from the current password",
                field="new_password",
            )

        new_hash = hash_password(data.new_password, rounds=self.rounds)

        self.logger.info(
            "Password changed",
            extra={"context": {"action": "change_password", "status": "success"}},
        )

        return new_hash


__all__ = [
    "AccountService",
    "AuthResult",
    "NewAccount",
]
