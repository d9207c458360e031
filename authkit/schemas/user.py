"""Pydantic schemas for account input.

Field validators delegate to ``authkit.validators``. ``ValidationError`` is
a ``ValueError``, so pydantic reports rule violations with the validator's
message; ``InternalError`` is not and propagates unchanged.
"""

from pydantic import BaseModel, Field, field_validator

from authkit.validators import (
    validate_email,
    validate_full_name,
    validate_password,
    validate_phone_number,
    validate_role,
    validate_username,
)


class UserCreate(BaseModel):
    """Schema for account registration.

    Attributes:
        username: Login name
        email: Contact email address
        password: Plain text password (hashed before storage)
        full_name: First and last name
        phone_number: Optional contact number
        role: ``client`` or ``trainer``; normalized to lower case
    """

    username: str = Field(..., description="Login name")
    email: str = Field(..., description="User email address")
    password: str = Field(..., description="User password")
    full_name: str = Field(..., description="First and last name")
    phone_number: str | None = Field(None, description="Contact phone number")
    role: str = Field("client", description="Account role")

    @field_validator("username")
    @classmethod
    def check_username(cls, v: str) -> str:
        validate_username(v)
        return v

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        validate_email(v)
        return v

    @field_validator("password")
    @classmethod
    def check_password(cls, v: str) -> str:
        validate_password(v)
        return v

    @field_validator("full_name")
    @classmethod
    def check_full_name(cls, v: str) -> str:
        validate_full_name(v)
        return v

    @field_validator("phone_number")
    @classmethod
    def check_phone_number(cls, v: str | None) -> str | None:
        if v is not None:
            validate_phone_number(v)
        return v

    @field_validator("role")
    @classmethod
    def check_role(cls, v: str) -> str:
        return validate_role(v)


class UserLogin(BaseModel):
    """Schema for login; the password is only checked against the hash."""

    username: str = Field(..., min_length=1, description="Login name")
    password: str = Field(..., min_length=1, description="User password")


class UserChangePassword(BaseModel):
    """Schema for changing a password.

    Attributes:
        old_password: Current password
        new_password: New password, strength checked
    """

    old_password: str = Field(..., description="Current password")
    new_password: str = Field(..., description="New password")

    @field_validator("new_password")
    @classmethod
    def check_new_password(cls, v: str) -> str:
        validate_password(v)
        return v


__all__ = [
    "UserChangePassword",
    "UserCreate",
    "UserLogin",
]
