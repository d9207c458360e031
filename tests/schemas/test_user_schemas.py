"""Tests for account input schemas."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from authkit.core.exceptions import InternalError
from authkit.schemas.user import UserChangePassword, UserCreate, UserLogin


class TestUserCreate:
    """Test registration schema validation."""

    def test_valid_registration(self, valid_registration):
        """Test that a valid payload passes and the role is normalized."""
        user = UserCreate(**valid_registration)

        assert user.username == "anna.k_99"
        assert user.role == "trainer"
        assert user.phone_number == "+48 123 456 789"

    def test_optional_fields_default(self, valid_registration):
        """Test that phone is optional and role defaults to client."""
        del valid_registration["phone_number"]
        del valid_registration["role"]

        user = UserCreate(**valid_registration)

        assert user.phone_number is None
        assert user.role == "client"

    @pytest.mark.parametrize(
        ("field", "value", "message"),
        [
            ("username", "jo", "Username must be at least 3 characters long"),
            ("email", "user@.com", "Invalid email format"),
            ("password", "weakpass1", "at least one uppercase letter"),
            ("full_name", "Anna", "both first and last name"),
            ("phone_number", "abc-def", "Invalid phone number format"),
            ("role", "admin", "Must be 'client' or 'trainer'"),
        ],
    )
    def test_validator_message_surfaces(self, valid_registration, field, value, message):
        """Test that each field reports its validator's message."""
        valid_registration[field] = value

        with pytest.raises(PydanticValidationError) as exc_info:
            UserCreate(**valid_registration)

        errors = exc_info.value.errors()
        assert len(errors) == 1
        assert errors[0]["loc"] == (field,)
        assert message in errors[0]["msg"]

    def test_all_violations_reported(self, valid_registration):
        """Test that pydantic collects one error per invalid field."""
        valid_registration.update(username="jo", email="bad", password="short")

        with pytest.raises(PydanticValidationError) as exc_info:
            UserCreate(**valid_registration)

        locs = {error["loc"] for error in exc_info.value.errors()}
        assert locs == {("username",), ("email",), ("password",)}

    def test_internal_error_is_not_swallowed(self, valid_registration, monkeypatch):
        """Test that a system fault escapes pydantic unchanged."""

        def broken(_value):
            raise InternalError("validator unavailable")

        monkeypatch.setattr("authkit.schemas.user.validate_email", broken)

        with pytest.raises(InternalError, match="validator unavailable"):
            UserCreate(**valid_registration)


class TestUserLogin:
    """Test login schema."""

    def test_weak_password_accepted_for_login(self):
        """Test that login does not apply strength rules."""
        login = UserLogin(username="anna", password="weak")

        assert login.password == "weak"

    def test_empty_password_rejected(self):
        """Test that an empty password is rejected."""
        with pytest.raises(PydanticValidationError):
            UserLogin(username="anna", password="")


class TestUserChangePassword:
    """Test password change schema."""

    def test_new_password_strength_checked(self):
        """Test that the new password must be strong."""
        with pytest.raises(PydanticValidationError, match="at least one digit"):
            UserChangePassword(old_password="anything", new_password="NoDigitsHere")

    def test_old_password_not_strength_checked(self):
        """Test that the old password is taken as-is."""
        data = UserChangePassword(old_password="old", new_password="NewPass123")

        assert data.old_password == "old"
