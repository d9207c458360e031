"""Username validation tests."""

import pytest

from authkit.core.exceptions import ValidationError
from authkit.validators.username import validate_username


class TestValidateUsername:
    """Test username validation."""

    @pytest.mark.parametrize("username", ["john_doe.99", "abc", "A" * 50, "..."])
    def test_valid_usernames(self, username):
        """Test letters, digits, underscores and dots within 3..50 chars."""
        assert validate_username(username) is None

    def test_too_short(self):
        """Test that two characters are too few."""
        with pytest.raises(ValidationError, match="at least 3 characters long") as exc_info:
            validate_username("jo")

        assert exc_info.value.field == "username"

    def test_too_long(self):
        """Test that 51 characters are too many."""
        with pytest.raises(ValidationError, match=r"too long \(max 50 characters\)"):
            validate_username("a" * 51)

    @pytest.mark.parametrize("username", ["john doe", "john-doe", "jan@kowalski", "łukasz"])
    def test_invalid_characters(self, username):
        """Test that other characters are rejected."""
        with pytest.raises(ValidationError, match="only contain letters, numbers"):
            validate_username(username)

    def test_length_checked_before_charset(self):
        """Test that a short username with bad characters reports length."""
        with pytest.raises(ValidationError, match="at least 3 characters"):
            validate_username("a ")

    def test_length_counts_utf8_bytes(self):
        """Test that multi-byte letters reach the length rules in bytes."""
        with pytest.raises(ValidationError, match="at least 3 characters"):
            validate_username("ą")

        with pytest.raises(ValidationError, match="only contain letters, numbers"):
            validate_username("ąą")

        with pytest.raises(ValidationError, match="only contain letters, numbers"):
            validate_username("a" * 48 + "ą")

        with pytest.raises(ValidationError, match="too long"):
            validate_username("a" * 49 + "ą")
