"""Email validation and normalization tests."""

import pytest

from authkit.core.exceptions import ValidationError
from authkit.validators.email import normalize_email, validate_email


class TestValidateEmail:
    """Test email format validation."""

    @pytest.mark.parametrize(
        "email",
        [
            "user@example.com",
            "user.name+tag@example.co",
            "first.last@sub.domain.co.uk",
            "user_100%@example-mail.org",
        ],
    )
    def test_valid_emails(self, email):
        """Test that common address shapes pass."""
        assert validate_email(email) is None

    @pytest.mark.parametrize(
        "email",
        [
            "user@.com",
            "invalid-email",
            "@example.com",
            "user@example",
            "user@example.c",
            "user name@example.com",
            "user@exam_ple.com",
            "",
        ],
    )
    def test_invalid_format(self, email):
        """Test that malformed addresses are rejected."""
        with pytest.raises(ValidationError, match="Invalid email format") as exc_info:
            validate_email(email)

        assert exc_info.value.field == "email"

    def test_trailing_newline_rejected(self):
        """Test that the whole string must match, not just a prefix line."""
        with pytest.raises(ValidationError, match="Invalid email format"):
            validate_email("user@example.com\n")

    def test_too_long_email(self):
        """Test that addresses over 100 characters fail on length."""
        with pytest.raises(ValidationError, match=r"too long \(max 100 characters\)"):
            validate_email("a" * 101 + "@b.co")

    def test_exactly_100_characters_passes(self):
        """Test the length boundary."""
        email = "a" * 94 + "@b.com"
        assert len(email) == 100

        validate_email(email)

    def test_length_checked_before_format(self):
        """Test that an overlong malformed address reports length."""
        with pytest.raises(ValidationError, match="too long"):
            validate_email("x" * 150)


class TestNormalizeEmail:
    """Test email normalization."""

    def test_lowercase_and_whitespace_combined(self):
        """Test both lowercase conversion and whitespace trimming."""
        assert normalize_email("  Test@Example.COM  ") == "test@example.com"

    def test_plus_tag_preserved(self):
        """Test that plus tags are preserved."""
        assert normalize_email("User+Tag@example.com") == "user+tag@example.com"

    def test_empty_email(self):
        """Test normalizing empty input."""
        assert normalize_email("") == ""
        assert normalize_email(None) == ""
        assert normalize_email("   ") == ""
