"""Tests for settings loading."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from authkit.core.config import Settings, get_settings


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self, monkeypatch):
        """Test documented defaults when nothing is set."""
        monkeypatch.delenv("BCRYPT_ROUNDS", raising=False)

        settings = Settings(_env_file=None)

        assert settings.BCRYPT_ROUNDS == 12
        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_FILE is None
        assert settings.LOG_JSON_FORMAT is True
        assert settings.DEBUG is False

    def test_rounds_from_environment(self, monkeypatch):
        """Test that the work factor is read from the environment."""
        monkeypatch.setenv("BCRYPT_ROUNDS", "10")

        assert Settings(_env_file=None).BCRYPT_ROUNDS == 10

    @pytest.mark.parametrize("rounds", ["3", "32"])
    def test_rounds_outside_bcrypt_range_rejected(self, monkeypatch, rounds):
        """Test that an unusable work factor fails at load time."""
        monkeypatch.setenv("BCRYPT_ROUNDS", rounds)

        with pytest.raises(PydanticValidationError, match="BCRYPT_ROUNDS"):
            Settings(_env_file=None)

    def test_log_level_normalized(self, monkeypatch):
        """Test that the log level is upper-cased and defaults when blank."""
        monkeypatch.setenv("LOG_LEVEL", " debug ")
        assert Settings(_env_file=None).LOG_LEVEL == "DEBUG"

        monkeypatch.setenv("LOG_LEVEL", "")
        assert Settings(_env_file=None).LOG_LEVEL == "INFO"

    def test_get_settings_is_cached(self):
        """Test that get_settings returns one shared instance."""
        assert get_settings() is get_settings()
