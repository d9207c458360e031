"""Library configuration using Pydantic Settings.

Values are read from environment variables and an optional ``.env`` file.
The bcrypt work factor lives here so deployments can tune hashing cost
without code changes.
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# bcrypt only accepts log2 cost factors in this range
BCRYPT_MIN_ROUNDS = 4
BCRYPT_MAX_ROUNDS = 31


class Settings(BaseSettings):
    """authkit settings.

    All settings can be overridden via environment variables.
    Environment variables take precedence over .env file values.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    SERVICE_NAME: str = "authkit"
    DEBUG: bool = False

    # Credential hashing
    BCRYPT_ROUNDS: int = 12

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str | None = None
    LOG_JSON_FORMAT: bool = True

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        """Reject work factors bcrypt cannot execute."""
        if not BCRYPT_MIN_ROUNDS <= v <= BCRYPT_MAX_ROUNDS:
            raise ValueError(
                f"BCRYPT_ROUNDS must be between {BCRYPT_MIN_ROUNDS} "
                f"and {BCRYPT_MAX_ROUNDS}, got {v}"
            )
        return v

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case the log level and fall back to INFO when blank."""
        level = str(v).strip().upper()
        return level or "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings.

    Settings are cached after first load; call ``get_settings.cache_clear()``
    to pick up changed environment variables.
    """
    return Settings()
