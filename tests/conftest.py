"""pytest configuration and shared fixtures.

bcrypt runs at the minimum cost factor in tests; tests that need a
specific cost pass ``rounds=`` explicitly.
"""

import os

os.environ["BCRYPT_ROUNDS"] = "4"

import pytest  # noqa: E402

from authkit.core.config import get_settings  # noqa: E402


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings around each test so env changes do not leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def valid_registration() -> dict[str, str]:
    """Registration payload that passes every validator."""
    return {
        "username": "anna.k_99",
        "email": "Anna.Kowalska+fit@Example.com",
        "password": "SecurePass123",
        "full_name": "Anna Kowalska",
        "phone_number": "+48 123 456 789",
        "role": "Trainer",
    }
