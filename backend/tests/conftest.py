"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from typing import Optional
import jwt  # PyJWT

from api.dependencies import reset_container
from modules.auth.models import VerifiedUser
from shared.config import Settings, get_settings
from shared.database import reset_client_cache


# Test JWT secret (only for testing; nothing in the app checks signatures)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

TEST_USER_ID = "test-user-123"
TEST_USER_EMAIL = "test@example.com"


def create_test_token(
    user_id: str = TEST_USER_ID,
    email: str = TEST_USER_EMAIL,
    expired: bool = False,
) -> str:
    """
    Create a Supabase-shaped access token.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email": email,
        "aud": "authenticated",
        "role": "authenticated",
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    return jwt.encode(payload, TEST_JWT_SECRET, algorithm="HS256")


def make_settings(**overrides) -> Settings:
    """Settings with a complete Supabase configuration."""
    values = {
        "environment": "development",
        "supabase_url": "https://test.supabase.co",
        "supabase_anon_key": "test-anon-key",
        "supabase_service_role_key": "test-service-key",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class StubVerifier:
    """Token verifier returning a fixed user or raising a fixed error."""

    def __init__(
        self,
        name: str,
        user: Optional[VerifiedUser] = None,
        error: Optional[Exception] = None,
        configured: bool = True,
    ):
        self.name = name
        self._user = user
        self._error = error
        self._configured = configured
        self.calls: list[str] = []

    def is_configured(self) -> bool:
        return self._configured

    async def verify(self, token: str) -> VerifiedUser:
        self.calls.append(token)
        if self._error is not None:
            raise self._error
        return self._user


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached settings, clients and services around each test."""
    get_settings.cache_clear()
    reset_client_cache()
    reset_container()
    yield
    get_settings.cache_clear()
    reset_client_cache()
    reset_container()


@pytest.fixture
def settings() -> Settings:
    """Settings with Supabase fully configured."""
    return make_settings()


@pytest.fixture
def test_user() -> VerifiedUser:
    """The user the stub verifiers resolve tokens to."""
    return VerifiedUser(
        id=TEST_USER_ID,
        email=TEST_USER_EMAIL,
        role="authenticated",
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def auth_token() -> str:
    """Create a valid auth token for testing."""
    return create_test_token()


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}
