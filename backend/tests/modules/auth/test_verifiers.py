"""Tests for Supabase token verifiers."""

import pytest
from datetime import datetime, timezone
from unittest.mock import MagicMock

from modules.auth.exceptions import InvalidTokenError
from modules.auth.verifiers import (
    ADMIN_CLIENT,
    ANON_CLIENT,
    SupabaseTokenVerifier,
    TokenVerifier,
    build_token_verifiers,
)
from tests.conftest import make_settings


def create_factory(user=None, error=None):
    """Client factory whose clients answer get_user with a fixed result."""
    client = MagicMock()
    if error is not None:
        client.auth.get_user.side_effect = error
    else:
        client.auth.get_user.return_value = MagicMock(user=user)
    factory = MagicMock(return_value=client)
    return factory, client


def create_supabase_user(user_id: str = "user-123"):
    user = MagicMock()
    user.id = user_id
    user.email = "test@example.com"
    user.role = "authenticated"
    user.created_at = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return user


class TestSupabaseTokenVerifier:
    def test_is_configured(self):
        assert SupabaseTokenVerifier("v", "https://x.supabase.co", "key").is_configured()
        assert not SupabaseTokenVerifier("v", "", "key").is_configured()
        assert not SupabaseTokenVerifier("v", "https://x.supabase.co", "").is_configured()

    def test_satisfies_protocol(self):
        assert isinstance(SupabaseTokenVerifier("v", "u", "k"), TokenVerifier)

    @pytest.mark.asyncio
    async def test_verify_returns_user(self):
        """Should map the Supabase user to a VerifiedUser."""
        factory, client = create_factory(user=create_supabase_user())
        verifier = SupabaseTokenVerifier("admin", "https://x.supabase.co", "key", client_factory=factory)

        user = await verifier.verify("token-abc")

        assert user.id == "user-123"
        assert user.email == "test@example.com"
        assert user.role == "authenticated"
        client.auth.get_user.assert_called_once_with("token-abc")
        factory.assert_called_once_with("https://x.supabase.co", "key", access_token=None)

    @pytest.mark.asyncio
    async def test_forward_token(self):
        """With forward_token the client is built with the user's token."""
        factory, _ = create_factory(user=create_supabase_user())
        verifier = SupabaseTokenVerifier(
            "anon", "https://x.supabase.co", "anon-key", forward_token=True, client_factory=factory
        )

        await verifier.verify("token-abc")

        factory.assert_called_once_with("https://x.supabase.co", "anon-key", access_token="token-abc")

    @pytest.mark.asyncio
    async def test_no_user_raises(self):
        factory, _ = create_factory(user=None)
        verifier = SupabaseTokenVerifier("admin", "u", "k", client_factory=factory)

        with pytest.raises(InvalidTokenError):
            await verifier.verify("token-abc")

    @pytest.mark.asyncio
    async def test_client_errors_propagate(self):
        """Errors from Supabase are left to the caller."""
        factory, _ = create_factory(error=RuntimeError("invalid JWT"))
        verifier = SupabaseTokenVerifier("admin", "u", "k", client_factory=factory)

        with pytest.raises(RuntimeError, match="invalid JWT"):
            await verifier.verify("token-abc")


class TestBuildTokenVerifiers:
    def test_order_and_names(self):
        """Service-role verifier comes first, anon verifier second."""
        verifiers = build_token_verifiers(make_settings())
        assert [v.name for v in verifiers] == [ADMIN_CLIENT, ANON_CLIENT]
        assert all(v.is_configured() for v in verifiers)

    def test_missing_service_key(self):
        verifiers = build_token_verifiers(make_settings(supabase_service_role_key=""))
        assert not verifiers[0].is_configured()
        assert verifiers[1].is_configured()

    @pytest.mark.asyncio
    async def test_keys_used(self):
        factory, _ = create_factory(user=create_supabase_user())
        admin, anon = build_token_verifiers(make_settings(), client_factory=factory)

        await admin.verify("tok")
        await anon.verify("tok")

        assert factory.call_args_list[0].args == ("https://test.supabase.co", "test-service-key")
        assert factory.call_args_list[1].args == ("https://test.supabase.co", "test-anon-key")
        assert factory.call_args_list[1].kwargs == {"access_token": "tok"}
