"""
Token verification strategies.

Each verifier resolves a bearer token to a Supabase user using one client
configuration. Callers try verifiers in order until one succeeds.
"""

import logging
from typing import Callable, Optional, Protocol, runtime_checkable

from supabase import Client

from shared.config import Settings
from shared.database import create_supabase_client

from .exceptions import InvalidTokenError
from .models import VerifiedUser

logger = logging.getLogger(__name__)

ClientFactory = Callable[..., Client]

ADMIN_CLIENT = "admin_client"
ANON_CLIENT = "anon_client"


@runtime_checkable
class TokenVerifier(Protocol):
    """Resolves a bearer token to a user or fails."""

    name: str

    def is_configured(self) -> bool:
        """Whether this verifier has the credentials it needs."""
        ...

    async def verify(self, token: str) -> VerifiedUser:
        """
        Resolve a token to the user it belongs to.

        Raises:
            Exception: Any failure, including client construction errors
        """
        ...


class SupabaseTokenVerifier:
    """
    Verifies tokens with ``auth.get_user`` on a Supabase client.

    Args:
        name: Label recorded in diagnostics (e.g. "admin_client")
        url: Supabase project URL
        key: API key the client is built with
        forward_token: Also send the token as the outbound bearer header
        client_factory: Builds the client; defaults to create_supabase_client
    """

    def __init__(
        self,
        name: str,
        url: str,
        key: str,
        forward_token: bool = False,
        client_factory: Optional[ClientFactory] = None,
    ):
        self.name = name
        self._url = url
        self._key = key
        self._forward_token = forward_token
        self._client_factory = client_factory or create_supabase_client

    def is_configured(self) -> bool:
        return bool(self._url and self._key)

    async def verify(self, token: str) -> VerifiedUser:
        client = self._client_factory(
            self._url,
            self._key,
            access_token=token if self._forward_token else None,
        )
        response = client.auth.get_user(token)
        user = response.user if response is not None else None

        if user is None or not user.id:
            raise InvalidTokenError("No user returned for token")

        logger.debug(f"{self.name} verified user {user.id}")
        return VerifiedUser(
            id=user.id,
            email=user.email,
            role=user.role,
            created_at=user.created_at,
        )


def build_token_verifiers(
    settings: Settings,
    client_factory: Optional[ClientFactory] = None,
) -> list[TokenVerifier]:
    """
    Build the verifiers in the order they should be tried.

    The service-role client comes first; the anon client is the fallback.
    """
    return [
        SupabaseTokenVerifier(
            ADMIN_CLIENT,
            settings.supabase_url,
            settings.supabase_service_role_key,
            client_factory=client_factory,
        ),
        SupabaseTokenVerifier(
            ANON_CLIENT,
            settings.supabase_url,
            settings.supabase_anon_key,
            forward_token=True,
            client_factory=client_factory,
        ),
    ]
