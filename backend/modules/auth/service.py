"""
Authentication service implementation.

Verifies Supabase access tokens by asking Supabase itself, trying the
configured verifiers in order.
"""

import logging
from typing import Optional, Sequence

from shared.config import Settings
from shared.exceptions import AuthenticationError
from shared.models import AuthenticatedUser

from .credentials import RequestContext, extract_credential
from .exceptions import (
    AuthConfigurationError,
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
)
from .interfaces import IAuthService
from .verifiers import TokenVerifier

logger = logging.getLogger(__name__)

# Error fragments that mean the client should refresh its session
EXPIRY_MARKERS = (
    "token is expired",
    "jwt expired",
    "invalid token",
    "token has expired",
    "timeout",
)


def indicates_expiry(message: str) -> bool:
    """Check whether a verifier error means the token has expired."""
    lowered = message.lower()
    return any(marker in lowered for marker in EXPIRY_MARKERS)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Args:
        settings: Application settings
        verifiers: Token verifiers, tried in order
    """

    def __init__(self, settings: Settings, verifiers: Sequence[TokenVerifier]):
        self._settings = settings
        self._verifiers = list(verifiers)

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a token against each configured verifier.

        The first verifier that returns a user wins. If all fail, the
        collected errors decide between ExpiredTokenError and
        InvalidTokenError.
        """
        if not token:
            raise MissingTokenError()

        if not self._settings.supabase_url or not self._settings.supabase_anon_key:
            raise AuthConfigurationError()

        last_error: Optional[str] = None
        token_expired = False

        for verifier in self._verifiers:
            if not verifier.is_configured():
                continue
            try:
                user = await verifier.verify(token)
            except Exception as e:
                last_error = str(e)
                token_expired = token_expired or indicates_expiry(last_error)
                logger.info(f"{verifier.name} auth error: {last_error}")
                continue

            logger.info(f"{verifier.name} auth successful for user: {user.id}")
            return AuthenticatedUser(
                id=user.id,
                email=user.email or None,
                role=user.role or "authenticated",
                created_at=user.created_at,
            )

        if token_expired:
            raise ExpiredTokenError()

        message = "Invalid or expired token"
        if last_error:
            message = f"{message}: {last_error}"
        raise InvalidTokenError(message)

    async def authenticate(
        self,
        context: RequestContext,
        require_auth: bool = True,
    ) -> Optional[AuthenticatedUser]:
        credential = extract_credential(context)

        if credential is None:
            if require_auth:
                raise MissingTokenError()
            return None

        try:
            return await self.validate_token(credential.token)
        except AuthenticationError:
            if require_auth:
                raise
            return None
