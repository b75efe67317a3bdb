"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser

from .credentials import RequestContext


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate an access token and return the authenticated user.

        Args:
            token: Access token issued by Supabase Auth

        Returns:
            AuthenticatedUser with user ID and basic info

        Raises:
            AuthenticationError: If the token is missing, invalid or expired
        """
        ...

    async def authenticate(
        self,
        context: RequestContext,
        require_auth: bool = True,
    ) -> Optional[AuthenticatedUser]:
        """
        Resolve the user behind a request.

        Args:
            context: Request headers and cookies
            require_auth: Raise instead of returning None on failure

        Returns:
            AuthenticatedUser, or None if not authenticated and not required

        Raises:
            AuthenticationError: If require_auth is set and verification fails
        """
        ...
