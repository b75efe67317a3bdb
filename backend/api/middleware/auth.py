"""
Authentication dependencies.

Resolve the user behind a request through the auth service, which
verifies the bearer token with Supabase.
"""

from typing import Optional
from fastapi import Depends, Request

from modules.auth.credentials import RequestContext
from modules.auth.interfaces import IAuthService
from shared.models import AuthenticatedUser

from ..dependencies import get_auth_service


async def get_current_user(
    request: Request,
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user. Authentication
    errors propagate to the app's error handlers and become 401 responses.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    return await auth.authenticate(RequestContext.from_request(request), require_auth=True)


async def get_optional_user(
    request: Request,
    auth: IAuthService = Depends(get_auth_service),
) -> Optional[AuthenticatedUser]:
    """
    Dependency that optionally extracts user if authenticated.

    Use this for endpoints that work with or without authentication.
    """
    return await auth.authenticate(RequestContext.from_request(request), require_auth=False)
