"""
Bearer credential extraction.

Reads the access token from an ``Authorization: Bearer`` header, falling
back to the Supabase session cookies set by the frontend.
"""

from typing import Mapping, Optional
from urllib.parse import unquote

from pydantic import BaseModel, Field
from starlette.requests import Request

from .models import Credential, CredentialSource

# Cookie names checked in order
TOKEN_COOKIES = ("sb-token", "sb-access-token")

# Shorter values are treated as absent
MIN_TOKEN_LENGTH = 10


class RequestContext(BaseModel):
    """The parts of an inbound request that authentication looks at."""

    method: str = "GET"
    authorization: Optional[str] = None
    cookies: dict[str, str] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @classmethod
    def from_request(cls, request: Request) -> "RequestContext":
        return cls(
            method=request.method,
            authorization=request.headers.get("authorization"),
            cookies=dict(request.cookies),
        )

    @property
    def has_cookie(self) -> bool:
        return bool(self.cookies)


def _usable(token: str) -> bool:
    return len(token) > MIN_TOKEN_LENGTH


def token_from_header(authorization: Optional[str]) -> Optional[str]:
    """Return the token of a ``Bearer`` authorization header, if any."""
    if not authorization or not authorization.startswith("Bearer "):
        return None
    token = authorization[len("Bearer "):].strip()
    return token if _usable(token) else None


def token_from_cookies(cookies: Mapping[str, str]) -> Optional[str]:
    """Return the first usable Supabase session cookie value, if any."""
    for name in TOKEN_COOKIES:
        value = cookies.get(name)
        if not value:
            continue
        token = unquote(value).strip()
        if _usable(token):
            return token
    return None


def extract_credential(context: RequestContext) -> Optional[Credential]:
    """
    Find the bearer credential for a request.

    Args:
        context: Request headers and cookies

    Returns:
        The credential and its source, or None when the request carries none
    """
    token = token_from_header(context.authorization)
    if token:
        return Credential(token=token, source=CredentialSource.HEADER)

    token = token_from_cookies(context.cookies)
    if token:
        return Credential(token=token, source=CredentialSource.COOKIE)

    return None
