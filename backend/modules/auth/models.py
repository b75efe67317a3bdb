"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class CredentialSource(str, Enum):
    """Where a bearer credential was found."""

    HEADER = "header"
    COOKIE = "cookie"
    NONE = "none"


class Credential(BaseModel):
    """A bearer token together with where it came from."""

    token: str
    source: CredentialSource

    model_config = {"frozen": True}

    @property
    def prefix(self) -> str:
        """First characters of the token, safe to show in reports."""
        return self.token[:20] + "..."


class VerifiedUser(BaseModel):
    """User returned by Supabase for a successfully verified token."""

    id: str = Field(..., description="User ID (UUID from Supabase)")
    email: Optional[str] = Field(None, description="User's email")
    role: Optional[str] = Field(None, description="Supabase role")
    created_at: Optional[datetime] = Field(None, description="Account creation time")


class TokenClaims(BaseModel):
    """
    Claims read from a token payload without signature verification.

    When decoding fails only ``error`` is set.
    """

    sub: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None
    exp: Optional[int] = None
    expired: Optional[bool] = None
    expires_at: Optional[datetime] = None
    error: Optional[str] = None
