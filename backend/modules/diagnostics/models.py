"""
Auth diagnostics data models.

The diagnostic report records what a request carried, what each
verification strategy said about its token, and what the token claims.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from modules.auth.models import CredentialSource, TokenClaims, VerifiedUser


class VerificationStatus(str, Enum):
    """Overall verification outcome."""

    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"


class EnvironmentInfo(BaseModel):
    """Which Supabase settings the server has. Never includes key values."""

    environment: str
    has_supabase_url: bool
    has_anon_key: bool
    has_service_key: bool
    supabase_url: str = Field(..., description="Project URL or 'NOT SET'")


class RequestInfo(BaseModel):
    """Request metadata relevant to authentication."""

    method: str
    has_auth_header: bool
    auth_header: str = Field(..., description="Truncated header or 'none'")
    has_cookie: bool
    cookies: list[str] = Field(default_factory=list, description="Cookie names")


class TokenInfo(BaseModel):
    """Credential metadata. The full token is never included."""

    found: bool
    length: int = 0
    prefix: str = "none"
    source: CredentialSource = CredentialSource.NONE
    claims: Optional[TokenClaims] = None


class VerificationAttempt(BaseModel):
    """Outcome of one verification strategy."""

    method: str
    success: bool
    error: Optional[str] = None
    user_id: Optional[str] = None


class VerificationResult(BaseModel):
    """Aggregate of all verification attempts."""

    status: VerificationStatus = VerificationStatus.PENDING
    user: Optional[VerifiedUser] = None
    error: Optional[str] = None
    attempts: list[VerificationAttempt] = Field(default_factory=list)


class CrossCheckUser(BaseModel):
    id: str
    email: Optional[str] = None


class CrossCheckResult(BaseModel):
    """What the production verification path said about the request."""

    success: bool
    user: Optional[CrossCheckUser] = None
    error: Optional[str] = None


class DiagnosticReport(BaseModel):
    """Full diagnostic report returned by the debug endpoint."""

    timestamp: datetime
    environment: EnvironmentInfo
    request: RequestInfo
    token: TokenInfo
    verification: VerificationResult = Field(default_factory=VerificationResult)
    verify_user_function: Optional[CrossCheckResult] = None
