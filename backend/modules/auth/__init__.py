"""
Authentication module.

Handles bearer credential extraction and token verification against
Supabase Auth.

Public API:
- IAuthService: Interface for auth operations
- RequestContext / extract_credential: Credential extraction
- TokenVerifier / build_token_verifiers: Ordered verification strategies
- decode_unverified_claims: Claim inspection without signature checks
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .credentials import RequestContext, extract_credential
from .claims import decode_unverified_claims
from .models import Credential, CredentialSource, TokenClaims, VerifiedUser
from .verifiers import TokenVerifier, SupabaseTokenVerifier, build_token_verifiers
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    AuthConfigurationError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Credentials
    "RequestContext",
    "extract_credential",
    "decode_unverified_claims",
    # Verifiers
    "TokenVerifier",
    "SupabaseTokenVerifier",
    "build_token_verifiers",
    # Models
    "Credential",
    "CredentialSource",
    "TokenClaims",
    "VerifiedUser",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "AuthConfigurationError",
]
