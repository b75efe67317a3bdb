"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import AuthenticationError


class InvalidTokenError(AuthenticationError):
    """Raised when a token is rejected by every verifier."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a token has expired."""

    def __init__(self, message: str = "Token expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Missing or invalid authorization header"):
        super().__init__(message, code="MISSING_TOKEN")


class AuthConfigurationError(AuthenticationError):
    """Raised when the server has no Supabase credentials to verify with."""

    def __init__(self, message: str = "Supabase environment variables not configured"):
        super().__init__(message, code="AUTH_NOT_CONFIGURED")
