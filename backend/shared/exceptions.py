"""
Base exception classes for the Startup Mentor backend.

Modules raise subclasses of these. The API layer picks the HTTP status
from the base class, so a module never deals with status codes.
"""

from typing import Optional, Any


class MentorError(Exception):
    """
    Base exception for all application errors.

    Args:
        message: Client-facing message, returned as ``error``
        code: Stable machine-readable code (defaults to the class name)
        details: Extra context for logs; not sent to clients
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}


class NotFoundError(MentorError):
    """A message, conversation or other record does not exist."""


class ValidationError(MentorError):
    """Request parameters are missing or out of range."""


class AuthenticationError(MentorError):
    """The caller could not be identified from their bearer token."""

    # Scheme advertised in the WWW-Authenticate header of 401 responses
    challenge = "Bearer"


class AuthorizationError(MentorError):
    """The caller is known but does not own the target resource."""


class ExternalServiceError(MentorError):
    """
    A backing service (Supabase by default) failed or rejected a call.

    The raw error text is kept as ``original_error`` so it can be shown
    outside production without leaking into the client message.
    """

    def __init__(
        self,
        message: str,
        service: str = "supabase",
        code: Optional[str] = None,
        original_error: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.original_error = original_error
        self.details["service"] = service
        if original_error:
            self.details["original_error"] = original_error
