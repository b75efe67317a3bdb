"""
Reactions module exceptions.
"""

from shared.exceptions import (
    AuthorizationError,
    ExternalServiceError,
    NotFoundError,
    ValidationError,
)


class MissingParameterError(ValidationError):
    """Raised when required request parameters are absent."""

    def __init__(self, message: str = "Missing required parameters"):
        super().__init__(message, code="MISSING_PARAMETERS")


class InvalidReactionTypeError(ValidationError):
    """Raised when reaction_type is not one of the allowed values."""

    def __init__(self, reaction_type: str):
        super().__init__(
            "Invalid reaction_type",
            code="INVALID_REACTION_TYPE",
            details={"reaction_type": reaction_type},
        )


class MessageNotFoundError(NotFoundError):
    """Raised when the target message does not exist."""

    def __init__(self, message_id: str):
        super().__init__(
            "Message not found",
            code="MESSAGE_NOT_FOUND",
            details={"message_id": message_id},
        )


class MessageAccessDeniedError(AuthorizationError):
    """Raised when the message's conversation belongs to another user."""

    def __init__(self, message_id: str, user_id: str):
        super().__init__(
            "Access denied",
            code="MESSAGE_ACCESS_DENIED",
            details={"message_id": message_id, "user_id": user_id},
        )


class ReactionStoreError(ExternalServiceError):
    """Raised when Supabase rejects a reactions query."""

    def __init__(self, message: str, original_error: str = ""):
        super().__init__(
            message,
            code="REACTION_STORE_ERROR",
            original_error=original_error,
        )
