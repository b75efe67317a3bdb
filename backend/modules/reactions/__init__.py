"""
Reactions module.

Handles thumbs up/down reactions and bookmarks on chat messages.

Public API:
- IReactionService: Interface for reaction operations
- Reaction, ReactionType: Stored reactions
- BookmarkedMessage: Bookmarks with conversation context
"""

from .interfaces import IReactionService
from .models import (
    BookmarkedMessage,
    Reaction,
    ReactionQueryKind,
    ReactionRequest,
    ReactionSummary,
    ReactionType,
)
from .exceptions import (
    InvalidReactionTypeError,
    MessageAccessDeniedError,
    MessageNotFoundError,
    MissingParameterError,
    ReactionStoreError,
)

__all__ = [
    # Interface
    "IReactionService",
    # Models
    "BookmarkedMessage",
    "Reaction",
    "ReactionQueryKind",
    "ReactionRequest",
    "ReactionSummary",
    "ReactionType",
    # Exceptions
    "InvalidReactionTypeError",
    "MessageAccessDeniedError",
    "MessageNotFoundError",
    "MissingParameterError",
    "ReactionStoreError",
]
