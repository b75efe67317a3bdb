"""
Reactions module interface.

The API layer depends on IReactionService for all reaction operations.
"""

from typing import Protocol, runtime_checkable

from .models import (
    BookmarkedMessage,
    Reaction,
    ReactionRequest,
    ReactionSummary,
)


@runtime_checkable
class IReactionService(Protocol):
    """
    Interface for reaction operations.

    All methods act on behalf of an already authenticated user.
    """

    async def get_bookmarks(self, user_id: str) -> list[BookmarkedMessage]:
        """Get the user's bookmarked messages."""
        ...

    async def get_reactions(self, message_id: str, user_id: str) -> list[Reaction]:
        """Get the user's reactions on a message."""
        ...

    async def get_summary(self, message_id: str, user_id: str) -> ReactionSummary:
        """
        Get reaction counts for a message in one of the user's conversations.

        Raises:
            MessageNotFoundError: If the message doesn't exist
            MessageAccessDeniedError: If the conversation isn't the user's
        """
        ...

    async def add_reaction(self, user_id: str, request: ReactionRequest) -> Reaction:
        """
        Add (or replace) a reaction on a message.

        Raises:
            MissingParameterError: If message_id or reaction_type is missing
            InvalidReactionTypeError: If reaction_type is not allowed
            MessageNotFoundError: If the message doesn't exist
            MessageAccessDeniedError: If the conversation isn't the user's
        """
        ...

    async def remove_reaction(self, user_id: str, request: ReactionRequest) -> None:
        """
        Remove a reaction. Removing a reaction that doesn't exist succeeds.

        Raises:
            MissingParameterError: If message_id or reaction_type is missing
        """
        ...
