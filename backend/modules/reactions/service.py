"""
Reactions service implementation.

Validates requests and enforces that users only react to messages in
their own conversations. Supabase failures are logged and surfaced as
ReactionStoreError.
"""

import logging
from typing import Optional

from postgrest.exceptions import APIError

from .exceptions import (
    InvalidReactionTypeError,
    MessageAccessDeniedError,
    MessageNotFoundError,
    MissingParameterError,
    ReactionStoreError,
)
from .interfaces import IReactionService
from .models import (
    BookmarkedMessage,
    Reaction,
    ReactionQueryKind,
    ReactionRequest,
    ReactionSummary,
    ReactionType,
)
from .repository import ReactionRepository

logger = logging.getLogger(__name__)


def resolve_query_kind(
    query_type: Optional[str],
    message_id: Optional[str],
) -> ReactionQueryKind:
    """
    Work out what a GET request asks for.

    Raises:
        MissingParameterError: If neither a known type nor a message ID is given
    """
    if query_type == ReactionQueryKind.BOOKMARKS.value:
        return ReactionQueryKind.BOOKMARKS
    if query_type == ReactionQueryKind.SUMMARY.value and message_id:
        return ReactionQueryKind.SUMMARY
    if message_id:
        return ReactionQueryKind.MESSAGE
    raise MissingParameterError()


def parse_reaction_type(value: str) -> ReactionType:
    try:
        return ReactionType(value)
    except ValueError:
        raise InvalidReactionTypeError(value)


def _require_fields(request: ReactionRequest) -> tuple[str, str]:
    if not request.message_id or not request.reaction_type:
        raise MissingParameterError("message_id and reaction_type are required")
    return request.message_id, request.reaction_type


class ReactionService(IReactionService):
    """
    Reaction service with Supabase backend.

    Args:
        repository: Reaction data access
    """

    def __init__(self, repository: ReactionRepository):
        self._repository = repository

    async def get_bookmarks(self, user_id: str) -> list[BookmarkedMessage]:
        try:
            return self._repository.list_bookmarks(user_id)
        except APIError as e:
            logger.error(f"Get bookmarks error: {e}")
            raise ReactionStoreError("Failed to fetch bookmarks", str(e))

    async def get_reactions(self, message_id: str, user_id: str) -> list[Reaction]:
        try:
            return self._repository.list_for_message(message_id, user_id)
        except APIError as e:
            logger.error(f"Get reactions error: {e}")
            raise ReactionStoreError("Failed to fetch reactions", str(e))

    async def get_summary(self, message_id: str, user_id: str) -> ReactionSummary:
        self._check_ownership(message_id, user_id)
        try:
            return self._repository.get_summary(message_id)
        except APIError as e:
            logger.error(f"Get reaction summary error: {e}")
            raise ReactionStoreError("Failed to fetch reaction summary", str(e))

    async def add_reaction(self, user_id: str, request: ReactionRequest) -> Reaction:
        message_id, raw_type = _require_fields(request)
        reaction_type = parse_reaction_type(raw_type)

        self._check_ownership(message_id, user_id)

        try:
            reaction = self._repository.upsert_reaction(message_id, user_id, reaction_type)
        except APIError as e:
            logger.error(f"Add reaction error: {e}")
            raise ReactionStoreError("Failed to add reaction", str(e))

        logger.debug(f"User {user_id} reacted {reaction_type.value} to message {message_id}")
        return reaction

    async def remove_reaction(self, user_id: str, request: ReactionRequest) -> None:
        message_id, reaction_type = _require_fields(request)

        try:
            removed = self._repository.delete_reaction(message_id, user_id, reaction_type)
        except APIError as e:
            logger.error(f"Delete reaction error: {e}")
            raise ReactionStoreError("Failed to delete reaction", str(e))

        logger.debug(f"Removed {removed} reaction(s) from message {message_id}")

    def _check_ownership(self, message_id: str, user_id: str) -> None:
        """Ensure the message exists and sits in one of the user's conversations."""
        try:
            owner_id = self._repository.get_message_owner(message_id)
        except APIError as e:
            logger.error(f"Message verification error: {e}")
            raise MessageNotFoundError(message_id)

        if owner_id is None:
            raise MessageNotFoundError(message_id)
        if owner_id != user_id:
            raise MessageAccessDeniedError(message_id, user_id)
