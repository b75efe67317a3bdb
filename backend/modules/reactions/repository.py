"""
Reaction repository for database access.

Encapsulates all Supabase queries for reactions:
- message_reactions table
- message_reactions_summary view
- get_bookmarked_messages RPC
- messages/conversations ownership lookup
"""

from typing import Optional

from supabase import Client

from shared.repository import BaseRepository
from .models import BookmarkedMessage, Reaction, ReactionSummary, ReactionType

REACTIONS_TABLE = "message_reactions"
SUMMARY_VIEW = "message_reactions_summary"
BOOKMARKS_RPC = "get_bookmarked_messages"
CONFLICT_KEY = "message_id,user_id,reaction_type"


class ReactionRepository(BaseRepository[Reaction]):
    """
    Repository for reaction data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying conversation ownership.
    """

    def get_message_owner(self, message_id: str) -> Optional[str]:
        """
        Get the user who owns the conversation a message belongs to.

        Returns:
            The owner's user ID, or None if the message doesn't exist.
        """
        result = (
            self._db.table("messages")
            .select("conversation_id, conversations!inner(user_id)")
            .eq("id", message_id)
            .limit(1)
            .execute()
        )

        if not result.data:
            return None

        conversation = result.data[0].get("conversations") or {}
        if isinstance(conversation, list):
            conversation = conversation[0] if conversation else {}
        return conversation.get("user_id")

    def list_for_message(self, message_id: str, user_id: str) -> list[Reaction]:
        """Get a user's reactions on one message."""
        result = (
            self._db.table(REACTIONS_TABLE)
            .select("*")
            .eq("message_id", message_id)
            .eq("user_id", user_id)
            .execute()
        )
        return [self._map_to_reaction(row) for row in result.data or []]

    def upsert_reaction(
        self,
        message_id: str,
        user_id: str,
        reaction_type: ReactionType,
    ) -> Reaction:
        """
        Insert a reaction, or replace the existing one with the same key.

        The (message_id, user_id, reaction_type) unique constraint keeps
        repeated calls from creating duplicates.
        """
        row = {
            "message_id": message_id,
            "user_id": user_id,
            "reaction_type": reaction_type.value,
        }
        result = (
            self._db.table(REACTIONS_TABLE)
            .upsert(row, on_conflict=CONFLICT_KEY)
            .execute()
        )
        return self._map_to_reaction(result.data[0])

    def delete_reaction(
        self,
        message_id: str,
        user_id: str,
        reaction_type: str,
    ) -> int:
        """
        Delete an exact reaction match.

        Returns:
            Number of rows removed (0 if there was nothing to delete).
        """
        result = (
            self._db.table(REACTIONS_TABLE)
            .delete()
            .eq("message_id", message_id)
            .eq("user_id", user_id)
            .eq("reaction_type", reaction_type)
            .execute()
        )
        return len(result.data or [])

    def list_bookmarks(self, user_id: str) -> list[BookmarkedMessage]:
        """Get the user's bookmarked messages, most recent first."""
        result = self._db.rpc(BOOKMARKS_RPC, {"p_user_id": user_id}).execute()
        return [BookmarkedMessage(**row) for row in result.data or []]

    def get_summary(self, message_id: str) -> ReactionSummary:
        """Get reaction counts for a message."""
        result = (
            self._db.table(SUMMARY_VIEW)
            .select("*")
            .eq("message_id", message_id)
            .limit(1)
            .execute()
        )
        if not result.data:
            return ReactionSummary(message_id=message_id)
        return ReactionSummary(**result.data[0])

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    def _map_to_reaction(self, data: dict) -> Reaction:
        return Reaction(
            id=str(data["id"]) if data.get("id") is not None else None,
            message_id=str(data["message_id"]),
            user_id=str(data["user_id"]),
            reaction_type=ReactionType(data["reaction_type"]),
            created_at=data.get("created_at"),
        )
