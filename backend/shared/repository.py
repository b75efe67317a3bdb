"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access.
"""

from typing import TypeVar, Generic
from supabase import Client


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Subclasses implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class ReactionRepository(BaseRepository[Reaction]):
            def list_for_message(self, message_id: str, user_id: str) -> list[Reaction]:
                result = (
                    self._db.table("message_reactions")
                    .select("*")
                    .eq("message_id", message_id)
                    .eq("user_id", user_id)
                    .execute()
                )
                return [Reaction(**row) for row in result.data or []]
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db
