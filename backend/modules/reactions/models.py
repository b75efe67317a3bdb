"""
Reactions module data models.

A reaction is a per-user mark on a chat message: thumbs up, thumbs down
or a bookmark. Each (message, user, type) combination is stored at most once.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class ReactionType(str, Enum):
    """Allowed reaction types."""

    THUMBS_UP = "thumbs_up"
    THUMBS_DOWN = "thumbs_down"
    BOOKMARK = "bookmark"


class ReactionQueryKind(str, Enum):
    """What a GET request on the reactions endpoint asks for."""

    BOOKMARKS = "bookmarks"  # All bookmarked messages of the user
    SUMMARY = "summary"      # Per-type counts for one message
    MESSAGE = "message"      # The user's reactions on one message


class Reaction(BaseModel):
    """A stored reaction row."""

    id: Optional[str] = None
    message_id: str
    user_id: str
    reaction_type: ReactionType
    created_at: Optional[datetime] = None


class BookmarkedMessage(BaseModel):
    """A bookmarked message with its conversation context."""

    message_id: str
    conversation_id: str
    conversation_title: Optional[str] = None
    message_content: Optional[str] = None
    message_role: Optional[str] = None
    message_created_at: Optional[datetime] = None
    bookmarked_at: Optional[datetime] = None


class ReactionSummary(BaseModel):
    """Reaction counts for a message across all users."""

    message_id: str
    conversation_id: Optional[str] = None
    thumbs_up_count: int = 0
    thumbs_down_count: int = 0
    bookmark_count: int = 0


class ReactionRequest(BaseModel):
    """
    Body of POST and DELETE requests.

    Fields are optional here so that missing values produce the
    endpoint's own 400 error instead of a schema error.
    """

    message_id: Optional[str] = Field(None, description="Message to react to")
    reaction_type: Optional[str] = Field(None, description="thumbs_up, thumbs_down or bookmark")


class ReactionListResponse(BaseModel):
    success: bool = True
    reactions: list[Reaction] = Field(default_factory=list)


class BookmarkListResponse(BaseModel):
    success: bool = True
    bookmarks: list[BookmarkedMessage] = Field(default_factory=list)


class ReactionSummaryResponse(BaseModel):
    success: bool = True
    summary: ReactionSummary


class ReactionResponse(BaseModel):
    success: bool = True
    reaction: Reaction


class ReactionDeletedResponse(BaseModel):
    success: bool = True
    message: str = "Reaction removed"
