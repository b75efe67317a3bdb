"""
Reaction API endpoints.

GET lists reactions, bookmarks or a per-message summary. POST adds a
reaction and DELETE removes one; both take a JSON body. Every route
requires authentication.
"""

from typing import Optional, Union

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_reaction_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser

from .interfaces import IReactionService
from .models import (
    BookmarkListResponse,
    ReactionDeletedResponse,
    ReactionListResponse,
    ReactionQueryKind,
    ReactionRequest,
    ReactionResponse,
    ReactionSummaryResponse,
)
from .service import resolve_query_kind

router = APIRouter()


@router.get("", response_model=None)
async def get_reactions(
    type: Optional[str] = Query(default=None, description="'bookmarks' or 'summary'"),
    message_id: Optional[str] = Query(default=None, description="Message ID"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IReactionService = Depends(get_reaction_service),
) -> Union[BookmarkListResponse, ReactionSummaryResponse, ReactionListResponse]:
    """
    Get the user's bookmarks, or reactions on a message.

    ?type=bookmarks returns all bookmarked messages. ?message_id=X returns
    the user's reactions on X; adding type=summary returns counts instead.
    """
    kind = resolve_query_kind(type, message_id)

    if kind is ReactionQueryKind.BOOKMARKS:
        bookmarks = await service.get_bookmarks(user.id)
        return BookmarkListResponse(bookmarks=bookmarks)

    if kind is ReactionQueryKind.SUMMARY:
        summary = await service.get_summary(message_id, user.id)
        return ReactionSummaryResponse(summary=summary)

    reactions = await service.get_reactions(message_id, user.id)
    return ReactionListResponse(reactions=reactions)


@router.post("", response_model=ReactionResponse)
async def add_reaction(
    request: ReactionRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IReactionService = Depends(get_reaction_service),
) -> ReactionResponse:
    """
    Add a reaction to a message in one of the user's conversations.

    Posting the same reaction again replaces it rather than duplicating it.
    """
    reaction = await service.add_reaction(user.id, request)
    return ReactionResponse(reaction=reaction)


@router.delete("", response_model=ReactionDeletedResponse)
async def remove_reaction(
    request: ReactionRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IReactionService = Depends(get_reaction_service),
) -> ReactionDeletedResponse:
    """
    Remove a reaction. Succeeds even if the reaction didn't exist.
    """
    await service.remove_reaction(user.id, request)
    return ReactionDeletedResponse()
