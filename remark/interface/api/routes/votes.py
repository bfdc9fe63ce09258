"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from remark.application.usecase.vote import (
    GetVoteStatusRequest,
    GetVoteStatusResponse,
    GetVoteStatusUseCase,
    ToggleVoteRequest,
    ToggleVoteResponse,
    ToggleVoteUseCase,
)
from remark.domain.value import VoteType
from remark.interface.api.identity import CurrentUser, OptionalUser

router = APIRouter(prefix="/comments", tags=["votes"], route_class=DishkaRoute)


class ToggleVoteAPIRequest(BaseModel):
    """API request for toggling a vote."""

    vote_type: VoteType


@router.post("/{comment_id}/vote", response_model=ToggleVoteResponse)
async def toggle_vote(
    comment_id: str,
    request: ToggleVoteAPIRequest,
    user_id: CurrentUser,
    toggle_vote_use_case: FromDishka[ToggleVoteUseCase],
) -> ToggleVoteResponse:
    """Like or dislike a comment.

    Sending the same vote type again removes the vote; sending the other
    type switches it.
    """
    return await toggle_vote_use_case.execute(
        ToggleVoteRequest(
            comment_id=comment_id, user_id=user_id, vote_type=request.vote_type
        )
    )


@router.get("/{comment_id}/vote", response_model=GetVoteStatusResponse)
async def get_vote_status(
    comment_id: str,
    user_id: OptionalUser,
    get_vote_status_use_case: FromDishka[GetVoteStatusUseCase],
) -> GetVoteStatusResponse:
    """The caller's vote on a comment plus its live totals."""
    return await get_vote_status_use_case.execute(
        GetVoteStatusRequest(comment_id=comment_id, user_id=user_id)
    )
