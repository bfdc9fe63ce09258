"""Vote status use case."""

from uuid import UUID

from pydantic import BaseModel

from remark.domain.error import NotFoundError
from remark.domain.service import CommentService, VoteService
from remark.domain.value import CommentId, UserId, VoteType


class GetVoteStatusRequest(BaseModel):
    """Vote status request."""

    comment_id: str
    user_id: str | None = None  # Anonymous callers get totals only


class GetVoteStatusResponse(BaseModel):
    """Vote status response.

    Totals are counted from the vote ledger, not read from the
    comment's cached counters.
    """

    comment_id: str
    vote_type: VoteType | None
    like_count: int
    dislike_count: int


class GetVoteStatusUseCase:
    """Use case for reading a user's vote and a comment's live totals."""

    def __init__(
        self, comment_service: CommentService, vote_service: VoteService
    ) -> None:
        self.comment_service = comment_service
        self.vote_service = vote_service

    async def execute(self, request: GetVoteStatusRequest) -> GetVoteStatusResponse:
        """Execute vote status flow.

        Raises:
            NotFoundError: If the comment does not exist or is deleted
        """
        comment_id = CommentId(UUID(request.comment_id))
        if await self.comment_service.get(comment_id) is None:
            raise NotFoundError("Comment", request.comment_id)

        vote_type = None
        if request.user_id:
            vote_type = await self.comment_service.get_like_status(
                UserId(UUID(request.user_id)), comment_id
            )

        stats = await self.vote_service.get_stats(comment_id)
        return GetVoteStatusResponse(
            comment_id=request.comment_id,
            vote_type=vote_type,
            like_count=stats.like_count,
            dislike_count=stats.dislike_count,
        )
