"""Toggle vote use case."""

from uuid import UUID

from pydantic import BaseModel

from remark.domain.service import CommentService
from remark.domain.value import CommentId, UserId, VoteType


class ToggleVoteRequest(BaseModel):
    """Toggle vote request."""

    comment_id: str  # UUID string
    user_id: str  # User ID from the identity header
    vote_type: VoteType


class ToggleVoteResponse(BaseModel):
    """Toggle vote response.

    When success is False the counts are zero and must not be displayed.
    """

    success: bool
    message: str
    vote_type: VoteType | None
    like_count: int
    dislike_count: int


class ToggleVoteUseCase:
    """Use case for liking or disliking a comment, or taking it back."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize toggle vote use case.

        Args:
            comment_service: Comment domain service (owns the toggle)
        """
        self.comment_service = comment_service

    async def execute(self, request: ToggleVoteRequest) -> ToggleVoteResponse:
        """Execute toggle flow.

        Args:
            request: Toggle vote request

        Returns:
            Toggle outcome with fresh totals

        Raises:
            NotFoundError: If the comment does not exist or is deleted
        """
        result = await self.comment_service.toggle_like(
            UserId(UUID(request.user_id)),
            CommentId(UUID(request.comment_id)),
            request.vote_type,
        )
        return ToggleVoteResponse(
            success=result.success,
            message=result.message,
            vote_type=result.vote_type,
            like_count=result.like_count,
            dislike_count=result.dislike_count,
        )
