"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from remark.domain.error import NotFoundError
from remark.domain.service import CommentService
from remark.domain.value import CommentId, UserId


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str
    commenter_id: str  # Must be the comment's author
    text: str


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    comment_id: str
    updated: bool


class UpdateCommentUseCase:
    """Use case for editing a comment's text."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Wrong author, unknown id and deleted comment are indistinguishable
        to the caller: all three are NotFound.

        Raises:
            NotFoundError: If no live comment by this author matched
        """
        updated = await self.comment_service.update(
            CommentId(UUID(request.comment_id)),
            UserId(UUID(request.commenter_id)),
            request.text,
        )
        if not updated:
            raise NotFoundError("Comment", request.comment_id)

        return UpdateCommentResponse(comment_id=request.comment_id, updated=True)
