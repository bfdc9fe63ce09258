"""Comment removal use cases."""

from uuid import UUID

from pydantic import BaseModel

from remark.domain.error import NotFoundError
from remark.domain.service import CommentService
from remark.domain.value import CommentId, ContentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    commenter_id: str  # Must be the comment's author


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    deleted: bool


class DeleteCommentUseCase:
    """Use case for an author soft-deleting their own comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Soft-delete a comment, cascading to replies or the parent counter.

        Raises:
            NotFoundError: If no live comment by this author matched,
                including a second delete of the same comment
        """
        deleted = await self.comment_service.soft_delete(
            CommentId(UUID(request.comment_id)),
            UserId(UUID(request.commenter_id)),
        )
        if not deleted:
            raise NotFoundError("Comment", request.comment_id)

        return DeleteCommentResponse(comment_id=request.comment_id, deleted=True)


class RemoveContentCommentsResponse(BaseModel):
    """Content removal response."""

    content_id: str
    removed: bool


class RemoveContentCommentsUseCase:
    """Use case for dropping all comments of content deleted upstream."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, content_id: str) -> RemoveContentCommentsResponse:
        removed = await self.comment_service.delete_all_for_content(
            ContentId(UUID(content_id))
        )
        return RemoveContentCommentsResponse(content_id=content_id, removed=removed)
