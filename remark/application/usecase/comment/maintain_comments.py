"""Comment maintenance use cases for operators and moderators."""

from uuid import UUID

from pydantic import BaseModel

from remark.domain.error import NotFoundError
from remark.domain.service import CommentService
from remark.domain.value import CommentId, ContentId


class PurgeCommentResponse(BaseModel):
    """Purge comment response."""

    comment_id: str
    purged: bool


class PurgeCommentUseCase:
    """Use case for physically removing a comment and its replies."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, comment_id: str) -> PurgeCommentResponse:
        """Purge a comment.

        Raises:
            NotFoundError: If the comment does not exist
        """
        purged = await self.comment_service.purge(CommentId(UUID(comment_id)))
        if not purged:
            raise NotFoundError("Comment", comment_id)
        return PurgeCommentResponse(comment_id=comment_id, purged=True)


class ReconcileCountersResponse(BaseModel):
    """Counter reconciliation response."""

    content_id: str
    comments_checked: int
    vote_counters_repaired: int
    reply_counters_repaired: int


class ReconcileCountersUseCase:
    """Use case for repairing drifted counters of one content item."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, content_id: str) -> ReconcileCountersResponse:
        result = await self.comment_service.reconcile_counters(
            ContentId(UUID(content_id))
        )
        return ReconcileCountersResponse(
            content_id=content_id,
            comments_checked=result.comments_checked,
            vote_counters_repaired=result.vote_counters_repaired,
            reply_counters_repaired=result.reply_counters_repaired,
        )
