"""Comment record service (the comment store's contract for the ledgers)."""

from collections.abc import Collection
from typing import List

import logfire

from remark.domain.model.comment import Comment
from remark.domain.repository import CommentRepository
from remark.domain.value import CommentId, UserId

from .base import Service


class CommentRecordService(Service):
    """The part of the comment store the vote and report ledgers may touch.

    CommentService depends on both ledgers, so the ledgers cannot depend
    on it in turn. They go through this service instead of reading or
    writing comment storage themselves.
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        self.comment_repository = comment_repository

    async def push_vote_counts(
        self, comment_id: CommentId, like_count: int, dislike_count: int
    ) -> bool:
        """Overwrite a comment's cached like/dislike totals.

        Returns:
            False if the comment no longer exists
        """
        with logfire.span(
            "comment_record_service.push_vote_counts", comment_id=str(comment_id)
        ):
            return await self.comment_repository.set_vote_counts(
                comment_id, like_count, dislike_count
            )

    async def get_ids_by_commenter(self, commenter_id: UserId) -> List[CommentId]:
        """IDs of every comment the user wrote, deleted ones included."""
        return await self.comment_repository.find_ids_by_commenter(commenter_id)

    async def get_many(self, comment_ids: Collection[CommentId]) -> List[Comment]:
        """Batch lookup, deleted comments included; purged ones are absent."""
        if not comment_ids:
            return []
        return await self.comment_repository.find_by_ids(comment_ids)
