"""In-memory comment repository for testing."""

from collections.abc import Collection
from datetime import datetime
from typing import Optional

from remark.domain.model.comment import Comment
from remark.domain.model.common import Page
from remark.domain.repository.comment import CommentRepository
from remark.domain.value import CommentFilter, CommentId, ContentId, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    def _replace(self, comment: Comment, **changes) -> Comment:
        updated = comment.model_copy(update=changes)
        self._comments[comment.id] = updated
        return updated

    @staticmethod
    def _oldest_first(comments: list[Comment]) -> list[Comment]:
        return sorted(comments, key=lambda c: c.created_at)

    async def find_by_id(
        self, comment_id: CommentId, include_deleted: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID."""
        comment = self._comments.get(comment_id)
        if comment is None or (comment.is_deleted and not include_deleted):
            return None
        return comment

    async def find_by_ids(self, comment_ids: Collection[CommentId]) -> list[Comment]:
        return [self._comments[cid] for cid in comment_ids if cid in self._comments]

    async def find_by_content(
        self, content_id: ContentId, include_deleted: bool = False
    ) -> list[Comment]:
        comments = [
            c
            for c in self._comments.values()
            if c.content_id == content_id and (include_deleted or not c.is_deleted)
        ]
        return self._oldest_first(comments)

    async def find_top_level(
        self,
        content_id: ContentId,
        exclude_ids: Collection[CommentId] = (),
    ) -> list[Comment]:
        excluded = set(exclude_ids)
        comments = [
            c
            for c in self._comments.values()
            if c.content_id == content_id
            and c.is_top_level
            and not c.is_deleted
            and c.id not in excluded
        ]
        return self._oldest_first(comments)

    async def find_replies(
        self,
        parent_id: CommentId,
        exclude_ids: Collection[CommentId] = (),
    ) -> list[Comment]:
        excluded = set(exclude_ids)
        comments = [
            c
            for c in self._comments.values()
            if c.parent_id == parent_id and not c.is_deleted and c.id not in excluded
        ]
        return self._oldest_first(comments)

    async def find_reply_ids(self, parent_ids: Collection[CommentId]) -> list[CommentId]:
        parents = set(parent_ids)
        return [c.id for c in self._comments.values() if c.parent_id in parents]

    async def find_ids_by_commenter(self, commenter_id: UserId) -> list[CommentId]:
        return [c.id for c in self._comments.values() if c.commenter_id == commenter_id]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_text(
        self,
        comment_id: CommentId,
        commenter_id: UserId,
        text: str,
        edited_at: datetime,
    ) -> bool:
        comment = await self.find_by_id(comment_id)
        if comment is None or comment.commenter_id != commenter_id:
            return False
        self._replace(comment, text=text, edited_at=edited_at)
        return True

    async def soft_delete(
        self,
        comment_id: CommentId,
        commenter_id: UserId,
        deleted_at: datetime,
    ) -> Optional[Comment]:
        comment = await self.find_by_id(comment_id)
        if comment is None or comment.commenter_id != commenter_id:
            return None
        return self._replace(comment, deleted_at=deleted_at)

    async def soft_delete_replies(
        self, parent_id: CommentId, deleted_at: datetime
    ) -> int:
        replies = [
            c
            for c in self._comments.values()
            if c.parent_id == parent_id and not c.is_deleted
        ]
        for reply in replies:
            self._replace(reply, deleted_at=deleted_at)
        return len(replies)

    async def soft_delete_by_content(
        self, content_id: ContentId, deleted_at: datetime
    ) -> int:
        live = [
            c
            for c in self._comments.values()
            if c.content_id == content_id and not c.is_deleted
        ]
        for comment in live:
            if comment.is_top_level:
                self._replace(comment, deleted_at=deleted_at, reply_count=0)
            else:
                self._replace(comment, deleted_at=deleted_at)
        return len(live)

    async def hard_delete(self, comment_ids: Collection[CommentId]) -> int:
        removed = 0
        for cid in comment_ids:
            if self._comments.pop(cid, None) is not None:
                removed += 1
        return removed

    async def increment_reply_count(self, parent_id: CommentId) -> bool:
        parent = self._comments.get(parent_id)
        if parent is None or not parent.is_top_level:
            return False
        self._replace(parent, reply_count=(parent.reply_count or 0) + 1)
        return True

    async def decrement_reply_count(self, parent_id: CommentId) -> bool:
        parent = self._comments.get(parent_id)
        if parent is None or not parent.reply_count:
            return False
        self._replace(parent, reply_count=parent.reply_count - 1)
        return True

    async def set_reply_count(self, parent_id: CommentId, reply_count: int) -> bool:
        parent = self._comments.get(parent_id)
        if parent is None or not parent.is_top_level:
            return False
        self._replace(parent, reply_count=reply_count)
        return True

    async def count_replies(self, parent_id: CommentId) -> int:
        return sum(
            1
            for c in self._comments.values()
            if c.parent_id == parent_id and not c.is_deleted
        )

    async def set_vote_counts(
        self, comment_id: CommentId, like_count: int, dislike_count: int
    ) -> bool:
        comment = self._comments.get(comment_id)
        if comment is None:
            return False
        self._replace(comment, like_count=like_count, dislike_count=dislike_count)
        return True

    async def count_by_content(self, content_id: ContentId) -> int:
        return sum(
            1
            for c in self._comments.values()
            if c.content_id == content_id and not c.is_deleted
        )

    async def filter(
        self,
        criteria: CommentFilter,
        exclude_ids: Collection[CommentId] = (),
    ) -> Page[Comment]:
        excluded = set(exclude_ids)
        want_deleted = bool(criteria.is_deleted)
        search = criteria.search.lower() if criteria.search else None

        matches = [
            c
            for c in self._comments.values()
            if c.content_id == criteria.content_id
            and c.parent_id == criteria.parent_id
            and c.is_deleted == want_deleted
            and (not criteria.only_mine or c.commenter_id == criteria.user_id)
            and (search is None or search in c.text.lower())
            and c.id not in excluded
        ]
        matches = self._oldest_first(matches)

        return Page[Comment](
            items=matches[criteria.offset : criteria.offset + criteria.page_size],
            total=len(matches),
            page=criteria.page,
            page_size=criteria.page_size,
        )
