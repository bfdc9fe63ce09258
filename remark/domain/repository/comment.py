"""Comment repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Collection
from datetime import datetime
from typing import List, Optional

from remark.domain.model.comment import Comment
from remark.domain.model.common import Page
from remark.domain.value import CommentFilter, CommentId, ContentId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Every write here is a single atomic statement; counter updates are
    point increments or point sets on one row.
    """

    @abstractmethod
    async def find_by_id(
        self, comment_id: CommentId, include_deleted: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier
            include_deleted: Whether a soft-deleted comment may be returned

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, comment_ids: Collection[CommentId]) -> List[Comment]:
        """Find comments by ID, deleted ones included (batch query)."""
        pass

    @abstractmethod
    async def find_by_content(
        self, content_id: ContentId, include_deleted: bool = False
    ) -> List[Comment]:
        """Find every comment under a content item, oldest first."""
        pass

    @abstractmethod
    async def find_top_level(
        self,
        content_id: ContentId,
        exclude_ids: Collection[CommentId] = (),
    ) -> List[Comment]:
        """Find live top-level comments of a content item, oldest first.

        Args:
            content_id: The content ID
            exclude_ids: Comment IDs to leave out

        Returns:
            List of comments ordered by creation time ascending
        """
        pass

    @abstractmethod
    async def find_replies(
        self,
        parent_id: CommentId,
        exclude_ids: Collection[CommentId] = (),
    ) -> List[Comment]:
        """Find live replies to a comment, oldest first.

        Args:
            parent_id: The parent comment ID
            exclude_ids: Comment IDs to leave out

        Returns:
            List of replies ordered by creation time ascending
        """
        pass

    @abstractmethod
    async def find_reply_ids(
        self, parent_ids: Collection[CommentId]
    ) -> List[CommentId]:
        """Find IDs of all replies whose parent is in parent_ids."""
        pass

    @abstractmethod
    async def find_ids_by_commenter(self, commenter_id: UserId) -> List[CommentId]:
        """Find IDs of every comment written by a user, deleted ones included."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_text(
        self,
        comment_id: CommentId,
        commenter_id: UserId,
        text: str,
        edited_at: datetime,
    ) -> bool:
        """Replace the text of a live comment owned by commenter_id.

        Returns:
            True if a row matched id, author and not-deleted; False otherwise
        """
        pass

    @abstractmethod
    async def soft_delete(
        self,
        comment_id: CommentId,
        commenter_id: UserId,
        deleted_at: datetime,
    ) -> Optional[Comment]:
        """Stamp deleted_at on a live comment owned by commenter_id.

        The match on deleted_at IS NULL makes this a one-shot transition:
        a concurrent second attempt matches nothing.

        Returns:
            The comment as it was deleted, or None if nothing matched
        """
        pass

    @abstractmethod
    async def soft_delete_replies(
        self, parent_id: CommentId, deleted_at: datetime
    ) -> int:
        """Stamp deleted_at on every live reply of a comment.

        Returns:
            Number of replies deleted
        """
        pass

    @abstractmethod
    async def soft_delete_by_content(
        self, content_id: ContentId, deleted_at: datetime
    ) -> int:
        """Soft-delete every live comment of a content item.

        Top-level comments get reply_count 0 in the same statement.

        Returns:
            Number of comments deleted
        """
        pass

    @abstractmethod
    async def hard_delete(self, comment_ids: Collection[CommentId]) -> int:
        """Physically remove comments.

        Returns:
            Number of rows removed
        """
        pass

    @abstractmethod
    async def increment_reply_count(self, parent_id: CommentId) -> bool:
        """Atomically add 1 to a top-level comment's reply_count.

        Returns:
            False if the parent row does not exist
        """
        pass

    @abstractmethod
    async def decrement_reply_count(self, parent_id: CommentId) -> bool:
        """Atomically subtract 1 from reply_count, never going below 0.

        Returns:
            False if the parent does not exist or its count is already 0
        """
        pass

    @abstractmethod
    async def set_reply_count(self, parent_id: CommentId, reply_count: int) -> bool:
        """Overwrite a top-level comment's reply_count."""
        pass

    @abstractmethod
    async def count_replies(self, parent_id: CommentId) -> int:
        """Count live replies of a comment."""
        pass

    @abstractmethod
    async def set_vote_counts(
        self, comment_id: CommentId, like_count: int, dislike_count: int
    ) -> bool:
        """Overwrite the cached like/dislike counters of a comment.

        Returns:
            False if the comment row does not exist
        """
        pass

    @abstractmethod
    async def count_by_content(self, content_id: ContentId) -> int:
        """Count live comments of a content item."""
        pass

    @abstractmethod
    async def filter(
        self,
        criteria: CommentFilter,
        exclude_ids: Collection[CommentId] = (),
    ) -> Page[Comment]:
        """Run a compound comment query with pagination.

        Args:
            criteria: Filter criteria, page and page size
            exclude_ids: Comment IDs to leave out (viewer's reported set)

        Returns:
            One page of comments ordered by creation time ascending
        """
        pass
