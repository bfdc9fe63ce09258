"""PostgreSQL implementation of Comment repository."""

from collections.abc import Collection
from datetime import datetime
from typing import List, Optional

from sqlalchemy import and_, case, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from remark.domain.model import Comment, Page
from remark.domain.repository import CommentRepository
from remark.domain.value import CommentFilter, CommentId, ContentId, UserId
from remark.persistence.mappers import comment_to_dict, row_to_comment
from remark.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository.

    Every mutation is a single UPDATE/INSERT/DELETE statement so that
    concurrent requests only ever race on row-level atomic writes.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, comment_id: CommentId, include_deleted: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        if not include_deleted:
            stmt = stmt.where(comments_table.c.deleted_at.is_(None))
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_ids(self, comment_ids: Collection[CommentId]) -> List[Comment]:
        """Find comments by ID (batch query)."""
        if not comment_ids:
            return []
        stmt = select(comments_table).where(comments_table.c.id.in_(list(comment_ids)))
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_content(
        self, content_id: ContentId, include_deleted: bool = False
    ) -> List[Comment]:
        """Find every comment under a content item."""
        stmt = select(comments_table).where(comments_table.c.content_id == content_id)
        if not include_deleted:
            stmt = stmt.where(comments_table.c.deleted_at.is_(None))
        stmt = stmt.order_by(comments_table.c.created_at)
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_top_level(
        self,
        content_id: ContentId,
        exclude_ids: Collection[CommentId] = (),
    ) -> List[Comment]:
        """Find live top-level comments of a content item."""
        stmt = select(comments_table).where(
            and_(
                comments_table.c.content_id == content_id,
                comments_table.c.parent_id.is_(None),
                comments_table.c.deleted_at.is_(None),
            )
        )
        if exclude_ids:
            stmt = stmt.where(comments_table.c.id.not_in(list(exclude_ids)))
        stmt = stmt.order_by(comments_table.c.created_at)
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_replies(
        self,
        parent_id: CommentId,
        exclude_ids: Collection[CommentId] = (),
    ) -> List[Comment]:
        """Find live replies to a comment."""
        stmt = select(comments_table).where(
            and_(
                comments_table.c.parent_id == parent_id,
                comments_table.c.deleted_at.is_(None),
            )
        )
        if exclude_ids:
            stmt = stmt.where(comments_table.c.id.not_in(list(exclude_ids)))
        stmt = stmt.order_by(comments_table.c.created_at)
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_reply_ids(
        self, parent_ids: Collection[CommentId]
    ) -> List[CommentId]:
        """Find IDs of all replies under the given parents."""
        if not parent_ids:
            return []
        stmt = select(comments_table.c.id).where(
            comments_table.c.parent_id.in_(list(parent_ids))
        )
        result = await self.session.execute(stmt)
        return [CommentId(row_id) for row_id in result.scalars().all()]

    async def find_ids_by_commenter(self, commenter_id: UserId) -> List[CommentId]:
        """Find IDs of every comment written by a user."""
        stmt = select(comments_table.c.id).where(
            comments_table.c.commenter_id == commenter_id
        )
        result = await self.session.execute(stmt)
        return [CommentId(row_id) for row_id in result.scalars().all()]

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def update_text(
        self,
        comment_id: CommentId,
        commenter_id: UserId,
        text: str,
        edited_at: datetime,
    ) -> bool:
        """Replace the text of a live comment owned by commenter_id."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.commenter_id == commenter_id)
            .where(comments_table.c.deleted_at.is_(None))
            .values(text=text, edited_at=edited_at)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def soft_delete(
        self,
        comment_id: CommentId,
        commenter_id: UserId,
        deleted_at: datetime,
    ) -> Optional[Comment]:
        """Stamp deleted_at on a live comment owned by commenter_id."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.commenter_id == commenter_id)
            .where(comments_table.c.deleted_at.is_(None))
            .values(deleted_at=deleted_at)
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def soft_delete_replies(
        self, parent_id: CommentId, deleted_at: datetime
    ) -> int:
        """Soft-delete every live reply of a comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.parent_id == parent_id)
            .where(comments_table.c.deleted_at.is_(None))
            .values(deleted_at=deleted_at)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def soft_delete_by_content(
        self, content_id: ContentId, deleted_at: datetime
    ) -> int:
        """Soft-delete every live comment of a content item."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.content_id == content_id)
            .where(comments_table.c.deleted_at.is_(None))
            .values(
                deleted_at=deleted_at,
                reply_count=case(
                    (comments_table.c.parent_id.is_(None), 0),
                    else_=None,
                ),
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def hard_delete(self, comment_ids: Collection[CommentId]) -> int:
        """Physically remove comments."""
        if not comment_ids:
            return 0
        stmt = delete(comments_table).where(comments_table.c.id.in_(list(comment_ids)))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def increment_reply_count(self, parent_id: CommentId) -> bool:
        """Atomically increment reply_count by 1."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == parent_id)
            .where(comments_table.c.parent_id.is_(None))
            .values(reply_count=comments_table.c.reply_count + 1)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def decrement_reply_count(self, parent_id: CommentId) -> bool:
        """Atomically decrement reply_count by 1 (minimum 0)."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == parent_id)
            .where(comments_table.c.reply_count > 0)  # Don't go below 0
            .values(reply_count=comments_table.c.reply_count - 1)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def set_reply_count(self, parent_id: CommentId, reply_count: int) -> bool:
        """Overwrite a top-level comment's reply_count."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == parent_id)
            .where(comments_table.c.parent_id.is_(None))
            .values(reply_count=reply_count)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_replies(self, parent_id: CommentId) -> int:
        """Count live replies of a comment."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.parent_id == parent_id)
            .where(comments_table.c.deleted_at.is_(None))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def set_vote_counts(
        self, comment_id: CommentId, like_count: int, dislike_count: int
    ) -> bool:
        """Overwrite the cached like/dislike counters."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(like_count=like_count, dislike_count=dislike_count)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_content(self, content_id: ContentId) -> int:
        """Count live comments of a content item."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.content_id == content_id)
            .where(comments_table.c.deleted_at.is_(None))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def filter(
        self,
        criteria: CommentFilter,
        exclude_ids: Collection[CommentId] = (),
    ) -> Page[Comment]:
        """Run a compound comment query with pagination."""
        conditions = [comments_table.c.content_id == criteria.content_id]

        if criteria.parent_id is None:
            conditions.append(comments_table.c.parent_id.is_(None))
        else:
            conditions.append(comments_table.c.parent_id == criteria.parent_id)

        if criteria.is_deleted:
            conditions.append(comments_table.c.deleted_at.is_not(None))
        else:
            conditions.append(comments_table.c.deleted_at.is_(None))

        if criteria.only_mine:
            conditions.append(comments_table.c.commenter_id == criteria.user_id)

        if criteria.search:
            conditions.append(
                comments_table.c.text.icontains(criteria.search, autoescape=True)
            )

        if exclude_ids:
            conditions.append(comments_table.c.id.not_in(list(exclude_ids)))

        where = and_(*conditions)

        count_stmt = select(func.count()).select_from(comments_table).where(where)
        total = (await self.session.execute(count_stmt)).scalar() or 0

        stmt = (
            select(comments_table)
            .where(where)
            .order_by(comments_table.c.created_at)
            .offset(criteria.offset)
            .limit(criteria.page_size)
        )
        result = await self.session.execute(stmt)

        return Page[Comment](
            items=[row_to_comment(row._asdict()) for row in result.fetchall()],
            total=total,
            page=criteria.page,
            page_size=criteria.page_size,
        )
