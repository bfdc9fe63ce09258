"""PostgreSQL implementation of Vote repository."""

from typing import Optional

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from remark.domain.model import Vote
from remark.domain.repository import VoteRepository
from remark.domain.value import CommentId, UserId, VoteType
from remark.persistence.mappers import row_to_vote, vote_to_dict
from remark.persistence.tables import comment_votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _pair(self, voter_id: UserId, comment_id: CommentId):
        return and_(
            comment_votes_table.c.voter_id == voter_id,
            comment_votes_table.c.comment_id == comment_id,
        )

    async def find_by_voter_and_comment(
        self, voter_id: UserId, comment_id: CommentId
    ) -> Optional[Vote]:
        """Find a user's vote on a comment."""
        stmt = select(comment_votes_table).where(self._pair(voter_id, comment_id))
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote.

        Runs in a savepoint so a duplicate-key failure leaves the
        surrounding transaction usable.
        """
        stmt = insert(comment_votes_table).values(**vote_to_dict(vote))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return vote

    async def update_type(
        self, voter_id: UserId, comment_id: CommentId, vote_type: VoteType
    ) -> bool:
        """Set the type of an existing vote."""
        stmt = (
            update(comment_votes_table)
            .where(self._pair(voter_id, comment_id))
            .values(vote_type=vote_type.value)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_voter_and_comment(
        self, voter_id: UserId, comment_id: CommentId
    ) -> bool:
        """Delete a user's vote on a comment."""
        stmt = delete(comment_votes_table).where(self._pair(voter_id, comment_id))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_comment(self, comment_id: CommentId) -> int:
        """Delete every vote on a comment."""
        stmt = delete(comment_votes_table).where(
            comment_votes_table.c.comment_id == comment_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def count_by_comment_and_type(
        self, comment_id: CommentId, vote_type: VoteType
    ) -> int:
        """Count votes of one type on a comment."""
        stmt = (
            select(func.count())
            .select_from(comment_votes_table)
            .where(comment_votes_table.c.comment_id == comment_id)
            .where(comment_votes_table.c.vote_type == vote_type.value)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
