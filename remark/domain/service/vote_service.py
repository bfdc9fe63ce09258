"""Vote domain service (the vote ledger)."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from remark.domain.model.vote import Vote
from remark.domain.repository import VoteRepository
from remark.domain.value import CommentId, UserId, VoteId, VoteStats, VoteType

from .base import Service
from .comment_record_service import CommentRecordService


class VoteService(Service):
    """Domain service for vote operations.

    The vote rows are the source of truth. After every mutation the
    service recounts them and pushes the totals onto the comment's
    cached like_count/dislike_count. The push is a separate statement
    from the vote write; resync_counters can be run at any time to
    repair a comment whose cache drifted.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        comment_records: CommentRecordService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            comment_records: Comment store contract, used only for the
                counter push
        """
        self.vote_repository = vote_repository
        self.comment_records = comment_records

    async def get_vote(self, voter_id: UserId, comment_id: CommentId) -> Vote | None:
        """Get a user's vote on a comment.

        Args:
            voter_id: Voter ID
            comment_id: Comment ID

        Returns:
            Vote if the user voted, None otherwise
        """
        return await self.vote_repository.find_by_voter_and_comment(
            voter_id, comment_id
        )

    async def add_vote(
        self, voter_id: UserId, comment_id: CommentId, vote_type: VoteType
    ) -> bool:
        """Cast a first vote on a comment.

        A duplicate-key failure means a concurrent request already
        inserted this user's vote; it is reported as False, not raised.

        Args:
            voter_id: Voter ID
            comment_id: Comment ID
            vote_type: Like or dislike

        Returns:
            True if the vote was created, False if one already existed
        """
        with logfire.span(
            "vote_service.add_vote",
            voter_id=str(voter_id),
            comment_id=str(comment_id),
            vote_type=vote_type.value,
        ):
            vote = Vote(
                id=VoteId(uuid4()),
                voter_id=voter_id,
                comment_id=comment_id,
                vote_type=vote_type,
                created_at=datetime.now(),
            )

            try:
                await self.vote_repository.save(vote)
            except IntegrityError:
                logfire.info(
                    "Vote already exists",
                    voter_id=str(voter_id),
                    comment_id=str(comment_id),
                )
                return False

            await self.resync_counters(comment_id)
            return True

    async def update_vote(
        self, voter_id: UserId, comment_id: CommentId, vote_type: VoteType
    ) -> bool:
        """Switch an existing vote to vote_type.

        The write happens even if the type is unchanged; deciding whether
        a call is a switch is the caller's job.

        Returns:
            True if a vote was updated, False if the user had no vote
        """
        with logfire.span(
            "vote_service.update_vote",
            voter_id=str(voter_id),
            comment_id=str(comment_id),
            vote_type=vote_type.value,
        ):
            updated = await self.vote_repository.update_type(
                voter_id, comment_id, vote_type
            )
            if not updated:
                logfire.info(
                    "No vote to update",
                    voter_id=str(voter_id),
                    comment_id=str(comment_id),
                )
                return False

            await self.resync_counters(comment_id)
            return True

    async def remove_vote(self, voter_id: UserId, comment_id: CommentId) -> bool:
        """Retract a user's vote.

        Returns:
            True if a vote was removed, False if no vote existed
        """
        with logfire.span(
            "vote_service.remove_vote",
            voter_id=str(voter_id),
            comment_id=str(comment_id),
        ):
            deleted = await self.vote_repository.delete_by_voter_and_comment(
                voter_id, comment_id
            )
            if not deleted:
                logfire.info(
                    "No vote to remove",
                    voter_id=str(voter_id),
                    comment_id=str(comment_id),
                )
                return False

            await self.resync_counters(comment_id)
            return True

    async def remove_all_votes_for_comment(self, comment_id: CommentId) -> bool:
        """Delete every vote on a comment and zero its counters.

        Returns:
            True if at least one vote was deleted
        """
        with logfire.span(
            "vote_service.remove_all_votes_for_comment", comment_id=str(comment_id)
        ):
            deleted = await self.vote_repository.delete_by_comment(comment_id)
            # Resync even when nothing was deleted, so a drifted cache is zeroed
            await self.resync_counters(comment_id)
            logfire.info(
                "Votes removed for comment", comment_id=str(comment_id), count=deleted
            )
            return deleted > 0

    async def get_stats(self, comment_id: CommentId) -> VoteStats:
        """Count likes and dislikes straight from the vote ledger."""
        like_count = await self.vote_repository.count_by_comment_and_type(
            comment_id, VoteType.LIKE
        )
        dislike_count = await self.vote_repository.count_by_comment_and_type(
            comment_id, VoteType.DISLIKE
        )
        return VoteStats(like_count=like_count, dislike_count=dislike_count)

    async def resync_counters(self, comment_id: CommentId) -> VoteStats:
        """Recount a comment's votes and push the totals onto the comment.

        Idempotent. Concurrent resyncs may overwrite each other, but each
        one recounts from the ledger, so the last push is always correct.

        Args:
            comment_id: Comment ID

        Returns:
            The pushed totals
        """
        stats = await self.get_stats(comment_id)
        pushed = await self.comment_records.push_vote_counts(
            comment_id, stats.like_count, stats.dislike_count
        )
        if not pushed:
            logfire.warn(
                "Vote counter push found no comment", comment_id=str(comment_id)
            )
        return stats
