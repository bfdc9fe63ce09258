"""In-memory vote repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from remark.domain.model.vote import Vote
from remark.domain.repository.vote import VoteRepository
from remark.domain.value import CommentId, UserId, VoteType


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[Vote] = []

    async def find_by_voter_and_comment(
        self, voter_id: UserId, comment_id: CommentId
    ) -> Optional[Vote]:
        """Find a vote by voter and comment."""
        for vote in self._votes:
            if vote.voter_id == voter_id and vote.comment_id == comment_id:
                return vote
        return None

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        existing = await self.find_by_voter_and_comment(vote.voter_id, vote.comment_id)
        if existing:
            raise IntegrityError("Duplicate vote", None, Exception())

        self._votes.append(vote)
        return vote

    async def update_type(
        self, voter_id: UserId, comment_id: CommentId, vote_type: VoteType
    ) -> bool:
        for i, vote in enumerate(self._votes):
            if vote.voter_id == voter_id and vote.comment_id == comment_id:
                self._votes[i] = vote.model_copy(update={"vote_type": vote_type})
                return True
        return False

    async def delete_by_voter_and_comment(
        self, voter_id: UserId, comment_id: CommentId
    ) -> bool:
        """Delete a vote by voter and comment."""
        for i, vote in enumerate(self._votes):
            if vote.voter_id == voter_id and vote.comment_id == comment_id:
                self._votes.pop(i)
                return True
        return False

    async def delete_by_comment(self, comment_id: CommentId) -> int:
        before = len(self._votes)
        self._votes = [v for v in self._votes if v.comment_id != comment_id]
        return before - len(self._votes)

    async def count_by_comment_and_type(
        self, comment_id: CommentId, vote_type: VoteType
    ) -> int:
        """Count votes of one type on a comment."""
        return sum(
            1
            for v in self._votes
            if v.comment_id == comment_id and v.vote_type == vote_type
        )
