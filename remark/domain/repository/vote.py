"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from remark.domain.model.vote import Vote
from remark.domain.value import CommentId, UserId, VoteType


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_voter_and_comment(
        self, voter_id: UserId, comment_id: CommentId
    ) -> Optional[Vote]:
        """Find a user's vote on a comment.

        Args:
            voter_id: The voter's ID
            comment_id: The comment's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Insert a vote.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If a vote already exists for this voter/comment pair
        """
        pass

    @abstractmethod
    async def update_type(
        self, voter_id: UserId, comment_id: CommentId, vote_type: VoteType
    ) -> bool:
        """Set the type of an existing vote in place.

        Writes even when the type is unchanged.

        Returns:
            True if a vote matched, False if none existed
        """
        pass

    @abstractmethod
    async def delete_by_voter_and_comment(
        self, voter_id: UserId, comment_id: CommentId
    ) -> bool:
        """Delete a user's vote on a comment.

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass

    @abstractmethod
    async def delete_by_comment(self, comment_id: CommentId) -> int:
        """Delete every vote on a comment.

        Returns:
            Number of deleted votes
        """
        pass

    @abstractmethod
    async def count_by_comment_and_type(
        self, comment_id: CommentId, vote_type: VoteType
    ) -> int:
        """Count votes of one type on a comment."""
        pass
