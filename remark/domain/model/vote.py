"""Vote entity.

Votes are like/dislike stances on comments.
Each user can hold at most one vote per comment.
"""

from datetime import datetime

from pydantic import Field

from remark.domain.model.common import DomainModel
from remark.domain.value import CommentId, UserId, VoteId, VoteType


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per (voter, comment), enforced by a unique index
    - Switching like/dislike mutates vote_type in place
    - Retracting deletes the row outright, votes carry no history
    """

    id: VoteId
    voter_id: UserId
    comment_id: CommentId
    vote_type: VoteType
    created_at: datetime = Field(default_factory=datetime.now)
