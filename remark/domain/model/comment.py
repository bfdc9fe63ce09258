"""Comment entity.

Comments are two-level threads attached to externally owned content:
a top-level comment can collect replies, replies cannot be replied to.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from remark.domain.model.common import DomainModel
from remark.domain.value import CommentId, ContentId, UserId


class Comment(DomainModel):
    """Comment entity.

    A comment is one of two variants, told apart by parent_id:
    - Top-level (parent_id None): reply_count is an integer >= 0
    - Reply (parent_id set): reply_count is None, replies have no children

    like_count/dislike_count and reply_count are denormalized caches of
    the vote ledger and of the live replies. deleted_at is a terminal
    soft-delete marker; deleted rows are kept.
    """

    id: CommentId
    content_id: ContentId
    commenter_id: UserId
    text: str = Field(min_length=1, max_length=10000)
    parent_id: Optional[CommentId] = None
    like_count: int = Field(default=0, ge=0)
    dislike_count: int = Field(default=0, ge=0)
    reply_count: Optional[int] = Field(default=None, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    edited_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @model_validator(mode="before")
    @classmethod
    def default_reply_count(cls, data):
        """Top-level comments start with zero replies."""
        if (
            isinstance(data, dict)
            and data.get("parent_id") is None
            and data.get("reply_count") is None
        ):
            return {**data, "reply_count": 0}
        return data

    @model_validator(mode="after")
    def check_thread_variant(self) -> "Comment":
        """Replies never carry a reply counter."""
        if self.parent_id is not None and self.reply_count is not None:
            raise ValueError("Replies cannot have a reply_count")
        if self.parent_id is not None and self.parent_id == self.id:
            raise ValueError("A comment cannot reply to itself")
        return self

    @property
    def is_reply(self) -> bool:
        return self.parent_id is not None

    @property
    def is_top_level(self) -> bool:
        return self.parent_id is None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
