"""Filter criteria for comment and report queries."""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from remark.domain.value.common import ValueObject
from remark.domain.value.identifiers import CommentId, ContentId, UserId


class CommentFilter(ValueObject):
    """Compound comment query.

    - parent_id None selects top-level comments, otherwise replies to that parent
    - is_deleted None or False selects live comments, True selects deleted ones
    - only_mine restricts to the viewer's own comments and requires user_id
    - user_id also removes the comments the viewer personally reported
    """

    content_id: ContentId
    user_id: Optional[UserId] = None
    parent_id: Optional[CommentId] = None
    is_deleted: Optional[bool] = False
    only_mine: bool = False
    search: Optional[str] = None
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1, le=100)

    @model_validator(mode="after")
    def check_only_mine_has_user(self) -> "CommentFilter":
        """only_mine is meaningless without a viewer."""
        if self.only_mine and self.user_id is None:
            raise ValueError("only_mine requires user_id")
        return self

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


class ReportFilter(ValueObject):
    """Moderation query over reports.

    commenter_id is resolved by the report service into the set of
    comment ids written by that user before reaching the repository.
    """

    reporter_id: Optional[UserId] = None
    comment_id: Optional[CommentId] = None
    comment_ids: Optional[frozenset[CommentId]] = None
    commenter_id: Optional[UserId] = None
    reason: Optional[str] = None  # Case-insensitive substring
    is_reviewed: Optional[bool] = None
    is_active: Optional[bool] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    has_admin_response: Optional[bool] = None
    admin_response: Optional[str] = None  # Case-insensitive substring
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1, le=100)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size
