"""Report entity.

Reports are complaints a user files against a comment. A report both
hides the comment from its reporter and queues it for moderation.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from remark.domain.model.common import DomainModel
from remark.domain.model.comment import Comment
from remark.domain.value import CommentId, ReportId, UserId


class Report(DomainModel):
    """Report entity.

    Moderation state is two independent one-way flags:
    - is_reviewed: False -> True once, with reviewed_at and admin_response
    - is_active: True -> False once (closed), with deactivated_at
    Reports are never physically deleted in normal operation.
    """

    id: ReportId
    comment_id: CommentId
    reporter_id: UserId
    reason: str = Field(min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=2000)
    is_reviewed: bool = False
    reviewed_at: Optional[datetime] = None
    admin_response: Optional[str] = None
    is_active: bool = True
    deactivated_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)


class ReportDetail(DomainModel):
    """Report joined with the reported comment and both parties' names.

    Built for moderators, so names are never masked.
    """

    report: Report
    comment: Optional[Comment] = None  # None if the comment was purged
    reporter_name: Optional[str] = None
    commenter_name: Optional[str] = None
