"""Domain model entities for Remark."""

from remark.domain.model.comment import Comment
from remark.domain.model.common import DomainModel, Page
from remark.domain.model.profile import UserProfile
from remark.domain.model.report import Report, ReportDetail
from remark.domain.model.vote import Vote

__all__ = [
    "Comment",
    "DomainModel",
    "Page",
    "Report",
    "ReportDetail",
    "UserProfile",
    "Vote",
]
