"""Domain services for Remark."""

from .base import Service
from .comment_record_service import CommentRecordService
from .comment_service import CommentService, mask_name
from .profile_service import ProfileService
from .report_service import ReportService
from .vote_service import VoteService

__all__ = [
    "Service",
    "CommentRecordService",
    "CommentService",
    "ProfileService",
    "ReportService",
    "VoteService",
    "mask_name",
]
