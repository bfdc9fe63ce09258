"""Domain value objects for Remark."""

from remark.domain.value.filters import CommentFilter, ReportFilter
from remark.domain.value.identifiers import (
    CommentId,
    ContentId,
    ReportId,
    UserId,
    VoteId,
)
from remark.domain.value.types import (
    ReconcileResult,
    ReportReason,
    ToggleResult,
    VoteStats,
    VoteType,
)

__all__ = [
    # Identifiers
    "CommentId",
    "ContentId",
    "ReportId",
    "UserId",
    "VoteId",
    # Types
    "ReportReason",
    "VoteType",
    "VoteStats",
    "ToggleResult",
    "ReconcileResult",
    # Filters
    "CommentFilter",
    "ReportFilter",
]
