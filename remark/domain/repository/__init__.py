"""Repository interfaces for Remark domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from remark.domain.repository.comment import CommentRepository
from remark.domain.repository.profile import UserProfileRepository
from remark.domain.repository.report import ReportRepository
from remark.domain.repository.vote import VoteRepository

__all__ = [
    "CommentRepository",
    "ReportRepository",
    "UserProfileRepository",
    "VoteRepository",
]
