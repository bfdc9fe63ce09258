"""PostgreSQL repository implementations."""

from remark.persistence.repository.comment import PostgresCommentRepository
from remark.persistence.repository.profile import PostgresUserProfileRepository
from remark.persistence.repository.report import PostgresReportRepository
from remark.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresReportRepository",
    "PostgresUserProfileRepository",
    "PostgresVoteRepository",
]
