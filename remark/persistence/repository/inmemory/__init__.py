"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .profile import InMemoryUserProfileRepository
from .report import InMemoryReportRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryReportRepository",
    "InMemoryUserProfileRepository",
    "InMemoryVoteRepository",
]
