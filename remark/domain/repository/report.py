"""Report repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from remark.domain.model.common import Page
from remark.domain.model.report import Report
from remark.domain.value import CommentId, ReportFilter, ReportId, UserId


class ReportRepository(ABC):
    """Repository for Report entity.

    Defines the contract for report persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID.

        Args:
            report_id: The report's unique identifier

        Returns:
            The report if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, report: Report) -> Report:
        """Insert a report.

        Args:
            report: The report to save

        Returns:
            The saved report

        Raises:
            IntegrityError: If this reporter already reported this comment
        """
        pass

    @abstractmethod
    async def find_unreviewed(self) -> List[Report]:
        """Find reports awaiting review, oldest first."""
        pass

    @abstractmethod
    async def find_all(self) -> List[Report]:
        """Find every report, newest first."""
        pass

    @abstractmethod
    async def find_by_comment(self, comment_id: CommentId) -> List[Report]:
        """Find all reports filed against a comment, oldest first."""
        pass

    @abstractmethod
    async def find_by_reporter(self, reporter_id: UserId) -> List[Report]:
        """Find all reports filed by a user, newest first."""
        pass

    @abstractmethod
    async def find_comment_ids_by_reporter(
        self, reporter_id: UserId
    ) -> List[CommentId]:
        """Find IDs of every comment a user has reported, whatever its status."""
        pass

    @abstractmethod
    async def mark_reviewed(
        self, report_id: ReportId, admin_response: str, reviewed_at: datetime
    ) -> bool:
        """Mark an unreviewed report as reviewed.

        Returns:
            True if an unreviewed report matched, False otherwise
        """
        pass

    @abstractmethod
    async def deactivate(self, report_id: ReportId, deactivated_at: datetime) -> bool:
        """Close an active report.

        Returns:
            True if an active report matched, False otherwise
        """
        pass

    @abstractmethod
    async def filter(self, criteria: ReportFilter) -> Page[Report]:
        """Run a moderation query with pagination, newest first.

        Args:
            criteria: Filter criteria; commenter_id must already be
                resolved into comment_ids

        Returns:
            One page of reports with the total match count
        """
        pass
