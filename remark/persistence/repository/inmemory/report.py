"""In-memory report repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from remark.domain.model.common import Page
from remark.domain.model.report import Report
from remark.domain.repository.report import ReportRepository
from remark.domain.value import CommentId, ReportFilter, ReportId, UserId


class InMemoryReportRepository(ReportRepository):
    """In-memory implementation of ReportRepository for testing."""

    def __init__(self) -> None:
        self._reports: dict[ReportId, Report] = {}

    def _newest_first(self, reports: list[Report]) -> list[Report]:
        return sorted(reports, key=lambda r: r.created_at, reverse=True)

    def _oldest_first(self, reports: list[Report]) -> list[Report]:
        return sorted(reports, key=lambda r: r.created_at)

    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        return self._reports.get(report_id)

    async def save(self, report: Report) -> Report:
        """Save a report.

        Raises:
            IntegrityError: If the reporter already reported this comment
        """
        for existing in self._reports.values():
            if (
                existing.reporter_id == report.reporter_id
                and existing.comment_id == report.comment_id
            ):
                raise IntegrityError("Duplicate report", None, Exception())

        self._reports[report.id] = report
        return report

    async def find_unreviewed(self) -> list[Report]:
        return self._oldest_first(
            [r for r in self._reports.values() if not r.is_reviewed]
        )

    async def find_all(self) -> list[Report]:
        return self._newest_first(list(self._reports.values()))

    async def find_by_comment(self, comment_id: CommentId) -> list[Report]:
        return self._oldest_first(
            [r for r in self._reports.values() if r.comment_id == comment_id]
        )

    async def find_by_reporter(self, reporter_id: UserId) -> list[Report]:
        return self._newest_first(
            [r for r in self._reports.values() if r.reporter_id == reporter_id]
        )

    async def find_comment_ids_by_reporter(
        self, reporter_id: UserId
    ) -> list[CommentId]:
        return [r.comment_id for r in self._reports.values() if r.reporter_id == reporter_id]

    async def mark_reviewed(
        self, report_id: ReportId, admin_response: str, reviewed_at: datetime
    ) -> bool:
        report = self._reports.get(report_id)
        if report is None or report.is_reviewed:
            return False
        self._reports[report_id] = report.model_copy(
            update={
                "is_reviewed": True,
                "reviewed_at": reviewed_at,
                "admin_response": admin_response,
            }
        )
        return True

    async def deactivate(self, report_id: ReportId, deactivated_at: datetime) -> bool:
        report = self._reports.get(report_id)
        if report is None or not report.is_active:
            return False
        self._reports[report_id] = report.model_copy(
            update={"is_active": False, "deactivated_at": deactivated_at}
        )
        return True

    async def filter(self, criteria: ReportFilter) -> Page[Report]:
        def matches(r: Report) -> bool:
            if criteria.reporter_id is not None and r.reporter_id != criteria.reporter_id:
                return False
            if criteria.comment_id is not None and r.comment_id != criteria.comment_id:
                return False
            if criteria.comment_ids is not None and r.comment_id not in criteria.comment_ids:
                return False
            if criteria.reason and criteria.reason.lower() not in r.reason.lower():
                return False
            if criteria.is_reviewed is not None and r.is_reviewed != criteria.is_reviewed:
                return False
            if criteria.is_active is not None and r.is_active != criteria.is_active:
                return False
            if criteria.start_date is not None and r.created_at < criteria.start_date:
                return False
            if criteria.end_date is not None and r.created_at > criteria.end_date:
                return False
            if criteria.has_admin_response is not None and (
                (r.admin_response is not None) != criteria.has_admin_response
            ):
                return False
            if criteria.admin_response and (
                r.admin_response is None
                or criteria.admin_response.lower() not in r.admin_response.lower()
            ):
                return False
            return True

        found = self._newest_first([r for r in self._reports.values() if matches(r)])
        return Page[Report](
            items=found[criteria.offset : criteria.offset + criteria.page_size],
            total=len(found),
            page=criteria.page,
            page_size=criteria.page_size,
        )
