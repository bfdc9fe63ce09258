"""Report listing use cases for moderators."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from remark.domain.error import NotFoundError
from remark.domain.model import Report, ReportDetail
from remark.domain.service import ReportService
from remark.domain.value import CommentId, ReportFilter, ReportId, UserId


class ReportItem(BaseModel):
    """Report item in response."""

    report_id: str
    comment_id: str
    reporter_id: str
    reason: str
    description: str | None
    is_reviewed: bool
    reviewed_at: datetime | None
    admin_response: str | None
    is_active: bool
    deactivated_at: datetime | None
    created_at: datetime

    @classmethod
    def from_report(cls, report: Report) -> "ReportItem":
        return cls(
            report_id=str(report.id),
            comment_id=str(report.comment_id),
            reporter_id=str(report.reporter_id),
            reason=report.reason,
            description=report.description,
            is_reviewed=report.is_reviewed,
            reviewed_at=report.reviewed_at,
            admin_response=report.admin_response,
            is_active=report.is_active,
            deactivated_at=report.deactivated_at,
            created_at=report.created_at,
        )


class ReportDetailItem(ReportItem):
    """Report joined with its comment and unmasked party names."""

    comment_text: str | None  # None if the comment was purged
    comment_deleted: bool
    commenter_id: str | None
    commenter_name: str | None
    reporter_name: str | None

    @classmethod
    def from_detail(cls, detail: ReportDetail) -> "ReportDetailItem":
        comment = detail.comment
        return cls(
            **ReportItem.from_report(detail.report).model_dump(),
            comment_text=comment.text if comment else None,
            comment_deleted=comment.is_deleted if comment else True,
            commenter_id=str(comment.commenter_id) if comment else None,
            commenter_name=detail.commenter_name,
            reporter_name=detail.reporter_name,
        )


class FilterReportsRequest(BaseModel):
    """Moderation filter request."""

    reporter_id: str | None = None
    comment_id: str | None = None
    commenter_id: str | None = None
    reason: str | None = None
    is_reviewed: bool | None = None
    is_active: bool | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    has_admin_response: bool | None = None
    admin_response: str | None = None
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1, le=100)


class FilterReportsResponse(BaseModel):
    """Moderation filter response."""

    items: list[ReportItem]
    total: int
    page: int
    page_size: int
    total_pages: int


class FilterReportDetailsResponse(BaseModel):
    """Moderation filter response with details."""

    items: list[ReportDetailItem]
    total: int
    page: int
    page_size: int
    total_pages: int


def _to_criteria(request: FilterReportsRequest) -> ReportFilter:
    return ReportFilter(
        reporter_id=UserId(UUID(request.reporter_id)) if request.reporter_id else None,
        comment_id=CommentId(UUID(request.comment_id)) if request.comment_id else None,
        commenter_id=(
            UserId(UUID(request.commenter_id)) if request.commenter_id else None
        ),
        reason=request.reason,
        is_reviewed=request.is_reviewed,
        is_active=request.is_active,
        start_date=request.start_date,
        end_date=request.end_date,
        has_admin_response=request.has_admin_response,
        admin_response=request.admin_response,
        page=request.page,
        page_size=request.page_size,
    )


class ListReportsUseCase:
    """Use case for the moderator's views over the report ledger.

    Each view comes plain or joined with details. Names in details are
    never masked.
    """

    def __init__(self, report_service: ReportService) -> None:
        """Initialize list reports use case.

        Args:
            report_service: Report domain service
        """
        self.report_service = report_service

    async def execute(self, request: FilterReportsRequest) -> FilterReportsResponse:
        """Run a paginated moderation query.

        Args:
            request: Filter criteria and page

        Returns:
            One page of reports, newest first
        """
        page = await self.report_service.filter_reports(_to_criteria(request))
        return FilterReportsResponse(
            items=[ReportItem.from_report(r) for r in page.items],
            total=page.total,
            page=page.page,
            page_size=page.page_size,
            total_pages=page.total_pages,
        )

    async def filter_with_details(
        self, request: FilterReportsRequest
    ) -> FilterReportDetailsResponse:
        page = await self.report_service.filter_reports_with_details(
            _to_criteria(request)
        )
        return FilterReportDetailsResponse(
            items=[ReportDetailItem.from_detail(d) for d in page.items],
            total=page.total,
            page=page.page,
            page_size=page.page_size,
            total_pages=page.total_pages,
        )

    async def pending(self) -> list[ReportItem]:
        """Unreviewed reports, oldest first."""
        reports = await self.report_service.get_unreviewed()
        return [ReportItem.from_report(r) for r in reports]

    async def pending_with_details(self) -> list[ReportDetailItem]:
        details = await self.report_service.get_unreviewed_with_details()
        return [ReportDetailItem.from_detail(d) for d in details]

    async def all_with_details(self) -> list[ReportDetailItem]:
        """Every report, newest first."""
        details = await self.report_service.get_all_with_details()
        return [ReportDetailItem.from_detail(d) for d in details]

    async def for_comment(self, comment_id: str) -> list[ReportItem]:
        """Reports filed against one comment."""
        reports = await self.report_service.get_reports_for_comment(
            CommentId(UUID(comment_id))
        )
        return [ReportItem.from_report(r) for r in reports]

    async def for_comment_with_details(
        self, comment_id: str
    ) -> list[ReportDetailItem]:
        details = await self.report_service.get_reports_for_comment_with_details(
            CommentId(UUID(comment_id))
        )
        return [ReportDetailItem.from_detail(d) for d in details]

    async def by_reporter(self, reporter_id: str) -> list[ReportItem]:
        """Reports filed by one user, newest first."""
        reports = await self.report_service.get_reports_by_reporter(
            UserId(UUID(reporter_id))
        )
        return [ReportItem.from_report(r) for r in reports]

    async def against_user(self, commenter_id: str) -> list[ReportDetailItem]:
        """Reports filed on any comment written by one user."""
        details = await self.report_service.get_reports_against_commenter(
            UserId(UUID(commenter_id))
        )
        return [ReportDetailItem.from_detail(d) for d in details]

    async def get(self, report_id: str) -> ReportDetailItem:
        """One report with details.

        Raises:
            NotFoundError: If the report does not exist
        """
        detail = await self.report_service.get_report_with_details(
            ReportId(UUID(report_id))
        )
        if detail is None:
            raise NotFoundError("Report", report_id)
        return ReportDetailItem.from_detail(detail)
