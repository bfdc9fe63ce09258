"""Moderate report use case."""

from typing import Literal
from uuid import UUID

from pydantic import BaseModel, model_validator

from remark.domain.error import ConflictError, NotFoundError
from remark.domain.service import ReportService
from remark.domain.value import ReportId


class ModerateReportRequest(BaseModel):
    """Moderate report request."""

    report_id: str
    action: Literal["review", "deactivate"]
    admin_response: str | None = None  # Required for review

    @model_validator(mode="after")
    def check_response(self) -> "ModerateReportRequest":
        if self.action == "review" and not (self.admin_response or "").strip():
            raise ValueError("admin_response is required to review a report")
        return self


class ModerateReportResponse(BaseModel):
    """Moderate report response."""

    report_id: str
    action: str
    updated: bool


class ModerateReportUseCase:
    """Use case for a moderator reviewing or closing a report."""

    def __init__(self, report_service: ReportService) -> None:
        self.report_service = report_service

    async def execute(self, request: ModerateReportRequest) -> ModerateReportResponse:
        """Apply a one-way moderation transition.

        Raises:
            NotFoundError: If the report does not exist
            ConflictError: If the report was already reviewed (or deactivated)
        """
        report_id = ReportId(UUID(request.report_id))
        if await self.report_service.get_report(report_id) is None:
            raise NotFoundError("Report", request.report_id)

        if request.action == "review":
            updated = await self.report_service.review_report(
                report_id, request.admin_response or ""
            )
            if not updated:
                raise ConflictError(f"Report {request.report_id} is already reviewed")
        else:
            updated = await self.report_service.deactivate_report(report_id)
            if not updated:
                raise ConflictError(f"Report {request.report_id} is already inactive")

        return ModerateReportResponse(
            report_id=request.report_id, action=request.action, updated=True
        )
