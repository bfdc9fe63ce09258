"""Report routes for end users."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from remark.application.usecase.report import (
    ListReportsUseCase,
    ReportItem,
    SubmitReportRequest,
    SubmitReportUseCase,
)
from remark.domain.value import ReportReason
from remark.interface.api.identity import CurrentUser

router = APIRouter(prefix="/reports", tags=["reports"], route_class=DishkaRoute)


class SubmitReportAPIRequest(BaseModel):
    """API request for reporting a comment."""

    comment_id: str
    reason: ReportReason
    description: str | None = Field(default=None, max_length=2000)


@router.post("", response_model=ReportItem, status_code=status.HTTP_201_CREATED)
async def submit_report(
    request: SubmitReportAPIRequest,
    user_id: CurrentUser,
    submit_report_use_case: FromDishka[SubmitReportUseCase],
) -> ReportItem:
    """Report a comment.

    The comment and its replies disappear from the caller's listings.
    Reporting the same comment twice returns 409.
    """
    return await submit_report_use_case.execute(
        SubmitReportRequest(
            comment_id=request.comment_id,
            reporter_id=user_id,
            reason=request.reason.value,
            description=request.description,
        )
    )


@router.get("/mine", response_model=list[ReportItem])
async def my_reports(
    user_id: CurrentUser,
    list_reports_use_case: FromDishka[ListReportsUseCase],
) -> list[ReportItem]:
    """Reports filed by the caller, newest first."""
    return await list_reports_use_case.by_reporter(user_id)
