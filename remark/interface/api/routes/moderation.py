"""Moderation routes.

Moderator authentication is enforced by the gateway in front of the
/moderation prefix. Names in these views are not masked.
"""

from typing import Annotated

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from remark.application.usecase.comment import (
    PurgeCommentResponse,
    PurgeCommentUseCase,
    ReconcileCountersResponse,
    ReconcileCountersUseCase,
)
from remark.application.usecase.report import (
    FilterReportDetailsResponse,
    FilterReportsRequest,
    FilterReportsResponse,
    ListReportsUseCase,
    ModerateReportRequest,
    ModerateReportResponse,
    ModerateReportUseCase,
    ReportDetailItem,
    ReportItem,
)

router = APIRouter(prefix="/moderation", tags=["moderation"], route_class=DishkaRoute)


class ReviewReportAPIRequest(BaseModel):
    """API request for reviewing a report."""

    admin_response: str = Field(min_length=1)


@router.get("/reports", response_model=FilterReportsResponse)
async def filter_reports(
    filters: Annotated[FilterReportsRequest, Query()],
    list_reports_use_case: FromDishka[ListReportsUseCase],
) -> FilterReportsResponse:
    """Paginated moderation query, newest first."""
    return await list_reports_use_case.execute(filters)


@router.get("/reports/details", response_model=FilterReportDetailsResponse)
async def filter_reports_with_details(
    filters: Annotated[FilterReportsRequest, Query()],
    list_reports_use_case: FromDishka[ListReportsUseCase],
) -> FilterReportDetailsResponse:
    """Paginated moderation query joined with comments and names."""
    return await list_reports_use_case.filter_with_details(filters)


@router.get("/reports/all", response_model=list[ReportDetailItem])
async def all_reports(
    list_reports_use_case: FromDishka[ListReportsUseCase],
) -> list[ReportDetailItem]:
    return await list_reports_use_case.all_with_details()


@router.get("/reports/pending", response_model=list[ReportItem])
async def pending_reports(
    list_reports_use_case: FromDishka[ListReportsUseCase],
) -> list[ReportItem]:
    """Unreviewed reports, oldest first."""
    return await list_reports_use_case.pending()


@router.get("/reports/pending/details", response_model=list[ReportDetailItem])
async def pending_reports_with_details(
    list_reports_use_case: FromDishka[ListReportsUseCase],
) -> list[ReportDetailItem]:
    return await list_reports_use_case.pending_with_details()


@router.get("/reports/comment/{comment_id}", response_model=list[ReportItem])
async def reports_for_comment(
    comment_id: str,
    list_reports_use_case: FromDishka[ListReportsUseCase],
) -> list[ReportItem]:
    return await list_reports_use_case.for_comment(comment_id)


@router.get(
    "/reports/comment/{comment_id}/details", response_model=list[ReportDetailItem]
)
async def reports_for_comment_with_details(
    comment_id: str,
    list_reports_use_case: FromDishka[ListReportsUseCase],
) -> list[ReportDetailItem]:
    return await list_reports_use_case.for_comment_with_details(comment_id)


@router.get("/reports/against-user/{user_id}", response_model=list[ReportDetailItem])
async def reports_against_user(
    user_id: str,
    list_reports_use_case: FromDishka[ListReportsUseCase],
) -> list[ReportDetailItem]:
    """Reports filed on any comment written by user_id."""
    return await list_reports_use_case.against_user(user_id)


@router.get("/reports/{report_id}", response_model=ReportDetailItem)
async def get_report(
    report_id: str,
    list_reports_use_case: FromDishka[ListReportsUseCase],
) -> ReportDetailItem:
    return await list_reports_use_case.get(report_id)


@router.post("/reports/{report_id}/review", response_model=ModerateReportResponse)
async def review_report(
    report_id: str,
    request: ReviewReportAPIRequest,
    moderate_report_use_case: FromDishka[ModerateReportUseCase],
) -> ModerateReportResponse:
    """Mark a report reviewed. A report can be reviewed only once (409)."""
    return await moderate_report_use_case.execute(
        ModerateReportRequest(
            report_id=report_id,
            action="review",
            admin_response=request.admin_response,
        )
    )


@router.post("/reports/{report_id}/deactivate", response_model=ModerateReportResponse)
async def deactivate_report(
    report_id: str,
    moderate_report_use_case: FromDishka[ModerateReportUseCase],
) -> ModerateReportResponse:
    """Close a report. A closed report stays closed (409)."""
    return await moderate_report_use_case.execute(
        ModerateReportRequest(report_id=report_id, action="deactivate")
    )


@router.delete("/comments/{comment_id}", response_model=PurgeCommentResponse)
async def purge_comment(
    comment_id: str,
    purge_comment_use_case: FromDishka[PurgeCommentUseCase],
) -> PurgeCommentResponse:
    """Physically remove a comment, its replies and their votes."""
    logfire.warn("Comment purge requested", comment_id=comment_id)
    return await purge_comment_use_case.execute(comment_id)


@router.post(
    "/content/{content_id}/reconcile", response_model=ReconcileCountersResponse
)
async def reconcile_counters(
    content_id: str,
    reconcile_use_case: FromDishka[ReconcileCountersUseCase],
) -> ReconcileCountersResponse:
    """Recount vote and reply counters for one content item."""
    return await reconcile_use_case.execute(content_id)
