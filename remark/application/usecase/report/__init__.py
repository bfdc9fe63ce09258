"""Report use cases."""

from .list_reports import (
    FilterReportDetailsResponse,
    FilterReportsRequest,
    FilterReportsResponse,
    ListReportsUseCase,
    ReportDetailItem,
    ReportItem,
)
from .moderate_report import (
    ModerateReportRequest,
    ModerateReportResponse,
    ModerateReportUseCase,
)
from .submit_report import SubmitReportRequest, SubmitReportUseCase

__all__ = [
    "FilterReportDetailsResponse",
    "FilterReportsRequest",
    "FilterReportsResponse",
    "ListReportsUseCase",
    "ModerateReportRequest",
    "ModerateReportResponse",
    "ModerateReportUseCase",
    "ReportDetailItem",
    "ReportItem",
    "SubmitReportRequest",
    "SubmitReportUseCase",
]
