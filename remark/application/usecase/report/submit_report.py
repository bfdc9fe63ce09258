"""Submit report use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from remark.domain.error import NotFoundError
from remark.domain.service import CommentService, ReportService
from remark.domain.value import CommentId, UserId

from .list_reports import ReportItem


class SubmitReportRequest(BaseModel):
    """Submit report request."""

    comment_id: str
    reporter_id: str  # User ID from the identity header
    reason: str = Field(min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=2000)


class SubmitReportUseCase:
    """Use case for a user reporting a comment.

    Once reported, the comment and its replies are hidden from the
    reporter, whatever moderators later decide.
    """

    def __init__(
        self, comment_service: CommentService, report_service: ReportService
    ) -> None:
        self.comment_service = comment_service
        self.report_service = report_service

    async def execute(self, request: SubmitReportRequest) -> ReportItem:
        """Execute submit report flow.

        Raises:
            NotFoundError: If the comment does not exist or is deleted
            DuplicateReportError: If the user already reported it
        """
        comment_id = CommentId(UUID(request.comment_id))
        if await self.comment_service.get(comment_id) is None:
            raise NotFoundError("Comment", request.comment_id)

        report = await self.report_service.create_report(
            reporter_id=UserId(UUID(request.reporter_id)),
            comment_id=comment_id,
            reason=request.reason,
            description=request.description,
        )
        return ReportItem.from_report(report)
