"""Report domain service (the report ledger)."""

from datetime import datetime
from typing import Dict, List, Optional
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from remark.domain.error import DuplicateReportError
from remark.domain.model.comment import Comment
from remark.domain.model.common import Page
from remark.domain.model.profile import UserProfile
from remark.domain.model.report import Report, ReportDetail
from remark.domain.repository import ReportRepository, UserProfileRepository
from remark.domain.value import CommentId, ReportFilter, ReportId, UserId

from .base import Service
from .comment_record_service import CommentRecordService


class ReportService(Service):
    """Domain service for report operations.

    A report serves two independent views:
    - the reporter's personal hidden set (get_reported_comment_ids_for_user),
      which ignores moderation state entirely
    - the moderation queue (get_unreviewed, filter_reports), which is
      driven by is_reviewed/is_active
    """

    def __init__(
        self,
        report_repository: ReportRepository,
        comment_records: CommentRecordService,
        profile_repository: UserProfileRepository,
    ) -> None:
        """Initialize report service.

        Args:
            report_repository: Report repository
            comment_records: Comment store contract, read-only here
            profile_repository: User profile repository for display names
        """
        self.report_repository = report_repository
        self.comment_records = comment_records
        self.profile_repository = profile_repository

    async def create_report(
        self,
        reporter_id: UserId,
        comment_id: CommentId,
        reason: str,
        description: Optional[str] = None,
    ) -> Report:
        """File a report against a comment.

        Args:
            reporter_id: Reporting user
            comment_id: Reported comment
            reason: Short reason label
            description: Optional free text

        Returns:
            The created report

        Raises:
            DuplicateReportError: If this user already reported the comment
        """
        with logfire.span(
            "report_service.create_report",
            reporter_id=str(reporter_id),
            comment_id=str(comment_id),
            reason=reason,
        ):
            report = Report(
                id=ReportId(uuid4()),
                comment_id=comment_id,
                reporter_id=reporter_id,
                reason=reason,
                description=description,
                created_at=datetime.now(),
            )

            try:
                saved = await self.report_repository.save(report)
            except IntegrityError as e:
                logfire.info(
                    "Report already exists",
                    reporter_id=str(reporter_id),
                    comment_id=str(comment_id),
                )
                raise DuplicateReportError(str(reporter_id), str(comment_id)) from e

            logfire.info(
                "Report created",
                report_id=str(saved.id),
                comment_id=str(comment_id),
            )
            return saved

    async def get_report(self, report_id: ReportId) -> Optional[Report]:
        return await self.report_repository.find_by_id(report_id)

    async def get_unreviewed(self) -> List[Report]:
        """Moderation queue, oldest first."""
        return await self.report_repository.find_unreviewed()

    async def review_report(self, report_id: ReportId, admin_response: str) -> bool:
        """Mark a report reviewed with the moderator's response.

        Returns:
            True on the first review, False if the report is unknown or
            was already reviewed
        """
        with logfire.span("report_service.review_report", report_id=str(report_id)):
            reviewed = await self.report_repository.mark_reviewed(
                report_id, admin_response, datetime.now()
            )
            if not reviewed:
                logfire.info("No unreviewed report matched", report_id=str(report_id))
            return reviewed

    async def deactivate_report(self, report_id: ReportId) -> bool:
        """Close a report.

        Returns:
            True on the first deactivation, False if the report is
            unknown or already inactive
        """
        with logfire.span(
            "report_service.deactivate_report", report_id=str(report_id)
        ):
            deactivated = await self.report_repository.deactivate(
                report_id, datetime.now()
            )
            if not deactivated:
                logfire.info("No active report matched", report_id=str(report_id))
            return deactivated

    async def get_reports_for_comment(self, comment_id: CommentId) -> List[Report]:
        return await self.report_repository.find_by_comment(comment_id)

    async def get_reported_comment_ids_for_user(
        self, user_id: Optional[UserId]
    ) -> set[CommentId]:
        """Comments this user personally reported.

        Anonymous viewers have reported nothing.
        """
        if user_id is None:
            return set()
        return set(await self.report_repository.find_comment_ids_by_reporter(user_id))

    async def get_reports_by_reporter(self, reporter_id: UserId) -> List[Report]:
        return await self.report_repository.find_by_reporter(reporter_id)

    async def filter_reports(self, criteria: ReportFilter) -> Page[Report]:
        """Run a paginated moderation query.

        A commenter_id criterion is resolved here into the IDs of that
        user's comments, so the report store never reads comments.
        """
        with logfire.span("report_service.filter_reports"):
            criteria = await self._resolve_commenter(criteria)
            return await self.report_repository.filter(criteria)

    async def get_report_with_details(
        self, report_id: ReportId
    ) -> Optional[ReportDetail]:
        report = await self.report_repository.find_by_id(report_id)
        if report is None:
            return None
        details = await self._with_details([report])
        return details[0]

    async def get_unreviewed_with_details(self) -> List[ReportDetail]:
        return await self._with_details(await self.report_repository.find_unreviewed())

    async def get_all_with_details(self) -> List[ReportDetail]:
        return await self._with_details(await self.report_repository.find_all())

    async def get_reports_for_comment_with_details(
        self, comment_id: CommentId
    ) -> List[ReportDetail]:
        return await self._with_details(
            await self.report_repository.find_by_comment(comment_id)
        )

    async def filter_reports_with_details(
        self, criteria: ReportFilter
    ) -> Page[ReportDetail]:
        page = await self.filter_reports(criteria)
        return Page[ReportDetail](
            items=await self._with_details(page.items),
            total=page.total,
            page=page.page,
            page_size=page.page_size,
        )

    async def get_reports_against_commenter(
        self, commenter_id: UserId
    ) -> List[ReportDetail]:
        """Reports filed on any comment written by commenter_id, newest first."""
        with logfire.span(
            "report_service.get_reports_against_commenter",
            commenter_id=str(commenter_id),
        ):
            comment_ids = await self.comment_records.get_ids_by_commenter(
                commenter_id
            )
            reports: List[Report] = []
            for comment_id in comment_ids:
                reports.extend(
                    await self.report_repository.find_by_comment(comment_id)
                )
            reports.sort(key=lambda r: r.created_at, reverse=True)
            return await self._with_details(reports)

    async def _resolve_commenter(self, criteria: ReportFilter) -> ReportFilter:
        if criteria.commenter_id is None:
            return criteria

        ids = frozenset(
            await self.comment_records.get_ids_by_commenter(criteria.commenter_id)
        )
        if criteria.comment_ids is not None:
            ids = ids & criteria.comment_ids
        return criteria.model_copy(update={"comment_ids": ids, "commenter_id": None})

    async def _with_details(self, reports: List[Report]) -> List[ReportDetail]:
        """Join reports with their comments and unmasked party names."""
        if not reports:
            return []

        comments: Dict[CommentId, Comment] = {
            c.id: c
            for c in await self.comment_records.get_many(
                {r.comment_id for r in reports}
            )
        }
        user_ids = {r.reporter_id for r in reports}
        user_ids.update(c.commenter_id for c in comments.values())
        profiles = await self.profile_repository.find_by_ids(user_ids)

        details = []
        for report in reports:
            comment = comments.get(report.comment_id)
            details.append(
                ReportDetail(
                    report=report,
                    comment=comment,
                    reporter_name=_full_name(profiles.get(report.reporter_id)),
                    commenter_name=(
                        _full_name(profiles.get(comment.commenter_id))
                        if comment
                        else None
                    ),
                )
            )
        return details


def _full_name(profile: Optional[UserProfile]) -> Optional[str]:
    if profile is None:
        return None
    return profile.full_name or None
