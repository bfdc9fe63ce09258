"""PostgreSQL implementation of Report repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import and_, desc, func, insert, select, true, update
from sqlalchemy.ext.asyncio import AsyncSession

from remark.domain.model import Page, Report
from remark.domain.repository import ReportRepository
from remark.domain.value import CommentId, ReportFilter, ReportId, UserId
from remark.persistence.mappers import report_to_dict, row_to_report
from remark.persistence.tables import comment_reports_table

reports = comment_reports_table


class PostgresReportRepository(ReportRepository):
    """PostgreSQL implementation of ReportRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch(self, stmt) -> List[Report]:
        result = await self.session.execute(stmt)
        return [row_to_report(row._asdict()) for row in result.fetchall()]

    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID."""
        stmt = select(reports).where(reports.c.id == report_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_report(row._asdict()) if row else None

    async def save(self, report: Report) -> Report:
        """Insert a report inside a savepoint."""
        stmt = insert(reports).values(**report_to_dict(report))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return report

    async def find_unreviewed(self) -> List[Report]:
        stmt = (
            select(reports)
            .where(reports.c.is_reviewed.is_(False))
            .order_by(reports.c.created_at)
        )
        return await self._fetch(stmt)

    async def find_all(self) -> List[Report]:
        return await self._fetch(select(reports).order_by(desc(reports.c.created_at)))

    async def find_by_comment(self, comment_id: CommentId) -> List[Report]:
        stmt = (
            select(reports)
            .where(reports.c.comment_id == comment_id)
            .order_by(reports.c.created_at)
        )
        return await self._fetch(stmt)

    async def find_by_reporter(self, reporter_id: UserId) -> List[Report]:
        stmt = (
            select(reports)
            .where(reports.c.reporter_id == reporter_id)
            .order_by(desc(reports.c.created_at))
        )
        return await self._fetch(stmt)

    async def find_comment_ids_by_reporter(
        self, reporter_id: UserId
    ) -> List[CommentId]:
        stmt = select(reports.c.comment_id).where(reports.c.reporter_id == reporter_id)
        result = await self.session.execute(stmt)
        return [CommentId(cid) for cid in result.scalars().all()]

    async def mark_reviewed(
        self, report_id: ReportId, admin_response: str, reviewed_at: datetime
    ) -> bool:
        """Mark an unreviewed report as reviewed."""
        stmt = (
            update(reports)
            .where(reports.c.id == report_id)
            .where(reports.c.is_reviewed.is_(False))
            .values(
                is_reviewed=True,
                reviewed_at=reviewed_at,
                admin_response=admin_response,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def deactivate(self, report_id: ReportId, deactivated_at: datetime) -> bool:
        """Close an active report."""
        stmt = (
            update(reports)
            .where(reports.c.id == report_id)
            .where(reports.c.is_active.is_(True))
            .values(is_active=False, deactivated_at=deactivated_at)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def filter(self, criteria: ReportFilter) -> Page[Report]:
        """Run a moderation query with pagination."""
        conditions = [true()]

        if criteria.reporter_id is not None:
            conditions.append(reports.c.reporter_id == criteria.reporter_id)
        if criteria.comment_id is not None:
            conditions.append(reports.c.comment_id == criteria.comment_id)
        if criteria.comment_ids is not None:
            # An empty set matches nothing
            conditions.append(reports.c.comment_id.in_(list(criteria.comment_ids)))
        if criteria.reason:
            conditions.append(reports.c.reason.icontains(criteria.reason, autoescape=True))
        if criteria.is_reviewed is not None:
            conditions.append(reports.c.is_reviewed.is_(criteria.is_reviewed))
        if criteria.is_active is not None:
            conditions.append(reports.c.is_active.is_(criteria.is_active))
        if criteria.start_date is not None:
            conditions.append(reports.c.created_at >= criteria.start_date)
        if criteria.end_date is not None:
            conditions.append(reports.c.created_at <= criteria.end_date)
        if criteria.has_admin_response is True:
            conditions.append(reports.c.admin_response.is_not(None))
        elif criteria.has_admin_response is False:
            conditions.append(reports.c.admin_response.is_(None))
        if criteria.admin_response:
            conditions.append(
                reports.c.admin_response.icontains(
                    criteria.admin_response, autoescape=True
                )
            )

        where = and_(*conditions)

        count_stmt = select(func.count()).select_from(reports).where(where)
        total = (await self.session.execute(count_stmt)).scalar() or 0

        stmt = (
            select(reports)
            .where(where)
            .order_by(desc(reports.c.created_at))
            .offset(criteria.offset)
            .limit(criteria.page_size)
        )

        return Page[Report](
            items=await self._fetch(stmt),
            total=total,
            page=criteria.page,
            page_size=criteria.page_size,
        )
