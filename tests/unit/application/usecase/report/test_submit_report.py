"""Unit tests for SubmitReportUseCase and ModerateReportUseCase."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from remark.application.usecase.report import (
    ModerateReportRequest,
    ModerateReportUseCase,
    SubmitReportRequest,
    SubmitReportUseCase,
)
from remark.domain.error import ConflictError, DuplicateReportError, NotFoundError
from remark.domain.repository import CommentRepository
from tests.conftest import new_content, new_user, seed_comment
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _submit(unit_env, reporter_id=None, comment_id=None):
    use_case = await unit_env.get(SubmitReportUseCase)
    if comment_id is None:
        comment_repo = await unit_env.get(CommentRepository)
        comment_id = (await seed_comment(comment_repo, new_content())).id
    return await use_case.execute(
        SubmitReportRequest(
            comment_id=str(comment_id),
            reporter_id=str(reporter_id or new_user()),
            reason="spam",
        )
    )


class TestSubmitReportUseCase:
    """Tests for SubmitReportUseCase."""

    @pytest.mark.asyncio
    async def test_submit_report(self, unit_env):
        report = await _submit(unit_env)

        assert report.is_active is True
        assert report.is_reviewed is False
        assert report.reason == "spam"

    @pytest.mark.asyncio
    async def test_duplicate_submit_conflicts(self, unit_env):
        comment_repo = await unit_env.get(CommentRepository)
        comment = await seed_comment(comment_repo, new_content())
        reporter = new_user()
        await _submit(unit_env, reporter, comment.id)

        with pytest.raises(DuplicateReportError):
            await _submit(unit_env, reporter, comment.id)

    @pytest.mark.asyncio
    async def test_report_missing_comment(self, unit_env):
        with pytest.raises(NotFoundError):
            await _submit(unit_env, comment_id=uuid4())


class TestModerateReportUseCase:
    """Tests for ModerateReportUseCase."""

    @pytest.mark.asyncio
    async def test_review_twice_conflicts(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ModerateReportUseCase)
        report = await _submit(unit_env)
        request = ModerateReportRequest(
            report_id=report.report_id, action="review", admin_response="Warned"
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.updated is True
        with pytest.raises(ConflictError):
            await use_case.execute(request)

    @pytest.mark.asyncio
    async def test_deactivate_twice_conflicts(self, unit_env):
        use_case = await unit_env.get(ModerateReportUseCase)
        report = await _submit(unit_env)
        request = ModerateReportRequest(report_id=report.report_id, action="deactivate")

        await use_case.execute(request)

        with pytest.raises(ConflictError):
            await use_case.execute(request)

    @pytest.mark.asyncio
    async def test_unknown_report(self, unit_env):
        use_case = await unit_env.get(ModerateReportUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                ModerateReportRequest(report_id=str(uuid4()), action="deactivate")
            )

    def test_review_requires_response(self):
        with pytest.raises(ValidationError):
            ModerateReportRequest(
                report_id=str(uuid4()), action="review", admin_response="  "
            )
