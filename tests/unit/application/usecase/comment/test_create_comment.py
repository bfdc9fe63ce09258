"""Unit tests for CreateCommentUseCase."""

from uuid import UUID

import pytest

from remark.application.usecase.comment.create_comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from remark.config import CommentSettings
from remark.domain.error import BusinessRuleViolationError
from remark.domain.repository import CommentRepository, UserProfileRepository
from remark.domain.service import CommentService, ProfileService
from remark.domain.value import CommentId
from tests.conftest import new_content, new_user, seed_profile
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_comment_returns_masked_name(self, unit_env):
        """The author's own name comes back masked like everyone else's."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        profile_repo = await unit_env.get(UserProfileRepository)
        author = new_user()
        await seed_profile(profile_repo, author, "Ada", "Lovelace")

        request = CreateCommentRequest(
            content_id=str(new_content()),
            commenter_id=str(author),
            text="Test comment",
        )

        # Act
        result = await use_case.execute(request)

        # Assert
        assert result.commenter_name == "A** L*******"
        assert result.commenter_id == str(author)
        assert result.reply_count == 0
        assert result.parent_id is None
        assert result.is_deleted is False

    @pytest.mark.asyncio
    async def test_reply_increments_parent_count(self, unit_env):
        """Replying should bump the parent's reply count."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        profile_service = await unit_env.get(ProfileService)
        comment_repo = await unit_env.get(CommentRepository)

        use_case = CreateCommentUseCase(
            comment_service=comment_service,
            profile_service=profile_service,
            settings=CommentSettings(masked_name_placeholder="Anonymous"),
        )

        content_id = str(new_content())
        parent = await use_case.execute(
            CreateCommentRequest(
                content_id=content_id, commenter_id=str(new_user()), text="Parent"
            )
        )

        # Act
        reply = await use_case.execute(
            CreateCommentRequest(
                content_id=content_id,
                commenter_id=str(new_user()),
                text="Reply",
                parent_id=parent.comment_id,
            )
        )

        # Assert
        assert reply.parent_id == parent.comment_id
        assert reply.reply_count is None
        assert reply.commenter_name == "Anonymous"  # No profile
        stored = await comment_repo.find_by_id(CommentId(UUID(parent.comment_id)))
        assert stored.reply_count == 1

    @pytest.mark.asyncio
    async def test_nested_reply_rejected(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        content_id = str(new_content())
        parent = await use_case.execute(
            CreateCommentRequest(
                content_id=content_id, commenter_id=str(new_user()), text="Parent"
            )
        )
        reply = await use_case.execute(
            CreateCommentRequest(
                content_id=content_id,
                commenter_id=str(new_user()),
                text="Reply",
                parent_id=parent.comment_id,
            )
        )

        with pytest.raises(BusinessRuleViolationError):
            await use_case.execute(
                CreateCommentRequest(
                    content_id=content_id,
                    commenter_id=str(new_user()),
                    text="Nested",
                    parent_id=reply.comment_id,
                )
            )
