"""Unit tests for UpdateCommentUseCase and DeleteCommentUseCase."""

import pytest

from remark.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
    RemoveContentCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from remark.domain.error import NotFoundError
from remark.domain.service import CommentService
from tests.conftest import new_content, new_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateCommentUseCase:
    """Tests for UpdateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_update_own_comment(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        use_case = UpdateCommentUseCase(comment_service=comment_service)
        author = new_user()
        comment = await comment_service.create(new_content(), author, "Original")

        # Act
        response = await use_case.execute(
            UpdateCommentRequest(
                comment_id=str(comment.id), commenter_id=str(author), text="Edited"
            )
        )

        # Assert
        assert response.updated is True
        assert (await comment_service.get(comment.id)).text == "Edited"

    @pytest.mark.asyncio
    async def test_update_someone_elses_comment_is_not_found(self, unit_env):
        """Wrong author looks exactly like a missing comment."""
        comment_service = await unit_env.get(CommentService)
        use_case = await unit_env.get(UpdateCommentUseCase)
        comment = await comment_service.create(new_content(), new_user(), "Original")

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdateCommentRequest(
                    comment_id=str(comment.id),
                    commenter_id=str(new_user()),
                    text="Hijacked",
                )
            )

    @pytest.mark.asyncio
    async def test_malformed_id_raises_value_error(self, unit_env):
        use_case = await unit_env.get(UpdateCommentUseCase)

        with pytest.raises(ValueError):
            await use_case.execute(
                UpdateCommentRequest(
                    comment_id="not-a-uuid", commenter_id=str(new_user()), text="x"
                )
            )


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_delete_twice(self, unit_env):
        """The second delete of the same comment is not found."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        use_case = await unit_env.get(DeleteCommentUseCase)
        author = new_user()
        comment = await comment_service.create(new_content(), author, "Oops")
        request = DeleteCommentRequest(
            comment_id=str(comment.id), commenter_id=str(author)
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.deleted is True
        with pytest.raises(NotFoundError):
            await use_case.execute(request)


class TestRemoveContentCommentsUseCase:
    """Tests for RemoveContentCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_remove_content_comments(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        use_case = await unit_env.get(RemoveContentCommentsUseCase)
        content_id = new_content()
        await comment_service.create(content_id, new_user(), "One")
        await comment_service.create(content_id, new_user(), "Two")

        response = await use_case.execute(str(content_id))
        empty = await use_case.execute(str(content_id))

        assert response.removed is True
        assert empty.removed is False
        assert await comment_service.count(content_id) == 0
