"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from remark.config import CommentSettings
from remark.domain.service import CommentService, ProfileService
from remark.domain.value import CommentId, ContentId, UserId

from .get_comments import CommentItem, build_comment_items


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    content_id: str  # UUID string
    commenter_id: str  # User ID from the identity header
    text: str
    parent_id: str | None = None  # Top-level comment being replied to


class CreateCommentUseCase:
    """Use case for commenting on content or replying to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        profile_service: ProfileService,
        settings: CommentSettings,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            profile_service: Profile service for the commenter's name
            settings: Comment settings
        """
        self.comment_service = comment_service
        self.profile_service = profile_service
        self.settings = settings

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        The comment service checks the parent and bumps its reply count.

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            NotFoundError: If the parent is missing or deleted
            BusinessRuleViolationError: If the parent is a reply or belongs
                to other content
        """
        comment = await self.comment_service.create(
            content_id=ContentId(UUID(request.content_id)),
            commenter_id=UserId(UUID(request.commenter_id)),
            text=request.text,
            parent_id=CommentId(UUID(request.parent_id)) if request.parent_id else None,
        )
        items = await build_comment_items([comment], self.profile_service, self.settings)
        return items[0]
