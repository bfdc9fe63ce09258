"""Get comments use case."""

from collections.abc import Sequence
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from remark.config import CommentSettings
from remark.domain.error import BusinessRuleViolationError, NotFoundError
from remark.domain.model import Comment
from remark.domain.service import CommentService, ProfileService, mask_name
from remark.domain.value import CommentId, ContentId, UserId


class CommentItem(BaseModel):
    """Comment item in response.

    commenter_name is masked; end users never see full names.
    """

    comment_id: str
    content_id: str
    commenter_id: str
    commenter_name: str
    text: str
    parent_id: str | None
    like_count: int
    dislike_count: int
    reply_count: int | None
    created_at: datetime
    edited_at: datetime | None
    is_deleted: bool

    @classmethod
    def from_comment(cls, comment: Comment, commenter_name: str) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            content_id=str(comment.content_id),
            commenter_id=str(comment.commenter_id),
            commenter_name=commenter_name,
            text=comment.text,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            like_count=comment.like_count,
            dislike_count=comment.dislike_count,
            reply_count=comment.reply_count,
            created_at=comment.created_at,
            edited_at=comment.edited_at,
            is_deleted=comment.is_deleted,
        )


async def build_comment_items(
    comments: Sequence[Comment],
    profile_service: ProfileService,
    settings: CommentSettings,
) -> list[CommentItem]:
    """Render comments with masked commenter names (one profile batch)."""
    names = await profile_service.get_full_names({c.commenter_id for c in comments})
    return [
        CommentItem.from_comment(
            comment,
            mask_name(names.get(comment.commenter_id), settings.masked_name_placeholder),
        )
        for comment in comments
    ]


class GetCommentsRequest(BaseModel):
    """Get comments request.

    Without parent_id the content's top-level comments are listed,
    with it the replies to that comment.
    """

    content_id: str  # UUID string
    parent_id: str | None = None
    viewer_id: str | None = None  # Anonymous viewers hide nothing


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    content_id: str
    parent_id: str | None
    comments: list[CommentItem]
    total: int


class GetCommentsUseCase:
    """Use case for reading comments as an end user."""

    def __init__(
        self,
        comment_service: CommentService,
        profile_service: ProfileService,
        settings: CommentSettings,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            profile_service: Profile service for commenter names
            settings: Comment settings (mask placeholder)
        """
        self.comment_service = comment_service
        self.profile_service = profile_service
        self.settings = settings

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """List the comments the viewer may see, oldest first.

        Args:
            request: Content, optional parent and optional viewer

        Returns:
            Visible comments with masked commenter names

        Raises:
            BusinessRuleViolationError: If the parent belongs to another
                content item
        """
        viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None

        content_id = ContentId(UUID(request.content_id))
        if request.parent_id:
            parent_id = CommentId(UUID(request.parent_id))
            parent = await self.comment_service.get(parent_id)
            if parent is not None and parent.content_id != content_id:
                raise BusinessRuleViolationError(
                    "Parent comment belongs to another content item"
                )
            comments = await self.comment_service.list_replies(parent_id, viewer_id)
        else:
            comments = await self.comment_service.list_top_level(content_id, viewer_id)

        items = await build_comment_items(comments, self.profile_service, self.settings)
        return GetCommentsResponse(
            content_id=request.content_id,
            parent_id=request.parent_id,
            comments=items,
            total=len(items),
        )

    async def get_comment(self, comment_id: str) -> CommentItem:
        """Get a single live comment.

        Raises:
            NotFoundError: If the comment does not exist or is deleted
        """
        comment = await self.comment_service.get(CommentId(UUID(comment_id)))
        if comment is None:
            raise NotFoundError("Comment", comment_id)
        items = await build_comment_items([comment], self.profile_service, self.settings)
        return items[0]

    async def count(self, content_id: str) -> int:
        """Count live comments of a content item."""
        return await self.comment_service.count(ContentId(UUID(content_id)))
