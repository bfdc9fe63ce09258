"""Filter comments use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from remark.config import CommentSettings
from remark.domain.service import CommentService, ProfileService
from remark.domain.value import CommentFilter, CommentId, ContentId, UserId

from .get_comments import CommentItem, build_comment_items


class FilterCommentsRequest(BaseModel):
    """Filter comments request."""

    content_id: str
    user_id: str | None = None  # Viewer; also the author for only_mine
    parent_id: str | None = None  # None selects top-level comments
    is_deleted: bool | None = False
    only_mine: bool = False
    search: str | None = None
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1)


class FilterCommentsResponse(BaseModel):
    """Filter comments response."""

    items: list[CommentItem]
    total: int
    page: int
    page_size: int
    total_pages: int


class FilterCommentsUseCase:
    """Use case for the compound, paginated comment query."""

    def __init__(
        self,
        comment_service: CommentService,
        profile_service: ProfileService,
        settings: CommentSettings,
    ) -> None:
        self.comment_service = comment_service
        self.profile_service = profile_service
        self.settings = settings

    async def execute(self, request: FilterCommentsRequest) -> FilterCommentsResponse:
        """Execute filter flow.

        Raises:
            ValueError: If only_mine is set without a user, or page_size
                exceeds the configured maximum
        """
        if request.page_size > self.settings.max_page_size:
            raise ValueError(
                f"page_size must be at most {self.settings.max_page_size}"
            )

        criteria = CommentFilter(
            content_id=ContentId(UUID(request.content_id)),
            user_id=UserId(UUID(request.user_id)) if request.user_id else None,
            parent_id=CommentId(UUID(request.parent_id)) if request.parent_id else None,
            is_deleted=request.is_deleted,
            only_mine=request.only_mine,
            search=request.search,
            page=request.page,
            page_size=request.page_size,
        )
        page = await self.comment_service.filter(criteria)

        return FilterCommentsResponse(
            items=await build_comment_items(
                page.items, self.profile_service, self.settings
            ),
            total=page.total,
            page=page.page,
            page_size=page.page_size,
            total_pages=page.total_pages,
        )
