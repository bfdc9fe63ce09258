"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from pydantic import BaseModel, Field

from remark.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    FilterCommentsRequest,
    FilterCommentsResponse,
    FilterCommentsUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    RemoveContentCommentsResponse,
    RemoveContentCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from remark.interface.api.identity import CurrentUser, OptionalUser

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content_id: str
    text: str = Field(min_length=1, max_length=10000)
    parent_id: str | None = None  # Parent comment ID for replies


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    text: str = Field(min_length=1, max_length=10000)


class CountResponse(BaseModel):
    """Comment count response."""

    content_id: str
    count: int


@router.post("", response_model=CommentItem, status_code=status.HTTP_201_CREATED)
async def create_comment(
    request: CreateCommentAPIRequest,
    user_id: CurrentUser,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CommentItem:
    """Comment on a content item or reply to a top-level comment.

    Requires authentication. Replying to a reply, to a deleted comment, or
    across content items is rejected.
    """
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            content_id=request.content_id,
            commenter_id=user_id,
            text=request.text,
            parent_id=request.parent_id,
        )
    )


@router.get("", response_model=GetCommentsResponse)
async def list_comments(
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    viewer_id: OptionalUser,
    content_id: str = Query(...),
    parent_id: str | None = Query(default=None),
) -> GetCommentsResponse:
    """List top-level comments of a content item, or replies to parent_id.

    Comments the caller reported, and replies under them, are left out.
    """
    return await get_comments_use_case.execute(
        GetCommentsRequest(
            content_id=content_id, parent_id=parent_id, viewer_id=viewer_id
        )
    )


@router.get("/filter", response_model=FilterCommentsResponse)
async def filter_comments(
    filter_comments_use_case: FromDishka[FilterCommentsUseCase],
    viewer_id: OptionalUser,
    content_id: str = Query(...),
    parent_id: str | None = Query(default=None),
    is_deleted: bool | None = Query(default=False),
    only_mine: bool = Query(default=False),
    search: str | None = Query(default=None),
    page: int = Query(default=1, ge=1),
    page_size: int = Query(default=10, ge=1),
) -> FilterCommentsResponse:
    """Compound, paginated comment query.

    only_mine needs an authenticated caller.
    """
    return await filter_comments_use_case.execute(
        FilterCommentsRequest(
            content_id=content_id,
            user_id=viewer_id,
            parent_id=parent_id,
            is_deleted=is_deleted,
            only_mine=only_mine,
            search=search,
            page=page,
            page_size=page_size,
        )
    )


@router.get("/count", response_model=CountResponse)
async def count_comments(
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    content_id: str = Query(...),
) -> CountResponse:
    """Count live comments of a content item."""
    count = await get_comments_use_case.count(content_id)
    return CountResponse(content_id=content_id, count=count)


@router.delete("/content/{content_id}", response_model=RemoveContentCommentsResponse)
async def remove_content_comments(
    content_id: str,
    remove_use_case: FromDishka[RemoveContentCommentsUseCase],
) -> RemoveContentCommentsResponse:
    """Soft-delete every comment of content removed upstream."""
    return await remove_use_case.execute(content_id)


@router.get("/{comment_id}", response_model=CommentItem)
async def get_comment(
    comment_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> CommentItem:
    """Get a single live comment."""
    return await get_comments_use_case.get_comment(comment_id)


@router.patch("/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    user_id: CurrentUser,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
) -> UpdateCommentResponse:
    """Edit a comment's text. Only the author can edit a live comment."""
    return await update_comment_use_case.execute(
        UpdateCommentRequest(
            comment_id=comment_id, commenter_id=user_id, text=request.text
        )
    )


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    user_id: CurrentUser,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> DeleteCommentResponse:
    """Soft-delete one's own comment (and its replies, if top-level)."""
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, commenter_id=user_id)
    )
