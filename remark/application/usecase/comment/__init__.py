"""Comment use cases."""

from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    RemoveContentCommentsResponse,
    RemoveContentCommentsUseCase,
)
from .filter_comments import (
    FilterCommentsRequest,
    FilterCommentsResponse,
    FilterCommentsUseCase,
)
from .get_comments import (
    CommentItem,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from .maintain_comments import (
    PurgeCommentResponse,
    PurgeCommentUseCase,
    ReconcileCountersResponse,
    ReconcileCountersUseCase,
)
from .update_comment import (
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)

__all__ = [
    "CommentItem",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "FilterCommentsRequest",
    "FilterCommentsResponse",
    "FilterCommentsUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "PurgeCommentResponse",
    "PurgeCommentUseCase",
    "ReconcileCountersResponse",
    "ReconcileCountersUseCase",
    "RemoveContentCommentsResponse",
    "RemoveContentCommentsUseCase",
    "UpdateCommentRequest",
    "UpdateCommentResponse",
    "UpdateCommentUseCase",
]
