"""Vote use cases."""

from .get_vote_status import (
    GetVoteStatusRequest,
    GetVoteStatusResponse,
    GetVoteStatusUseCase,
)
from .toggle_vote import ToggleVoteRequest, ToggleVoteResponse, ToggleVoteUseCase

__all__ = [
    "GetVoteStatusRequest",
    "GetVoteStatusResponse",
    "GetVoteStatusUseCase",
    "ToggleVoteRequest",
    "ToggleVoteResponse",
    "ToggleVoteUseCase",
]
