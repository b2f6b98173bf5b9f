"""Comment use cases."""

from .load_comments import LoadCommentsRequest, LoadCommentsResponse, LoadCommentsUseCase
from .toggle_comment import (
    ToggleCommentRequest,
    ToggleCommentResponse,
    ToggleCommentUseCase,
)

__all__ = [
    "LoadCommentsRequest",
    "LoadCommentsResponse",
    "LoadCommentsUseCase",
    "ToggleCommentRequest",
    "ToggleCommentResponse",
    "ToggleCommentUseCase",
]
