"""Domain value objects for Hackers."""

from hackers.domain.value.identifiers import CommentId, ItemId, PostId
from hackers.domain.value.types import (
    AuthenticationFailure,
    CommentVisibility,
    VotableType,
    VoteFailureReason,
    VoteLinks,
)

__all__ = [
    # Identifiers
    "ItemId",
    "PostId",
    "CommentId",
    # Types
    "AuthenticationFailure",
    "CommentVisibility",
    "VotableType",
    "VoteFailureReason",
    "VoteLinks",
]
