"""Domain services."""

from .auth_service import AuthenticationService
from .base import Service
from .comment_tree import CommentTree, ToggleResult
from .voting import Navigator, VoteSubmitter, VotingCoordinator, votable_type

__all__ = [
    "AuthenticationService",
    "CommentTree",
    "Navigator",
    "Service",
    "ToggleResult",
    "VoteSubmitter",
    "VotingCoordinator",
    "votable_type",
]
