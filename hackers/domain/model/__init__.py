"""Domain models."""

from .comment import Comment
from .post import Post
from .user import User
from .voting import Votable, VotingState

__all__ = [
    "Comment",
    "Post",
    "User",
    "Votable",
    "VotingState",
]
