"""Voting state snapshot.

Derived on demand by the voting coordinator, never stored.
"""

from hackers.domain.error import VoteError
from hackers.domain.model.comment import Comment
from hackers.domain.model.common import DomainModel
from hackers.domain.model.post import Post

# Anything that can be upvoted. Posts are scored, comments are not.
Votable = Post | Comment


class VotingState(DomainModel):
    """What the presentation layer needs to render a vote affordance."""

    is_upvoted: bool
    score: int | None = None
    can_vote: bool
    is_voting: bool = False
    error: VoteError | None = None
