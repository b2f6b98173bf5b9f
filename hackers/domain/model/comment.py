"""Comment entity.

Comments arrive as a flat list in page order, each annotated with its
reply depth. Parent/child relationships are implied by depth and order;
no parent id is stored.
"""

from pydantic import Field

from hackers.domain.model.common import DomainModel
from hackers.domain.value import CommentId, CommentVisibility, VoteLinks


class Comment(DomainModel):
    """Comment entity.

    Threading is implicit:
    - depth: 0 for top-level comments, +1 for each reply level
    - descendants: the contiguous run of following comments with a
      greater depth
    """

    id: CommentId
    depth: int = Field(default=0, ge=0)
    author: str = ""
    age: str = ""
    text: str = ""
    visibility: CommentVisibility = CommentVisibility.VISIBLE
    vote_links: VoteLinks | None = None
    upvoted: bool = False

    @property
    def is_shown(self) -> bool:
        """Whether the comment appears in the visible projection."""
        return self.visibility != CommentVisibility.HIDDEN
