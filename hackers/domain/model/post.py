"""Post entity."""

from pydantic import Field

from hackers.domain.model.comment import Comment
from hackers.domain.model.common import DomainModel
from hackers.domain.value import PostId, VoteLinks


class Post(DomainModel):
    """Post entity.

    A story, Ask HN or job listing. Unlike comments, posts carry a
    visible score which changes when they are upvoted.
    """

    id: PostId
    title: str
    url: str
    age: str = ""
    author: str = ""
    score: int = Field(default=0, ge=0)
    comments_count: int = Field(default=0, ge=0)
    upvoted: bool = False
    vote_links: VoteLinks | None = None
    text: str | None = None
    comments: list[Comment] = Field(default_factory=list)
