"""Test configuration and fixtures."""

from hackers.domain.model import Comment, Post
from hackers.domain.value import CommentId, CommentVisibility, PostId, VoteLinks


def make_comments(*shape: tuple[int, int]) -> list[Comment]:
    """Helper function to build a flat comment list.

    Args:
        shape: (id, depth) pairs in page order

    Returns:
        Visible, votable comments
    """
    return [
        Comment(
            id=CommentId(comment_id),
            depth=depth,
            author=f"user{comment_id}",
            age="1 hour ago",
            text=f"Comment {comment_id}",
            visibility=CommentVisibility.VISIBLE,
            vote_links=VoteLinks(upvote=f"vote?id={comment_id}&how=up&auth=abc"),
        )
        for comment_id, depth in shape
    ]


def make_post(
    post_id: int = 100,
    score: int = 10,
    upvoted: bool = False,
    comments: list[Comment] | None = None,
) -> Post:
    """Helper function to build a votable post."""
    return Post(
        id=PostId(post_id),
        title="Test Post",
        url="https://example.com/article",
        age="2 hours ago",
        author="poster",
        score=score,
        comments_count=len(comments or []),
        upvoted=upvoted,
        vote_links=VoteLinks(upvote=f"vote?id={post_id}&how=up&auth=abc"),
        comments=comments or [],
    )


def ids(comments: list[Comment]) -> list[int]:
    """Ids of a comment list, for compact assertions."""
    return [comment.id for comment in comments]
