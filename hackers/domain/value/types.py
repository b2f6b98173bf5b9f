"""Domain value objects for the Hackers client core."""

from enum import Enum

from hackers.domain.value.common import ValueObject


class CommentVisibility(str, Enum):
    """Visibility of a single comment in a discussion.

    - VISIBLE: comment and its text are shown
    - COLLAPSED: comment is shown compactly and its replies are hidden
    - HIDDEN: comment is suppressed because an ancestor is collapsed
    """

    VISIBLE = "visible"
    COLLAPSED = "collapsed"
    HIDDEN = "hidden"


class VotableType(str, Enum):
    """Type of item that can be voted on."""

    POST = "post"
    COMMENT = "comment"


class VoteFailureReason(str, Enum):
    """Why a vote submission was rejected."""

    UNAUTHENTICATED = "unauthenticated"
    NETWORK = "network"
    SCRAPER = "scraper"
    UNKNOWN = "unknown"


class AuthenticationFailure(str, Enum):
    """Why a login attempt failed."""

    BAD_CREDENTIALS = "bad_credentials"
    SERVER_UNREACHABLE = "server_unreachable"
    UNKNOWN = "unknown"


class VoteLinks(ValueObject):
    """Vote capability tokens scraped from an item.

    Hacker News only renders an upvote link when the current session may
    vote on the item. The links are relative paths such as
    ``vote?id=123&how=up&auth=...``.
    """

    upvote: str | None = None
    unvote: str | None = None

    @property
    def can_upvote(self) -> bool:
        """Whether an upvote is currently permitted."""
        return self.upvote is not None
