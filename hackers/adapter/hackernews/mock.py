"""In-memory Hacker News client for testing."""

from hackers.domain.error import AuthenticationError, NotFoundError, VoteError
from hackers.domain.model import Post, User, Votable
from hackers.domain.repository import PostRepository
from hackers.domain.service import AuthenticationService, VoteSubmitter
from hackers.domain.value import AuthenticationFailure, PostId, VoteFailureReason


class MockHackerNewsClient(PostRepository, VoteSubmitter, AuthenticationService):
    """Mock Hacker News client.

    Serves posts added with ``add_post``, fails votes with
    ``vote_failure`` when set, and records every call for assertions.
    """

    def __init__(
        self,
        username: str = "mockuser",
        password: str = "hunter2",
    ) -> None:
        self.posts: dict[PostId, Post] = {}
        self.vote_failure: VoteFailureReason | None = None
        self.submitted_votes: list[int] = []
        self.logout_calls = 0

        self._credentials = (username, password)
        self._username: str | None = None

    def add_post(self, post: Post) -> Post:
        self.posts[post.id] = post
        return post

    async def get_post(self, post_id: PostId) -> Post:
        post = self.posts.get(post_id)
        if post is None:
            raise NotFoundError("Post", str(post_id))
        return post

    async def submit_upvote(self, item: Votable) -> None:
        self.submitted_votes.append(item.id)
        if self.vote_failure is not None:
            raise VoteError(self.vote_failure)

    async def login(self, username: str, password: str) -> User:
        if (username, password) != self._credentials:
            raise AuthenticationError(AuthenticationFailure.BAD_CREDENTIALS)
        self._username = username
        return User(username=username)

    async def logout(self) -> None:
        self.logout_calls += 1
        self._username = None

    async def is_authenticated(self) -> bool:
        return self._username is not None

    async def current_user(self) -> User | None:
        return User(username=self._username) if self._username else None
