"""Load comments use case."""

import logfire
from pydantic import BaseModel, ConfigDict

from hackers.application.comments_session import CommentsSession
from hackers.application.usecase.base import BaseUseCase
from hackers.domain.repository import PostRepository
from hackers.domain.service import VotingCoordinator
from hackers.domain.value import PostId


class LoadCommentsRequest(BaseModel):
    """Load comments request."""

    post_id: int


class LoadCommentsResponse(BaseModel):
    """Load comments response."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    session: CommentsSession
    total: int


class LoadCommentsUseCase(BaseUseCase):
    """Use case for opening (or reloading) a post's discussion.

    Each call builds a fresh session; reloads replace the tree wholesale.
    """

    def __init__(
        self,
        post_repository: PostRepository,
        voting_coordinator: VotingCoordinator,
    ) -> None:
        """Initialize load comments use case.

        Args:
            post_repository: Source of posts and comments
            voting_coordinator: Voting coordinator shared by the screen
        """
        self.post_repository = post_repository
        self.voting_coordinator = voting_coordinator

    async def execute(self, request: LoadCommentsRequest) -> LoadCommentsResponse:
        """Execute load comments flow.

        Args:
            request: Load comments request

        Returns:
            A new session for the discussion

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span("load_comments", post_id=request.post_id):
            post = await self.post_repository.get_post(PostId(request.post_id))
            session = CommentsSession(post, self.voting_coordinator)
            return LoadCommentsResponse(session=session, total=len(session.tree))
