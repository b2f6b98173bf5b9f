"""Upvote use case."""

from pydantic import BaseModel, ConfigDict

from hackers.application.comments_session import CommentsSession
from hackers.application.usecase.base import BaseUseCase
from hackers.domain.error import NotFoundError
from hackers.domain.model import VotingState
from hackers.domain.value import CommentId, VotableType


class UpvoteRequest(BaseModel):
    """Upvote request."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    session: CommentsSession
    votable_type: VotableType
    votable_id: int
    raise_on_error: bool = False


class UpvoteResponse(BaseModel):
    """Upvote response."""

    votable_type: VotableType
    votable_id: int
    success: bool
    voting_state: VotingState


class UpvoteUseCase(BaseUseCase):
    """Use case for upvoting the open post or one of its comments."""

    async def execute(self, request: UpvoteRequest) -> UpvoteResponse:
        """Execute upvote flow.

        Args:
            request: Upvote request

        Returns:
            Upvote response with the reconciled voting state

        Raises:
            NotFoundError: If the post or comment is not the session's
            VoteError: Only when ``raise_on_error`` is set
        """
        session = request.session

        if request.votable_type == VotableType.POST:
            if request.votable_id != session.post_id:
                raise NotFoundError("Post", str(request.votable_id))
            state = await session.upvote_post(raise_on_error=request.raise_on_error)
        else:  # VotableType.COMMENT
            state = await session.upvote_comment(
                CommentId(request.votable_id),
                raise_on_error=request.raise_on_error,
            )

        return UpvoteResponse(
            votable_type=request.votable_type,
            votable_id=request.votable_id,
            success=state.is_upvoted and state.error is None,
            voting_state=state,
        )
