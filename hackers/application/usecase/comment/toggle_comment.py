"""Toggle comment use case."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

from hackers.application.comments_session import CommentsSession
from hackers.application.usecase.base import BaseUseCase
from hackers.domain.value import CommentId, CommentVisibility


class ToggleCommentRequest(BaseModel):
    """Toggle comment request.

    Actions:
    - toggle: collapse or expand the comment's replies
    - reveal: expand whatever hides the comment
    - collapse_thread: collapse the top-level comment of its thread
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    session: CommentsSession
    comment_id: int
    action: Literal["toggle", "reveal", "collapse_thread"] = "toggle"


class ToggleCommentResponse(BaseModel):
    """Toggle comment response."""

    changed: bool
    affected_indices: list[int] = []
    new_state: CommentVisibility | None = None
    visible_comment_ids: list[int]


class ToggleCommentUseCase(BaseUseCase):
    """Use case for changing which comments of a discussion are shown."""

    async def execute(self, request: ToggleCommentRequest) -> ToggleCommentResponse:
        """Execute toggle flow.

        Raises:
            NotFoundError: If the comment is not in the discussion
            CommentHiddenError: If toggling a hidden comment
        """
        session = request.session
        comment_id = CommentId(request.comment_id)

        if request.action == "reveal":
            changed = session.tree.reveal(comment_id)
            return self._response(session, changed=changed)

        if request.action == "collapse_thread":
            root = session.tree.collapse_thread(comment_id)
            return self._response(
                session,
                changed=root is not None,
                new_state=root.visibility if root else None,
            )

        result = session.toggle(comment_id)
        return self._response(
            session,
            changed=True,
            affected_indices=result.affected_indices,
            new_state=result.new_state,
        )

    def _response(
        self,
        session: CommentsSession,
        changed: bool,
        affected_indices: list[int] | None = None,
        new_state: CommentVisibility | None = None,
    ) -> ToggleCommentResponse:
        return ToggleCommentResponse(
            changed=changed,
            affected_indices=affected_indices or [],
            new_state=new_state,
            visible_comment_ids=[c.id for c in session.visible_comments()],
        )
