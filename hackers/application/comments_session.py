"""State of one open discussion screen."""

from hackers.domain.model import Comment, Post, Votable, VotingState
from hackers.domain.service import CommentTree, ToggleResult, VotingCoordinator
from hackers.domain.value import CommentId, CommentVisibility, ItemId


class CommentsSession:
    """A post, its comment tree and the voting coordinator of the screen.

    The tree owns the comments; ``post`` is kept without them. Vote
    results are written back here once the coordinator has reconciled
    them, so the tree and the post always hold the authoritative state.
    """

    def __init__(self, post: Post, voting_coordinator: VotingCoordinator) -> None:
        self.post = post.model_copy(update={"comments": []})
        self.tree = CommentTree(post.comments)
        self.voting_coordinator = voting_coordinator

    @property
    def post_id(self) -> int:
        """Hacker News id of the open post."""
        return self.post.id

    def visible_comments(self) -> list[Comment]:
        """Comments to render, in page order."""
        return self.tree.visible_comments()

    def toggle(self, comment_id: CommentId) -> ToggleResult:
        """Collapse or expand a comment's replies.

        Raises:
            NotFoundError: If the comment is not in the discussion
            CommentHiddenError: If the comment is hidden by a collapsed
                ancestor
        """
        return self.tree.toggle_children_visibility(comment_id)

    def collapse(self, comment_ids: list[CommentId]) -> list[CommentId]:
        """Collapse several comments in order.

        Comments that are already collapsed, or hidden by an earlier
        collapse in the same call, are skipped.

        Returns:
            Ids of the comments that were collapsed

        Raises:
            NotFoundError: If a comment is not in the discussion
        """
        collapsed: list[CommentId] = []
        for comment_id in comment_ids:
            if self.tree.comment(comment_id).visibility != CommentVisibility.VISIBLE:
                continue
            self.tree.toggle_children_visibility(comment_id)
            collapsed.append(comment_id)
        return collapsed

    def item(self, item_id: ItemId) -> Votable:
        """The post or one of its comments.

        Raises:
            NotFoundError: If the id is neither the post nor a comment
        """
        if item_id == self.post.id:
            return self.post
        return self.tree.comment(CommentId(item_id))

    def voting_state(self, item_id: ItemId) -> VotingState:
        """Vote affordance state of the post or one of its comments."""
        return self.voting_coordinator.voting_state(self.item(item_id))

    async def upvote_post(self, raise_on_error: bool = False) -> VotingState:
        """Upvote the post and keep the reconciled result.

        Raises:
            VoteError: Only when ``raise_on_error`` is set
        """
        self.post = await self.voting_coordinator.upvote(
            self.post, raise_on_error=raise_on_error
        )
        return self.voting_coordinator.voting_state(self.post)

    async def upvote_comment(
        self, comment_id: CommentId, raise_on_error: bool = False
    ) -> VotingState:
        """Upvote a comment and write its vote state back to the tree.

        Raises:
            NotFoundError: If the comment is not in the discussion
            VoteError: Only when ``raise_on_error`` is set
        """
        comment = self.tree.comment(comment_id)
        result = await self.voting_coordinator.upvote(
            comment, raise_on_error=raise_on_error
        )
        # Only the vote state is taken back; visibility may have changed
        # while the vote was in flight
        updated = self.tree.set_upvoted(comment_id, result.upvoted)
        return self.voting_coordinator.voting_state(updated)
