"""Comment tree domain service.

Owns the flat, depth-ordered comment list of one discussion and the
collapse/expand visibility model on top of it. No explicit tree is built:
the descendants of the comment at index ``i`` are the contiguous run of
following comments whose depth is greater than ``comments[i].depth``.
"""

from typing import Iterable, Iterator

import logfire

from hackers.domain.error import CommentHiddenError, NotFoundError
from hackers.domain.model import Comment
from hackers.domain.model.common import DomainModel
from hackers.domain.value import CommentId, CommentVisibility

from .base import Service


class ToggleResult(DomainModel):
    """Outcome of a collapse or expand.

    Attributes:
        affected_indices: Positions in the visible projection of the rows
            that were removed (collapse, positions before the change) or
            inserted (expand, positions after the change)
        new_state: The toggled comment's new visibility
    """

    affected_indices: list[int]
    new_state: CommentVisibility


class CommentTree(Service):
    """Visibility model for one post's discussion.

    Created when a discussion is opened and rebuilt wholesale on reload.
    Comments are immutable; a comment is replaced in place whenever its
    visibility or vote state changes, so order and depth never change.
    """

    def __init__(self, comments: Iterable[Comment] = ()) -> None:
        """Initialize comment tree.

        Args:
            comments: Comments in page order. Depths are trusted as given.
        """
        self._comments: list[Comment] = list(comments)

    def __len__(self) -> int:
        return len(self._comments)

    def __iter__(self) -> Iterator[Comment]:
        return iter(list(self._comments))

    def __contains__(self, comment_id: object) -> bool:
        return any(comment.id == comment_id for comment in self._comments)

    @property
    def comments(self) -> list[Comment]:
        """All comments in page order, including hidden ones."""
        return list(self._comments)

    def visible_comments(self) -> list[Comment]:
        """Comments that should be rendered, in page order.

        Returns:
            Every comment that is not hidden by a collapsed ancestor
        """
        return [comment for comment in self._comments if comment.is_shown]

    def index_of(self, comment_id: CommentId) -> int:
        """Index of a comment in the full sequence.

        Raises:
            NotFoundError: If the comment is not part of this discussion
        """
        for index, comment in enumerate(self._comments):
            if comment.id == comment_id:
                return index
        raise NotFoundError("Comment", str(comment_id))

    def comment(self, comment_id: CommentId) -> Comment:
        """Current state of a comment.

        Raises:
            NotFoundError: If the comment is not part of this discussion
        """
        return self._comments[self.index_of(comment_id)]

    def descendants(self, comment_id: CommentId) -> list[Comment]:
        """All replies beneath a comment, transitively, in page order."""
        index = self.index_of(comment_id)
        return [self._comments[i] for i in self._descendant_range(index)]

    def ancestors(self, comment_id: CommentId) -> list[Comment]:
        """Chain of parents of a comment, outermost first."""
        index = self.index_of(comment_id)
        depth = self._comments[index].depth
        chain: list[Comment] = []
        for candidate in reversed(self._comments[:index]):
            if candidate.depth < depth:
                chain.append(candidate)
                depth = candidate.depth
                if depth == 0:
                    break
        chain.reverse()
        return chain

    def parent_of(self, comment_id: CommentId) -> Comment | None:
        """Direct parent of a comment, or None for a top-level comment."""
        chain = self.ancestors(comment_id)
        return chain[-1] if chain else None

    def toggle_children_visibility(self, comment_id: CommentId) -> ToggleResult:
        """Collapse or expand the replies beneath a comment.

        A visible comment is collapsed: it becomes COLLAPSED and every
        descendant becomes HIDDEN, overwriting any nested collapsed state.
        A collapsed comment is expanded: it becomes VISIBLE and its
        descendants are shown again, except those beneath a nested comment
        that is still COLLAPSED.

        Args:
            comment_id: Comment whose replies to toggle

        Returns:
            Affected visible-row positions and the comment's new visibility

        Raises:
            NotFoundError: If the comment is not part of this discussion
            CommentHiddenError: If the comment is itself hidden
        """
        with logfire.span(
            "comment_tree.toggle_children_visibility", comment_id=comment_id
        ):
            index = self.index_of(comment_id)
            target = self._comments[index]

            if target.visibility == CommentVisibility.HIDDEN:
                logfire.warn("Toggle on hidden comment", comment_id=comment_id)
                raise CommentHiddenError(comment_id)

            collapsing = target.visibility == CommentVisibility.VISIBLE
            new_state = (
                CommentVisibility.COLLAPSED if collapsing else CommentVisibility.VISIBLE
            )
            self._set_visibility(index, new_state)

            # The target and everything before it are shown identically
            # before and after the toggle.
            visible_index = sum(
                1 for comment in self._comments[:index] if comment.is_shown
            )

            if collapsing:
                affected = self._collapse_descendants(index, visible_index)
            else:
                affected = self._expand_descendants(index, visible_index)

            logfire.info(
                "Comment visibility toggled",
                comment_id=comment_id,
                new_state=new_state.value,
                affected=len(affected),
            )
            return ToggleResult(affected_indices=affected, new_state=new_state)

    def reveal(self, comment_id: CommentId) -> bool:
        """Make a comment appear by expanding its collapsed ancestors.

        Used when navigating straight to a comment, e.g. from a link.

        Returns:
            True if the comment is shown afterwards, False if it is unknown
        """
        if comment_id not in self:
            logfire.warn("Reveal of unknown comment", comment_id=comment_id)
            return False

        for ancestor in self.ancestors(comment_id):
            current = self.comment(ancestor.id)
            if current.visibility == CommentVisibility.COLLAPSED:
                self.toggle_children_visibility(current.id)

        return self.comment(comment_id).is_shown

    def collapse_thread(self, comment_id: CommentId) -> Comment | None:
        """Collapse the top-level comment of the thread containing a comment.

        Returns:
            The collapsed top-level comment, or None if the comment is
            hidden or its thread is already collapsed
        """
        comment = self.comment(comment_id)
        if not comment.is_shown:
            return None

        chain = self.ancestors(comment_id)
        root = chain[0] if chain else comment
        if root.visibility != CommentVisibility.VISIBLE:
            return None

        self.toggle_children_visibility(root.id)
        return self.comment(root.id)

    def set_upvoted(self, comment_id: CommentId, upvoted: bool) -> Comment:
        """Record a comment's reconciled vote state.

        Returns:
            The updated comment
        """
        index = self.index_of(comment_id)
        updated = self._comments[index].model_copy(update={"upvoted": upvoted})
        self._comments[index] = updated
        return updated

    def _descendant_range(self, index: int) -> range:
        depth = self._comments[index].depth
        end = index + 1
        while end < len(self._comments) and self._comments[end].depth > depth:
            end += 1
        return range(index + 1, end)

    def _set_visibility(self, index: int, visibility: CommentVisibility) -> None:
        comment = self._comments[index]
        if comment.visibility != visibility:
            self._comments[index] = comment.model_copy(
                update={"visibility": visibility}
            )

    def _collapse_descendants(self, index: int, visible_index: int) -> list[int]:
        affected: list[int] = []
        position = visible_index + 1
        for child_index in self._descendant_range(index):
            if self._comments[child_index].is_shown:
                affected.append(position)
                position += 1
            self._set_visibility(child_index, CommentVisibility.HIDDEN)
        return affected

    def _expand_descendants(self, index: int, visible_index: int) -> list[int]:
        affected: list[int] = []
        position = visible_index + 1
        # Depth of the nested collapsed comment whose subtree we are in
        collapsed_depth: int | None = None

        for child_index in self._descendant_range(index):
            child = self._comments[child_index]

            if collapsed_depth is not None and child.depth > collapsed_depth:
                if child.is_shown:
                    position += 1
                continue
            collapsed_depth = None

            if not child.is_shown:
                affected.append(position)

            if child.visibility == CommentVisibility.COLLAPSED:
                collapsed_depth = child.depth
            else:
                self._set_visibility(child_index, CommentVisibility.VISIBLE)
            position += 1

        return affected
