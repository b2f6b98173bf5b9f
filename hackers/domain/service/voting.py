"""Voting domain service.

Upvotes are applied optimistically: the item is shown as upvoted while
the remote call is in flight and rolled back if Hacker News rejects it.
A rejection for lack of authentication means the session has expired, so
it also logs the user out and asks for the login screen.
"""

import asyncio
from typing import TypeVar

import logfire

from hackers.domain.error import DomainError, VoteError
from hackers.domain.model import Comment, Post, Votable, VotingState
from hackers.domain.value import ItemId, VotableType, VoteFailureReason

from .auth_service import AuthenticationService
from .base import Service

V = TypeVar("V", Post, Comment)


class VoteSubmitter:
    """Remote vote capability, implemented by the Hacker News adapter."""

    async def submit_upvote(self, item: Votable) -> None:
        """Submit an upvote for a post or comment.

        Args:
            item: The item as it was before the optimistic update

        Raises:
            VoteError: If the vote was rejected or could not be sent
        """
        raise NotImplementedError


class Navigator:
    """Navigation requests the core can make of the presentation layer."""

    def show_login(self) -> None:
        """Ask for the login screen to be shown."""
        raise NotImplementedError


def votable_type(item: Votable) -> VotableType:
    """Whether an item is a post or a comment."""
    return VotableType.POST if isinstance(item, Post) else VotableType.COMMENT


class VotingCoordinator(Service):
    """Optimistic upvotes with rollback and per-item state.

    In-flight votes and errors are tracked per item id, so votes on
    different items do not share an "in progress" indicator.
    """

    def __init__(
        self,
        vote_submitter: VoteSubmitter,
        authentication_service: AuthenticationService,
        navigator: Navigator,
    ) -> None:
        """Initialize voting coordinator.

        Args:
            vote_submitter: Remote vote capability
            authentication_service: Used to end an expired session
            navigator: Receives the login prompt
        """
        self.vote_submitter = vote_submitter
        self.authentication_service = authentication_service
        self.navigator = navigator

        self._optimistic: dict[ItemId, Votable] = {}
        self._in_flight: dict[ItemId, asyncio.Task[None]] = {}
        self._cancelled: set[ItemId] = set()
        self._errors: dict[ItemId, VoteError] = {}
        self._last_error: VoteError | None = None

    @property
    def last_error(self) -> VoteError | None:
        """Most recent vote error on any item."""
        return self._last_error

    async def upvote(self, item: V, *, raise_on_error: bool = False) -> V:
        """Upvote a post or comment.

        Upvoting is one-directional: an item that is already upvoted, or
        has a vote in flight, is returned unchanged without a remote call.

        Args:
            item: Current state of the item
            raise_on_error: Re-raise the VoteError after rollback, for
                callers that need the outcome for flow control

        Returns:
            The reconciled item: upvoted (and rescored) on success, the
            original item on failure or cancellation

        Raises:
            VoteError: Only if ``raise_on_error`` is set and the vote failed
        """
        item_id = ItemId(item.id)
        if item.upvoted:
            logfire.info("Upvote skipped, already upvoted", item_id=item_id)
            return item
        if item_id in self._in_flight:
            logfire.info("Upvote skipped, vote in flight", item_id=item_id)
            return item

        with logfire.span(
            "voting.upvote", item_id=item_id, votable_type=votable_type(item).value
        ):
            optimistic = self._optimistic_copy(item)
            self._optimistic[item_id] = optimistic
            self.clear_error(item_id)

            task = asyncio.create_task(self.vote_submitter.submit_upvote(item))
            self._in_flight[item_id] = task

            try:
                await task
            except asyncio.CancelledError:
                if not self._finish(item_id):
                    raise
                logfire.info("Upvote cancelled, rolled back", item_id=item_id)
                return item
            except Exception as exc:
                self._finish(item_id)
                error = (
                    exc
                    if isinstance(exc, VoteError)
                    else VoteError(VoteFailureReason.UNKNOWN, str(exc))
                )
                await self._handle_failure(item_id, error)
                if raise_on_error and error is exc:
                    raise
                if raise_on_error:
                    raise error from exc
                return item

            self._finish(item_id)
            logfire.info("Upvote succeeded", item_id=item_id)
            return optimistic

    def cancel(self, item_id: ItemId) -> bool:
        """Cancel an in-flight vote. Its optimistic state is rolled back.

        Returns:
            True if a vote was in flight for the item
        """
        task = self._in_flight.get(item_id)
        if task is None or task.done():
            return False
        self._cancelled.add(item_id)
        task.cancel()
        return True

    def voting_state(self, item: Votable) -> VotingState:
        """Vote affordance state for an item.

        While a vote is in flight the optimistic state is reported.
        """
        item_id = ItemId(item.id)
        current = self._optimistic.get(item_id, item)
        return VotingState(
            is_upvoted=current.upvoted,
            score=current.score if isinstance(current, Post) else None,
            can_vote=self.can_vote(current),
            is_voting=self.is_voting(item_id),
            error=self._errors.get(item_id),
        )

    def can_vote(self, item: Votable) -> bool:
        """Whether the item carries an upvote capability token."""
        return item.vote_links is not None and item.vote_links.can_upvote

    def is_voting(self, item_id: ItemId) -> bool:
        """Whether a vote on the item is in flight."""
        return item_id in self._in_flight

    def clear_error(self, item_id: ItemId | None = None) -> None:
        """Forget the stored error of one item, or of all items."""
        if item_id is None:
            self._errors.clear()
            self._last_error = None
            return
        error = self._errors.pop(item_id, None)
        if error is not None and error is self._last_error:
            self._last_error = None

    def _optimistic_copy(self, item: V) -> V:
        if isinstance(item, Post):
            return item.model_copy(update={"upvoted": True, "score": item.score + 1})
        return item.model_copy(update={"upvoted": True})

    def _finish(self, item_id: ItemId) -> bool:
        """Drop in-flight state. Returns whether the vote was cancelled."""
        self._in_flight.pop(item_id, None)
        self._optimistic.pop(item_id, None)
        if item_id in self._cancelled:
            self._cancelled.discard(item_id)
            return True
        return False

    async def _handle_failure(self, item_id: ItemId, error: VoteError) -> None:
        self._errors[item_id] = error
        self._last_error = error

        if not error.is_unauthenticated:
            logfire.warn(
                "Upvote failed, rolled back",
                item_id=item_id,
                reason=error.reason.value,
                error=str(error),
            )
            return

        logfire.warn("Upvote rejected, session expired", item_id=item_id)
        try:
            await self.authentication_service.logout()
        except DomainError as exc:
            logfire.error("Logout after rejected vote failed", error=str(exc))
        self.navigator.show_login()
