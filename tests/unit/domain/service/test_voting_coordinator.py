"""Unit tests for VotingCoordinator."""

import asyncio

import pytest

from hackers.adapter.hackernews import MockHackerNewsClient
from hackers.application.navigation import NavigationStore
from hackers.domain.error import DomainError, VoteError
from hackers.domain.model import Votable
from hackers.domain.service import VoteSubmitter, VotingCoordinator
from hackers.domain.value import ItemId, VoteFailureReason, VoteLinks
from tests.conftest import make_comments, make_post


class GatedVoteSubmitter(VoteSubmitter):
    """Vote submitter that blocks until released."""

    def __init__(self, failure: Exception | None = None) -> None:
        self.started = asyncio.Event()
        self.release = asyncio.Event()
        self.failure = failure

    async def submit_upvote(self, item: Votable) -> None:
        self.started.set()
        await self.release.wait()
        if self.failure is not None:
            raise self.failure


class FailingVoteSubmitter(VoteSubmitter):
    """Vote submitter that raises an unexpected error."""

    async def submit_upvote(self, item: Votable) -> None:
        raise RuntimeError("socket exploded")


class FailingLogoutClient(MockHackerNewsClient):
    async def logout(self) -> None:
        await super().logout()
        raise DomainError("logout failed")


@pytest.fixture
def client() -> MockHackerNewsClient:
    return MockHackerNewsClient()


@pytest.fixture
def navigation() -> NavigationStore:
    return NavigationStore()


@pytest.fixture
def coordinator(client, navigation) -> VotingCoordinator:
    return VotingCoordinator(
        vote_submitter=client,
        authentication_service=client,
        navigator=navigation,
    )


class TestUpvote:
    """Tests for upvote method."""

    @pytest.mark.asyncio
    async def test_upvote_post_success(self, coordinator, client):
        """A successful upvote keeps the optimistic state."""
        # Arrange
        post = make_post(score=10)

        # Act
        result = await coordinator.upvote(post)

        # Assert
        assert result.upvoted is True
        assert result.score == 11
        assert client.submitted_votes == [post.id]
        state = coordinator.voting_state(result)
        assert state.is_upvoted is True
        assert state.score == 11
        assert state.is_voting is False
        assert state.error is None
        assert coordinator.last_error is None

    @pytest.mark.asyncio
    async def test_upvote_comment_success(self, coordinator):
        """Comments carry no score."""
        comment = make_comments((1, 0))[0]

        result = await coordinator.upvote(comment)

        assert result.upvoted is True
        assert coordinator.voting_state(result).score is None

    @pytest.mark.asyncio
    async def test_upvote_already_upvoted_is_noop(self, coordinator, client):
        """An upvoted item is returned unchanged without a remote call."""
        post = make_post(score=10, upvoted=True)

        result = await coordinator.upvote(post)

        assert result is post
        assert result.score == 10
        assert client.submitted_votes == []

    @pytest.mark.asyncio
    async def test_upvote_network_failure_rolls_back(
        self, coordinator, client, navigation
    ):
        """A network failure restores the item and stores the error."""
        # Arrange
        post = make_post(score=10)
        client.vote_failure = VoteFailureReason.NETWORK

        # Act
        result = await coordinator.upvote(post)

        # Assert
        assert result.upvoted is False
        assert result.score == 10
        state = coordinator.voting_state(result)
        assert state.is_upvoted is False
        assert state.score == 10
        assert state.error is not None
        assert state.error.reason == VoteFailureReason.NETWORK
        assert coordinator.last_error is state.error
        assert navigation.login_requests == 0
        assert client.logout_calls == 0

    @pytest.mark.asyncio
    async def test_upvote_unauthenticated_logs_out_and_prompts_login(
        self, coordinator, client, navigation
    ):
        """An expired session ends the session and asks for login once."""
        # Arrange
        post = make_post(score=10)
        client.vote_failure = VoteFailureReason.UNAUTHENTICATED

        # Act
        result = await coordinator.upvote(post)

        # Assert
        assert result.upvoted is False
        assert result.score == 10
        assert client.logout_calls == 1
        assert navigation.login_requests == 1
        assert navigation.showing_login is True
        assert coordinator.last_error.reason == VoteFailureReason.UNAUTHENTICATED

    @pytest.mark.asyncio
    async def test_upvote_unauthenticated_prompts_login_when_logout_fails(
        self, navigation
    ):
        """A failing logout does not prevent the login prompt."""
        client = FailingLogoutClient()
        client.vote_failure = VoteFailureReason.UNAUTHENTICATED
        coordinator = VotingCoordinator(client, client, navigation)

        await coordinator.upvote(make_post())

        assert client.logout_calls == 1
        assert navigation.login_requests == 1

    @pytest.mark.asyncio
    async def test_upvote_unexpected_error_becomes_unknown(self, client, navigation):
        """Errors outside the vote taxonomy are reported as UNKNOWN."""
        coordinator = VotingCoordinator(FailingVoteSubmitter(), client, navigation)

        result = await coordinator.upvote(make_post(score=3))

        assert result.score == 3
        assert coordinator.last_error.reason == VoteFailureReason.UNKNOWN
        assert "socket exploded" in str(coordinator.last_error)

    @pytest.mark.asyncio
    async def test_upvote_raise_on_error(self, coordinator, client):
        """Callers can ask for the failure after rollback."""
        post = make_post(score=10)
        client.vote_failure = VoteFailureReason.SCRAPER

        with pytest.raises(VoteError) as exc_info:
            await coordinator.upvote(post, raise_on_error=True)

        assert exc_info.value.reason == VoteFailureReason.SCRAPER
        state = coordinator.voting_state(post)
        assert state.is_upvoted is False
        assert state.score == 10
        assert state.is_voting is False

    @pytest.mark.asyncio
    async def test_upvote_raise_on_error_wraps_unexpected_error(
        self, client, navigation
    ):
        coordinator = VotingCoordinator(FailingVoteSubmitter(), client, navigation)

        with pytest.raises(VoteError) as exc_info:
            await coordinator.upvote(make_post(), raise_on_error=True)

        assert exc_info.value.reason == VoteFailureReason.UNKNOWN
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    @pytest.mark.asyncio
    async def test_new_upvote_clears_previous_error(self, coordinator, client):
        post = make_post()
        client.vote_failure = VoteFailureReason.NETWORK
        await coordinator.upvote(post)

        client.vote_failure = None
        result = await coordinator.upvote(post)

        assert result.upvoted is True
        assert coordinator.voting_state(result).error is None
        assert coordinator.last_error is None


class TestInFlight:
    """Tests for state while a vote is in flight."""

    @pytest.mark.asyncio
    async def test_optimistic_state_while_in_flight(self, client, navigation):
        """The upvote shows before the remote call completes."""
        # Arrange
        submitter = GatedVoteSubmitter()
        coordinator = VotingCoordinator(submitter, client, navigation)
        post = make_post(score=10)

        # Act
        task = asyncio.create_task(coordinator.upvote(post))
        await submitter.started.wait()

        # Assert
        state = coordinator.voting_state(post)
        assert state.is_upvoted is True
        assert state.score == 11
        assert state.is_voting is True

        submitter.release.set()
        result = await task
        assert result.score == 11
        assert coordinator.voting_state(result).is_voting is False

    @pytest.mark.asyncio
    async def test_is_voting_is_tracked_per_item(self, client, navigation):
        """A vote on one item doesn't mark others as voting."""
        submitter = GatedVoteSubmitter()
        coordinator = VotingCoordinator(submitter, client, navigation)
        post = make_post()
        comment = make_comments((1, 0))[0]

        task = asyncio.create_task(coordinator.upvote(post))
        await submitter.started.wait()

        assert coordinator.is_voting(ItemId(post.id)) is True
        assert coordinator.is_voting(ItemId(comment.id)) is False
        assert coordinator.voting_state(comment).is_upvoted is False

        submitter.release.set()
        await task

    @pytest.mark.asyncio
    async def test_second_upvote_while_in_flight_is_noop(self, client, navigation):
        submitter = GatedVoteSubmitter()
        coordinator = VotingCoordinator(submitter, client, navigation)
        post = make_post(score=10)

        task = asyncio.create_task(coordinator.upvote(post))
        await submitter.started.wait()

        second = await coordinator.upvote(post)

        assert second is post
        submitter.release.set()
        result = await task
        assert result.score == 11

    @pytest.mark.asyncio
    async def test_failure_after_flight_rolls_back(self, client, navigation):
        submitter = GatedVoteSubmitter(VoteError(VoteFailureReason.NETWORK))
        coordinator = VotingCoordinator(submitter, client, navigation)
        post = make_post(score=10)

        task = asyncio.create_task(coordinator.upvote(post))
        await submitter.started.wait()
        assert coordinator.voting_state(post).score == 11

        submitter.release.set()
        result = await task

        state = coordinator.voting_state(result)
        assert state.is_upvoted is False
        assert state.score == 10
        assert state.error.reason == VoteFailureReason.NETWORK


class TestCancel:
    """Tests for cancel method."""

    @pytest.mark.asyncio
    async def test_cancel_rolls_back_without_error(self, client, navigation):
        """A cancelled vote restores the item and records no error."""
        # Arrange
        submitter = GatedVoteSubmitter()
        coordinator = VotingCoordinator(submitter, client, navigation)
        post = make_post(score=10)
        task = asyncio.create_task(coordinator.upvote(post))
        await submitter.started.wait()

        # Act
        cancelled = coordinator.cancel(ItemId(post.id))
        result = await task

        # Assert
        assert cancelled is True
        assert result is post
        state = coordinator.voting_state(post)
        assert state.is_upvoted is False
        assert state.score == 10
        assert state.is_voting is False
        assert state.error is None
        assert navigation.login_requests == 0

    def test_cancel_without_vote_in_flight(self, coordinator):
        assert coordinator.cancel(ItemId(100)) is False


class TestVotingState:
    """Tests for vote affordance state."""

    def test_can_vote_with_upvote_link(self, coordinator):
        assert coordinator.can_vote(make_post()) is True

    def test_cannot_vote_without_links(self, coordinator):
        post = make_post().model_copy(update={"vote_links": None})

        assert coordinator.can_vote(post) is False
        assert coordinator.voting_state(post).can_vote is False

    def test_cannot_vote_with_only_unvote_link(self, coordinator):
        post = make_post(upvoted=True).model_copy(
            update={"vote_links": VoteLinks(unvote="vote?id=100&how=un&auth=abc")}
        )

        assert coordinator.can_vote(post) is False

    def test_initial_state(self, coordinator):
        state = coordinator.voting_state(make_post(score=42))

        assert state.is_upvoted is False
        assert state.score == 42
        assert state.can_vote is True
        assert state.is_voting is False
        assert state.error is None


class TestClearError:
    """Tests for clear_error method."""

    @pytest.mark.asyncio
    async def test_clear_error_for_item(self, coordinator, client):
        post = make_post()
        client.vote_failure = VoteFailureReason.NETWORK
        await coordinator.upvote(post)

        coordinator.clear_error(ItemId(post.id))

        assert coordinator.voting_state(post).error is None
        assert coordinator.last_error is None

    @pytest.mark.asyncio
    async def test_clear_error_for_other_item_keeps_last_error(
        self, coordinator, client
    ):
        post = make_post()
        client.vote_failure = VoteFailureReason.NETWORK
        await coordinator.upvote(post)

        coordinator.clear_error(ItemId(1))

        assert coordinator.last_error is not None

    @pytest.mark.asyncio
    async def test_clear_all_errors(self, coordinator, client):
        client.vote_failure = VoteFailureReason.NETWORK
        post = make_post()
        comment = make_comments((1, 0))[0]
        await coordinator.upvote(post)
        await coordinator.upvote(comment)

        coordinator.clear_error()

        assert coordinator.voting_state(post).error is None
        assert coordinator.voting_state(comment).error is None
        assert coordinator.last_error is None
