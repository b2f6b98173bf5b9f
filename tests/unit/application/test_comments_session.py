"""Unit tests for CommentsSession."""

import pytest

from hackers.adapter.hackernews import MockHackerNewsClient
from hackers.application.comments_session import CommentsSession
from hackers.application.navigation import NavigationStore
from hackers.domain.error import NotFoundError
from hackers.domain.service import VotingCoordinator
from hackers.domain.value import CommentId, CommentVisibility, ItemId
from tests.conftest import ids, make_comments, make_post


@pytest.fixture
def session() -> CommentsSession:
    client = MockHackerNewsClient()
    coordinator = VotingCoordinator(client, client, NavigationStore())
    # 1 > 2 > 3, 1 > 4, 5
    comments = make_comments((1, 0), (2, 1), (3, 2), (4, 1), (5, 0))
    return CommentsSession(make_post(comments=comments), coordinator)


class TestCollapse:
    """Tests for collapse method."""

    def test_collapse_parent_then_reply_skips_hidden_reply(self, session):
        """A reply hidden by an earlier collapse is skipped, not an error."""
        collapsed = session.collapse([CommentId(1), CommentId(2)])

        assert collapsed == [1]
        assert ids(session.visible_comments()) == [1, 5]

    def test_collapse_reply_then_parent(self, session):
        collapsed = session.collapse([CommentId(2), CommentId(1)])

        assert collapsed == [2, 1]
        assert ids(session.visible_comments()) == [1, 5]

    def test_collapse_skips_already_collapsed(self, session):
        session.toggle(CommentId(2))

        collapsed = session.collapse([CommentId(2)])

        assert collapsed == []
        assert session.tree.comment(CommentId(2)).visibility == CommentVisibility.COLLAPSED

    def test_collapse_unknown_comment_raises_error(self, session):
        with pytest.raises(NotFoundError):
            session.collapse([CommentId(99)])


class TestItem:
    """Tests for item lookup."""

    def test_post_id(self, session):
        assert session.post_id == 100
        assert session.post.comments == []

    def test_item_resolves_post_and_comments(self, session):
        assert session.item(ItemId(100)).id == 100
        assert session.item(ItemId(3)).id == 3

    def test_item_unknown_id_raises_error(self, session):
        with pytest.raises(NotFoundError):
            session.item(ItemId(999))

    def test_voting_state_of_post(self, session):
        state = session.voting_state(ItemId(100))

        assert state.score == 10
        assert state.is_upvoted is False
