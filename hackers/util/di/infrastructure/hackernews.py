"""Hacker News infrastructure providers."""

from typing import AsyncIterator

from dishka import Scope, provide

from hackers.adapter.hackernews import HackerNewsClient
from hackers.config import HackerNewsSettings
from hackers.domain.repository import PostRepository
from hackers.domain.service import AuthenticationService, VoteSubmitter
from hackers.util.di.base import ProviderBase


class HackerNewsProvider(ProviderBase):
    """Hacker News component base."""

    __mock_component__ = "hackernews"


class ProdHackerNewsProvider(HackerNewsProvider):
    """Production Hacker News provider.

    A single client serves posts, votes and the session, so votes are
    made with the cookie set by login.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_hackernews_client(
        self, settings: HackerNewsSettings
    ) -> AsyncIterator[HackerNewsClient]:
        """Provide Hacker News client, closed with the container."""
        client = HackerNewsClient(settings=settings)
        yield client
        await client.aclose()

    @provide(scope=Scope.APP)
    def get_post_repository(self, client: HackerNewsClient) -> PostRepository:
        """Provide post repository."""
        return client

    @provide(scope=Scope.APP)
    def get_vote_submitter(self, client: HackerNewsClient) -> VoteSubmitter:
        """Provide vote submitter."""
        return client

    @provide(scope=Scope.APP)
    def get_authentication_service(
        self, client: HackerNewsClient
    ) -> AuthenticationService:
        """Provide authentication service."""
        return client
