"""Hacker News client implementation.

Hacker News has no write API, so everything goes through the website:
pages are scraped, votes are GETs on the links scraped from the page, and
the session is the ``user`` cookie set by the login form.
"""

import httpx
import logfire

from hackers.adapter.error import ProviderError
from hackers.config import HackerNewsSettings
from hackers.domain.error import AuthenticationError, VoteError
from hackers.domain.model import Post, User, Votable
from hackers.domain.repository import PostRepository
from hackers.domain.service import AuthenticationService, VoteSubmitter, votable_type
from hackers.domain.value import AuthenticationFailure, PostId, VoteFailureReason

from .parser import parse_post_page

# Markers of the login page, served instead of the result when a request
# needs a session
LOGIN_MARKERS = ('<form action="/login', "You have to be logged in")

SESSION_COOKIE = "user"


class HackerNewsClient(PostRepository, VoteSubmitter, AuthenticationService):
    """Scraping client for news.ycombinator.com.

    One instance holds one session: cookies live in the underlying
    ``httpx.AsyncClient``, the username in memory.
    """

    def __init__(
        self,
        settings: HackerNewsSettings,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize Hacker News client.

        Args:
            settings: Site configuration
            client: HTTP client to use; one is created from settings if omitted
        """
        self.base_url = settings.base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=settings.timeout,
            follow_redirects=True,
            headers={"User-Agent": settings.user_agent},
        )
        self._username: str | None = None

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def get_post(self, post_id: PostId) -> Post:
        """Fetch a post page and parse it with its comments.

        Raises:
            NotFoundError: If Hacker News has no such item
            ProviderError: If the page could not be fetched
            ScraperError: If the page could not be parsed
        """
        with logfire.span("hackernews.get_post", post_id=post_id):
            try:
                html = await self._get(self._url("item"), params={"id": post_id})
            except httpx.HTTPError as e:
                logfire.error("Post fetch failed", post_id=post_id, error=str(e))
                raise ProviderError(f"Failed to fetch item {post_id}: {e}")

            post = parse_post_page(html, post_id, self.base_url)
            logfire.info(
                "Post fetched", post_id=post_id, comments=len(post.comments)
            )
            return post

    async def submit_upvote(self, item: Votable) -> None:
        """Follow the item's upvote link.

        Raises:
            VoteError: UNAUTHENTICATED if there is no usable session,
                SCRAPER if the item can't be upvoted, NETWORK on HTTP errors
        """
        with logfire.span(
            "hackernews.submit_upvote",
            item_id=item.id,
            votable_type=votable_type(item).value,
        ):
            links = item.vote_links
            if links is None:
                raise VoteError(
                    VoteFailureReason.UNAUTHENTICATED, "Item has no vote links"
                )
            if links.upvote is None:
                if links.unvote is None:
                    raise VoteError(VoteFailureReason.UNAUTHENTICATED)
                raise VoteError(
                    VoteFailureReason.SCRAPER, f"Item {item.id} has no upvote link"
                )

            try:
                html = await self._get(self._url(links.upvote))
            except httpx.HTTPError as e:
                logfire.error("Vote request failed", item_id=item.id, error=str(e))
                raise VoteError(VoteFailureReason.NETWORK, str(e))

            if any(marker in html for marker in LOGIN_MARKERS):
                raise VoteError(
                    VoteFailureReason.UNAUTHENTICATED, "Hacker News asked to log in"
                )

    async def login(self, username: str, password: str) -> User:
        """Submit the login form.

        Raises:
            AuthenticationError: BAD_CREDENTIALS if the login is rejected,
                SERVER_UNREACHABLE on HTTP errors
        """
        with logfire.span("hackernews.login", username=username):
            login_url = self._url("login")
            try:
                # Load the form first so any pre-login cookies are set
                await self._get(login_url)
                response = await self._client.post(
                    login_url,
                    data={"acct": username, "pw": password, "goto": "news"},
                )
                response.raise_for_status()
            except httpx.HTTPError as e:
                logfire.error("Login request failed", username=username, error=str(e))
                raise AuthenticationError(AuthenticationFailure.SERVER_UNREACHABLE, str(e))

            html = response.text
            if "Bad login" in html or 'name="acct"' in html:
                logfire.warn("Login rejected", username=username)
                raise AuthenticationError(AuthenticationFailure.BAD_CREDENTIALS)

            self._username = username
            logfire.info("Logged in", username=username)
            return User(username=username)

    async def logout(self) -> None:
        self._client.cookies.clear()
        self._username = None
        logfire.info("Logged out")

    async def is_authenticated(self) -> bool:
        has_cookie = self._client.cookies.get(SESSION_COOKIE) is not None
        return has_cookie and self._username is not None

    async def current_user(self) -> User | None:
        if self._username is None:
            return None
        return User(username=self._username)

    def _url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    async def _get(self, url: str, params: dict | None = None) -> str:
        response = await self._client.get(url, params=params)
        response.raise_for_status()
        return response.text
