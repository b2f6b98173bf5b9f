"""Post repository interface."""

from abc import ABC, abstractmethod

from hackers.domain.model import Post
from hackers.domain.value import PostId


class PostRepository(ABC):
    """Source of posts and their discussions.

    Implementations live in the adapter layer (scraped from Hacker News,
    or in memory for tests).
    """

    @abstractmethod
    async def get_post(self, post_id: PostId) -> Post:
        """Fetch a post with its comments attached.

        Comments are returned in page order with depth annotations.

        Args:
            post_id: The post's Hacker News id

        Returns:
            The post, with ``comments`` populated

        Raises:
            NotFoundError: If no such post exists
        """
        pass
