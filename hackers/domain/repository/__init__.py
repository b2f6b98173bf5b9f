"""Repository interfaces."""

from .post import PostRepository

__all__ = ["PostRepository"]
