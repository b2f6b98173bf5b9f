"""Hacker News adapter."""

from .client import HackerNewsClient
from .mock import MockHackerNewsClient
from .parser import parse_comments, parse_post_page, parse_vote_links

__all__ = [
    "HackerNewsClient",
    "MockHackerNewsClient",
    "parse_comments",
    "parse_post_page",
    "parse_vote_links",
]
