"""Strongly typed identifiers for Hacker News items.

Hacker News uses a single integer id space for posts and comments, so the
aliases exist only to keep call sites self-documenting.
"""

from typing import NewType

ItemId = NewType("ItemId", int)
PostId = NewType("PostId", int)
CommentId = NewType("CommentId", int)
