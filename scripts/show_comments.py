#!/usr/bin/env python3
"""Print the discussion of a Hacker News post, optionally collapsing threads.

Usage:
    python scripts/show_comments.py 8863 [--collapse COMMENT_ID ...]
"""

import argparse
import asyncio
import sys

import logfire

from hackers.application.usecase.comment import (
    LoadCommentsRequest,
    LoadCommentsUseCase,
)
from hackers.config import Settings
from hackers.domain.value import CommentId, CommentVisibility
from hackers.util.di.container import create_container
from hackers.util.logging import setup_logging
from hackers.util.observability import configure_logfire, instrument_httpx


async def show_comments(settings: Settings, post_id: int, collapse: list[int]) -> None:
    container = create_container(settings)
    try:
        async with container() as request_container:
            use_case = await request_container.get(LoadCommentsUseCase)
            response = await use_case.execute(LoadCommentsRequest(post_id=post_id))
            session = response.session

            session.collapse([CommentId(comment_id) for comment_id in collapse])

            print(f"{session.post.title} ({session.post.score} points)")
            for comment in session.visible_comments():
                marker = "[+]" if comment.visibility == CommentVisibility.COLLAPSED else "[-]"
                print(f"{'  ' * comment.depth}{marker} {comment.author} {comment.age}")
    finally:
        await container.close()


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("post_id", type=int)
    parser.add_argument("--collapse", type=int, nargs="*", default=[])
    args = parser.parse_args()

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)
    instrument_httpx()

    try:
        asyncio.run(show_comments(settings, args.post_id, args.collapse))
        return 0
    except Exception as e:
        logfire.error(
            "Showing comments failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
