"""Hacker News page parsing.

Turns an item page (``/item?id=...``) into a Post with its comments in
page order. Comment text is returned as the inner HTML of ``.commtext``;
converting it for display is left to the presentation layer.
"""

from urllib.parse import urljoin

import logfire
from bs4 import BeautifulSoup, Tag

from hackers.adapter.error import ScraperError
from hackers.domain.error import NotFoundError
from hackers.domain.model import Comment, Post
from hackers.domain.value import CommentId, PostId, VoteLinks

# Width in pixels of one level of comment indentation
INDENT_WIDTH = 40


def parse_post_page(html: str, post_id: PostId, base_url: str) -> Post:
    """Parse an item page into a post with comments attached.

    Args:
        html: Page HTML
        post_id: Id that was requested, for error reporting
        base_url: Site root, used to resolve relative post URLs

    Returns:
        The post, with ``comments`` in page order

    Raises:
        NotFoundError: If Hacker News reports no such item
        ScraperError: If the page structure is not recognised
    """
    soup = BeautifulSoup(html, "html.parser")

    fatitem = soup.select_one("table.fatitem")
    if fatitem is None:
        if "No such item." in html:
            raise NotFoundError("Post", str(post_id))
        raise ScraperError(f"Couldn't find post element for item {post_id}")

    post = _parse_post(fatitem, base_url)
    comments = parse_comments(soup)
    return post.model_copy(
        update={"comments": comments, "comments_count": len(comments)}
    )


def parse_comments(soup: BeautifulSoup | Tag) -> list[Comment]:
    """Parse every comment row of a page, in page order.

    Rows that cannot be parsed, or whose text is empty (deleted or
    flagged comments), are skipped.
    """
    comments: list[Comment] = []
    for row in soup.select("tr.comtr"):
        try:
            comment = _parse_comment(row)
        except ScraperError as exc:
            logfire.warn("Skipping unparseable comment", error=str(exc))
            continue
        if comment is not None:
            comments.append(comment)
    return comments


def parse_vote_links(
    anchors: list[Tag], extra_anchors: list[Tag] | None = None
) -> tuple[VoteLinks | None, bool]:
    """Extract vote capability links and the current vote state.

    An upvote arrow with the ``nosee`` class means the item is already
    upvoted; the arrow is no longer actionable and the unvote link is
    derived from it when the page doesn't render one.

    Args:
        anchors: Links in the item's vote area
        extra_anchors: Other links of the item (metadata line) that may
            hold the unvote link

    Returns:
        Tuple of (vote links or None if voting is unavailable, upvoted)
    """
    candidates = anchors + (extra_anchors or [])

    upvote = _first(anchors, lambda a: _anchor_id(a).startswith("up_"))
    unvote = _first(candidates, lambda a: _anchor_id(a).startswith("un_")) or _first(
        candidates, lambda a: a.get_text(strip=True).lower() == "unvote"
    )

    upvote_href = _href(upvote)
    unvote_href = _href(unvote)
    upvote_hidden = upvote is not None and "nosee" in (upvote.get("class") or [])

    if upvote_hidden:
        if unvote_href is None and upvote_href is not None:
            unvote_href = upvote_href.replace("how=up", "how=un")
        upvote_href = None

    upvoted = unvote_href is not None or upvote_hidden
    if upvote_href is None and unvote_href is None:
        return None, upvoted
    return VoteLinks(upvote=upvote_href, unvote=unvote_href), upvoted


def _parse_post(fatitem: Tag, base_url: str) -> Post:
    title_row = fatitem.select_one("tr.athing")
    if title_row is None:
        raise ScraperError("Couldn't find post title row")

    try:
        post_id = PostId(int(title_row.get("id", "")))
    except ValueError:
        raise ScraperError("Couldn't parse post ID")

    title_link = title_row.select_one(".titleline > a")
    if title_link is None:
        raise ScraperError("Couldn't find title element")

    subtext = fatitem.select_one(".subtext")
    metadata_anchors = subtext.select("a") if subtext is not None else []

    vote_links, upvoted = parse_vote_links(
        title_row.select("td.votelinks a") or title_row.select("a"),
        metadata_anchors,
    )

    toptext = fatitem.select_one(".toptext")
    text = toptext.decode_contents().strip() if toptext is not None else None

    return Post(
        id=post_id,
        title=title_link.get_text(),
        url=urljoin(base_url + "/", title_link.get("href", "")),
        age=_text(subtext, ".age"),
        author=_text(subtext, ".hnuser"),
        score=_leading_int(_text(subtext, ".score")),
        comments_count=_comments_count(metadata_anchors),
        upvoted=upvoted,
        vote_links=vote_links,
        text=text or None,
    )


def _parse_comment(row: Tag) -> Comment | None:
    try:
        comment_id = CommentId(int(row.get("id", "")))
    except ValueError:
        raise ScraperError("Couldn't parse comment id")

    commtext = row.select_one(".commtext")
    if commtext is None:
        return None
    for reply in commtext.select(".reply"):
        reply.decompose()
    # Show full link targets rather than truncated link text
    for link in commtext.select("a[href]"):
        link.string = link["href"]
    text = commtext.decode_contents().strip()
    if not text:
        return None

    vote_links, upvoted = parse_vote_links(row.select("a"))

    return Comment(
        id=comment_id,
        depth=_comment_depth(row),
        author=_text(row, ".hnuser"),
        age=_text(row, ".age"),
        text=text,
        vote_links=vote_links,
        upvoted=upvoted,
    )


def _comment_depth(row: Tag) -> int:
    indent_cell = row.select_one("td.ind")
    if indent_cell is None:
        raise ScraperError("Couldn't find comment indent")

    indent = indent_cell.get("indent")
    if indent is not None:
        try:
            return int(indent)
        except ValueError:
            raise ScraperError(f"Couldn't parse comment indent: {indent}")

    image = indent_cell.select_one("img")
    try:
        width = int(image.get("width", "")) if image is not None else None
    except ValueError:
        width = None
    if width is None:
        raise ScraperError("Couldn't parse comment indent width")
    return width // INDENT_WIDTH


def _comments_count(anchors: list[Tag]) -> int:
    link = _first(anchors, lambda a: "comment" in a.get_text())
    return _leading_int(link.get_text()) if link is not None else 0


def _leading_int(value: str) -> int:
    parts = value.split()
    if not parts:
        return 0
    try:
        return int(parts[0])
    except ValueError:
        return 0


def _text(element: Tag | None, selector: str) -> str:
    if element is None:
        return ""
    found = element.select_one(selector)
    return found.get_text(strip=True) if found is not None else ""


def _anchor_id(anchor: Tag) -> str:
    return anchor.get("id") or ""


def _href(anchor: Tag | None) -> str | None:
    if anchor is None:
        return None
    return anchor.get("href") or None


def _first(anchors: list[Tag], predicate) -> Tag | None:
    return next((a for a in anchors if predicate(a)), None)
