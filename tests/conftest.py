"""Test configuration and fixtures."""

from datetime import datetime, timedelta

from camp.domain.model import ContentItem
from camp.domain.value import ContentId, ContentType, UserId

# Fixed reference time so ranking assertions are exact
NOW = datetime(2026, 6, 1, 12, 0, 0)


def make_item(
    content_id: str,
    score: int = 0,
    age: timedelta = timedelta(0),
    content_type: ContentType = ContentType.TIP,
    author_id: str = "author",
    hidden: bool = False,
) -> ContentItem:
    """Helper building a content item with consistent counters.

    Positive scores become upvotes, negative scores downvotes.
    """
    return ContentItem(
        id=ContentId(content_id),
        content_type=content_type,
        author_id=UserId(author_id),
        upvote_count=max(score, 0),
        downvote_count=max(-score, 0),
        score=score,
        hidden=hidden,
        created_at=NOW - age,
    )
