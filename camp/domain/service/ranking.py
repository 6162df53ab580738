"""Feed ranking.

Hot rank is a time-decayed popularity value used only for ordering. It is
never persisted:

    hot_rank = score / max(1, age_hours)

An item keeps its full score for its whole first hour; decay starts after
that. Negative scores give negative ranks and sort below zero.
"""

from datetime import datetime
from typing import Iterable

from camp.domain.model import ContentItem
from camp.domain.value import FeedSort

SECONDS_PER_HOUR = 3600


def age_in_hours(created_at: datetime, now: datetime) -> float:
    """Hours elapsed between creation and ``now``."""
    return (now - created_at).total_seconds() / SECONDS_PER_HOUR


def hot_rank(
    score: int,
    created_at: datetime,
    now: datetime,
    min_age_hours: float = 1.0,
) -> float:
    """Time-decayed popularity of an item.

    Args:
        score: Upvotes minus downvotes
        created_at: Item creation time
        now: Reference time
        min_age_hours: Age floor below which no decay applies

    Returns:
        ``score / max(min_age_hours, age_hours)``
    """
    return score / max(min_age_hours, age_in_hours(created_at, now))


def sort_feed(
    items: Iterable[ContentItem],
    sort: FeedSort,
    now: datetime,
    min_age_hours: float = 1.0,
) -> list[ContentItem]:
    """Order items for a feed.

    Ties on the primary key are broken by ``created_at`` (newest first) and
    then by id, so the order is fully deterministic.
    """
    if sort == FeedSort.RECENT:
        return sorted(items, key=lambda i: (i.created_at, i.id), reverse=True)

    if sort == FeedSort.SCORE:
        return sorted(
            items, key=lambda i: (i.score, i.created_at, i.id), reverse=True
        )

    def hot_key(item: ContentItem) -> tuple[float, datetime, str]:
        rank = hot_rank(item.score, item.created_at, now, min_age_hours)
        return (rank, item.created_at, item.id)

    return sorted(items, key=hot_key, reverse=True)
