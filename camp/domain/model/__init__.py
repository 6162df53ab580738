"""Domain model entities."""

from camp.domain.model.comment import Comment
from camp.domain.model.content import ContentItem
from camp.domain.model.trip import Meal, MealStats, PackingItem, TripRecord
from camp.domain.model.vote import (
    VoteRecord,
    VoteTransition,
    resolve_transition,
    vote_key,
)

__all__ = [
    "Comment",
    "ContentItem",
    "Meal",
    "MealStats",
    "PackingItem",
    "TripRecord",
    "VoteRecord",
    "VoteTransition",
    "resolve_transition",
    "vote_key",
]
