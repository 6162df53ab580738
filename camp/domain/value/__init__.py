"""Domain value objects."""

from camp.domain.value.identifiers import (
    CommentId,
    ContentId,
    RecordId,
    TripId,
    UserId,
)
from camp.domain.value.types import (
    ContentType,
    FeedSort,
    MealCategory,
    ResourceKey,
    TripResourceKind,
    VoteState,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "ContentId",
    "CommentId",
    "TripId",
    "RecordId",
    # Types
    "ContentType",
    "FeedSort",
    "MealCategory",
    "ResourceKey",
    "TripResourceKind",
    "VoteState",
    "VoteType",
]
