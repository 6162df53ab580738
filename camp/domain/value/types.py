"""Value objects for the engagement engine.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from camp.domain.value.common import ValueObject
from camp.domain.value.identifiers import TripId


class VoteType(str, Enum):
    """Direction of a requested vote."""

    UP = "up"
    DOWN = "down"


class VoteState(str, Enum):
    """Stored vote state of one user on one item.

    ``NONE`` is never persisted: it is the absence of a vote record.
    """

    NONE = "none"
    UP = "up"
    DOWN = "down"

    @classmethod
    def from_vote_type(cls, vote_type: "VoteType | None") -> "VoteState":
        """Map a stored vote type (or its absence) to a state."""
        if vote_type is None:
            return cls.NONE
        return cls(vote_type.value)


class ContentType(str, Enum):
    """Votable, commentable community content."""

    TIP = "tip"
    QUESTION = "question"
    GEAR_REVIEW = "gear_review"
    PHOTO_STORY = "photo_story"


class FeedSort(str, Enum):
    """Sort order for content feeds."""

    RECENT = "recent"  # created_at DESC
    SCORE = "score"  # score DESC, newest first on ties
    HOT = "hot"  # score / max(1, age_hours) DESC, newest first on ties


class TripResourceKind(str, Enum):
    """Kinds of per-trip list data."""

    PACKING = "packing"
    MEALS = "meals"


class MealCategory(str, Enum):
    """Meal slot within a trip day."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class ResourceKey(ValueObject):
    """Address of one trip-scoped collection.

    The remote store addresses it as ``{kind}/{trip_id}``; the local store
    uses a prefixed flat key chosen from configuration.
    """

    kind: TripResourceKind
    trip_id: TripId

    @field_validator("trip_id")
    @classmethod
    def validate_trip_id(cls, v: str) -> str:
        """Trip id must not be blank."""
        if not v or not v.strip():
            raise ValueError("Trip id must not be empty")
        return v

    @property
    def remote_key(self) -> str:
        return f"{self.kind.value}/{self.trip_id}"

    def __str__(self) -> str:
        return self.remote_key
