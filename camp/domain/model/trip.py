"""Trip-scoped list records.

Packing items and meals are plain child records of a trip. They are stored
as whole collections of JSON documents, either remotely or on the device.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from camp.domain.model.common import DomainModel
from camp.domain.value import MealCategory, RecordId, TripId


class TripRecord(DomainModel):
    """Base for records that live in a trip collection."""

    id: RecordId
    trip_id: TripId
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class PackingItem(TripRecord):
    """Packing list entry."""

    label: str = Field(min_length=1, max_length=200)
    category: str = Field(default="other", min_length=1, max_length=50)
    quantity: int = Field(default=1, ge=1)
    is_packed: bool = False
    is_auto_generated: bool = False
    notes: Optional[str] = Field(default=None, max_length=1000)


class Meal(TripRecord):
    """Planned meal for one day of a trip."""

    name: str = Field(min_length=1, max_length=200)
    category: MealCategory
    day_index: int = Field(ge=0)
    notes: Optional[str] = Field(default=None, max_length=1000)


class MealStats(DomainModel):
    """Meal counts per category for a trip."""

    breakfast: int = 0
    lunch: int = 0
    dinner: int = 0
    snack: int = 0
    total: int = 0
    possible_meals: int = 0  # 3 main meals per day
