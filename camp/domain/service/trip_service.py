"""Trip resource domain services (packing list, meals)."""

from datetime import datetime
from typing import Any, ClassVar, Generic, Optional, TypeVar
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from camp.domain.error import NotFoundError, ValidationError
from camp.domain.model import Meal, MealStats, PackingItem, TripRecord
from camp.domain.value import (
    MealCategory,
    RecordId,
    ResourceKey,
    TripId,
    TripResourceKind,
)

from .base import Service
from .gateway import PersistenceGateway

R = TypeVar("R", bound=TripRecord)

# Fields a patch may never change
_IMMUTABLE_FIELDS = {"id", "trip_id", "created_at"}


class TripResourceService(Service, Generic[R]):
    """Collection of trip-scoped records behind the persistence gateway.

    Documents are validated into ``record_model`` when read. Documents that
    fail validation are quarantined: logged and left out of the result.
    """

    kind: ClassVar[TripResourceKind]
    record_model: ClassVar[type[TripRecord]]

    def __init__(self, gateway: PersistenceGateway) -> None:
        """Initialize trip resource service.

        Args:
            gateway: Persistence gateway shared by the whole process
        """
        self.gateway = gateway

    def resource_key(self, trip_id: TripId) -> ResourceKey:
        return ResourceKey(kind=self.kind, trip_id=trip_id)

    def uses_local_store(self, trip_id: TripId) -> bool:
        """Whether this trip's collection has failed over to the device."""
        return self.gateway.uses_local_store(self.resource_key(trip_id))

    async def list_records(self, trip_id: TripId) -> list[R]:
        """All valid records of a trip."""
        key = self.resource_key(trip_id)
        with logfire.span("trip_resource.list", resource=str(key)):
            documents = await self.gateway.for_resource(key).get()
            return self._deserialize(key, documents)

    async def add(self, record: R) -> RecordId:
        """Persist a new record.

        The record carries its own id so an optimistic caller can show it
        before the write settles.
        """
        key = self.resource_key(record.trip_id)
        with logfire.span("trip_resource.add", resource=str(key), record_id=record.id):
            record_id = await self.gateway.for_resource(key).add(
                record.model_dump(mode="json")
            )
            return RecordId(record_id)

    async def update(
        self, trip_id: TripId, record_id: RecordId, changes: dict[str, Any]
    ) -> None:
        """Apply field changes to one record.

        Raises:
            ValidationError: If a change names an unknown or immutable field
            NotFoundError: If the record does not exist
        """
        unknown = set(changes) - set(self.record_model.model_fields)
        immutable = set(changes) & _IMMUTABLE_FIELDS
        if unknown or immutable:
            raise ValidationError(
                f"Cannot update fields {sorted(unknown | immutable)} "
                f"of {self.kind.value} records"
            )

        key = self.resource_key(trip_id)
        with logfire.span("trip_resource.update", resource=str(key), record_id=record_id):
            current = next(
                (r for r in await self.list_records(trip_id) if r.id == record_id), None
            )
            if current is None:
                raise NotFoundError(self.kind.value, record_id)

            # Validate the merged record so a bad value never reaches storage
            try:
                updated = self.record_model.model_validate(
                    {**current.model_dump(), **changes, "updated_at": datetime.now()}
                )
            except PydanticValidationError as e:
                fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
                raise ValidationError(
                    f"Invalid values for {fields} of {self.kind.value} records"
                ) from e

            document = updated.model_dump(mode="json")
            patch = {name: document[name] for name in [*changes, "updated_at"]}
            await self.gateway.for_resource(key).update(record_id, patch)

    async def remove(self, trip_id: TripId, record_id: RecordId) -> None:
        """Delete one record."""
        key = self.resource_key(trip_id)
        with logfire.span("trip_resource.remove", resource=str(key), record_id=record_id):
            await self.gateway.for_resource(key).remove(record_id)

    def _deserialize(self, key: ResourceKey, documents: list[dict[str, Any]]) -> list[R]:
        records: list[R] = []
        for document in documents:
            try:
                records.append(self.record_model.model_validate(document))  # type: ignore[arg-type]
            except PydanticValidationError as e:
                logfire.warn(
                    "Quarantined invalid document",
                    resource=str(key),
                    record_id=document.get("id"),
                    errors=e.error_count(),
                )
        return records


class PackingService(TripResourceService[PackingItem]):
    """Packing list of a trip."""

    kind = TripResourceKind.PACKING
    record_model = PackingItem

    @staticmethod
    def new_item(
        trip_id: TripId,
        label: str,
        category: str = "other",
        quantity: int = 1,
        notes: Optional[str] = None,
        is_auto_generated: bool = False,
    ) -> PackingItem:
        """Build an unpacked item with a fresh id."""
        now = datetime.now()
        return PackingItem(
            id=RecordId(uuid4().hex),
            trip_id=trip_id,
            label=label.strip(),
            category=category,
            quantity=quantity,
            notes=notes.strip() if notes and notes.strip() else None,
            is_packed=False,
            is_auto_generated=is_auto_generated,
            created_at=now,
            updated_at=now,
        )

    async def set_packed(
        self, trip_id: TripId, item_id: RecordId, is_packed: bool
    ) -> None:
        """Mark an item packed or unpacked."""
        await self.update(trip_id, item_id, {"is_packed": is_packed})


class MealService(TripResourceService[Meal]):
    """Meal plan of a trip."""

    kind = TripResourceKind.MEALS
    record_model = Meal

    @staticmethod
    def new_meal(
        trip_id: TripId,
        name: str,
        category: MealCategory,
        day_index: int,
        notes: Optional[str] = None,
    ) -> Meal:
        """Build a meal with a fresh id."""
        now = datetime.now()
        return Meal(
            id=RecordId(uuid4().hex),
            trip_id=trip_id,
            name=name.strip(),
            category=category,
            day_index=day_index,
            notes=notes,
            created_at=now,
            updated_at=now,
        )

    async def meals_for_day(
        self,
        trip_id: TripId,
        day_index: int,
        category: Optional[MealCategory] = None,
    ) -> list[Meal]:
        """Meals of one day, optionally of one category."""
        meals = await self.list_records(trip_id)
        return [
            m
            for m in meals
            if m.day_index == day_index and (category is None or m.category == category)
        ]

    async def stats(self, trip_id: TripId, total_days: int) -> MealStats:
        """Meal counts per category for a trip of ``total_days`` days."""
        meals = await self.list_records(trip_id)
        counts = {category: 0 for category in MealCategory}
        for meal in meals:
            counts[meal.category] += 1

        return MealStats(
            breakfast=counts[MealCategory.BREAKFAST],
            lunch=counts[MealCategory.LUNCH],
            dinner=counts[MealCategory.DINNER],
            snack=counts[MealCategory.SNACK],
            total=len(meals),
            possible_meals=total_days * 3,
        )
