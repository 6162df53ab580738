"""Meal plan use cases."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from camp.domain.service import MealService
from camp.domain.value import MealCategory, RecordId, TripId

from .packing import TripMutationResponse


class MealResponse(BaseModel):
    """Planned meal."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    trip_id: str
    name: str
    category: MealCategory
    day_index: int
    notes: str | None
    created_at: datetime
    updated_at: datetime


class ListMealsRequest(BaseModel):
    """List meals request."""

    trip_id: str
    day_index: int | None = Field(default=None, ge=0)
    category: MealCategory | None = None


class ListMealsResponse(BaseModel):
    """Meals of a trip, ordered by day."""

    trip_id: str
    meals: list[MealResponse]
    uses_local_store: bool


class ListMealsUseCase:
    """Use case for reading a trip's meal plan."""

    def __init__(self, meal_service: MealService) -> None:
        """Initialize list meals use case.

        Args:
            meal_service: Meal plan domain service
        """
        self.meal_service = meal_service

    async def execute(self, request: ListMealsRequest) -> ListMealsResponse:
        trip_id = TripId(request.trip_id)
        if request.day_index is not None:
            meals = await self.meal_service.meals_for_day(
                trip_id, request.day_index, request.category
            )
        else:
            meals = await self.meal_service.list_records(trip_id)
            if request.category is not None:
                meals = [m for m in meals if m.category == request.category]

        # Stable sort keeps insertion order within a day
        meals = sorted(meals, key=lambda m: m.day_index)
        return ListMealsResponse(
            trip_id=trip_id,
            meals=[MealResponse.model_validate(m) for m in meals],
            uses_local_store=self.meal_service.uses_local_store(trip_id),
        )


class AddMealRequest(BaseModel):
    """Add meal request."""

    trip_id: str
    name: str = Field(min_length=1, max_length=200)
    category: MealCategory
    day_index: int = Field(ge=0)
    notes: str | None = Field(default=None, max_length=1000)


class AddMealResponse(BaseModel):
    """Add meal response."""

    meal: MealResponse
    uses_local_store: bool


class AddMealUseCase:
    """Use case for planning a meal."""

    def __init__(self, meal_service: MealService) -> None:
        self.meal_service = meal_service

    async def execute(self, request: AddMealRequest) -> AddMealResponse:
        meal = self.meal_service.new_meal(
            TripId(request.trip_id),
            name=request.name,
            category=request.category,
            day_index=request.day_index,
            notes=request.notes,
        )
        await self.meal_service.add(meal)
        return AddMealResponse(
            meal=MealResponse.model_validate(meal),
            uses_local_store=self.meal_service.uses_local_store(meal.trip_id),
        )


class UpdateMealRequest(BaseModel):
    """Update meal request. Unset fields are left alone."""

    trip_id: str
    meal_id: str
    name: str | None = Field(default=None, min_length=1, max_length=200)
    category: MealCategory | None = None
    day_index: int | None = Field(default=None, ge=0)
    notes: str | None = Field(default=None, max_length=1000)


class UpdateMealUseCase:
    """Use case for editing a meal."""

    def __init__(self, meal_service: MealService) -> None:
        self.meal_service = meal_service

    async def execute(self, request: UpdateMealRequest) -> TripMutationResponse:
        """Execute update flow.

        Raises:
            NotFoundError: If the meal does not exist
        """
        trip_id = TripId(request.trip_id)
        changes = request.model_dump(
            mode="json", exclude_unset=True, exclude={"trip_id", "meal_id"}
        )
        await self.meal_service.update(trip_id, RecordId(request.meal_id), changes)
        return TripMutationResponse(
            uses_local_store=self.meal_service.uses_local_store(trip_id)
        )


class RemoveMealRequest(BaseModel):
    """Remove meal request."""

    trip_id: str
    meal_id: str


class RemoveMealUseCase:
    """Use case for deleting a meal."""

    def __init__(self, meal_service: MealService) -> None:
        self.meal_service = meal_service

    async def execute(self, request: RemoveMealRequest) -> TripMutationResponse:
        trip_id = TripId(request.trip_id)
        await self.meal_service.remove(trip_id, RecordId(request.meal_id))
        return TripMutationResponse(
            uses_local_store=self.meal_service.uses_local_store(trip_id)
        )


class GetMealStatsRequest(BaseModel):
    """Get meal stats request."""

    trip_id: str
    total_days: int = Field(ge=0)


class MealStatsResponse(BaseModel):
    """Meal counts per category and planning coverage."""

    breakfast: int
    lunch: int
    dinner: int
    snack: int
    total: int
    possible_meals: int


class GetMealStatsUseCase:
    """Use case for summarizing a trip's meal plan."""

    def __init__(self, meal_service: MealService) -> None:
        self.meal_service = meal_service

    async def execute(self, request: GetMealStatsRequest) -> MealStatsResponse:
        stats = await self.meal_service.stats(
            TripId(request.trip_id), request.total_days
        )
        return MealStatsResponse(**stats.model_dump())
