"""Trip packing list and meal plan routes.

Trip lists live on the remote store until it denies access, then on this
server's local store. Every response says which one was used.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from pydantic import BaseModel, Field

from camp.application.usecase.trip import (
    AddMealRequest,
    AddMealResponse,
    AddMealUseCase,
    AddPackingItemRequest,
    AddPackingItemResponse,
    AddPackingItemUseCase,
    GetMealStatsRequest,
    GetMealStatsUseCase,
    ListMealsRequest,
    ListMealsResponse,
    ListMealsUseCase,
    ListPackingItemsRequest,
    ListPackingItemsUseCase,
    MealStatsResponse,
    PackingListResponse,
    RemoveMealRequest,
    RemoveMealUseCase,
    RemovePackingItemRequest,
    RemovePackingItemUseCase,
    TripMutationResponse,
    UpdateMealRequest,
    UpdateMealUseCase,
    UpdatePackingItemRequest,
    UpdatePackingItemUseCase,
)
from camp.domain.value import MealCategory

router = APIRouter(prefix="/trips", tags=["trips"], route_class=DishkaRoute)


class AddPackingItemBody(BaseModel):
    """Add packing item request body."""

    label: str = Field(min_length=1, max_length=200)
    category: str = Field(default="other", min_length=1, max_length=50)
    quantity: int = Field(default=1, ge=1)
    notes: str | None = Field(default=None, max_length=1000)


class UpdatePackingItemBody(BaseModel):
    """Update packing item request body."""

    label: str | None = Field(default=None, min_length=1, max_length=200)
    category: str | None = Field(default=None, min_length=1, max_length=50)
    quantity: int | None = Field(default=None, ge=1)
    is_packed: bool | None = None
    notes: str | None = Field(default=None, max_length=1000)


class AddMealBody(BaseModel):
    """Add meal request body."""

    name: str = Field(min_length=1, max_length=200)
    category: MealCategory
    day_index: int = Field(ge=0)
    notes: str | None = Field(default=None, max_length=1000)


class UpdateMealBody(BaseModel):
    """Update meal request body."""

    name: str | None = Field(default=None, min_length=1, max_length=200)
    category: MealCategory | None = None
    day_index: int | None = Field(default=None, ge=0)
    notes: str | None = Field(default=None, max_length=1000)


# Packing list


@router.get("/{trip_id}/packing", response_model=PackingListResponse)
async def list_packing_items(
    trip_id: str, use_case: FromDishka[ListPackingItemsUseCase]
) -> PackingListResponse:
    """Packing list of a trip."""
    return await use_case.execute(ListPackingItemsRequest(trip_id=trip_id))


@router.post(
    "/{trip_id}/packing",
    response_model=AddPackingItemResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_packing_item(
    trip_id: str,
    body: AddPackingItemBody,
    use_case: FromDishka[AddPackingItemUseCase],
) -> AddPackingItemResponse:
    """Add an item to a trip's packing list."""
    return await use_case.execute(
        AddPackingItemRequest(trip_id=trip_id, **body.model_dump())
    )


@router.patch("/{trip_id}/packing/{item_id}", response_model=TripMutationResponse)
async def update_packing_item(
    trip_id: str,
    item_id: str,
    body: UpdatePackingItemBody,
    use_case: FromDishka[UpdatePackingItemUseCase],
) -> TripMutationResponse:
    """Edit an item or mark it (un)packed. Only sent fields change."""
    return await use_case.execute(
        UpdatePackingItemRequest(
            trip_id=trip_id, item_id=item_id, **body.model_dump(exclude_unset=True)
        )
    )


@router.delete("/{trip_id}/packing/{item_id}", response_model=TripMutationResponse)
async def remove_packing_item(
    trip_id: str,
    item_id: str,
    use_case: FromDishka[RemovePackingItemUseCase],
) -> TripMutationResponse:
    """Remove an item from a trip's packing list."""
    return await use_case.execute(
        RemovePackingItemRequest(trip_id=trip_id, item_id=item_id)
    )


# Meal plan


@router.get("/{trip_id}/meals", response_model=ListMealsResponse)
async def list_meals(
    trip_id: str,
    use_case: FromDishka[ListMealsUseCase],
    day_index: int | None = Query(default=None, ge=0),
    category: MealCategory | None = Query(default=None),
) -> ListMealsResponse:
    """Meals of a trip, optionally for one day or category."""
    return await use_case.execute(
        ListMealsRequest(trip_id=trip_id, day_index=day_index, category=category)
    )


@router.get("/{trip_id}/meals/stats", response_model=MealStatsResponse)
async def get_meal_stats(
    trip_id: str,
    use_case: FromDishka[GetMealStatsUseCase],
    total_days: int = Query(ge=0),
) -> MealStatsResponse:
    """Meal counts per category against 3 main meals a day."""
    return await use_case.execute(
        GetMealStatsRequest(trip_id=trip_id, total_days=total_days)
    )


@router.post(
    "/{trip_id}/meals",
    response_model=AddMealResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_meal(
    trip_id: str, body: AddMealBody, use_case: FromDishka[AddMealUseCase]
) -> AddMealResponse:
    """Plan a meal."""
    return await use_case.execute(AddMealRequest(trip_id=trip_id, **body.model_dump()))


@router.patch("/{trip_id}/meals/{meal_id}", response_model=TripMutationResponse)
async def update_meal(
    trip_id: str,
    meal_id: str,
    body: UpdateMealBody,
    use_case: FromDishka[UpdateMealUseCase],
) -> TripMutationResponse:
    """Edit a meal. Only sent fields change."""
    return await use_case.execute(
        UpdateMealRequest(
            trip_id=trip_id, meal_id=meal_id, **body.model_dump(exclude_unset=True)
        )
    )


@router.delete("/{trip_id}/meals/{meal_id}", response_model=TripMutationResponse)
async def remove_meal(
    trip_id: str, meal_id: str, use_case: FromDishka[RemoveMealUseCase]
) -> TripMutationResponse:
    """Delete a meal."""
    return await use_case.execute(RemoveMealRequest(trip_id=trip_id, meal_id=meal_id))
