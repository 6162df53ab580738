"""Trip list use cases."""

from .meals import (
    AddMealRequest,
    AddMealResponse,
    AddMealUseCase,
    GetMealStatsRequest,
    GetMealStatsUseCase,
    ListMealsRequest,
    ListMealsResponse,
    ListMealsUseCase,
    MealResponse,
    MealStatsResponse,
    RemoveMealRequest,
    RemoveMealUseCase,
    UpdateMealRequest,
    UpdateMealUseCase,
)
from .packing import (
    AddPackingItemRequest,
    AddPackingItemResponse,
    AddPackingItemUseCase,
    ListPackingItemsRequest,
    ListPackingItemsUseCase,
    PackingItemResponse,
    PackingListResponse,
    RemovePackingItemRequest,
    RemovePackingItemUseCase,
    TripMutationResponse,
    UpdatePackingItemRequest,
    UpdatePackingItemUseCase,
)

__all__ = [
    "AddMealRequest",
    "AddMealResponse",
    "AddMealUseCase",
    "AddPackingItemRequest",
    "AddPackingItemResponse",
    "AddPackingItemUseCase",
    "GetMealStatsRequest",
    "GetMealStatsUseCase",
    "ListMealsRequest",
    "ListMealsResponse",
    "ListMealsUseCase",
    "ListPackingItemsRequest",
    "ListPackingItemsUseCase",
    "MealResponse",
    "MealStatsResponse",
    "PackingItemResponse",
    "PackingListResponse",
    "RemoveMealRequest",
    "RemoveMealUseCase",
    "RemovePackingItemRequest",
    "RemovePackingItemUseCase",
    "TripMutationResponse",
    "UpdateMealRequest",
    "UpdateMealUseCase",
    "UpdatePackingItemRequest",
    "UpdatePackingItemUseCase",
]
