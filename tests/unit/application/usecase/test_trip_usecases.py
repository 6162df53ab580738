"""Unit tests for packing list and meal plan use cases."""

import pytest

from camp.application.usecase.trip import (
    AddMealRequest,
    AddMealUseCase,
    AddPackingItemRequest,
    AddPackingItemUseCase,
    GetMealStatsRequest,
    GetMealStatsUseCase,
    ListMealsRequest,
    ListMealsUseCase,
    ListPackingItemsRequest,
    ListPackingItemsUseCase,
    RemovePackingItemRequest,
    RemovePackingItemUseCase,
    UpdateMealRequest,
    UpdateMealUseCase,
    UpdatePackingItemRequest,
    UpdatePackingItemUseCase,
)
from camp.domain.error import NotFoundError
from camp.domain.value import MealCategory
from camp.persistence.store.inmemory import InMemoryRemoteStore
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestPackingUseCases:
    """Tests for the packing list flow."""

    @pytest.mark.asyncio
    async def test_add_pack_and_list(self, unit_env):
        add = await unit_env.get(AddPackingItemUseCase)
        update = await unit_env.get(UpdatePackingItemUseCase)
        listing = await unit_env.get(ListPackingItemsUseCase)

        tent = await add.execute(AddPackingItemRequest(trip_id="t1", label=" Tent "))
        await add.execute(AddPackingItemRequest(trip_id="t1", label="Stove"))
        await update.execute(
            UpdatePackingItemRequest(trip_id="t1", item_id=tent.item.id, is_packed=True)
        )
        response = await listing.execute(ListPackingItemsRequest(trip_id="t1"))

        assert tent.item.label == "Tent"
        assert [i.label for i in response.items] == ["Tent", "Stove"]
        assert response.packed_count == 1
        assert response.uses_local_store is False

    @pytest.mark.asyncio
    async def test_denied_remote_switches_to_local(self, unit_env):
        remote = await unit_env.get(InMemoryRemoteStore)
        add = await unit_env.get(AddPackingItemUseCase)
        listing = await unit_env.get(ListPackingItemsUseCase)
        remote.deny_access("packing/t1")

        added = await add.execute(AddPackingItemRequest(trip_id="t1", label="Rope"))
        response = await listing.execute(ListPackingItemsRequest(trip_id="t1"))

        assert added.uses_local_store is True
        assert [i.label for i in response.items] == ["Rope"]
        assert response.uses_local_store is True
        assert remote.documents("packing/t1") == []

    @pytest.mark.asyncio
    async def test_update_missing_item(self, unit_env):
        update = await unit_env.get(UpdatePackingItemUseCase)

        with pytest.raises(NotFoundError):
            await update.execute(
                UpdatePackingItemRequest(trip_id="t1", item_id="nope", is_packed=True)
            )


class TestMealUseCases:
    """Tests for the meal plan flow."""

    @pytest.mark.asyncio
    async def test_list_filters_and_orders_by_day(self, unit_env):
        add = await unit_env.get(AddMealUseCase)
        listing = await unit_env.get(ListMealsUseCase)
        for name, category, day in [
            ("Chili", MealCategory.DINNER, 1),
            ("Oats", MealCategory.BREAKFAST, 0),
            ("Pasta", MealCategory.DINNER, 0),
        ]:
            await add.execute(
                AddMealRequest(trip_id="t1", name=name, category=category, day_index=day)
            )

        everything = await listing.execute(ListMealsRequest(trip_id="t1"))
        dinners = await listing.execute(
            ListMealsRequest(trip_id="t1", category=MealCategory.DINNER)
        )
        day_zero = await listing.execute(ListMealsRequest(trip_id="t1", day_index=0))

        assert [m.name for m in everything.meals] == ["Oats", "Pasta", "Chili"]
        assert [m.name for m in dinners.meals] == ["Pasta", "Chili"]
        assert [m.name for m in day_zero.meals] == ["Oats", "Pasta"]

    @pytest.mark.asyncio
    async def test_update_moves_meal_and_stats_follow(self, unit_env):
        add = await unit_env.get(AddMealUseCase)
        update = await unit_env.get(UpdateMealUseCase)
        stats = await unit_env.get(GetMealStatsUseCase)
        added = await add.execute(
            AddMealRequest(
                trip_id="t1", name="Wraps", category=MealCategory.LUNCH, day_index=0
            )
        )
        await add.execute(
            AddMealRequest(
                trip_id="t1", name="Trail mix", category=MealCategory.SNACK, day_index=0
            )
        )

        await update.execute(
            UpdateMealRequest(
                trip_id="t1", meal_id=added.meal.id, category=MealCategory.DINNER
            )
        )
        response = await stats.execute(GetMealStatsRequest(trip_id="t1", total_days=2))

        assert (response.lunch, response.dinner, response.snack) == (0, 1, 1)
        assert response.total == 2
        assert response.possible_meals == 6


class TestRemovePackingItem:
    """Tests for RemovePackingItemUseCase."""

    @pytest.mark.asyncio
    async def test_remove_is_idempotent(self, unit_env):
        add = await unit_env.get(AddPackingItemUseCase)
        remove = await unit_env.get(RemovePackingItemUseCase)
        listing = await unit_env.get(ListPackingItemsUseCase)
        added = await add.execute(AddPackingItemRequest(trip_id="t1", label="Map"))

        request = RemovePackingItemRequest(trip_id="t1", item_id=added.item.id)
        await remove.execute(request)
        await remove.execute(request)

        response = await listing.execute(ListPackingItemsRequest(trip_id="t1"))
        assert response.items == []
