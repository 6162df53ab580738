"""Unit tests for optimistic vote and trip list commands."""

import pytest

from camp.application.optimistic import (
    AddRecordCommand,
    OptimisticUpdateCoordinator,
    RemoveRecordCommand,
    UpdateRecordCommand,
    VoteCommand,
    VoteView,
)
from camp.domain.error import TransientStoreError
from camp.domain.service import ContentService, PackingService, VoteService
from camp.domain.value import ContentId, ContentType, TripId, UserId, VoteState, VoteType
from camp.persistence.store.inmemory import InMemoryRemoteStore
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

TRIP = TripId("sierra")


class TestVoteCommand:
    """Tests for VoteCommand."""

    def test_predict_uses_transition_table(self):
        command = VoteCommand(
            vote_service=None,  # type: ignore[arg-type]
            content_type=ContentType.TIP,
            content_id=ContentId("c1"),
            user_id=UserId("alice"),
            vote_type=VoteType.DOWN,
        )
        current = VoteView(user_vote=VoteState.UP, upvote_count=3, downvote_count=1, score=2)

        predicted = command.predict(current)

        assert predicted == VoteView(
            user_vote=VoteState.DOWN, upvote_count=2, downvote_count=2, score=0
        )

    @pytest.mark.asyncio
    async def test_successful_vote_keeps_prediction(self, unit_env):
        content = await unit_env.get(ContentService)
        votes = await unit_env.get(VoteService)
        item = await content.create_content(ContentType.TIP, UserId("author"))
        coordinator = OptimisticUpdateCoordinator({item.id: VoteView.from_item(item)})

        outcome = await coordinator.apply(
            VoteCommand(votes, ContentType.TIP, item.id, UserId("alice"), VoteType.UP)
        )

        assert outcome.committed is True
        assert outcome.result.score == 1
        assert coordinator.get(item.id) == VoteView(
            user_vote=VoteState.UP, upvote_count=1, downvote_count=0, score=1
        )

    @pytest.mark.asyncio
    async def test_failed_vote_reverts_silently(self, unit_env):
        content = await unit_env.get(ContentService)
        votes = await unit_env.get(VoteService)
        remote = await unit_env.get(InMemoryRemoteStore)
        item = await content.create_content(ContentType.TIP, UserId("author"))
        before = VoteView.from_item(item)
        coordinator = OptimisticUpdateCoordinator({item.id: before})
        remote.fail_transactions(TransientStoreError("offline"))

        outcome = await coordinator.apply(
            VoteCommand(votes, ContentType.TIP, item.id, UserId("alice"), VoteType.UP)
        )

        assert outcome.committed is False
        assert isinstance(outcome.error, TransientStoreError)
        assert coordinator.get(item.id) == before


class TestTripListCommands:
    """Tests for record commands over the persistence gateway."""

    @pytest.mark.asyncio
    async def test_add_toggle_remove(self, unit_env):
        packing = await unit_env.get(PackingService)
        key = packing.resource_key(TRIP)
        coordinator = OptimisticUpdateCoordinator({key: []})
        item = packing.new_item(TRIP, "Tent")

        await coordinator.apply(AddRecordCommand(packing, item))
        await coordinator.apply(
            UpdateRecordCommand(packing, TRIP, item.id, {"is_packed": True})
        )

        assert [i.is_packed for i in coordinator.get(key)] == [True]
        assert [i.is_packed for i in await packing.list_records(TRIP)] == [True]

        await coordinator.apply(RemoveRecordCommand(packing, TRIP, item.id))

        assert coordinator.get(key) == []
        assert await packing.list_records(TRIP) == []

    @pytest.mark.asyncio
    async def test_failed_add_reverts_and_surfaces(self, unit_env):
        packing = await unit_env.get(PackingService)
        remote = await unit_env.get(InMemoryRemoteStore)
        key = packing.resource_key(TRIP)
        existing = packing.new_item(TRIP, "Stove")
        await packing.add(existing)
        coordinator = OptimisticUpdateCoordinator({key: [existing]})
        remote.make_unreachable(f"packing/{TRIP}")

        with pytest.raises(TransientStoreError):
            await coordinator.apply(
                AddRecordCommand(packing, packing.new_item(TRIP, "Fuel"))
            )

        assert coordinator.get(key) == [existing]

    @pytest.mark.asyncio
    async def test_add_after_denial_commits_locally(self, unit_env):
        """Failover happens below the coordinator; the prediction stands."""
        packing = await unit_env.get(PackingService)
        remote = await unit_env.get(InMemoryRemoteStore)
        key = packing.resource_key(TRIP)
        coordinator = OptimisticUpdateCoordinator({key: []})
        remote.deny_access(f"packing/{TRIP}")
        item = packing.new_item(TRIP, "Rope")

        outcome = await coordinator.apply(AddRecordCommand(packing, item))

        assert outcome.committed is True
        assert coordinator.get(key) == [item]
        assert packing.uses_local_store(TRIP) is True

    @pytest.mark.asyncio
    async def test_failed_remove_restores_item(self, unit_env):
        packing = await unit_env.get(PackingService)
        remote = await unit_env.get(InMemoryRemoteStore)
        key = packing.resource_key(TRIP)
        item = packing.new_item(TRIP, "Map")
        await packing.add(item)
        coordinator = OptimisticUpdateCoordinator({key: [item]})
        remote.make_unreachable(f"packing/{TRIP}")

        with pytest.raises(TransientStoreError):
            await coordinator.apply(RemoveRecordCommand(packing, TRIP, item.id))

        assert coordinator.get(key) == [item]
