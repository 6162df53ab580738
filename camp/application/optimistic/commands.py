"""Optimistic commands for votes and trip lists."""

from typing import Any, ClassVar, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

from camp.domain.model import ContentItem, TripRecord, resolve_transition
from camp.domain.service import TripResourceService, VoteService
from camp.domain.value import (
    ContentId,
    ContentType,
    RecordId,
    ResourceKey,
    TripId,
    UserId,
    VoteState,
    VoteType,
)

from .coordinator import FailurePolicy, OptimisticCommand

R = TypeVar("R", bound=TripRecord)


class VoteView(BaseModel):
    """What a user sees of an item's votes."""

    model_config = ConfigDict(frozen=True)

    user_vote: VoteState = VoteState.NONE
    upvote_count: int = 0
    downvote_count: int = 0
    score: int = 0

    @classmethod
    def from_item(
        cls, item: ContentItem, user_vote: VoteState = VoteState.NONE
    ) -> "VoteView":
        return cls(
            user_vote=user_vote,
            upvote_count=item.upvote_count,
            downvote_count=item.downvote_count,
            score=item.score,
        )


class VoteCommand(OptimisticCommand[ContentId, VoteView]):
    """Cast a vote, predicting counters with the ledger's transition table.

    Failures are silent: the view snaps back and nothing is raised.
    """

    policy: ClassVar[FailurePolicy] = FailurePolicy.SILENT

    def __init__(
        self,
        vote_service: VoteService,
        content_type: ContentType,
        content_id: ContentId,
        user_id: UserId,
        vote_type: VoteType,
        baseline: Optional[VoteView] = None,
    ) -> None:
        self.vote_service = vote_service
        self.content_type = content_type
        self.content_id = content_id
        self.user_id = user_id
        self.vote_type = vote_type
        self.baseline = baseline or VoteView()

    @property
    def key(self) -> ContentId:
        return self.content_id

    def predict(self, current: Optional[VoteView]) -> VoteView:
        view = current or self.baseline
        transition = resolve_transition(view.user_vote, self.vote_type)
        # A stale view can be behind the server; never show negative counts
        upvotes = max(0, view.upvote_count + transition.upvote_delta)
        downvotes = max(0, view.downvote_count + transition.downvote_delta)
        return VoteView(
            user_vote=transition.next,
            upvote_count=upvotes,
            downvote_count=downvotes,
            score=upvotes - downvotes,
        )

    async def commit(self) -> ContentItem:
        return await self.vote_service.cast_vote(
            self.content_type, self.content_id, self.user_id, self.vote_type
        )


class _TripListCommand(OptimisticCommand[ResourceKey, list[R]], Generic[R]):
    """Change to a displayed trip list. Failures are surfaced."""

    policy: ClassVar[FailurePolicy] = FailurePolicy.SURFACE

    def __init__(self, service: TripResourceService[R], trip_id: TripId) -> None:
        self.service = service
        self.trip_id = trip_id

    @property
    def key(self) -> ResourceKey:
        return self.service.resource_key(self.trip_id)


class AddRecordCommand(_TripListCommand[R]):
    """Append a record to a trip list."""

    def __init__(self, service: TripResourceService[R], record: R) -> None:
        super().__init__(service, record.trip_id)
        self.record = record

    def predict(self, current: Optional[list[R]]) -> list[R]:
        return [*(current or []), self.record]

    async def commit(self) -> RecordId:
        return await self.service.add(self.record)


class UpdateRecordCommand(_TripListCommand[R]):
    """Change fields of one record, e.g. toggle a packing item."""

    def __init__(
        self,
        service: TripResourceService[R],
        trip_id: TripId,
        record_id: RecordId,
        changes: dict[str, Any],
    ) -> None:
        super().__init__(service, trip_id)
        self.record_id = record_id
        self.changes = changes

    def predict(self, current: Optional[list[R]]) -> list[R]:
        return [
            r.model_copy(update=self.changes) if r.id == self.record_id else r
            for r in current or []
        ]

    async def commit(self) -> None:
        await self.service.update(self.trip_id, self.record_id, self.changes)


class RemoveRecordCommand(_TripListCommand[R]):
    """Drop one record from a trip list."""

    def __init__(
        self, service: TripResourceService[R], trip_id: TripId, record_id: RecordId
    ) -> None:
        super().__init__(service, trip_id)
        self.record_id = record_id

    def predict(self, current: Optional[list[R]]) -> list[R]:
        return [r for r in current or [] if r.id != self.record_id]

    async def commit(self) -> None:
        await self.service.remove(self.trip_id, self.record_id)
