"""Packing list use cases.

Responses report ``uses_local_store`` so clients can tell the user their
list is only being kept on this device.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from camp.domain.service import PackingService
from camp.domain.value import RecordId, TripId


class PackingItemResponse(BaseModel):
    """Packing list entry."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    trip_id: str
    label: str
    category: str
    quantity: int
    is_packed: bool
    is_auto_generated: bool
    notes: str | None
    created_at: datetime
    updated_at: datetime


class PackingListResponse(BaseModel):
    """Packing list of a trip."""

    trip_id: str
    items: list[PackingItemResponse]
    packed_count: int
    uses_local_store: bool


class ListPackingItemsRequest(BaseModel):
    """List packing items request."""

    trip_id: str


class ListPackingItemsUseCase:
    """Use case for reading a trip's packing list."""

    def __init__(self, packing_service: PackingService) -> None:
        """Initialize list packing items use case.

        Args:
            packing_service: Packing list domain service
        """
        self.packing_service = packing_service

    async def execute(self, request: ListPackingItemsRequest) -> PackingListResponse:
        trip_id = TripId(request.trip_id)
        items = await self.packing_service.list_records(trip_id)
        return PackingListResponse(
            trip_id=trip_id,
            items=[PackingItemResponse.model_validate(item) for item in items],
            packed_count=sum(1 for item in items if item.is_packed),
            uses_local_store=self.packing_service.uses_local_store(trip_id),
        )


class AddPackingItemRequest(BaseModel):
    """Add packing item request."""

    trip_id: str
    label: str = Field(min_length=1, max_length=200)
    category: str = Field(default="other", min_length=1, max_length=50)
    quantity: int = Field(default=1, ge=1)
    notes: str | None = Field(default=None, max_length=1000)


class AddPackingItemResponse(BaseModel):
    """Add packing item response."""

    item: PackingItemResponse
    uses_local_store: bool


class AddPackingItemUseCase:
    """Use case for adding an item to a packing list."""

    def __init__(self, packing_service: PackingService) -> None:
        self.packing_service = packing_service

    async def execute(self, request: AddPackingItemRequest) -> AddPackingItemResponse:
        """Execute add flow.

        Raises:
            TransientStoreError: If the remote store is temporarily unreachable
        """
        item = self.packing_service.new_item(
            TripId(request.trip_id),
            label=request.label,
            category=request.category,
            quantity=request.quantity,
            notes=request.notes,
        )
        await self.packing_service.add(item)
        return AddPackingItemResponse(
            item=PackingItemResponse.model_validate(item),
            uses_local_store=self.packing_service.uses_local_store(item.trip_id),
        )


class UpdatePackingItemRequest(BaseModel):
    """Update packing item request. Unset fields are left alone."""

    trip_id: str
    item_id: str
    label: str | None = Field(default=None, min_length=1, max_length=200)
    category: str | None = Field(default=None, min_length=1, max_length=50)
    quantity: int | None = Field(default=None, ge=1)
    is_packed: bool | None = None
    notes: str | None = Field(default=None, max_length=1000)


class TripMutationResponse(BaseModel):
    """Where a trip list mutation was stored."""

    uses_local_store: bool


class UpdatePackingItemUseCase:
    """Use case for editing or (un)packing an item."""

    def __init__(self, packing_service: PackingService) -> None:
        self.packing_service = packing_service

    async def execute(self, request: UpdatePackingItemRequest) -> TripMutationResponse:
        """Execute update flow.

        Raises:
            NotFoundError: If the item does not exist
        """
        trip_id = TripId(request.trip_id)
        changes = request.model_dump(exclude_unset=True, exclude={"trip_id", "item_id"})
        await self.packing_service.update(trip_id, RecordId(request.item_id), changes)
        return TripMutationResponse(
            uses_local_store=self.packing_service.uses_local_store(trip_id)
        )


class RemovePackingItemRequest(BaseModel):
    """Remove packing item request."""

    trip_id: str
    item_id: str


class RemovePackingItemUseCase:
    """Use case for deleting an item from a packing list."""

    def __init__(self, packing_service: PackingService) -> None:
        self.packing_service = packing_service

    async def execute(self, request: RemovePackingItemRequest) -> TripMutationResponse:
        trip_id = TripId(request.trip_id)
        await self.packing_service.remove(trip_id, RecordId(request.item_id))
        return TripMutationResponse(
            uses_local_store=self.packing_service.uses_local_store(trip_id)
        )
