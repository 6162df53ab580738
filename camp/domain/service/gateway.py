"""Persistence gateway with one-way failover.

Every trip resource (one trip's packing list, one trip's meals) is served by
its own ``ResourceGateway``. Operations go to the remote store first. When
the remote store explicitly denies access, the gateway flips that
resource's ``uses_local_store`` flag and replays the operation against the
local store. From then on the resource never touches the remote store
again.

Flag lifecycle: starts False, set to True at most once, reset only by
restarting the process. It is not persisted. Writes made locally are never
reconciled back to the remote store.
"""

import asyncio
from enum import Enum
from typing import Any, Awaitable, Callable, TypeVar

import logfire

from camp.config import GatewaySettings, LocalStoreSettings
from camp.domain.error import PermissionDeniedError, TransientStoreError
from camp.domain.repository import LocalStore, RemoteStore, ResourceStore
from camp.domain.value import ResourceKey, TripResourceKind

from .base import Service

T = TypeVar("T")

Operation = Callable[[ResourceStore, str], Awaitable[T]]


class FailureClass(str, Enum):
    """How a remote failure is handled."""

    PERMANENT_FOR_SESSION = "permanent_for_session"  # fail over
    TRANSIENT = "transient"  # surface, keep remote
    OTHER = "other"  # surface, keep remote


def classify_failure(exc: BaseException) -> FailureClass:
    """Classify an exception raised by the remote store."""
    if isinstance(exc, PermissionDeniedError):
        return FailureClass.PERMANENT_FOR_SESSION
    if isinstance(exc, (TransientStoreError, asyncio.TimeoutError)):
        return FailureClass.TRANSIENT
    return FailureClass.OTHER


class ResourceGateway:
    """Routes one resource's operations to the remote or local store."""

    def __init__(
        self,
        key: ResourceKey,
        remote_store: RemoteStore,
        local_store: LocalStore,
        local_address: str,
        remote_timeout_seconds: float,
    ) -> None:
        self.key = key
        self.remote_store = remote_store
        self.local_store = local_store
        self.remote_address = key.remote_key
        self.local_address = local_address
        self.remote_timeout_seconds = remote_timeout_seconds

        # One-way: False -> True, never back within this process
        self.uses_local_store = False

    async def get(self) -> list[dict[str, Any]]:
        """Read the whole collection."""
        return await self._dispatch("get", lambda store, address: store.get(address))

    async def add(self, record: dict[str, Any]) -> str:
        """Append a document and return its id."""
        return await self._dispatch(
            "add", lambda store, address: store.add(address, record)
        )

    async def update(self, record_id: str, patch: dict[str, Any]) -> None:
        """Merge a patch into one document."""
        await self._dispatch(
            "update", lambda store, address: store.update(address, record_id, patch)
        )

    async def remove(self, record_id: str) -> None:
        """Delete one document."""
        await self._dispatch(
            "remove", lambda store, address: store.remove(address, record_id)
        )

    async def _dispatch(self, name: str, operation: Operation[T]) -> T:
        if self.uses_local_store:
            return await operation(self.local_store, self.local_address)

        try:
            return await asyncio.wait_for(
                operation(self.remote_store, self.remote_address),
                timeout=self.remote_timeout_seconds,
            )
        except Exception as e:
            failure = classify_failure(e)
            if failure != FailureClass.PERMANENT_FOR_SESSION:
                logfire.warn(
                    "Remote store operation failed",
                    resource=str(self.key),
                    operation=name,
                    failure=failure.value,
                    error=str(e),
                )
                if isinstance(e, asyncio.TimeoutError):
                    raise TransientStoreError(
                        f"Remote {name} on {self.key} timed out after "
                        f"{self.remote_timeout_seconds}s"
                    ) from e
                raise

            self.uses_local_store = True
            logfire.warn(
                "Remote store denied access, failing over to local store",
                resource=str(self.key),
                operation=name,
                local_address=self.local_address,
                error=str(e),
            )

        return await operation(self.local_store, self.local_address)


class PersistenceGateway(Service):
    """Registry of per-resource gateways.

    Built once per process so failover flags survive across requests.
    """

    def __init__(
        self,
        remote_store: RemoteStore,
        local_store: LocalStore,
        gateway: GatewaySettings,
        local: LocalStoreSettings,
    ) -> None:
        """Initialize persistence gateway.

        Args:
            remote_store: Authoritative multi-client store
            local_store: Single-device fallback store
            gateway: Remote timeout configuration
            local: Local key prefixes
        """
        self.remote_store = remote_store
        self.local_store = local_store
        self.gateway = gateway
        self.local = local
        self._resources: dict[ResourceKey, ResourceGateway] = {}

    def for_resource(self, key: ResourceKey) -> ResourceGateway:
        """Gateway of one resource, created on first use."""
        resource = self._resources.get(key)
        if resource is None:
            resource = ResourceGateway(
                key=key,
                remote_store=self.remote_store,
                local_store=self.local_store,
                local_address=self.local_address(key),
                remote_timeout_seconds=self.gateway.remote_timeout_seconds,
            )
            self._resources[key] = resource
        return resource

    def uses_local_store(self, key: ResourceKey) -> bool:
        """Whether a resource has failed over."""
        resource = self._resources.get(key)
        return resource.uses_local_store if resource else False

    def local_address(self, key: ResourceKey) -> str:
        """Flat device-local key of a resource, e.g. ``@meals_<trip_id>``."""
        prefixes = {
            TripResourceKind.PACKING: self.local.packing_prefix,
            TripResourceKind.MEALS: self.local.meals_prefix,
        }
        return f"{prefixes[key.kind]}{key.trip_id}"

    def failed_over(self) -> list[ResourceKey]:
        """Resources now served by the local store, in first-use order."""
        return [key for key, r in self._resources.items() if r.uses_local_store]
