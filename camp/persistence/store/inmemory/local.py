"""In-memory local store for testing."""

from typing import Optional

from camp.persistence.store.local import KeyValueLocalStore


class InMemoryLocalStore(KeyValueLocalStore):
    """In-memory implementation of LocalStore for testing."""

    def __init__(self) -> None:
        super().__init__()
        self._values: dict[str, str] = {}

    async def _load(self, address: str) -> Optional[str]:
        return self._values.get(address)

    async def _save(self, address: str, payload: str) -> None:
        self._values[address] = payload

    def addresses(self) -> list[str]:
        """Keys written so far."""
        return list(self._values)
