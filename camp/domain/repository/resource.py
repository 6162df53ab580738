"""Collection store interface shared by both persistence backends."""

from abc import ABC, abstractmethod
from typing import Any


class ResourceStore(ABC):
    """Store of whole collections of JSON documents.

    A collection is addressed by a single string. Every document carries an
    ``id`` field unique within its collection.
    """

    @abstractmethod
    async def get(self, address: str) -> list[dict[str, Any]]:
        """Return every document of a collection (empty if none).

        Args:
            address: Collection address

        Returns:
            Documents in insertion order
        """
        pass

    @abstractmethod
    async def add(self, address: str, record: dict[str, Any]) -> str:
        """Append a document.

        A document without an ``id`` gets a generated one.

        Args:
            address: Collection address
            record: JSON-serializable document

        Returns:
            The document id
        """
        pass

    @abstractmethod
    async def update(self, address: str, record_id: str, patch: dict[str, Any]) -> None:
        """Merge ``patch`` into one document.

        Raises:
            NotFoundError: If the document does not exist
        """
        pass

    @abstractmethod
    async def remove(self, address: str, record_id: str) -> None:
        """Delete one document. Removing a missing document is a no-op."""
        pass
