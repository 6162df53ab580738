"""In-memory store implementations for testing."""

from .local import InMemoryLocalStore
from .remote import InMemoryRemoteStore, InMemoryRemoteTransaction

__all__ = [
    "InMemoryLocalStore",
    "InMemoryRemoteStore",
    "InMemoryRemoteTransaction",
]
