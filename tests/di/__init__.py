"""Mock providers for testing."""

from .persistence import MockLocalStoreProvider, MockRemoteStoreProvider
from .container import build_test_container

__all__ = [
    "MockLocalStoreProvider",
    "MockRemoteStoreProvider",
    "build_test_container",
]
