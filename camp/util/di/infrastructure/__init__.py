"""Infrastructure providers."""

# Import bases
from .local import LocalStoreProvider
from .persistence import RemoteStoreProvider

# Import implementations (needed for __subclasses__())
from .local import ProdLocalStoreProvider  # noqa: F401
from .persistence import ProdRemoteStoreProvider  # noqa: F401

__all__ = [
    "LocalStoreProvider",
    "ProdLocalStoreProvider",
    "ProdRemoteStoreProvider",
    "RemoteStoreProvider",
]
