"""Dependency injection wiring.

Every provider base listed in ``PROVIDERS`` is either concrete (no
subclasses) or a mockable component whose subclasses are split into one
production and one mock implementation by their ``__is_mock__`` flag.
"""

from typing import Type

from camp.util.di.application import ProdApplicationProvider
from camp.util.di.base import Component, ProviderBase
from camp.util.di.core import ProdConfigProvider
from camp.util.di.domain import ProdDomainProvider
from camp.util.di.infrastructure import (
    LocalStoreProvider,
    ProdLocalStoreProvider,
    ProdRemoteStoreProvider,
    RemoteStoreProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Stores can be swapped for in-memory doubles
    RemoteStoreProvider,
    LocalStoreProvider,
]


def mockable_components() -> set[Component]:
    """Names of the components that ship a mock implementation."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__subclasses__() and getattr(base, "__mock_component__", None)
    }


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for ``base``.

    Raises:
        ValueError: If a mockable component lacks the requested variant
    """
    variants = {
        getattr(cls, "__is_mock__", False): cls for cls in base.__subclasses__()
    }
    if not variants:
        return base

    try:
        return variants[use_mock]
    except KeyError:
        component = getattr(base, "__mock_component__", base.__name__)
        variant = "mock" if use_mock else "production"
        raise ValueError(f"{component} has no {variant} provider") from None


__all__ = [
    "Component",
    "LocalStoreProvider",
    "PROVIDERS",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdLocalStoreProvider",
    "ProdRemoteStoreProvider",
    "ProviderBase",
    "RemoteStoreProvider",
    "get_provider",
    "mockable_components",
]
