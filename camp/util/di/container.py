"""Production container and FastAPI wiring."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from camp.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Container with every production provider.

    Settings come from the environment when first resolved.
    """
    providers = [get_provider(base)() for base in PROVIDERS]
    # Request objects reach REQUEST-scoped providers through FastapiProvider
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach ``container`` to ``app`` for ``FromDishka`` injection."""
    setup_dishka(container, app)
