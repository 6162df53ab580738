"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from camp.interface.api.errors import register_error_handlers
from camp.interface.api.routes import content, health, trips, votes
from camp.util.di.container import create_container, setup_di
from camp.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use (defaults to the production container)
    """
    app_instance = FastAPI(
        title="Camp Engagement API",
        description="Community votes, feeds and comments, plus trip packing lists and meal plans",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(content.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(trips.router)

    return app_instance
