"""Logfire setup and instrumentation.

Services emit spans and events straight through logfire::

    with logfire.span("cast_vote", content_id=content_id):
        ...
    logfire.info("Content deleted", content_id=content_id)

Failover to the local store is always a ``logfire.warn`` so it can be
alerted on.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from camp.config import Settings

SERVICE_NAME = "camp-engagement"
SERVICE_VERSION = "0.1.0"


def _should_send(settings: Settings) -> bool:
    # Explicit setting wins, then presence of a token
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return settings.observability.logfire_token is not None


def configure_logfire(settings: Settings) -> None:
    """Configure logfire once per process.

    Without a token (``OBSERVABILITY__LOGFIRE_TOKEN``) and without
    ``OBSERVABILITY__SEND_TO_LOGFIRE=true`` output stays on the console.
    """
    send = _should_send(settings)
    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        token=settings.observability.logfire_token,
        send_to_logfire=send,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace HTTP requests, except health checks.

    Headers are never captured: X-User-Id is the caller's identity.
    """
    logfire.instrument_fastapi(app, capture_headers=False, excluded_urls="/health")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace remote store queries."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
