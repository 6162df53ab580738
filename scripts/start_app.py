#!/usr/bin/env python3
"""Serve the API with uvicorn.

Logfire is configured before the app is built so FastAPI and SQLAlchemy
instrumentation attach to the configured instance.
"""

import sys

import logfire
import uvicorn

from camp.config import Settings
from camp.interface.api.app import create_app
from camp.util.logging import setup_logging
from camp.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    try:
        app = create_app()
        logfire.info(
            "Serving camp engagement API",
            host=settings.host,
            port=settings.port,
            environment=settings.environment,
        )
        uvicorn.run(
            app,
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "API failed to start",
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
