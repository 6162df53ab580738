#!/usr/bin/env python3
"""Upgrade the remote store schema.

Usage:
    python scripts/run_migrations.py            # to head
    python scripts/run_migrations.py 3c1f0a7d2b44
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from camp.config import Settings
from camp.util.logging import setup_logging
from camp.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    target = argv[0] if argv else "head"
    config = Config("alembic.ini")
    config.set_main_option("sqlalchemy.url", settings.database_url)

    with logfire.span("run_migrations", target=target):
        try:
            command.upgrade(config, target)
        except Exception as e:
            logfire.error(
                "Migration failed",
                target=target,
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The deploy must stop rather than serve a half-migrated schema
            raise

    logfire.info("Schema at revision", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
