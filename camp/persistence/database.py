"""Engine and session factory for the PostgreSQL remote store."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from camp.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine.

    Statements share the gateway's timeout, so a hung query fails as a
    transient error instead of blocking a request.
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        connect_args={"command_timeout": settings.gateway.remote_timeout_seconds},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory used by PostgresRemoteStore.

    Sessions only run Core statements, so nothing needs expiring after
    commit and nothing is flushed implicitly.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
