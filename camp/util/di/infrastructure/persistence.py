"""Remote store (PostgreSQL) infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from camp.config import Settings
from camp.domain.repository import RemoteStore
from camp.persistence.database import create_engine, create_session_factory
from camp.persistence.store import PostgresRemoteStore
from camp.util.di.base import ProviderBase
from camp.util.observability import instrument_sqlalchemy


class RemoteStoreProvider(ProviderBase):
    """Remote store component base."""

    __mock_component__ = "persistence"


class ProdRemoteStoreProvider(RemoteStoreProvider):
    """Production remote store using PostgreSQL.

    Everything is APP-scoped: the store opens one short-lived session per
    operation or transaction from the shared session factory.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed with the container."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()
        logfire.info("Database engine disposed")

    @provide
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide
    def get_remote_store(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> RemoteStore:
        """Provide PostgreSQL remote store."""
        return PostgresRemoteStore(session_factory)
