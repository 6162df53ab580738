"""PostgreSQL implementation of the remote store."""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional, Sequence
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.exc import DBAPIError, InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from camp.domain.error import (
    ConflictError,
    NotFoundError,
    PermissionDeniedError,
    TransientStoreError,
)
from camp.domain.model import Comment, ContentItem, VoteRecord, vote_key
from camp.domain.repository import RemoteStore, RemoteTransaction
from camp.domain.value import ContentId, ContentType, UserId
from camp.persistence.mappers import (
    comment_to_dict,
    content_to_dict,
    row_to_comment,
    row_to_content,
    row_to_vote,
    vote_to_dict,
)
from camp.persistence.tables import (
    comments_table,
    content_items_table,
    trip_records_table,
    votes_table,
)

# SQLSTATE codes
PERMISSION_DENIED_CODES = {"42501"}  # insufficient_privilege
CONFLICT_CODES = {
    "40001",  # serialization_failure
    "40P01",  # deadlock_detected
    "23505",  # unique_violation (concurrent first vote)
}


def _sqlstate(exc: DBAPIError) -> Optional[str]:
    orig = exc.orig
    return getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)


def translate_db_error(exc: Exception) -> Exception:
    """Map a driver error onto the store failure taxonomy.

    Returns the original exception when it fits no category.
    """
    if isinstance(exc, DBAPIError):
        code = _sqlstate(exc)
        if code in PERMISSION_DENIED_CODES:
            return PermissionDeniedError(f"Remote store denied access: {exc.orig}")
        if code in CONFLICT_CODES:
            return ConflictError(f"Concurrent write detected: {exc.orig}")
        if isinstance(exc, (OperationalError, InterfaceError)) or exc.connection_invalidated:
            return TransientStoreError(f"Remote store unreachable: {exc.orig}")
        return exc
    if isinstance(exc, OSError):  # includes TimeoutError, ConnectionRefusedError
        return TransientStoreError(f"Remote store unreachable: {exc}")
    return exc


class PostgresRemoteTransaction(RemoteTransaction):
    """Buffered unit of work over one database transaction.

    Content rows are written with ``WHERE version = <version read>``; a
    missing row at write time means another writer got there first.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self._read_versions: dict[ContentId, int] = {}
        self._read_votes: dict[str, Optional[VoteRecord]] = {}
        self._content_updates: dict[ContentId, ContentItem] = {}
        self._content_deletes: dict[ContentId, ContentItem] = {}
        self._vote_writes: dict[str, tuple[ContentId, UserId, Optional[VoteRecord]]] = {}
        self._comments: list[Comment] = []

    async def get_content(
        self, content_type: ContentType, content_id: ContentId
    ) -> Optional[ContentItem]:
        stmt = select(content_items_table).where(
            content_items_table.c.id == content_id,
            content_items_table.c.content_type == content_type.value,
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None
        item = row_to_content(row._asdict())
        self._read_versions[item.id] = item.version
        return item

    async def get_vote(
        self, content_id: ContentId, user_id: UserId
    ) -> Optional[VoteRecord]:
        stmt = select(votes_table).where(
            votes_table.c.content_id == content_id,
            votes_table.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        vote = row_to_vote(row._asdict()) if row else None
        self._read_votes[vote_key(content_id, user_id)] = vote
        return vote

    def put_content(self, item: ContentItem) -> None:
        self._require_read(item.id)
        self._content_updates[item.id] = item

    def put_vote(self, vote: VoteRecord) -> None:
        self._vote_writes[vote.key] = (vote.content_id, vote.user_id, vote)

    def delete_vote(self, content_id: ContentId, user_id: UserId) -> None:
        self._vote_writes[vote_key(content_id, user_id)] = (content_id, user_id, None)

    def delete_content(self, item: ContentItem) -> None:
        self._require_read(item.id)
        self._content_deletes[item.id] = item

    def add_comment(self, comment: Comment) -> None:
        self._comments.append(comment)

    async def flush(self) -> None:
        """Apply buffered writes inside the open database transaction.

        Raises:
            ConflictError: If a content row changed since it was read
        """
        for content_id in self._content_deletes:
            # Votes and comments go with the row (ON DELETE CASCADE)
            stmt = delete(content_items_table).where(
                content_items_table.c.id == content_id,
                content_items_table.c.version == self._read_versions[content_id],
            )
            result = await self.session.execute(stmt)
            if result.rowcount == 0:  # type: ignore[attr-defined]
                raise ConflictError(f"Content {content_id} changed before delete")

        for content_id, item in self._content_updates.items():
            stmt = (
                update(content_items_table)
                .where(
                    content_items_table.c.id == content_id,
                    content_items_table.c.version == self._read_versions[content_id],
                )
                .values(
                    upvote_count=item.upvote_count,
                    downvote_count=item.downvote_count,
                    score=item.score,
                    comment_count=item.comment_count,
                    version=item.version,
                )
            )
            result = await self.session.execute(stmt)
            if result.rowcount == 0:  # type: ignore[attr-defined]
                raise ConflictError(f"Content {content_id} changed before update")

        for key, (content_id, user_id, vote) in self._vote_writes.items():
            existed = self._read_votes.get(key) is not None
            if vote is None:
                await self.session.execute(
                    delete(votes_table).where(
                        votes_table.c.content_id == content_id,
                        votes_table.c.user_id == user_id,
                    )
                )
            elif existed:
                await self.session.execute(
                    update(votes_table)
                    .where(
                        votes_table.c.content_id == content_id,
                        votes_table.c.user_id == user_id,
                    )
                    .values(vote_type=vote.vote_type.value)
                )
            else:
                await self.session.execute(insert(votes_table).values(**vote_to_dict(vote)))

        for comment in self._comments:
            await self.session.execute(
                insert(comments_table).values(**comment_to_dict(comment))
            )

    def _require_read(self, content_id: ContentId) -> None:
        if content_id not in self._read_versions:
            raise ValueError(
                f"Content {content_id} must be read in the transaction before writing"
            )


class PostgresRemoteStore(RemoteStore):
    """PostgreSQL implementation of RemoteStore.

    Holds a session factory rather than a session: it lives for the whole
    process and opens one short transaction per operation.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize store with a session factory.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self.session_factory = session_factory

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[AsyncSession]:
        try:
            async with self.session_factory() as session, session.begin():
                yield session
        except (DBAPIError, OSError) as e:
            translated = translate_db_error(e)
            if translated is e:
                raise
            logfire.warn(
                "Remote store error",
                error_type=type(translated).__name__,
                error=str(e),
            )
            raise translated from e

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[RemoteTransaction]:
        async with self._session() as session:
            tx = PostgresRemoteTransaction(session)
            yield tx
            await tx.flush()

    async def create_content(self, item: ContentItem) -> ContentItem:
        """Insert a new content item."""
        async with self._session() as session:
            await session.execute(
                insert(content_items_table).values(**content_to_dict(item))
            )
        logfire.info("Content created", content_id=item.id)
        return item

    async def find_content(
        self, content_type: ContentType, content_id: ContentId
    ) -> Optional[ContentItem]:
        """Find a content item by ID."""
        async with self._session() as session:
            stmt = select(content_items_table).where(
                content_items_table.c.id == content_id,
                content_items_table.c.content_type == content_type.value,
            )
            result = await session.execute(stmt)
            row = result.fetchone()
            return row_to_content(row._asdict()) if row else None

    async def list_content(self, content_type: ContentType) -> list[ContentItem]:
        """All items of a type. Rows failing validation are skipped."""
        async with self._session() as session:
            stmt = select(content_items_table).where(
                content_items_table.c.content_type == content_type.value
            )
            result = await session.execute(stmt)
            rows = result.fetchall()

        items = []
        for row in rows:
            try:
                items.append(row_to_content(row._asdict()))
            except PydanticValidationError as e:
                logfire.warn(
                    "Quarantined invalid content row",
                    content_id=row.id,
                    errors=e.error_count(),
                )
        return items

    async def find_vote(
        self, content_id: ContentId, user_id: UserId
    ) -> Optional[VoteRecord]:
        """Find a user's vote on an item."""
        async with self._session() as session:
            stmt = select(votes_table).where(
                votes_table.c.content_id == content_id,
                votes_table.c.user_id == user_id,
            )
            result = await session.execute(stmt)
            row = result.fetchone()
            return row_to_vote(row._asdict()) if row else None

    async def find_votes_by_user(
        self, user_id: UserId, content_ids: Sequence[ContentId]
    ) -> list[VoteRecord]:
        """Find a user's votes on several items (batch query)."""
        if not content_ids:
            return []

        async with self._session() as session:
            stmt = select(votes_table).where(
                votes_table.c.user_id == user_id,
                votes_table.c.content_id.in_(list(content_ids)),
            )
            result = await session.execute(stmt)
            return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def count_votes(self, content_id: ContentId) -> int:
        """Count vote rows of an item."""
        async with self._session() as session:
            stmt = (
                select(func.count())
                .select_from(votes_table)
                .where(votes_table.c.content_id == content_id)
            )
            result = await session.execute(stmt)
            return result.scalar() or 0

    async def list_comments(self, content_id: ContentId) -> list[Comment]:
        """Comments of an item, oldest first."""
        async with self._session() as session:
            stmt = (
                select(comments_table)
                .where(comments_table.c.content_id == content_id)
                .order_by(comments_table.c.created_at)
            )
            result = await session.execute(stmt)
            return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def get(self, address: str) -> list[dict[str, Any]]:
        """Documents of a trip collection in insertion order."""
        async with self._session() as session:
            stmt = (
                select(trip_records_table.c.data)
                .where(trip_records_table.c.resource_key == address)
                .order_by(trip_records_table.c.position, trip_records_table.c.id)
            )
            result = await session.execute(stmt)
            return [dict(row.data) for row in result.fetchall()]

    async def add(self, address: str, record: dict[str, Any]) -> str:
        """Append a document to a trip collection."""
        record_id = str(record.get("id") or uuid4().hex)
        document = {**record, "id": record_id}
        async with self._session() as session:
            # Serialize adds per collection until commit so positions stay unique
            await session.execute(
                select(func.pg_advisory_xact_lock(func.hashtext(address)))
            )
            position_stmt = select(
                func.coalesce(func.max(trip_records_table.c.position), 0)
            ).where(trip_records_table.c.resource_key == address)
            position = (await session.execute(position_stmt)).scalar() or 0
            await session.execute(
                insert(trip_records_table).values(
                    resource_key=address,
                    id=record_id,
                    position=position + 1,
                    data=document,
                )
            )
        return record_id

    async def update(self, address: str, record_id: str, patch: dict[str, Any]) -> None:
        """Merge a patch into one document."""
        async with self._session() as session:
            stmt = (
                select(trip_records_table.c.data)
                .where(
                    trip_records_table.c.resource_key == address,
                    trip_records_table.c.id == record_id,
                )
                .with_for_update()
            )
            row = (await session.execute(stmt)).fetchone()
            if row is None:
                raise NotFoundError("record", record_id)

            merged = {**row.data, **patch, "id": record_id}
            await session.execute(
                update(trip_records_table)
                .where(
                    trip_records_table.c.resource_key == address,
                    trip_records_table.c.id == record_id,
                )
                .values(data=merged)
            )

    async def remove(self, address: str, record_id: str) -> None:
        """Delete one document."""
        async with self._session() as session:
            await session.execute(
                delete(trip_records_table).where(
                    trip_records_table.c.resource_key == address,
                    trip_records_table.c.id == record_id,
                )
            )
