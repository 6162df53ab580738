"""In-memory remote store for testing.

Behaves like the real remote store (versioned transactions, cascading
deletes) and can be told to misbehave per collection address, so failover
paths are testable without a database.
"""

import asyncio
from contextlib import asynccontextmanager
from copy import deepcopy
from typing import Any, AsyncIterator, Optional, Sequence
from uuid import uuid4

from camp.domain.error import (
    ConflictError,
    NotFoundError,
    PermissionDeniedError,
    TransientStoreError,
)
from camp.domain.model import Comment, ContentItem, VoteRecord, vote_key
from camp.domain.repository import RemoteStore, RemoteTransaction
from camp.domain.value import CommentId, ContentId, ContentType, UserId


class InMemoryRemoteTransaction(RemoteTransaction):
    """Unit of work validated against the versions it read."""

    def __init__(self, store: "InMemoryRemoteStore") -> None:
        self.store = store
        self._read_versions: dict[ContentId, Optional[int]] = {}
        self._read_votes: dict[str, Optional[VoteRecord]] = {}
        self._content_updates: dict[ContentId, ContentItem] = {}
        self._content_deletes: set[ContentId] = set()
        self._vote_writes: dict[str, Optional[VoteRecord]] = {}
        self._comments: list[Comment] = []

    async def get_content(
        self, content_type: ContentType, content_id: ContentId
    ) -> Optional[ContentItem]:
        await self.store._pause()
        item = self.store._content.get(content_id)
        if item is not None and item.content_type != content_type:
            item = None
        self._read_versions[content_id] = item.version if item else None
        return item

    async def get_vote(
        self, content_id: ContentId, user_id: UserId
    ) -> Optional[VoteRecord]:
        await self.store._pause()
        key = vote_key(content_id, user_id)
        vote = self.store._votes.get(key)
        self._read_votes[key] = vote
        return vote

    def put_content(self, item: ContentItem) -> None:
        self._content_updates[item.id] = item

    def put_vote(self, vote: VoteRecord) -> None:
        self._vote_writes[vote.key] = vote

    def delete_vote(self, content_id: ContentId, user_id: UserId) -> None:
        self._vote_writes[vote_key(content_id, user_id)] = None

    def delete_content(self, item: ContentItem) -> None:
        self._content_deletes.add(item.id)

    def add_comment(self, comment: Comment) -> None:
        self._comments.append(comment)

    def commit(self) -> None:
        """Validate reads and apply writes.

        Runs without awaiting, so it is atomic on the event loop.

        Raises:
            ConflictError: If anything read has changed since
        """
        store = self.store
        if store._pending_conflicts > 0:
            store._pending_conflicts -= 1
            raise ConflictError("Injected conflict")

        for content_id, version in self._read_versions.items():
            current = store._content.get(content_id)
            if (current.version if current else None) != version:
                raise ConflictError(f"Content {content_id} changed during transaction")

        for key, vote in self._read_votes.items():
            if store._votes.get(key) != vote:
                raise ConflictError(f"Vote {key} changed during transaction")

        for content_id in self._content_deletes:
            store._content.pop(content_id, None)
            store._votes = {
                k: v for k, v in store._votes.items() if v.content_id != content_id
            }
            store._comments = {
                k: c for k, c in store._comments.items() if c.content_id != content_id
            }

        for content_id, item in self._content_updates.items():
            if content_id not in self._content_deletes:
                store._content[content_id] = item

        for key, vote in self._vote_writes.items():
            if vote is None:
                store._votes.pop(key, None)
            elif vote.content_id not in self._content_deletes:
                store._votes[key] = vote

        for comment in self._comments:
            store._comments[comment.id] = comment

        store.commits += 1


class InMemoryRemoteStore(RemoteStore):
    """In-memory implementation of RemoteStore for testing."""

    def __init__(self) -> None:
        self._content: dict[ContentId, ContentItem] = {}
        self._votes: dict[str, VoteRecord] = {}
        self._comments: dict[CommentId, Comment] = {}
        self._records: dict[str, list[dict[str, Any]]] = {}

        self._denied: set[str] = set()
        self._unreachable: set[str] = set()
        self._stalled: set[str] = set()
        self._pending_conflicts = 0
        self._transaction_error: Optional[Exception] = None

        self.commits = 0
        self.calls: list[tuple[str, str]] = []  # (operation, address)

    # ------------------------------------------------------------------
    # Failure injection
    # ------------------------------------------------------------------

    def deny_access(self, address: str) -> None:
        """Refuse every collection operation on ``address``."""
        self._denied.add(address)

    def make_unreachable(self, address: str) -> None:
        """Fail collection operations on ``address`` as a network error."""
        self._unreachable.add(address)

    def stall(self, address: str) -> None:
        """Never answer collection operations on ``address``."""
        self._stalled.add(address)

    def restore(self, address: str) -> None:
        """Undo any failure injected for ``address``."""
        self._denied.discard(address)
        self._unreachable.discard(address)
        self._stalled.discard(address)

    def inject_conflicts(self, count: int) -> None:
        """Make the next ``count`` commits fail with ConflictError."""
        self._pending_conflicts = count

    def fail_transactions(self, error: Optional[Exception]) -> None:
        """Make every transaction raise ``error`` (None to stop)."""
        self._transaction_error = error

    async def _pause(self) -> None:
        # Yield to the loop like real I/O so concurrent callers interleave
        await asyncio.sleep(0)

    async def _check(self, operation: str, address: str) -> None:
        self.calls.append((operation, address))
        await self._pause()
        if address in self._denied:
            raise PermissionDeniedError(f"Permission denied for {address}")
        if address in self._unreachable:
            raise TransientStoreError(f"Network error for {address}")
        if address in self._stalled:
            await asyncio.Event().wait()

    # ------------------------------------------------------------------
    # Content, votes, comments
    # ------------------------------------------------------------------

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[RemoteTransaction]:
        if self._transaction_error is not None:
            raise self._transaction_error
        tx = InMemoryRemoteTransaction(self)
        yield tx
        tx.commit()

    async def create_content(self, item: ContentItem) -> ContentItem:
        """Insert a new content item."""
        if item.id in self._content:
            raise ConflictError(f"Content {item.id} already exists")
        self._content[item.id] = item
        return item

    async def find_content(
        self, content_type: ContentType, content_id: ContentId
    ) -> Optional[ContentItem]:
        """Find a content item by ID."""
        item = self._content.get(content_id)
        if item is None or item.content_type != content_type:
            return None
        return item

    async def list_content(self, content_type: ContentType) -> list[ContentItem]:
        """All items of a type."""
        return [i for i in self._content.values() if i.content_type == content_type]

    async def find_vote(
        self, content_id: ContentId, user_id: UserId
    ) -> Optional[VoteRecord]:
        """Find a user's vote on an item."""
        return self._votes.get(vote_key(content_id, user_id))

    async def find_votes_by_user(
        self, user_id: UserId, content_ids: Sequence[ContentId]
    ) -> list[VoteRecord]:
        """Find a user's votes on several items (batch query)."""
        wanted = set(content_ids)
        return [
            v
            for v in self._votes.values()
            if v.user_id == user_id and v.content_id in wanted
        ]

    async def count_votes(self, content_id: ContentId) -> int:
        """Count vote records of an item."""
        return sum(1 for v in self._votes.values() if v.content_id == content_id)

    async def list_comments(self, content_id: ContentId) -> list[Comment]:
        """Comments of an item, oldest first."""
        comments = [c for c in self._comments.values() if c.content_id == content_id]
        return sorted(comments, key=lambda c: c.created_at)

    def votes_for(self, content_id: ContentId) -> list[VoteRecord]:
        """Every vote record of an item."""
        return [v for v in self._votes.values() if v.content_id == content_id]

    def documents(self, address: str) -> list[dict[str, Any]]:
        """Stored documents of a collection, ignoring injected failures."""
        return deepcopy(self._records.get(address, []))

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------

    async def get(self, address: str) -> list[dict[str, Any]]:
        await self._check("get", address)
        return deepcopy(self._records.get(address, []))

    async def add(self, address: str, record: dict[str, Any]) -> str:
        await self._check("add", address)
        record_id = str(record.get("id") or uuid4().hex)
        self._records.setdefault(address, []).append(
            deepcopy({**record, "id": record_id})
        )
        return record_id

    async def update(self, address: str, record_id: str, patch: dict[str, Any]) -> None:
        await self._check("update", address)
        records = self._records.get(address, [])
        for index, record in enumerate(records):
            if record.get("id") == record_id:
                records[index] = deepcopy({**record, **patch, "id": record_id})
                return
        raise NotFoundError("record", record_id)

    async def remove(self, address: str, record_id: str) -> None:
        await self._check("remove", address)
        records = self._records.get(address, [])
        self._records[address] = [r for r in records if r.get("id") != record_id]
