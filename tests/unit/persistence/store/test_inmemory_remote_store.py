"""Unit tests for the in-memory remote store transactions."""

import pytest

from camp.domain.error import ConflictError, PermissionDeniedError
from camp.domain.model import Comment, VoteRecord
from camp.domain.value import CommentId, ContentId, ContentType, UserId, VoteType
from camp.persistence.store.inmemory import InMemoryRemoteStore
from tests.conftest import make_item

TIP = ContentType.TIP


class TestTransactions:
    """Tests for versioned transactions."""

    @pytest.mark.asyncio
    async def test_stale_read_conflicts(self):
        store = InMemoryRemoteStore()
        await store.create_content(make_item("c1"))

        with pytest.raises(ConflictError):
            async with store.transaction() as tx:
                item = await tx.get_content(TIP, ContentId("c1"))
                # Another writer commits in between
                async with store.transaction() as other:
                    fresh = await other.get_content(TIP, ContentId("c1"))
                    other.put_content(fresh.add_comment())
                tx.put_content(item.add_comment())

        final = await store.find_content(TIP, ContentId("c1"))
        assert final.comment_count == 1

    @pytest.mark.asyncio
    async def test_error_in_body_writes_nothing(self):
        store = InMemoryRemoteStore()
        await store.create_content(make_item("c1"))

        with pytest.raises(RuntimeError):
            async with store.transaction() as tx:
                item = await tx.get_content(TIP, ContentId("c1"))
                tx.put_content(item.add_comment())
                raise RuntimeError("abort")

        assert (await store.find_content(TIP, ContentId("c1"))).comment_count == 0
        assert store.commits == 0

    @pytest.mark.asyncio
    async def test_delete_cascades(self):
        store = InMemoryRemoteStore()
        await store.create_content(make_item("c1"))
        await store.create_content(make_item("c2"))

        async with store.transaction() as tx:
            await tx.get_vote(ContentId("c1"), UserId("u"))
            tx.put_vote(
                VoteRecord(
                    content_id=ContentId("c1"), user_id=UserId("u"), vote_type=VoteType.UP
                )
            )
            tx.add_comment(
                Comment(
                    id=CommentId("k"),
                    content_id=ContentId("c1"),
                    author_id=UserId("u"),
                    text="hi",
                )
            )

        async with store.transaction() as tx:
            item = await tx.get_content(TIP, ContentId("c1"))
            tx.delete_content(item)

        assert await store.find_content(TIP, ContentId("c1")) is None
        assert await store.find_content(TIP, ContentId("c2")) is not None
        assert store.votes_for(ContentId("c1")) == []
        assert await store.list_comments(ContentId("c1")) == []

    @pytest.mark.asyncio
    async def test_duplicate_create_conflicts(self):
        store = InMemoryRemoteStore()
        await store.create_content(make_item("c1"))

        with pytest.raises(ConflictError):
            await store.create_content(make_item("c1"))


class TestFailureInjection:
    """Tests for collection failure hooks."""

    @pytest.mark.asyncio
    async def test_denied_address_only(self):
        store = InMemoryRemoteStore()
        store.deny_access("packing/a")

        with pytest.raises(PermissionDeniedError):
            await store.get("packing/a")
        assert await store.get("packing/b") == []

    @pytest.mark.asyncio
    async def test_failed_transactions(self):
        store = InMemoryRemoteStore()
        store.fail_transactions(PermissionDeniedError("read only"))

        with pytest.raises(PermissionDeniedError):
            async with store.transaction():
                pass

        store.fail_transactions(None)
        async with store.transaction():
            pass
        assert store.commits == 1
