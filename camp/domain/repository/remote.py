"""Remote store interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from typing import Optional, Sequence

from camp.domain.model import Comment, ContentItem, VoteRecord
from camp.domain.repository.resource import ResourceStore
from camp.domain.value import ContentId, ContentType, UserId


class RemoteTransaction(ABC):
    """Read-then-conditionally-write unit of work.

    Reads go to the store immediately; writes are buffered and applied
    together when the surrounding ``RemoteStore.transaction()`` block exits
    cleanly. The commit succeeds only if nothing read inside the
    transaction changed in the meantime, otherwise ``ConflictError`` is
    raised and no write lands.
    """

    @abstractmethod
    async def get_content(
        self, content_type: ContentType, content_id: ContentId
    ) -> Optional[ContentItem]:
        """Read a content item and remember its version."""
        pass

    @abstractmethod
    async def get_vote(
        self, content_id: ContentId, user_id: UserId
    ) -> Optional[VoteRecord]:
        """Read a vote record and remember whether it existed."""
        pass

    @abstractmethod
    def put_content(self, item: ContentItem) -> None:
        """Buffer an update of a content item read in this transaction."""
        pass

    @abstractmethod
    def put_vote(self, vote: VoteRecord) -> None:
        """Buffer a create-or-replace of a vote record."""
        pass

    @abstractmethod
    def delete_vote(self, content_id: ContentId, user_id: UserId) -> None:
        """Buffer deletion of a vote record."""
        pass

    @abstractmethod
    def delete_content(self, item: ContentItem) -> None:
        """Buffer deletion of a content item with all its votes and comments."""
        pass

    @abstractmethod
    def add_comment(self, comment: Comment) -> None:
        """Buffer insertion of a comment."""
        pass


class RemoteStore(ResourceStore):
    """Authoritative, multi-client store.

    Besides collections it owns content items, vote records and comments.
    Engagement counters are only ever changed inside ``transaction()``.
    """

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[RemoteTransaction]:
        """Open an atomic unit of work.

        Usage:
            async with store.transaction() as tx:
                item = await tx.get_content(ContentType.TIP, content_id)
                tx.put_content(item.apply_vote(transition))

        Raises:
            ConflictError: If a read value changed before commit
        """
        pass

    @abstractmethod
    async def create_content(self, item: ContentItem) -> ContentItem:
        """Insert a new content item."""
        pass

    @abstractmethod
    async def find_content(
        self, content_type: ContentType, content_id: ContentId
    ) -> Optional[ContentItem]:
        """Find a content item outside of a transaction."""
        pass

    @abstractmethod
    async def list_content(self, content_type: ContentType) -> list[ContentItem]:
        """Return every content item of a type (unsorted)."""
        pass

    @abstractmethod
    async def find_vote(
        self, content_id: ContentId, user_id: UserId
    ) -> Optional[VoteRecord]:
        """Find a user's vote on an item."""
        pass

    @abstractmethod
    async def find_votes_by_user(
        self, user_id: UserId, content_ids: Sequence[ContentId]
    ) -> list[VoteRecord]:
        """Find a user's votes on several items (batch query)."""
        pass

    @abstractmethod
    async def count_votes(self, content_id: ContentId) -> int:
        """Count vote records attached to an item."""
        pass

    @abstractmethod
    async def list_comments(self, content_id: ContentId) -> list[Comment]:
        """Return comments of an item, oldest first."""
        pass
