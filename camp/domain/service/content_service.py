"""Content domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from camp.config import FeedSettings, VotingSettings
from camp.domain.error import NotAuthorizedError, NotFoundError, UnauthenticatedError
from camp.domain.model import Comment, ContentItem
from camp.domain.repository import RemoteStore
from camp.domain.value import CommentId, ContentId, ContentType, FeedSort, UserId

from .base import Service
from .ranking import sort_feed
from .retry import retry_on_conflict


class ContentService(Service):
    """Domain service for content items, their feeds and comments."""

    def __init__(
        self,
        remote_store: RemoteStore,
        voting: VotingSettings,
        feed: FeedSettings,
    ) -> None:
        """Initialize content service.

        Args:
            remote_store: Authoritative content store
            voting: Conflict retry policy for counter updates
            feed: Feed page size and ranking floor
        """
        self.remote_store = remote_store
        self.voting = voting
        self.feed = feed

    async def create_content(
        self,
        content_type: ContentType,
        author_id: UserId,
        text: str = "",
        content_id: Optional[ContentId] = None,
        created_at: Optional[datetime] = None,
    ) -> ContentItem:
        """Create a content item with zeroed counters.

        Raises:
            UnauthenticatedError: If author_id is empty
        """
        if not author_id or not author_id.strip():
            raise UnauthenticatedError("post")

        item = ContentItem(
            id=content_id or ContentId(uuid4().hex),
            content_type=content_type,
            author_id=author_id,
            text=text,
            created_at=created_at or datetime.now(),
        )
        with logfire.span(
            "create_content", content_type=content_type.value, content_id=item.id
        ):
            return await self.remote_store.create_content(item)

    async def get_content(
        self, content_type: ContentType, content_id: ContentId
    ) -> ContentItem:
        """Get a content item.

        Raises:
            NotFoundError: If the item does not exist
        """
        item = await self.remote_store.find_content(content_type, content_id)
        if item is None:
            raise NotFoundError(content_type.value, content_id)
        return item

    async def list_feed(
        self,
        content_type: ContentType,
        sort: FeedSort = FeedSort.HOT,
        now: Optional[datetime] = None,
        limit: Optional[int] = None,
        include_hidden: bool = False,
    ) -> list[ContentItem]:
        """List items of a type in feed order.

        Args:
            content_type: Type of content
            sort: Feed order
            now: Reference time for hot ranking (defaults to now)
            limit: Maximum items (defaults to the configured page size)
            include_hidden: Whether to include moderated items

        Returns:
            Sorted items
        """
        with logfire.span(
            "list_feed", content_type=content_type.value, sort=sort.value
        ):
            items = await self.remote_store.list_content(content_type)
            if not include_hidden:
                items = [i for i in items if not i.hidden]

            ranked = sort_feed(
                items,
                sort,
                now or datetime.now(),
                min_age_hours=self.feed.min_age_hours,
            )
            return ranked[: limit or self.feed.page_size]

    async def delete_content(
        self, content_type: ContentType, content_id: ContentId, user_id: UserId
    ) -> None:
        """Delete an item together with every vote and comment on it.

        Raises:
            UnauthenticatedError: If user_id is empty
            NotFoundError: If the item does not exist
            NotAuthorizedError: If the user is not the author
        """
        if not user_id or not user_id.strip():
            raise UnauthenticatedError("delete content")

        with logfire.span(
            "delete_content", content_type=content_type.value, content_id=content_id
        ):

            async def attempt() -> None:
                async with self.remote_store.transaction() as tx:
                    item = await tx.get_content(content_type, content_id)
                    if item is None:
                        raise NotFoundError(content_type.value, content_id)
                    if item.author_id != user_id:
                        raise NotAuthorizedError(content_type.value, content_id, user_id)
                    tx.delete_content(item)

            await retry_on_conflict(attempt, self.voting, "delete_content")
            logfire.info("Content deleted", content_id=content_id)

    async def add_comment(
        self,
        content_type: ContentType,
        content_id: ContentId,
        author_id: UserId,
        text: str,
    ) -> Comment:
        """Add a comment and bump the item's comment count atomically.

        Raises:
            UnauthenticatedError: If author_id is empty
            NotFoundError: If the item does not exist
        """
        if not author_id or not author_id.strip():
            raise UnauthenticatedError("comment")

        comment = Comment(
            id=CommentId(uuid4().hex),
            content_id=content_id,
            author_id=author_id,
            text=text,
            created_at=datetime.now(),
        )

        with logfire.span("add_comment", content_id=content_id, comment_id=comment.id):

            async def attempt() -> Comment:
                async with self.remote_store.transaction() as tx:
                    item = await tx.get_content(content_type, content_id)
                    if item is None:
                        raise NotFoundError(content_type.value, content_id)
                    tx.put_content(item.add_comment())
                    tx.add_comment(comment)
                return comment

            return await retry_on_conflict(attempt, self.voting, "add_comment")

    async def list_comments(
        self, content_type: ContentType, content_id: ContentId
    ) -> list[Comment]:
        """Comments of an item, oldest first."""
        await self.get_content(content_type, content_id)
        return await self.remote_store.list_comments(content_id)
