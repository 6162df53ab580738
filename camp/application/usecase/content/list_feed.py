"""List feed use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from camp.domain.service import ContentService, VoteService
from camp.domain.value import ContentType, FeedSort, UserId, VoteState


class FeedItem(BaseModel):
    """Feed entry with the caller's own vote."""

    content_id: str
    author_id: str
    text: str
    upvote_count: int
    downvote_count: int
    score: int
    comment_count: int
    created_at: datetime
    user_vote: VoteState


class ListFeedRequest(BaseModel):
    """List feed request."""

    content_type: ContentType
    sort: FeedSort = FeedSort.HOT
    limit: int | None = Field(default=None, ge=1, le=500)
    user_id: str | None = None  # Current user ID (if signed in)


class ListFeedResponse(BaseModel):
    """List feed response."""

    items: list[FeedItem]
    sort: FeedSort


class ListFeedUseCase:
    """Use case for listing a content feed."""

    def __init__(
        self, content_service: ContentService, vote_service: VoteService
    ) -> None:
        """Initialize list feed use case.

        Args:
            content_service: Content domain service
            vote_service: Vote domain service
        """
        self.content_service = content_service
        self.vote_service = vote_service

    async def execute(self, request: ListFeedRequest) -> ListFeedResponse:
        """Execute list feed flow.

        Args:
            request: Feed type, order and optional viewer

        Returns:
            Ranked items annotated with the viewer's votes
        """
        items = await self.content_service.list_feed(
            request.content_type, sort=request.sort, limit=request.limit
        )

        user_votes: dict[str, VoteState] = {}
        if request.user_id and items:
            user_votes = await self.vote_service.get_user_votes(
                UserId(request.user_id), [item.id for item in items]
            )

        logfire.info(
            "Feed listed",
            content_type=request.content_type.value,
            sort=request.sort.value,
            count=len(items),
        )

        return ListFeedResponse(
            items=[
                FeedItem(
                    content_id=item.id,
                    author_id=item.author_id,
                    text=item.text,
                    upvote_count=item.upvote_count,
                    downvote_count=item.downvote_count,
                    score=item.score,
                    comment_count=item.comment_count,
                    created_at=item.created_at,
                    user_vote=user_votes.get(item.id, VoteState.NONE),
                )
                for item in items
            ],
            sort=request.sort,
        )
