"""Create content use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from camp.domain.service import ContentService
from camp.domain.value import ContentType, UserId


class CreateContentRequest(BaseModel):
    """Create content request."""

    content_type: ContentType
    author_id: str | None  # From X-User-Id
    text: str = Field(default="", max_length=10000)


class ContentResponse(BaseModel):
    """Content item with its engagement counters."""

    content_id: str
    content_type: ContentType
    author_id: str
    text: str
    upvote_count: int
    downvote_count: int
    score: int
    comment_count: int
    created_at: datetime


class CreateContentUseCase:
    """Use case for posting a tip, question, gear review or photo story."""

    def __init__(self, content_service: ContentService) -> None:
        """Initialize create content use case.

        Args:
            content_service: Content domain service
        """
        self.content_service = content_service

    async def execute(self, request: CreateContentRequest) -> ContentResponse:
        """Execute create content flow.

        Raises:
            UnauthenticatedError: If no user is signed in
        """
        item = await self.content_service.create_content(
            request.content_type,
            UserId(request.author_id or ""),
            text=request.text,
        )
        return ContentResponse(
            content_id=item.id,
            content_type=item.content_type,
            author_id=item.author_id,
            text=item.text,
            upvote_count=item.upvote_count,
            downvote_count=item.downvote_count,
            score=item.score,
            comment_count=item.comment_count,
            created_at=item.created_at,
        )
