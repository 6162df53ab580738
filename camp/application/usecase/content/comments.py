"""Comment use cases."""

from datetime import datetime

from pydantic import BaseModel, Field

from camp.domain.model import Comment
from camp.domain.service import ContentService
from camp.domain.value import ContentId, ContentType, UserId


class CommentResponse(BaseModel):
    """Comment on a content item."""

    comment_id: str
    content_id: str
    author_id: str
    text: str
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentResponse":
        return cls(
            comment_id=comment.id,
            content_id=comment.content_id,
            author_id=comment.author_id,
            text=comment.text,
            created_at=comment.created_at,
        )


class AddCommentRequest(BaseModel):
    """Add comment request."""

    content_type: ContentType
    content_id: str
    author_id: str | None
    text: str = Field(min_length=1, max_length=10000)


class AddCommentUseCase:
    """Use case for commenting on an item."""

    def __init__(self, content_service: ContentService) -> None:
        self.content_service = content_service

    async def execute(self, request: AddCommentRequest) -> CommentResponse:
        """Execute add comment flow.

        Raises:
            UnauthenticatedError: If no user is signed in
            NotFoundError: If the item does not exist
        """
        comment = await self.content_service.add_comment(
            request.content_type,
            ContentId(request.content_id),
            UserId(request.author_id or ""),
            request.text,
        )
        return CommentResponse.from_comment(comment)


class ListCommentsRequest(BaseModel):
    """List comments request."""

    content_type: ContentType
    content_id: str


class ListCommentsResponse(BaseModel):
    """List comments response."""

    comments: list[CommentResponse]


class ListCommentsUseCase:
    """Use case for reading an item's comments."""

    def __init__(self, content_service: ContentService) -> None:
        self.content_service = content_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        comments = await self.content_service.list_comments(
            request.content_type, ContentId(request.content_id)
        )
        return ListCommentsResponse(
            comments=[CommentResponse.from_comment(c) for c in comments]
        )
