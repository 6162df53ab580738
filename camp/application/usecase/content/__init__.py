"""Content use cases."""

from .comments import (
    AddCommentRequest,
    AddCommentUseCase,
    CommentResponse,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
)
from .create_content import (
    ContentResponse,
    CreateContentRequest,
    CreateContentUseCase,
)
from .delete_content import DeleteContentRequest, DeleteContentUseCase
from .list_feed import FeedItem, ListFeedRequest, ListFeedResponse, ListFeedUseCase

__all__ = [
    "AddCommentRequest",
    "AddCommentUseCase",
    "CommentResponse",
    "ContentResponse",
    "CreateContentRequest",
    "CreateContentUseCase",
    "DeleteContentRequest",
    "DeleteContentUseCase",
    "FeedItem",
    "ListCommentsRequest",
    "ListCommentsResponse",
    "ListCommentsUseCase",
    "ListFeedRequest",
    "ListFeedResponse",
    "ListFeedUseCase",
]
