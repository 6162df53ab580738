"""Content feed and comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from pydantic import BaseModel, Field

from camp.application.usecase.content import (
    AddCommentRequest,
    AddCommentUseCase,
    CommentResponse,
    ContentResponse,
    CreateContentRequest,
    CreateContentUseCase,
    DeleteContentRequest,
    DeleteContentUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    ListFeedRequest,
    ListFeedResponse,
    ListFeedUseCase,
)
from camp.domain.value import ContentType, FeedSort

router = APIRouter(prefix="/content", tags=["content"], route_class=DishkaRoute)


class CreateContentBody(BaseModel):
    """Create content request body."""

    text: str = Field(default="", max_length=10000)


class AddCommentBody(BaseModel):
    """Add comment request body."""

    text: str = Field(min_length=1, max_length=10000)


@router.post(
    "/{content_type}",
    response_model=ContentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_content(
    content_type: ContentType,
    body: CreateContentBody,
    use_case: FromDishka[CreateContentUseCase],
    x_user_id: str | None = Header(default=None),
) -> ContentResponse:
    """Post a new item. Requires X-User-Id."""
    return await use_case.execute(
        CreateContentRequest(
            content_type=content_type, author_id=x_user_id, text=body.text
        )
    )


@router.get("/{content_type}", response_model=ListFeedResponse)
async def list_feed(
    content_type: ContentType,
    use_case: FromDishka[ListFeedUseCase],
    sort: FeedSort = Query(default=FeedSort.HOT),
    limit: int | None = Query(default=None, ge=1, le=500),
    x_user_id: str | None = Header(default=None),
) -> ListFeedResponse:
    """Ranked feed of one content type.

    Signed-in callers see their own vote on each item.
    """
    return await use_case.execute(
        ListFeedRequest(
            content_type=content_type, sort=sort, limit=limit, user_id=x_user_id
        )
    )


@router.delete("/{content_type}/{content_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_content(
    content_type: ContentType,
    content_id: str,
    use_case: FromDishka[DeleteContentUseCase],
    x_user_id: str | None = Header(default=None),
) -> None:
    """Delete an item with its votes and comments. Author only."""
    await use_case.execute(
        DeleteContentRequest(
            content_type=content_type, content_id=content_id, user_id=x_user_id
        )
    )


@router.post(
    "/{content_type}/{content_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    content_type: ContentType,
    content_id: str,
    body: AddCommentBody,
    use_case: FromDishka[AddCommentUseCase],
    x_user_id: str | None = Header(default=None),
) -> CommentResponse:
    """Comment on an item. Requires X-User-Id."""
    return await use_case.execute(
        AddCommentRequest(
            content_type=content_type,
            content_id=content_id,
            author_id=x_user_id,
            text=body.text,
        )
    )


@router.get(
    "/{content_type}/{content_id}/comments", response_model=ListCommentsResponse
)
async def list_comments(
    content_type: ContentType,
    content_id: str,
    use_case: FromDishka[ListCommentsUseCase],
) -> ListCommentsResponse:
    """Comments of an item, oldest first."""
    return await use_case.execute(
        ListCommentsRequest(content_type=content_type, content_id=content_id)
    )
