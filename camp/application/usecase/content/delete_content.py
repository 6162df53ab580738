"""Delete content use case."""

from pydantic import BaseModel

from camp.domain.service import ContentService
from camp.domain.value import ContentId, ContentType, UserId


class DeleteContentRequest(BaseModel):
    """Delete content request."""

    content_type: ContentType
    content_id: str
    user_id: str | None


class DeleteContentUseCase:
    """Use case for deleting an item with its votes and comments."""

    def __init__(self, content_service: ContentService) -> None:
        self.content_service = content_service

    async def execute(self, request: DeleteContentRequest) -> None:
        """Execute delete flow.

        Raises:
            UnauthenticatedError: If no user is signed in
            NotFoundError: If the item does not exist
            NotAuthorizedError: If the user is not the author
        """
        await self.content_service.delete_content(
            request.content_type,
            ContentId(request.content_id),
            UserId(request.user_id or ""),
        )
