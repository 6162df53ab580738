"""Get vote use case."""

from pydantic import BaseModel

from camp.domain.service import ContentService, VoteService
from camp.domain.value import ContentId, ContentType, UserId, VoteState


class GetVoteRequest(BaseModel):
    """Get vote request."""

    content_type: ContentType
    content_id: str
    user_id: str | None = None


class GetVoteResponse(BaseModel):
    """Current vote state of a user on an item."""

    content_id: str
    user_vote: VoteState
    upvote_count: int
    downvote_count: int
    score: int


class GetVoteUseCase:
    """Use case for reading an item's counters and the user's vote."""

    def __init__(
        self, content_service: ContentService, vote_service: VoteService
    ) -> None:
        self.content_service = content_service
        self.vote_service = vote_service

    async def execute(self, request: GetVoteRequest) -> GetVoteResponse:
        """Execute get vote flow.

        Anonymous callers get ``none`` as their vote.

        Raises:
            NotFoundError: If the item does not exist
        """
        content_id = ContentId(request.content_id)
        item = await self.content_service.get_content(request.content_type, content_id)

        user_vote = VoteState.NONE
        if request.user_id:
            user_vote = await self.vote_service.get_user_vote(
                content_id, UserId(request.user_id)
            )

        return GetVoteResponse(
            content_id=item.id,
            user_vote=user_vote,
            upvote_count=item.upvote_count,
            downvote_count=item.downvote_count,
            score=item.score,
        )
