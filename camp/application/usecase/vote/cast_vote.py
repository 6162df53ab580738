"""Cast vote use case."""

from pydantic import BaseModel

from camp.domain.service import VoteService
from camp.domain.value import ContentId, ContentType, UserId, VoteState, VoteType


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    content_type: ContentType
    content_id: str
    user_id: str | None  # From X-User-Id, None when anonymous
    vote_type: VoteType


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    content_id: str
    user_vote: VoteState
    upvote_count: int
    downvote_count: int
    score: int


class CastVoteUseCase:
    """Use case for voting on a content item."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute vote flow.

        Args:
            request: Cast vote request

        Returns:
            Item counters and the user's resulting vote

        Raises:
            UnauthenticatedError: If no user is signed in
            NotFoundError: If the item does not exist
            ConflictError: If the vote kept losing races
        """
        user_id = UserId(request.user_id or "")
        content_id = ContentId(request.content_id)

        item = await self.vote_service.cast_vote(
            request.content_type, content_id, user_id, request.vote_type
        )
        user_vote = await self.vote_service.get_user_vote(content_id, user_id)

        return CastVoteResponse(
            content_id=item.id,
            user_vote=user_vote,
            upvote_count=item.upvote_count,
            downvote_count=item.downvote_count,
            score=item.score,
        )
