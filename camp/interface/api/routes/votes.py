"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header
from pydantic import BaseModel

from camp.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetVoteRequest,
    GetVoteResponse,
    GetVoteUseCase,
)
from camp.domain.value import ContentType, VoteType

router = APIRouter(prefix="/content", tags=["votes"], route_class=DishkaRoute)


class VoteBody(BaseModel):
    """Vote request body."""

    vote_type: VoteType


@router.post("/{content_type}/{content_id}/vote", response_model=CastVoteResponse)
async def cast_vote(
    content_type: ContentType,
    content_id: str,
    body: VoteBody,
    use_case: FromDishka[CastVoteUseCase],
    x_user_id: str | None = Header(default=None),
) -> CastVoteResponse:
    """Vote on an item.

    Voting the same direction again removes the vote; voting the other
    direction switches it. Requires X-User-Id.

    Args:
        content_type: Type of the item
        content_id: Item ID
        body: Requested vote direction
        use_case: Cast vote use case from DI
        x_user_id: Caller identity

    Returns:
        Updated counters and the caller's vote
    """
    return await use_case.execute(
        CastVoteRequest(
            content_type=content_type,
            content_id=content_id,
            user_id=x_user_id,
            vote_type=body.vote_type,
        )
    )


@router.get("/{content_type}/{content_id}/vote", response_model=GetVoteResponse)
async def get_vote(
    content_type: ContentType,
    content_id: str,
    use_case: FromDishka[GetVoteUseCase],
    x_user_id: str | None = Header(default=None),
) -> GetVoteResponse:
    """Counters of an item and the caller's vote on it."""
    return await use_case.execute(
        GetVoteRequest(
            content_type=content_type, content_id=content_id, user_id=x_user_id
        )
    )
