"""Vote domain service."""

from datetime import datetime
from typing import Sequence

import logfire

from camp.config import VotingSettings
from camp.domain.error import NotFoundError, UnauthenticatedError
from camp.domain.model import ContentItem, VoteRecord, resolve_transition
from camp.domain.repository import RemoteStore
from camp.domain.value import ContentId, ContentType, UserId, VoteState, VoteType

from .base import Service
from .retry import retry_on_conflict


class VoteService(Service):
    """Domain service for the vote ledger.

    The vote record and the item's counters only ever change together,
    inside one remote transaction. Votes are not available on the local
    store.
    """

    def __init__(self, remote_store: RemoteStore, voting: VotingSettings) -> None:
        """Initialize vote service.

        Args:
            remote_store: Authoritative store holding votes and counters
            voting: Conflict retry policy
        """
        self.remote_store = remote_store
        self.voting = voting

    async def cast_vote(
        self,
        content_type: ContentType,
        content_id: ContentId,
        user_id: UserId,
        vote_type: VoteType,
    ) -> ContentItem:
        """Apply a user's vote to an item.

        Voting the same direction twice removes the vote. Voting the other
        direction switches it.

        Args:
            content_type: Type of the item
            content_id: Item ID
            user_id: Authenticated user ID
            vote_type: Requested direction

        Returns:
            The item with its updated counters

        Raises:
            UnauthenticatedError: If user_id is empty
            NotFoundError: If the item does not exist
            ConflictError: If every retry lost a race with another writer
        """
        if not user_id or not user_id.strip():
            raise UnauthenticatedError("vote")

        with logfire.span(
            "cast_vote",
            content_type=content_type.value,
            content_id=content_id,
            user_id=user_id,
            vote_type=vote_type.value,
        ):

            async def attempt() -> ContentItem:
                async with self.remote_store.transaction() as tx:
                    item = await tx.get_content(content_type, content_id)
                    if item is None:
                        logfire.warn("Vote on non-existent item", content_id=content_id)
                        raise NotFoundError(content_type.value, content_id)

                    existing = await tx.get_vote(content_id, user_id)
                    current = existing.state if existing else VoteState.NONE
                    transition = resolve_transition(current, vote_type)
                    updated = item.apply_vote(transition)

                    next_type = transition.next_vote_type
                    if next_type is None:
                        tx.delete_vote(content_id, user_id)
                    elif existing is None:
                        tx.put_vote(
                            VoteRecord(
                                content_id=content_id,
                                user_id=user_id,
                                vote_type=next_type,
                                created_at=datetime.now(),
                            )
                        )
                    else:
                        tx.put_vote(existing.model_copy(update={"vote_type": next_type}))

                    tx.put_content(updated)

                logfire.info(
                    "Vote applied",
                    content_id=content_id,
                    user_id=user_id,
                    previous=transition.current.value,
                    next=transition.next.value,
                    score=updated.score,
                )
                return updated

            return await retry_on_conflict(attempt, self.voting, "cast_vote")

    async def get_user_vote(self, content_id: ContentId, user_id: UserId) -> VoteState:
        """Current vote state of a user on an item (NONE if no record)."""
        if not user_id:
            return VoteState.NONE
        vote = await self.remote_store.find_vote(content_id, user_id)
        return vote.state if vote else VoteState.NONE

    async def get_user_votes(
        self, user_id: UserId, content_ids: Sequence[ContentId]
    ) -> dict[ContentId, VoteState]:
        """Vote states of a user on several items.

        Args:
            user_id: User ID
            content_ids: Items to check

        Returns:
            Mapping of every requested ID to the user's state on it
        """
        if not content_ids or not user_id:
            return {cid: VoteState.NONE for cid in content_ids}

        # Batch query to avoid N+1
        votes = await self.remote_store.find_votes_by_user(user_id, content_ids)
        by_content = {vote.content_id: vote.state for vote in votes}
        return {cid: by_content.get(cid, VoteState.NONE) for cid in content_ids}
