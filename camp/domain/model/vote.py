"""Vote ledger.

A vote record is the stored preference of one user for one content item.
Absence of a record is the ``NONE`` state. The transition table below is
the only place that decides how a requested vote changes state and
counters; both the transactional vote service and the optimistic client
prediction go through it.
"""

from datetime import datetime

from pydantic import Field

from camp.domain.model.common import DomainModel
from camp.domain.value import ContentId, UserId, VoteState, VoteType
from camp.domain.value.common import ValueObject


def vote_key(content_id: ContentId, user_id: UserId) -> str:
    """Composite document key of a vote record."""
    return f"{content_id}_{user_id}"


class VoteRecord(DomainModel):
    """Vote of one user on one content item.

    Business rules:
    - At most one record per (content_id, user_id)
    - Created on first vote, updated on switch, deleted on toggle-off
    - Deleted together with its content item
    """

    content_id: ContentId
    user_id: UserId
    vote_type: VoteType
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def key(self) -> str:
        return vote_key(self.content_id, self.user_id)

    @property
    def state(self) -> VoteState:
        return VoteState.from_vote_type(self.vote_type)


class VoteTransition(ValueObject):
    """Outcome of applying a requested vote to a current state."""

    current: VoteState
    requested: VoteType
    next: VoteState
    upvote_delta: int
    downvote_delta: int

    @property
    def score_delta(self) -> int:
        return self.upvote_delta - self.downvote_delta

    @property
    def next_vote_type(self) -> VoteType | None:
        """Vote type to store after the transition, None to delete."""
        if self.next == VoteState.NONE:
            return None
        return VoteType(self.next.value)


# (current, requested) -> (next, Δupvotes, Δdownvotes)
# Voting the same direction twice is a toggle-off, not a no-op.
_TRANSITIONS: dict[tuple[VoteState, VoteType], tuple[VoteState, int, int]] = {
    (VoteState.NONE, VoteType.UP): (VoteState.UP, 1, 0),
    (VoteState.NONE, VoteType.DOWN): (VoteState.DOWN, 0, 1),
    (VoteState.UP, VoteType.UP): (VoteState.NONE, -1, 0),
    (VoteState.DOWN, VoteType.DOWN): (VoteState.NONE, 0, -1),
    (VoteState.UP, VoteType.DOWN): (VoteState.DOWN, -1, 1),
    (VoteState.DOWN, VoteType.UP): (VoteState.UP, 1, -1),
}


def resolve_transition(current: VoteState, requested: VoteType) -> VoteTransition:
    """Look up the transition for a requested vote.

    Args:
        current: The user's current vote state on the item
        requested: The direction the user tapped

    Returns:
        The resulting state and counter deltas
    """
    next_state, up_delta, down_delta = _TRANSITIONS[(current, requested)]
    return VoteTransition(
        current=current,
        requested=requested,
        next=next_state,
        upvote_delta=up_delta,
        downvote_delta=down_delta,
    )
