"""Content item aggregate.

Tips, questions, gear reviews and photo stories share one engagement
shape: vote counters, a derived score and a comment count. The counters
belong to the engagement engine; authors never write them directly.
"""

from datetime import datetime

from pydantic import Field, model_validator

from camp.domain.model.common import DomainModel
from camp.domain.model.vote import VoteTransition
from camp.domain.value import ContentId, ContentType, UserId


class ContentItem(DomainModel):
    """Votable, commentable content item.

    Invariants:
    - upvote_count, downvote_count, comment_count are never negative
    - score == upvote_count - downvote_count
    - version increases by one with every committed engagement change
    """

    id: ContentId
    content_type: ContentType
    author_id: UserId
    text: str = Field(default="", max_length=10000)
    upvote_count: int = Field(default=0, ge=0)
    downvote_count: int = Field(default=0, ge=0)
    score: int = 0
    comment_count: int = Field(default=0, ge=0)
    hidden: bool = False
    version: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_score(self) -> "ContentItem":
        """Score must equal upvotes minus downvotes."""
        if self.score != self.upvote_count - self.downvote_count:
            raise ValueError(
                f"Score {self.score} does not match counters "
                f"{self.upvote_count} up / {self.downvote_count} down"
            )
        return self

    def apply_vote(self, transition: VoteTransition) -> "ContentItem":
        """Return the aggregate after a vote transition."""
        upvotes = self.upvote_count + transition.upvote_delta
        downvotes = self.downvote_count + transition.downvote_delta
        return self._evolve(
            upvote_count=upvotes,
            downvote_count=downvotes,
            score=upvotes - downvotes,
        )

    def add_comment(self) -> "ContentItem":
        """Return the aggregate after one comment was added."""
        return self._evolve(comment_count=self.comment_count + 1)

    def _evolve(self, **changes) -> "ContentItem":
        # Re-validate so a counter can never silently go negative
        data = self.model_dump()
        data.update(changes)
        data["version"] = self.version + 1
        return ContentItem.model_validate(data)
