"""Comment entity."""

from datetime import datetime

from pydantic import Field

from camp.domain.model.common import DomainModel
from camp.domain.value import CommentId, ContentId, UserId


class Comment(DomainModel):
    """Comment (or answer) attached to a content item."""

    id: CommentId
    content_id: ContentId
    author_id: UserId
    text: str = Field(min_length=1, max_length=10000)
    created_at: datetime = Field(default_factory=datetime.now)
