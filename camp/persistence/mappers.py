"""Mappers for converting between database rows and domain models.

Rows are validated into the fixed domain schema here, so nothing
downstream sees a partially-populated document.
"""

from typing import Any, Dict

from camp.domain.model import Comment, ContentItem, VoteRecord, vote_key


def row_to_content(row: Dict[str, Any]) -> ContentItem:
    """Convert database row to ContentItem domain model.

    Raises:
        pydantic.ValidationError: If the row breaks a domain invariant
    """
    return ContentItem.model_validate(row)


def content_to_dict(item: ContentItem) -> Dict[str, Any]:
    """Convert ContentItem domain model to database dict."""
    data = item.model_dump()
    data["content_type"] = item.content_type.value
    return data


def row_to_vote(row: Dict[str, Any]) -> VoteRecord:
    """Convert database row to VoteRecord domain model."""
    return VoteRecord.model_validate(
        {
            "content_id": row["content_id"],
            "user_id": row["user_id"],
            "vote_type": row["vote_type"],
            "created_at": row["created_at"],
        }
    )


def vote_to_dict(vote: VoteRecord) -> Dict[str, Any]:
    """Convert VoteRecord domain model to database dict."""
    return {
        "content_id": vote.content_id,
        "user_id": vote.user_id,
        "key": vote_key(vote.content_id, vote.user_id),
        "vote_type": vote.vote_type.value,
        "created_at": vote.created_at,
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment.model_validate(row)


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump(mode="python")
