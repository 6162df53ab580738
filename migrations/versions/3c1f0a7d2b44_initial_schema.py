"""initial_schema

Create the remote store schema for the camp engagement engine:
- Content items (tips, questions, gear reviews, photo stories) with
  vote/comment counters and an optimistic-concurrency version
- Votes (one row per item and user, up or down)
- Comments
- Trip records (packing items and meals as JSON documents)

Revision ID: 3c1f0a7d2b44
Revises:
Create Date: 2026-10-18 10:12:41.518204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a7d2b44"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # CONTENT_ITEMS table
    # ========================================================================
    op.create_table(
        "content_items",
        sa.Column("id", sa.String(128), nullable=False),
        sa.Column("content_type", sa.String(32), nullable=False),
        sa.Column("author_id", sa.String(128), nullable=False),
        sa.Column("text", sa.Text(), nullable=False, server_default=""),
        sa.Column("upvote_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("downvote_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("score", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("comment_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("hidden", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("version", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=False),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("upvote_count >= 0", name="ck_content_upvotes_non_negative"),
        sa.CheckConstraint(
            "downvote_count >= 0", name="ck_content_downvotes_non_negative"
        ),
        sa.CheckConstraint(
            "comment_count >= 0", name="ck_content_comments_non_negative"
        ),
        # Business rule: score is always derived from the counters
        sa.CheckConstraint(
            "score = upvote_count - downvote_count", name="ck_content_score_consistent"
        ),
    )
    op.create_index(
        "idx_content_items_type_created",
        "content_items",
        ["content_type", "created_at"],
    )

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column("content_id", sa.String(128), nullable=False),
        sa.Column("user_id", sa.String(128), nullable=False),
        sa.Column("key", sa.String(257), nullable=False),
        sa.Column("vote_type", sa.String(8), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=False),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(
            ["content_id"], ["content_items.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("content_id", "user_id"),
        sa.UniqueConstraint("key", name="uq_votes_key"),
        sa.CheckConstraint("vote_type IN ('up', 'down')", name="ck_votes_vote_type"),
    )
    op.create_index("idx_votes_user_id", "votes", ["user_id"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.String(128), nullable=False),
        sa.Column("content_id", sa.String(128), nullable=False),
        sa.Column("author_id", sa.String(128), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=False),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(
            ["content_id"], ["content_items.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_comments_content_created", "comments", ["content_id", "created_at"]
    )

    # ========================================================================
    # TRIP_RECORDS table
    # ========================================================================
    op.create_table(
        "trip_records",
        sa.Column("resource_key", sa.String(300), nullable=False),
        sa.Column("id", sa.String(128), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("data", postgresql.JSONB(), nullable=False),
        sa.PrimaryKeyConstraint("resource_key", "id"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("trip_records")
    op.drop_index("idx_comments_content_created", table_name="comments")
    op.drop_table("comments")
    op.drop_index("idx_votes_user_id", table_name="votes")
    op.drop_table("votes")
    op.drop_index("idx_content_items_type_created", table_name="content_items")
    op.drop_table("content_items")
