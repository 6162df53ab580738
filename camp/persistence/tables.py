"""SQLAlchemy table definitions for the remote store.

They match the schema created by the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# CONTENT ITEMS TABLE (tips, questions, gear reviews, photo stories)
# ============================================================================
content_items_table = Table(
    "content_items",
    metadata,
    Column("id", String(128), primary_key=True),
    Column("content_type", String(32), nullable=False),
    Column("author_id", String(128), nullable=False),
    Column("text", Text, nullable=False, server_default=""),
    Column("upvote_count", Integer, nullable=False, server_default="0"),
    Column("downvote_count", Integer, nullable=False, server_default="0"),
    Column("score", Integer, nullable=False, server_default="0"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column("hidden", Boolean, nullable=False, server_default="false"),
    # Optimistic-concurrency token, bumped by every engagement transaction
    Column("version", Integer, nullable=False, server_default="0"),
    Column("created_at", TIMESTAMP(timezone=False), nullable=False),
    CheckConstraint("upvote_count >= 0", name="ck_content_upvotes_non_negative"),
    CheckConstraint("downvote_count >= 0", name="ck_content_downvotes_non_negative"),
    CheckConstraint("comment_count >= 0", name="ck_content_comments_non_negative"),
    CheckConstraint(
        "score = upvote_count - downvote_count", name="ck_content_score_consistent"
    ),
)

Index(
    "idx_content_items_type_created",
    content_items_table.c.content_type,
    content_items_table.c.created_at,
)

# ============================================================================
# VOTES TABLE (one row per content item and user)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column(
        "content_id",
        String(128),
        ForeignKey("content_items.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("user_id", String(128), primary_key=True),
    Column("key", String(257), nullable=False, unique=True),  # {content_id}_{user_id}
    Column("vote_type", String(8), nullable=False),
    Column("created_at", TIMESTAMP(timezone=False), nullable=False),
    CheckConstraint("vote_type IN ('up', 'down')", name="ck_votes_vote_type"),
)

Index("idx_votes_user_id", votes_table.c.user_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", String(128), primary_key=True),
    Column(
        "content_id",
        String(128),
        ForeignKey("content_items.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("author_id", String(128), nullable=False),
    Column("text", Text, nullable=False),
    Column("created_at", TIMESTAMP(timezone=False), nullable=False),
)

Index("idx_comments_content_created", comments_table.c.content_id, comments_table.c.created_at)

# ============================================================================
# TRIP RECORDS TABLE (packing items, meals; one JSON document per row)
# ============================================================================
trip_records_table = Table(
    "trip_records",
    metadata,
    Column("resource_key", String(300), primary_key=True),  # e.g. packing/<trip_id>
    Column("id", String(128), primary_key=True),
    Column("position", Integer, nullable=False),  # insertion order
    Column("data", JSONB, nullable=False),
)
