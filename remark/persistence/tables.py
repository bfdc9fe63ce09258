"""SQLAlchemy table definitions for Remark.

These table definitions are used with manual row mapping.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMENTS TABLE
# ============================================================================
# content_id and commenter_id reference collections owned by other
# systems, so they carry no foreign keys. parent_id is not a foreign key
# either: purge removes parent and replies in one statement.
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("content_id", UUID, nullable=False),
    Column("commenter_id", UUID, nullable=False),
    Column("parent_id", UUID, nullable=True),
    Column("text", Text, nullable=False),
    Column("like_count", Integer, nullable=False, server_default="0"),
    Column("dislike_count", Integer, nullable=False, server_default="0"),
    Column("reply_count", Integer, nullable=True),  # NULL for replies
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("edited_at", TIMESTAMP(timezone=True), nullable=True),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("like_count >= 0", name="like_count_non_negative"),
    CheckConstraint("dislike_count >= 0", name="dislike_count_non_negative"),
    CheckConstraint(
        "(parent_id IS NULL AND reply_count >= 0) "
        "OR (parent_id IS NOT NULL AND reply_count IS NULL)",
        name="reply_count_matches_variant",
    ),
)

Index(
    "idx_comments_content_created",
    comments_table.c.content_id,
    comments_table.c.created_at,
)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_commenter_id", comments_table.c.commenter_id)
Index("idx_comments_deleted_at", comments_table.c.deleted_at)

# ============================================================================
# COMMENT VOTES TABLE
# ============================================================================
comment_votes_table = Table(
    "comment_votes",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("voter_id", UUID, nullable=False),
    Column("comment_id", UUID, nullable=False),
    Column(
        "vote_type",
        Enum("like", "dislike", name="comment_vote_type", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("voter_id", "comment_id", name="uq_comment_votes_voter_comment"),
)

Index(
    "idx_comment_votes_comment_type",
    comment_votes_table.c.comment_id,
    comment_votes_table.c.vote_type,
)

# ============================================================================
# COMMENT REPORTS TABLE
# ============================================================================
comment_reports_table = Table(
    "comment_reports",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("comment_id", UUID, nullable=False),
    Column("reporter_id", UUID, nullable=False),
    Column("reason", String(100), nullable=False),
    Column("description", Text, nullable=True),
    Column("is_reviewed", Boolean, nullable=False, server_default="false"),
    Column("reviewed_at", TIMESTAMP(timezone=True), nullable=True),
    Column("admin_response", Text, nullable=True),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column("deactivated_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint(
        "reporter_id", "comment_id", name="uq_comment_reports_reporter_comment"
    ),
)

Index("idx_comment_reports_comment_id", comment_reports_table.c.comment_id)
Index(
    "idx_comment_reports_unreviewed",
    comment_reports_table.c.created_at,
    postgresql_where=comment_reports_table.c.is_reviewed.is_(False),
)

# ============================================================================
# USER PROFILES TABLE (read-only mirror of the external user system)
# ============================================================================
user_profiles_table = Table(
    "user_profiles",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("first_name", String(255), nullable=False, server_default=""),
    Column("last_name", String(255), nullable=False, server_default=""),
)
