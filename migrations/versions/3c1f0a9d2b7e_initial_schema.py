"""initial_schema

Create the schema for Remark:
- Comments (two-level threads with cached vote and reply counters)
- Comment votes (one like/dislike per user and comment)
- Comment reports (one report per user and comment)
- User profiles (read-only mirror of the external user system)

Revision ID: 3c1f0a9d2b7e
Revises:
Create Date: 2026-10-17 09:12:44.318201

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE comment_vote_type AS ENUM ('like', 'dislike');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("content_id", sa.UUID(), nullable=False),
        sa.Column("commenter_id", sa.UUID(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("like_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("dislike_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("reply_count", sa.Integer(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("edited_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("deleted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("like_count >= 0", name="like_count_non_negative"),
        sa.CheckConstraint("dislike_count >= 0", name="dislike_count_non_negative"),
        sa.CheckConstraint(
            "(parent_id IS NULL AND reply_count >= 0) "
            "OR (parent_id IS NOT NULL AND reply_count IS NULL)",
            name="reply_count_matches_variant",
        ),
    )
    op.create_index(
        "idx_comments_content_created", "comments", ["content_id", "created_at"]
    )
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])
    op.create_index("idx_comments_commenter_id", "comments", ["commenter_id"])
    op.create_index("idx_comments_deleted_at", "comments", ["deleted_at"])

    # ========================================================================
    # COMMENT_VOTES table
    # ========================================================================
    op.create_table(
        "comment_votes",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("voter_id", sa.UUID(), nullable=False),
        sa.Column("comment_id", sa.UUID(), nullable=False),
        sa.Column(
            "vote_type",
            postgresql.ENUM(
                "like", "dislike", name="comment_vote_type", create_type=False
            ),
            nullable=False,
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "voter_id", "comment_id", name="uq_comment_votes_voter_comment"
        ),
    )
    op.create_index(
        "idx_comment_votes_comment_type",
        "comment_votes",
        ["comment_id", "vote_type"],
    )

    # ========================================================================
    # COMMENT_REPORTS table
    # ========================================================================
    op.create_table(
        "comment_reports",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("comment_id", sa.UUID(), nullable=False),
        sa.Column("reporter_id", sa.UUID(), nullable=False),
        sa.Column("reason", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_reviewed", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("reviewed_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("admin_response", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("deactivated_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "reporter_id", "comment_id", name="uq_comment_reports_reporter_comment"
        ),
    )
    op.create_index(
        "idx_comment_reports_comment_id", "comment_reports", ["comment_id"]
    )
    op.create_index(
        "idx_comment_reports_unreviewed",
        "comment_reports",
        ["created_at"],
        postgresql_where=sa.text("is_reviewed = false"),
    )

    # ========================================================================
    # USER_PROFILES table
    # ========================================================================
    op.create_table(
        "user_profiles",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("first_name", sa.String(255), nullable=False, server_default=""),
        sa.Column("last_name", sa.String(255), nullable=False, server_default=""),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("user_profiles")
    op.drop_table("comment_reports")
    op.drop_table("comment_votes")
    op.drop_table("comments")
    op.execute("DROP TYPE IF EXISTS comment_vote_type")
