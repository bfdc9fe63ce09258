"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from remark.domain.model import Comment, Report, UserProfile, Vote
from remark.domain.value import (
    CommentId,
    ContentId,
    ReportId,
    UserId,
    VoteId,
    VoteType,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        content_id=ContentId(_uuid(row["content_id"])),
        commenter_id=UserId(_uuid(row["commenter_id"])),
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        text=row["text"],
        like_count=row["like_count"],
        dislike_count=row["dislike_count"],
        reply_count=row.get("reply_count"),
        created_at=row["created_at"],
        edited_at=row.get("edited_at"),
        deleted_at=row.get("deleted_at"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    return comment.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        voter_id=UserId(_uuid(row["voter_id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        vote_type=VoteType(row["vote_type"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    data = vote.model_dump()
    data["vote_type"] = vote.vote_type.value
    return data


def row_to_report(row: Dict[str, Any]) -> Report:
    """Convert database row to Report domain model."""
    return Report(
        id=ReportId(_uuid(row["id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        reporter_id=UserId(_uuid(row["reporter_id"])),
        reason=row["reason"],
        description=row.get("description"),
        is_reviewed=row["is_reviewed"],
        reviewed_at=row.get("reviewed_at"),
        admin_response=row.get("admin_response"),
        is_active=row["is_active"],
        deactivated_at=row.get("deactivated_at"),
        created_at=row["created_at"],
    )


def report_to_dict(report: Report) -> Dict[str, Any]:
    return report.model_dump()


def row_to_profile(row: Dict[str, Any]) -> UserProfile:
    return UserProfile(
        id=UserId(_uuid(row["id"])),
        first_name=row["first_name"],
        last_name=row["last_name"],
    )


def profile_to_dict(profile: UserProfile) -> Dict[str, Any]:
    return profile.model_dump()
