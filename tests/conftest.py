"""Test configuration and helpers."""

from datetime import datetime, timedelta
from uuid import uuid4

from remark.domain.model import Comment, Report, UserProfile
from remark.domain.repository import (
    CommentRepository,
    ReportRepository,
    UserProfileRepository,
)
from remark.domain.value import CommentId, ContentId, ReportId, UserId


def new_user() -> UserId:
    return UserId(uuid4())


def new_content() -> ContentId:
    return ContentId(uuid4())


async def seed_comment(
    comment_repo: CommentRepository,
    content_id: ContentId,
    commenter_id: UserId | None = None,
    text: str = "A comment",
    parent_id: CommentId | None = None,
    created_at: datetime | None = None,
    **fields,
) -> Comment:
    """Store a comment directly, bypassing the service rules."""
    comment = Comment(
        id=CommentId(uuid4()),
        content_id=content_id,
        commenter_id=commenter_id or new_user(),
        text=text,
        parent_id=parent_id,
        created_at=created_at or datetime.now(),
        **fields,
    )
    return await comment_repo.save(comment)


async def seed_thread(
    comment_repo: CommentRepository,
    content_id: ContentId,
    replies: int,
    commenter_id: UserId | None = None,
) -> tuple[Comment, list[Comment]]:
    """Store a top-level comment with N replies and a matching reply_count."""
    base = datetime.now() - timedelta(hours=1)
    parent = await seed_comment(
        comment_repo,
        content_id,
        commenter_id=commenter_id,
        text="Parent",
        created_at=base,
        reply_count=replies,
    )
    children = [
        await seed_comment(
            comment_repo,
            content_id,
            text=f"Reply {i}",
            parent_id=parent.id,
            created_at=base + timedelta(minutes=i + 1),
        )
        for i in range(replies)
    ]
    return parent, children


async def seed_report(
    report_repo: ReportRepository,
    comment_id: CommentId,
    reporter_id: UserId | None = None,
    reason: str = "spam",
    created_at: datetime | None = None,
    **fields,
) -> Report:
    report = Report(
        id=ReportId(uuid4()),
        comment_id=comment_id,
        reporter_id=reporter_id or new_user(),
        reason=reason,
        created_at=created_at or datetime.now(),
        **fields,
    )
    return await report_repo.save(report)


async def seed_profile(
    profile_repo: UserProfileRepository,
    user_id: UserId,
    first_name: str,
    last_name: str = "",
) -> UserProfile:
    return await profile_repo.save(
        UserProfile(id=user_id, first_name=first_name, last_name=last_name)
    )


def as_user(user_id: UserId | str) -> dict[str, str]:
    """Identity header the gateway would forward."""
    return {"X-User-Id": str(user_id)}


def new_user_id() -> str:
    return str(new_user())
