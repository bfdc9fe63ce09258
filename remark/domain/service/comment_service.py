"""Comment domain service (the comment store)."""

from datetime import datetime
from typing import List, Optional
from uuid import uuid4

import logfire

from remark.domain.error import BusinessRuleViolationError, NotFoundError
from remark.domain.model.comment import Comment
from remark.domain.model.common import Page
from remark.domain.repository import CommentRepository
from remark.domain.value import (
    CommentFilter,
    CommentId,
    ContentId,
    ReconcileResult,
    ToggleResult,
    UserId,
    VoteType,
)

from .base import Service
from .report_service import ReportService
from .vote_service import VoteService

DEFAULT_MASK_PLACEHOLDER = "***"


def mask_name(full_name: Optional[str], placeholder: str = DEFAULT_MASK_PLACEHOLDER) -> str:
    """Redact a display name for end users.

    Each whitespace-separated token keeps its first character and the
    rest become asterisks: "Jane Doe" -> "J*** D**".

    Args:
        full_name: Name to mask
        placeholder: Returned for a missing or blank name

    Returns:
        The masked name
    """
    tokens = (full_name or "").split()
    if not tokens:
        return placeholder
    return " ".join(token[0] + "*" * (len(token) - 1) for token in tokens)


class CommentService(Service):
    """Domain service for comment operations.

    Owns the comment rows and their reply counters. Vote totals are
    read from the vote ledger; per-viewer visibility comes from the
    report ledger's hidden set.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        vote_service: VoteService,
        report_service: ReportService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            vote_service: Vote ledger
            report_service: Report ledger
        """
        self.comment_repository = comment_repository
        self.vote_service = vote_service
        self.report_service = report_service

    async def get(self, comment_id: CommentId) -> Optional[Comment]:
        """Get a live comment by ID."""
        return await self.comment_repository.find_by_id(comment_id)

    async def list_top_level(
        self, content_id: ContentId, viewer_id: Optional[UserId] = None
    ) -> List[Comment]:
        """List the live top-level comments a viewer may see, oldest first.

        Args:
            content_id: Content item
            viewer_id: Viewing user, None for anonymous

        Returns:
            Comments not reported by the viewer, ordered by creation time
        """
        with logfire.span(
            "comment_service.list_top_level",
            content_id=str(content_id),
            viewer_id=str(viewer_id) if viewer_id else None,
        ):
            hidden = await self._hidden_ids(viewer_id)
            return await self.comment_repository.find_top_level(
                content_id, exclude_ids=hidden
            )

    async def list_replies(
        self, parent_id: CommentId, viewer_id: Optional[UserId] = None
    ) -> List[Comment]:
        """List the live replies of a comment a viewer may see, oldest first.

        A viewer who reported the parent sees none of its replies.
        """
        with logfire.span(
            "comment_service.list_replies",
            parent_id=str(parent_id),
            viewer_id=str(viewer_id) if viewer_id else None,
        ):
            reported = await self.report_service.get_reported_comment_ids_for_user(
                viewer_id
            )
            if parent_id in reported:
                return []
            return await self.comment_repository.find_replies(
                parent_id, exclude_ids=reported
            )

    async def create(
        self,
        content_id: ContentId,
        commenter_id: UserId,
        text: str,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Post a comment or a reply.

        Args:
            content_id: Content item
            commenter_id: Author
            text: Comment body
            parent_id: Top-level comment being replied to, if any

        Returns:
            The created comment

        Raises:
            NotFoundError: If the parent does not exist or is deleted
            BusinessRuleViolationError: If the parent is itself a reply or
                belongs to another content item
        """
        with logfire.span(
            "comment_service.create",
            content_id=str(content_id),
            commenter_id=str(commenter_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            if parent_id is not None:
                parent = await self.comment_repository.find_by_id(parent_id)
                if parent is None:
                    raise NotFoundError("Comment", str(parent_id))
                if parent.is_reply:
                    raise BusinessRuleViolationError("Replies cannot be replied to")
                if parent.content_id != content_id:
                    raise BusinessRuleViolationError(
                        "Reply must belong to the parent's content"
                    )

            comment = Comment(
                id=CommentId(uuid4()),
                content_id=content_id,
                commenter_id=commenter_id,
                text=text,
                parent_id=parent_id,
                reply_count=None if parent_id else 0,
                created_at=datetime.now(),
            )
            saved = await self.comment_repository.save(comment)

            if parent_id is not None:
                incremented = await self.comment_repository.increment_reply_count(
                    parent_id
                )
                if not incremented:
                    # Parent vanished after the check; the reply still stands
                    logfire.warn(
                        "Reply count increment missed parent",
                        parent_id=str(parent_id),
                    )

            logfire.info("Comment created", comment_id=str(saved.id))
            return saved

    async def update(
        self, comment_id: CommentId, commenter_id: UserId, text: str
    ) -> bool:
        """Edit the text of a live comment.

        Returns:
            False on wrong id, wrong author, or an already deleted comment
        """
        with logfire.span(
            "comment_service.update",
            comment_id=str(comment_id),
            commenter_id=str(commenter_id),
        ):
            return await self.comment_repository.update_text(
                comment_id, commenter_id, text, datetime.now()
            )

    async def soft_delete(self, comment_id: CommentId, commenter_id: UserId) -> bool:
        """Soft-delete a comment and cascade one level.

        Deleting a reply decrements its parent's reply_count. Deleting a
        top-level comment soft-deletes all of its live replies with the
        same deleted_at. The cascade steps are separate statements and
        may partially apply if storage fails midway; reconcile_counters
        repairs the counters afterwards.

        Returns:
            False if no live comment by this author matched
        """
        with logfire.span(
            "comment_service.soft_delete",
            comment_id=str(comment_id),
            commenter_id=str(commenter_id),
        ):
            deleted_at = datetime.now()
            deleted = await self.comment_repository.soft_delete(
                comment_id, commenter_id, deleted_at
            )
            if deleted is None:
                return False

            if deleted.parent_id is not None:
                decremented = await self.comment_repository.decrement_reply_count(
                    deleted.parent_id
                )
                if not decremented:
                    logfire.info(
                        "Parent reply count not decremented",
                        parent_id=str(deleted.parent_id),
                    )
            else:
                replies = await self.comment_repository.soft_delete_replies(
                    comment_id, deleted_at
                )
                await self.comment_repository.set_reply_count(comment_id, 0)
                logfire.info(
                    "Replies deleted with parent",
                    comment_id=str(comment_id),
                    count=replies,
                )

            return True

    async def delete_all_for_content(self, content_id: ContentId) -> bool:
        """Soft-delete every comment of a removed content item.

        Returns:
            True if at least one comment was deleted
        """
        with logfire.span(
            "comment_service.delete_all_for_content", content_id=str(content_id)
        ):
            deleted = await self.comment_repository.soft_delete_by_content(
                content_id, datetime.now()
            )
            logfire.info(
                "Content comments deleted", content_id=str(content_id), count=deleted
            )
            return deleted > 0

    async def count(self, content_id: ContentId) -> int:
        """Count live comments of a content item."""
        return await self.comment_repository.count_by_content(content_id)

    async def toggle_like(
        self, user_id: UserId, comment_id: CommentId, vote_type: VoteType
    ) -> ToggleResult:
        """Toggle a like or dislike.

        - no vote: add vote_type
        - same vote_type: remove it
        - other type: switch to vote_type

        Args:
            user_id: Voting user
            comment_id: Comment voted on
            vote_type: Like or dislike

        Returns:
            The outcome with fresh totals from the vote ledger. If a
            concurrent toggle inserted the vote first, that vote is re-read
            and reported as kept. If the ledger call still fails success
            is False and counts are zero.

        Raises:
            NotFoundError: If the comment does not exist or is deleted
        """
        with logfire.span(
            "comment_service.toggle_like",
            user_id=str(user_id),
            comment_id=str(comment_id),
            vote_type=vote_type.value,
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                raise NotFoundError("Comment", str(comment_id))

            existing = await self.vote_service.get_vote(user_id, comment_id)
            current: Optional[VoteType]
            if existing is None:
                ok = await self.vote_service.add_vote(user_id, comment_id, vote_type)
                action, current = "added", vote_type
                if not ok:
                    # A concurrent toggle inserted the vote first
                    existing = await self.vote_service.get_vote(user_id, comment_id)
                    if existing is not None:
                        ok = True
                        action, current = "kept", existing.vote_type
            elif existing.vote_type == vote_type:
                ok = await self.vote_service.remove_vote(user_id, comment_id)
                action, current = "removed", None
            else:
                ok = await self.vote_service.update_vote(
                    user_id, comment_id, vote_type
                )
                action, current = "switched", vote_type

            if not ok:
                logfire.warn(
                    "Vote toggle lost a race",
                    user_id=str(user_id),
                    comment_id=str(comment_id),
                )
                return ToggleResult(success=False, message="Failed to update vote")

            stats = await self.vote_service.get_stats(comment_id)
            return ToggleResult(
                success=True,
                message=f"{(current or vote_type).value} {action}",
                vote_type=current,
                like_count=stats.like_count,
                dislike_count=stats.dislike_count,
            )

    async def get_like_status(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[VoteType]:
        vote = await self.vote_service.get_vote(user_id, comment_id)
        return vote.vote_type if vote else None

    async def filter(self, criteria: CommentFilter) -> Page[Comment]:
        """Run a compound query, minus what the viewer reported."""
        with logfire.span(
            "comment_service.filter",
            content_id=str(criteria.content_id),
            page=criteria.page,
        ):
            reported = await self.report_service.get_reported_comment_ids_for_user(
                criteria.user_id
            )
            return await self.comment_repository.filter(
                criteria, exclude_ids=reported
            )

    async def purge(self, comment_id: CommentId) -> bool:
        """Physically remove a comment, its replies and all their votes.

        Purging a live reply decrements its parent's reply_count. Reports
        on purged comments are kept for the moderation record.

        Returns:
            False if the comment does not exist
        """
        with logfire.span("comment_service.purge", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(
                comment_id, include_deleted=True
            )
            if comment is None:
                return False

            ids = [comment_id]
            if comment.is_top_level:
                ids.extend(await self.comment_repository.find_reply_ids([comment_id]))

            for target in ids:
                await self.vote_service.remove_all_votes_for_comment(target)
            removed = await self.comment_repository.hard_delete(ids)

            if comment.parent_id is not None and not comment.is_deleted:
                await self.comment_repository.decrement_reply_count(comment.parent_id)

            logfire.info("Comment purged", comment_id=str(comment_id), count=removed)
            return True

    async def reconcile_counters(self, content_id: ContentId) -> ReconcileResult:
        """Recompute every cached counter of a content item's comments.

        Like/dislike totals are recounted from the vote ledger and reply
        counts from the live replies. Safe to run at any time.

        Returns:
            How many comments were checked and how many counters repaired
        """
        with logfire.span(
            "comment_service.reconcile_counters", content_id=str(content_id)
        ):
            comments = await self.comment_repository.find_by_content(
                content_id, include_deleted=True
            )
            vote_repaired = 0
            reply_repaired = 0

            for comment in comments:
                stats = await self.vote_service.get_stats(comment.id)
                if (
                    stats.like_count != comment.like_count
                    or stats.dislike_count != comment.dislike_count
                ):
                    await self.vote_service.resync_counters(comment.id)
                    vote_repaired += 1

                if comment.is_top_level:
                    replies = await self.comment_repository.count_replies(comment.id)
                    if replies != comment.reply_count:
                        await self.comment_repository.set_reply_count(
                            comment.id, replies
                        )
                        reply_repaired += 1

            result = ReconcileResult(
                comments_checked=len(comments),
                vote_counters_repaired=vote_repaired,
                reply_counters_repaired=reply_repaired,
            )
            logfire.info(
                "Counters reconciled",
                content_id=str(content_id),
                checked=result.comments_checked,
                votes=vote_repaired,
                replies=reply_repaired,
            )
            return result

    async def _hidden_ids(self, viewer_id: Optional[UserId]) -> set[CommentId]:
        """The viewer's reported comments plus the replies under them."""
        reported = await self.report_service.get_reported_comment_ids_for_user(
            viewer_id
        )
        if not reported:
            return reported
        replies = await self.comment_repository.find_reply_ids(reported)
        return reported | set(replies)
