"""Unit tests for CommentService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from remark.domain.error import BusinessRuleViolationError, NotFoundError
from remark.domain.repository import CommentRepository, ReportRepository
from remark.domain.service import CommentService, VoteService, mask_name
from remark.domain.value import CommentFilter, CommentId, VoteType
from tests.conftest import (
    new_content,
    new_user,
    seed_comment,
    seed_report,
    seed_thread,
)
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreate:
    """Tests for create method."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env):
        """Top-level comments start with zero counters."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        content_id = new_content()
        commenter_id = new_user()

        # Act
        comment = await comment_service.create(content_id, commenter_id, "Hello")

        # Assert
        assert comment.parent_id is None
        assert comment.reply_count == 0
        assert comment.like_count == 0
        assert comment.dislike_count == 0
        assert await comment_repo.find_by_id(comment.id) == comment

    @pytest.mark.asyncio
    async def test_create_reply_increments_parent(self, unit_env):
        """A reply has no reply_count and bumps its parent's."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        content_id = new_content()
        parent = await comment_service.create(content_id, new_user(), "Parent")

        # Act
        reply = await comment_service.create(
            content_id, new_user(), "Reply", parent_id=parent.id
        )

        # Assert
        assert reply.parent_id == parent.id
        assert reply.reply_count is None
        updated = await comment_repo.find_by_id(parent.id)
        assert updated.reply_count == 1

    @pytest.mark.asyncio
    async def test_reply_to_reply_is_rejected(self, unit_env):
        """Threads are two levels deep."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        content_id = new_content()
        parent = await comment_service.create(content_id, new_user(), "Parent")
        reply = await comment_service.create(
            content_id, new_user(), "Reply", parent_id=parent.id
        )

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError):
            await comment_service.create(
                content_id, new_user(), "Nested", parent_id=reply.id
            )

    @pytest.mark.asyncio
    async def test_reply_across_content_is_rejected(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        parent = await comment_service.create(new_content(), new_user(), "Parent")

        with pytest.raises(BusinessRuleViolationError):
            await comment_service.create(
                new_content(), new_user(), "Elsewhere", parent_id=parent.id
            )

    @pytest.mark.asyncio
    async def test_reply_to_missing_or_deleted_parent(self, unit_env):
        """Missing and soft-deleted parents are both not found."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        content_id = new_content()
        author = new_user()
        parent = await comment_service.create(content_id, author, "Parent")
        await comment_service.soft_delete(parent.id, author)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await comment_service.create(
                content_id, new_user(), "Reply", parent_id=CommentId(uuid4())
            )
        with pytest.raises(NotFoundError):
            await comment_service.create(
                content_id, new_user(), "Reply", parent_id=parent.id
            )


class TestUpdate:
    """Tests for update method."""

    @pytest.mark.asyncio
    async def test_author_can_edit(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        author = new_user()
        comment = await comment_service.create(new_content(), author, "Frist")

        result = await comment_service.update(comment.id, author, "First")

        assert result is True
        updated = await comment_service.get(comment.id)
        assert updated.text == "First"
        assert updated.edited_at is not None

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment = await comment_service.create(new_content(), new_user(), "Mine")

        result = await comment_service.update(comment.id, new_user(), "Yours")

        assert result is False
        assert (await comment_service.get(comment.id)).text == "Mine"

    @pytest.mark.asyncio
    async def test_deleted_comment_cannot_be_edited(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        author = new_user()
        comment = await comment_service.create(new_content(), author, "Gone")
        await comment_service.soft_delete(comment.id, author)

        assert await comment_service.update(comment.id, author, "Back") is False


class TestSoftDelete:
    """Tests for soft_delete method."""

    @pytest.mark.asyncio
    async def test_delete_top_level_cascades_to_replies(self, unit_env):
        """Deleting a parent deletes its live replies with the same timestamp."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        content_id = new_content()
        author = new_user()
        parent, replies = await seed_thread(
            comment_repo, content_id, replies=2, commenter_id=author
        )

        # Act
        result = await comment_service.soft_delete(parent.id, author)

        # Assert
        assert result is True
        deleted_parent = await comment_repo.find_by_id(parent.id, include_deleted=True)
        assert deleted_parent.deleted_at is not None
        assert deleted_parent.reply_count == 0
        for reply in replies:
            deleted = await comment_repo.find_by_id(reply.id, include_deleted=True)
            assert deleted.deleted_at == deleted_parent.deleted_at
        assert await comment_service.count(content_id) == 0

    @pytest.mark.asyncio
    async def test_delete_top_level_leaves_other_threads_alone(self, unit_env):
        """Only the deleted parent's thread is touched."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        content_id = new_content()
        author = new_user()
        parent, _ = await seed_thread(
            comment_repo, content_id, replies=2, commenter_id=author
        )
        other_parent, other_replies = await seed_thread(
            comment_repo, content_id, replies=3
        )
        standalone = await seed_comment(comment_repo, content_id, commenter_id=author)

        # Act
        await comment_service.soft_delete(parent.id, author)

        # Assert
        kept_parent = await comment_repo.find_by_id(other_parent.id)
        assert kept_parent is not None
        assert kept_parent.deleted_at is None
        assert kept_parent.reply_count == 3
        for reply in other_replies:
            kept = await comment_repo.find_by_id(reply.id)
            assert kept is not None
            assert kept.deleted_at is None
        kept_standalone = await comment_repo.find_by_id(standalone.id)
        assert kept_standalone.reply_count == 0
        assert await comment_service.count(content_id) == 5

    @pytest.mark.asyncio
    async def test_delete_reply_decrements_parent_once(self, unit_env):
        """A second delete of the same reply fails and changes nothing."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        content_id = new_content()
        parent = await comment_service.create(content_id, new_user(), "Parent")
        replier = new_user()
        reply = await comment_service.create(
            content_id, replier, "One", parent_id=parent.id
        )
        await comment_service.create(content_id, new_user(), "Two", parent_id=parent.id)

        # Act
        first = await comment_service.soft_delete(reply.id, replier)
        second = await comment_service.soft_delete(reply.id, replier)

        # Assert
        assert first is True
        assert second is False
        assert (await comment_repo.find_by_id(parent.id)).reply_count == 1

    @pytest.mark.asyncio
    async def test_reply_count_never_negative(self, unit_env):
        """A drifted zero counter stays at zero."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        content_id = new_content()
        parent = await seed_comment(comment_repo, content_id, reply_count=0)
        replier = new_user()
        reply = await seed_comment(
            comment_repo, content_id, commenter_id=replier, parent_id=parent.id
        )

        # Act
        result = await comment_service.soft_delete(reply.id, replier)

        # Assert
        assert result is True
        assert (await comment_repo.find_by_id(parent.id)).reply_count == 0

    @pytest.mark.asyncio
    async def test_only_author_can_delete(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment = await comment_service.create(new_content(), new_user(), "Mine")

        assert await comment_service.soft_delete(comment.id, new_user()) is False
        assert await comment_service.get(comment.id) is not None

    @pytest.mark.asyncio
    async def test_delete_all_for_content(self, unit_env):
        """Removing content deletes its comments only."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        content_id, other_content = new_content(), new_content()
        await seed_thread(comment_repo, content_id, replies=3)
        await seed_comment(comment_repo, other_content)

        # Act
        result = await comment_service.delete_all_for_content(content_id)
        again = await comment_service.delete_all_for_content(content_id)

        # Assert
        assert result is True
        assert again is False
        assert await comment_service.count(content_id) == 0
        assert await comment_service.count(other_content) == 1


class TestToggleLike:
    """Tests for toggle_like method."""

    @pytest.mark.asyncio
    async def test_like_then_like_again_removes_it(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment = await comment_service.create(new_content(), new_user(), "Nice")
        voter = new_user()

        # Act
        added = await comment_service.toggle_like(voter, comment.id, VoteType.LIKE)
        removed = await comment_service.toggle_like(voter, comment.id, VoteType.LIKE)

        # Assert
        assert added.success is True
        assert added.message == "like added"
        assert added.vote_type == VoteType.LIKE
        assert (added.like_count, added.dislike_count) == (1, 0)

        assert removed.success is True
        assert removed.message == "like removed"
        assert removed.vote_type is None
        assert (removed.like_count, removed.dislike_count) == (0, 0)

    @pytest.mark.asyncio
    async def test_like_then_dislike_switches(self, unit_env):
        """Switching leaves exactly one dislike and no like."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_service.create(new_content(), new_user(), "Hmm")
        voter = new_user()
        await comment_service.toggle_like(voter, comment.id, VoteType.LIKE)

        # Act
        result = await comment_service.toggle_like(voter, comment.id, VoteType.DISLIKE)

        # Assert
        assert result.success is True
        assert result.message == "dislike switched"
        assert result.vote_type == VoteType.DISLIKE
        assert (result.like_count, result.dislike_count) == (0, 1)

        vote = await vote_service.get_vote(voter, comment.id)
        assert vote.vote_type == VoteType.DISLIKE
        cached = await comment_repo.find_by_id(comment.id)
        assert (cached.like_count, cached.dislike_count) == (0, 1)

    @pytest.mark.asyncio
    async def test_counts_reflect_all_voters(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment = await comment_service.create(new_content(), new_user(), "Popular")

        await comment_service.toggle_like(new_user(), comment.id, VoteType.LIKE)
        await comment_service.toggle_like(new_user(), comment.id, VoteType.LIKE)
        result = await comment_service.toggle_like(
            new_user(), comment.id, VoteType.DISLIKE
        )

        assert (result.like_count, result.dislike_count) == (2, 1)

    @pytest.mark.asyncio
    async def test_toggle_rereads_vote_inserted_concurrently(
        self, unit_env, monkeypatch
    ):
        """A vote that appears between the read and the insert is reported."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await seed_comment(comment_repo, new_content())
        user_id = new_user()
        await vote_service.add_vote(user_id, comment.id, VoteType.DISLIKE)

        real_get_vote = vote_service.get_vote
        reads = []

        async def stale_first_read(voter_id, comment_id):
            reads.append(comment_id)
            if len(reads) == 1:
                return None
            return await real_get_vote(voter_id, comment_id)

        monkeypatch.setattr(vote_service, "get_vote", stale_first_read)

        # Act
        result = await comment_service.toggle_like(user_id, comment.id, VoteType.LIKE)

        # Assert
        assert result.success is True
        assert result.vote_type == VoteType.DISLIKE
        assert result.like_count == 0
        assert result.dislike_count == 1
        assert len(reads) == 2

    @pytest.mark.asyncio
    async def test_toggle_on_missing_comment_raises(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.toggle_like(
                new_user(), CommentId(uuid4()), VoteType.LIKE
            )

    @pytest.mark.asyncio
    async def test_toggle_on_deleted_comment_raises(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        author = new_user()
        comment = await comment_service.create(new_content(), author, "Bye")
        await comment_service.soft_delete(comment.id, author)

        with pytest.raises(NotFoundError):
            await comment_service.toggle_like(new_user(), comment.id, VoteType.LIKE)

    @pytest.mark.asyncio
    async def test_get_like_status(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment = await comment_service.create(new_content(), new_user(), "Status")
        voter = new_user()

        assert await comment_service.get_like_status(voter, comment.id) is None
        await comment_service.toggle_like(voter, comment.id, VoteType.DISLIKE)
        assert (
            await comment_service.get_like_status(voter, comment.id)
            == VoteType.DISLIKE
        )


class TestVisibility:
    """Reported comments are hidden from their reporter only."""

    @pytest.mark.asyncio
    async def test_reporter_no_longer_sees_comment_or_replies(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        report_repo = await unit_env.get(ReportRepository)
        content_id = new_content()
        reported, replies = await seed_thread(comment_repo, content_id, replies=2)
        kept = await seed_comment(comment_repo, content_id, text="Kept")
        reporter, bystander = new_user(), new_user()
        await seed_report(report_repo, reported.id, reporter_id=reporter)

        # Act
        reporter_view = await comment_service.list_top_level(content_id, reporter)
        bystander_view = await comment_service.list_top_level(content_id, bystander)
        anonymous_view = await comment_service.list_top_level(content_id)
        reporter_replies = await comment_service.list_replies(reported.id, reporter)
        bystander_replies = await comment_service.list_replies(
            reported.id, bystander
        )

        # Assert
        assert [c.id for c in reporter_view] == [kept.id]
        assert {c.id for c in bystander_view} == {reported.id, kept.id}
        assert {c.id for c in anonymous_view} == {reported.id, kept.id}
        assert reporter_replies == []
        assert [c.id for c in bystander_replies] == [r.id for r in replies]

    @pytest.mark.asyncio
    async def test_reported_reply_hidden_among_siblings(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        report_repo = await unit_env.get(ReportRepository)
        parent, replies = await seed_thread(comment_repo, new_content(), replies=3)
        reporter = new_user()
        await seed_report(report_repo, replies[1].id, reporter_id=reporter)

        visible = await comment_service.list_replies(parent.id, reporter)

        assert [c.id for c in visible] == [replies[0].id, replies[2].id]

    @pytest.mark.asyncio
    async def test_top_level_listing_is_oldest_first(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        content_id = new_content()
        now = datetime.now()
        newer = await seed_comment(comment_repo, content_id, created_at=now)
        older = await seed_comment(
            comment_repo, content_id, created_at=now - timedelta(minutes=1)
        )

        listed = await comment_service.list_top_level(content_id)

        assert [c.id for c in listed] == [older.id, newer.id]


class TestFilter:
    """Tests for filter method."""

    @pytest.mark.asyncio
    async def test_second_page(self, unit_env):
        """15 comments at page_size 10 leave 5 on page 2."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        content_id = new_content()
        base = datetime.now() - timedelta(hours=1)
        for i in range(15):
            await seed_comment(
                comment_repo, content_id, created_at=base + timedelta(minutes=i)
            )

        # Act
        page = await comment_service.filter(
            CommentFilter(content_id=content_id, page=2, page_size=10)
        )

        # Assert
        assert page.total == 15
        assert page.total_pages == 2
        assert len(page.items) == 5

    @pytest.mark.asyncio
    async def test_only_mine_and_search(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        content_id = new_content()
        me = new_user()
        mine = await seed_comment(
            comment_repo, content_id, commenter_id=me, text="Great PAPER"
        )
        await seed_comment(comment_repo, content_id, commenter_id=me, text="Meh")
        theirs = await seed_comment(comment_repo, content_id, text="Paper cut")

        # Act
        only_mine = await comment_service.filter(
            CommentFilter(content_id=content_id, user_id=me, only_mine=True)
        )
        search = await comment_service.filter(
            CommentFilter(content_id=content_id, search="paper")
        )

        # Assert
        assert only_mine.total == 2
        assert {c.id for c in search.items} == {mine.id, theirs.id}

    @pytest.mark.asyncio
    async def test_filter_deleted_replies(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        content_id = new_content()
        parent, replies = await seed_thread(comment_repo, content_id, replies=2)
        await comment_service.soft_delete(replies[0].id, replies[0].commenter_id)

        page = await comment_service.filter(
            CommentFilter(content_id=content_id, parent_id=parent.id, is_deleted=True)
        )

        assert [c.id for c in page.items] == [replies[0].id]

    @pytest.mark.asyncio
    async def test_filter_hides_reported_comments(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        report_repo = await unit_env.get(ReportRepository)
        content_id = new_content()
        reported = await seed_comment(comment_repo, content_id)
        kept = await seed_comment(comment_repo, content_id)
        viewer = new_user()
        await seed_report(report_repo, reported.id, reporter_id=viewer)

        page = await comment_service.filter(
            CommentFilter(content_id=content_id, user_id=viewer)
        )

        assert [c.id for c in page.items] == [kept.id]
        assert page.total == 1

    @pytest.mark.asyncio
    async def test_filter_replies_of_reported_parent(self, unit_env):
        """Reporting a parent hides only the parent from the filter."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        report_repo = await unit_env.get(ReportRepository)
        content_id = new_content()
        parent, replies = await seed_thread(comment_repo, content_id, replies=2)
        viewer = new_user()
        await seed_report(report_repo, parent.id, reporter_id=viewer)
        await seed_report(report_repo, replies[0].id, reporter_id=viewer)

        # Act
        page = await comment_service.filter(
            CommentFilter(content_id=content_id, user_id=viewer, parent_id=parent.id)
        )

        # Assert
        assert [c.id for c in page.items] == [replies[1].id]
        assert page.total == 1

    def test_only_mine_requires_user(self):
        with pytest.raises(ValueError):
            CommentFilter(content_id=new_content(), only_mine=True)


class TestPurge:
    """Tests for purge method."""

    @pytest.mark.asyncio
    async def test_purge_removes_thread_and_votes(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        report_repo = await unit_env.get(ReportRepository)
        content_id = new_content()
        parent, replies = await seed_thread(comment_repo, content_id, replies=2)
        await vote_service.add_vote(new_user(), replies[0].id, VoteType.LIKE)
        report = await seed_report(report_repo, parent.id)

        # Act
        result = await comment_service.purge(parent.id)

        # Assert
        assert result is True
        remaining = await comment_repo.find_by_content(content_id, include_deleted=True)
        assert remaining == []
        assert (await vote_service.get_stats(replies[0].id)).like_count == 0
        assert await report_repo.find_by_id(report.id) is not None

    @pytest.mark.asyncio
    async def test_purge_live_reply_decrements_parent(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        parent, replies = await seed_thread(comment_repo, new_content(), replies=2)

        await comment_service.purge(replies[0].id)

        assert (await comment_repo.find_by_id(parent.id)).reply_count == 1

    @pytest.mark.asyncio
    async def test_purge_missing_comment(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        assert await comment_service.purge(CommentId(uuid4())) is False


class TestReconcileCounters:
    """Tests for reconcile_counters method."""

    @pytest.mark.asyncio
    async def test_reconcile_repairs_drift(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        content_id = new_content()
        parent, replies = await seed_thread(comment_repo, content_id, replies=2)
        await vote_service.add_vote(new_user(), parent.id, VoteType.LIKE)
        # Drift both caches behind the ledgers' backs
        await comment_repo.set_vote_counts(parent.id, 5, 5)
        await comment_repo.set_reply_count(parent.id, 9)

        # Act
        result = await comment_service.reconcile_counters(content_id)

        # Assert
        assert result.comments_checked == 3
        assert result.vote_counters_repaired == 1
        assert result.reply_counters_repaired == 1
        repaired = await comment_repo.find_by_id(parent.id)
        assert (repaired.like_count, repaired.dislike_count) == (1, 0)
        assert repaired.reply_count == 2

    @pytest.mark.asyncio
    async def test_reconcile_consistent_content_repairs_nothing(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        content_id = new_content()
        await seed_thread(comment_repo, content_id, replies=1)

        result = await comment_service.reconcile_counters(content_id)

        assert result.comments_checked == 2
        assert result.vote_counters_repaired == 0
        assert result.reply_counters_repaired == 0


class TestMaskName:
    """Tests for mask_name function."""

    def test_masks_each_token(self):
        assert mask_name("Jane Doe") == "J*** D**"

    def test_single_letter_token(self):
        assert mask_name("J Doe") == "J D**"

    def test_blank_name_uses_placeholder(self):
        assert mask_name("") == "***"
        assert mask_name(None) == "***"
        assert mask_name("   ", placeholder="Anonymous") == "Anonymous"
