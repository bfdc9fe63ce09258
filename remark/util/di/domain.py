"""Domain layer DI providers."""

from dishka import Scope, provide

from remark.domain.repository import (
    CommentRepository,
    ReportRepository,
    UserProfileRepository,
    VoteRepository,
)
from remark.domain.service import (
    CommentRecordService,
    CommentService,
    ProfileService,
    ReportService,
    VoteService,
)
from remark.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_comment_record_service(
        self, comment_repository: CommentRepository
    ) -> CommentRecordService:
        """Provide the comment store contract used by the ledgers."""
        return CommentRecordService(comment_repository=comment_repository)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        comment_records: CommentRecordService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            comment_records=comment_records,
        )

    @provide
    def get_report_service(
        self,
        report_repository: ReportRepository,
        comment_records: CommentRecordService,
        profile_repository: UserProfileRepository,
    ) -> ReportService:
        """Provide report domain service."""
        return ReportService(
            report_repository=report_repository,
            comment_records=comment_records,
            profile_repository=profile_repository,
        )

    @provide
    def get_profile_service(
        self, profile_repository: UserProfileRepository
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(profile_repository=profile_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        vote_service: VoteService,
        report_service: ReportService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            vote_service=vote_service,
            report_service=report_service,
        )
