"""Application layer DI providers."""

from dishka import Scope, provide

from remark.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    FilterCommentsUseCase,
    GetCommentsUseCase,
    PurgeCommentUseCase,
    ReconcileCountersUseCase,
    RemoveContentCommentsUseCase,
    UpdateCommentUseCase,
)
from remark.application.usecase.report import (
    ListReportsUseCase,
    ModerateReportUseCase,
    SubmitReportUseCase,
)
from remark.application.usecase.vote import GetVoteStatusUseCase, ToggleVoteUseCase
from remark.config import CommentSettings
from remark.domain.service import (
    CommentService,
    ProfileService,
    ReportService,
    VoteService,
)
from remark.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        profile_service: ProfileService,
        settings: CommentSettings,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            profile_service=profile_service,
            settings=settings,
        )

    @provide
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        profile_service: ProfileService,
        settings: CommentSettings,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            profile_service=profile_service,
            settings=settings,
        )

    @provide
    def get_filter_comments_use_case(
        self,
        comment_service: CommentService,
        profile_service: ProfileService,
        settings: CommentSettings,
    ) -> FilterCommentsUseCase:
        """Provide filter comments use case."""
        return FilterCommentsUseCase(
            comment_service=comment_service,
            profile_service=profile_service,
            settings=settings,
        )

    @provide
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide
    def get_remove_content_comments_use_case(
        self, comment_service: CommentService
    ) -> RemoveContentCommentsUseCase:
        return RemoveContentCommentsUseCase(comment_service=comment_service)

    @provide
    def get_purge_comment_use_case(
        self, comment_service: CommentService
    ) -> PurgeCommentUseCase:
        return PurgeCommentUseCase(comment_service=comment_service)

    @provide
    def get_reconcile_counters_use_case(
        self, comment_service: CommentService
    ) -> ReconcileCountersUseCase:
        return ReconcileCountersUseCase(comment_service=comment_service)

    # Vote use cases
    @provide
    def get_toggle_vote_use_case(
        self, comment_service: CommentService
    ) -> ToggleVoteUseCase:
        """Provide toggle vote use case."""
        return ToggleVoteUseCase(comment_service=comment_service)

    @provide
    def get_vote_status_use_case(
        self, comment_service: CommentService, vote_service: VoteService
    ) -> GetVoteStatusUseCase:
        """Provide vote status use case."""
        return GetVoteStatusUseCase(
            comment_service=comment_service, vote_service=vote_service
        )

    # Report use cases
    @provide
    def get_submit_report_use_case(
        self, comment_service: CommentService, report_service: ReportService
    ) -> SubmitReportUseCase:
        """Provide submit report use case."""
        return SubmitReportUseCase(
            comment_service=comment_service, report_service=report_service
        )

    @provide
    def get_moderate_report_use_case(
        self, report_service: ReportService
    ) -> ModerateReportUseCase:
        """Provide moderate report use case."""
        return ModerateReportUseCase(report_service=report_service)

    @provide
    def get_list_reports_use_case(
        self, report_service: ReportService
    ) -> ListReportsUseCase:
        """Provide list reports use case."""
        return ListReportsUseCase(report_service=report_service)
