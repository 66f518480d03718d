"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.comment import (
    AddCommentUseCase,
    AddReplyUseCase,
    DeleteCommentUseCase,
    EditCommentUseCase,
    GetCommentsUseCase,
    ToggleCommentLikeUseCase,
)
from forum.application.usecase.deletion import UndoDeleteUseCase
from forum.application.usecase.thread import (
    CreateThreadUseCase,
    DeleteThreadUseCase,
    ListThreadsUseCase,
    RestoreDraftUseCase,
    SaveDraftUseCase,
    ToggleThreadLikeUseCase,
    ViewThreadUseCase,
)
from forum.config import PointsSettings
from forum.domain.service import (
    CommentService,
    DeletionService,
    EngagementService,
    IdentityProvider,
    NotificationSink,
    ThreadService,
)
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Thread use cases
    @provide(scope=Scope.REQUEST)
    def get_create_thread_use_case(
        self,
        thread_service: ThreadService,
        points: PointsSettings,
        identity: IdentityProvider,
        notifications: NotificationSink,
    ) -> CreateThreadUseCase:
        """Provide create thread use case."""
        return CreateThreadUseCase(
            thread_service=thread_service,
            points=points,
            identity=identity,
            notifications=notifications,
        )

    @provide(scope=Scope.REQUEST)
    def get_save_draft_use_case(
        self,
        thread_service: ThreadService,
        identity: IdentityProvider,
        notifications: NotificationSink,
    ) -> SaveDraftUseCase:
        """Provide save draft use case."""
        return SaveDraftUseCase(
            thread_service=thread_service,
            identity=identity,
            notifications=notifications,
        )

    @provide(scope=Scope.REQUEST)
    def get_restore_draft_use_case(
        self,
        thread_service: ThreadService,
        identity: IdentityProvider,
        notifications: NotificationSink,
    ) -> RestoreDraftUseCase:
        """Provide restore draft use case."""
        return RestoreDraftUseCase(
            thread_service=thread_service,
            identity=identity,
            notifications=notifications,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_threads_use_case(
        self,
        thread_service: ThreadService,
        engagement_service: EngagementService,
        identity: IdentityProvider,
        notifications: NotificationSink,
    ) -> ListThreadsUseCase:
        """Provide list threads use case."""
        return ListThreadsUseCase(
            thread_service=thread_service,
            engagement_service=engagement_service,
            identity=identity,
            notifications=notifications,
        )

    @provide(scope=Scope.REQUEST)
    def get_view_thread_use_case(
        self,
        thread_service: ThreadService,
        comment_service: CommentService,
        engagement_service: EngagementService,
        identity: IdentityProvider,
        notifications: NotificationSink,
    ) -> ViewThreadUseCase:
        """Provide view thread use case."""
        return ViewThreadUseCase(
            thread_service=thread_service,
            comment_service=comment_service,
            engagement_service=engagement_service,
            identity=identity,
            notifications=notifications,
        )

    @provide(scope=Scope.REQUEST)
    def get_toggle_thread_like_use_case(
        self,
        thread_service: ThreadService,
        engagement_service: EngagementService,
        points: PointsSettings,
        identity: IdentityProvider,
        notifications: NotificationSink,
    ) -> ToggleThreadLikeUseCase:
        """Provide toggle thread like use case."""
        return ToggleThreadLikeUseCase(
            thread_service=thread_service,
            engagement_service=engagement_service,
            points=points,
            identity=identity,
            notifications=notifications,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_thread_use_case(
        self,
        thread_service: ThreadService,
        deletion_service: DeletionService,
        identity: IdentityProvider,
        notifications: NotificationSink,
    ) -> DeleteThreadUseCase:
        """Provide delete thread use case."""
        return DeleteThreadUseCase(
            thread_service=thread_service,
            deletion_service=deletion_service,
            identity=identity,
            notifications=notifications,
        )

    # Deletion use cases
    @provide(scope=Scope.REQUEST)
    def get_undo_delete_use_case(
        self,
        deletion_service: DeletionService,
        identity: IdentityProvider,
        notifications: NotificationSink,
    ) -> UndoDeleteUseCase:
        """Provide undo delete use case."""
        return UndoDeleteUseCase(
            deletion_service=deletion_service,
            identity=identity,
            notifications=notifications,
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self,
        thread_service: ThreadService,
        comment_service: CommentService,
        engagement_service: EngagementService,
        points: PointsSettings,
        identity: IdentityProvider,
        notifications: NotificationSink,
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(
            thread_service=thread_service,
            comment_service=comment_service,
            engagement_service=engagement_service,
            points=points,
            identity=identity,
            notifications=notifications,
        )

    @provide(scope=Scope.REQUEST)
    def get_add_reply_use_case(
        self,
        thread_service: ThreadService,
        comment_service: CommentService,
        points: PointsSettings,
        identity: IdentityProvider,
        notifications: NotificationSink,
    ) -> AddReplyUseCase:
        """Provide add reply use case."""
        return AddReplyUseCase(
            thread_service=thread_service,
            comment_service=comment_service,
            points=points,
            identity=identity,
            notifications=notifications,
        )

    @provide(scope=Scope.REQUEST)
    def get_toggle_comment_like_use_case(
        self,
        comment_service: CommentService,
        identity: IdentityProvider,
        notifications: NotificationSink,
    ) -> ToggleCommentLikeUseCase:
        """Provide toggle comment like use case."""
        return ToggleCommentLikeUseCase(
            comment_service=comment_service,
            identity=identity,
            notifications=notifications,
        )

    @provide(scope=Scope.REQUEST)
    def get_edit_comment_use_case(
        self,
        comment_service: CommentService,
        identity: IdentityProvider,
        notifications: NotificationSink,
    ) -> EditCommentUseCase:
        """Provide edit comment use case."""
        return EditCommentUseCase(
            comment_service=comment_service,
            identity=identity,
            notifications=notifications,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self,
        comment_service: CommentService,
        deletion_service: DeletionService,
        identity: IdentityProvider,
        notifications: NotificationSink,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service,
            deletion_service=deletion_service,
            identity=identity,
            notifications=notifications,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        identity: IdentityProvider,
        notifications: NotificationSink,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            identity=identity,
            notifications=notifications,
        )
