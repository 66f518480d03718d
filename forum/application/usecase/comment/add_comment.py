"""Add comment use case."""

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import ActorUseCase
from forum.config import PointsSettings
from forum.domain.error import AuthRequiredError, NotFoundError, ValidationError
from forum.domain.model import Comment
from forum.domain.service import (
    CommentService,
    EngagementService,
    IdentityProvider,
    NotificationSink,
    ThreadService,
)
from forum.domain.value import NotificationLevel, ThreadId


class AddCommentRequest(BaseModel):
    """Add comment request."""

    thread_id: ThreadId
    text: str


class AddCommentResponse(BaseModel):
    """Add comment response."""

    comment: Comment
    comment_count: int
    points_awarded: int


class AddCommentUseCase(ActorUseCase):
    """Use case for commenting on a thread."""

    def __init__(
        self,
        thread_service: ThreadService,
        comment_service: CommentService,
        engagement_service: EngagementService,
        points: PointsSettings,
        identity: IdentityProvider,
        notifications: NotificationSink,
    ) -> None:
        """Initialize add comment use case.

        Args:
            thread_service: Thread domain service
            comment_service: Comment domain service
            engagement_service: Recomputes the thread's comment counter
            points: Points awarded to commenters
            identity: Current user lookup
            notifications: User feedback channel
        """
        super().__init__(identity, notifications)
        self.thread_service = thread_service
        self.comment_service = comment_service
        self.engagement_service = engagement_service
        self.points = points

    def execute(self, request: AddCommentRequest) -> AddCommentResponse:
        """Execute add comment flow.

        Steps:
        1. Verify the thread is visible
        2. Create the comment (text is checked before identity)
        3. Recompute the thread's comment counter

        Raises:
            NotFoundError: If the thread is missing or pending deletion
            ValidationError: If the text is empty
            AuthRequiredError: If nobody is signed in
        """
        if self.thread_service.get(request.thread_id) is None:
            raise NotFoundError("Thread", request.thread_id)

        with logfire.span("add_comment.execute", thread_id=request.thread_id):
            try:
                comment = self.comment_service.add_comment(
                    request.thread_id, self.viewer(), request.text
                )
            except ValidationError as e:
                self.reject(e)
                raise
            except AuthRequiredError as e:
                self.prompt_sign_in(e)
                raise

            count = self.engagement_service.recompute_comments(request.thread_id)

        points = self.points.comment_added
        self.notify(
            f"Comment added! You earned +{points} points 🎉",
            NotificationLevel.SUCCESS,
        )
        return AddCommentResponse(
            comment=comment, comment_count=count, points_awarded=points
        )
