"""Add reply use case."""

from pydantic import BaseModel

from forum.application.usecase.base import ActorUseCase
from forum.config import PointsSettings
from forum.domain.error import AuthRequiredError, NotFoundError, ValidationError
from forum.domain.model import Reply
from forum.domain.service import (
    CommentService,
    IdentityProvider,
    NotificationSink,
    ThreadService,
)
from forum.domain.value import CommentId, NotificationLevel, ThreadId


class AddReplyRequest(BaseModel):
    """Add reply request."""

    thread_id: ThreadId
    comment_id: CommentId
    text: str


class AddReplyResponse(BaseModel):
    """Add reply response."""

    reply: Reply
    points_awarded: int


class AddReplyUseCase(ActorUseCase):
    """Use case for replying to a comment.

    Replies do not change the thread's comment counter.
    """

    def __init__(
        self,
        thread_service: ThreadService,
        comment_service: CommentService,
        points: PointsSettings,
        identity: IdentityProvider,
        notifications: NotificationSink,
    ) -> None:
        super().__init__(identity, notifications)
        self.thread_service = thread_service
        self.comment_service = comment_service
        self.points = points

    def execute(self, request: AddReplyRequest) -> AddReplyResponse:
        """Execute add reply flow.

        Raises:
            NotFoundError: If the thread or comment is missing or pending deletion
            ValidationError: If the text is empty
            AuthRequiredError: If nobody is signed in
        """
        if self.thread_service.get(request.thread_id) is None:
            raise NotFoundError("Thread", request.thread_id)

        try:
            reply = self.comment_service.add_reply(
                request.thread_id, request.comment_id, self.viewer(), request.text
            )
        except ValidationError as e:
            self.reject(e)
            raise
        except AuthRequiredError as e:
            self.prompt_sign_in(e)
            raise

        points = self.points.comment_added
        self.notify(
            f"Reply added! You earned +{points} points 🎉",
            NotificationLevel.SUCCESS,
        )
        return AddReplyResponse(reply=reply, points_awarded=points)
