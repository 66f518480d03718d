"""Get comments use case."""

from pydantic import BaseModel

from forum.application.usecase.base import ActorUseCase
from forum.domain.model import Comment
from forum.domain.service import CommentService, IdentityProvider, NotificationSink
from forum.domain.value import ThreadId


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    thread_id: ThreadId


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    comments: list[Comment]
    total: int


class GetCommentsUseCase(ActorUseCase):
    """Use case for reading a thread's comment tree."""

    def __init__(
        self,
        comment_service: CommentService,
        identity: IdentityProvider,
        notifications: NotificationSink,
    ) -> None:
        super().__init__(identity, notifications)
        self.comment_service = comment_service

    def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Visible comments, newest first, with the viewer's votes filled in."""
        viewer = self.viewer()
        comments = self.comment_service.get_comments(
            request.thread_id, viewer.id if viewer else None
        )
        return GetCommentsResponse(comments=comments, total=len(comments))
