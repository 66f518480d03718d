"""View thread use case."""

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import ActorUseCase
from forum.domain.error import NotFoundError
from forum.domain.model import Comment, Thread
from forum.domain.service import (
    CommentService,
    EngagementService,
    IdentityProvider,
    NotificationSink,
    ThreadService,
)
from forum.domain.value import SessionId, ThreadId


class ViewThreadRequest(BaseModel):
    """View thread request."""

    thread_id: ThreadId
    session_id: SessionId


class ViewThreadResponse(BaseModel):
    """View thread response."""

    thread: Thread
    comments: list[Comment]
    liked: bool


class ViewThreadUseCase(ActorUseCase):
    """Use case for opening a thread's detail view."""

    def __init__(
        self,
        thread_service: ThreadService,
        comment_service: CommentService,
        engagement_service: EngagementService,
        identity: IdentityProvider,
        notifications: NotificationSink,
    ) -> None:
        """Initialize view thread use case.

        Args:
            thread_service: Thread domain service
            comment_service: Comment domain service
            engagement_service: View and like counters
            identity: Current user lookup
            notifications: User feedback channel
        """
        super().__init__(identity, notifications)
        self.thread_service = thread_service
        self.comment_service = comment_service
        self.engagement_service = engagement_service

    def execute(self, request: ViewThreadRequest) -> ViewThreadResponse:
        """Execute view thread flow.

        Steps:
        1. Resolve the visible thread
        2. Count the view (once per session)
        3. Project comments and like state for the viewer

        Raises:
            NotFoundError: If the thread is missing or pending deletion
        """
        with logfire.span(
            "view_thread.execute",
            thread_id=request.thread_id,
            session_id=request.session_id,
        ):
            if self.thread_service.get(request.thread_id) is None:
                raise NotFoundError("Thread", request.thread_id)

            self.engagement_service.recompute_views(
                request.thread_id, request.session_id
            )
            thread = self.thread_service.get(request.thread_id)

            viewer = self.viewer()
            viewer_id = viewer.id if viewer else None
            comments = self.comment_service.get_comments(request.thread_id, viewer_id)
            liked = (
                self.engagement_service.has_liked(request.thread_id, viewer_id)
                if viewer_id
                else False
            )

        return ViewThreadResponse(thread=thread, comments=comments, liked=liked)
