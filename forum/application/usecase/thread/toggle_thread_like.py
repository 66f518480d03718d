"""Toggle thread like use case."""

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import ActorUseCase
from forum.config import PointsSettings
from forum.domain.error import NotFoundError
from forum.domain.service import (
    EngagementService,
    IdentityProvider,
    NotificationSink,
    ThreadService,
)
from forum.domain.value import NotificationLevel, ThreadId


class ToggleThreadLikeRequest(BaseModel):
    """Toggle thread like request."""

    thread_id: ThreadId


class ToggleThreadLikeResponse(BaseModel):
    """Toggle thread like response."""

    thread_id: ThreadId
    liked: bool
    likes: int
    # Points the thread's author received for this like (reported only)
    points_awarded: int


class ToggleThreadLikeUseCase(ActorUseCase):
    """Use case for liking or un-liking a thread."""

    def __init__(
        self,
        thread_service: ThreadService,
        engagement_service: EngagementService,
        points: PointsSettings,
        identity: IdentityProvider,
        notifications: NotificationSink,
    ) -> None:
        super().__init__(identity, notifications)
        self.thread_service = thread_service
        self.engagement_service = engagement_service
        self.points = points

    def execute(self, request: ToggleThreadLikeRequest) -> ToggleThreadLikeResponse:
        """Execute toggle like flow.

        Raises:
            AuthRequiredError: If nobody is signed in
            NotFoundError: If the thread is missing or pending deletion
        """
        actor = self.require_actor("vote")
        thread = self.thread_service.get(request.thread_id)
        if thread is None:
            raise NotFoundError("Thread", request.thread_id)

        with logfire.span(
            "toggle_thread_like.execute", thread_id=thread.id, user_id=actor.id
        ):
            liked = self.engagement_service.toggle_thread_like(thread.id, actor.id)

        # The toggle already wrote the recomputed counter through
        updated = self.thread_service.find(thread.id)
        likes = updated.likes if updated is not None else 0

        points = 0
        if not liked:
            self.notify("Vote removed", NotificationLevel.INFO)
        elif not thread.is_anonymous:
            points = self.points.upvote_received
            self.notify(
                f"Vote recorded! Thread author earned +{points} points 🎉",
                NotificationLevel.SUCCESS,
            )
        else:
            self.notify("Vote recorded!", NotificationLevel.SUCCESS)

        return ToggleThreadLikeResponse(
            thread_id=thread.id, liked=liked, likes=likes, points_awarded=points
        )
