"""Create thread use case."""

import logfire
from pydantic import BaseModel, Field

from forum.application.usecase.base import ActorUseCase
from forum.config import PointsSettings
from forum.domain.error import ValidationError
from forum.domain.model import Media, Thread, ThreadDraft
from forum.domain.service import IdentityProvider, NotificationSink, ThreadService
from forum.domain.value import ForumId, NotificationLevel


class CreateThreadRequest(BaseModel):
    """Create thread request."""

    title: str
    content: str
    forum_id: ForumId | None = None
    is_question: bool = False
    is_anonymous: bool = False
    tags: list[str] = Field(default_factory=list)
    media: list[Media] = Field(default_factory=list)


class CreateThreadResponse(BaseModel):
    """Create thread response."""

    thread: Thread
    points_awarded: int


class CreateThreadUseCase(ActorUseCase):
    """Use case for publishing a new thread."""

    def __init__(
        self,
        thread_service: ThreadService,
        points: PointsSettings,
        identity: IdentityProvider,
        notifications: NotificationSink,
    ) -> None:
        """Initialize create thread use case.

        Args:
            thread_service: Thread domain service
            points: Points awarded to authors
            identity: Current user lookup
            notifications: User feedback channel
        """
        super().__init__(identity, notifications)
        self.thread_service = thread_service
        self.points = points

    def execute(self, request: CreateThreadRequest) -> CreateThreadResponse:
        """Execute create thread flow.

        Steps:
        1. Resolve the signed-in author
        2. Validate and create the thread (announced on the change signal)
        3. Clear the author's saved draft

        Raises:
            AuthRequiredError: If nobody is signed in
            ValidationError: If the form breaks the authoring rules
        """
        actor = self.require_actor("create a thread")
        draft = ThreadDraft.model_validate(request.model_dump())

        with logfire.span("create_thread.execute", author_id=actor.id):
            try:
                thread = self.thread_service.author(actor, draft)
            except ValidationError as e:
                self.reject(e)
                raise

            self.thread_service.clear_draft(actor.id)

        if thread.is_anonymous:
            points = 0
            self.notify("Thread created successfully!", NotificationLevel.SUCCESS)
        else:
            points = self.points.thread_created
            self.notify(
                f"Thread created! You earned {points} points 🎉",
                NotificationLevel.SUCCESS,
            )

        return CreateThreadResponse(thread=thread, points_awarded=points)
