"""Delete thread use case."""

import math

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import ActorUseCase
from forum.domain.error import NotAuthorizedError, NotFoundError
from forum.domain.model import DeletionKey
from forum.domain.service import (
    DeletionService,
    IdentityProvider,
    NotificationSink,
    ThreadService,
)
from forum.domain.value import NotificationLevel, ThreadId


class DeleteThreadRequest(BaseModel):
    """Delete thread request."""

    thread_id: ThreadId


class DeleteThreadResponse(BaseModel):
    """Delete thread response."""

    key: DeletionKey
    undo_seconds: float


class DeleteThreadUseCase(ActorUseCase):
    """Use case for soft-deleting a thread.

    The thread disappears immediately and is purged, with its comments and
    engagement data, once the grace period passes without an undo.
    """

    def __init__(
        self,
        thread_service: ThreadService,
        deletion_service: DeletionService,
        identity: IdentityProvider,
        notifications: NotificationSink,
    ) -> None:
        super().__init__(identity, notifications)
        self.thread_service = thread_service
        self.deletion_service = deletion_service

    def execute(self, request: DeleteThreadRequest) -> DeleteThreadResponse:
        """Execute delete thread flow.

        Deleting a thread that is already pending keeps the first deadline
        and reports the time left on it.

        Raises:
            AuthRequiredError: If nobody is signed in
            NotFoundError: If the thread is missing
            NotAuthorizedError: If the actor did not write the thread
        """
        actor = self.require_actor("delete a thread")
        thread = self.thread_service.find(request.thread_id)
        if thread is None:
            raise NotFoundError("Thread", request.thread_id)
        if thread.author.id != actor.id:
            logfire.warn(
                "Unauthorized thread delete", thread_id=thread.id, actor_id=actor.id
            )
            raise NotAuthorizedError("thread", thread.id, actor.id)

        key = DeletionKey.thread(thread.id)
        pending = self.deletion_service.is_pending(key)
        record = self.deletion_service.delete(key, deleted_by=actor.id)
        if record is None:
            raise NotFoundError("Thread", request.thread_id)

        left = (
            self.deletion_service.remaining(record)
            if pending
            else self.deletion_service.grace_period
        )
        self.notify(
            f"Thread deleted. Undo within {math.ceil(left)} seconds",
            NotificationLevel.INFO,
            duration_ms=int(left * 1000),
        )
        return DeleteThreadResponse(key=key, undo_seconds=left)
