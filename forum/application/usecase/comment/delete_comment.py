"""Delete comment use case."""

import math

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import ActorUseCase
from forum.domain.error import NotAuthorizedError, NotFoundError
from forum.domain.model import DeletionKey
from forum.domain.service import (
    CommentService,
    DeletionService,
    IdentityProvider,
    NotificationSink,
)
from forum.domain.value import CommentId, NotificationLevel, ReplyId, ThreadId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    thread_id: ThreadId
    comment_id: CommentId
    reply_id: ReplyId | None = None  # Set to delete a reply instead


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    key: DeletionKey
    undo_seconds: float


class DeleteCommentUseCase(ActorUseCase):
    """Use case for soft-deleting a comment (with its replies) or a single reply."""

    def __init__(
        self,
        comment_service: CommentService,
        deletion_service: DeletionService,
        identity: IdentityProvider,
        notifications: NotificationSink,
    ) -> None:
        super().__init__(identity, notifications)
        self.comment_service = comment_service
        self.deletion_service = deletion_service

    def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Deleting a target that is already pending keeps the first deadline
        and reports the time left on it.

        Raises:
            AuthRequiredError: If nobody is signed in
            NotFoundError: If the target is missing or its thread or parent
                comment is pending deletion
            NotAuthorizedError: If the actor is not the author
        """
        actor = self.require_actor("delete a comment")
        ledger = self.deletion_service.ledger

        if request.reply_id is None:
            resource = "comment"
            target = self.comment_service.find_comment(
                request.thread_id, request.comment_id
            )
            # Ancestors only; the comment itself may already be pending
            hidden = ledger.is_hidden(request.thread_id)
            key = DeletionKey.comment(request.thread_id, request.comment_id)
        else:
            resource = "reply"
            target = self.comment_service.find_reply(
                request.thread_id, request.comment_id, request.reply_id
            )
            hidden = ledger.is_hidden(request.thread_id, request.comment_id)
            key = DeletionKey.reply(
                request.thread_id, request.comment_id, request.reply_id
            )

        if target is None or hidden:
            raise NotFoundError(
                resource.capitalize(), request.reply_id or request.comment_id
            )
        if target.author.id != actor.id:
            logfire.warn(
                "Unauthorized comment delete", target_id=target.id, actor_id=actor.id
            )
            raise NotAuthorizedError(resource, target.id, actor.id)

        pending = self.deletion_service.is_pending(key)
        record = self.deletion_service.delete(key, deleted_by=actor.id)
        if record is None:
            raise NotFoundError(resource.capitalize(), target.id)

        left = (
            self.deletion_service.remaining(record)
            if pending
            else self.deletion_service.grace_period
        )
        self.notify(
            f"{resource.capitalize()} deleted. Undo within {math.ceil(left)} seconds",
            NotificationLevel.INFO,
            duration_ms=int(left * 1000),
        )
        return DeleteCommentResponse(key=key, undo_seconds=left)
