"""Undo delete use case."""

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import ActorUseCase
from forum.domain.error import NotAuthorizedError
from forum.domain.model import DeletionKey
from forum.domain.service import DeletionService, IdentityProvider, NotificationSink
from forum.domain.value import NotificationLevel


class UndoDeleteRequest(BaseModel):
    """Undo delete request."""

    key: DeletionKey


class UndoDeleteResponse(BaseModel):
    """Undo delete response."""

    key: DeletionKey
    restored: bool


class UndoDeleteUseCase(ActorUseCase):
    """Use case for restoring a thread, comment or reply inside its grace period."""

    def __init__(
        self,
        deletion_service: DeletionService,
        identity: IdentityProvider,
        notifications: NotificationSink,
    ) -> None:
        super().__init__(identity, notifications)
        self.deletion_service = deletion_service

    def execute(self, request: UndoDeleteRequest) -> UndoDeleteResponse:
        """Execute undo flow.

        Undo after the grace period is not an error: the response reports
        ``restored=False``.

        Raises:
            AuthRequiredError: If nobody is signed in
            NotAuthorizedError: If someone else deleted the entity
        """
        actor = self.require_actor("undo a delete")
        key = request.key
        record = self.deletion_service.ledger.get(key)
        if record is not None and record.deleted_by not in (None, actor.id):
            logfire.warn(
                "Unauthorized undo",
                entity_type=key.entity_type.value,
                entity_id=key.entity_id,
                actor_id=actor.id,
            )
            raise NotAuthorizedError(key.entity_type.value, key.entity_id, actor.id)

        restored = self.deletion_service.undo(key)

        what = key.entity_type.value.capitalize()
        if restored:
            self.notify(f"{what} restored", NotificationLevel.SUCCESS)
        else:
            self.notify(f"{what} can no longer be restored", NotificationLevel.INFO)
        return UndoDeleteResponse(key=key, restored=restored)
