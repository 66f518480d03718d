"""Thread draft use cases."""

from pydantic import BaseModel

from forum.application.usecase.base import ActorUseCase
from forum.domain.model import ThreadDraft
from forum.domain.service import IdentityProvider, NotificationSink, ThreadService
from forum.domain.value import NotificationLevel


class SaveDraftRequest(BaseModel):
    """Save draft request."""

    draft: ThreadDraft


class SaveDraftResponse(BaseModel):
    """Save draft response."""

    draft: ThreadDraft


class SaveDraftUseCase(ActorUseCase):
    """Use case for storing a half-written thread."""

    def __init__(
        self,
        thread_service: ThreadService,
        identity: IdentityProvider,
        notifications: NotificationSink,
    ) -> None:
        super().__init__(identity, notifications)
        self.thread_service = thread_service

    def execute(self, request: SaveDraftRequest) -> SaveDraftResponse:
        """Save the draft for the signed-in user, replacing any previous one.

        Raises:
            AuthRequiredError: If nobody is signed in
        """
        actor = self.require_actor("save a draft")
        saved = self.thread_service.save_draft(actor.id, request.draft)
        self.notify("Draft saved successfully", NotificationLevel.SUCCESS)
        return SaveDraftResponse(draft=saved)


class RestoreDraftRequest(BaseModel):
    """Restore draft request."""

    pass


class RestoreDraftResponse(BaseModel):
    """Restore draft response."""

    draft: ThreadDraft | None


class RestoreDraftUseCase(ActorUseCase):
    """Use case for reopening the signed-in user's saved draft."""

    def __init__(
        self,
        thread_service: ThreadService,
        identity: IdentityProvider,
        notifications: NotificationSink,
    ) -> None:
        super().__init__(identity, notifications)
        self.thread_service = thread_service

    def execute(self, request: RestoreDraftRequest) -> RestoreDraftResponse:
        actor = self.require_actor("restore a draft")
        draft = self.thread_service.load_draft(actor.id)
        if draft is not None:
            self.notify("Draft restored", NotificationLevel.INFO)
        return RestoreDraftResponse(draft=draft)
