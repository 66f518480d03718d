"""Base use cases."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from forum.domain.error import AuthRequiredError, ValidationError
from forum.domain.model import Actor
from forum.domain.service import IdentityProvider, NotificationSink
from forum.domain.value import NotificationLevel


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    def execute(self, request: Any) -> Any:
        pass


class ActorUseCase(BaseUseCase):
    """Use case acting on behalf of the current user.

    Resolves the actor through the identity provider and reports
    user-facing outcomes through the notification sink.
    """

    def __init__(
        self, identity: IdentityProvider, notifications: NotificationSink
    ) -> None:
        self.identity = identity
        self.notifications = notifications

    def viewer(self) -> Optional[Actor]:
        """Current actor, if any; for read-only projections."""
        return self.identity.current_actor()

    def require_actor(self, action: str) -> Actor:
        """Current actor, or prompt for sign-in.

        Raises:
            AuthRequiredError: If nobody is signed in
        """
        actor = self.identity.current_actor()
        if actor is None:
            error = AuthRequiredError(action)
            self.prompt_sign_in(error)
            raise error
        return actor

    def prompt_sign_in(self, error: AuthRequiredError) -> None:
        """Tell the user to sign in before the error propagates."""
        self.notify(f"Please sign in to {error.action}", NotificationLevel.INFO)

    def reject(self, error: ValidationError) -> None:
        """Surface a validation failure to the user before it propagates."""
        self.notify(str(error), NotificationLevel.WARNING)

    def notify(
        self, message: str, level: NotificationLevel, duration_ms: int = 3000
    ) -> None:
        self.notifications.notify(message, level, duration_ms)
