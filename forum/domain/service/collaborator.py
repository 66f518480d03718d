"""Interfaces for collaborators that live outside the engine."""

from typing import Optional

from forum.domain.model import Actor
from forum.domain.value import NotificationLevel


class IdentityProvider:
    """Supplies the current actor.

    The engine never issues identities; a missing actor means the caller
    must route the user to sign-in.
    """

    def current_actor(self) -> Optional[Actor]:
        """Return the signed-in actor, or None when signed out."""
        raise NotImplementedError


class NotificationSink:
    """Accepts transient user feedback (toasts)."""

    def notify(
        self, message: str, level: NotificationLevel, duration_ms: int = 3000
    ) -> None:
        """Show ``message`` to the user.

        Args:
            message: Human-readable message
            level: Severity
            duration_ms: How long the message stays visible
        """
        raise NotImplementedError
