"""Default collaborator implementations.

The host application normally supplies its own identity provider and
notification sink; these cover headless use and tests.
"""

from typing import Optional

import logfire

from forum.domain.model import Actor
from forum.domain.service.collaborator import IdentityProvider, NotificationSink
from forum.domain.value import NotificationLevel


class StaticIdentityProvider(IdentityProvider):
    """Identity provider holding a settable current actor."""

    def __init__(self, actor: Optional[Actor] = None) -> None:
        self.actor = actor

    def current_actor(self) -> Optional[Actor]:
        return self.actor

    def sign_in(self, actor: Actor) -> None:
        self.actor = actor

    def sign_out(self) -> None:
        self.actor = None


class LoggingNotificationSink(NotificationSink):
    """Sends user notifications to the log."""

    def notify(
        self, message: str, level: NotificationLevel, duration_ms: int = 3000
    ) -> None:
        logfire.info(
            "User notification",
            message=message,
            level=level.value,
            duration_ms=duration_ms,
        )


class RecordingNotificationSink(NotificationSink):
    """Keeps every notification in memory, in order."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, NotificationLevel, int]] = []

    def notify(
        self, message: str, level: NotificationLevel, duration_ms: int = 3000
    ) -> None:
        self.messages.append((message, level, duration_ms))

    @property
    def last(self) -> Optional[tuple[str, NotificationLevel, int]]:
        return self.messages[-1] if self.messages else None
