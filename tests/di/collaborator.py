"""Mock collaborator provider for testing."""

from dishka import Scope, provide

from forum.adapter.collaborator import RecordingNotificationSink, StaticIdentityProvider
from forum.domain.service import IdentityProvider, NotificationSink
from forum.util.di.infrastructure.collaborator import CollaboratorProvider


class MockCollaboratorProvider(CollaboratorProvider):
    """Mock collaborator provider.

    Identity starts signed out; notifications are recorded for assertions.
    """

    __is_mock__ = True

    scope = Scope.APP

    @provide
    def get_identity_provider(self) -> IdentityProvider:
        return StaticIdentityProvider()

    @provide
    def get_notification_sink(self) -> NotificationSink:
        return RecordingNotificationSink()
