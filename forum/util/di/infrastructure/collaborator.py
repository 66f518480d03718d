"""Collaborator infrastructure providers.

Identity and notifications belong to the host application. The production
defaults cover headless use; hosts replace this provider with their own.
"""

from dishka import Scope, provide

from forum.adapter.collaborator import LoggingNotificationSink, StaticIdentityProvider
from forum.domain.service import IdentityProvider, NotificationSink
from forum.util.di.base import ProviderBase


class CollaboratorProvider(ProviderBase):
    """Collaborator component base."""

    __mock_component__ = "collaborators"


class ProdCollaboratorProvider(CollaboratorProvider):
    """Production collaborator provider."""

    __is_mock__ = False

    scope = Scope.APP

    @provide
    def get_identity_provider(self) -> IdentityProvider:
        """Provide identity provider (signed out until the host signs a user in)."""
        return StaticIdentityProvider()

    @provide
    def get_notification_sink(self) -> NotificationSink:
        """Provide notification sink that logs user feedback."""
        return LoggingNotificationSink()
