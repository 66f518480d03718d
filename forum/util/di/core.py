"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from forum.config import (
    DeletionSettings,
    PointsSettings,
    SeedSettings,
    Settings,
    StorageSettings,
    ThreadRules,
)
from forum.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_storage_settings(self, settings: Settings) -> StorageSettings:
        return settings.storage

    @provide
    def provide_deletion_settings(self, settings: Settings) -> DeletionSettings:
        return settings.deletion

    @provide
    def provide_seed_settings(self, settings: Settings) -> SeedSettings:
        return settings.seed

    @provide
    def provide_thread_rules(self, settings: Settings) -> ThreadRules:
        return settings.threads

    @provide
    def provide_points_settings(self, settings: Settings) -> PointsSettings:
        return settings.points
