"""Persistence infrastructure providers."""

from dishka import Scope, provide
import logfire

from forum.config import StorageSettings
from forum.domain.repository import KeyValueStore, StorageGateway
from forum.persistence.gateway import PersistenceGateway
from forum.persistence.store import FileKeyValueStore, InMemoryKeyValueStore
from forum.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using the configured storage backend."""

    __is_mock__ = False

    scope = Scope.APP

    @provide
    def get_store(self, storage: StorageSettings) -> KeyValueStore:
        """Provide the durable key-value store."""
        if storage.backend == "file":
            logfire.info("Using file storage", path=str(storage.path))
            return FileKeyValueStore(storage.path)
        logfire.info("Using in-memory storage")
        return InMemoryKeyValueStore()

    @provide
    def get_gateway(self, store: KeyValueStore) -> StorageGateway:
        """Provide persistence gateway.

        Session namespaces always live in memory; they end with the process.
        """
        return PersistenceGateway(durable=store)
