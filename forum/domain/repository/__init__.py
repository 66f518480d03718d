"""Repository interfaces (ports) for the domain layer."""

from forum.domain.repository.gateway import StorageGateway
from forum.domain.repository.storage import KeyValueStore

__all__ = [
    "KeyValueStore",
    "StorageGateway",
]
