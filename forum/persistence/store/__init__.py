"""Key-value storage backends."""

from .file import FileKeyValueStore
from .inmemory import InMemoryKeyValueStore

__all__ = [
    "FileKeyValueStore",
    "InMemoryKeyValueStore",
]
