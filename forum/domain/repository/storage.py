"""Key-value storage interface."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional


class KeyValueStore(ABC):
    """Raw string key-value storage backend.

    Defines the contract for one storage namespace (durable or
    session-scoped). Implementations live in the persistence layer and may
    raise on I/O failure; the persistence gateway is responsible for
    catching those errors and for JSON encoding.
    """

    @abstractmethod
    def get_raw(self, key: str) -> Optional[str]:
        """Read the raw value stored under ``key``.

        Args:
            key: Storage key

        Returns:
            The stored string if present, None otherwise
        """
        pass

    @abstractmethod
    def set_raw(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value.

        Args:
            key: Storage key
            value: Encoded value
        """
        pass

    @abstractmethod
    def remove_raw(self, key: str) -> None:
        """Remove ``key``. Removing a missing key is a no-op.

        Args:
            key: Storage key
        """
        pass

    @abstractmethod
    def keys(self) -> Iterable[str]:
        """List every key currently stored."""
        pass

    def clear(self) -> None:
        """Remove every key in this namespace."""
        for key in list(self.keys()):
            self.remove_raw(key)
