"""Storage gateway interface."""

from abc import ABC, abstractmethod
from typing import Any, TypeVar

from pydantic import TypeAdapter

from forum.domain.value import SessionId

T = TypeVar("T")


class StorageGateway(ABC):
    """Decoded key-value access over a durable and a session-scoped namespace.

    Implementations never raise from these methods: unreadable records
    degrade to the caller's default and failed writes return False.
    """

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Read a durable value, or ``default`` when missing or unreadable."""
        pass

    @abstractmethod
    def get_model(self, key: str, adapter: TypeAdapter[T], default: T) -> T:
        """Read a durable value and validate it with ``adapter``.

        Args:
            key: Storage key
            adapter: Validator for the stored shape
            default: Returned when missing, unreadable or invalid
        """
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> bool:
        """Write a durable value; returns whether the write succeeded."""
        pass

    @abstractmethod
    def remove(self, key: str) -> bool:
        """Remove a durable key; returns whether the removal succeeded."""
        pass

    @abstractmethod
    def keys(self, prefix: str = "") -> list[str]:
        """List durable keys starting with ``prefix``."""
        pass

    @abstractmethod
    def get_session(self, session_id: SessionId, key: str, default: Any = None) -> Any:
        pass

    @abstractmethod
    def set_session(self, session_id: SessionId, key: str, value: Any) -> bool:
        pass

    @abstractmethod
    def remove_session(self, session_id: SessionId, key: str) -> bool:
        pass

    @abstractmethod
    def remove_from_all_sessions(self, key: str) -> None:
        """Remove ``key`` from every open session namespace."""
        pass

    @abstractmethod
    def end_session(self, session_id: SessionId) -> None:
        """Drop a session namespace and everything in it."""
        pass
