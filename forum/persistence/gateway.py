"""Persistence gateway over the durable and session-scoped namespaces.

Every value is stored as a JSON string. No public method raises: backend
failures and corrupted records are logged and degrade to the caller's
default (reads) or to ``False`` (writes), leaving in-memory state as the
interim source of truth.
"""

import json
from typing import Any, Callable, TypeVar

import logfire
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import to_jsonable_python

from forum.domain.error import StorageCorruptionError
from forum.domain.repository.gateway import StorageGateway
from forum.domain.repository.storage import KeyValueStore
from forum.domain.value import SessionId
from forum.persistence.store.inmemory import InMemoryKeyValueStore

T = TypeVar("T")


class PersistenceGateway(StorageGateway):
    """Uniform get/set/remove over a durable and a session-scoped namespace."""

    def __init__(
        self,
        durable: KeyValueStore,
        session_factory: Callable[[], KeyValueStore] = InMemoryKeyValueStore,
    ) -> None:
        """Initialize the gateway.

        Args:
            durable: Store that survives restarts
            session_factory: Builds the store backing a new session namespace
        """
        self.durable = durable
        self._session_factory = session_factory
        self._sessions: dict[SessionId, KeyValueStore] = {}

    # Durable namespace

    def get(self, key: str, default: Any = None) -> Any:
        """Read and decode ``key``; ``default`` when missing or unreadable."""
        return self._read(self.durable, key, default, namespace="durable")

    def get_model(self, key: str, adapter: TypeAdapter[T], default: T) -> T:
        """Read ``key`` and validate it with ``adapter``.

        A payload that decodes but fails validation is treated as corrupted.
        """
        raw = self._read(self.durable, key, None, namespace="durable")
        if raw is None:
            return default
        try:
            return adapter.validate_python(raw)
        except PydanticValidationError as e:
            self._discard(
                self.durable,
                StorageCorruptionError(key, f"{e.error_count()} validation errors"),
                namespace="durable",
            )
            return default

    def set(self, key: str, value: Any) -> bool:
        """Encode and write ``value``; returns whether the write succeeded."""
        return self._write(self.durable, key, value, namespace="durable")

    def remove(self, key: str) -> bool:
        """Remove ``key``; returns whether the removal succeeded."""
        return self._remove(self.durable, key, namespace="durable")

    def keys(self, prefix: str = "") -> list[str]:
        """List durable keys starting with ``prefix``."""
        try:
            return [k for k in self.durable.keys() if k.startswith(prefix)]
        except Exception as e:
            logfire.error("Storage key listing failed", prefix=prefix, error=str(e))
            return []

    # Session namespace

    def session(self, session_id: SessionId) -> KeyValueStore:
        """Return (creating on first use) the store for ``session_id``."""
        store = self._sessions.get(session_id)
        if store is None:
            store = self._sessions[session_id] = self._session_factory()
        return store

    def get_session(self, session_id: SessionId, key: str, default: Any = None) -> Any:
        return self._read(self.session(session_id), key, default, namespace="session")

    def set_session(self, session_id: SessionId, key: str, value: Any) -> bool:
        return self._write(self.session(session_id), key, value, namespace="session")

    def remove_session(self, session_id: SessionId, key: str) -> bool:
        return self._remove(self.session(session_id), key, namespace="session")

    def remove_from_all_sessions(self, key: str) -> None:
        """Remove ``key`` from every open session namespace."""
        for session_id in list(self._sessions):
            self.remove_session(session_id, key)

    def end_session(self, session_id: SessionId) -> None:
        """Drop a session namespace and everything in it."""
        store = self._sessions.pop(session_id, None)
        if store is None:
            return
        try:
            store.clear()
        except Exception as e:
            logfire.error("Session clear failed", session_id=session_id, error=str(e))
        logfire.info("Session ended", session_id=session_id)

    # Internals

    def _read(self, store: KeyValueStore, key: str, default: Any, namespace: str) -> Any:
        try:
            raw = store.get_raw(key)
        except Exception as e:
            logfire.error(
                "Storage read failed", key=key, namespace=namespace, error=str(e)
            )
            return default
        if raw is None:
            return default
        try:
            return self._decode(key, raw)
        except StorageCorruptionError as e:
            self._discard(store, e, namespace=namespace)
            return default

    def _write(self, store: KeyValueStore, key: str, value: Any, namespace: str) -> bool:
        try:
            encoded = json.dumps(to_jsonable_python(value, by_alias=True))
            store.set_raw(key, encoded)
            return True
        except Exception as e:
            logfire.error(
                "Storage write failed", key=key, namespace=namespace, error=str(e)
            )
            return False

    def _remove(self, store: KeyValueStore, key: str, namespace: str) -> bool:
        try:
            store.remove_raw(key)
            return True
        except Exception as e:
            logfire.error(
                "Storage remove failed", key=key, namespace=namespace, error=str(e)
            )
            return False

    @staticmethod
    def _decode(key: str, raw: str) -> Any:
        try:
            return json.loads(raw)
        except ValueError as e:
            raise StorageCorruptionError(key, str(e)) from e

    def _discard(
        self, store: KeyValueStore, error: StorageCorruptionError, namespace: str
    ) -> None:
        logfire.warn(
            "Discarding corrupted record",
            key=error.key,
            namespace=namespace,
            reason=error.reason,
        )
        self._remove(store, error.key, namespace=namespace)
