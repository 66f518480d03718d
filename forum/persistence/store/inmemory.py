"""In-memory key-value store."""

from typing import Iterable, Optional

from forum.domain.repository.storage import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    """Dict-backed implementation of KeyValueStore.

    Used for session namespaces, for the durable namespace in tests, and
    whenever ``storage.backend`` is ``memory``.
    """

    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get_raw(self, key: str) -> Optional[str]:
        """Read a raw value."""
        return self._data.get(key)

    def set_raw(self, key: str, value: str) -> None:
        """Store a raw value."""
        self._data[key] = value

    def remove_raw(self, key: str) -> None:
        """Remove a key if present."""
        self._data.pop(key, None)

    def keys(self) -> Iterable[str]:
        """List stored keys."""
        return list(self._data)
