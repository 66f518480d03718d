"""File-backed key-value store.

Each key lives in its own file, so a corrupted or truncated record only
ever affects the key it belongs to.
"""

import os
import tempfile
from pathlib import Path
from typing import Iterable, Optional
from urllib.parse import quote, unquote

from forum.domain.repository.storage import KeyValueStore

_SUFFIX = ".json"


class FileKeyValueStore(KeyValueStore):
    """Durable KeyValueStore writing one UTF-8 file per key under a directory."""

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        # Percent-encode so any key maps to a single safe file name
        return self.directory / f"{quote(key, safe='')}{_SUFFIX}"

    def get_raw(self, key: str) -> Optional[str]:
        """Read a raw value, or None when the key has no file."""
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_raw(self, key: str, value: str) -> None:
        """Write a raw value atomically (temp file + rename)."""
        fd, tmp = tempfile.mkstemp(dir=self.directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(value)
            os.replace(tmp, self._path(key))
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise

    def remove_raw(self, key: str) -> None:
        """Delete the key's file if present."""
        self._path(key).unlink(missing_ok=True)

    def keys(self) -> Iterable[str]:
        """List stored keys."""
        return [
            unquote(path.name[: -len(_SUFFIX)])
            for path in self.directory.iterdir()
            if path.is_file() and path.name.endswith(_SUFFIX)
        ]
