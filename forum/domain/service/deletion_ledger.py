"""Registry of entities in the PendingDeletion state.

The deletion service writes to the ledger; the thread and comment services
read it to hide pending entities from every projection.
"""

from typing import Iterator, Optional

from forum.domain.model import DeletionKey, DeletionRecord
from forum.domain.value import CommentId, ReplyId, ThreadId


class DeletionLedger:
    """At most one DeletionRecord per entity key."""

    def __init__(self) -> None:
        self._records: dict[DeletionKey, DeletionRecord] = {}

    def __contains__(self, key: DeletionKey) -> bool:
        return key in self._records

    def __iter__(self) -> Iterator[DeletionRecord]:
        return iter(list(self._records.values()))

    def __len__(self) -> int:
        return len(self._records)

    def get(self, key: DeletionKey) -> Optional[DeletionRecord]:
        return self._records.get(key)

    def add(self, record: DeletionRecord) -> None:
        if record.key in self._records:
            raise ValueError(f"Deletion already pending for {record.key}")
        self._records[record.key] = record

    def pop(self, key: DeletionKey) -> Optional[DeletionRecord]:
        return self._records.pop(key, None)

    def is_hidden(
        self,
        thread_id: ThreadId,
        comment_id: Optional[CommentId] = None,
        reply_id: Optional[ReplyId] = None,
    ) -> bool:
        """Whether the entity, or any of its ancestors, is pending deletion."""
        if not self._records:
            return False
        if DeletionKey.thread(thread_id) in self._records:
            return True
        if comment_id is None:
            return False
        if DeletionKey.comment(thread_id, comment_id) in self._records:
            return True
        if reply_id is None:
            return False
        return DeletionKey.reply(thread_id, comment_id, reply_id) in self._records
