"""Deletion domain service.

Soft delete with a grace period:

    Active --delete--> PendingDeletion --undo--> Active
                                       --finalize--> Finalized (terminal)

While pending, the entity stays in storage but is hidden from every
projection. Exactly one DeletionRecord and one scheduled finalize task
exist per pending entity.
"""

from datetime import datetime
from typing import Any, Optional

import logfire

from forum.config import DeletionSettings
from forum.domain.model import Comment, DeletionKey, DeletionRecord, Reply, Thread
from forum.domain.value import EntityType, UserId

from .base import Service
from .comment_service import CommentService
from .deletion_ledger import DeletionLedger
from .engagement_service import EngagementService
from .scheduler import Scheduler
from .thread_service import ThreadService


class DeletionService(Service):
    """Coordinates soft deletion for threads, comments and replies."""

    def __init__(
        self,
        ledger: DeletionLedger,
        scheduler: Scheduler,
        thread_service: ThreadService,
        comment_service: CommentService,
        engagement_service: EngagementService,
        settings: DeletionSettings,
    ) -> None:
        """Initialize deletion service.

        Args:
            ledger: Registry of pending deletions
            scheduler: Runs finalize after the grace period
            thread_service: Owner of threads
            comment_service: Owner of comment trees
            engagement_service: Owner of engagement keys and counters
            settings: Grace period configuration
        """
        self.ledger = ledger
        self.scheduler = scheduler
        self.thread_service = thread_service
        self.comment_service = comment_service
        self.engagement_service = engagement_service
        self.grace_period = settings.grace_period_seconds

    def is_pending(self, key: DeletionKey) -> bool:
        return key in self.ledger

    def remaining(self, record: DeletionRecord) -> float:
        """Seconds left before a pending record finalizes."""
        elapsed = (datetime.now() - record.timestamp).total_seconds()
        return max(0.0, self.grace_period - elapsed)

    def delete(
        self, key: DeletionKey, deleted_by: Optional[UserId] = None
    ) -> Optional[DeletionRecord]:
        """Move an entity to PendingDeletion and schedule its finalize.

        Deleting an entity that is already pending returns the existing
        record without rescheduling. A pending comment stops counting
        towards its thread's comment_count straight away.

        Args:
            key: Entity to delete
            deleted_by: User allowed to undo the delete

        Returns:
            The deletion record, or None if the entity does not exist
        """
        with logfire.span(
            "deletion_service.delete",
            entity_type=key.entity_type.value,
            thread_id=key.thread_id,
            comment_id=key.comment_id,
            reply_id=key.reply_id,
        ):
            existing = self.ledger.get(key)
            if existing is not None:
                logfire.info("Deletion already pending", entity_type=key.entity_type.value)
                return existing

            snapshot = self._snapshot(key)
            if snapshot is None:
                logfire.warn("Delete of missing entity", entity_type=key.entity_type.value)
                return None

            task = self.scheduler.call_later(
                self.grace_period, lambda: self.finalize(key)
            )
            record = DeletionRecord(
                key=key,
                snapshot=snapshot,
                timestamp=datetime.now(),
                deleted_by=deleted_by,
                task=task,
            )
            self.ledger.add(record)
            if key.entity_type == EntityType.COMMENT:
                self.engagement_service.recompute_comments(key.thread_id)
            logfire.info(
                "Deletion pending",
                entity_type=key.entity_type.value,
                grace_period=self.grace_period,
            )
            return record

    def undo(self, key: DeletionKey) -> bool:
        """Restore a pending entity and cancel its finalize.

        Returns:
            True if the entity was restored; False when there is nothing to
            undo (never deleted, or finalize already ran)
        """
        with logfire.span(
            "deletion_service.undo",
            entity_type=key.entity_type.value,
            thread_id=key.thread_id,
        ):
            record = self.ledger.pop(key)
            if record is None:
                logfire.info(
                    "Undo ignored, no pending deletion",
                    entity_type=key.entity_type.value,
                )
                return False

            record.task.cancel()
            self._restore_missing(record)
            if key.entity_type == EntityType.COMMENT:
                self.engagement_service.recompute_comments(key.thread_id)
            logfire.info("Deletion undone", entity_type=key.entity_type.value)
            return True

    def finalize(self, key: DeletionKey) -> bool:
        """Physically remove a pending entity and cascade to what it owns.

        Fired by the scheduled task; a no-op if the deletion was undone.

        Returns:
            True if the entity was purged
        """
        with logfire.span(
            "deletion_service.finalize",
            entity_type=key.entity_type.value,
            thread_id=key.thread_id,
        ):
            record = self.ledger.pop(key)
            if record is None:
                return False

            self._drop_descendants(key)
            if key.entity_type == EntityType.THREAD:
                self.thread_service.remove(key.thread_id)
                self.comment_service.purge_thread(key.thread_id)
                self.engagement_service.purge_thread(key.thread_id)
            elif key.entity_type == EntityType.COMMENT:
                self.comment_service.remove_comment(key.thread_id, key.comment_id)
                self.engagement_service.recompute_comments(key.thread_id)
            else:
                self.comment_service.remove_reply(
                    key.thread_id, key.comment_id, key.reply_id
                )

            logfire.info("Deletion finalized", entity_type=key.entity_type.value)
            return True

    def _snapshot(self, key: DeletionKey) -> Optional[dict[str, Any]]:
        entity: Optional[Thread | Comment | Reply]
        if key.entity_type == EntityType.THREAD:
            entity = self.thread_service.find(key.thread_id)
        elif key.entity_type == EntityType.COMMENT:
            entity = self.comment_service.find_comment(key.thread_id, key.comment_id)
        else:
            entity = self.comment_service.find_reply(
                key.thread_id, key.comment_id, key.reply_id
            )
        return entity.to_payload() if entity is not None else None

    def _restore_missing(self, record: DeletionRecord) -> None:
        # Pending entities are normally still stored; the snapshot is used
        # only when one is not.
        key = record.key
        if key.entity_type == EntityType.THREAD:
            self.thread_service.restore(Thread.model_validate(record.snapshot))
        elif key.entity_type == EntityType.COMMENT:
            self.comment_service.restore_comment(
                key.thread_id, Comment.model_validate(record.snapshot)
            )
        else:
            self.comment_service.restore_reply(
                key.thread_id, Reply.model_validate(record.snapshot)
            )

    def _drop_descendants(self, key: DeletionKey) -> None:
        # Entities nested under a finalized one go with it; their own
        # pending records and tasks are discarded.
        if key.entity_type == EntityType.REPLY:
            return
        for record in self.ledger:
            child = record.key
            if child == key or child.thread_id != key.thread_id:
                continue
            if key.entity_type == EntityType.COMMENT and child.comment_id != key.comment_id:
                continue
            self.ledger.pop(child)
            record.task.cancel()
