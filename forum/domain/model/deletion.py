"""Soft-deletion records.

A deletion record exists exactly while an entity is in the PendingDeletion
state. It holds a snapshot of the entity (for restoration and auditing) and
the handle of the single scheduled finalize task.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, model_validator

from forum.domain.model.common import DomainModel
from forum.domain.value import CommentId, EntityType, ReplyId, ThreadId, UserId


class DeletionKey(DomainModel):
    """Identity of a deletable entity: (type, thread, comment?, reply?)."""

    entity_type: EntityType
    thread_id: ThreadId
    comment_id: Optional[CommentId] = None
    reply_id: Optional[ReplyId] = None

    @model_validator(mode="after")
    def validate_shape(self) -> "DeletionKey":
        """Require exactly the ids the entity type needs."""
        needs_comment = self.entity_type in (EntityType.COMMENT, EntityType.REPLY)
        needs_reply = self.entity_type == EntityType.REPLY
        if needs_comment != (self.comment_id is not None):
            raise ValueError(f"comment_id is invalid for a {self.entity_type.value} key")
        if needs_reply != (self.reply_id is not None):
            raise ValueError(f"reply_id is invalid for a {self.entity_type.value} key")
        return self

    @property
    def entity_id(self) -> str:
        """Id of the entity itself (the innermost id in the key)."""
        return self.reply_id or self.comment_id or self.thread_id

    @classmethod
    def thread(cls, thread_id: ThreadId) -> "DeletionKey":
        return cls(entity_type=EntityType.THREAD, thread_id=thread_id)

    @classmethod
    def comment(cls, thread_id: ThreadId, comment_id: CommentId) -> "DeletionKey":
        return cls(
            entity_type=EntityType.COMMENT, thread_id=thread_id, comment_id=comment_id
        )

    @classmethod
    def reply(
        cls, thread_id: ThreadId, comment_id: CommentId, reply_id: ReplyId
    ) -> "DeletionKey":
        return cls(
            entity_type=EntityType.REPLY,
            thread_id=thread_id,
            comment_id=comment_id,
            reply_id=reply_id,
        )


class DeletionRecord(DomainModel):
    """Pending deletion of one entity."""

    key: DeletionKey
    snapshot: dict[str, Any]
    timestamp: datetime = Field(default_factory=datetime.now)
    # Only this user may undo; None when deleted outside a signed-in flow
    deleted_by: Optional[UserId] = None
    # ScheduledTask handle for the pending finalize
    task: Any = Field(exclude=True)
