"""Domain value objects for the forum engine."""

from forum.domain.value.identifiers import (
    CommentId,
    ForumId,
    ReplyId,
    SessionId,
    ThreadId,
    UserId,
    new_comment_id,
    new_reply_id,
    new_thread_id,
)
from forum.domain.value.types import (
    EntityType,
    MediaType,
    NotificationLevel,
    ThreadSortOrder,
    UserVote,
)

__all__ = [
    # Identifiers
    "CommentId",
    "ForumId",
    "ReplyId",
    "SessionId",
    "ThreadId",
    "UserId",
    "new_comment_id",
    "new_reply_id",
    "new_thread_id",
    # Types
    "EntityType",
    "MediaType",
    "NotificationLevel",
    "ThreadSortOrder",
    "UserVote",
]
