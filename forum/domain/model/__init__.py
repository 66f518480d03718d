"""Domain model entities for the forum engine."""

from forum.domain.model.actor import Actor, Author
from forum.domain.model.comment import Comment, Reply
from forum.domain.model.deletion import DeletionKey, DeletionRecord
from forum.domain.model.thread import Media, Thread, ThreadDraft

__all__ = [
    "Actor",
    "Author",
    "Comment",
    "DeletionKey",
    "DeletionRecord",
    "Media",
    "Reply",
    "Thread",
    "ThreadDraft",
]
