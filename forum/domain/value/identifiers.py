"""Strongly typed identifiers for forum entities.

Identifiers are plain strings (seed threads use short numeric ids, new
entities use prefixed uuid hex) wrapped in NewType so different entity ids
cannot be mixed up.
"""

from typing import NewType
from uuid import uuid4

ThreadId = NewType("ThreadId", str)
CommentId = NewType("CommentId", str)
ReplyId = NewType("ReplyId", str)
UserId = NewType("UserId", str)
ForumId = NewType("ForumId", str)
SessionId = NewType("SessionId", str)


def new_thread_id() -> ThreadId:
    return ThreadId(f"thread_{uuid4().hex}")


def new_comment_id() -> CommentId:
    return CommentId(f"comment_{uuid4().hex}")


def new_reply_id() -> ReplyId:
    return ReplyId(f"reply_{uuid4().hex}")
