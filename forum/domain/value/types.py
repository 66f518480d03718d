"""Domain value types for the forum engine."""

from enum import Enum


class UserVote(str, Enum):
    """A viewer's vote on a comment or reply.

    Two-state: a viewer either upvoted (UP) or has no vote (None).
    """

    UP = "up"


class EntityType(str, Enum):
    """Kinds of entity that can be soft-deleted."""

    THREAD = "thread"
    COMMENT = "comment"
    REPLY = "reply"


class ThreadSortOrder(str, Enum):
    """Sort keys for thread listings.

    Every order is descending and ties keep insertion order.
    """

    RECENT = "recent"
    VIEWS = "views"
    TRENDING = "trending"  # likes + comments
    COMMENTS = "comments"
    LIKES = "likes"


class MediaType(str, Enum):
    """Media attached to a thread."""

    IMAGE = "image"
    VIDEO = "video"
    GIF = "gif"
    LINK = "link"


class NotificationLevel(str, Enum):
    """Severity of a transient user notification."""

    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
