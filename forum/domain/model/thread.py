"""Thread aggregate root.

Threads are top-level discussion posts. Engagement counters (likes,
comment_count, view_count) are denormalized caches recomputed by the
engagement service from raw vote, comment and view data.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.actor import Author
from forum.domain.model.common import DomainModel
from forum.domain.value import ForumId, MediaType, ThreadId


class Media(DomainModel):
    """Media attachment on a thread."""

    type: MediaType
    url: str
    name: Optional[str] = None


class Thread(DomainModel):
    """Thread aggregate root."""

    id: ThreadId
    title: str = Field(min_length=1)
    content: str
    forum_id: ForumId
    author: Author
    is_question: bool = False
    is_anonymous: bool = False
    is_pinned: bool = False
    tags: list[str] = Field(default_factory=list)
    media: list[Media] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)

    # Cached counters
    likes: int = Field(default=0, ge=0)
    comment_count: int = Field(default=0, ge=0)
    view_count: int = Field(default=0, ge=0)

    @property
    def trending_score(self) -> int:
        """Trending score: likes plus top-level comments."""
        return self.likes + self.comment_count

    def matches(self, term: str) -> bool:
        """Case-insensitive free-text match on title, content, author and tags."""
        needle = term.strip().lower()
        if not needle:
            return True
        haystack = [self.title, self.content, self.author.name, *self.tags]
        return any(needle in field.lower() for field in haystack)


class ThreadDraft(DomainModel):
    """Thread being authored, before validation.

    Drafts can be saved half-written; validation happens on submit.
    """

    title: str = ""
    content: str = ""
    forum_id: Optional[ForumId] = None
    is_question: bool = False
    is_anonymous: bool = False
    tags: list[str] = Field(default_factory=list)
    media: list[Media] = Field(default_factory=list)
    saved_at: Optional[datetime] = None
