"""Engagement domain service.

Maintains the raw engagement data (thread voter lists, view counters,
per-session view markers, per-user liked-thread indexes) and recomputes
the denormalized counters cached on each thread.
"""

from typing import Any

import logfire

from forum.domain.value import SessionId, ThreadId, UserId
from forum.domain.repository import StorageGateway
from forum.domain.repository.keys import (
    LIKED_THREADS_PREFIX,
    liked_threads_key,
    likes_key,
    viewed_key,
    views_key,
)

from .base import Service
from .comment_service import CommentService
from .thread_service import ThreadService


class EngagementService(Service):
    """Computes and caches like, comment and view counters.

    Never raises on storage trouble: unreadable values fall back to the last
    known in-memory value, and failed writes leave memory authoritative.
    """

    def __init__(
        self,
        gateway: StorageGateway,
        thread_service: ThreadService,
        comment_service: CommentService,
    ) -> None:
        """Initialize engagement service.

        Args:
            gateway: Persistence gateway
            thread_service: Owner of the cached counters
            comment_service: Source of comment counts
        """
        self.gateway = gateway
        self.thread_service = thread_service
        self.comment_service = comment_service
        self._voters: dict[ThreadId, list[UserId]] = {}
        self._views: dict[ThreadId, int] = {}

    # Likes

    def voters(self, thread_id: ThreadId) -> list[UserId]:
        """Ids of users who like a thread."""
        stored = self.gateway.get(likes_key(thread_id))
        if _is_id_list(stored):
            self._voters[thread_id] = list(stored)
        elif stored is not None:
            logfire.warn("Ignoring malformed voter list", thread_id=thread_id)
        return list(self._voters.get(thread_id, []))

    def has_liked(self, thread_id: ThreadId, user_id: UserId) -> bool:
        return user_id in self.voters(thread_id)

    def liked_threads(self, user_id: UserId) -> list[ThreadId]:
        """Thread ids ``user_id`` likes (membership index for UI state)."""
        stored = self.gateway.get(liked_threads_key(user_id), default=[])
        return list(stored) if _is_id_list(stored) else []

    def toggle_thread_like(self, thread_id: ThreadId, user_id: UserId) -> bool:
        """Flip ``user_id``'s like on a thread.

        Returns:
            True if the user now likes the thread
        """
        with logfire.span(
            "engagement_service.toggle_thread_like",
            thread_id=thread_id,
            user_id=user_id,
        ):
            voters = self.voters(thread_id)
            liked = user_id not in voters
            if liked:
                voters.append(user_id)
            else:
                voters = [v for v in voters if v != user_id]
            self._voters[thread_id] = voters
            self.gateway.set(likes_key(thread_id), voters)

            index = [t for t in self.liked_threads(user_id) if t != thread_id]
            if liked:
                index.append(thread_id)
            self.gateway.set(liked_threads_key(user_id), index)

            count = self.recompute_likes(thread_id)
            logfire.info(
                "Thread like toggled", thread_id=thread_id, liked=liked, likes=count
            )
            return liked

    def recompute_likes(self, thread_id: ThreadId) -> int:
        """Likes = size of the thread's voter list."""
        count = len(self.voters(thread_id))
        self.thread_service.update_counters(thread_id, likes=count)
        return count

    # Views

    def view_count(self, thread_id: ThreadId) -> int:
        """Stored view count, falling back to the last known value."""
        stored = self.gateway.get(views_key(thread_id))
        if isinstance(stored, int) and not isinstance(stored, bool) and stored >= 0:
            self._views[thread_id] = stored
        elif thread_id not in self._views:
            thread = self.thread_service.find(thread_id)
            self._views[thread_id] = thread.view_count if thread else 0
        return self._views[thread_id]

    def recompute_views(self, thread_id: ThreadId, session_id: SessionId) -> int:
        """Count a view once per (thread, session).

        Returns:
            The updated view count
        """
        count = self.view_count(thread_id)
        if self.gateway.get_session(session_id, viewed_key(thread_id), default=False):
            return count

        count += 1
        self._views[thread_id] = count
        self.gateway.set(views_key(thread_id), count)
        self.gateway.set_session(session_id, viewed_key(thread_id), True)
        self.thread_service.update_counters(thread_id, view_count=count)
        logfire.info(
            "Thread view counted",
            thread_id=thread_id,
            session_id=session_id,
            views=count,
        )
        return count

    # Comments

    def recompute_comments(self, thread_id: ThreadId) -> int:
        """Comment count = stored top-level comments only; replies excluded."""
        count = self.comment_service.count_top_level(thread_id)
        self.thread_service.update_counters(thread_id, comment_count=count)
        return count

    # Cascade

    def purge_thread(self, thread_id: ThreadId) -> None:
        """Remove every engagement key belonging to a thread."""
        with logfire.span("engagement_service.purge_thread", thread_id=thread_id):
            self.gateway.remove(likes_key(thread_id))
            self.gateway.remove(views_key(thread_id))
            self.gateway.remove_from_all_sessions(viewed_key(thread_id))
            for key in self.gateway.keys(prefix=LIKED_THREADS_PREFIX):
                index = self.gateway.get(key, default=[])
                if _is_id_list(index) and thread_id in index:
                    self.gateway.set(key, [t for t in index if t != thread_id])
            self._voters.pop(thread_id, None)
            self._views.pop(thread_id, None)


def _is_id_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(v, str) for v in value)
