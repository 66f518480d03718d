"""Test configuration and fixtures."""

import os
from datetime import datetime, timedelta

# Test defaults, read by Settings when a test container is built.
# Demo threads are off so listings only contain what a test creates.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SEED__ENABLED", "false")
os.environ.setdefault("STORAGE__BACKEND", "memory")

from forum.domain.model import Actor, Author, Thread  # noqa: E402
from forum.domain.value import ForumId, ThreadId, UserId  # noqa: E402

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def make_actor(user_id: str = "user-1", name: str = "Test User", points: int = 0) -> Actor:
    """Helper function to build a signed-in actor."""
    return Actor(id=UserId(user_id), name=name, points=points)


def make_thread(
    thread_id: str,
    minutes_ago: int = 0,
    author_id: str = "author-1",
    **overrides,
) -> Thread:
    """Helper function to build a thread for tests.

    Args:
        thread_id: Thread ID
        minutes_ago: Age relative to BASE_TIME (larger is older)
        author_id: Author's user ID
        **overrides: Any other Thread field

    Returns:
        Thread with sensible defaults
    """
    fields = {
        "id": ThreadId(thread_id),
        "title": f"Thread {thread_id} title",
        "content": f"Content of thread {thread_id}",
        "forum_id": ForumId("general"),
        "author": Author(id=UserId(author_id), name=f"Author {author_id}"),
        "created_at": BASE_TIME - timedelta(minutes=minutes_ago),
    }
    fields.update(overrides)
    return Thread(**fields)
