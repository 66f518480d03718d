"""Demo threads merged into the thread list on load.

Counters start empty except for views, which carry the demo baseline.
"""

from datetime import datetime, timedelta
from typing import Optional

from forum.domain.model import Author, Thread
from forum.domain.value import ForumId, ThreadId, UserId

_SEED = [
    {
        "id": "1",
        "title": "How to improve project management skills?",
        "content": (
            "Looking for advice on improving my project management abilities and "
            "leadership qualities in the workplace. Any recommendations for courses "
            "or books?"
        ),
        "forum_id": "career-advice",
        "author": ("1", "John Doe", 245),
        "is_question": True,
        "tags": ["career", "skills", "management", "leadership"],
        "view_count": 234,
        "hours_ago": 2,
    },
    {
        "id": "2",
        "title": "Best practices for remote team collaboration",
        "content": (
            "What tools and strategies work best for remote teams? Looking to "
            "improve our team productivity and communication."
        ),
        "forum_id": "general-discussion",
        "author": ("2", "Jane Smith", 189),
        "is_pinned": True,
        "tags": ["remote", "collaboration", "tools", "productivity"],
        "view_count": 456,
        "hours_ago": 5,
    },
    {
        "id": "3",
        "title": "Need help with React state management",
        "content": (
            "Struggling with complex state in my React application. Should I use "
            "Context API or Redux for a medium-sized app?"
        ),
        "forum_id": "technical-help",
        "author": ("3", "Anonymous", 0),
        "is_question": True,
        "is_anonymous": True,
        "tags": ["react", "javascript", "help", "state-management"],
        "view_count": 289,
        "hours_ago": 8,
    },
    {
        "id": "4",
        "title": "Completed my first full-stack project!",
        "content": (
            "Just finished building a complete e-commerce platform using MERN "
            "stack. Would love to get feedback from the community."
        ),
        "forum_id": "project-showcase",
        "author": ("4", "Alex Kumar", 156),
        "tags": ["showcase", "mern", "fullstack", "project"],
        "view_count": 378,
        "hours_ago": 12,
    },
]


def seed_threads(now: Optional[datetime] = None) -> list[Thread]:
    """Build the demo threads, newest first, relative to ``now``."""
    now = now or datetime.now()
    threads = []
    for entry in _SEED:
        author_id, name, points = entry["author"]
        threads.append(
            Thread(
                id=ThreadId(entry["id"]),
                title=entry["title"],
                content=entry["content"],
                forum_id=ForumId(entry["forum_id"]),
                author=Author(id=UserId(author_id), name=name, points=points),
                is_question=entry.get("is_question", False),
                is_anonymous=entry.get("is_anonymous", False),
                is_pinned=entry.get("is_pinned", False),
                tags=entry["tags"],
                view_count=entry["view_count"],
                created_at=now - timedelta(hours=entry["hours_ago"]),
            )
        )
    return threads
