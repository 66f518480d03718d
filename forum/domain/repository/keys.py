"""Storage key layout.

Durable namespace:
    forum_threads                    -> Thread[]
    thread_comments_data_{threadId}  -> Comment[]
    thread_likes_{threadId}          -> voter id[]
    thread_views_{threadId}          -> int
    liked_threads_{userId}           -> thread id[]
    thread_draft_{userId}            -> ThreadDraft
    removed_seed_threads             -> thread id[]

Session namespace:
    user_viewed_{threadId}           -> bool
"""

THREADS_KEY = "forum_threads"
LIKED_THREADS_PREFIX = "liked_threads_"
# Demo threads that were deleted for good; they are not merged back on load
REMOVED_SEEDS_KEY = "removed_seed_threads"


def comments_key(thread_id: str) -> str:
    return f"thread_comments_data_{thread_id}"


def likes_key(thread_id: str) -> str:
    return f"thread_likes_{thread_id}"


def views_key(thread_id: str) -> str:
    return f"thread_views_{thread_id}"


def liked_threads_key(user_id: str) -> str:
    return f"{LIKED_THREADS_PREFIX}{user_id}"


def draft_key(user_id: str) -> str:
    return f"thread_draft_{user_id}"


def viewed_key(thread_id: str) -> str:
    return f"user_viewed_{thread_id}"
