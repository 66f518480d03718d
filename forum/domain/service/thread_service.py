"""Thread domain service."""

from datetime import datetime
from typing import Optional, Sequence

import logfire
from pydantic import TypeAdapter

from forum.config import ThreadRules
from forum.domain.error import ValidationError
from forum.domain.model import Actor, Author, Thread, ThreadDraft
from forum.domain.value import ForumId, ThreadId, ThreadSortOrder, UserId, new_thread_id
from forum.domain.repository import StorageGateway
from forum.domain.repository.keys import REMOVED_SEEDS_KEY, THREADS_KEY, draft_key

from .base import Service
from .deletion_ledger import DeletionLedger
from .signal import THREAD_CREATED, ChangeSignal

_THREAD_LIST = TypeAdapter(list[Thread])
_THREAD_IDS = TypeAdapter(list[ThreadId])
_DRAFT = TypeAdapter(ThreadDraft)

_SORT_KEYS = {
    ThreadSortOrder.RECENT: lambda t: t.created_at,
    ThreadSortOrder.VIEWS: lambda t: t.view_count,
    ThreadSortOrder.TRENDING: lambda t: t.trending_score,
    ThreadSortOrder.COMMENTS: lambda t: t.comment_count,
    ThreadSortOrder.LIKES: lambda t: t.likes,
}


class ThreadService(Service):
    """Owns the thread collection.

    The in-memory list is the working copy; every mutation persists the
    full list under ``forum_threads``.
    """

    def __init__(
        self,
        gateway: StorageGateway,
        ledger: DeletionLedger,
        signal: ChangeSignal,
        rules: ThreadRules,
        seeds: Sequence[Thread] = (),
    ) -> None:
        """Initialize thread service.

        Args:
            gateway: Persistence gateway
            ledger: Pending deletions, used to hide threads from projections
            signal: Broadcast used to announce new threads
            rules: Thread authoring limits
            seeds: Demo threads merged in on load
        """
        self.gateway = gateway
        self.ledger = ledger
        self.signal = signal
        self.rules = rules
        self.seeds = list(seeds)
        self._threads: list[Thread] = []
        self._loaded = False

    def load(self) -> list[Thread]:
        """Load the stored thread list and merge in the demo threads.

        Stored threads come first and win on id collision. Demo threads that
        were deleted for good stay out. A corrupted list is discarded by the
        gateway, leaving the demo threads only.

        Returns:
            The merged working list
        """
        with logfire.span("thread_service.load"):
            stored = self.gateway.get_model(THREADS_KEY, _THREAD_LIST, default=[])
            skip = {t.id for t in stored} | set(self._removed_seeds())
            self._threads = stored + [t for t in self.seeds if t.id not in skip]
            self._loaded = True
            logfire.info(
                "Threads loaded",
                stored=len(stored),
                total=len(self._threads),
            )
            return list(self._threads)

    def _removed_seeds(self) -> list[ThreadId]:
        return self.gateway.get_model(REMOVED_SEEDS_KEY, _THREAD_IDS, default=[])

    def _all(self) -> list[Thread]:
        if not self._loaded:
            self.load()
        return self._threads

    def _persist(self) -> bool:
        return self.gateway.set(THREADS_KEY, self._threads)

    def find(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by id, including one pending deletion."""
        return next((t for t in self._all() if t.id == thread_id), None)

    def get(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a visible thread by id (None when missing or pending deletion)."""
        if self.ledger.is_hidden(thread_id):
            return None
        return self.find(thread_id)

    def query(
        self,
        search: Optional[str] = None,
        forum_id: Optional[ForumId] = None,
        sort: ThreadSortOrder = ThreadSortOrder.RECENT,
        author_id: Optional[UserId] = None,
        pinned_first: bool = False,
    ) -> list[Thread]:
        """List visible threads.

        Every sort is descending; ties keep the working list's order.

        Args:
            search: Free text matched against title, content, author and tags
            forum_id: Restrict to one forum
            sort: Sort key
            author_id: Restrict to one author's threads
            pinned_first: Move pinned threads ahead of the others

        Returns:
            Derived list; threads pending deletion are excluded
        """
        threads = [t for t in self._all() if not self.ledger.is_hidden(t.id)]
        if forum_id is not None:
            threads = [t for t in threads if t.forum_id == forum_id]
        if author_id is not None:
            threads = [t for t in threads if t.author.id == author_id]
        if search:
            threads = [t for t in threads if t.matches(search)]

        threads = sorted(threads, key=_SORT_KEYS[sort], reverse=True)
        if pinned_first:
            threads = sorted(threads, key=lambda t: not t.is_pinned)
        return threads

    def validate_draft(self, draft: ThreadDraft) -> ThreadDraft:
        """Check a draft against the authoring rules.

        Returns:
            The draft with trimmed title/content and de-duplicated tags

        Raises:
            ValidationError: Describing every failing field
        """
        rules = self.rules
        errors = []

        title = draft.title.strip()
        if not title:
            errors.append("Title is required")
        elif len(title) < rules.title_min_length:
            errors.append(f"Title must be at least {rules.title_min_length} characters")
        elif len(title) > rules.title_max_length:
            errors.append(f"Title must not exceed {rules.title_max_length} characters")

        content = draft.content.strip()
        if not content:
            errors.append("Content is required")
        elif len(content) < rules.content_min_length:
            errors.append(
                f"Content must be at least {rules.content_min_length} characters"
            )

        if not draft.forum_id:
            errors.append("Please select a forum category")

        tags: list[str] = []
        for tag in (t.strip() for t in draft.tags):
            if tag and tag not in tags:
                tags.append(tag)
        if len(tags) > rules.max_tags:
            errors.append(f"Maximum {rules.max_tags} tags allowed")
        if any(len(tag) > rules.tag_max_length for tag in tags):
            errors.append(f"Tags must not exceed {rules.tag_max_length} characters")

        if errors:
            logfire.info("Thread draft rejected", errors=errors)
            raise ValidationError("; ".join(errors))

        return draft.model_copy(update={"title": title, "content": content, "tags": tags})

    def author(self, actor: Actor, draft: ThreadDraft) -> Thread:
        """Validate a draft and create the thread it describes.

        Raises:
            ValidationError: If the draft breaks the authoring rules
        """
        valid = self.validate_draft(draft)
        thread = Thread(
            id=new_thread_id(),
            title=valid.title,
            content=valid.content,
            forum_id=valid.forum_id,
            author=Author.from_actor(actor, anonymous=valid.is_anonymous),
            is_question=valid.is_question,
            is_anonymous=valid.is_anonymous,
            tags=valid.tags,
            media=valid.media,
            created_at=datetime.now(),
        )
        return self.create(thread)

    def create(self, thread: Thread) -> Thread:
        """Prepend a thread, persist the list and announce it.

        Returns:
            The created thread
        """
        with logfire.span(
            "thread_service.create", thread_id=thread.id, forum_id=thread.forum_id
        ):
            self._threads = [thread, *self._all()]
            self._persist()
            logfire.info(
                "Thread created",
                thread_id=thread.id,
                forum_id=thread.forum_id,
                anonymous=thread.is_anonymous,
            )
            self.signal.send(THREAD_CREATED, thread=thread)
            return thread

    def restore(self, thread: Thread) -> None:
        """Put a thread back from a deletion snapshot if it went missing."""
        if self.find(thread.id) is not None:
            return
        self._threads = [thread, *self._all()]
        self._persist()
        logfire.warn("Thread restored from snapshot", thread_id=thread.id)

    def remove(self, thread_id: ThreadId) -> bool:
        """Physically remove a thread from the durable list.

        Only the deletion service calls this, when a soft delete finalizes.
        Removing a demo thread also records its id so the next load does
        not merge it back.

        Returns:
            True if the thread existed
        """
        with logfire.span("thread_service.remove", thread_id=thread_id):
            before = len(self._all())
            self._threads = [t for t in self._threads if t.id != thread_id]
            if len(self._threads) == before:
                logfire.warn("Thread to remove not found", thread_id=thread_id)
                return False
            self._persist()
            if any(t.id == thread_id for t in self.seeds):
                removed = self._removed_seeds()
                if thread_id not in removed:
                    self.gateway.set(REMOVED_SEEDS_KEY, [*removed, thread_id])
            logfire.info("Thread removed", thread_id=thread_id)
            return True

    def update_counters(
        self,
        thread_id: ThreadId,
        likes: Optional[int] = None,
        comment_count: Optional[int] = None,
        view_count: Optional[int] = None,
    ) -> Optional[Thread]:
        """Write through recomputed engagement counters.

        Returns:
            The updated thread, or None if it no longer exists
        """
        update = {
            name: value
            for name, value in (
                ("likes", likes),
                ("comment_count", comment_count),
                ("view_count", view_count),
            )
            if value is not None
        }
        thread = self.find(thread_id)
        if thread is None:
            return None
        updated = thread.model_copy(update=update)
        self._threads = [updated if t.id == thread_id else t for t in self._threads]
        self._persist()
        return updated

    # Drafts

    def save_draft(self, user_id: UserId, draft: ThreadDraft) -> ThreadDraft:
        """Store a half-written thread for ``user_id``."""
        saved = draft.model_copy(update={"saved_at": datetime.now()})
        self.gateway.set(draft_key(user_id), saved)
        logfire.info("Thread draft saved", user_id=user_id)
        return saved

    def load_draft(self, user_id: UserId) -> Optional[ThreadDraft]:
        return self.gateway.get_model(draft_key(user_id), _DRAFT, default=None)

    def clear_draft(self, user_id: UserId) -> None:
        self.gateway.remove(draft_key(user_id))
