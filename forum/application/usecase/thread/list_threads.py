"""List threads use case."""

from pydantic import BaseModel

from forum.application.usecase.base import ActorUseCase
from forum.domain.model import Thread
from forum.domain.service import (
    EngagementService,
    IdentityProvider,
    NotificationSink,
    ThreadService,
)
from forum.domain.value import ForumId, ThreadId, ThreadSortOrder, UserId


class ListThreadsRequest(BaseModel):
    """List threads request."""

    search: str | None = None
    forum_id: ForumId | None = None
    sort: ThreadSortOrder = ThreadSortOrder.RECENT
    author_id: UserId | None = None
    pinned_first: bool = False


class ListThreadsResponse(BaseModel):
    """List threads response."""

    threads: list[Thread]
    # Threads the viewer likes, for rendering like buttons
    liked_thread_ids: list[ThreadId]


class ListThreadsUseCase(ActorUseCase):
    """Use case for listing, searching and sorting threads."""

    def __init__(
        self,
        thread_service: ThreadService,
        engagement_service: EngagementService,
        identity: IdentityProvider,
        notifications: NotificationSink,
    ) -> None:
        """Initialize list threads use case.

        Args:
            thread_service: Thread domain service
            engagement_service: Source of the viewer's likes
            identity: Current user lookup
            notifications: User feedback channel
        """
        super().__init__(identity, notifications)
        self.thread_service = thread_service
        self.engagement_service = engagement_service

    def execute(self, request: ListThreadsRequest) -> ListThreadsResponse:
        """Execute list threads flow.

        Signed-out viewers see the same list without like state.
        """
        threads = self.thread_service.query(
            search=request.search,
            forum_id=request.forum_id,
            sort=request.sort,
            author_id=request.author_id,
            pinned_first=request.pinned_first,
        )

        viewer = self.viewer()
        liked: list[ThreadId] = []
        if viewer is not None:
            likes = set(self.engagement_service.liked_threads(viewer.id))
            liked = [t.id for t in threads if t.id in likes]

        return ListThreadsResponse(threads=threads, liked_thread_ids=liked)
