"""Unit tests for listing, viewing and liking threads."""

import pytest

from forum.application.usecase.thread import (
    ListThreadsRequest,
    ListThreadsUseCase,
    RestoreDraftRequest,
    RestoreDraftUseCase,
    SaveDraftRequest,
    SaveDraftUseCase,
    ToggleThreadLikeRequest,
    ToggleThreadLikeUseCase,
    ViewThreadRequest,
    ViewThreadUseCase,
)
from forum.domain.error import AuthRequiredError, NotFoundError
from forum.domain.model import DeletionKey, ThreadDraft
from forum.domain.service import (
    DeletionService,
    EngagementService,
    IdentityProvider,
    NotificationSink,
    ThreadService,
)
from forum.domain.value import NotificationLevel, SessionId, ThreadId
from tests.conftest import make_actor, make_thread
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

THREAD = ThreadId("t1")


class TestToggleThreadLikeUseCase:
    """Tests for ToggleThreadLikeUseCase."""

    def test_like_reports_author_points(self, unit_env):
        """Liking a named thread credits its author in the message."""
        # Arrange
        unit_env.get(ThreadService).create(make_thread("t1"))
        unit_env.get(IdentityProvider).sign_in(make_actor("voter"))
        use_case = unit_env.get(ToggleThreadLikeUseCase)
        sink = unit_env.get(NotificationSink)

        # Act
        response = use_case.execute(ToggleThreadLikeRequest(thread_id=THREAD))

        # Assert
        assert response.liked is True
        assert response.likes == 1
        assert response.points_awarded == 5
        assert sink.last[0] == "Vote recorded! Thread author earned +5 points 🎉"

    def test_unlike_restores_count(self, unit_env):
        """A second toggle removes the like."""
        # Arrange
        unit_env.get(ThreadService).create(make_thread("t1"))
        unit_env.get(IdentityProvider).sign_in(make_actor("voter"))
        use_case = unit_env.get(ToggleThreadLikeUseCase)
        use_case.execute(ToggleThreadLikeRequest(thread_id=THREAD))

        # Act
        response = use_case.execute(ToggleThreadLikeRequest(thread_id=THREAD))

        # Assert
        assert response.liked is False
        assert response.likes == 0
        assert response.points_awarded == 0
        message, level, _ = unit_env.get(NotificationSink).last
        assert message == "Vote removed"
        assert level == NotificationLevel.INFO

    def test_like_counts_voters_once(self, unit_env, monkeypatch):
        """The like counter is recomputed once per toggle and matches the thread."""
        # Arrange
        unit_env.get(ThreadService).create(make_thread("t1"))
        unit_env.get(IdentityProvider).sign_in(make_actor("voter"))
        engagement = unit_env.get(EngagementService)
        calls = []
        recompute = engagement.recompute_likes

        def counting(thread_id):
            calls.append(thread_id)
            return recompute(thread_id)

        monkeypatch.setattr(engagement, "recompute_likes", counting)
        use_case = unit_env.get(ToggleThreadLikeUseCase)

        # Act
        response = use_case.execute(ToggleThreadLikeRequest(thread_id=THREAD))

        # Assert
        assert calls == [THREAD]
        assert response.likes == 1
        assert unit_env.get(ThreadService).get(THREAD).likes == 1

    def test_like_anonymous_thread_awards_nothing(self, unit_env):
        """Anonymous authors are not credited."""
        # Arrange
        unit_env.get(ThreadService).create(make_thread("t1", is_anonymous=True))
        unit_env.get(IdentityProvider).sign_in(make_actor("voter"))
        use_case = unit_env.get(ToggleThreadLikeUseCase)

        # Act
        response = use_case.execute(ToggleThreadLikeRequest(thread_id=THREAD))

        # Assert
        assert response.liked is True
        assert response.points_awarded == 0

    def test_signed_out_cannot_like(self, unit_env):
        """Likes require sign-in and leave the counter untouched."""
        # Arrange
        unit_env.get(ThreadService).create(make_thread("t1"))
        use_case = unit_env.get(ToggleThreadLikeUseCase)

        # Act & Assert
        with pytest.raises(AuthRequiredError):
            use_case.execute(ToggleThreadLikeRequest(thread_id=THREAD))

        assert unit_env.get(ThreadService).get(THREAD).likes == 0

    def test_like_missing_thread(self, unit_env):
        """Unknown threads are reported as not found."""
        unit_env.get(IdentityProvider).sign_in(make_actor())
        use_case = unit_env.get(ToggleThreadLikeUseCase)

        with pytest.raises(NotFoundError):
            use_case.execute(ToggleThreadLikeRequest(thread_id=ThreadId("ghost")))


class TestListThreadsUseCase:
    """Tests for ListThreadsUseCase."""

    def test_signed_in_viewer_sees_liked_ids(self, unit_env):
        """Liked thread ids are returned alongside the listing."""
        # Arrange
        thread_service = unit_env.get(ThreadService)
        thread_service.create(make_thread("t1", minutes_ago=10))
        thread_service.create(make_thread("t2"))
        unit_env.get(IdentityProvider).sign_in(make_actor("voter"))
        unit_env.get(ToggleThreadLikeUseCase).execute(
            ToggleThreadLikeRequest(thread_id=THREAD)
        )
        use_case = unit_env.get(ListThreadsUseCase)

        # Act
        response = use_case.execute(ListThreadsRequest())

        # Assert
        assert [t.id for t in response.threads] == ["t2", "t1"]
        assert response.liked_thread_ids == ["t1"]

    def test_signed_out_viewer_has_no_like_state(self, unit_env):
        """Listing works without an actor."""
        unit_env.get(ThreadService).create(make_thread("t1"))
        use_case = unit_env.get(ListThreadsUseCase)

        response = use_case.execute(ListThreadsRequest(search="thread t1"))

        assert [t.id for t in response.threads] == ["t1"]
        assert response.liked_thread_ids == []


class TestViewThreadUseCase:
    """Tests for ViewThreadUseCase."""

    def test_view_counts_once_per_session(self, unit_env):
        """Repeated views in one session do not inflate the counter."""
        # Arrange
        unit_env.get(ThreadService).create(make_thread("t1"))
        use_case = unit_env.get(ViewThreadUseCase)
        request = ViewThreadRequest(thread_id=THREAD, session_id=SessionId("s1"))

        # Act
        use_case.execute(request)
        response = use_case.execute(request)

        # Assert
        assert response.thread.view_count == 1
        assert response.comments == []
        assert response.liked is False

    def test_pending_deleted_thread_not_viewable(self, unit_env):
        """A thread pending deletion cannot be opened."""
        # Arrange
        unit_env.get(ThreadService).create(make_thread("t1"))
        unit_env.get(DeletionService).delete(DeletionKey.thread(THREAD))
        use_case = unit_env.get(ViewThreadUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            use_case.execute(
                ViewThreadRequest(thread_id=THREAD, session_id=SessionId("s1"))
            )


class TestDrafts:
    """Tests for saving and restoring drafts."""

    def test_save_then_restore(self, unit_env):
        """A saved draft comes back for the same user."""
        # Arrange
        unit_env.get(IdentityProvider).sign_in(make_actor())
        sink = unit_env.get(NotificationSink)
        draft = ThreadDraft(title="Half a title", tags=["physics"])

        # Act
        unit_env.get(SaveDraftUseCase).execute(SaveDraftRequest(draft=draft))
        response = unit_env.get(RestoreDraftUseCase).execute(RestoreDraftRequest())

        # Assert
        assert response.draft.title == "Half a title"
        assert response.draft.saved_at is not None
        assert [m for m, _, _ in sink.messages] == [
            "Draft saved successfully",
            "Draft restored",
        ]

    def test_restore_without_draft(self, unit_env):
        """No draft means no notification."""
        unit_env.get(IdentityProvider).sign_in(make_actor())
        sink = unit_env.get(NotificationSink)

        response = unit_env.get(RestoreDraftUseCase).execute(RestoreDraftRequest())

        assert response.draft is None
        assert sink.messages == []

    def test_save_draft_requires_sign_in(self, unit_env):
        """Drafts belong to a user."""
        use_case = unit_env.get(SaveDraftUseCase)

        with pytest.raises(AuthRequiredError):
            use_case.execute(SaveDraftRequest(draft=ThreadDraft()))

        assert unit_env.get(NotificationSink).last[1] == NotificationLevel.INFO
