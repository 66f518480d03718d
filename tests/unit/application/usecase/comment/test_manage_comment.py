"""Unit tests for liking, editing and deleting comments and replies."""

import pytest

from forum.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    AddReplyRequest,
    AddReplyUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    EditCommentRequest,
    EditCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    ToggleCommentLikeRequest,
    ToggleCommentLikeUseCase,
)
from forum.application.usecase.thread import ListThreadsRequest, ListThreadsUseCase
from forum.domain.error import (
    AuthRequiredError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from forum.domain.model import Comment
from forum.domain.service import (
    IdentityProvider,
    NotificationSink,
    Scheduler,
    ThreadService,
)
from forum.domain.value import NotificationLevel, ThreadId, UserVote
from tests.conftest import make_actor, make_thread
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

THREAD = ThreadId("t1")


def _comment_by(unit_env, user_id: str = "writer", text: str = "Original") -> Comment:
    unit_env.get(ThreadService).create(make_thread("t1"))
    unit_env.get(IdentityProvider).sign_in(make_actor(user_id))
    return unit_env.get(AddCommentUseCase).execute(
        AddCommentRequest(thread_id=THREAD, text=text)
    ).comment


class TestToggleCommentLikeUseCase:
    """Tests for ToggleCommentLikeUseCase."""

    def test_like_and_unlike_comment(self, unit_env):
        """Toggling twice returns the comment to no vote."""
        # Arrange
        comment = _comment_by(unit_env)
        unit_env.get(IdentityProvider).sign_in(make_actor("voter"))
        use_case = unit_env.get(ToggleCommentLikeUseCase)
        request = ToggleCommentLikeRequest(thread_id=THREAD, comment_id=comment.id)

        # Act
        liked = use_case.execute(request)
        unliked = use_case.execute(request)

        # Assert
        assert (liked.upvotes, liked.user_vote) == (1, UserVote.UP)
        assert (unliked.upvotes, unliked.user_vote) == (0, None)
        assert unit_env.get(NotificationSink).last[0] == "Vote recorded!"

    def test_like_reply(self, unit_env):
        """Replies carry their own vote state."""
        # Arrange
        comment = _comment_by(unit_env)
        reply = unit_env.get(AddReplyUseCase).execute(
            AddReplyRequest(thread_id=THREAD, comment_id=comment.id, text="Reply")
        ).reply
        unit_env.get(IdentityProvider).sign_in(make_actor("voter"))
        use_case = unit_env.get(ToggleCommentLikeUseCase)

        # Act
        response = use_case.execute(
            ToggleCommentLikeRequest(
                thread_id=THREAD, comment_id=comment.id, reply_id=reply.id
            )
        )

        # Assert
        assert response.upvotes == 1
        listed = unit_env.get(GetCommentsUseCase).execute(
            GetCommentsRequest(thread_id=THREAD)
        )
        assert listed.comments[0].upvotes == 0
        assert listed.comments[0].replies[0].user_vote == UserVote.UP

    def test_signed_out_cannot_vote(self, unit_env):
        """Voting without an actor prompts sign-in."""
        comment = _comment_by(unit_env)
        unit_env.get(IdentityProvider).sign_out()
        use_case = unit_env.get(ToggleCommentLikeUseCase)

        with pytest.raises(AuthRequiredError):
            use_case.execute(
                ToggleCommentLikeRequest(thread_id=THREAD, comment_id=comment.id)
            )

        assert unit_env.get(NotificationSink).last[0] == "Please sign in to vote"


class TestEditCommentUseCase:
    """Tests for EditCommentUseCase."""

    def test_author_edits_comment(self, unit_env):
        """Edited text is stored and flagged."""
        # Arrange
        comment = _comment_by(unit_env)
        use_case = unit_env.get(EditCommentUseCase)

        # Act
        response = use_case.execute(
            EditCommentRequest(thread_id=THREAD, comment_id=comment.id, text=" New ")
        )

        # Assert
        assert response.content == "New"
        assert response.edited is True
        assert unit_env.get(NotificationSink).last[:2] == (
            "Comment updated successfully",
            NotificationLevel.SUCCESS,
        )

    def test_other_user_cannot_edit(self, unit_env):
        """Only the author may change a comment."""
        comment = _comment_by(unit_env)
        unit_env.get(IdentityProvider).sign_in(make_actor("intruder"))
        use_case = unit_env.get(EditCommentUseCase)

        with pytest.raises(NotAuthorizedError):
            use_case.execute(
                EditCommentRequest(thread_id=THREAD, comment_id=comment.id, text="X")
            )

    def test_empty_edit_rejected(self, unit_env):
        """Blank edits are refused and the text is unchanged."""
        # Arrange
        comment = _comment_by(unit_env)
        use_case = unit_env.get(EditCommentUseCase)

        # Act & Assert
        with pytest.raises(ValidationError):
            use_case.execute(
                EditCommentRequest(thread_id=THREAD, comment_id=comment.id, text=" ")
            )

        listed = unit_env.get(GetCommentsUseCase).execute(
            GetCommentsRequest(thread_id=THREAD)
        )
        assert listed.comments[0].content == "Original"
        assert listed.comments[0].edited is False


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    def test_author_deletes_comment(self, unit_env):
        """The comment is hidden now and gone after the grace period."""
        # Arrange
        comment = _comment_by(unit_env)
        use_case = unit_env.get(DeleteCommentUseCase)
        list_comments = unit_env.get(GetCommentsUseCase)

        # Act
        response = use_case.execute(
            DeleteCommentRequest(thread_id=THREAD, comment_id=comment.id)
        )

        # Assert
        assert response.undo_seconds == 5.0
        assert list_comments.execute(GetCommentsRequest(thread_id=THREAD)).total == 0
        assert unit_env.get(NotificationSink).last == (
            "Comment deleted. Undo within 5 seconds",
            NotificationLevel.INFO,
            5000,
        )

        unit_env.get(Scheduler).advance(5)
        assert unit_env.get(ThreadService).get(THREAD).comment_count == 0

    def test_author_deletes_reply(self, unit_env):
        """Replies use their own message."""
        # Arrange
        comment = _comment_by(unit_env)
        reply = unit_env.get(AddReplyUseCase).execute(
            AddReplyRequest(thread_id=THREAD, comment_id=comment.id, text="Reply")
        ).reply
        use_case = unit_env.get(DeleteCommentUseCase)

        # Act
        use_case.execute(
            DeleteCommentRequest(
                thread_id=THREAD, comment_id=comment.id, reply_id=reply.id
            )
        )

        # Assert
        assert unit_env.get(NotificationSink).last[0] == (
            "Reply deleted. Undo within 5 seconds"
        )

    def test_other_user_cannot_delete(self, unit_env):
        """Only the author may delete."""
        comment = _comment_by(unit_env)
        unit_env.get(IdentityProvider).sign_in(make_actor("intruder"))
        use_case = unit_env.get(DeleteCommentUseCase)

        with pytest.raises(NotAuthorizedError):
            use_case.execute(
                DeleteCommentRequest(thread_id=THREAD, comment_id=comment.id)
            )

    def test_pending_comment_delete_keeps_first_deadline(self, unit_env):
        """Deleting a pending comment again reports the running undo window."""
        # Arrange
        comment = _comment_by(unit_env)
        use_case = unit_env.get(DeleteCommentUseCase)
        request = DeleteCommentRequest(thread_id=THREAD, comment_id=comment.id)
        first = use_case.execute(request)

        # Act
        second = use_case.execute(request)

        # Assert
        assert second.key == first.key
        assert 0 < second.undo_seconds <= 5.0
        assert len(unit_env.get(Scheduler).pending) == 1

    def test_reply_under_pending_comment_is_not_found(self, unit_env):
        """A reply cannot be deleted while its parent comment is pending."""
        # Arrange
        comment = _comment_by(unit_env)
        reply = unit_env.get(AddReplyUseCase).execute(
            AddReplyRequest(thread_id=THREAD, comment_id=comment.id, text="Reply")
        ).reply
        use_case = unit_env.get(DeleteCommentUseCase)
        use_case.execute(DeleteCommentRequest(thread_id=THREAD, comment_id=comment.id))

        # Act & Assert
        with pytest.raises(NotFoundError):
            use_case.execute(
                DeleteCommentRequest(
                    thread_id=THREAD, comment_id=comment.id, reply_id=reply.id
                )
            )

    def test_pending_comment_leaves_comment_count(self, unit_env):
        """The thread stops counting a comment as soon as its delete is pending."""
        # Arrange
        comment = _comment_by(unit_env)
        unit_env.get(AddCommentUseCase).execute(
            AddCommentRequest(thread_id=THREAD, text="Second")
        )
        use_case = unit_env.get(DeleteCommentUseCase)

        # Act
        use_case.execute(DeleteCommentRequest(thread_id=THREAD, comment_id=comment.id))

        # Assert
        listed = unit_env.get(ListThreadsUseCase).execute(ListThreadsRequest())
        [thread] = [t for t in listed.threads if t.id == THREAD]
        assert thread.comment_count == 1
