"""Unit tests for comment and reply models."""

from datetime import datetime

from forum.domain.model import Author, Comment, Reply
from forum.domain.value import CommentId, ReplyId, ThreadId, UserId, UserVote


def _comment(**overrides) -> Comment:
    fields = {
        "id": CommentId("c1"),
        "thread_id": ThreadId("t1"),
        "content": "A comment",
        "author": Author(id=UserId("author"), name="Author"),
        "created_at": datetime(2024, 1, 1),
    }
    fields.update(overrides)
    return Comment(**fields)


def _reply(reply_id: str = "r1", **overrides) -> Reply:
    fields = {
        "id": ReplyId(reply_id),
        "parent_comment_id": CommentId("c1"),
        "content": "A reply",
        "author": Author(id=UserId("author"), name="Author"),
    }
    fields.update(overrides)
    return Reply(**fields)


class TestToggleVote:
    """Tests for the two-state upvote toggle."""

    def test_first_toggle_adds_vote(self):
        """Toggling once should add the voter and increment upvotes."""
        # Arrange
        comment = _comment()

        # Act
        toggled = comment.toggle_vote(UserId("u1"))

        # Assert
        assert toggled.upvotes == 1
        assert toggled.voter_ids == [UserId("u1")]
        assert comment.upvotes == 0  # Original is unchanged

    def test_toggle_twice_restores_original(self):
        """Two toggles in a row are an overall no-op."""
        # Arrange
        comment = _comment(upvotes=3, voter_ids=[UserId("a"), UserId("b"), UserId("c")])

        # Act
        toggled = comment.toggle_vote(UserId("u1")).toggle_vote(UserId("u1"))

        # Assert
        assert toggled.upvotes == 3
        assert toggled.voter_ids == comment.voter_ids

    def test_count_never_drops_below_zero(self):
        """Removing a vote from an inconsistent zero count stays at zero."""
        # Arrange
        reply = _reply(upvotes=0, voter_ids=[UserId("u1")])

        # Act
        toggled = reply.toggle_vote(UserId("u1"))

        # Assert
        assert toggled.upvotes == 0
        assert toggled.voter_ids == []


class TestForViewer:
    """Tests for per-viewer projections."""

    def test_user_vote_set_for_voter_only(self):
        """Only a viewer in the voter list sees UP."""
        # Arrange
        comment = _comment(upvotes=1, voter_ids=[UserId("u1")])

        # Act & Assert
        assert comment.for_viewer(UserId("u1")).user_vote == UserVote.UP
        assert comment.for_viewer(UserId("u2")).user_vote is None
        assert comment.for_viewer(None).user_vote is None

    def test_replies_projected_and_filtered(self):
        """Projection applies the viewer to replies and can restrict them."""
        # Arrange
        liked = _reply("r1", upvotes=1, voter_ids=[UserId("u1")])
        other = _reply("r2")
        comment = _comment(replies=[liked, other])

        # Act
        projected = comment.for_viewer(UserId("u1"), replies=[liked])

        # Assert
        assert [r.id for r in projected.replies] == ["r1"]
        assert projected.replies[0].user_vote == UserVote.UP

    def test_user_vote_not_persisted(self):
        """The per-viewer vote is never part of the stored payload."""
        # Arrange
        comment = _comment(voter_ids=[UserId("u1")], upvotes=1).for_viewer(UserId("u1"))

        # Act
        payload = comment.to_payload()

        # Assert
        assert "userVote" not in payload
        assert payload["voterIds"] == ["u1"]
        assert payload["threadId"] == "t1"


class TestReplies:
    """Tests for reply lookup and replacement."""

    def test_replace_reply_keeps_order(self):
        """Replacing a reply keeps the oldest-first order."""
        # Arrange
        comment = _comment(replies=[_reply("r1"), _reply("r2"), _reply("r3")])
        edited = comment.find_reply(ReplyId("r2")).model_copy(
            update={"content": "Edited", "edited": True}
        )

        # Act
        updated = comment.replace_reply(edited)

        # Assert
        assert [r.id for r in updated.replies] == ["r1", "r2", "r3"]
        assert updated.find_reply(ReplyId("r2")).content == "Edited"
        assert updated.find_reply(ReplyId("missing")) is None
