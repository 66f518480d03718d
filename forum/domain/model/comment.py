"""Comment and reply entities.

Comments are first-level responses to a thread; replies are nested exactly
one level under a comment. Both carry an upvote counter plus the ids of the
users who voted, so a viewer's two-state vote (UP or none) can be derived.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.actor import Author
from forum.domain.model.common import DomainModel
from forum.domain.value import CommentId, ReplyId, ThreadId, UserId, UserVote


class Reply(DomainModel):
    """Reply to a comment."""

    id: ReplyId
    parent_comment_id: CommentId
    content: str = Field(min_length=1)
    author: Author
    upvotes: int = Field(default=0, ge=0)
    # Per-viewer projection; never persisted
    user_vote: Optional[UserVote] = Field(default=None, exclude=True)
    voter_ids: list[UserId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    edited: bool = False

    def toggle_vote(self, voter_id: UserId) -> "Reply":
        """Flip ``voter_id``'s upvote (count never drops below 0)."""
        upvotes, voter_ids = _toggled(self.upvotes, self.voter_ids, voter_id)
        return self.model_copy(update={"upvotes": upvotes, "voter_ids": voter_ids})

    def for_viewer(self, viewer_id: Optional[UserId]) -> "Reply":
        return self.model_copy(update={"user_vote": _vote_of(self.voter_ids, viewer_id)})


class Comment(DomainModel):
    """Comment on a thread.

    Replies are kept oldest-first.
    """

    id: CommentId
    thread_id: ThreadId
    content: str = Field(min_length=1)
    author: Author
    upvotes: int = Field(default=0, ge=0)
    user_vote: Optional[UserVote] = Field(default=None, exclude=True)
    voter_ids: list[UserId] = Field(default_factory=list)
    replies: list[Reply] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    edited: bool = False

    def toggle_vote(self, voter_id: UserId) -> "Comment":
        """Flip ``voter_id``'s upvote (count never drops below 0)."""
        upvotes, voter_ids = _toggled(self.upvotes, self.voter_ids, voter_id)
        return self.model_copy(update={"upvotes": upvotes, "voter_ids": voter_ids})

    def find_reply(self, reply_id: ReplyId) -> Optional[Reply]:
        return next((r for r in self.replies if r.id == reply_id), None)

    def replace_reply(self, reply: Reply) -> "Comment":
        replies = [reply if r.id == reply.id else r for r in self.replies]
        return self.model_copy(update={"replies": replies})

    def for_viewer(
        self, viewer_id: Optional[UserId], replies: Optional[list[Reply]] = None
    ) -> "Comment":
        """Project the comment for a viewer.

        Args:
            viewer_id: Viewing user, or None for signed-out viewers
            replies: Replies to expose (defaults to all replies)
        """
        visible = self.replies if replies is None else replies
        return self.model_copy(
            update={
                "user_vote": _vote_of(self.voter_ids, viewer_id),
                "replies": [r.for_viewer(viewer_id) for r in visible],
            }
        )


def _toggled(
    upvotes: int, voter_ids: list[UserId], voter_id: UserId
) -> tuple[int, list[UserId]]:
    if voter_id in voter_ids:
        return max(0, upvotes - 1), [v for v in voter_ids if v != voter_id]
    return upvotes + 1, [*voter_ids, voter_id]


def _vote_of(voter_ids: list[UserId], viewer_id: Optional[UserId]) -> Optional[UserVote]:
    if viewer_id is not None and viewer_id in voter_ids:
        return UserVote.UP
    return None
