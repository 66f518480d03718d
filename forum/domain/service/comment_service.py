"""Comment domain service."""

from datetime import datetime
from typing import Optional

import logfire
from pydantic import TypeAdapter

from forum.domain.error import AuthRequiredError, NotAuthorizedError, NotFoundError, ValidationError
from forum.domain.model import Actor, Author, Comment, DeletionKey, Reply
from forum.domain.value import (
    CommentId,
    ReplyId,
    ThreadId,
    UserId,
    new_comment_id,
    new_reply_id,
)
from forum.domain.repository import StorageGateway
from forum.domain.repository.keys import comments_key

from .base import Service
from .deletion_ledger import DeletionLedger

_COMMENT_LIST = TypeAdapter(list[Comment])


class CommentService(Service):
    """Domain service for per-thread comment trees.

    Trees are loaded lazily on first access. Every mutator persists the
    thread's entire comment list after the change.
    """

    def __init__(self, gateway: StorageGateway, ledger: DeletionLedger) -> None:
        """Initialize comment service.

        Args:
            gateway: Persistence gateway
            ledger: Pending deletions, used to hide comments and replies
        """
        self.gateway = gateway
        self.ledger = ledger
        self._trees: dict[ThreadId, list[Comment]] = {}

    def load_for_thread(self, thread_id: ThreadId) -> list[Comment]:
        """Return the raw comment tree for a thread, loading it on first use.

        Includes comments pending deletion. Missing or corrupted data yields
        an empty list.
        """
        tree = self._trees.get(thread_id)
        if tree is None:
            tree = self.gateway.get_model(
                comments_key(thread_id), _COMMENT_LIST, default=[]
            )
            self._trees[thread_id] = tree
            logfire.info("Comments loaded", thread_id=thread_id, count=len(tree))
        return tree

    def get_comments(
        self, thread_id: ThreadId, viewer_id: Optional[UserId] = None
    ) -> list[Comment]:
        """Visible comments for a thread, newest first, projected for a viewer.

        Args:
            thread_id: Thread ID
            viewer_id: Viewing user, used to fill in ``user_vote``

        Returns:
            Comments (with replies oldest first) not pending deletion
        """
        if self.ledger.is_hidden(thread_id):
            return []
        visible = []
        for comment in self.load_for_thread(thread_id):
            if self.ledger.is_hidden(thread_id, comment.id):
                continue
            replies = [
                r
                for r in comment.replies
                if not self.ledger.is_hidden(thread_id, comment.id, r.id)
            ]
            visible.append(comment.for_viewer(viewer_id, replies))
        return visible

    def find_comment(
        self, thread_id: ThreadId, comment_id: CommentId
    ) -> Optional[Comment]:
        """Find a comment by id, including one pending deletion."""
        return next(
            (c for c in self.load_for_thread(thread_id) if c.id == comment_id), None
        )

    def find_reply(
        self, thread_id: ThreadId, comment_id: CommentId, reply_id: ReplyId
    ) -> Optional[Reply]:
        """Find a reply by id, including one pending deletion."""
        comment = self.find_comment(thread_id, comment_id)
        return comment.find_reply(reply_id) if comment else None

    def count_top_level(self, thread_id: ThreadId) -> int:
        """Number of top-level comments not pending deletion.

        Replies are not counted.
        """
        return sum(
            1
            for c in self.load_for_thread(thread_id)
            if DeletionKey.comment(thread_id, c.id) not in self.ledger
        )

    def add_comment(
        self, thread_id: ThreadId, actor: Optional[Actor], text: str
    ) -> Comment:
        """Add a comment to the top of a thread's list.

        Args:
            thread_id: Thread ID
            actor: Signed-in user
            text: Comment text

        Returns:
            Created comment

        Raises:
            ValidationError: If text is empty or whitespace
            AuthRequiredError: If there is no actor
        """
        with logfire.span("comment_service.add_comment", thread_id=thread_id):
            content = _require_text(text, "comment")
            actor = _require_actor(actor, "comment")

            comment = Comment(
                id=new_comment_id(),
                thread_id=thread_id,
                content=content,
                author=Author.from_actor(actor),
                created_at=datetime.now(),
            )
            self._trees[thread_id] = [comment, *self.load_for_thread(thread_id)]
            self._persist(thread_id)
            logfire.info(
                "Comment created",
                comment_id=comment.id,
                thread_id=thread_id,
                author_id=actor.id,
            )
            return comment

    def add_reply(
        self,
        thread_id: ThreadId,
        comment_id: CommentId,
        actor: Optional[Actor],
        text: str,
    ) -> Reply:
        """Append a reply to a comment's reply list.

        Raises:
            ValidationError: If text is empty or whitespace
            AuthRequiredError: If there is no actor
            NotFoundError: If the comment does not exist or is pending deletion
        """
        with logfire.span(
            "comment_service.add_reply", thread_id=thread_id, comment_id=comment_id
        ):
            content = _require_text(text, "reply")
            actor = _require_actor(actor, "reply")
            comment = self._require_comment(thread_id, comment_id)

            reply = Reply(
                id=new_reply_id(),
                parent_comment_id=comment_id,
                content=content,
                author=Author.from_actor(actor),
                created_at=datetime.now(),
            )
            self._replace(
                thread_id,
                comment.model_copy(update={"replies": [*comment.replies, reply]}),
            )
            logfire.info(
                "Reply created",
                reply_id=reply.id,
                comment_id=comment_id,
                thread_id=thread_id,
            )
            return reply

    def toggle_comment_like(
        self, thread_id: ThreadId, comment_id: CommentId, voter_id: UserId
    ) -> Comment:
        """Flip ``voter_id``'s upvote on a comment.

        Returns:
            The comment projected for the voter

        Raises:
            NotFoundError: If the comment does not exist or is pending deletion
        """
        with logfire.span(
            "comment_service.toggle_comment_like",
            thread_id=thread_id,
            comment_id=comment_id,
            voter_id=voter_id,
        ):
            updated = self._require_comment(thread_id, comment_id).toggle_vote(voter_id)
            self._replace(thread_id, updated)
            logfire.info(
                "Comment vote toggled", comment_id=comment_id, upvotes=updated.upvotes
            )
            return updated.for_viewer(voter_id)

    def toggle_reply_like(
        self,
        thread_id: ThreadId,
        comment_id: CommentId,
        reply_id: ReplyId,
        voter_id: UserId,
    ) -> Reply:
        """Flip ``voter_id``'s upvote on a reply.

        Returns:
            The reply projected for the voter

        Raises:
            NotFoundError: If the reply does not exist or is pending deletion
        """
        with logfire.span(
            "comment_service.toggle_reply_like",
            thread_id=thread_id,
            comment_id=comment_id,
            reply_id=reply_id,
            voter_id=voter_id,
        ):
            comment, reply = self._require_reply(thread_id, comment_id, reply_id)
            updated = reply.toggle_vote(voter_id)
            self._replace(thread_id, comment.replace_reply(updated))
            logfire.info(
                "Reply vote toggled", reply_id=reply_id, upvotes=updated.upvotes
            )
            return updated.for_viewer(voter_id)

    def edit_comment(
        self,
        thread_id: ThreadId,
        comment_id: CommentId,
        actor: Optional[Actor],
        text: str,
    ) -> Comment:
        """Replace a comment's text and mark it edited.

        Raises:
            ValidationError: If text is empty or whitespace
            AuthRequiredError: If there is no actor
            NotFoundError: If the comment does not exist or is pending deletion
            NotAuthorizedError: If the actor did not write the comment
        """
        with logfire.span(
            "comment_service.edit_comment", thread_id=thread_id, comment_id=comment_id
        ):
            content = _require_text(text, "comment")
            actor = _require_actor(actor, "edit a comment")
            comment = self._require_comment(thread_id, comment_id)
            if comment.author.id != actor.id:
                logfire.warn(
                    "Unauthorized comment edit",
                    comment_id=comment_id,
                    actor_id=actor.id,
                )
                raise NotAuthorizedError("comment", comment_id, actor.id)

            updated = comment.model_copy(update={"content": content, "edited": True})
            self._replace(thread_id, updated)
            logfire.info("Comment edited", comment_id=comment_id)
            return updated.for_viewer(actor.id)

    def edit_reply(
        self,
        thread_id: ThreadId,
        comment_id: CommentId,
        reply_id: ReplyId,
        actor: Optional[Actor],
        text: str,
    ) -> Reply:
        """Replace a reply's text and mark it edited.

        Raises:
            ValidationError: If text is empty or whitespace
            AuthRequiredError: If there is no actor
            NotFoundError: If the reply does not exist or is pending deletion
            NotAuthorizedError: If the actor did not write the reply
        """
        content = _require_text(text, "reply")
        actor = _require_actor(actor, "edit a reply")
        comment, reply = self._require_reply(thread_id, comment_id, reply_id)
        if reply.author.id != actor.id:
            raise NotAuthorizedError("reply", reply_id, actor.id)

        updated = reply.model_copy(update={"content": content, "edited": True})
        self._replace(thread_id, comment.replace_reply(updated))
        logfire.info("Reply edited", reply_id=reply_id)
        return updated.for_viewer(actor.id)

    # Physical removal, used by the deletion service when a soft delete finalizes

    def remove_comment(self, thread_id: ThreadId, comment_id: CommentId) -> bool:
        """Remove a comment together with its replies."""
        tree = self.load_for_thread(thread_id)
        remaining = [c for c in tree if c.id != comment_id]
        if len(remaining) == len(tree):
            return False
        self._trees[thread_id] = remaining
        self._persist(thread_id)
        logfire.info("Comment removed", thread_id=thread_id, comment_id=comment_id)
        return True

    def remove_reply(
        self, thread_id: ThreadId, comment_id: CommentId, reply_id: ReplyId
    ) -> bool:
        """Remove a single reply."""
        comment = self.find_comment(thread_id, comment_id)
        if comment is None or comment.find_reply(reply_id) is None:
            return False
        replies = [r for r in comment.replies if r.id != reply_id]
        self._replace(thread_id, comment.model_copy(update={"replies": replies}))
        logfire.info("Reply removed", comment_id=comment_id, reply_id=reply_id)
        return True

    def purge_thread(self, thread_id: ThreadId) -> None:
        """Drop a thread's whole comment tree from memory and storage."""
        self._trees.pop(thread_id, None)
        self.gateway.remove(comments_key(thread_id))
        logfire.info("Comment tree purged", thread_id=thread_id)

    def restore_comment(self, thread_id: ThreadId, comment: Comment) -> None:
        """Put a comment back from a deletion snapshot if it went missing."""
        if self.find_comment(thread_id, comment.id) is not None:
            return
        self._trees[thread_id] = [comment, *self.load_for_thread(thread_id)]
        self._persist(thread_id)

    def restore_reply(self, thread_id: ThreadId, reply: Reply) -> None:
        """Put a reply back from a deletion snapshot if it went missing."""
        comment = self.find_comment(thread_id, reply.parent_comment_id)
        if comment is None or comment.find_reply(reply.id) is not None:
            return
        self._replace(
            thread_id, comment.model_copy(update={"replies": [*comment.replies, reply]})
        )

    # Internals

    def _require_comment(self, thread_id: ThreadId, comment_id: CommentId) -> Comment:
        comment = self.find_comment(thread_id, comment_id)
        if comment is None or self.ledger.is_hidden(thread_id, comment_id):
            raise NotFoundError("Comment", comment_id)
        return comment

    def _require_reply(
        self, thread_id: ThreadId, comment_id: CommentId, reply_id: ReplyId
    ) -> tuple[Comment, Reply]:
        comment = self._require_comment(thread_id, comment_id)
        reply = comment.find_reply(reply_id)
        if reply is None or self.ledger.is_hidden(thread_id, comment_id, reply_id):
            raise NotFoundError("Reply", reply_id)
        return comment, reply

    def _replace(self, thread_id: ThreadId, comment: Comment) -> None:
        self._trees[thread_id] = [
            comment if c.id == comment.id else c
            for c in self.load_for_thread(thread_id)
        ]
        self._persist(thread_id)

    def _persist(self, thread_id: ThreadId) -> bool:
        return self.gateway.set(comments_key(thread_id), self._trees[thread_id])


def _require_text(text: str, what: str) -> str:
    content = (text or "").strip()
    if not content:
        raise ValidationError(f"Please enter a {what}")
    return content


def _require_actor(actor: Optional[Actor], action: str) -> Actor:
    if actor is None:
        raise AuthRequiredError(action)
    return actor
