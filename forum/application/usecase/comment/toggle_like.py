"""Toggle comment like use case."""

from pydantic import BaseModel

from forum.application.usecase.base import ActorUseCase
from forum.domain.service import CommentService, IdentityProvider, NotificationSink
from forum.domain.value import CommentId, NotificationLevel, ReplyId, ThreadId, UserVote


class ToggleCommentLikeRequest(BaseModel):
    """Toggle comment like request."""

    thread_id: ThreadId
    comment_id: CommentId
    reply_id: ReplyId | None = None  # Set to vote on a reply instead


class ToggleCommentLikeResponse(BaseModel):
    """Toggle comment like response."""

    upvotes: int
    user_vote: UserVote | None


class ToggleCommentLikeUseCase(ActorUseCase):
    """Use case for upvoting or un-voting a comment or reply."""

    def __init__(
        self,
        comment_service: CommentService,
        identity: IdentityProvider,
        notifications: NotificationSink,
    ) -> None:
        super().__init__(identity, notifications)
        self.comment_service = comment_service

    def execute(self, request: ToggleCommentLikeRequest) -> ToggleCommentLikeResponse:
        """Execute toggle like flow.

        Raises:
            AuthRequiredError: If nobody is signed in
            NotFoundError: If the comment or reply is missing or pending deletion
        """
        actor = self.require_actor("vote")

        if request.reply_id is None:
            target = self.comment_service.toggle_comment_like(
                request.thread_id, request.comment_id, actor.id
            )
        else:
            target = self.comment_service.toggle_reply_like(
                request.thread_id, request.comment_id, request.reply_id, actor.id
            )

        self.notify("Vote recorded!", NotificationLevel.SUCCESS)
        return ToggleCommentLikeResponse(
            upvotes=target.upvotes, user_vote=target.user_vote
        )
