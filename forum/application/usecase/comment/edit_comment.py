"""Edit comment use case."""

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import ActorUseCase
from forum.domain.error import AuthRequiredError, ValidationError
from forum.domain.service import CommentService, IdentityProvider, NotificationSink
from forum.domain.value import CommentId, NotificationLevel, ReplyId, ThreadId


class EditCommentRequest(BaseModel):
    """Edit comment request."""

    thread_id: ThreadId
    comment_id: CommentId
    reply_id: ReplyId | None = None  # Set to edit a reply instead
    text: str


class EditCommentResponse(BaseModel):
    """Edit comment response."""

    id: str
    content: str
    edited: bool


class EditCommentUseCase(ActorUseCase):
    """Use case for an author rewriting their comment or reply."""

    def __init__(
        self,
        comment_service: CommentService,
        identity: IdentityProvider,
        notifications: NotificationSink,
    ) -> None:
        """Initialize edit comment use case.

        Args:
            comment_service: Comment domain service
            identity: Current user lookup
            notifications: User feedback channel
        """
        super().__init__(identity, notifications)
        self.comment_service = comment_service

    def execute(self, request: EditCommentRequest) -> EditCommentResponse:
        """Execute edit comment flow.

        Raises:
            ValidationError: If the text is empty
            AuthRequiredError: If nobody is signed in
            NotFoundError: If the comment or reply is missing or pending deletion
            NotAuthorizedError: If the actor is not the author
        """
        with logfire.span(
            "edit_comment.execute",
            comment_id=request.comment_id,
            reply_id=request.reply_id,
        ):
            try:
                if request.reply_id is None:
                    target = self.comment_service.edit_comment(
                        request.thread_id,
                        request.comment_id,
                        self.viewer(),
                        request.text,
                    )
                else:
                    target = self.comment_service.edit_reply(
                        request.thread_id,
                        request.comment_id,
                        request.reply_id,
                        self.viewer(),
                        request.text,
                    )
            except ValidationError as e:
                self.reject(e)
                raise
            except AuthRequiredError as e:
                self.prompt_sign_in(e)
                raise

        self.notify("Comment updated successfully", NotificationLevel.SUCCESS)
        return EditCommentResponse(
            id=target.id, content=target.content, edited=target.edited
        )
