#!/usr/bin/env python3
"""Run a headless forum session with Logfire error tracking for startup errors."""

import asyncio
import sys

import logfire

from forum.adapter.collaborator import StaticIdentityProvider
from forum.app import create_forum
from forum.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from forum.application.usecase.thread import (
    CreateThreadRequest,
    CreateThreadUseCase,
    ListThreadsRequest,
    ListThreadsUseCase,
)
from forum.config import Settings
from forum.domain.model import Actor
from forum.domain.service import IdentityProvider
from forum.domain.value import ForumId, ThreadSortOrder, UserId
from forum.util.observability import configure_logfire


async def run_session() -> None:
    """Create a thread, comment on it, delete the comment and let it finalize."""
    container = create_forum()
    settings = container.get(Settings)

    identity = container.get(IdentityProvider)
    if isinstance(identity, StaticIdentityProvider):
        identity.sign_in(Actor(id=UserId("demo"), name="Demo User", points=120))

    with container() as request:
        created = request.get(CreateThreadUseCase).execute(
            CreateThreadRequest(
                title="Headless session thread",
                content="Posted from the start_forum script to exercise the engine.",
                forum_id=ForumId("general"),
                tags=["demo"],
            )
        )
        thread_id = created.thread.id

        comment = request.get(AddCommentUseCase).execute(
            AddCommentRequest(thread_id=thread_id, text="First!")
        )
        request.get(DeleteCommentUseCase).execute(
            DeleteCommentRequest(thread_id=thread_id, comment_id=comment.comment.id)
        )

    # Let the pending deletion finalize
    await asyncio.sleep(settings.deletion.grace_period_seconds + 0.1)

    with container() as request:
        listing = request.get(ListThreadsUseCase).execute(
            ListThreadsRequest(sort=ThreadSortOrder.RECENT)
        )
        for thread in listing.threads:
            logfire.info(
                "Thread",
                thread_id=thread.id,
                title=thread.title,
                comments=thread.comment_count,
            )

    container.close()


def main() -> int:
    """Start the session and log any startup errors to Logfire."""
    settings = Settings()

    # Configure Logfire early to catch startup errors
    configure_logfire(settings)

    try:
        logfire.info("Starting forum session")
        asyncio.run(run_session())
        return 0

    except Exception as e:
        logfire.error(
            "Forum session failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
