"""Forum engine bootstrap."""

from dishka import Container
import logfire

from forum.config import Settings
from forum.domain.service import ThreadService
from forum.util.di.container import create_container
from forum.util.logging import setup_logging


def create_forum() -> Container:
    """Create the forum engine.

    Note: Logfire should be configured before calling this function.
    In production, start_forum.py handles this.

    Returns:
        Container exposing the domain services and use cases
    """
    settings = Settings()
    setup_logging(settings)

    # Settings are loaded from environment automatically
    container = create_container()

    # Warm the thread list so the first listing does not pay for the load
    container.get(ThreadService).load()
    logfire.info(
        "Forum engine ready",
        storage=settings.storage.backend,
        grace_period=settings.deletion.grace_period_seconds,
    )
    return container
