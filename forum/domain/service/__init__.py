"""Domain services."""

from .base import Service
from .collaborator import IdentityProvider, NotificationSink
from .comment_service import CommentService
from .deletion_ledger import DeletionLedger
from .deletion_service import DeletionService
from .engagement_service import EngagementService
from .scheduler import ScheduledTask, Scheduler
from .signal import THREAD_CREATED, ChangeSignal
from .thread_service import ThreadService

__all__ = [
    "THREAD_CREATED",
    "ChangeSignal",
    "CommentService",
    "DeletionLedger",
    "DeletionService",
    "EngagementService",
    "IdentityProvider",
    "NotificationSink",
    "ScheduledTask",
    "Scheduler",
    "Service",
    "ThreadService",
]
