"""Domain layer DI providers."""

from dishka import Scope, provide

from forum.config import DeletionSettings, SeedSettings, ThreadRules
from forum.domain.repository import StorageGateway
from forum.domain.service import (
    ChangeSignal,
    CommentService,
    DeletionLedger,
    DeletionService,
    EngagementService,
    Scheduler,
    ThreadService,
)
from forum.persistence.seed import seed_threads
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are APP-scoped: they hold the working copies of threads
    and comment trees, and the pending-deletion ledger must outlive any one
    request so an undo can reach the deletion that preceded it.
    """

    scope = Scope.APP

    @provide
    def get_deletion_ledger(self) -> DeletionLedger:
        return DeletionLedger()

    @provide
    def get_change_signal(self) -> ChangeSignal:
        return ChangeSignal()

    @provide
    def get_thread_service(
        self,
        gateway: StorageGateway,
        ledger: DeletionLedger,
        signal: ChangeSignal,
        rules: ThreadRules,
        seed: SeedSettings,
    ) -> ThreadService:
        """Provide thread domain service, with the demo threads when enabled."""
        return ThreadService(
            gateway=gateway,
            ledger=ledger,
            signal=signal,
            rules=rules,
            seeds=seed_threads() if seed.enabled else [],
        )

    @provide
    def get_comment_service(
        self, gateway: StorageGateway, ledger: DeletionLedger
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(gateway=gateway, ledger=ledger)

    @provide
    def get_engagement_service(
        self,
        gateway: StorageGateway,
        thread_service: ThreadService,
        comment_service: CommentService,
    ) -> EngagementService:
        """Provide engagement domain service."""
        return EngagementService(
            gateway=gateway,
            thread_service=thread_service,
            comment_service=comment_service,
        )

    @provide
    def get_deletion_service(
        self,
        ledger: DeletionLedger,
        scheduler: Scheduler,
        thread_service: ThreadService,
        comment_service: CommentService,
        engagement_service: EngagementService,
        settings: DeletionSettings,
    ) -> DeletionService:
        """Provide deletion domain service."""
        return DeletionService(
            ledger=ledger,
            scheduler=scheduler,
            thread_service=thread_service,
            comment_service=comment_service,
            engagement_service=engagement_service,
            settings=settings,
        )
