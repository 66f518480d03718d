"""Scheduler infrastructure providers."""

from dishka import Scope, provide

from forum.adapter.scheduler import AsyncioScheduler
from forum.domain.service import Scheduler
from forum.util.di.base import ProviderBase


class SchedulerProvider(ProviderBase):
    """Scheduler component base."""

    __mock_component__ = "scheduler"


class ProdSchedulerProvider(SchedulerProvider):
    """Production scheduler provider backed by the running asyncio loop."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_scheduler(self) -> Scheduler:
        return AsyncioScheduler()
