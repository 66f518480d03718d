"""Scheduler implementations.

``AsyncioScheduler`` runs callbacks on the asyncio event loop, so deferred
work executes on the same thread as every other mutation. ``ManualScheduler``
is a fake clock for tests: nothing runs until ``advance`` is called.
"""

import asyncio
from typing import Callable, Optional

import logfire

from forum.domain.service.scheduler import ScheduledTask, Scheduler


class _CallbackTask(ScheduledTask):
    """Tracks whether a callback ran or was cancelled."""

    def __init__(self, callback: Callable[[], None]) -> None:
        self._callback = callback
        self._fired = False
        self._cancelled = False

    @property
    def done(self) -> bool:
        return self._fired or self._cancelled

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> bool:
        if self.done:
            return False
        self._cancelled = True
        return True

    def fire(self) -> None:
        if self.done:
            return
        self._fired = True
        try:
            self._callback()
        except Exception as e:
            logfire.error(
                "Scheduled task failed",
                callback=getattr(self._callback, "__qualname__", repr(self._callback)),
                error=str(e),
                _exc_info=True,
            )


class AsyncioScheduledTask(_CallbackTask):
    """Task backed by an ``asyncio.TimerHandle``."""

    def __init__(self, callback: Callable[[], None]) -> None:
        super().__init__(callback)
        self.handle: Optional[asyncio.TimerHandle] = None

    def cancel(self) -> bool:
        cancelled = super().cancel()
        if cancelled and self.handle is not None:
            self.handle.cancel()
        return cancelled


class AsyncioScheduler(Scheduler):
    """Schedules callbacks with ``loop.call_later``.

    Must be used from code running inside the event loop unless a loop is
    passed explicitly.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledTask:
        loop = self._loop or asyncio.get_running_loop()
        task = AsyncioScheduledTask(callback)
        task.handle = loop.call_later(delay, task.fire)
        return task


class ManualScheduledTask(_CallbackTask):
    """Task due at a point on a ManualScheduler's clock."""

    def __init__(self, due: float, callback: Callable[[], None]) -> None:
        super().__init__(callback)
        self.due = due


class ManualScheduler(Scheduler):
    """Fake clock: callbacks run only when time is advanced past their due time."""

    def __init__(self) -> None:
        self.now = 0.0
        self._tasks: list[ManualScheduledTask] = []

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledTask:
        task = ManualScheduledTask(self.now + delay, callback)
        self._tasks.append(task)
        return task

    @property
    def pending(self) -> list[ManualScheduledTask]:
        """Tasks that have neither fired nor been cancelled."""
        return [t for t in self._tasks if not t.done]

    def advance(self, seconds: float) -> int:
        """Move the clock forward, firing due tasks in due-time order.

        Tasks scheduled by a firing callback run too if they fall due
        within the window.

        Returns:
            Number of tasks fired
        """
        target = self.now + seconds
        fired = 0
        while True:
            due = [t for t in self.pending if t.due <= target]
            if not due:
                break
            task = min(due, key=lambda t: t.due)
            self.now = task.due
            task.fire()
            fired += 1
        self.now = target
        self._tasks = self.pending
        return fired
