"""Scheduled task interfaces.

Deferred work (finalizing a soft delete) goes through a ``Scheduler`` that
returns a cancellable ``ScheduledTask`` handle, so the deletion service can
be driven by a real event loop in production and by a manual clock in
tests.
"""

from abc import ABC, abstractmethod
from typing import Callable


class ScheduledTask(ABC):
    """Handle to a callback scheduled for later execution."""

    @abstractmethod
    def cancel(self) -> bool:
        """Cancel the callback.

        Returns:
            True if the callback was pending and will no longer run,
            False if it already ran or was already cancelled
        """
        pass

    @property
    @abstractmethod
    def done(self) -> bool:
        """Whether the callback ran or was cancelled."""
        pass


class Scheduler(ABC):
    """Schedules callbacks after a delay on the engine's single event thread."""

    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledTask:
        """Run ``callback`` once after ``delay`` seconds.

        Args:
            delay: Delay in seconds
            callback: Zero-argument callable

        Returns:
            Handle that can cancel the callback before it fires
        """
        pass
