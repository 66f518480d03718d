"""Process-wide change broadcast.

Other active views subscribe to ``thread_created`` and re-pull their thread
list when it fires. The payload is a hint, not a full state transfer.
"""

from collections import defaultdict
from typing import Any, Callable

import logfire

THREAD_CREATED = "thread_created"

Receiver = Callable[..., None]


class ChangeSignal:
    """Synchronous publish/subscribe keyed by event name."""

    def __init__(self) -> None:
        self._receivers: dict[str, list[Receiver]] = defaultdict(list)

    def connect(self, event: str, receiver: Receiver) -> None:
        """Subscribe ``receiver`` to ``event`` (duplicate subscriptions are ignored)."""
        if receiver not in self._receivers[event]:
            self._receivers[event].append(receiver)

    def disconnect(self, event: str, receiver: Receiver) -> None:
        """Unsubscribe ``receiver``; unknown receivers are ignored."""
        if receiver in self._receivers[event]:
            self._receivers[event].remove(receiver)

    def send(self, event: str, **payload: Any) -> int:
        """Call every receiver of ``event`` with ``payload``.

        A failing receiver is logged and does not stop the others.

        Returns:
            Number of receivers that handled the event without error
        """
        delivered = 0
        for receiver in list(self._receivers[event]):
            try:
                receiver(**payload)
                delivered += 1
            except Exception as e:
                logfire.error(
                    "Signal receiver failed",
                    event=event,
                    receiver=getattr(receiver, "__qualname__", repr(receiver)),
                    error=str(e),
                )
        return delivered
