"""BaseViewModel: pure Python, no Qt dependency.

Provides lifecycle management so that concrete ViewModels can subscribe to
``EventBus`` events and register arbitrary teardown callbacks, and have all
of them released by ``dispose()``.
"""

from __future__ import annotations

import logging
from typing import Callable, Type

from tsundoc.events.bus import EventBus, Subscription

_logger = logging.getLogger(__name__)


class BaseViewModel:
    """ViewModel base class: pure Python, no Qt dependency."""

    def __init__(self) -> None:
        self._subscriptions: list[Subscription] = []
        self._disposers: list[Callable[[], None]] = []

    def subscribe_event(
        self,
        event_bus: EventBus,
        event_type: Type,
        handler: Callable,
    ) -> Subscription:
        """Subscribe to an event type and track the subscription."""
        sub = event_bus.subscribe(event_type, handler)
        self._subscriptions.append(sub)
        return sub

    def add_disposer(self, disposer: Callable[[], None]) -> None:
        """Run *disposer* on the next ``dispose()`` call."""
        self._disposers.append(disposer)

    def dispose(self) -> None:
        """Cancel tracked subscriptions and run disposers, newest first."""
        for sub in self._subscriptions:
            sub.cancel()
        self._subscriptions.clear()
        while self._disposers:
            disposer = self._disposers.pop()
            try:
                disposer()
            except Exception as exc:
                _logger.error("Disposer %r failed: %s", disposer, exc)
