"""Synchronous publish/subscribe bus shared by services and view models.

Everything in the library view runs on one event loop, so handlers are
invoked inline in subscription order.
"""

from __future__ import annotations

import logging
import uuid
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Dict, List, Optional, Type


@dataclass(frozen=True, kw_only=True)
class Event:
    """Base event class."""
    timestamp: datetime = field(default_factory=datetime.now)
    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))


@dataclass
class Subscription:
    """Handle returned by subscribe(); can be used to unsubscribe."""
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    event_type: Type = Event
    handler: Callable = field(default=lambda e: None)
    active: bool = True

    def cancel(self) -> None:
        self.active = False


class EventBus:
    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)
        self._handlers: Dict[Type[Event], List[Subscription]] = defaultdict(list)

    def subscribe(self, event_type: Type[Event], handler: Callable) -> Subscription:
        sub = Subscription(event_type=event_type, handler=handler)
        self._handlers[event_type].append(sub)
        return sub

    def unsubscribe(self, subscription: Subscription) -> None:
        subscription.active = False
        subs = self._handlers.get(subscription.event_type)
        if subs and subscription in subs:
            subs.remove(subscription)

    def publish(self, event: Event) -> None:
        event_type = type(event)
        # Prune cancelled handles so disposed view models do not accumulate.
        subs = [sub for sub in self._handlers[event_type] if sub.active]
        self._handlers[event_type] = subs

        for sub in list(subs):
            if not sub.active:
                continue
            try:
                sub.handler(event)
            except Exception as exc:
                self._logger.error("Handler failed for %s: %s", event_type.__name__, exc)

    def subscriber_count(self, event_type: Type[Event]) -> int:
        return sum(1 for sub in self._handlers.get(event_type, []) if sub.active)
