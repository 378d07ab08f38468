from .bus import Event, EventBus, Subscription
from .library_events import (
    ItemSavedEvent,
    LibraryLoadedEvent,
    LibraryLoadFailedEvent,
)

__all__ = [
    "Event",
    "EventBus",
    "ItemSavedEvent",
    "LibraryLoadFailedEvent",
    "LibraryLoadedEvent",
    "Subscription",
]
