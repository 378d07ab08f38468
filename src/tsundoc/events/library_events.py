from __future__ import annotations

from dataclasses import dataclass

from .bus import Event


@dataclass(frozen=True, kw_only=True)
class LibraryLoadedEvent(Event):
    keyword: str | None = None
    item_count: int = 0
    sequence: int = 0


@dataclass(frozen=True, kw_only=True)
class LibraryLoadFailedEvent(Event):
    keyword: str | None = None
    message: str = ""
    sequence: int = 0


@dataclass(frozen=True, kw_only=True)
class ItemSavedEvent(Event):
    item_id: str = ""
    title: str = ""
