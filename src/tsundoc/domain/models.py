from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Optional

from dateutil import parser as date_parser

from tsundoc.config import GENERIC_FETCH_ERROR
from tsundoc.errors import ServiceError


class ViewMode(str, Enum):
    COVER = "cover"
    SHELF = "shelf"
    CARD = "card"


class FetchStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"


@dataclass(frozen=True)
class Item:
    """One saved unit of content as returned by the data service."""

    id: str
    title: str
    content: str = ""
    tags: tuple[str, ...] = field(default_factory=tuple)
    created_at: str = ""

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Item:
        """Build an item from a GraphQL response object.

        Only ``id`` and ``title`` are mandatory; missing optional fields fall
        back to empty values rather than failing the whole collection.
        """
        if not isinstance(payload, Mapping):
            raise ServiceError(f"Malformed item payload: {payload!r}", GENERIC_FETCH_ERROR)
        item_id = payload.get("id")
        title = payload.get("title")
        if not item_id or not title:
            raise ServiceError(
                f"Item payload is missing id or title: {payload!r}", GENERIC_FETCH_ERROR
            )
        return cls(
            id=str(item_id),
            title=str(title),
            content=payload.get("content") or "",
            tags=tuple(payload.get("tags") or ()),
            created_at=payload.get("createdAt") or "",
        )

    @property
    def created_datetime(self) -> Optional[datetime]:
        if not self.created_at:
            return None
        try:
            return date_parser.isoparse(self.created_at)
        except (ValueError, OverflowError):
            return None

    def created_label(self, fmt: str = "%Y-%m-%d") -> str:
        """Return a display label for ``created_at``; raw text if unparsable."""
        parsed = self.created_datetime
        if parsed is None:
            return self.created_at
        return parsed.strftime(fmt)
