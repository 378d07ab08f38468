"""Headless layout math for the library view.

Everything here is a pure function of its arguments so the same code serves
every view mode, the Qt widgets and the CLI preview.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, TypeVar

from tsundoc.config import COLUMN_BREAKPOINTS, MAX_COLUMNS
from tsundoc.domain.models import Item

T = TypeVar("T")


def compute_columns(viewport_width: float) -> int:
    """Map a viewport width in pixels onto a column count.

    Widths below the first breakpoint (including nonsensical negative
    widths) get the narrowest layout, so the result is never below one and
    never decreases as the width grows.
    """
    for max_width, columns in COLUMN_BREAKPOINTS:
        if viewport_width < max_width:
            return columns
    return MAX_COLUMNS


def paginate_into_rows(items: Sequence[T], columns: int) -> List[List[T]]:
    """Split *items* into consecutive rows of *columns* entries.

    The last row may be shorter.  ``columns`` below one is clamped to one.
    """
    columns = max(1, int(columns))
    return [list(items[start:start + columns]) for start in range(0, len(items), columns)]


def normalize_keyword(keyword: Optional[str]) -> Optional[str]:
    """Trim *keyword*; blank input means "no filter" and becomes ``None``."""
    if keyword is None:
        return None
    trimmed = keyword.strip()
    return trimmed or None


def matches(item: Item, keyword: str) -> bool:
    needle = keyword.casefold()
    if needle in item.title.casefold() or needle in item.content.casefold():
        return True
    return any(needle in tag.casefold() for tag in item.tags)


def filter_items(items: Iterable[Item], keyword: Optional[str]) -> List[Item]:
    """Case-insensitive substring filter over title, content and tags."""
    needle = normalize_keyword(keyword)
    if needle is None:
        return list(items)
    return [item for item in items if matches(item, needle)]
