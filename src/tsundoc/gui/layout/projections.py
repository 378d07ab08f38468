"""Per-mode projections of the item collection into render-target props.

Cover, shelf and card views all render the same filtered collection; a
``ViewMode`` only selects which projection is applied.  Props are plain
frozen dataclasses, and their click callbacks forward to whatever the caller
supplied without touching view state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Union

from tsundoc.config import CARD_MAX_COLUMNS, SPINE_MEDIUM_TAG_COUNT, SPINE_TALL_TAG_COUNT
from tsundoc.domain.models import Item, ViewMode
from tsundoc.gui.layout.engine import paginate_into_rows

ItemCallback = Callable[[Item], None]
TagCallback = Callable[[str], None]


@dataclass(frozen=True)
class RenderProps:
    item: Item
    on_click: Optional[Callable[[], None]] = None
    on_tag_click: Optional[TagCallback] = None

    @property
    def title(self) -> str:
        return self.item.title

    @property
    def content(self) -> str:
        return self.item.content

    @property
    def tags(self) -> tuple[str, ...]:
        return self.item.tags

    @property
    def created_at(self) -> str:
        return self.item.created_at

    def click(self) -> None:
        if self.on_click is not None:
            self.on_click()

    def click_tag(self, tag: str) -> None:
        if self.on_tag_click is not None:
            self.on_tag_click(tag)


@dataclass(frozen=True)
class CoverProps(RenderProps):
    pass


@dataclass(frozen=True)
class SpineProps(RenderProps):
    height: str = "sm"


@dataclass(frozen=True)
class CardProps(RenderProps):
    created_label: str = ""


Props = Union[CoverProps, SpineProps, CardProps]


def spine_height(item: Item) -> str:
    count = len(item.tags)
    if count > SPINE_TALL_TAG_COUNT:
        return "lg"
    if count > SPINE_MEDIUM_TAG_COUNT:
        return "md"
    return "sm"


def card_columns(columns: int) -> int:
    return max(1, min(int(columns), CARD_MAX_COLUMNS))


def _click_for(item: Item, on_click: Optional[ItemCallback]) -> Optional[Callable[[], None]]:
    if on_click is None:
        return None
    return lambda: on_click(item)


def project_cover(
    items: Sequence[Item],
    columns: int,
    on_click: Optional[ItemCallback] = None,
    on_tag_click: Optional[TagCallback] = None,
) -> List[List[CoverProps]]:
    props = [CoverProps(item, _click_for(item, on_click), on_tag_click) for item in items]
    return paginate_into_rows(props, columns)


def project_shelf(
    items: Sequence[Item],
    columns: int,
    on_click: Optional[ItemCallback] = None,
    on_tag_click: Optional[TagCallback] = None,
) -> List[List[SpineProps]]:
    props = [
        SpineProps(item, _click_for(item, on_click), on_tag_click, height=spine_height(item))
        for item in items
    ]
    return paginate_into_rows(props, columns)


def project_card(
    items: Sequence[Item],
    columns: int,
    on_click: Optional[ItemCallback] = None,
    on_tag_click: Optional[TagCallback] = None,
) -> List[List[CardProps]]:
    props = [
        CardProps(
            item,
            _click_for(item, on_click),
            on_tag_click,
            created_label=item.created_label(),
        )
        for item in items
    ]
    return paginate_into_rows(props, card_columns(columns))


_PROJECTIONS = {
    ViewMode.COVER: project_cover,
    ViewMode.SHELF: project_shelf,
    ViewMode.CARD: project_card,
}


def project(
    mode: ViewMode,
    items: Sequence[Item],
    columns: int,
    on_click: Optional[ItemCallback] = None,
    on_tag_click: Optional[TagCallback] = None,
) -> List[List[Props]]:
    """Dispatch to the projection for *mode*."""
    return _PROJECTIONS[ViewMode(mode)](items, columns, on_click, on_tag_click)
