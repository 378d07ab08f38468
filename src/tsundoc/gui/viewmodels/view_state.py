"""Client-only state of one mounted library view."""

from __future__ import annotations

from tsundoc.config import MAX_COLUMNS
from tsundoc.domain.models import FetchStatus, ViewMode
from tsundoc.gui.viewmodels.signal import ObservableProperty


class ViewState:
    """Observable fields for the library view.

    A ``ViewState`` is created on mount and dropped on unmount.  The fetch
    coordinator owns ``items``, ``status`` and ``error_message``; user
    interaction owns ``keyword``, ``mode`` and ``columns``.
    """

    def __init__(
        self,
        mode: ViewMode = ViewMode.COVER,
        columns: int = MAX_COLUMNS,
    ) -> None:
        self.keyword = ObservableProperty("")
        self.mode = ObservableProperty(ViewMode(mode))
        self.columns = ObservableProperty(max(1, columns))
        self.items = ObservableProperty([])
        self.status = ObservableProperty(FetchStatus.IDLE)
        self.error_message = ObservableProperty("")

    def __repr__(self) -> str:
        return (
            f"ViewState(keyword={self.keyword.value!r}, mode={self.mode.value.value}, "
            f"columns={self.columns.value}, items={len(self.items.value)}, "
            f"status={self.status.value.value})"
        )
