"""Pure Python LibraryViewModel (MVVM): no Qt dependency.

Owns the library view's search keyword, view mode and column count, and
derives the filtered collection and the rows handed to render targets.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, List, Optional

from tsundoc.config import SEARCH_DEBOUNCE_MS
from tsundoc.domain.models import FetchStatus, Item, ViewMode
from tsundoc.errors.handler import ErrorHandler
from tsundoc.events.bus import EventBus
from tsundoc.events.library_events import ItemSavedEvent
from tsundoc.gui.layout.engine import filter_items, normalize_keyword
from tsundoc.gui.layout.projections import Props, project
from tsundoc.gui.responsive import ResponsiveObserver, StaticViewportSource, ViewportSource
from tsundoc.gui.viewmodels.base import BaseViewModel
from tsundoc.gui.viewmodels.fetch_coordinator import FetchCoordinator
from tsundoc.gui.viewmodels.signal import Signal
from tsundoc.gui.viewmodels.view_state import ViewState


class LibraryViewModel(BaseViewModel):
    """Library view ViewModel: pure Python, no Qt dependency.

    ``mount()`` creates a fresh :class:`ViewState`, starts listening to the
    viewport and issues exactly one immediate fetch.  Keyword edits go
    through the debounced path; mode switches only change the projection,
    except after a failed fetch where a mode switch doubles as a retry.
    ``unmount()`` releases every timer, listener and subscription.
    """

    def __init__(
        self,
        service: Any,
        event_bus: EventBus,
        viewport: Optional[ViewportSource] = None,
        debounce_ms: int = SEARCH_DEBOUNCE_MS,
        initial_mode: ViewMode = ViewMode.COVER,
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        super().__init__()
        self._service = service
        self._event_bus = event_bus
        self._viewport = viewport or StaticViewportSource()
        self._debounce_ms = debounce_ms
        self._initial_mode = ViewMode(initial_mode)
        self._error_handler = error_handler
        self._logger = logging.getLogger(__name__)

        self._state: Optional[ViewState] = None
        self._coordinator: Optional[FetchCoordinator] = None
        self._observer: Optional[ResponsiveObserver] = None

        # Signals
        self.item_clicked = Signal()   # emits Item
        self.tag_clicked = Signal()    # emits tag str
        self.rows_changed = Signal()   # emits the projected rows
        self.mounted = Signal()
        self.unmounted = Signal()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    @property
    def is_mounted(self) -> bool:
        return self._state is not None

    @property
    def state(self) -> ViewState:
        if self._state is None:
            raise RuntimeError("LibraryViewModel is not mounted")
        return self._state

    @property
    def coordinator(self) -> FetchCoordinator:
        if self._coordinator is None:
            raise RuntimeError("LibraryViewModel is not mounted")
        return self._coordinator

    def mount(self) -> asyncio.Task:
        """Create the view state and issue the initial, non-debounced fetch."""
        if self._state is not None:
            raise RuntimeError("LibraryViewModel is already mounted")
        # Raises before any state exists when no event loop is running.
        asyncio.get_running_loop()

        state = ViewState(mode=self._initial_mode)
        self._state = state
        self._coordinator = FetchCoordinator(
            self._service,
            state,
            debounce_ms=self._debounce_ms,
            event_bus=self._event_bus,
            error_handler=self._error_handler,
        )

        for prop in (state.items, state.mode, state.columns, state.keyword):
            prop.changed.connect(self._on_layout_input_changed)

        self._observer = ResponsiveObserver(self._viewport, self._on_columns_changed)
        self._observer.attach()
        self.add_disposer(self._observer.detach)

        self.subscribe_event(self._event_bus, ItemSavedEvent, self._on_item_saved)

        self._logger.debug("Library view mounted (mode=%s)", state.mode.value.value)
        self.mounted.emit()
        return self._coordinator.fetch_now(None)

    def unmount(self) -> None:
        """Tear the view down; later fetch results are ignored."""
        if self._state is None:
            return
        self._coordinator.cancel()
        self.dispose()
        self._observer = None
        self._coordinator = None
        self._state = None
        self._logger.debug("Library view unmounted")
        self.unmounted.emit()

    # ------------------------------------------------------------------
    # User interaction
    # ------------------------------------------------------------------
    def set_keyword(self, text: str) -> None:
        """Store the raw search text and schedule a debounced fetch."""
        state = self.state
        state.keyword.value = text
        self.coordinator.request(normalize_keyword(text))

    def set_mode(self, mode: ViewMode) -> Optional[asyncio.Task]:
        """Switch the projection; retry the fetch if the last one failed."""
        state = self.state
        state.mode.value = ViewMode(mode)
        if state.status.value is FetchStatus.ERROR:
            self._logger.info("Retrying failed fetch after switching to %s", state.mode.value.value)
            return self.coordinator.fetch_now(normalize_keyword(state.keyword.value))
        return None

    def refresh(self) -> asyncio.Task:
        """Fetch the current keyword again right away."""
        return self.coordinator.fetch_now(normalize_keyword(self.state.keyword.value))

    # ------------------------------------------------------------------
    # Derived data
    # ------------------------------------------------------------------
    @property
    def filtered(self) -> List[Item]:
        state = self.state
        return filter_items(state.items.value, state.keyword.value)

    @property
    def rows(self) -> List[List[Props]]:
        state = self.state
        return project(
            state.mode.value,
            self.filtered,
            state.columns.value,
            on_click=self.item_clicked.emit,
            on_tag_click=self.tag_clicked.emit,
        )

    @property
    def is_empty(self) -> bool:
        """True when a settled fetch left nothing to show."""
        state = self.state
        return state.status.value is not FetchStatus.LOADING and not self.filtered

    # ------------------------------------------------------------------
    # Internal handlers
    # ------------------------------------------------------------------
    def _on_columns_changed(self, columns: int) -> None:
        if self._state is not None:
            self._state.columns.value = columns

    def _on_layout_input_changed(self, new_value: Any, old_value: Any) -> None:
        if self._state is not None:
            self.rows_changed.emit(self.rows)

    def _on_item_saved(self, event: ItemSavedEvent) -> None:
        if self._state is None:
            return
        self._logger.debug("Item %s saved; refreshing library", event.item_id)
        self.refresh()
