"""Fetch the item collection and reconcile the result with ``ViewState``.

Ordering is guaranteed by a monotonically increasing request sequence
number: a result is only applied when its number is still the highest one
issued.  Debouncing merely avoids issuing requests that would be discarded.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Coroutine, List, Optional

from tsundoc.config import GENERIC_FETCH_ERROR, SEARCH_DEBOUNCE_MS
from tsundoc.domain.models import FetchStatus, Item
from tsundoc.errors import FetchError, ServiceError
from tsundoc.errors.handler import ErrorHandler, ErrorSeverity
from tsundoc.events.bus import EventBus
from tsundoc.events.library_events import LibraryLoadedEvent, LibraryLoadFailedEvent
from tsundoc.gui.viewmodels.signal import Signal
from tsundoc.gui.viewmodels.view_state import ViewState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchResult:
    sequence: int
    keyword: Optional[str] = None
    items: List[Item] = field(default_factory=list)
    error: Optional[FetchError] = None
    stale: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None and not self.stale


class FetchCoordinator:
    """Issue list queries for a ``ViewState`` and apply only the freshest.

    ``service`` needs a single coroutine method, ``list_items(keyword)``.
    """

    def __init__(
        self,
        service,
        state: ViewState,
        debounce_ms: int = SEARCH_DEBOUNCE_MS,
        event_bus: Optional[EventBus] = None,
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        self._service = service
        self._state = state
        self._debounce_sec = max(0, debounce_ms) / 1000.0
        self._event_bus = event_bus
        self._error_handler = error_handler
        self._sequence = 0
        self._timer: Optional[asyncio.TimerHandle] = None
        self._tasks: set[asyncio.Task] = set()

        self.fetch_started = Signal()   # emits (sequence, keyword)
        self.fetch_finished = Signal()  # emits FetchResult, stale ones included

    @property
    def sequence(self) -> int:
        """Highest sequence number issued so far."""
        return self._sequence

    @property
    def debounce_pending(self) -> bool:
        return self._timer is not None

    @property
    def in_flight(self) -> int:
        return len(self._tasks)

    # ------------------------------------------------------------------
    # Scheduling
    # ------------------------------------------------------------------
    def request(self, keyword: Optional[str]) -> None:
        """Fetch *keyword* once input has been quiet for the debounce interval.

        An armed timer is always cleared first, so of several requests made
        within the interval only the last one is ever issued.
        """
        self._clear_timer()
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(self._debounce_sec, self._on_debounce_elapsed, keyword)

    def fetch_now(self, keyword: Optional[str] = None) -> asyncio.Task:
        """Issue a fetch immediately, dropping any armed debounce timer."""
        self._clear_timer()
        return self._spawn(self.fetch(keyword))

    def cancel(self) -> None:
        """Drop the armed timer and invalidate every in-flight request.

        Transport calls are left to finish on their own; their results no
        longer match the current sequence number and are ignored.  A view
        left loading goes back to idle.
        """
        self._clear_timer()
        self._sequence += 1
        if self._state.status.value is FetchStatus.LOADING:
            self._state.status.value = FetchStatus.IDLE

    async def wait_idle(self) -> None:
        """Wait until no timer is armed and no spawned fetch is running."""
        while self._timer is not None or self._tasks:
            if self._tasks:
                await asyncio.gather(*list(self._tasks), return_exceptions=True)
            else:
                await asyncio.sleep(self._debounce_sec / 2 or 0)

    def _on_debounce_elapsed(self, keyword: Optional[str]) -> None:
        self._timer = None
        self._spawn(self.fetch(keyword))

    def _spawn(self, coro: Coroutine) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def _clear_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------
    async def fetch(self, keyword: Optional[str] = None) -> FetchResult:
        """Load the collection for *keyword* and apply it if still current."""
        self._sequence += 1
        sequence = self._sequence
        self._state.error_message.value = ""
        self._state.status.value = FetchStatus.LOADING
        logger.debug("Fetch #%d started (keyword=%r)", sequence, keyword)
        self.fetch_started.emit(sequence, keyword)

        unexpected: Optional[Exception] = None
        try:
            items = await self._service.list_items(keyword)
        except FetchError as exc:
            result = FetchResult(sequence, keyword, error=exc)
        except Exception as exc:
            unexpected = exc
            error = ServiceError(f"unexpected failure: {exc}", GENERIC_FETCH_ERROR)
            result = FetchResult(sequence, keyword, error=error)
        else:
            result = FetchResult(sequence, keyword, items=list(items))

        if sequence != self._sequence:
            logger.debug("Fetch #%d superseded by #%d; discarded", sequence, self._sequence)
            result = FetchResult(sequence, keyword, result.items, result.error, stale=True)
        elif result.error is not None:
            if unexpected is not None:
                logger.error("Fetch #%d failed unexpectedly", sequence, exc_info=unexpected)
            self._apply_failure(result)
        else:
            self._apply_success(result)

        self.fetch_finished.emit(result)
        return result

    def _apply_success(self, result: FetchResult) -> None:
        self._state.items.value = result.items
        self._state.status.value = FetchStatus.IDLE
        logger.debug("Fetch #%d loaded %d items", result.sequence, len(result.items))
        if self._event_bus is not None:
            self._event_bus.publish(LibraryLoadedEvent(
                keyword=result.keyword,
                item_count=len(result.items),
                sequence=result.sequence,
            ))

    def _apply_failure(self, result: FetchResult) -> None:
        error = result.error
        message = error.user_message or GENERIC_FETCH_ERROR
        self._state.items.value = []
        self._state.error_message.value = message
        self._state.status.value = FetchStatus.ERROR
        if self._error_handler is not None:
            self._error_handler.handle(
                error,
                ErrorSeverity.ERROR,
                {"sequence": result.sequence, "keyword": result.keyword},
            )
        else:
            logger.warning("Fetch #%d failed: %s", result.sequence, error)
        if self._event_bus is not None:
            self._event_bus.publish(LibraryLoadFailedEvent(
                keyword=result.keyword,
                message=message,
                sequence=result.sequence,
            ))
