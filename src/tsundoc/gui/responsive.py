"""Feed viewport width changes into the layout column count."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol

from tsundoc.gui.layout.engine import compute_columns
from tsundoc.gui.viewmodels.signal import Signal

logger = logging.getLogger(__name__)

Unsubscribe = Callable[[], None]


class ViewportSource(Protocol):
    """Anything that knows its width and reports resizes."""

    def width(self) -> int:
        ...

    def subscribe(self, handler: Callable[[int], None]) -> Unsubscribe:
        ...


class StaticViewportSource:
    """Viewport driven by explicit ``resize`` calls (CLI, tests, headless)."""

    def __init__(self, width: int = 1280) -> None:
        self._width = width
        self.resized = Signal()

    def width(self) -> int:
        return self._width

    def resize(self, width: int) -> None:
        self._width = width
        self.resized.emit(width)

    def subscribe(self, handler: Callable[[int], None]) -> Unsubscribe:
        self.resized.connect(handler)
        return lambda: self.resized.disconnect(handler)


class ResponsiveObserver:
    """Recompute the column count on every resize of *source*.

    ``on_columns`` is only called when the count actually changes, plus once
    on ``attach`` so the first layout matches the current width.
    """

    def __init__(self, source: ViewportSource, on_columns: Callable[[int], None]) -> None:
        self._source = source
        self._on_columns = on_columns
        self._unsubscribe: Optional[Unsubscribe] = None
        self._columns: Optional[int] = None

    @property
    def attached(self) -> bool:
        return self._unsubscribe is not None

    @property
    def columns(self) -> Optional[int]:
        return self._columns

    def attach(self) -> int:
        if self._unsubscribe is None:
            self._unsubscribe = self._source.subscribe(self._on_resized)
        self._columns = None
        self._on_resized(self._source.width())
        return self._columns

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_resized(self, width: int) -> None:
        columns = compute_columns(width)
        if columns == self._columns:
            return
        logger.debug("Viewport %dpx -> %d columns", width, columns)
        self._columns = columns
        self._on_columns(columns)
