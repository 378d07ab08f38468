"""Qt adapter exposing a widget's width as a ``ViewportSource``."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QEvent, QObject
from PySide6.QtWidgets import QWidget

from tsundoc.gui.viewmodels.signal import Signal


class QtViewportSource(QObject):
    """Report resize events of *widget*.

    The event filter is only installed while at least one handler is
    subscribed, and removed again when the last one unsubscribes.
    """

    def __init__(self, widget: QWidget) -> None:
        super().__init__(widget)
        self._widget = widget
        self._resized = Signal()
        self._filter_installed = False

    def width(self) -> int:
        return self._widget.width()

    @property
    def filter_installed(self) -> bool:
        return self._filter_installed

    def subscribe(self, handler: Callable[[int], None]) -> Callable[[], None]:
        self._resized.connect(handler)
        if not self._filter_installed:
            self._widget.installEventFilter(self)
            self._filter_installed = True

        def unsubscribe() -> None:
            try:
                self._resized.disconnect(handler)
            except ValueError:
                return
            if self._resized.handler_count == 0 and self._filter_installed:
                self._widget.removeEventFilter(self)
                self._filter_installed = False

        return unsubscribe

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:  # noqa: N802 - Qt API
        if event.type() == QEvent.Type.Resize:
            self._resized.emit(event.size().width())
        return super().eventFilter(watched, event)
