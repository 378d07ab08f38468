"""ViewModelFactory: centralised ViewModel creation.

Uses the DI ``Container`` to resolve dependencies so views never reach for
module-level clients.
"""

from __future__ import annotations

from typing import Optional

from tsundoc.application.library_service import LibraryService
from tsundoc.di.container import Container
from tsundoc.domain.models import ViewMode
from tsundoc.errors.handler import ErrorHandler
from tsundoc.events.bus import EventBus
from tsundoc.gui.responsive import ViewportSource
from tsundoc.gui.viewmodels.library_viewmodel import LibraryViewModel
from tsundoc.settings.manager import SettingsManager


class ViewModelFactory:
    """Centrally creates ViewModels."""

    def __init__(self, container: Container) -> None:
        self._container = container

    def create_library_vm(
        self,
        viewport: Optional[ViewportSource] = None,
        mode: Optional[ViewMode] = None,
    ) -> LibraryViewModel:
        settings = self._container.resolve(SettingsManager)
        return LibraryViewModel(
            service=self._container.resolve(LibraryService),
            event_bus=self._container.resolve(EventBus),
            viewport=viewport,
            debounce_ms=settings.search_debounce_ms(),
            initial_mode=mode or settings.view_mode(),
            error_handler=self._container.resolve(ErrorHandler),
        )
