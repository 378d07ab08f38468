"""Settings file management with validation and change notifications."""

from __future__ import annotations

import os
import sys
from copy import deepcopy
from pathlib import Path
from typing import Any

from PySide6.QtCore import QObject, Signal

from tsundoc.config import API_URL_ENV, DEFAULT_API_URL
from tsundoc.domain.models import ViewMode
from tsundoc.errors import SettingsLoadError, SettingsValidationError
from tsundoc.utils.jsonio import read_json, write_json
from .schema import DEFAULT_SETTINGS, merge_with_defaults


def default_settings_path() -> Path:
    """Return the default settings.json location for the current platform."""

    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "tsundoc" / "settings.json"
        return Path.home() / "AppData" / "Roaming" / "tsundoc" / "settings.json"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "tsundoc" / "settings.json"
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / "tsundoc" / "settings.json"
    return Path.home() / ".config" / "tsundoc" / "settings.json"


class SettingsManager(QObject):
    """Load, validate and persist user settings for the application."""

    settingsChanged = Signal(str, object)

    def __init__(self, path: Path | None = None) -> None:
        super().__init__()
        self._path = path
        self._data: dict[str, Any] = deepcopy(DEFAULT_SETTINGS)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def load(self) -> None:
        """Load the settings JSON from disk, creating defaults if missing."""

        path = self._path or default_settings_path()
        self._path = path
        if path.exists():
            try:
                payload = read_json(path)
            except Exception as exc:
                raise SettingsLoadError(str(exc)) from exc
        else:
            payload = None
        try:
            self._data = merge_with_defaults(payload)
        except Exception as exc:
            raise SettingsValidationError(str(exc)) from exc
        self._write()

    def get(self, key: str, default: Any | None = None) -> Any:
        """Return the value for *key*, supporting dotted access for nested keys."""

        target = self._data
        parts = key.split(".")
        for index, part in enumerate(parts):
            if not isinstance(target, dict) or part not in target:
                return default
            value = target[part]
            if index == len(parts) - 1:
                return value
            target = value
        return default

    def set(self, key: str, value: Any) -> None:
        """Update *key* with *value* and persist the change."""

        if isinstance(value, Path):
            value = str(value)
        if isinstance(value, ViewMode):
            value = value.value

        candidate = deepcopy(self._data)
        parts = key.split(".")
        target: dict[str, Any] = candidate
        for part in parts[:-1]:
            branch = target.get(part)
            if not isinstance(branch, dict):
                branch = {}
                target[part] = branch
            target = branch
        target[parts[-1]] = value
        try:
            self._data = merge_with_defaults(candidate)
        except Exception as exc:
            raise SettingsValidationError(str(exc)) from exc
        self._write()
        self.settingsChanged.emit(key, value)

    # ------------------------------------------------------------------
    # Typed accessors
    # ------------------------------------------------------------------
    def api_endpoint(self) -> str:
        """Return the service base URL; the environment wins over the file."""

        return os.environ.get(API_URL_ENV) or self.get("api.endpoint") or DEFAULT_API_URL

    def request_timeout(self) -> float:
        return float(self.get("api.timeout_sec"))

    def view_mode(self) -> ViewMode:
        return ViewMode(self.get("ui.view_mode"))

    def search_debounce_ms(self) -> int:
        return int(self.get("ui.search_debounce_ms"))

    # ------------------------------------------------------------------
    # Internal utilities
    # ------------------------------------------------------------------
    def _write(self) -> None:
        path = self._path or default_settings_path()
        self._path = path
        path.parent.mkdir(parents=True, exist_ok=True)
        write_json(path, self._data)


__all__ = ["SettingsManager", "default_settings_path"]
