from __future__ import annotations

import json
from pathlib import Path

import pytest

pytest.importorskip("PySide6", reason="PySide6 is required for settings tests", exc_type=ImportError)

from tsundoc.config import API_URL_ENV, DEFAULT_API_URL
from tsundoc.domain.models import ViewMode
from tsundoc.errors import SettingsLoadError, SettingsValidationError
from tsundoc.settings.manager import SettingsManager


def test_load_creates_defaults(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv(API_URL_ENV, raising=False)
    settings_path = tmp_path / "nested" / "settings.json"
    manager = SettingsManager(path=settings_path)
    manager.load()

    assert settings_path.exists()
    stored = json.loads(settings_path.read_text(encoding="utf-8"))
    assert stored["schema"] == "tsundoc/settings@1"
    assert manager.api_endpoint() == DEFAULT_API_URL
    assert manager.view_mode() is ViewMode.COVER
    assert manager.search_debounce_ms() == 300
    assert manager.request_timeout() == 15.0


def test_set_persists_and_notifies(tmp_path: Path, qtbot) -> None:
    settings_path = tmp_path / "settings.json"
    manager = SettingsManager(path=settings_path)
    manager.load()
    changes = []
    manager.settingsChanged.connect(lambda key, value: changes.append((key, value)))

    with qtbot.waitSignal(manager.settingsChanged, timeout=1000):
        manager.set("ui.view_mode", ViewMode.SHELF)

    assert changes == [("ui.view_mode", "shelf")]
    assert manager.view_mode() is ViewMode.SHELF
    assert manager.get("ui.search_debounce_ms") == 300
    stored = json.loads(settings_path.read_text(encoding="utf-8"))
    assert stored["ui"]["view_mode"] == "shelf"


def test_partial_file_is_merged_with_defaults(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.json"
    settings_path.write_text(json.dumps({"ui": {"search_debounce_ms": 50}}), encoding="utf-8")
    manager = SettingsManager(path=settings_path)
    manager.load()

    assert manager.search_debounce_ms() == 50
    assert manager.get("ui.view_mode") == "cover"
    assert manager.get("api.missing", "fallback") == "fallback"


def test_invalid_value_is_rejected(tmp_path: Path) -> None:
    manager = SettingsManager(path=tmp_path / "settings.json")
    manager.load()

    with pytest.raises(SettingsValidationError):
        manager.set("ui.view_mode", "grid")

    assert manager.view_mode() is ViewMode.COVER


def test_invalid_file_is_reported(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.json"
    settings_path.write_text(json.dumps({"api": {"timeout_sec": 0}}), encoding="utf-8")

    with pytest.raises(SettingsValidationError):
        SettingsManager(path=settings_path).load()


def test_unreadable_file_is_reported(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.json"
    settings_path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SettingsLoadError):
        SettingsManager(path=settings_path).load()


def test_environment_overrides_endpoint(tmp_path: Path, monkeypatch) -> None:
    manager = SettingsManager(path=tmp_path / "settings.json")
    manager.load()
    manager.set("api.endpoint", "http://from-file.test")
    monkeypatch.delenv(API_URL_ENV, raising=False)
    assert manager.api_endpoint() == "http://from-file.test"

    monkeypatch.setenv(API_URL_ENV, "http://from-env.test")
    assert manager.api_endpoint() == "http://from-env.test"
