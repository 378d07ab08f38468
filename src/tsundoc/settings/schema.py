"""Schema helpers for the application settings file."""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator

from tsundoc.config import DEFAULT_VIEW_MODE, REQUEST_TIMEOUT_SEC, SEARCH_DEBOUNCE_MS

SETTINGS_SCHEMA: dict[str, Any] = {
    "$id": "tsundoc/settings.schema.json",
    "type": "object",
    "required": ["schema", "api", "ui"],
    "properties": {
        "schema": {"const": "tsundoc/settings@1"},
        "api": {
            "type": "object",
            "properties": {
                "endpoint": {"type": ["string", "null"]},
                "timeout_sec": {"type": "number", "exclusiveMinimum": 0},
            },
            "additionalProperties": True,
        },
        "ui": {
            "type": "object",
            "properties": {
                "view_mode": {
                    "type": "string",
                    "enum": ["cover", "shelf", "card"],
                },
                "search_debounce_ms": {"type": "integer", "minimum": 0},
            },
            "additionalProperties": True,
        },
    },
    "additionalProperties": True,
}

DEFAULT_SETTINGS: dict[str, Any] = {
    "schema": "tsundoc/settings@1",
    "api": {
        "endpoint": None,
        "timeout_sec": REQUEST_TIMEOUT_SEC,
    },
    "ui": {
        "view_mode": DEFAULT_VIEW_MODE,
        "search_debounce_ms": SEARCH_DEBOUNCE_MS,
    },
}

_validator = Draft202012Validator(SETTINGS_SCHEMA)


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* with :data:`DEFAULT_SETTINGS` and validate the result."""

    merged = deepcopy(DEFAULT_SETTINGS)
    if data:
        for key, value in data.items():
            if key in ("api", "ui") and isinstance(value, dict):
                merged.setdefault(key, {}).update(value)
                continue
            merged[key] = value
    _validator.validate(merged)
    return merged


__all__ = ["DEFAULT_SETTINGS", "SETTINGS_SCHEMA", "merge_with_defaults"]
