"""Default configuration values for tsundoc."""

from __future__ import annotations

from typing import Final

# ---------------------------------------------------------------------------
# Data service
# ---------------------------------------------------------------------------

# ``TSUNDOC_API_URL`` overrides the endpoint stored in the settings file.  The
# GraphQL path is appended to whichever base URL wins.
API_URL_ENV: Final[str] = "TSUNDOC_API_URL"
TOKEN_ENV: Final[str] = "TSUNDOC_TOKEN"
DEFAULT_API_URL: Final[str] = "http://localhost:8080"
GRAPHQL_PATH: Final[str] = "/graphql"
REQUEST_TIMEOUT_SEC: Final[float] = 15.0

LIST_ITEMS_OPERATION: Final[str] = "MyBooks"
SAVE_ITEM_OPERATION: Final[str] = "SaveBook"

# Shown whenever the service gives us nothing better to say.
GENERIC_FETCH_ERROR: Final[str] = "Failed to load your library. Please try again."
GENERIC_SAVE_ERROR: Final[str] = "Failed to save. Please try again."

# ---------------------------------------------------------------------------
# Library view
# ---------------------------------------------------------------------------

SEARCH_DEBOUNCE_MS: Final[int] = 300

# ``(max_exclusive_width, columns)`` pairs checked in order; wider viewports
# fall through to ``MAX_COLUMNS``.
COLUMN_BREAKPOINTS: Final[tuple[tuple[int, int], ...]] = (
    (640, 2),
    (1024, 3),
    (1280, 4),
)
MAX_COLUMNS: Final[int] = 5

# The card grid never grows past three cards per row.
CARD_MAX_COLUMNS: Final[int] = 3

# Spine heights on the shelf view are keyed on the number of tags.
SPINE_TALL_TAG_COUNT: Final[int] = 3
SPINE_MEDIUM_TAG_COUNT: Final[int] = 1

DEFAULT_VIEW_MODE: Final[str] = "cover"
