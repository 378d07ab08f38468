"""Custom exception hierarchy for tsundoc."""

from __future__ import annotations


class TsundocError(Exception):
    """Base class for all custom errors raised by tsundoc."""


# --- Layers ---

class DomainError(TsundocError):
    """Base class for domain-level errors."""


class InfrastructureError(TsundocError):
    """Base class for infrastructure-level errors."""


# --- Domain errors ---

class ValidationError(DomainError):
    """Raised when local input is rejected before reaching the service."""


# --- Infrastructure errors ---

class AuthUnavailableError(InfrastructureError):
    """Raised when the token provider cannot produce a bearer token."""


class FetchError(InfrastructureError):
    """Base class for failures that become visible library state.

    ``user_message`` is the text shown to the user; ``str(error)`` keeps the
    technical detail for the log.
    """

    def __init__(self, message: str, user_message: str | None = None) -> None:
        super().__init__(message)
        self.user_message = user_message or message


class NetworkFailureError(FetchError):
    """Raised when the data service cannot be reached or answers non-2xx."""


class ServiceError(FetchError):
    """Raised when the data service returns a structured error payload."""


# --- Settings errors ---

class SettingsError(TsundocError):
    """Base class for settings related failures."""


class SettingsLoadError(SettingsError):
    """Raised when the settings file cannot be parsed or loaded."""


class SettingsValidationError(SettingsError):
    """Raised when settings data fails schema validation."""
