"""Custom exception hierarchy for annolist."""

from __future__ import annotations


class AnnoListError(Exception):
    """Base class for all custom errors raised by annolist."""


# --- 3-layer hierarchy ---

class DomainError(AnnoListError):
    """Base class for domain-level errors."""


class InfrastructureError(AnnoListError):
    """Base class for infrastructure-level errors."""


class ApplicationError(AnnoListError):
    """Base class for application-level errors."""


# --- Domain errors ---

class UnknownOrderingError(DomainError):
    """Raised when a value is not one of the supported list orderings."""


class UnknownShortcutError(DomainError):
    """Raised when a keymap names an action the list does not handle."""


# --- Infrastructure errors ---

class PersistenceError(InfrastructureError):
    """Raised when the annotation session fails to store or fetch states."""


# --- Settings errors ---

class SettingsError(AnnoListError):
    """Base class for settings related failures."""


class SettingsLoadError(SettingsError):
    """Raised when the settings file cannot be parsed or loaded."""


class SettingsValidationError(SettingsError):
    """Raised when settings data fails schema validation."""
