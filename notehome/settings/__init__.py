"""
Settings module - load/save the persisted Home settings blob.
"""

from .settings_schema import (
    HomeSettings,
    validate_settings,
    SETTINGS_VERSION,
)

from .settings_store import (
    SettingsStore,
    SettingsError,
    PersistenceFailure,
)

__all__ = [
    "HomeSettings",
    "validate_settings",
    "SETTINGS_VERSION",
    "SettingsStore",
    "SettingsError",
    "PersistenceFailure",
]
