"""
Settings schema definition and validation.

The whole settings blob is written on every committed change, so this
dataclass is the single description of what gets persisted. Keys on disk use
the camelCase names below.
"""

from dataclasses import dataclass, field
from typing import List

from notehome.config import (
    DEFAULT_MAX_PINNED_NOTES,
    DEFAULT_MAX_RECENT_NOTES,
    DEFAULT_SEARCH_PLACEHOLDER,
    DEFAULT_OPEN_HOME_ON_STARTUP,
    DEFAULT_REPLACE_NEW_TAB_PAGE,
    CAPACITY_MIN,
    CAPACITY_MAX,
    clamp_capacity,
)

SETTINGS_VERSION = 1

_REF_LIST_KEYS = ("pinnedNotes", "lastOpenedFiles")
_CAPACITY_KEYS = ("maxPinnedNotes", "maxRecentNotes")
_BOOL_KEYS = ("openHomeOnStartup", "replaceNewTabPage")


def _coerce_refs(value) -> List[str]:
    """Keep non-empty string refs, first occurrence wins."""
    if not isinstance(value, (list, tuple)):
        return []
    refs = []
    for ref in value:
        if isinstance(ref, str) and ref and ref not in refs:
            refs.append(ref)
    return refs


@dataclass
class HomeSettings:
    pinned_notes: List[str] = field(default_factory=list)
    last_opened_files: List[str] = field(default_factory=list)
    max_pinned_notes: int = DEFAULT_MAX_PINNED_NOTES
    max_recent_notes: int = DEFAULT_MAX_RECENT_NOTES
    search_placeholder: str = DEFAULT_SEARCH_PLACEHOLDER
    open_home_on_startup: bool = DEFAULT_OPEN_HOME_ON_STARTUP
    replace_new_tab_page: bool = DEFAULT_REPLACE_NEW_TAB_PAGE
    version: int = SETTINGS_VERSION

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "pinnedNotes": list(self.pinned_notes),
            "lastOpenedFiles": list(self.last_opened_files),
            "maxPinnedNotes": self.max_pinned_notes,
            "maxRecentNotes": self.max_recent_notes,
            "searchPlaceholder": self.search_placeholder,
            "openHomeOnStartup": self.open_home_on_startup,
            "replaceNewTabPage": self.replace_new_tab_page,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "HomeSettings":
        """Merge stored values over defaults, coercing anything malformed."""
        if not isinstance(data, dict):
            data = {}
        placeholder = data.get("searchPlaceholder", DEFAULT_SEARCH_PLACEHOLDER)
        if not isinstance(placeholder, str):
            placeholder = DEFAULT_SEARCH_PLACEHOLDER
        open_home = data.get("openHomeOnStartup", DEFAULT_OPEN_HOME_ON_STARTUP)
        replace_tab = data.get("replaceNewTabPage", DEFAULT_REPLACE_NEW_TAB_PAGE)
        return cls(
            pinned_notes=_coerce_refs(data.get("pinnedNotes", [])),
            last_opened_files=_coerce_refs(data.get("lastOpenedFiles", [])),
            max_pinned_notes=clamp_capacity(
                data.get("maxPinnedNotes", DEFAULT_MAX_PINNED_NOTES),
                DEFAULT_MAX_PINNED_NOTES),
            max_recent_notes=clamp_capacity(
                data.get("maxRecentNotes", DEFAULT_MAX_RECENT_NOTES),
                DEFAULT_MAX_RECENT_NOTES),
            search_placeholder=placeholder,
            open_home_on_startup=open_home if isinstance(open_home, bool) else DEFAULT_OPEN_HOME_ON_STARTUP,
            replace_new_tab_page=replace_tab if isinstance(replace_tab, bool) else DEFAULT_REPLACE_NEW_TAB_PAGE,
            version=SETTINGS_VERSION,
        )


def validate_settings(data: dict) -> tuple:
    """
    Validate a raw settings blob.

    Missing keys are fine (defaults apply). Present keys must have the right
    shape.

    Returns:
        (is_valid, errors)
    """
    if not isinstance(data, dict):
        return False, ["settings must be a JSON object"]

    errors = []

    version = data.get("version", SETTINGS_VERSION)
    if not isinstance(version, int) or isinstance(version, bool):
        errors.append(f"version must be an int, got {type(version).__name__}")

    for key in _REF_LIST_KEYS:
        if key not in data:
            continue
        value = data[key]
        if not isinstance(value, list):
            errors.append(f"{key} must be a list, got {type(value).__name__}")
            continue
        for i, ref in enumerate(value):
            if not isinstance(ref, str):
                errors.append(f"{key}[{i}] must be a string")

    for key in _CAPACITY_KEYS:
        if key not in data:
            continue
        value = data[key]
        if not isinstance(value, int) or isinstance(value, bool):
            errors.append(f"{key} must be an int, got {type(value).__name__}")
        elif not (CAPACITY_MIN <= value <= CAPACITY_MAX):
            errors.append(f"{key} must be {CAPACITY_MIN}-{CAPACITY_MAX}, got {value}")

    for key in _BOOL_KEYS:
        if key in data and not isinstance(data[key], bool):
            errors.append(f"{key} must be a bool")

    if "searchPlaceholder" in data and not isinstance(data["searchPlaceholder"], str):
        errors.append("searchPlaceholder must be a string")

    return len(errors) == 0, errors
