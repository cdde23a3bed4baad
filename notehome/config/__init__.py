"""
Central Configuration
All constants, limits and defaults in one place
"""

# === LIST CAPACITIES ===
# Both the pinned list and the recent list are bounded by a user setting.
# Settings UI and loaded blobs are clamped into this range.
CAPACITY_MIN = 0
CAPACITY_MAX = 30
DEFAULT_MAX_PINNED_NOTES = 10
DEFAULT_MAX_RECENT_NOTES = 10

# === HOME VIEW ===
DEFAULT_SEARCH_PLACEHOLDER = "Search notes..."
SEARCH_RESULT_LIMIT = 20
SEARCH_DEBOUNCE_MS = 250       # Leading edge fires, the rest of the burst coalesces
HOME_OPEN_DELAY_MS = 500       # Delay before Home opens at startup
DEFAULT_OPEN_HOME_ON_STARTUP = True
DEFAULT_REPLACE_NEW_TAB_PAGE = True

# === NOTES ===
NOTE_EXTENSION = ".md"
INVALID_NAME_CHARS = '<>:"/\\|?*'

# === TEXT ===
HOME_TITLE = "Home"
PINNED_TITLE = "PINNED"
RECENT_TITLE = "RECENT"
EMPTY_PINNED_MESSAGE = "No pinned notes. Pin a note from its menu or in Settings."
EMPTY_RECENT_MESSAGE = "No recently opened notes"
NO_RESULTS_MESSAGE = "No matching notes"


def clamp_capacity(value, default: int = DEFAULT_MAX_RECENT_NOTES) -> int:
    """Coerce a capacity setting to int within CAPACITY_MIN..CAPACITY_MAX."""
    if isinstance(value, bool):
        return default
    try:
        value = int(value)
    except (TypeError, ValueError):
        return default
    return max(CAPACITY_MIN, min(CAPACITY_MAX, value))
