"""
Settings store - reads the settings blob once and writes it atomically.

Every committed list change rewrites the whole blob (no deltas, last writer
wins).
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Optional

from .settings_schema import HomeSettings, validate_settings
from notehome.utils.app_paths import get_settings_path
from notehome.utils.logger import logger


class SettingsError(Exception):
    """Raised when the settings file cannot be read."""
    pass


class PersistenceFailure(SettingsError):
    """Raised when the settings file cannot be written."""
    pass


class SettingsStore:
    """
    JSON settings file in the app state dir.

    Usage:
        store = SettingsStore()
        settings = store.load()
        settings.pinned_notes.append("ideas.md")
        store.save(settings)
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else get_settings_path()

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> HomeSettings:
        """
        Load settings from disk.

        A missing file yields defaults. Values of the wrong type are replaced
        by defaults with a warning.

        Raises:
            SettingsError: If the file is unreadable or not valid JSON
        """
        if not self.path.exists():
            logger.info("No settings file, using defaults", component="SETTINGS",
                        details=str(self.path))
            return HomeSettings()

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise SettingsError(f"Invalid JSON in settings file: {e}")
        except OSError as e:
            raise SettingsError(f"Failed to read settings file: {e}")

        is_valid, errors = validate_settings(data)
        if not is_valid:
            logger.warning("Settings contain invalid values, defaults applied",
                           component="SETTINGS", details="; ".join(errors))

        return HomeSettings.from_dict(data)

    def save(self, settings: HomeSettings) -> None:
        """
        Write the full settings blob atomically.

        Temp file in the same directory, then os.replace.

        Raises:
            PersistenceFailure: If the write fails
        """
        json_str = json.dumps(settings.to_dict(), indent=2, ensure_ascii=False)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, temp_path = tempfile.mkstemp(
                suffix='.tmp',
                prefix='.settings_',
                dir=self.path.parent
            )
            try:
                with os.fdopen(fd, 'w', encoding='utf-8') as f:
                    f.write(json_str)
                os.replace(temp_path, self.path)
            except Exception:
                try:
                    os.unlink(temp_path)
                except OSError:
                    pass
                raise
        except OSError as e:
            raise PersistenceFailure(f"Failed to write settings: {e}")
