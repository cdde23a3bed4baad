"""Pytest configuration - consistent CWD, offscreen Qt and shared fixtures."""
from __future__ import annotations

import os
from pathlib import Path

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from notehome.settings import HomeSettings, PersistenceFailure

ROOT = Path(__file__).resolve().parents[1]


def pytest_sessionstart(session):
    os.chdir(ROOT)


class MemorySettingsStore:
    """Settings store double that keeps the blob in memory and counts writes."""

    def __init__(self, settings: HomeSettings | None = None):
        self.settings = settings or HomeSettings()
        self.saved = []
        self.fail_writes = False

    def load(self) -> HomeSettings:
        return HomeSettings.from_dict(self.settings.to_dict())

    def save(self, settings: HomeSettings) -> None:
        if self.fail_writes:
            raise PersistenceFailure("disk full")
        self.saved.append(settings.to_dict())

    @property
    def write_count(self) -> int:
        return len(self.saved)

    @property
    def last_saved(self) -> dict:
        return self.saved[-1]


# Fixtures used by multiple test files

@pytest.fixture
def project_root():
    """Return path to project root."""
    return ROOT


@pytest.fixture(scope="session")
def qapp():
    """Shared QApplication on the offscreen platform."""
    from PyQt5.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def memory_store():
    return MemorySettingsStore()


@pytest.fixture
def make_store():
    """Build a MemorySettingsStore preloaded with settings kwargs."""
    def _make(**kwargs):
        return MemorySettingsStore(HomeSettings(**kwargs))
    return _make


@pytest.fixture
def vault(tmp_path):
    """Notes folder with a few markdown files and one hidden folder."""
    root = tmp_path / "vault"
    (root / "projects").mkdir(parents=True)
    (root / ".trash").mkdir()
    (root / "Alpha.md").write_text("alpha", encoding="utf-8")
    (root / "beta.md").write_text("beta", encoding="utf-8")
    (root / "projects" / "Gamma.md").write_text("gamma", encoding="utf-8")
    (root / ".trash" / "old.md").write_text("old", encoding="utf-8")
    (root / "readme.txt").write_text("not a note", encoding="utf-8")
    return root


@pytest.fixture
def catalog(vault):
    from notehome.core.catalog import NoteCatalog
    return NoteCatalog(vault)
