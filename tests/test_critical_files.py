"""
Tests for critical project files that must exist.
"""
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent


class TestCriticalFiles:
    """Ensure critical project files exist."""

    def test_readme_exists(self):
        """README must exist."""
        assert (PROJECT_ROOT / "README.md").exists(), "README.md missing"

    def test_pyproject_exists(self):
        assert (PROJECT_ROOT / "pyproject.toml").exists(), "pyproject.toml missing"

    @pytest.mark.parametrize("package", ["core", "settings", "gui", "utils", "config"])
    def test_package_init_exists(self, package):
        init = PROJECT_ROOT / "notehome" / package / "__init__.py"
        assert init.exists(), f"notehome/{package}/__init__.py missing"

    def test_entry_point_exists(self):
        assert (PROJECT_ROOT / "notehome" / "main.py").exists()
        assert (PROJECT_ROOT / "notehome" / "__main__.py").exists()


class TestCoreStaysHeadless:
    """The list logic must not need a GUI toolkit beyond the logger."""

    @pytest.mark.parametrize("module", [
        "reference_store.py", "pinned.py", "recent.py", "reconciler.py", "search.py",
    ])
    def test_no_widget_imports(self, module):
        source = (PROJECT_ROOT / "notehome" / "core" / module).read_text(encoding="utf-8")
        assert "QtWidgets" not in source
        assert "notehome.gui" not in source
