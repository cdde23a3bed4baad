"""
Tests for the settings schema and the JSON settings store.
"""

import json

import pytest

from notehome.config import clamp_capacity, CAPACITY_MAX
from notehome.settings import (
    HomeSettings,
    SettingsStore,
    SettingsError,
    PersistenceFailure,
    validate_settings,
    SETTINGS_VERSION,
)


class TestHomeSettings:

    def test_defaults(self):
        settings = HomeSettings()
        assert settings.pinned_notes == []
        assert settings.last_opened_files == []
        assert settings.max_pinned_notes == 10
        assert settings.max_recent_notes == 10
        assert settings.open_home_on_startup is True
        assert settings.replace_new_tab_page is True
        assert settings.version == SETTINGS_VERSION

    def test_to_dict_uses_stored_key_names(self):
        d = HomeSettings(pinned_notes=["a.md"], max_recent_notes=4).to_dict()
        assert d["pinnedNotes"] == ["a.md"]
        assert d["lastOpenedFiles"] == []
        assert d["maxRecentNotes"] == 4
        assert d["version"] == SETTINGS_VERSION
        assert set(d) == {
            "version", "pinnedNotes", "lastOpenedFiles", "maxPinnedNotes",
            "maxRecentNotes", "searchPlaceholder", "openHomeOnStartup", "replaceNewTabPage",
        }

    def test_from_dict_merges_over_defaults(self):
        settings = HomeSettings.from_dict({"pinnedNotes": ["a.md"]})
        assert settings.pinned_notes == ["a.md"]
        assert settings.max_pinned_notes == 10
        assert settings.search_placeholder == HomeSettings().search_placeholder

    def test_from_dict_coerces_bad_values(self):
        settings = HomeSettings.from_dict({
            "pinnedNotes": ["a.md", 3, "", "a.md", "b.md"],
            "lastOpenedFiles": "not a list",
            "maxPinnedNotes": 99,
            "maxRecentNotes": "lots",
            "openHomeOnStartup": "yes",
            "searchPlaceholder": None,
        })
        assert settings.pinned_notes == ["a.md", "b.md"]
        assert settings.last_opened_files == []
        assert settings.max_pinned_notes == CAPACITY_MAX
        assert settings.max_recent_notes == 10
        assert settings.open_home_on_startup is True
        assert settings.search_placeholder == HomeSettings().search_placeholder

    def test_from_dict_non_dict(self):
        assert HomeSettings.from_dict(["nope"]) == HomeSettings()


class TestClampCapacity:

    @pytest.mark.parametrize("value,expected", [
        (5, 5), (-1, 0), (31, 30), ("7", 7), (None, 10), (True, 10),
    ])
    def test_clamp(self, value, expected):
        assert clamp_capacity(value) == expected


class TestValidateSettings:

    def test_valid(self):
        is_valid, errors = validate_settings(HomeSettings().to_dict())
        assert is_valid
        assert errors == []

    def test_empty_is_valid(self):
        assert validate_settings({})[0]

    def test_not_a_dict(self):
        is_valid, errors = validate_settings([])
        assert not is_valid

    def test_reports_each_problem(self):
        is_valid, errors = validate_settings({
            "pinnedNotes": [1],
            "maxRecentNotes": 40,
            "replaceNewTabPage": 1,
        })
        assert not is_valid
        assert len(errors) == 3


class TestSettingsStore:

    def test_missing_file_gives_defaults(self, tmp_path):
        store = SettingsStore(tmp_path / "settings.json")
        assert not store.exists()
        assert store.load() == HomeSettings()

    def test_save_then_load(self, tmp_path):
        store = SettingsStore(tmp_path / "state" / "settings.json")
        store.save(HomeSettings(pinned_notes=["a.md"], last_opened_files=["b.md", "a.md"]))
        loaded = store.load()
        assert loaded.pinned_notes == ["a.md"]
        assert loaded.last_opened_files == ["b.md", "a.md"]

    def test_save_writes_json_without_temp_leftovers(self, tmp_path):
        path = tmp_path / "settings.json"
        SettingsStore(path).save(HomeSettings())
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["version"] == SETTINGS_VERSION
        assert [p.name for p in tmp_path.iterdir()] == ["settings.json"]

    def test_corrupt_json_raises(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(SettingsError):
            SettingsStore(path).load()

    def test_invalid_values_load_with_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"maxPinnedNotes": "ten", "pinnedNotes": ["x.md"]}),
                        encoding="utf-8")
        settings = SettingsStore(path).load()
        assert settings.max_pinned_notes == 10
        assert settings.pinned_notes == ["x.md"]

    def test_unwritable_location_raises_persistence_failure(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("file, not a dir", encoding="utf-8")
        store = SettingsStore(blocker / "settings.json")
        with pytest.raises(PersistenceFailure):
            store.save(HomeSettings())

    def test_default_path_honours_state_dir_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("NH_STATE_DIR", str(tmp_path / "state"))
        store = SettingsStore()
        assert store.path == (tmp_path / "state" / "settings.json").resolve()
