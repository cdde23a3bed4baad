"""
Widget tests for the Home view, settings dialog and main window.

Run on the offscreen Qt platform.
"""

import pytest
from PyQt5.QtWidgets import QAbstractItemView

from notehome.config import NO_RESULTS_MESSAGE, CAPACITY_MAX
from notehome.core.manager import NoteListManager
from notehome.gui.home_view import HomeView, NoteListItem
from notehome.gui.settings_dialog import SettingsDialog, drop_before_ref
from notehome.gui.main_window import MainWindow, NoteEditor, BlankPage


def list_refs(widget):
    return [widget.item(i).note_ref for i in range(widget.count())
            if isinstance(widget.item(i), NoteListItem)]


@pytest.fixture
def manager(qapp, make_store, catalog):
    store = make_store(pinned_notes=["Alpha.md", "gone.md"],
                       last_opened_files=["beta.md", "gone.md", "Alpha.md"])
    manager = NoteListManager(store, catalog)
    manager.attach(catalog.events)
    yield manager
    manager.detach()


class TestHomeView:

    def test_renders_both_sections(self, manager, catalog):
        view = HomeView(manager, catalog)
        # Missing pinned notes are skipped but kept in the list
        assert list_refs(view.pinned_list) == ["Alpha.md"]
        assert manager.pinned_notes == ["Alpha.md", "gone.md"]
        # Missing recent notes are pruned
        assert list_refs(view.recent_list) == ["beta.md", "Alpha.md"]
        assert manager.recent_notes == ["beta.md", "Alpha.md"]

    def test_empty_state(self, qapp, make_store, catalog):
        manager = NoteListManager(make_store(), catalog)
        view = HomeView(manager, catalog)
        assert view.pinned_list.isHidden()
        assert not view.pinned_empty.isHidden()
        assert not view.recent_empty.isHidden()

    def test_rerenders_on_change(self, manager, catalog):
        view = HomeView(manager, catalog)
        manager.pin("beta.md")
        assert list_refs(view.pinned_list) == ["Alpha.md", "beta.md"]
        manager.record_open("projects/Gamma.md")
        assert list_refs(view.recent_list)[0] == "projects/Gamma.md"

    def test_search_results(self, manager, catalog):
        view = HomeView(manager, catalog)
        assert view.results_list.isHidden()
        view.perform_search("a")
        assert list_refs(view.results_list) == ["Alpha.md", "beta.md", "projects/Gamma.md"]
        assert not view.results_list.isHidden()

    def test_search_no_matches(self, manager, catalog):
        view = HomeView(manager, catalog)
        view.perform_search("zzz")
        assert view.results_list.count() == 1
        assert view.results_list.item(0).text() == NO_RESULTS_MESSAGE

    def test_typing_runs_leading_search_and_clearing_hides(self, manager, catalog):
        view = HomeView(manager, catalog)
        view.search_input.setText("gam")
        assert list_refs(view.results_list) == ["projects/Gamma.md"]
        view.search_input.setText("")
        assert view.results_list.isHidden()
        assert view.results_list.count() == 0

    def test_result_click_opens_and_clears(self, manager, catalog):
        view = HomeView(manager, catalog)
        opened = []
        view.note_open_requested.connect(opened.append)
        view.search_input.setText("beta")
        view._on_result_clicked(view.results_list.item(0))
        assert opened == ["beta.md"]
        assert view.search_input.text() == ""
        assert view.results_list.isHidden()

    def test_placeholder_follows_settings(self, manager, catalog):
        view = HomeView(manager, catalog)
        manager.set_search_placeholder("Find...")
        assert view.search_input.placeholderText() == "Find..."


class TestSettingsDialog:

    def test_loads_values(self, manager, catalog):
        dialog = SettingsDialog(manager, catalog)
        assert dialog.max_pinned_spin.value() == 10
        assert dialog.max_pinned_spin.maximum() == CAPACITY_MAX
        assert dialog.open_home_check.isChecked()
        assert dialog.pinned_list.count() == 2
        assert dialog.pinned_list.item(1).text().endswith("(missing)")

    def test_controls_write_through(self, manager, catalog):
        dialog = SettingsDialog(manager, catalog)
        dialog.max_recent_spin.setValue(1)
        assert manager.recent_notes == ["beta.md"]
        dialog.replace_tab_check.setChecked(False)
        assert manager.settings.replace_new_tab_page is False

    def test_remove_unpins_selected(self, manager, catalog):
        dialog = SettingsDialog(manager, catalog)
        dialog.pinned_list.setCurrentRow(0)
        dialog._on_remove_clicked()
        assert manager.pinned_notes == ["gone.md"]
        assert dialog.pinned_list.count() == 1

    def test_reorder_signal_reaches_manager(self, manager, catalog):
        dialog = SettingsDialog(manager, catalog)
        dialog.pinned_list.reorder_requested.emit("gone.md", "Alpha.md")
        assert manager.pinned_notes == ["gone.md", "Alpha.md"]
        assert list_refs(dialog.pinned_list) == ["gone.md", "Alpha.md"]


class TestMainWindow:

    def test_open_home_reuses_tab(self, manager, catalog):
        window = MainWindow(manager, catalog)
        window.open_home()
        window.open_home()
        homes = [window.tabs.widget(i) for i in range(window.tabs.count())
                 if isinstance(window.tabs.widget(i), HomeView)]
        assert len(homes) == 1

    def test_new_tab_shows_home_or_blank(self, manager, catalog):
        window = MainWindow(manager, catalog)
        window.new_tab()
        assert isinstance(window.tabs.currentWidget(), HomeView)
        manager.set_replace_new_tab_page(False)
        window.new_tab()
        assert isinstance(window.tabs.currentWidget(), BlankPage)

    def test_opening_note_records_recent(self, manager, catalog):
        window = MainWindow(manager, catalog)
        assert window.note_controller.open_note("projects/Gamma.md") is True
        editor = window.tabs.currentWidget()
        assert isinstance(editor, NoteEditor)
        assert editor.toPlainText() == "gamma"
        assert window.current_note_ref() == "projects/Gamma.md"
        assert manager.recent_notes[0] == "projects/Gamma.md"

    def test_pin_actions_follow_current_note(self, manager, catalog):
        window = MainWindow(manager, catalog)
        window.note_controller.open_note("beta.md")
        assert window.pin_action.isEnabled()
        assert not window.unpin_action.isEnabled()
        window._pin_current()
        assert manager.is_pinned("beta.md")
        assert window.unpin_action.isEnabled()

    def test_rename_retargets_tab(self, manager, catalog):
        window = MainWindow(manager, catalog)
        window.note_controller.open_note("Alpha.md")
        new_ref = catalog.rename_note("Alpha.md", "Alpha 2")
        window.retarget_note_tab("Alpha.md", new_ref, "Alpha 2")
        assert window.current_note_ref() == "Alpha 2.md"
        assert manager.pinned_notes[0] == "Alpha 2.md"

    def test_close_note_tab(self, manager, catalog):
        window = MainWindow(manager, catalog)
        window.note_controller.open_note("beta.md")
        count = window.tabs.count()
        window.close_note_tab("beta.md")
        assert window.tabs.count() == count - 1
        assert window.current_note_ref() is None


class TestDropTranslation:
    """Drag gestures in the pinned list map onto reorder(ref, before_ref)."""

    REFS = ["A", "B", "C"]

    @pytest.mark.parametrize("source,drop,position,expected", [
        # dragging down onto an item lands after it
        (0, 1, QAbstractItemView.OnItem, "C"),
        (0, 2, QAbstractItemView.OnItem, ""),
        # dragging up onto an item lands before it
        (2, 0, QAbstractItemView.OnItem, "A"),
        (2, 1, QAbstractItemView.OnItem, "B"),
        # indicator between rows
        (0, 2, QAbstractItemView.AboveItem, "C"),
        (0, 2, QAbstractItemView.BelowItem, ""),
        (2, 0, QAbstractItemView.BelowItem, "B"),
        # empty area below the last row
        (0, -1, QAbstractItemView.OnViewport, ""),
    ])
    def test_targets(self, source, drop, position, expected):
        assert drop_before_ref(self.REFS, source, drop, position) == expected

    @pytest.mark.parametrize("source,drop,position", [
        (0, 0, QAbstractItemView.OnItem),
        (0, 1, QAbstractItemView.AboveItem),
        (1, 0, QAbstractItemView.BelowItem),
        (2, -1, QAbstractItemView.OnViewport),
        (-1, 1, QAbstractItemView.OnItem),
    ])
    def test_drops_that_change_nothing(self, source, drop, position):
        assert drop_before_ref(self.REFS, source, drop, position) is None

    def test_downward_drop_reaches_manager(self, qapp, make_store, catalog):
        manager = NoteListManager(make_store(pinned_notes=["A", "B", "C"]), catalog)
        dialog = SettingsDialog(manager, catalog)
        before_ref = drop_before_ref(dialog.pinned_list.refs(), 0, 2, QAbstractItemView.OnItem)
        dialog.pinned_list.reorder_requested.emit("A", before_ref)
        assert manager.pinned_notes == ["B", "C", "A"]
        assert list_refs(dialog.pinned_list) == ["B", "C", "A"]

    def test_add_refused_when_full(self, qapp, make_store, catalog, monkeypatch):
        manager = NoteListManager(make_store(pinned_notes=["A"], max_pinned_notes=1), catalog)
        dialog = SettingsDialog(manager, catalog)
        shown = []
        monkeypatch.setattr("notehome.gui.settings_dialog.QMessageBox.information",
                            lambda *args: shown.append(args[2]))
        dialog._on_add_clicked()
        assert shown and "(1)" in shown[0]
