"""
Main Window
Tabbed note editor with a Home dashboard tab.

Only one Home tab exists at a time; opening Home again reveals it.
"""

from PyQt5.QtWidgets import QMainWindow, QTabWidget, QPlainTextEdit, QLabel
from PyQt5.QtCore import Qt, QTimer
from PyQt5.QtGui import QFont, QKeySequence

from .theme import COLORS, MONO_FONT, FONT_SIZES
from .home_view import HomeView
from .settings_dialog import SettingsDialog
from .controllers import NoteController
from notehome.config import HOME_TITLE, HOME_OPEN_DELAY_MS
from notehome.utils.logger import logger


class NoteEditor(QPlainTextEdit):
    """Plain-text editor for one note."""

    def __init__(self, ref: str, text: str, parent=None):
        super().__init__(parent)
        self.note_ref = ref
        self.setPlainText(text)
        self.setFont(QFont(MONO_FONT, FONT_SIZES['label']))
        self.setStyleSheet(f"""
            QPlainTextEdit {{
                background: {COLORS['background_dark']};
                color: {COLORS['text_bright']};
                border: none;
                padding: 8px;
            }}
        """)


class BlankPage(QLabel):
    """Placeholder for a new tab when Home does not replace it."""

    def __init__(self, parent=None):
        super().__init__("Open a note from the Home tab or the Notes menu.", parent)
        self.setAlignment(Qt.AlignCenter)
        self.setStyleSheet(f"color: {COLORS['text_dim']}; background: {COLORS['background']};")


class MainWindow(QMainWindow):
    """Top-level window: tabs, menus, status bar notices."""

    def __init__(self, manager, catalog, parent=None):
        super().__init__(parent)
        self.manager = manager
        self.catalog = catalog
        self.note_controller = NoteController(self, manager, catalog)
        self._home_view = None

        self.setWindowTitle("Note Home")
        self.resize(1000, 700)
        self.setStyleSheet(f"QMainWindow {{ background: {COLORS['background']}; }}")

        self.tabs = QTabWidget()
        self.tabs.setTabsClosable(True)
        self.tabs.setMovable(True)
        self.tabs.tabCloseRequested.connect(self.close_tab)
        self.tabs.currentChanged.connect(self._update_actions)
        self.setCentralWidget(self.tabs)

        self._setup_menu()

        self.manager.notice.connect(self._show_notice)
        self.manager.pinned_changed.connect(self._on_pinned_changed)
        logger.signal_emitter.log_message.connect(self._on_log_message)

        if self.manager.settings.open_home_on_startup:
            QTimer.singleShot(HOME_OPEN_DELAY_MS, self.open_home)
        self._update_actions()

    def _setup_menu(self):
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("File")
        new_action = file_menu.addAction("New Note...", self.note_controller.create_note)
        new_action.setShortcut(QKeySequence("Ctrl+N"))
        self.save_action = file_menu.addAction("Save", self._save_current)
        self.save_action.setShortcut(QKeySequence("Ctrl+S"))
        file_menu.addSeparator()
        quit_action = file_menu.addAction("Quit", self.close)
        quit_action.setShortcut(QKeySequence("Ctrl+Q"))

        notes_menu = menu_bar.addMenu("Notes")
        home_action = notes_menu.addAction("Open Home", self.open_home)
        home_action.setShortcut(QKeySequence("Ctrl+H"))
        tab_action = notes_menu.addAction("New Tab", self.new_tab)
        tab_action.setShortcut(QKeySequence("Ctrl+T"))
        notes_menu.addSeparator()
        self.pin_action = notes_menu.addAction("Pin Current Note", self._pin_current)
        self.unpin_action = notes_menu.addAction("Unpin Current Note", self._unpin_current)
        notes_menu.addSeparator()
        self.rename_action = notes_menu.addAction("Rename Note...", self._rename_current)
        self.delete_action = notes_menu.addAction("Delete Note...", self._delete_current)
        notes_menu.addSeparator()
        settings_action = notes_menu.addAction("Settings...", self.open_settings)
        settings_action.setShortcut(QKeySequence("Ctrl+,"))

    # -------------------------------------------------------------------------
    # Tabs
    # -------------------------------------------------------------------------

    def open_home(self):
        """Reveal the Home tab, creating it if needed."""
        if self._home_view is not None:
            self.tabs.setCurrentWidget(self._home_view)
            return
        self._home_view = HomeView(self.manager, self.catalog)
        self._home_view.note_open_requested.connect(self.note_controller.open_note)
        index = self.tabs.addTab(self._home_view, HOME_TITLE)
        self.tabs.setCurrentIndex(index)

    def new_tab(self):
        if self.manager.settings.replace_new_tab_page:
            self.open_home()
            return
        index = self.tabs.addTab(BlankPage(), "New Tab")
        self.tabs.setCurrentIndex(index)

    def show_note(self, ref: str, name: str, text: str):
        editor = self._find_editor(ref)
        if editor is None:
            editor = NoteEditor(ref, text)
            self.tabs.addTab(editor, name)
        self.tabs.setCurrentWidget(editor)

    def current_note_ref(self):
        widget = self.tabs.currentWidget()
        return widget.note_ref if isinstance(widget, NoteEditor) else None

    def retarget_note_tab(self, old_ref: str, new_ref: str, name: str):
        editor = self._find_editor(old_ref)
        if editor is None:
            return
        editor.note_ref = new_ref
        self.tabs.setTabText(self.tabs.indexOf(editor), name)
        self._update_actions()

    def close_note_tab(self, ref: str):
        editor = self._find_editor(ref)
        if editor is not None:
            self.close_tab(self.tabs.indexOf(editor))

    def close_tab(self, index: int):
        widget = self.tabs.widget(index)
        if widget is None:
            return
        if widget is self._home_view:
            self._home_view = None
        self.tabs.removeTab(index)
        widget.deleteLater()

    def _find_editor(self, ref: str):
        for i in range(self.tabs.count()):
            widget = self.tabs.widget(i)
            if isinstance(widget, NoteEditor) and widget.note_ref == ref:
                return widget
        return None

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def open_settings(self):
        dialog = SettingsDialog(self.manager, self.catalog, self)
        dialog.note_open_requested.connect(self.note_controller.open_note)
        dialog.show()

    def _save_current(self):
        widget = self.tabs.currentWidget()
        if isinstance(widget, NoteEditor):
            self.note_controller.save_note(widget.note_ref, widget.toPlainText())

    def _pin_current(self):
        ref = self.current_note_ref()
        if ref:
            self.note_controller.pin_note(ref)

    def _unpin_current(self):
        ref = self.current_note_ref()
        if ref:
            self.note_controller.unpin_note(ref)

    def _rename_current(self):
        ref = self.current_note_ref()
        if ref:
            self.note_controller.rename_note(ref)

    def _delete_current(self):
        ref = self.current_note_ref()
        if ref:
            self.note_controller.delete_note(ref)

    def _update_actions(self, *_args):
        ref = self.current_note_ref()
        pinned = ref is not None and self.manager.is_pinned(ref)
        self.pin_action.setEnabled(ref is not None and not pinned)
        self.unpin_action.setEnabled(pinned)
        self.rename_action.setEnabled(ref is not None)
        self.delete_action.setEnabled(ref is not None)
        self.save_action.setEnabled(ref is not None)

    def _on_pinned_changed(self, refs):
        self._update_actions()

    # -------------------------------------------------------------------------
    # Status bar
    # -------------------------------------------------------------------------

    def _show_notice(self, message: str):
        self.statusBar().showMessage(message, 4000)

    def _on_log_message(self, message: str, level: int, component: str):
        # Only WARNING and up reach this signal
        self.statusBar().showMessage(f"[{component}] {message}", 6000)

    def closeEvent(self, event):
        self.manager.detach()
        logger.info("Note Home closing", component="APP")
        super().closeEvent(event)
