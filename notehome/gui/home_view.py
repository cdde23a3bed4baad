"""
Home View - dashboard with filename search, pinned notes and recent notes.

Reads list snapshots from NoteListManager and sends commands back; it never
edits the lists itself. Re-renders a section whenever the manager signals a
change to it.
"""

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit,
    QListWidget, QListWidgetItem, QMenu, QFrame
)
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QFont

from .theme import COLORS, FONT_FAMILY, FONT_SIZES, list_style, line_edit_style, panel_style
from .debounce import LeadingDebouncer
from notehome.config import (
    HOME_TITLE, PINNED_TITLE, RECENT_TITLE,
    EMPTY_PINNED_MESSAGE, EMPTY_RECENT_MESSAGE, NO_RESULTS_MESSAGE,
)
from notehome.core.search import search
from notehome.utils.logger import logger


class NoteListItem(QListWidgetItem):
    """List item carrying the note ref it opens."""

    def __init__(self, ref: str, name: str):
        super().__init__(name)
        self.note_ref = ref
        self.setToolTip(ref)


class HomeView(QWidget):
    """
    Home dashboard.

    Signals:
        note_open_requested: user picked a note (ref)
    """

    note_open_requested = pyqtSignal(str)

    def __init__(self, manager, catalog, parent=None):
        super().__init__(parent)
        self.manager = manager
        self.catalog = catalog
        self._debouncer = LeadingDebouncer(self.perform_search, parent=self)

        self._setup_ui()

        self.manager.pinned_changed.connect(self._on_pinned_changed)
        self.manager.recent_changed.connect(self._on_recent_changed)
        self.manager.settings_changed.connect(self._on_settings_changed)

        self.render_pinned()
        self.render_recent()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(12)

        title = QLabel(HOME_TITLE.upper())
        title.setFont(QFont(FONT_FAMILY, FONT_SIZES['title'], QFont.Bold))
        title.setStyleSheet(f"color: {COLORS['text_bright']};")
        layout.addWidget(title)

        # Search
        self.search_input = QLineEdit()
        self.search_input.setObjectName("home_search_input")
        self.search_input.setPlaceholderText(self.manager.settings.search_placeholder)
        self.search_input.setStyleSheet(line_edit_style())
        self.search_input.textChanged.connect(self._on_search_text_changed)
        layout.addWidget(self.search_input)

        self.results_list = QListWidget()
        self.results_list.setObjectName("home_search_results")
        self.results_list.setStyleSheet(list_style('accent_search'))
        self.results_list.setMaximumHeight(220)
        self.results_list.itemClicked.connect(self._on_result_clicked)
        self.results_list.setContextMenuPolicy(Qt.CustomContextMenu)
        self.results_list.customContextMenuRequested.connect(
            lambda pos: self._show_note_menu(self.results_list, pos))
        self.results_list.hide()
        layout.addWidget(self.results_list)

        # Two columns: pinned | recent
        columns = QHBoxLayout()
        columns.setSpacing(12)

        self.pinned_list, self.pinned_empty = self._build_column(
            columns, PINNED_TITLE, 'accent_pinned', EMPTY_PINNED_MESSAGE)
        self.recent_list, self.recent_empty = self._build_column(
            columns, RECENT_TITLE, 'accent_recent', EMPTY_RECENT_MESSAGE)

        layout.addLayout(columns, 1)

    def _build_column(self, columns, title, accent_key, empty_message):
        frame = QFrame()
        frame.setStyleSheet(panel_style())
        col = QVBoxLayout(frame)
        col.setContentsMargins(8, 8, 8, 8)
        col.setSpacing(6)

        header = QLabel(title)
        header.setFont(QFont(FONT_FAMILY, FONT_SIZES['section'], QFont.Bold))
        header.setStyleSheet(f"color: {COLORS[accent_key]};")
        col.addWidget(header)

        note_list = QListWidget()
        note_list.setStyleSheet(list_style(accent_key))
        note_list.itemClicked.connect(self._on_note_clicked)
        note_list.setContextMenuPolicy(Qt.CustomContextMenu)
        note_list.customContextMenuRequested.connect(
            lambda pos, lst=note_list: self._show_note_menu(lst, pos))
        col.addWidget(note_list, 1)

        empty = QLabel(empty_message)
        empty.setWordWrap(True)
        empty.setStyleSheet(f"color: {COLORS['text_dim']};")
        col.addWidget(empty)

        columns.addWidget(frame, 1)
        return note_list, empty

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render_pinned(self):
        """Pinned notes in user order; notes that no longer resolve are skipped."""
        self.pinned_list.clear()
        for ref in self.manager.pinned_notes:
            if self.catalog.resolve(ref) is None:
                continue
            self.pinned_list.addItem(NoteListItem(ref, self.catalog.display_name(ref)))
        self._set_empty_state(self.pinned_list, self.pinned_empty)

    def render_recent(self):
        """Recent notes, most recent first. Stale refs are pruned before drawing."""
        if self.manager.refresh_recent():
            # Pruning emitted recent_changed, which already re-rendered
            return
        self.recent_list.clear()
        for ref in self.manager.recent_notes:
            self.recent_list.addItem(NoteListItem(ref, self.catalog.display_name(ref)))
        self._set_empty_state(self.recent_list, self.recent_empty)

    def _on_pinned_changed(self, refs):
        self.render_pinned()

    def _on_recent_changed(self, refs):
        self.render_recent()

    def _set_empty_state(self, note_list, empty_label):
        has_items = note_list.count() > 0
        note_list.setVisible(has_items)
        empty_label.setVisible(not has_items)

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    def _on_search_text_changed(self, text: str):
        query = text.strip()
        if query:
            self._debouncer.call(query)
        else:
            self._debouncer.cancel()
            self.hide_search_results()

    def perform_search(self, query: str):
        """Fill the results list for query (called through the debouncer)."""
        self.results_list.clear()
        matches = search(self.catalog.list_all_notes(), query)
        if not matches:
            item = QListWidgetItem(NO_RESULTS_MESSAGE)
            item.setFlags(Qt.NoItemFlags)
            self.results_list.addItem(item)
        for entry in matches:
            self.results_list.addItem(NoteListItem(entry.ref, entry.display_name))
        self.results_list.show()
        logger.debug(f"Search '{query}' -> {len(matches)} matches", component="GUI")

    def hide_search_results(self):
        self.results_list.hide()
        self.results_list.clear()

    def _on_result_clicked(self, item: QListWidgetItem):
        if not isinstance(item, NoteListItem):
            return
        self.hide_search_results()
        self.search_input.blockSignals(True)
        self.search_input.clear()
        self.search_input.blockSignals(False)
        self._debouncer.cancel()
        self.note_open_requested.emit(item.note_ref)

    # -------------------------------------------------------------------------
    # Interaction
    # -------------------------------------------------------------------------

    def _on_note_clicked(self, item: QListWidgetItem):
        if isinstance(item, NoteListItem):
            self.note_open_requested.emit(item.note_ref)

    def _show_note_menu(self, note_list: QListWidget, pos):
        item = note_list.itemAt(pos)
        if not isinstance(item, NoteListItem):
            return
        ref = item.note_ref
        menu = QMenu(self)
        menu.addAction("Open", lambda: self.note_open_requested.emit(ref))
        if self.manager.is_pinned(ref):
            menu.addAction("Unpin", lambda: self.manager.unpin(ref))
        else:
            menu.addAction("Pin to Home", lambda: self.manager.pin(ref))
        menu.exec_(note_list.mapToGlobal(pos))

    def _on_settings_changed(self, settings):
        self.search_input.setPlaceholderText(settings.search_placeholder)
