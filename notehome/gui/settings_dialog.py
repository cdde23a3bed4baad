"""
Settings Dialog
Home options, list capacities and pinned-note management.

Drag-and-drop in the pinned list is translated into a single
reorder(ref, before_ref) command; the list is then redrawn from the manager.
"""

from PyQt5.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QFormLayout, QLabel, QLineEdit,
    QCheckBox, QSpinBox, QPushButton, QListWidget, QAbstractItemView,
    QMenu, QMessageBox
)
from PyQt5.QtCore import Qt, pyqtSignal, QTimer
from PyQt5.QtGui import QFont, QCursor

from .theme import COLORS, FONT_FAMILY, FONT_SIZES, button_style, list_style, line_edit_style
from .home_view import NoteListItem
from notehome.config import CAPACITY_MIN, CAPACITY_MAX


def drop_before_ref(refs, source_row, drop_row, position):
    """
    Translate a drop in the pinned list into reorder()'s before_ref.

    Returns the ref to insert in front of, "" for the end of the list, or
    None when the drop leaves the order as it is. A drop onto an item lands
    before it when dragging up and after it when dragging down.
    """
    if not 0 <= source_row < len(refs):
        return None
    if drop_row < 0 or position == QAbstractItemView.OnViewport:
        insert_at = len(refs)
    elif position == QAbstractItemView.BelowItem:
        insert_at = drop_row + 1
    elif position == QAbstractItemView.OnItem and drop_row > source_row:
        insert_at = drop_row + 1
    else:
        insert_at = drop_row
    if insert_at in (source_row, source_row + 1):
        return None
    return refs[insert_at] if insert_at < len(refs) else ""


class PinnedReorderList(QListWidget):
    """
    Pinned list that reports drags instead of moving rows itself.

    Signals:
        reorder_requested: (ref, before_ref); before_ref "" means the end
    """

    reorder_requested = pyqtSignal(str, str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setDragEnabled(True)
        self.setAcceptDrops(True)
        self.setDropIndicatorShown(True)
        self.setDragDropMode(QAbstractItemView.InternalMove)
        self.setDefaultDropAction(Qt.MoveAction)

    def refs(self):
        return [self.item(i).note_ref for i in range(self.count())]

    def dropEvent(self, event):
        source_row = self.currentRow()
        drop_row = self.indexAt(event.pos()).row()
        position = self.dropIndicatorPosition()
        # Leave the rows alone; the redraw comes from the manager's signal
        event.ignore()
        refs = self.refs()
        before_ref = drop_before_ref(refs, source_row, drop_row, position)
        if before_ref is None:
            return
        ref = refs[source_row]
        QTimer.singleShot(0, lambda: self.reorder_requested.emit(ref, before_ref))


class SettingsDialog(QDialog):
    """Settings window. Every control writes through the manager immediately."""

    note_open_requested = pyqtSignal(str)

    def __init__(self, manager, catalog, parent=None):
        super().__init__(parent)
        self.manager = manager
        self.catalog = catalog
        self.setWindowTitle("Home Settings")
        self.setAttribute(Qt.WA_DeleteOnClose)
        self.setMinimumWidth(420)

        self._setup_ui()
        self._load_values()
        self.render_pinned()

        self.manager.pinned_changed.connect(self._on_pinned_changed)

    def _on_pinned_changed(self, refs):
        self.render_pinned()

    def _setup_ui(self):
        self.setStyleSheet(f"background-color: {COLORS['background']}; color: {COLORS['text']};")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(10)

        header = QLabel("HOME SETTINGS")
        header.setFont(QFont(FONT_FAMILY, FONT_SIZES['section'], QFont.Bold))
        header.setStyleSheet(f"color: {COLORS['text_bright']};")
        layout.addWidget(header)

        form = QFormLayout()

        self.open_home_check = QCheckBox("Open Home when the app starts")
        self.open_home_check.toggled.connect(self.manager.set_open_home_on_startup)
        form.addRow(self.open_home_check)

        self.replace_tab_check = QCheckBox("Show Home in new tabs")
        self.replace_tab_check.toggled.connect(self.manager.set_replace_new_tab_page)
        form.addRow(self.replace_tab_check)

        self.placeholder_edit = QLineEdit()
        self.placeholder_edit.setStyleSheet(line_edit_style())
        self.placeholder_edit.editingFinished.connect(
            lambda: self.manager.set_search_placeholder(self.placeholder_edit.text()))
        form.addRow("Search placeholder", self.placeholder_edit)

        self.max_recent_spin = self._capacity_spin()
        self.max_recent_spin.valueChanged.connect(self.manager.set_max_recent)
        form.addRow("Max recent notes", self.max_recent_spin)

        self.max_pinned_spin = self._capacity_spin()
        self.max_pinned_spin.valueChanged.connect(self.manager.set_max_pinned)
        form.addRow("Max pinned notes", self.max_pinned_spin)

        layout.addLayout(form)

        pinned_header = QLabel("PINNED NOTES")
        pinned_header.setFont(QFont(FONT_FAMILY, FONT_SIZES['small'], QFont.Bold))
        pinned_header.setStyleSheet(f"color: {COLORS['accent_pinned']};")
        layout.addWidget(pinned_header)

        hint = QLabel("Drag notes to change their order")
        hint.setStyleSheet(f"color: {COLORS['text_dim']};")
        layout.addWidget(hint)

        self.pinned_list = PinnedReorderList()
        self.pinned_list.setStyleSheet(list_style('accent_pinned'))
        self.pinned_list.reorder_requested.connect(self.manager.reorder)
        self.pinned_list.itemSelectionChanged.connect(self._update_button_states)
        layout.addWidget(self.pinned_list, 1)

        btn_layout = QHBoxLayout()
        self.add_btn = QPushButton("Add pinned note")
        self.add_btn.setStyleSheet(button_style('enabled'))
        self.add_btn.clicked.connect(self._on_add_clicked)
        self.open_btn = QPushButton("Open")
        self.open_btn.clicked.connect(self._on_open_clicked)
        self.remove_btn = QPushButton("Remove")
        self.remove_btn.setStyleSheet(button_style('warning'))
        self.remove_btn.clicked.connect(self._on_remove_clicked)
        btn_layout.addWidget(self.add_btn)
        btn_layout.addStretch()
        btn_layout.addWidget(self.open_btn)
        btn_layout.addWidget(self.remove_btn)
        layout.addLayout(btn_layout)

        self._update_button_states()

    def _capacity_spin(self) -> QSpinBox:
        spin = QSpinBox()
        spin.setRange(CAPACITY_MIN, CAPACITY_MAX)
        spin.setKeyboardTracking(False)
        return spin

    def _load_values(self):
        """Populate controls without echoing writes back to the manager."""
        settings = self.manager.settings
        controls = [self.open_home_check, self.replace_tab_check, self.placeholder_edit,
                    self.max_recent_spin, self.max_pinned_spin]
        for control in controls:
            control.blockSignals(True)
        self.open_home_check.setChecked(settings.open_home_on_startup)
        self.replace_tab_check.setChecked(settings.replace_new_tab_page)
        self.placeholder_edit.setText(settings.search_placeholder)
        self.max_recent_spin.setValue(settings.max_recent_notes)
        self.max_pinned_spin.setValue(settings.max_pinned_notes)
        for control in controls:
            control.blockSignals(False)

    def render_pinned(self):
        """Show every pinned ref, including ones whose note is missing."""
        self.pinned_list.clear()
        for ref in self.manager.pinned_notes:
            name = self.catalog.display_name(ref)
            if not self.catalog.exists(ref):
                name = f"{name} (missing)"
            self.pinned_list.addItem(NoteListItem(ref, name))
        self._update_button_states()

    def _selected_ref(self):
        item = self.pinned_list.currentItem()
        if isinstance(item, NoteListItem) and item.isSelected():
            return item.note_ref
        return None

    def _update_button_states(self):
        ref = self._selected_ref()
        self.remove_btn.setEnabled(ref is not None)
        self.open_btn.setEnabled(ref is not None and self.catalog.exists(ref))
        self.open_btn.setStyleSheet(button_style('enabled' if self.open_btn.isEnabled() else 'disabled'))

    def _on_remove_clicked(self):
        ref = self._selected_ref()
        if ref is not None:
            self.manager.unpin(ref)

    def _on_open_clicked(self):
        ref = self._selected_ref()
        if ref is not None:
            self.note_open_requested.emit(ref)

    def _on_add_clicked(self):
        if self.manager.pinned_full():
            QMessageBox.information(
                self, "Pinned notes",
                f"Pinned notes limit reached ({self.manager.settings.max_pinned_notes}). "
                "Remove a pinned note first.")
            return

        available = [n for n in self.catalog.list_all_notes() if not self.manager.is_pinned(n.ref)]
        available.sort(key=lambda n: n.display_name.casefold())

        menu = QMenu(self)
        if not available:
            action = menu.addAction("No notes to pin")
            action.setEnabled(False)
        for entry in available:
            menu.addAction(entry.display_name, lambda ref=entry.ref: self.manager.pin(ref))
        menu.exec_(QCursor.pos())
