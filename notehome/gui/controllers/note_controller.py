"""
NoteController - Handles note open/create/rename/delete and pin commands.

Kept out of MainWindow so the window only deals with tabs and menus.
File operations go through the catalog, which publishes the lifecycle events
the list manager reacts to.
"""
from __future__ import annotations

from PyQt5.QtWidgets import QInputDialog, QMessageBox

from notehome.core.catalog import CatalogError
from notehome.core.events import NoteOpened
from notehome.utils.logger import logger


class NoteController:
    """Note commands issued from menus, the Home view and the settings dialog."""

    def __init__(self, main_window, manager, catalog):
        self.main = main_window
        self.manager = manager
        self.catalog = catalog

    def open_note(self, ref: str) -> bool:
        """Open ref in a tab and publish NoteOpened."""
        try:
            text = self.catalog.read_text(ref)
        except CatalogError as e:
            logger.warning("Could not open note", component="GUI", details=str(e))
            QMessageBox.warning(self.main, "Open Note", f"Could not open note:\n{e}")
            self.manager.refresh_recent()
            return False
        self.main.show_note(ref, self.catalog.display_name(ref), text)
        self.catalog.events.publish(NoteOpened(ref=ref))
        return True

    def save_note(self, ref: str, text: str) -> bool:
        try:
            self.catalog.write_text(ref, text)
        except CatalogError as e:
            QMessageBox.critical(self.main, "Save Note", f"Failed to save note:\n{e}")
            return False
        self.main.statusBar().showMessage("Saved", 2000)
        return True

    def create_note(self):
        name, ok = QInputDialog.getText(self.main, "New Note", "Note name:")
        if not ok or not name.strip():
            return
        try:
            ref = self.catalog.create_note(name)
        except CatalogError as e:
            QMessageBox.warning(self.main, "New Note", str(e))
            return
        self.open_note(ref)

    def rename_note(self, ref: str):
        current = self.catalog.display_name(ref)
        name, ok = QInputDialog.getText(self.main, "Rename Note", "New name:", text=current)
        if not ok or not name.strip() or name.strip() == current:
            return
        try:
            new_ref = self.catalog.rename_note(ref, name)
        except CatalogError as e:
            QMessageBox.warning(self.main, "Rename Note", str(e))
            return
        self.main.retarget_note_tab(ref, new_ref, self.catalog.display_name(new_ref))

    def delete_note(self, ref: str):
        reply = QMessageBox.question(
            self.main, "Delete Note",
            f"Delete '{self.catalog.display_name(ref)}'? This cannot be undone.",
            QMessageBox.Yes | QMessageBox.No, QMessageBox.No)
        if reply != QMessageBox.Yes:
            return
        try:
            self.catalog.delete_note(ref)
        except CatalogError as e:
            QMessageBox.warning(self.main, "Delete Note", str(e))
            return
        self.main.close_note_tab(ref)

    def pin_note(self, ref: str) -> bool:
        return self.manager.pin(ref)

    def unpin_note(self, ref: str) -> bool:
        return self.manager.unpin(ref)
