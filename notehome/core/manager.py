"""
Note List Manager
Owns the pinned and recent lists, their persistence and change signals.

The GUI only reads snapshots and sends commands back. Every committed change
writes the whole settings blob once. A failed write is logged and the
in-memory lists stay authoritative; the next change rewrites everything.
"""

from typing import Callable, List, Optional

from PyQt5.QtCore import QObject, pyqtSignal

from .pinned import PinnedListManager, AtCapacity, AlreadyPinned, NotPinned
from .recent import RecentListManager, most_recently_modified
from .reconciler import ConsistencyReconciler, ReconcileResult
from .events import NoteEventSource, NoteOpened, NoteRenamed, NoteDeleted
from notehome.config import clamp_capacity
from notehome.settings import HomeSettings, SettingsError, PersistenceFailure
from notehome.utils.logger import logger


class NoteListManager(QObject):
    """
    Facade over PinnedListManager, RecentListManager and the reconciler.

    Signals carry list snapshots so receivers can render directly.
    """

    pinned_changed = pyqtSignal(list)      # pinned refs, display order
    recent_changed = pyqtSignal(list)      # recent refs, most recent first
    settings_changed = pyqtSignal(object)  # HomeSettings snapshot
    notice = pyqtSignal(str)               # informational message for the user

    def __init__(self, settings_store, catalog=None, parent=None):
        super().__init__(parent)
        self.settings_store = settings_store
        self.catalog = catalog

        settings = self._load_settings()
        self._search_placeholder = settings.search_placeholder
        self._open_home_on_startup = settings.open_home_on_startup
        self._replace_new_tab_page = settings.replace_new_tab_page

        self.pinned = PinnedListManager(
            settings.max_pinned_notes, settings.pinned_notes,
            on_change=self._on_pinned_mutated)
        self.recent = RecentListManager(
            settings.max_recent_notes, settings.last_opened_files,
            on_change=self._on_recent_mutated)
        self.reconciler = ConsistencyReconciler(
            self.pinned.store, self.recent.store, on_commit=self._on_reconciled)

        self._unsubscribers: List[Callable[[], None]] = []
        self._persist_failed = False

    # -------------------------------------------------------------------------
    # Snapshots
    # -------------------------------------------------------------------------

    @property
    def pinned_notes(self) -> List[str]:
        return self.pinned.refs

    @property
    def recent_notes(self) -> List[str]:
        return self.recent.refs

    @property
    def settings(self) -> HomeSettings:
        return HomeSettings(
            pinned_notes=self.pinned.refs,
            last_opened_files=self.recent.refs,
            max_pinned_notes=self.pinned.capacity,
            max_recent_notes=self.recent.capacity,
            search_placeholder=self._search_placeholder,
            open_home_on_startup=self._open_home_on_startup,
            replace_new_tab_page=self._replace_new_tab_page,
        )

    def is_pinned(self, ref: str) -> bool:
        return self.pinned.is_pinned(ref)

    def pinned_full(self) -> bool:
        return self.pinned.store.is_full()

    # -------------------------------------------------------------------------
    # Event wiring
    # -------------------------------------------------------------------------

    def attach(self, events: NoteEventSource) -> None:
        """Subscribe to open/rename/delete notifications."""
        self.detach()
        self._unsubscribers = [
            events.subscribe(NoteOpened, lambda e: self.record_open(e.ref)),
            events.subscribe(NoteRenamed, lambda e: self.handle_renamed(e.old_ref, e.new_ref)),
            events.subscribe(NoteDeleted, lambda e: self.handle_deleted(e.ref)),
        ]

    def detach(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def pin(self, ref: str) -> bool:
        try:
            self.pinned.pin(ref)
        except AtCapacity as e:
            logger.info(f"Pin refused, list full ({e.capacity})", component="CORE", details=ref)
            self.notice.emit(f"Pinned notes limit reached ({e.capacity}). Unpin a note first.")
            return False
        except AlreadyPinned:
            logger.core("Already pinned", details=ref)
            return False
        self.notice.emit("Note pinned to Home")
        return True

    def unpin(self, ref: str) -> bool:
        try:
            self.pinned.unpin(ref)
        except NotPinned:
            logger.core("Not pinned", details=ref)
            return False
        self.notice.emit("Note unpinned")
        return True

    def reorder(self, ref: str, before_ref: Optional[str] = None) -> bool:
        """Move ref before before_ref; an empty before_ref moves it to the end."""
        return self.pinned.reorder(ref, before_ref)

    def record_open(self, ref: str) -> bool:
        return self.recent.record_open(ref)

    def handle_renamed(self, old_ref: str, new_ref: str) -> ReconcileResult:
        return self.reconciler.on_renamed(old_ref, new_ref)

    def handle_deleted(self, ref: str) -> ReconcileResult:
        return self.reconciler.on_deleted(ref)

    def refresh_recent(self, exists: Optional[Callable[[str], bool]] = None) -> bool:
        """Drop recent refs the catalog no longer has. Persists only if any were dropped."""
        if exists is None:
            if self.catalog is None:
                return False
            exists = self.catalog.exists
        if not self.recent.reconcile_against_catalog(exists):
            return False
        logger.core("Pruned missing notes from recent list")
        self._persist()
        self.recent_changed.emit(self.recent.refs)
        return True

    def seed_recent_if_empty(self) -> bool:
        """First run: fill the recent list with the newest notes in the catalog."""
        if self.catalog is None or len(self.recent.store) or self.recent.capacity == 0:
            return False
        refs = most_recently_modified(self.catalog.list_all_notes(), self.recent.capacity)
        if not self.recent.seed(refs):
            return False
        logger.info(f"Seeded recent list with {len(self.recent.store)} notes", component="CORE")
        self._persist()
        self.recent_changed.emit(self.recent.refs)
        return True

    # -------------------------------------------------------------------------
    # Settings
    # -------------------------------------------------------------------------

    def set_max_pinned(self, value: int) -> bool:
        capacity = clamp_capacity(value, self.pinned.capacity)
        if capacity == self.pinned.capacity:
            return False
        self.pinned.set_capacity(capacity)
        self._settings_committed()
        self.pinned_changed.emit(self.pinned.refs)
        return True

    def set_max_recent(self, value: int) -> bool:
        capacity = clamp_capacity(value, self.recent.capacity)
        if capacity == self.recent.capacity:
            return False
        self.recent.set_capacity(capacity)
        self._settings_committed()
        self.recent_changed.emit(self.recent.refs)
        return True

    def set_search_placeholder(self, text: str) -> None:
        if text == self._search_placeholder:
            return
        self._search_placeholder = text
        self._settings_committed()

    def set_open_home_on_startup(self, enabled: bool) -> None:
        if bool(enabled) == self._open_home_on_startup:
            return
        self._open_home_on_startup = bool(enabled)
        self._settings_committed()

    def set_replace_new_tab_page(self, enabled: bool) -> None:
        if bool(enabled) == self._replace_new_tab_page:
            return
        self._replace_new_tab_page = bool(enabled)
        self._settings_committed()

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _load_settings(self) -> HomeSettings:
        try:
            return self.settings_store.load()
        except SettingsError as e:
            logger.error("Could not read settings, using defaults", component="SETTINGS",
                         details=str(e))
            return HomeSettings()

    def _persist(self) -> bool:
        try:
            self.settings_store.save(self.settings)
        except PersistenceFailure as e:
            self._persist_failed = True
            logger.error("Settings write failed, keeping in-memory state",
                         component="SETTINGS", details=str(e))
            return False
        if self._persist_failed:
            logger.info("Settings write recovered", component="SETTINGS")
            self._persist_failed = False
        return True

    def _settings_committed(self):
        self._persist()
        self.settings_changed.emit(self.settings)

    def _on_pinned_mutated(self):
        self._persist()
        self.pinned_changed.emit(self.pinned.refs)

    def _on_recent_mutated(self):
        self._persist()
        self.recent_changed.emit(self.recent.refs)

    def _on_reconciled(self, result: ReconcileResult):
        self._persist()
        if result.pinned_changed:
            self.pinned_changed.emit(self.pinned.refs)
        if result.recent_changed:
            self.recent_changed.emit(self.recent.refs)
