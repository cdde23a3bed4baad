"""
Core module - pinned/recent note lists and their consistency rules.
"""

from .reference_store import ReferenceStore
from .pinned import (
    PinnedListManager,
    PinError,
    AtCapacity,
    AlreadyPinned,
    NotPinned,
)
from .recent import RecentListManager, most_recently_modified
from .reconciler import ConsistencyReconciler, ReconcileResult
from .search import search
from .events import NoteEventSource, NoteOpened, NoteRenamed, NoteDeleted
from .catalog import NoteCatalog, NoteEntry, CatalogError

__all__ = [
    "ReferenceStore",
    "PinnedListManager",
    "PinError",
    "AtCapacity",
    "AlreadyPinned",
    "NotPinned",
    "RecentListManager",
    "most_recently_modified",
    "ConsistencyReconciler",
    "ReconcileResult",
    "search",
    "NoteEventSource",
    "NoteOpened",
    "NoteRenamed",
    "NoteDeleted",
    "NoteCatalog",
    "NoteEntry",
    "CatalogError",
]
