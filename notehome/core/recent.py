"""
Recent notes - most-recently-opened first, capacity-bounded.
"""

from typing import Callable, Iterable, List, Optional, Sequence

from .reference_store import ReferenceStore


def most_recently_modified(notes: Sequence, limit: int) -> List[str]:
    """
    Refs of the `limit` newest notes by mtime, newest first.

    Used to seed an empty recent list on first run.
    """
    if limit <= 0:
        return []
    ordered = sorted(notes, key=lambda n: n.mtime, reverse=True)
    return [n.ref for n in ordered[:limit]]


class RecentListManager:
    """
    Keeps the recent list in recency order.

    on_change fires after record_open() changes the list. reconcile and seed
    leave persistence to the caller.
    """

    def __init__(self, capacity: int, refs: Iterable[str] = (),
                 on_change: Optional[Callable[[], None]] = None):
        self.store = ReferenceStore(capacity, refs)
        self.on_change = on_change

    @property
    def refs(self) -> List[str]:
        return self.store.refs

    @property
    def capacity(self) -> int:
        return self.store.capacity

    def record_open(self, ref: str) -> bool:
        """Move ref to the front. Repeat opens of the front note change nothing."""
        changed = self.store.insert_front(ref)
        if changed and self.on_change is not None:
            self.on_change()
        return changed

    def reconcile_against_catalog(self, exists: Callable[[str], bool]) -> bool:
        """
        Drop refs that no longer exist.

        Returns True if the list was rewritten (caller persists and
        re-renders), False when nothing was stale.
        """
        kept, removed_any = self.store.filter_valid(exists)
        if not removed_any:
            return False
        self.store.assign(kept)
        return True

    def seed(self, refs: Iterable[str]) -> bool:
        """Fill an empty list. Returns True if anything was added."""
        if len(self.store):
            return False
        self.store.assign(refs)
        return len(self.store) > 0

    def set_capacity(self, capacity: int) -> bool:
        return self.store.set_capacity(capacity)
