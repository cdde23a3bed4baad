"""
Consistency Reconciler
Keeps the pinned and recent lists in step with renames and deletes in the
note catalog.

Absent refs are the normal case (most renamed/deleted notes are in neither
list), so nothing here raises.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from .reference_store import ReferenceStore
from notehome.utils.logger import logger


@dataclass(frozen=True)
class ReconcileResult:
    """Which lists a reconciliation touched."""
    pinned_changed: bool = False
    recent_changed: bool = False

    @property
    def changed(self) -> bool:
        return self.pinned_changed or self.recent_changed

    @property
    def part(self) -> Optional[str]:
        """'pinned', 'recent', 'both' or None - the sections to re-render."""
        if self.pinned_changed and self.recent_changed:
            return "both"
        if self.pinned_changed:
            return "pinned"
        if self.recent_changed:
            return "recent"
        return None


class ConsistencyReconciler:
    """
    Applies rename/delete notifications to both stores.

    on_commit is called at most once per notification, with the combined
    result, so a rename that touches both lists costs a single settings write.
    """

    def __init__(self, pinned: ReferenceStore, recent: ReferenceStore,
                 on_commit: Optional[Callable[[ReconcileResult], None]] = None):
        self.pinned = pinned
        self.recent = recent
        self.on_commit = on_commit

    def on_renamed(self, old_ref: str, new_ref: str) -> ReconcileResult:
        result = ReconcileResult(
            pinned_changed=self.pinned.replace(old_ref, new_ref),
            recent_changed=self.recent.replace(old_ref, new_ref),
        )
        if result.changed:
            logger.core(f"Renamed {old_ref} -> {new_ref}", details=result.part)
        return self._commit(result)

    def on_deleted(self, ref: str) -> ReconcileResult:
        result = ReconcileResult(
            pinned_changed=self.pinned.remove(ref),
            recent_changed=self.recent.remove(ref),
        )
        if result.changed:
            logger.core(f"Deleted {ref}", details=result.part)
        return self._commit(result)

    def _commit(self, result: ReconcileResult) -> ReconcileResult:
        if result.changed and self.on_commit is not None:
            self.on_commit(result)
        return result
