"""
Reference Store
Ordered, capacity-bounded list of unique note refs.

Order is meaningful: for the pinned list it is display order, for the recent
list it is recency (index 0 = most recent). Refs are presumed valid until an
existence check says otherwise; see filter_valid().
"""

from typing import Callable, Iterable, Iterator, List, Tuple


class ReferenceStore:
    """
    Sequence of note refs with set semantics and a capacity.

    Invariants:
    - no duplicate refs
    - len(store) <= capacity (capacity 0 = no entries allowed)
    """

    def __init__(self, capacity: int, refs: Iterable[str] = ()):
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self._capacity = capacity
        self._refs: List[str] = []
        self.assign(refs)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def refs(self) -> List[str]:
        """Snapshot copy of the current order."""
        return list(self._refs)

    def is_full(self) -> bool:
        return len(self._refs) >= self._capacity

    def contains(self, ref: str) -> bool:
        return ref in self._refs

    def insert_front(self, ref: str) -> bool:
        """
        Move ref to index 0, inserting it if absent.

        Truncates from the tail to capacity. Returns True if the order changed.
        """
        if self._capacity == 0:
            return False
        if self._refs and self._refs[0] == ref:
            return False
        if ref in self._refs:
            self._refs.remove(ref)
        self._refs.insert(0, ref)
        del self._refs[self._capacity:]
        return True

    def append(self, ref: str) -> bool:
        """Add ref at the end. False (no change) if present or full."""
        if ref in self._refs or self.is_full():
            return False
        self._refs.append(ref)
        return True

    def remove(self, ref: str) -> bool:
        if ref not in self._refs:
            return False
        self._refs.remove(ref)
        return True

    def move_to(self, ref: str, target_ref: str) -> bool:
        """
        Relocate ref so it sits immediately before target_ref.

        No-op if either ref is absent or they are the same ref.
        """
        if ref == target_ref or ref not in self._refs or target_ref not in self._refs:
            return False
        before = list(self._refs)
        self._refs.remove(ref)
        self._refs.insert(self._refs.index(target_ref), ref)
        return self._refs != before

    def move_to_end(self, ref: str) -> bool:
        """Relocate ref to the last position. No-op if absent or already last."""
        if ref not in self._refs or self._refs[-1] == ref:
            return False
        self._refs.remove(ref)
        self._refs.append(ref)
        return True

    def replace(self, old_ref: str, new_ref: str) -> bool:
        """
        Substitute old_ref with new_ref in place.

        If new_ref is already listed elsewhere that entry is dropped, so the
        list never holds it twice.
        """
        if old_ref == new_ref or old_ref not in self._refs:
            return False
        index = self._refs.index(old_ref)
        self._refs[index] = new_ref
        for i, ref in enumerate(self._refs):
            if ref == new_ref and i != index:
                del self._refs[i]
                break
        return True

    def filter_valid(self, exists: Callable[[str], bool]) -> Tuple[List[str], bool]:
        """
        Partition refs by an existence check without mutating the store.

        Returns:
            (kept refs in order, whether anything was dropped)
        """
        kept = [ref for ref in self._refs if exists(ref)]
        return kept, len(kept) != len(self._refs)

    def set_capacity(self, capacity: int) -> bool:
        """Update capacity, truncating from the tail. Returns True if refs were dropped."""
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self._capacity = capacity
        if len(self._refs) > capacity:
            del self._refs[capacity:]
            return True
        return False

    def assign(self, refs: Iterable[str]) -> None:
        """Replace the whole sequence (deduplicated, truncated to capacity)."""
        self._refs = []
        for ref in refs:
            if len(self._refs) >= self._capacity:
                break
            if ref not in self._refs:
                self._refs.append(ref)

    def __len__(self) -> int:
        return len(self._refs)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._refs))

    def __contains__(self, ref: str) -> bool:
        return ref in self._refs

    def __repr__(self) -> str:
        return f"ReferenceStore(capacity={self._capacity}, refs={self._refs!r})"
