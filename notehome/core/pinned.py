"""
Pinned notes - user-curated, manually ordered, capacity-bounded.

New pins go to the end. Unpinning and re-pinning a note therefore moves it to
the end instead of restoring its old slot.
"""

from typing import Callable, Iterable, List, Optional

from .reference_store import ReferenceStore


class PinError(Exception):
    """Base class for rejected pin/unpin commands."""
    pass


class AtCapacity(PinError):
    """Pin attempted while the pinned list is full."""

    def __init__(self, capacity: int):
        super().__init__(f"Pinned notes limit reached ({capacity})")
        self.capacity = capacity


class AlreadyPinned(PinError):
    def __init__(self, ref: str):
        super().__init__(f"Already pinned: {ref}")
        self.ref = ref


class NotPinned(PinError):
    def __init__(self, ref: str):
        super().__init__(f"Not pinned: {ref}")
        self.ref = ref


class PinnedListManager:
    """
    Owns which notes are pinned and in what order.

    on_change is called once after every successful mutation, never after a
    rejected or no-op command.
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

    def is_pinned(self, ref: str) -> bool:
        return self.store.contains(ref)

    def pin(self, ref: str) -> None:
        """
        Append ref to the pinned list.

        Raises:
            AlreadyPinned: ref is already pinned
            AtCapacity: the list is full
        """
        if self.store.contains(ref):
            raise AlreadyPinned(ref)
        if not self.store.append(ref):
            raise AtCapacity(self.store.capacity)
        self._changed()

    def unpin(self, ref: str) -> None:
        """
        Raises:
            NotPinned: ref is not pinned
        """
        if not self.store.remove(ref):
            raise NotPinned(ref)
        self._changed()

    def reorder(self, ref: str, before_ref: Optional[str]) -> bool:
        """
        Move ref in front of before_ref, or to the end when before_ref is
        empty. Invalid refs are silently ignored.
        """
        moved = self.store.move_to(ref, before_ref) if before_ref else self.store.move_to_end(ref)
        if not moved:
            return False
        self._changed()
        return True

    def set_capacity(self, capacity: int) -> bool:
        return self.store.set_capacity(capacity)

    def _changed(self):
        if self.on_change is not None:
            self.on_change()
