"""
Tests for the pinned list manager.
"""

import pytest

from notehome.core import (
    PinnedListManager,
    PinError,
    AtCapacity,
    AlreadyPinned,
    NotPinned,
)


class ChangeCounter:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


class TestPin:

    def test_capacity_scenario(self):
        """Full list refuses a pin until something is unpinned; new pins go last."""
        changes = ChangeCounter()
        pinned = PinnedListManager(3, ["A", "B", "C"], on_change=changes)

        with pytest.raises(AtCapacity) as exc:
            pinned.pin("D")
        assert exc.value.capacity == 3
        assert pinned.refs == ["A", "B", "C"]

        pinned.unpin("B")
        assert pinned.refs == ["A", "C"]

        pinned.pin("D")
        assert pinned.refs == ["A", "C", "D"]
        assert changes.calls == 2

    def test_already_pinned(self):
        changes = ChangeCounter()
        pinned = PinnedListManager(3, ["A"], on_change=changes)
        with pytest.raises(AlreadyPinned):
            pinned.pin("A")
        assert changes.calls == 0

    def test_already_pinned_checked_before_capacity(self):
        pinned = PinnedListManager(1, ["A"])
        with pytest.raises(AlreadyPinned):
            pinned.pin("A")

    def test_errors_share_base_class(self):
        pinned = PinnedListManager(0)
        with pytest.raises(PinError):
            pinned.pin("A")

    def test_repin_goes_to_end(self):
        pinned = PinnedListManager(5, ["A", "B", "C"])
        pinned.unpin("A")
        pinned.pin("A")
        assert pinned.refs == ["B", "C", "A"]

    def test_capacity_message(self):
        assert "(3)" in str(AtCapacity(3))


class TestUnpin:

    def test_unpin_absent_raises(self):
        changes = ChangeCounter()
        pinned = PinnedListManager(3, ["A"], on_change=changes)
        with pytest.raises(NotPinned):
            pinned.unpin("Z")
        assert changes.calls == 0
        assert pinned.is_pinned("A")


class TestReorder:

    def test_reorder_notifies_once(self):
        changes = ChangeCounter()
        pinned = PinnedListManager(5, ["A", "B", "C"], on_change=changes)
        assert pinned.reorder("C", "A") is True
        assert pinned.refs == ["C", "A", "B"]
        assert changes.calls == 1

    def test_invalid_reorder_is_silent(self):
        changes = ChangeCounter()
        pinned = PinnedListManager(5, ["A", "B"], on_change=changes)
        assert pinned.reorder("Z", "A") is False
        assert pinned.reorder("A", "A") is False
        assert pinned.refs == ["A", "B"]
        assert changes.calls == 0

    def test_empty_before_ref_moves_to_end(self):
        changes = ChangeCounter()
        pinned = PinnedListManager(5, ["A", "B", "C"], on_change=changes)
        assert pinned.reorder("A", "") is True
        assert pinned.refs == ["B", "C", "A"]
        assert pinned.reorder("A", None) is False
        assert changes.calls == 1
