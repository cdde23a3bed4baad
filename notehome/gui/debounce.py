"""
Leading-edge debouncer for keystroke-driven work.

The first call in a burst runs immediately. Calls arriving while the window
is open are coalesced: only the latest arguments run, once, when the window
closes. Each coalesced call restarts the window.
"""

from typing import Callable

from PyQt5.QtCore import QObject, QTimer

from notehome.config import SEARCH_DEBOUNCE_MS


class LeadingDebouncer(QObject):
    """QTimer-backed debouncer with leading and trailing edges."""

    def __init__(self, callback: Callable, interval_ms: int = SEARCH_DEBOUNCE_MS, parent=None):
        super().__init__(parent)
        self._callback = callback
        self._pending_args = None
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_timeout)

    @property
    def interval(self) -> int:
        return self._timer.interval()

    def is_active(self) -> bool:
        return self._timer.isActive()

    def has_pending(self) -> bool:
        return self._pending_args is not None

    def call(self, *args):
        if self._timer.isActive():
            self._pending_args = args
            self._timer.start()
            return
        self._callback(*args)
        self._timer.start()

    def cancel(self):
        """Drop any coalesced call and close the window."""
        self._timer.stop()
        self._pending_args = None

    def _on_timeout(self):
        if self._pending_args is None:
            return
        args = self._pending_args
        self._pending_args = None
        self._callback(*args)
