"""Note Home - pinned and recent notes dashboard."""

__version__ = "0.1.0"
