"""Controllers extracted from MainWindow."""

from .note_controller import NoteController

__all__ = ["NoteController"]
