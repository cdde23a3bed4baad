"""
Note catalog - a folder ("vault") of markdown notes.

Refs are vault-relative POSIX paths such as "daily/2024-01-01.md". Rename and
delete go through the catalog so it can publish lifecycle events.
"""

from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import List, Optional

from .events import NoteEventSource, NoteRenamed, NoteDeleted
from notehome.config import NOTE_EXTENSION, INVALID_NAME_CHARS
from notehome.utils.logger import logger


class CatalogError(Exception):
    """Raised when a note file operation fails."""
    pass


@dataclass(frozen=True)
class NoteEntry:
    """One note as seen by the home view and search."""
    ref: str
    display_name: str
    mtime: float = 0.0


class NoteCatalog:
    """Read/write access to the notes under a root directory."""

    def __init__(self, root: Path, events: Optional[NoteEventSource] = None):
        self.root = Path(root).expanduser().resolve()
        self.events = events or NoteEventSource()

    def ensure_root(self) -> None:
        self.root.mkdir(parents=True, exist_ok=True)

    def list_all_notes(self) -> List[NoteEntry]:
        """All notes, ordered by ref. Hidden directories are skipped."""
        if not self.root.is_dir():
            return []
        entries = []
        for path in self.root.rglob(f"*{NOTE_EXTENSION}"):
            rel = path.relative_to(self.root)
            if any(part.startswith(".") for part in rel.parts):
                continue
            if not path.is_file():
                continue
            try:
                mtime = path.stat().st_mtime
            except OSError:
                continue
            entries.append(NoteEntry(ref=rel.as_posix(), display_name=path.stem, mtime=mtime))
        entries.sort(key=lambda e: e.ref)
        return entries

    def resolve(self, ref: str) -> Optional[Path]:
        """Absolute path for ref, or None if it is missing or outside the root."""
        if not ref:
            return None
        rel = PurePosixPath(ref)
        if rel.is_absolute() or ".." in rel.parts or rel.suffix != NOTE_EXTENSION:
            return None
        path = self.root.joinpath(*rel.parts)
        return path if path.is_file() else None

    def exists(self, ref: str) -> bool:
        return self.resolve(ref) is not None

    def display_name(self, ref: str) -> str:
        return PurePosixPath(ref).stem

    def read_text(self, ref: str) -> str:
        path = self._require(ref)
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogError(f"Failed to read {ref}: {e}")

    def write_text(self, ref: str, text: str) -> None:
        path = self._require(ref)
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise CatalogError(f"Failed to write {ref}: {e}")

    def create_note(self, name: str, folder: str = "") -> str:
        """
        Create an empty note and return its ref.

        Raises:
            CatalogError: If the name is invalid or the note already exists
        """
        ref = self._ref_for(name, folder)
        path = self.root.joinpath(*PurePosixPath(ref).parts)
        if path.exists():
            raise CatalogError(f"Note already exists: {ref}")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch()
        except OSError as e:
            raise CatalogError(f"Failed to create {ref}: {e}")
        logger.catalog(f"Created {ref}")
        return ref

    def rename_note(self, ref: str, new_name: str) -> str:
        """
        Rename a note within its folder and publish NoteRenamed.

        Returns:
            The new ref
        """
        path = self._require(ref)
        new_ref = self._ref_for(new_name, PurePosixPath(ref).parent.as_posix())
        if new_ref == ref:
            return ref
        new_path = self.root.joinpath(*PurePosixPath(new_ref).parts)
        if new_path.exists():
            raise CatalogError(f"Note already exists: {new_ref}")
        try:
            path.rename(new_path)
        except OSError as e:
            raise CatalogError(f"Failed to rename {ref}: {e}")
        logger.catalog(f"Renamed {ref} -> {new_ref}")
        self.events.publish(NoteRenamed(old_ref=ref, new_ref=new_ref))
        return new_ref

    def delete_note(self, ref: str) -> None:
        """Delete a note and publish NoteDeleted."""
        path = self._require(ref)
        try:
            path.unlink()
        except OSError as e:
            raise CatalogError(f"Failed to delete {ref}: {e}")
        logger.catalog(f"Deleted {ref}")
        self.events.publish(NoteDeleted(ref=ref))

    def _require(self, ref: str) -> Path:
        path = self.resolve(ref)
        if path is None:
            raise CatalogError(f"Note not found: {ref}")
        return path

    def _ref_for(self, name: str, folder: str = "") -> str:
        name = (name or "").strip()
        if name.endswith(NOTE_EXTENSION):
            name = name[:-len(NOTE_EXTENSION)]
        if not name or name.startswith(".") or any(c in name for c in INVALID_NAME_CHARS):
            raise CatalogError(f"Invalid note name: {name!r}")
        folder = "" if folder in ("", ".") else folder
        return str(PurePosixPath(folder) / f"{name}{NOTE_EXTENSION}") if folder else f"{name}{NOTE_EXTENSION}"
