from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from .debug import get_logger


@dataclass(frozen=True)
class DirectoryEntry:
    """One immediate child of the directory being browsed."""

    name: str
    is_directory: bool
    extension: Optional[str] = None

    @classmethod
    def from_path(cls, directory: str, name: str) -> "DirectoryEntry":
        full = os.path.join(directory, name)
        is_dir = os.path.isdir(full)
        extension: Optional[str] = None
        if not is_dir:
            _stem, ext = os.path.splitext(name)
            ext = ext[1:].lower()
            extension = ext or None
        return cls(name=name, is_directory=is_dir, extension=extension)


def _sort_key(entry: DirectoryEntry) -> Tuple[bool, str]:
    return (not entry.is_directory, entry.name.lower())


def load(path: str, sort: bool = False) -> Tuple[DirectoryEntry, ...]:
    """List the immediate children of ``path``.

    Unreadable, vanished or non-directory paths yield an empty tuple. Order is
    whatever the OS enumerates unless ``sort`` asks for directories first and
    then case-insensitive names.
    """
    try:
        names = os.listdir(path)
    except OSError as e:
        get_logger("model").debug("listdir failed for %s: %s", path, e)
        return ()
    entries = [DirectoryEntry.from_path(path, name) for name in names if name]
    if sort:
        entries.sort(key=_sort_key)
    return tuple(entries)


@dataclass(frozen=True)
class DirectoryModel:
    """Current browsing location: an absolute path and its listing.

    The model is replaced as a whole on every directory change, so ``entries``
    always belongs to ``current_path``.
    """

    current_path: str
    entries: Tuple[DirectoryEntry, ...] = ()
    sort: bool = False

    @classmethod
    def open(cls, path: str, sort: bool = False) -> "DirectoryModel":
        abs_path = os.path.abspath(path)
        entries = load(abs_path, sort=sort)
        get_logger("model").debug("open: path=%s entries=%s", abs_path, len(entries))
        return cls(current_path=abs_path, entries=entries, sort=sort)

    def descend(self, index: int) -> Tuple[str, bool]:
        """Path of the directory at ``index``, and whether descending is legal.

        Files, negative and out-of-range indices leave the path unchanged. The
        target is not re-checked; if it vanished since listing, reloading it
        simply gives an empty directory.
        """
        if index < 0 or index >= len(self.entries):
            return self.current_path, False
        entry = self.entries[index]
        if not entry.is_directory:
            return self.current_path, False
        return os.path.join(self.current_path, entry.name), True

    def ascend(self) -> str:
        """Parent of the current path; a root is its own parent."""
        parent = os.path.dirname(self.current_path)
        if not parent:
            return self.current_path
        return parent

    def reload(self, path: Optional[str] = None) -> "DirectoryModel":
        return DirectoryModel.open(path or self.current_path, sort=self.sort)
