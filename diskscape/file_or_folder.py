"""In-memory tree of scanned files and folders with aggregated sizes."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Sequence, Union


@dataclass
class File:
    """A regular file (or anything that is not a directory)."""

    name: str
    size: int


@dataclass
class Folder:
    """A directory holding its children keyed by name."""

    name: str
    contents: dict[str, "FileOrFolder"] = field(default_factory=dict)
    size: int = 0
    num_descendants: int = 0

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> "Folder":
        """Create an empty folder named after the last component of ``path``."""
        parts = PurePath(path).parts
        if not parts:
            raise ValueError(f"could not get base name of path {path!r}")
        return cls(parts[-1])

    def add_entry(
        self,
        entry_metadata: os.stat_result,
        relative_path: str | os.PathLike[str],
        show_apparent_size: bool,
    ) -> None:
        """Add a scanned entry described by its stat result.

        With ``show_apparent_size`` the file length is used; otherwise the
        space it occupies on disk, when the platform reports it.
        """
        if stat.S_ISDIR(entry_metadata.st_mode):
            self.add_folder(relative_path)
            return
        if show_apparent_size:
            size = entry_metadata.st_size
        else:
            blocks = getattr(entry_metadata, "st_blocks", None)
            size = blocks * 512 if blocks is not None else entry_metadata.st_size
        self.add_file(relative_path, size)

    def add_folder(self, path: str | os.PathLike[str]) -> None:
        """Add a folder at ``path`` relative to this folder."""
        parts = PurePath(path).parts
        if not parts:
            return
        name, *rest = parts
        if rest:
            child = self._child_folder(name)
            self.num_descendants += 1
            child.add_folder(PurePath(*rest))
        else:
            self.num_descendants += 1
            self.contents[name] = Folder(name)

    def add_file(self, path: str | os.PathLike[str], size: int) -> None:
        """Add a file of ``size`` bytes at ``path`` relative to this folder."""
        parts = PurePath(path).parts
        if not parts:
            return
        name, *rest = parts
        if rest:
            child = self._child_folder(name)
            self.size += size
            self.num_descendants += 1
            child.add_file(PurePath(*rest), size)
        else:
            self.size += size
            self.num_descendants += 1
            self.contents[name] = File(name, size)

    def path(self, folder_names: Sequence[str]) -> "FileOrFolder | None":
        """Look up an item by its chain of names, or return None if absent.

        If a file is met before the chain ends, that file is returned.
        """
        names = list(folder_names)
        if not names:
            raise ValueError("path must have at least one component")
        first, *rest = names
        item = self.contents.get(first)
        if item is None:
            return None
        if rest and isinstance(item, Folder):
            return item.path(rest)
        return item

    def delete_path(self, folder_names: Sequence[str]) -> None:
        """Remove the item at the given chain of names, updating totals."""
        names = list(folder_names)
        if not names:
            raise ValueError("path must have at least one component")
        if len(names) == 1:
            name = names[0]
            item = self.contents[name]
            self.size -= item.size
            self.num_descendants -= _removed_descendants(item)
            del self.contents[name]
            return
        item = self.path(names)
        if item is None:
            raise KeyError(f"could not find item to delete: {names!r}")
        head = self.contents[names[0]]
        if not isinstance(head, Folder):
            raise ValueError(f"got a file in the middle of a path: {names[0]!r}")
        self.size -= item.size
        self.num_descendants -= _removed_descendants(item)
        head.delete_path(names[1:])

    def _child_folder(self, name: str) -> "Folder":
        entry = self.contents.setdefault(name, Folder(name))
        if not isinstance(entry, Folder):
            raise ValueError(f"got a file in the middle of a path: {name!r}")
        return entry


FileOrFolder = Union[File, Folder]


def _removed_descendants(item: FileOrFolder) -> int:
    return item.num_descendants if isinstance(item, Folder) else 1