"""Scanned tree rooted at a filesystem path, with navigation state."""

from __future__ import annotations

import os
from pathlib import Path, PurePath

from diskscape.file_or_folder import FileOrFolder, Folder
from diskscape.file_to_delete import FileToDelete


class FileTree:
    """A folder tree plus the folder the user is currently inside."""

    def __init__(
        self,
        base_folder: Folder,
        path_in_filesystem: str | os.PathLike[str],
        show_apparent_size: bool,
    ) -> None:
        self._base_folder = base_folder
        self._show_apparent_size = show_apparent_size
        self.path_in_filesystem = Path(path_in_filesystem)
        self.current_folder_names: list[str] = []
        self.space_freed = 0
        self.failed_to_read = 0

    @property
    def total_size(self) -> int:
        return self._base_folder.size

    @property
    def total_descendants(self) -> int:
        return self._base_folder.num_descendants

    @property
    def current_folder(self) -> Folder:
        if not self.current_folder_names:
            return self._base_folder
        item = self._base_folder.path(self.current_folder_names)
        if not isinstance(item, Folder):
            raise RuntimeError(
                f"current path {self.current_folder_names!r} does not lead to a folder"
            )
        return item

    @property
    def current_folder_size(self) -> int:
        return self.current_folder.size

    @property
    def current_path(self) -> Path:
        return self.path_in_filesystem.joinpath(*self.current_folder_names)

    def item_in_current_folder(self, item_name: str) -> FileOrFolder | None:
        """Return the named child of the current folder, or None."""
        return self.current_folder.path([item_name])

    def enter_folder(self, folder_name: str) -> None:
        self.current_folder_names.append(folder_name)

    def leave_folder(self) -> bool:
        """Go up one level; return False when already at the base folder."""
        if not self.current_folder_names:
            return False
        self.current_folder_names.pop()
        return True

    def delete_file(self, file_to_delete: FileToDelete) -> None:
        """Remove the item from the tree (not from the disk)."""
        self._base_folder.delete_path(file_to_delete.path_to_file)

    def add_entry(
        self, entry_metadata: os.stat_result, entry_full_path: str | os.PathLike[str]
    ) -> None:
        """Add a scanned entry given by its absolute path."""
        base_length = len(self.path_in_filesystem.parts)
        relative = PurePath(*PurePath(entry_full_path).parts[base_length:])
        self._base_folder.add_entry(entry_metadata, relative, self._show_apparent_size)