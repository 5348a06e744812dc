"""Per-folder listing of children with their share of the folder's size."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from diskscape.file_or_folder import Folder


class FileType(Enum):
    FILE = "file"
    FOLDER = "folder"


@dataclass
class FileMetadata:
    """A child of a folder; ``percentage`` of 1.0 means 100%."""

    name: str
    size: int
    descendants: int | None
    percentage: float
    file_type: FileType


def _calculate_percentage(size: int, total_size: int, total_files_in_parent: int) -> float:
    if size == 0 and total_size == 0:
        # when everything is empty, show all items at the same size
        return 1.0 / total_files_in_parent
    return size / total_size


def files_in_folder(folder: Folder, offset: int) -> list[FileMetadata]:
    """List the children of ``folder`` largest first, skipping the first ``offset``.

    Ties in percentage are ordered by name. When items are skipped, the
    remaining percentages are recomputed against what is left.
    """
    total_size = folder.size
    count = len(folder.contents)
    files = []
    for name, item in folder.contents.items():
        if isinstance(item, Folder):
            descendants, file_type = item.num_descendants, FileType.FOLDER
        else:
            descendants, file_type = None, FileType.FILE
        files.append(
            FileMetadata(
                name=name,
                size=item.size,
                descendants=descendants,
                percentage=_calculate_percentage(item.size, total_size, count),
                file_type=file_type,
            )
        )
    files.sort(key=lambda f: (-f.percentage, f.name))

    if offset > 0:
        if offset > len(files):
            raise ValueError(f"offset {offset} exceeds number of items {len(files)}")
        removed, files = files[:offset], files[offset:]
        remaining_count = count - len(removed)
        remaining_size = total_size - sum(f.size for f in removed)
        for file in files:
            file.percentage = _calculate_percentage(file.size, remaining_size, remaining_count)
    return files