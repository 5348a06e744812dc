"""Description of an item selected for deletion."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from diskscape.files_in_folder import FileType


@dataclass
class FileToDelete:
    path_in_filesystem: Path
    path_to_file: list[str]
    file_type: FileType
    num_descendants: int | None
    size: int = field(default=0)

    def __post_init__(self) -> None:
        self.path_in_filesystem = Path(self.path_in_filesystem)
        self.path_to_file = list(self.path_to_file)

    def full_path(self) -> Path:
        """Absolute location of the item on disk."""
        return self.path_in_filesystem.joinpath(*self.path_to_file)