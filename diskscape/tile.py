"""A laid-out rectangle on screen representing one file or folder."""

from __future__ import annotations

from dataclasses import dataclass

from diskscape.files_in_folder import FileMetadata, FileType
from diskscape.rect_float import RectFloat


@dataclass
class Tile:
    x: int
    y: int
    width: int
    height: int
    name: str
    size: int
    descendants: int | None
    percentage: float
    file_type: FileType

    @classmethod
    def from_rect(cls, rect: RectFloat, file_metadata: FileMetadata) -> "Tile":
        rounded = rect.round()
        return cls(
            x=rounded.x,
            y=rounded.y,
            width=rounded.width,
            height=rounded.height,
            name=file_metadata.name,
            size=file_metadata.size,
            descendants=file_metadata.descendants,
            percentage=file_metadata.percentage,
            file_type=file_metadata.file_type,
        )

    def is_directly_right_of(self, other: "Tile") -> bool:
        return self.x == other.x + other.width

    def is_directly_left_of(self, other: "Tile") -> bool:
        return self.x + self.width == other.x

    def is_directly_below(self, other: "Tile") -> bool:
        return self.y == other.y + other.height

    def is_directly_above(self, other: "Tile") -> bool:
        return self.y + self.height == other.y

    def horizontally_overlaps_with(self, other: "Tile") -> bool:
        """Whether the two tiles share any rows."""
        top, bottom = self.y, self.y + self.height
        other_top, other_bottom = other.y, other.y + other.height
        return (
            other_top <= top <= other_bottom
            or other_top < bottom <= other_bottom
            or (top <= other_top and bottom >= other_bottom)
            or (other_top <= top and other_bottom >= bottom)
        )

    def vertically_overlaps_with(self, other: "Tile") -> bool:
        """Whether the two tiles share any columns."""
        left, right = self.x, self.x + self.width
        other_left, other_right = other.x, other.x + other.width
        return (
            other_left <= left <= other_right
            or other_left < right <= other_right
            or (left <= other_left and right >= other_right)
            or (other_left <= left and other_right >= right)
        )

    def get_vertical_overlap_with(self, other: "Tile") -> int:
        """Number of columns the two tiles share."""
        overlap = min(self.x + self.width, other.x + other.width) - max(self.x, other.x)
        if overlap < 0:
            raise ValueError(f"tiles {self.name!r} and {other.name!r} share no columns")
        return overlap

    def get_horizontal_overlap_with(self, other: "Tile") -> int:
        """Number of rows the two tiles share."""
        overlap = min(self.y + self.height, other.y + other.height) - max(self.y, other.y)
        if overlap < 0:
            raise ValueError(f"tiles {self.name!r} and {other.name!r} share no rows")
        return overlap