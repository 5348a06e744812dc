"""Selection, zoom and navigation over the laid-out tiles of a folder."""

from __future__ import annotations

from typing import Callable

from diskscape.file_or_folder import Folder
from diskscape.files_in_folder import FileMetadata, FileType, files_in_folder
from diskscape.rect_float import Rect
from diskscape.tile import Tile
from diskscape.treemap import TreeMap


class Board:
    """The tiles currently on screen, which one is selected, and the zoom level.

    ``selected_index`` of None means nothing is selected. Zooming in hides
    the largest items so the smaller ones get more room.
    """

    def __init__(self, folder: Folder) -> None:
        self.tiles: list[Tile] = []
        self.unrenderable_tile_coordinates: tuple[int, int] | None = None
        self.selected_index: int | None = None
        self.previous_indices_and_zoom_level: list[tuple[int | None, int]] = []
        self.zoom_level = 0
        self._area = Rect()
        self._files: list[FileMetadata] = files_in_folder(folder, 0)

    def change_files(self, folder: Folder) -> None:
        """Show the contents of ``folder`` at the current zoom level."""
        self._files = files_in_folder(folder, self.zoom_level)
        self._fill()

    def change_area(self, area: Rect) -> None:
        """Lay the tiles out again if the drawing area changed."""
        if self._area != area:
            self._area = area
            self._fill()

    def _fill(self) -> None:
        tree_map = TreeMap(self._area)
        tree_map.populate_tiles(self._files)
        self.tiles = tree_map.tiles
        self.unrenderable_tile_coordinates = tree_map.unrenderable_tile_coordinates

    def currently_selected(self) -> Tile | None:
        """The selected tile, or None when nothing (valid) is selected."""
        index = self.selected_index
        if index is None or not 0 <= index < len(self.tiles):
            return None
        return self.tiles[index]

    def pop_previous_index_and_zoom_level(self) -> tuple[int | None, int] | None:
        """Take the most recently recorded selection and zoom level, if any."""
        if not self.previous_indices_and_zoom_level:
            return None
        return self.previous_indices_and_zoom_level.pop()

    def move_to_largest_folder(self) -> None:
        """Select the first (largest) folder tile; leave selection alone if none."""
        index = next(
            (i for i, tile in enumerate(self.tiles) if tile.file_type is FileType.FOLDER),
            None,
        )
        if index is not None:
            self.selected_index = index

    def _move(
        self,
        is_adjacent: Callable[[Tile, Tile], bool],
        overlaps: Callable[[Tile, Tile], bool],
        overlap_length: Callable[[Tile, Tile], int],
    ) -> None:
        current = self.currently_selected()
        if current is None:
            self.selected_index = 0
            return
        best_index: int | None = None
        best_overlap = 0
        for index, tile in enumerate(self.tiles):
            if not (is_adjacent(tile, current) and overlaps(tile, current)):
                continue
            length = overlap_length(tile, current)
            # ties go to the later tile
            if best_index is None or length >= best_overlap:
                best_index, best_overlap = index, length
        # moving off the edge of the screen clears the selection
        self.selected_index = best_index

    def move_selected_right(self) -> None:
        self._move(
            Tile.is_directly_right_of,
            Tile.horizontally_overlaps_with,
            Tile.get_horizontal_overlap_with,
        )

    def move_selected_left(self) -> None:
        self._move(
            Tile.is_directly_left_of,
            Tile.horizontally_overlaps_with,
            Tile.get_horizontal_overlap_with,
        )

    def move_selected_down(self) -> None:
        self._move(
            Tile.is_directly_below,
            Tile.vertically_overlaps_with,
            Tile.get_vertical_overlap_with,
        )

    def move_selected_up(self) -> None:
        self._move(
            Tile.is_directly_above,
            Tile.vertically_overlaps_with,
            Tile.get_vertical_overlap_with,
        )

    def zoom_in(self, folder: Folder) -> None:
        """Hide one more of the largest items, while any remain to hide."""
        if self.zoom_level < len(self._files):
            self.zoom_level += 1
            self._files = files_in_folder(folder, self.zoom_level)
            self._fill()

    def zoom_out(self, folder: Folder) -> None:
        """Bring back the most recently hidden item."""
        if self.zoom_level > 0:
            self.zoom_level -= 1
            self._files = files_in_folder(folder, self.zoom_level)
            self._fill()

    def reset_zoom(self, folder: Folder) -> None:
        self.zoom_level = 0
        self._files = files_in_folder(folder, self.zoom_level)
        self._fill()

    def record_current_index_and_zoom_level(self) -> None:
        self.previous_indices_and_zoom_level.append((self.selected_index, self.zoom_level))