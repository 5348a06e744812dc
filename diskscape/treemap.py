"""Squarified treemap layout of folder contents onto terminal cells."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from diskscape.files_in_folder import FileMetadata
from diskscape.rect_float import Rect, RectFloat
from diskscape.tile import Tile

HEIGHT_WIDTH_RATIO = 2.5
MINIMUM_HEIGHT = 3
MINIMUM_WIDTH = 8


def _fdiv(numerator: float, denominator: float) -> float:
    """Floating-point division yielding inf or nan instead of raising."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


class TreeMap:
    """Lays out files as tiles; those too small to draw share one corner area."""

    def __init__(self, empty_space: Rect) -> None:
        self.tiles: list[Tile] = []
        self.unrenderable_tile_coordinates: tuple[int, int] | None = None
        self._empty_space = RectFloat.from_rect(empty_space)
        self._total_size = self._empty_space.height * self._empty_space.width

    def populate_tiles(self, children: Iterable[FileMetadata]) -> None:
        """Lay out ``children``, expected largest first."""
        self._squarify(list(children))
        if self.unrenderable_tile_coordinates is not None:
            # the unrenderable area should be a rectangle; drop any tile that
            # ended up inside it through rounding
            x, y = self.unrenderable_tile_coordinates
            self.tiles = [tile for tile in self.tiles if tile.x < x or tile.y < y]

    def _size(self, file_metadata: FileMetadata) -> float:
        return file_metadata.percentage * self._total_size

    def _row_total(self, row: Sequence[FileMetadata]) -> float:
        return sum((self._size(m) for m in row), 0.0)

    def _layout_row(self, row: Sequence[FileMetadata]) -> None:
        space = self._empty_space
        row_total = self._row_total(row)
        horizontal = space.width <= space.height * HEIGHT_WIDTH_RATIO
        progress = space.x if horizontal else space.y
        row_second_side = 0.0
        for file_metadata in row:
            size = self._size(file_metadata)
            side_length = space.width if horizontal else space.height
            first_side = _fdiv(size, row_total) * side_length
            # keep the row a uniform thickness, even if it fudges sizes a little
            candidate = _fdiv(size, first_side)
            second_side = row_second_side if row_second_side > candidate else candidate

            if horizontal:
                rect = RectFloat(progress, space.y, first_side, second_side)
            else:
                rect = RectFloat(space.x, progress, second_side, first_side)
            progress += first_side

            tile = Tile.from_rect(rect, file_metadata)
            if tile.height < MINIMUM_HEIGHT or tile.width < MINIMUM_WIDTH:
                self._add_unrenderable_tile(tile)
            else:
                self.tiles.append(tile)

            if second_side > row_second_side:
                row_second_side = second_side

        if horizontal:
            space.height -= row_second_side
            space.y += row_second_side
        else:
            space.width -= row_second_side
            space.x += row_second_side

    def _add_unrenderable_tile(self, tile: Tile) -> None:
        if tile.width == 0 or tile.height == 0:
            # a rounding artefact, not a real tile
            return
        if self.unrenderable_tile_coordinates is None:
            self.unrenderable_tile_coordinates = (tile.x, tile.y)
        else:
            x, y = self.unrenderable_tile_coordinates
            self.unrenderable_tile_coordinates = (min(tile.x, x), min(tile.y, y))

    def _worst_in_renderable_row(
        self,
        row: Sequence[FileMetadata],
        length_of_row: float,
        min_first_side: float,
        min_second_side: float,
    ) -> float | None:
        """Worst aspect ratio in the row, or None if any item cannot be drawn."""
        total = self._row_total(row)
        worst: float | None = None
        for file_metadata in row:
            size = self._size(file_metadata)
            first_side = _fdiv(size, total) * length_of_row
            second_side = _fdiv(size, first_side)
            if not (first_side >= min_first_side and second_side >= min_second_side):
                return None
            if first_side < second_side:
                ratio = _fdiv(first_side, second_side)
            else:
                ratio = _fdiv(second_side, first_side)
            if worst is None or ratio < worst:
                worst = ratio
        return worst

    def _has_renderable_items(
        self, row: Sequence[FileMetadata], min_first_side: float, min_second_side: float
    ) -> bool:
        minimum_area = min_first_side * min_second_side
        return any(minimum_area <= self._size(m) for m in row)

    def _row_constraints(self) -> tuple[float, float, float]:
        space = self._empty_space
        if space.height * HEIGHT_WIDTH_RATIO < space.width:
            return (
                space.height * HEIGHT_WIDTH_RATIO,
                MINIMUM_HEIGHT * HEIGHT_WIDTH_RATIO,
                MINIMUM_WIDTH / HEIGHT_WIDTH_RATIO,
            )
        return (
            space.width / HEIGHT_WIDTH_RATIO,
            MINIMUM_WIDTH / HEIGHT_WIDTH_RATIO,
            MINIMUM_HEIGHT * HEIGHT_WIDTH_RATIO,
        )

    def _squarify(self, children: list[FileMetadata]) -> None:
        row: list[FileMetadata] = []
        while True:
            length_of_row, min_first, min_second = self._row_constraints()
            if not children:
                self._layout_row(row)
                return
            if not self._has_renderable_items(children, min_first, min_second):
                self._layout_row(row)
                self._layout_row(children)
                return

            current = self._worst_in_renderable_row(
                row, length_of_row, min_first, min_second
            )
            with_child = self._worst_in_renderable_row(
                row + children[:1], length_of_row, min_first, min_second
            )
            if current is None or (with_child is not None and current < with_child):
                # the row is not yet drawable, or the next child improves it
                row.append(children.pop(0))
            else:
                self._layout_row(row)
                row = []