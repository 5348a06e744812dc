# diskscape

The model behind a visual disk space navigator. It has two parts:

* a folder tree that keeps the size and descendant count of every entry. You
  build it from the paths and `os.stat_result`s you collect while walking a
  directory.
* a squarified treemap layout that turns the contents of one folder into
  tiles on a character grid, with keyboard-style navigation between them.

The package has no runtime dependencies.

## Installation

```
pip install .
```

## Building a tree

```python
import os
from pathlib import Path

from diskscape.file_or_folder import Folder
from diskscape.file_tree import FileTree

root = Path("/some/directory")
tree = FileTree(Folder.from_path(root), root, show_apparent_size=True)

for dirpath, dirnames, filenames in os.walk(root):
    for name in dirnames + filenames:
        full = Path(dirpath) / name
        tree.add_entry(full.lstat(), full)

print(tree.total_size, tree.total_descendants)
```

With `show_apparent_size=True` a file counts with its length (`st_size`).
Otherwise it counts with the space it takes on disk (`st_blocks * 512`), and
with its length on platforms that do not report blocks.

A `FileTree` also keeps track of the folder you are looking at:

* `enter_folder(name)` goes down one level. `leave_folder()` goes up one
  level and returns `False` when you are already at the base folder.
* `current_folder`, `current_folder_size` and `current_path` are properties
  that describe where you are.
* `item_in_current_folder(name)` returns the `File` or `Folder` with that
  name, or `None`.
* `delete_file(file_to_delete)` takes an entry out of the tree and updates
  the sizes and counts of every folder above it. It takes a
  `diskscape.file_to_delete.FileToDelete`, whose `full_path()` gives the
  entry's location on disk.

`Folder` can also be used on its own, through `add_file`, `add_folder`,
`add_entry`, `path` and `delete_path`.

## Listing a folder

`diskscape.files_in_folder.files_in_folder(folder, offset)` returns
`FileMetadata` items sorted largest first, with ties ordered by name. Each
`percentage` is the item's share of the folder, where 1.0 means 100%. A
positive `offset` skips that many of the largest items and recomputes the
shares of the remaining ones.

## Laying out tiles

```python
from diskscape.board import Board
from diskscape.rect_float import Rect

board = Board(tree.current_folder)
board.change_area(Rect(x=0, y=0, width=190, height=50))

for tile in board.tiles:
    print(tile.name, tile.x, tile.y, tile.width, tile.height)
```

Tiles smaller than 8 columns by 3 rows are not drawn. The top-left corner
of the area they would have taken is kept in
`board.unrenderable_tile_coordinates`. To lay out a list of `FileMetadata`
directly, use `diskscape.treemap.TreeMap(area).populate_tiles(items)`.

Moving around the board:

* `move_selected_left`, `move_selected_right`, `move_selected_up` and
  `move_selected_down` select the adjacent tile with the most overlap. With
  nothing selected they select the first tile. Moving past the edge clears
  the selection.
* `move_to_largest_folder` selects the first folder tile, if there is one.
* `zoom_in`, `zoom_out` and `reset_zoom` hide or restore the largest entries
  so that smaller ones get more room.
* `record_current_index_and_zoom_level` and
  `pop_previous_index_and_zoom_level` keep a stack of earlier states.

## What it does not do

The package is a library only. It does not scan directories, does not delete
anything from disk and has no terminal interface or command. Walking the
filesystem, removing files and drawing the tiles are left to the caller.

## Running the tests

```
pip install .[test]
pytest
```