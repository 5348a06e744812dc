import pytest

from diskscape.board import Board
from diskscape.file_or_folder import Folder
from diskscape.files_in_folder import FileType
from diskscape.rect_float import Rect

AREA = Rect(0, 0, 190, 50)


def _folder(files, folders=None):
    root = Folder("root")
    for name, size in files.items():
        root.add_file(name, size)
    for name, size in (folders or {}).items():
        root.add_folder(name)
        root.add_file(f"{name}/inner", size)
    return root


def _board(folder, area=AREA):
    board = Board(folder)
    board.change_area(area)
    return board


def test_new_board_has_no_tiles_until_area_set():
    board = Board(_folder({"file1": 4096}))
    assert board.tiles == []
    assert board.selected_index is None
    assert board.zoom_level == 0


def test_change_area_lays_out_all_files():
    board = _board(_folder({"file1": 4096, "file2": 8192, "file3": 8192}))
    assert sorted(t.name for t in board.tiles) == ["file1", "file2", "file3"]
    assert board.tiles[-1].name == "file1"


def test_change_area_same_area_keeps_tiles():
    board = _board(_folder({"file1": 4096, "file2": 8192}))
    tiles = board.tiles
    board.change_area(AREA)
    assert board.tiles is tiles


def test_change_files_replaces_tiles():
    board = _board(_folder({"file1": 4096}))
    board.change_files(_folder({"other": 4096, "again": 4096}))
    assert sorted(t.name for t in board.tiles) == ["again", "other"]


def test_first_move_selects_index_zero():
    for move in ("move_selected_right", "move_selected_left",
                 "move_selected_up", "move_selected_down"):
        board = _board(_folder({"file1": 4096, "file2": 4096, "file3": 4096}))
        getattr(board, move)()
        assert board.selected_index == 0
        assert board.currently_selected() is board.tiles[0]


def test_currently_selected_out_of_range_is_none():
    board = _board(_folder({"file1": 4096}))
    board.selected_index = 10
    assert board.currently_selected() is None


@pytest.mark.parametrize(
    "move, adjacent",
    [
        ("move_selected_right", "is_directly_right_of"),
        ("move_selected_left", "is_directly_left_of"),
        ("move_selected_down", "is_directly_below"),
        ("move_selected_up", "is_directly_above"),
    ],
)
def test_moves_reach_adjacent_tile_or_clear(move, adjacent):
    files = {f"file{i}": 4096 * (i + 1) for i in range(8)}
    board = _board(_folder(files))
    assert board.tiles
    for start in range(len(board.tiles)):
        board.selected_index = start
        before = board.currently_selected()
        assert before is board.tiles[start]
        getattr(board, move)()
        after = board.currently_selected()
        assert (after is None and board.selected_index is None) or getattr(
            after, adjacent
        )(before)


def test_moving_right_off_the_edge_clears_selection():
    board = _board(_folder({"file1": 4096, "file2": 4096, "file3": 4096}))
    board.move_selected_right()
    seen = set()
    while board.selected_index is not None:
        assert board.selected_index not in seen
        seen.add(board.selected_index)
        board.move_selected_right()
    assert board.selected_index is None


def test_move_to_largest_folder_selects_first_folder():
    board = _board(_folder({"file1": 16384, "file2": 4096}, {"sub": 8192}))
    board.move_to_largest_folder()
    selected = board.currently_selected()
    assert selected.file_type is FileType.FOLDER
    assert selected.name == "sub"


def test_move_to_largest_folder_without_folders_keeps_selection():
    board = _board(_folder({"file1": 4096, "file2": 4096}))
    board.move_to_largest_folder()
    assert board.selected_index is None


def test_zoom_in_hides_largest_and_zoom_out_restores():
    folder = _folder({"big": 1000000, "mid": 401408, "small": 8192, "tiny": 8192})
    board = _board(folder)
    names_before = [t.name for t in board.tiles]
    board.zoom_in(folder)
    assert board.zoom_level == 1
    assert "big" not in [t.name for t in board.tiles]
    board.zoom_out(folder)
    assert board.zoom_level == 0
    assert [t.name for t in board.tiles] == names_before


def test_zoom_in_stops_at_limit():
    folder = _folder({f"file{i}": 4096 * (i + 1) for i in range(5)})
    board = _board(folder)
    for _ in range(20):
        board.zoom_in(folder)
    level = board.zoom_level
    board.zoom_in(folder)
    assert board.zoom_level == level
    assert 0 < level < 5
    assert board.tiles


def test_zoom_out_at_zero_is_noop():
    folder = _folder({"file1": 4096})
    board = _board(folder)
    board.zoom_out(folder)
    assert board.zoom_level == 0


def test_record_and_pop_previous_index_and_zoom_level():
    folder = _folder({"file1": 4096, "file2": 4096})
    board = _board(folder)
    assert board.pop_previous_index_and_zoom_level() is None
    board.selected_index = 1
    board.record_current_index_and_zoom_level()
    board.zoom_in(folder)
    board.selected_index = None
    board.record_current_index_and_zoom_level()
    assert board.pop_previous_index_and_zoom_level() == (None, 1)
    assert board.pop_previous_index_and_zoom_level() == (1, 0)
    assert board.pop_previous_index_and_zoom_level() is None