import pytest

from liquid_sorter import Board, Bottle, PourException

BOARDS = [
    ["AB..", "B...", "...."],
    ["ABBB", "BB..", "A...", "...."],
    ["AABB", "BBAA", "....", "...."],
    ["ABCA", "BCAB", "CABC", "....", "...."],
    ["AAA.", "A...", "BBBB"],
]


def test_legal_moves_order():
    board = Board.parse(["AB..", "B...", "...."])
    assert board.legal_moves() == [(0, 1), (0, 2), (1, 0), (1, 2)]


def test_no_legal_moves_at_dead_end():
    assert Board.parse(["AB..", "BA.."]).legal_moves() == []


def test_full_destination_is_skipped():
    board = Board.parse(["A...", "AAAB", "AAA."])
    assert board.legal_moves() == [(0, 2), (2, 0)]


@pytest.mark.parametrize("rows", BOARDS)
def test_legal_moves_never_touch_empty_source_or_full_destination(rows):
    board = Board.parse(rows)
    for src, dest in board.legal_moves():
        assert src != dest
        assert not board[src].is_empty()
        assert not board[dest].is_full()


@pytest.mark.parametrize("rows", BOARDS)
def test_every_legal_pour_changes_the_board(rows):
    board = Board.parse(rows)
    for src, dest in board.legal_moves():
        assert board.pour(src, dest) != board


@pytest.mark.parametrize("rows", BOARDS)
def test_pour_conserves_units(rows):
    board = Board.parse(rows)
    for src, dest in board.legal_moves():
        assert board.pour(src, dest).num_units() == board.num_units()


@pytest.mark.parametrize("rows", BOARDS)
def test_pour_keeps_bottles_contiguous(rows):
    board = Board.parse(rows)
    for src, dest in board.legal_moves():
        poured = board.pour(src, dest)
        for bottle in poured:
            # raises if a slot is empty under a color
            Bottle.from_string(str(bottle))


def test_pour_single_unit():
    board = Board.parse(["AB..", "B...", "...."])
    assert repr(board.pour(0, 1)) == "('A...', 'BB..', '....')"


def test_pour_whole_run():
    board = Board.parse(["ABBB", "B...", "...."])
    assert repr(board.pour(0, 1)) == "('A...', 'BBBB', '....')"


def test_pour_limited_by_free_slots():
    board = Board.parse(["ABBB", "BB.."])
    assert repr(board.pour(0, 1)) == "('AB..', 'BBBB')"


def test_pour_into_empty_bottle():
    board = Board.parse(["AABB", "...."])
    assert repr(board.pour(0, 1)) == "('AA..', 'BB..')"


def test_pour_leaves_original_board_alone():
    board = Board.parse(["AB..", "B..."])
    board.pour(0, 1)
    assert repr(board) == "('AB..', 'B...')"


@pytest.mark.parametrize(
    "rows, move, message",
    [
        (["A...", "...."], (0, 0), "same bottle"),
        (["....", "A..."], (0, 1), "empty bottle"),
        (["A...", "BBBB"], (0, 1), "full bottle"),
        (["A...", "B..."], (0, 1), "different color"),
    ],
)
def test_illegal_pour_raises(rows, move, message):
    with pytest.raises(PourException, match=message):
        Board.parse(rows).pour(*move)


@pytest.mark.parametrize(
    "rows, expected",
    [
        (["AAAA", "...."], 0),
        (["AABB"], 1),
        (["ABAB"], 3),
        (["AB..", "BA..", "C..."], 2),
        (["ABCA", "BCAB", "CABC", "...."], 9),
    ],
)
def test_heuristic_counts_color_boundaries(rows, expected):
    assert Board.parse(rows).heuristic() == expected


def test_heuristic_is_zero_on_solved_board():
    board = Board.parse(["AAAA", "....", "BBBB", "CCCC"])
    assert board.is_solved
    assert board.heuristic() == 0
