"""Tests for the board."""

import pytest

from logic.board import EMPTY, Board, Marker


X = Marker("X")
O = Marker("O")


@pytest.mark.parametrize("size", [1, 3, 5])
def test_fresh_board_is_empty_everywhere(size):
    board = Board(size)

    assert board.size == size
    for row in range(size):
        for col in range(size):
            assert board.is_empty(row, col)
            assert board.cell_value(row, col) == EMPTY
    assert len(board.empty_cells()) == size * size
    assert not board.is_full()


@pytest.mark.parametrize("size", [0, -1, -10])
def test_non_positive_size_rejected(size):
    with pytest.raises(ValueError, match="positive integer"):
        Board(size)


def test_place_twice_on_same_cell():
    board = Board(3)

    assert board.place(1, 1, X)
    assert not board.place(1, 1, O)
    assert board.cell_value(1, 1) == X
    assert not board.is_empty(1, 1)


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (3, 3), (3, 0), (0, 3)])
def test_out_of_bounds_place_does_not_mutate(row, col):
    board = Board(3)

    assert not board.place(row, col, X)
    assert len(board.empty_cells()) == 9


def test_out_of_bounds_reads_are_empty_and_not_placeable():
    board = Board(2)

    assert board.cell_value(-1, 0) == EMPTY
    assert board.cell_value(2, 2) == EMPTY
    assert not board.is_empty(-1, 0)
    assert not board.is_empty(2, 2)


def test_placing_the_empty_marker_is_rejected():
    board = Board(3)

    assert not board.place(0, 0, EMPTY)
    assert board.is_empty(0, 0)


def test_markers_compare_by_value():
    assert Marker("X") == Marker("X")
    assert Marker("X") != Marker("O")
    assert Marker("-") == EMPTY


@pytest.mark.parametrize("symbol", ["", "XO"])
def test_marker_must_be_one_character(symbol):
    with pytest.raises(ValueError):
        Marker(symbol)


def test_empty_cells_and_full_board():
    board = Board(2)
    board.place(0, 0, X)
    board.place(1, 1, O)

    assert board.empty_cells() == [(0, 1), (1, 0)]

    board.place(0, 1, X)
    board.place(1, 0, O)
    assert board.empty_cells() == []
    assert board.is_full()


def test_copy_is_independent():
    board = Board(3)
    board.place(0, 0, X)

    clone = board.copy()
    clone.place(2, 2, O)

    assert clone.cell_value(0, 0) == X
    assert board.is_empty(2, 2)


def test_rows_snapshot():
    board = Board(2)
    board.place(0, 1, X)

    assert board.rows() == [[EMPTY, X], [EMPTY, EMPTY]]
