"""Tests for Board."""

import pytest

from vanishxo.core.board import Board, OccupiedCellError
from vanishxo.core.enums import Marker
from vanishxo.core.types import WINNING_LINES


class TestBoardBasics:
    def test_new_board_is_empty(self) -> None:
        board = Board()
        assert all(board.cell_at(i) is None for i in range(9))
        assert board.empty_cells() == list(range(9))

    def test_place_and_read(self) -> None:
        board = Board()
        board.place(4, Marker.X)
        assert board.cell_at(4) == Marker.X
        assert board[4] == Marker.X
        assert not board.is_empty(4)
        assert 4 not in board.empty_cells()

    def test_place_on_occupied_raises(self) -> None:
        board = Board()
        board.place(0, Marker.X)
        with pytest.raises(OccupiedCellError) as exc_info:
            board.place(0, Marker.O)
        assert exc_info.value.index == 0
        assert exc_info.value.occupant == Marker.X
        assert board.cell_at(0) == Marker.X

    def test_occupied_error_is_value_error(self) -> None:
        assert issubclass(OccupiedCellError, ValueError)

    def test_clear(self) -> None:
        board = Board()
        board.place(7, Marker.O)
        board.clear(7)
        assert board.is_empty(7)

    def test_clear_empty_cell_is_fine(self) -> None:
        board = Board()
        board.clear(3)
        assert board.is_empty(3)

    @pytest.mark.parametrize("index", [-1, 9, 100])
    def test_out_of_range_index_raises(self, index: int) -> None:
        board = Board()
        with pytest.raises(IndexError):
            board.cell_at(index)


class TestBoardQueries:
    def test_lines_matching_none(self) -> None:
        board = Board.from_string("XX. O.. ...")
        assert board.lines_matching(Marker.X) == []

    def test_lines_matching_row(self) -> None:
        board = Board.from_string("XXX OO. ...")
        assert board.lines_matching(Marker.X) == [(0, 1, 2)]
        assert board.lines_matching(Marker.O) == []

    def test_lines_matching_scan_order(self) -> None:
        board = Board.from_string("XXX X.. X..")
        assert board.lines_matching(Marker.X) == [(0, 1, 2), (0, 3, 6)]

    def test_every_winning_line_detected(self) -> None:
        for line in WINNING_LINES:
            board = Board()
            for i in line:
                board.place(i, Marker.O)
            assert board.lines_matching(Marker.O) == [line]

    def test_is_full(self) -> None:
        assert not Board().is_full()
        assert Board.from_string("XOX OXO OXO").is_full()
        assert not Board.from_string("XOX OXO OX.").is_full()


class TestBoardHelpers:
    def test_copy_independence(self) -> None:
        board = Board.from_string("X.. ... ..O")
        copy = board.copy()
        assert copy == board
        copy.clear(0)
        assert copy != board
        assert board.cell_at(0) == Marker.X

    def test_from_string_rejects_bad_length(self) -> None:
        with pytest.raises(ValueError):
            Board.from_string("XO")

    def test_from_string_rejects_bad_char(self) -> None:
        with pytest.raises(ValueError):
            Board.from_string("XOZ ... ...")

    def test_repr_grid(self) -> None:
        board = Board.from_string("X.O .X. ..O")
        assert repr(board) == "X . O\n. X .\n. . O"
