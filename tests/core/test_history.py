"""Tests for MoveHistory (FIFO window with eviction)."""

from vanishxo.core.board import Board
from vanishxo.core.enums import Marker
from vanishxo.core.history import MoveHistory


def _play(board: Board, history: MoveHistory, index: int) -> int | None:
    board.place(index, history.marker)
    return history.record_move(index)


class TestRecordMove:
    def test_no_eviction_below_capacity(self) -> None:
        board = Board()
        history = MoveHistory(board, Marker.X)
        assert _play(board, history, 0) is None
        assert _play(board, history, 1) is None
        assert _play(board, history, 2) is None
        assert history.moves == (0, 1, 2)
        assert len(history) == 3

    def test_fourth_move_evicts_oldest(self) -> None:
        board = Board()
        history = MoveHistory(board, Marker.X)
        for index in (0, 1, 2):
            _play(board, history, index)

        evicted = _play(board, history, 3)

        assert evicted == 0
        assert history.moves == (1, 2, 3)
        assert board.is_empty(0)
        assert [board.cell_at(i) for i in (1, 2, 3)] == [Marker.X] * 3

    def test_eviction_law_holds_repeatedly(self) -> None:
        board = Board()
        history = MoveHistory(board, Marker.O)
        sequence = [4, 0, 8, 2, 6, 1, 7]
        for index in sequence:
            before = history.moves
            evicted = _play(board, history, index)
            if len(before) == MoveHistory.CAPACITY:
                assert evicted == before[0]
                assert history.moves == before[1:] + (index,)
                assert board.is_empty(evicted)
            else:
                assert evicted is None
            assert len(history) <= MoveHistory.CAPACITY

    def test_eviction_does_not_touch_other_cells(self) -> None:
        board = Board()
        history = MoveHistory(board, Marker.X)
        board.place(8, Marker.O)
        for index in (0, 1, 2, 3):
            _play(board, history, index)
        assert board.cell_at(8) == Marker.O


class TestNextToEvict:
    def test_none_until_full(self) -> None:
        board = Board()
        history = MoveHistory(board, Marker.X)
        assert history.next_to_evict() is None
        _play(board, history, 5)
        _play(board, history, 6)
        assert history.next_to_evict() is None

    def test_oldest_when_full(self) -> None:
        board = Board()
        history = MoveHistory(board, Marker.X)
        for index in (5, 6, 7):
            _play(board, history, index)
        assert history.next_to_evict() == 5
        _play(board, history, 0)
        assert history.next_to_evict() == 6

    def test_hint_does_not_change_board(self) -> None:
        board = Board()
        history = MoveHistory(board, Marker.X)
        for index in (5, 6, 7):
            _play(board, history, index)
        history.next_to_evict()
        assert board.cell_at(5) == Marker.X


class TestContainer:
    def test_contains_and_iter(self) -> None:
        board = Board()
        history = MoveHistory(board, Marker.O)
        _play(board, history, 3)
        _play(board, history, 4)
        assert 3 in history
        assert 8 not in history
        assert list(history) == [3, 4]
        assert "O" in repr(history)
