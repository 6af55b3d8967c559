"""Tests for GameSync — controller events rendered onto widgets."""

from __future__ import annotations

from vanishxo.core.enums import Marker
from vanishxo.game.controller import GameController
from vanishxo.game.interfaces import GameMode, GameStatus
from vanishxo.ui.board_widget import BoardWidget
from vanishxo.ui.game_sync import GameSync


def _make_sync(mode: GameMode = GameMode.HUMAN_VS_HUMAN, scheduler: object = None):
    controller = GameController(mode, scheduler=scheduler)  # type: ignore[arg-type]
    board = BoardWidget()
    status: list[str] = []
    sync = GameSync(controller=controller, board=board, set_status=status.append)
    sync.attach()
    sync.render_session(controller.session)
    return controller, board, status, sync


class TestGameSync:
    def test_initial_render(self, qapp: object) -> None:
        del qapp
        _controller, board, status, _sync = _make_sync()
        assert all(board.cell_text(i) == "" for i in range(9))
        assert status[-1] == "Player X's turn"

    def test_move_and_eviction_rendered(self, qapp: object) -> None:
        del qapp
        controller, board, status, _sync = _make_sync()
        for index in (0, 8, 1, 7, 5, 3):
            controller.submit_move(index)
        assert board.is_fading(0)  # X's oldest
        assert board.is_fading(8)  # O's oldest

        controller.submit_move(6)

        assert board.cell_text(0) == ""
        assert board.cell_text(6) == "X"
        assert board.is_fading(1)
        assert status[-1] == "Player O's turn"

    def test_win_rendered(self, qapp: object) -> None:
        del qapp
        controller, board, status, _sync = _make_sync()
        for index in (0, 3, 4, 5, 8):
            controller.submit_move(index)
        assert [i for i in range(9) if board.is_highlighted(i)] == [0, 4, 8]
        assert status[-1].startswith("Player X wins")
        assert not board.button(1).isEnabled()

    def test_reset_clears_board(self, qapp: object) -> None:
        del qapp
        controller, board, status, _sync = _make_sync()
        for index in (0, 3, 4, 5, 8):
            controller.submit_move(index)

        controller.reset()

        assert all(board.cell_text(i) == "" for i in range(9))
        assert not any(board.is_highlighted(i) for i in range(9))
        assert board.button(0).isEnabled()
        assert status[-1] == "Player X's turn"

    def test_thinking_disables_board(self, qapp: object, scheduler) -> None:
        del qapp
        controller, board, status, _sync = _make_sync(
            GameMode.HUMAN_VS_COMPUTER, scheduler
        )
        controller.submit_move(0)
        assert not board.button(4).isEnabled()
        assert status[-1] == "Computer (O) is thinking..."

        scheduler.run_pending()

        assert board.cell_text(4) == "O"
        assert board.button(4).isEnabled()
        assert status[-1] == "Player X's turn"

    def test_detach_stops_rendering(self, qapp: object) -> None:
        del qapp
        controller, board, _status, sync = _make_sync()
        sync.detach()
        sync.detach()
        controller.submit_move(2)
        assert board.cell_text(2) == ""
        assert controller.session.board.cell_at(2) == Marker.X

    def test_status_text(self) -> None:
        assert GameSync.status_text(GameStatus.draw()).startswith("Draw")
        won = GameSync.status_text(GameStatus.won(Marker.O))
        turn = GameSync.status_text(GameStatus.in_progress(Marker.X))
        assert won.startswith("Player O wins")
        assert turn == "Player X's turn"
