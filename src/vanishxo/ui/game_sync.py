"""UI/game state synchronisation helpers for MainWindow."""

from __future__ import annotations

from collections.abc import Callable

from vanishxo.core.enums import Marker
from vanishxo.core.types import CELL_COUNT, Cell, Line
from vanishxo.game.controller import GameController
from vanishxo.game.interfaces import GamePhase, GameStatus, Outcome
from vanishxo.game.session import GameSession
from vanishxo.ui.board_widget import BoardWidget
from vanishxo.ui.strings import t


class GameSync:
    """Applies controller events to UI widgets."""

    __slots__ = (
        "_controller",
        "_board",
        "_set_status",
        "_is_attached",
    )

    def __init__(
        self,
        *,
        controller: GameController,
        board: BoardWidget,
        set_status: Callable[[str], None],
    ) -> None:
        self._controller = controller
        self._board = board
        self._set_status = set_status
        self._is_attached = False

    def attach(self) -> None:
        """Subscribe to controller events (idempotent)."""
        if self._is_attached:
            return
        events = self._controller.events
        events.on_new_game.append(self.on_new_game)
        events.on_cell_changed.append(self.on_cell_changed)
        events.on_vanish_hint.append(self.on_vanish_hint)
        events.on_status_changed.append(self.on_status_changed)
        events.on_winning_line.append(self.on_winning_line)
        events.on_phase_changed.append(self.on_phase_changed)
        self._is_attached = True

    def detach(self) -> None:
        if not self._is_attached:
            return
        events = self._controller.events
        for callbacks, callback in (
            (events.on_new_game, self.on_new_game),
            (events.on_cell_changed, self.on_cell_changed),
            (events.on_vanish_hint, self.on_vanish_hint),
            (events.on_status_changed, self.on_status_changed),
            (events.on_winning_line, self.on_winning_line),
            (events.on_phase_changed, self.on_phase_changed),
        ):
            callbacks[:] = [cb for cb in callbacks if cb != callback]
        self._is_attached = False

    def render_session(self, session: GameSession) -> None:
        """Redraw everything from *session* (used at start-up and after resets)."""
        self._board.reset()
        for index in range(CELL_COUNT):
            self._board.set_cell(index, session.board.cell_at(index))
        for marker in Marker:
            self._board.set_vanish_hint(marker, session.history(marker).next_to_evict())
        self._board.set_winning_line(session.winning_line)
        self.on_status_changed(session.status)
        self.on_phase_changed(session.phase)

    # ── Controller callbacks ─────────────────────────────────────────────

    def on_new_game(self, session: GameSession) -> None:
        self._board.reset()
        self._board.set_interactive(True)

    def on_cell_changed(self, index: Cell, marker: Marker | None) -> None:
        self._board.set_cell(index, marker)

    def on_vanish_hint(self, owner: Marker, index: Cell | None) -> None:
        self._board.set_vanish_hint(owner, index)

    def on_status_changed(self, status: GameStatus) -> None:
        self._set_status(self.status_text(status))

    def on_winning_line(self, line: Line) -> None:
        self._board.set_winning_line(line)

    def on_phase_changed(self, phase: GamePhase) -> None:
        self._board.set_interactive(phase == GamePhase.AWAITING_MOVE)
        if phase == GamePhase.THINKING:
            s = self._controller.session
            self._set_status(t().status_thinking.format(player=s.current_player))

    @staticmethod
    def status_text(status: GameStatus) -> str:
        s = t()
        if status.outcome == Outcome.WON:
            return s.status_won.format(player=status.player)
        if status.outcome == Outcome.DRAW:
            return s.status_draw
        return s.status_turn.format(player=status.player)
