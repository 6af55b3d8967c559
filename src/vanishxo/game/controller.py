"""GameController — the central orchestrator of a vanishing-marker game.

Coordinates: Players, GameSession, Board/MoveHistory, deferred computer moves.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field

from vanishxo.core.enums import Marker
from vanishxo.core.types import Cell, Line, is_valid_index
from vanishxo.game.interfaces import (
    GameMode,
    GamePhase,
    GameStatus,
    IGameController,
    IPlayer,
    IScheduler,
    MoveRejection,
)
from vanishxo.game.player import ComputerPlayer, HumanPlayer
from vanishxo.game.session import GameSession

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

NewGameCallback = Callable[[GameSession], None]
CellCallback = Callable[[Cell, Marker | None], None]  # index, marker / empty
VanishHintCallback = Callable[[Marker, Cell | None], None]  # owner, index
StatusCallback = Callable[[GameStatus], None]
WinningLineCallback = Callable[[Line], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_new_game: list[NewGameCallback] = field(default_factory=list)
    on_cell_changed: list[CellCallback] = field(default_factory=list)
    on_vanish_hint: list[VanishHintCallback] = field(default_factory=list)
    on_status_changed: list[StatusCallback] = field(default_factory=list)
    on_winning_line: list[WinningLineCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Validates and applies moves, detects win/draw, switches turns and
    drives the computer opponent.

    Thread-safety: all methods must be called from a single thread (the
    main/UI thread).  Computer moves are deferred through the injected
    :class:`IScheduler`; without one they are applied synchronously right
    after the human move.
    """

    DEFAULT_AI_DELAY_MS = 500

    __slots__ = (
        "_session",
        "_scheduler",
        "_ai_delay_ms",
        "_rng",
        "events",
    )

    def __init__(
        self,
        mode: GameMode = GameMode.HUMAN_VS_HUMAN,
        *,
        scheduler: IScheduler | None = None,
        ai_delay_ms: int = DEFAULT_AI_DELAY_MS,
        rng: random.Random | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._ai_delay_ms = ai_delay_ms
        self._rng = rng or random.Random()
        self.events = GameEvents()
        self._session = self._build_session(mode)
        self._session.phase = GamePhase.AWAITING_MOVE

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def mode(self) -> GameMode:
        return self._session.mode

    @property
    def status(self) -> GameStatus:
        return self._session.status

    @property
    def current_player(self) -> IPlayer:
        return self._session.current

    def player(self, marker: Marker) -> IPlayer:
        return self._session.players[marker]

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, mode: GameMode | None = None) -> None:
        self._session.cancel_pending()
        if mode is None:
            mode = self._session.mode
        self._session = self._build_session(mode)
        _LOGGER.info("New game started (%s)", self._session.mode.name)

        for cb in self.events.on_new_game:
            cb(self._session)
        self._emit_status(self._session.status)
        self._prompt_current_player()

    def reset(self) -> None:
        self.new_game(self._session.mode)

    def set_mode(self, mode: GameMode) -> None:
        self.new_game(mode)

    def validate_move(self, index: Cell) -> MoveRejection | None:
        """Why a human move to *index* would be ignored, or ``None`` if legal."""
        s = self._session
        if not s.is_active:
            return MoveRejection.GAME_NOT_ACTIVE
        if not is_valid_index(index):
            return MoveRejection.OUT_OF_RANGE
        if not s.current.is_human:
            return MoveRejection.NOT_YOUR_TURN
        if not s.board.is_empty(index):
            return MoveRejection.OCCUPIED_CELL
        return None

    def submit_move(self, index: Cell) -> bool:
        rejection = self.validate_move(index)
        if rejection is not None:
            _LOGGER.debug("Ignored move to %r: %s", index, rejection.name)
            return False

        self._apply_move(index)
        return True

    def cancel_pending(self) -> None:
        """Drop a scheduled computer move (e.g. when the window closes)."""
        self._session.cancel_pending()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _build_session(self, mode: GameMode) -> GameSession:
        players: dict[Marker, IPlayer] = {Marker.X: HumanPlayer(Marker.X)}
        if mode == GameMode.HUMAN_VS_COMPUTER:
            players[Marker.O] = ComputerPlayer(Marker.O, rng=self._rng)
        else:
            players[Marker.O] = HumanPlayer(Marker.O)
        return GameSession.create(mode, players)

    def _apply_move(self, index: Cell) -> None:
        """Place, record (maybe evict), then check win, draw, or switch turn."""
        s = self._session
        mover = s.current_player
        history = s.history(mover)

        s.board.place(index, mover)
        s.move_count += 1
        self._emit_cell(index, mover)

        evicted = history.record_move(index)
        if evicted is not None:
            self._emit_cell(evicted, None)
        for cb in self.events.on_vanish_hint:
            cb(mover, history.next_to_evict())

        lines = s.board.lines_matching(mover)
        if lines:
            s.winning_line = lines[0]
            self._finish(GameStatus.won(mover))
            for cb in self.events.on_winning_line:
                cb(s.winning_line)
            return

        if s.board.is_full():
            self._finish(GameStatus.draw())
            return

        s.current_player = mover.opposite
        s.status = GameStatus.in_progress(s.current_player)
        self._emit_status(s.status)
        self._prompt_current_player()

    def _finish(self, status: GameStatus) -> None:
        s = self._session
        s.status = status
        s.phase = GamePhase.GAME_OVER
        _LOGGER.info("Game over: %s after %d moves", status, s.move_count)
        self._emit_status(status)
        self._emit_phase(GamePhase.GAME_OVER)

    def _prompt_current_player(self) -> None:
        """Wait for the human, or schedule the computer's reply."""
        s = self._session
        if s.current.is_human:
            s.phase = GamePhase.AWAITING_MOVE
            self._emit_phase(GamePhase.AWAITING_MOVE)
            return

        s.phase = GamePhase.THINKING
        self._emit_phase(GamePhase.THINKING)
        if self._scheduler is None:
            self._play_computer_move(s)
            return
        s.pending_task = self._scheduler.call_later(
            self._ai_delay_ms, lambda: self._play_computer_move(s)
        )

    def _play_computer_move(self, session: GameSession) -> None:
        if session is not self._session:
            _LOGGER.debug("Dropped computer move for a discarded session")
            return
        session.pending_task = None
        if not session.is_active or session.current.is_human:
            return

        index = session.current.choose_move(session.board)
        if index is None:
            return
        self._apply_move(index)

    def _emit_cell(self, index: Cell, marker: Marker | None) -> None:
        for cb in self.events.on_cell_changed:
            cb(index, marker)

    def _emit_status(self, status: GameStatus) -> None:
        for cb in self.events.on_status_changed:
            cb(status)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
