"""GameSession — all mutable state of one game."""

from __future__ import annotations

from dataclasses import dataclass, field

from vanishxo.core.board import Board
from vanishxo.core.enums import Marker
from vanishxo.core.history import MoveHistory
from vanishxo.core.types import Line
from vanishxo.game.interfaces import (
    GameMode,
    GamePhase,
    GameStatus,
    IPlayer,
    ScheduledTask,
)


@dataclass
class GameSession:
    """Board, move windows, turn and status of a single game.

    A session is never partially reset: the controller builds a new one
    through :meth:`create` and drops the old one.
    """

    mode: GameMode
    players: dict[Marker, IPlayer]
    board: Board = field(default_factory=Board)
    histories: dict[Marker, MoveHistory] = field(default_factory=dict)
    current_player: Marker = Marker.X
    status: GameStatus = field(default_factory=lambda: GameStatus.in_progress(Marker.X))
    phase: GamePhase = GamePhase.NOT_STARTED
    winning_line: Line | None = None
    move_count: int = 0
    pending_task: ScheduledTask | None = None

    @classmethod
    def create(cls, mode: GameMode, players: dict[Marker, IPlayer]) -> GameSession:
        session = cls(mode=mode, players=players)
        session.histories = {
            marker: MoveHistory(session.board, marker) for marker in Marker
        }
        return session

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_active(self) -> bool:
        return self.status.is_in_progress

    @property
    def current(self) -> IPlayer:
        return self.players[self.current_player]

    def history(self, marker: Marker) -> MoveHistory:
        return self.histories[marker]

    def moves_made(self, marker: Marker) -> int:
        """Total moves *marker* has played, evicted ones included."""
        # X moves first, so X is ahead by one after each of its turns.
        if marker == Marker.X:
            return (self.move_count + 1) // 2
        return self.move_count // 2

    # ── Deferred computer move ───────────────────────────────────────────

    def cancel_pending(self) -> None:
        if self.pending_task is not None:
            self.pending_task.cancel()
            self.pending_task = None
