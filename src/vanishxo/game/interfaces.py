"""Abstract interfaces and value types for the game layer.

Follows Dependency Inversion: the high-level GameController depends on
these ABCs, not on concrete players or on the Qt timer machinery.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from vanishxo.core.enums import Marker

if TYPE_CHECKING:
    from vanishxo.core.board import Board
    from vanishxo.core.types import Cell


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game session."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    THINKING = auto()  # computer move is scheduled
    GAME_OVER = auto()


class GameMode(IntEnum):
    """Who controls the O marker."""

    HUMAN_VS_HUMAN = auto()
    HUMAN_VS_COMPUTER = auto()


class Outcome(IntEnum):
    IN_PROGRESS = 0
    WON = 1
    DRAW = 2


class MoveRejection(IntEnum):
    """Why a submitted move was ignored."""

    GAME_NOT_ACTIVE = auto()
    OUT_OF_RANGE = auto()
    OCCUPIED_CELL = auto()
    NOT_YOUR_TURN = auto()


@dataclass(frozen=True, slots=True)
class GameStatus:
    """``InProgress(player)``, ``Won(player)`` or ``Draw``."""

    outcome: Outcome
    player: Marker | None = None

    @classmethod
    def in_progress(cls, player: Marker) -> GameStatus:
        return cls(Outcome.IN_PROGRESS, player)

    @classmethod
    def won(cls, player: Marker) -> GameStatus:
        return cls(Outcome.WON, player)

    @classmethod
    def draw(cls) -> GameStatus:
        return cls(Outcome.DRAW)

    @property
    def is_in_progress(self) -> bool:
        return self.outcome == Outcome.IN_PROGRESS

    @property
    def is_over(self) -> bool:
        return self.outcome != Outcome.IN_PROGRESS

    @property
    def winner(self) -> Marker | None:
        return self.player if self.outcome == Outcome.WON else None

    def __str__(self) -> str:
        if self.outcome == Outcome.IN_PROGRESS:
            return f"InProgress({self.player})"
        if self.outcome == Outcome.WON:
            return f"Won({self.player})"
        return "Draw"


# ── Deferred tasks ───────────────────────────────────────────────────────────


class ScheduledTask(ABC):
    """Handle to a one-shot deferred callback."""

    @abstractmethod
    def cancel(self) -> None:
        """Prevent the callback from running. Safe to call repeatedly."""

    @property
    @abstractmethod
    def is_pending(self) -> bool:
        """True until the callback has fired or was cancelled."""


class IScheduler(ABC):
    """Runs callbacks later on the owning (UI) thread."""

    @abstractmethod
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        """Schedule *callback* once after *delay_ms* milliseconds."""


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant (human or computer)."""

    @property
    @abstractmethod
    def marker(self) -> Marker: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def choose_move(self, board: Board) -> Cell | None:
        """Return the cell to play, or ``None`` when moves come from the UI."""


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(self, mode: GameMode | None = None) -> None:
        """Discard the current session and start a fresh one."""

    @abstractmethod
    def submit_move(self, index: Cell) -> bool:
        """Submit a human move. Returns True if applied."""

    @abstractmethod
    def reset(self) -> None:
        """Start over in the current mode."""

    @abstractmethod
    def set_mode(self, mode: GameMode) -> None:
        """Switch mode; always starts a new game."""
