"""Game management layer — controller, players, session, state machine.

Quick start::

    from vanishxo.game import GameController, GameMode

    ctrl = GameController(GameMode.HUMAN_VS_COMPUTER)
    ctrl.events.on_status_changed.append(print)
    ctrl.submit_move(4)   # X takes the center, O replies immediately
"""

from vanishxo.game.controller import GameController, GameEvents
from vanishxo.game.interfaces import (
    GameMode,
    GamePhase,
    GameStatus,
    IGameController,
    IPlayer,
    IScheduler,
    MoveRejection,
    Outcome,
    ScheduledTask,
)
from vanishxo.game.player import ComputerPlayer, HumanPlayer
from vanishxo.game.session import GameSession

__all__ = [
    # Interfaces
    "GameMode",
    "GamePhase",
    "GameStatus",
    "IGameController",
    "IPlayer",
    "IScheduler",
    "MoveRejection",
    "Outcome",
    "ScheduledTask",
    # Concrete
    "ComputerPlayer",
    "GameController",
    "GameEvents",
    "GameSession",
    "HumanPlayer",
]
