"""Concrete player implementations."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from vanishxo.core.enums import Marker
from vanishxo.engine.heuristic import choose_move
from vanishxo.game.interfaces import IPlayer

if TYPE_CHECKING:
    from vanishxo.core.board import Board
    from vanishxo.core.types import Cell


class HumanPlayer(IPlayer):
    """A human participant — moves come from the UI.

    ``choose_move`` returns ``None`` because humans select cells
    interactively through ``GameController.submit_move``.
    """

    __slots__ = ("_marker", "_name")

    def __init__(self, marker: Marker, name: str = "") -> None:
        self._marker = marker
        self._name = name or f"Player {marker}"

    @property
    def marker(self) -> Marker:
        return self._marker

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def choose_move(self, board: Board) -> Cell | None:
        return None


class ComputerPlayer(IPlayer):
    """Heuristic opponent backed by :func:`vanishxo.engine.choose_move`.

    Args:
        marker: Marker the computer plays.
        name: Display name.
        rng: Source of randomness for corner/edge picks.  Pass a seeded
            ``random.Random`` for reproducible games.
    """

    __slots__ = ("_marker", "_name", "_rng")

    def __init__(
        self,
        marker: Marker,
        name: str = "Computer",
        rng: random.Random | None = None,
    ) -> None:
        self._marker = marker
        self._name = name
        self._rng = rng or random.Random()

    @property
    def marker(self) -> Marker:
        return self._marker

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    def choose_move(self, board: Board) -> Cell:
        return choose_move(board, self._marker, self._marker.opposite, self._rng)
