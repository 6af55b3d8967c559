"""MoveHistory - per-player FIFO window of active markers."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator

from vanishxo.core.board import Board
from vanishxo.core.enums import Marker
from vanishxo.core.types import Cell

_LOGGER = logging.getLogger(__name__)


class MoveHistory:
    """Ordered record of one player's markers still on the board.

    Holds at most :attr:`CAPACITY` indices.  Recording a move beyond that
    evicts the oldest index and clears its cell on the shared board, so the
    board and the histories never disagree about occupancy.
    """

    CAPACITY = 3

    __slots__ = ("_board", "_marker", "_moves")

    def __init__(self, board: Board, marker: Marker) -> None:
        self._board = board
        self._marker = marker
        self._moves: deque[Cell] = deque()

    @property
    def marker(self) -> Marker:
        return self._marker

    @property
    def moves(self) -> tuple[Cell, ...]:
        """Oldest first."""
        return tuple(self._moves)

    def record_move(self, index: Cell) -> Cell | None:
        """Append *index*; return the evicted index, if any."""
        self._moves.append(index)
        if len(self._moves) <= self.CAPACITY:
            return None

        evicted = self._moves.popleft()
        self._board.clear(evicted)
        _LOGGER.debug("%s marker at %d vanished", self._marker, evicted)
        return evicted

    def next_to_evict(self) -> Cell | None:
        """Index that vanishes on this player's next move (display hint)."""
        if len(self._moves) == self.CAPACITY:
            return self._moves[0]
        return None

    def __len__(self) -> int:
        return len(self._moves)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._moves)

    def __contains__(self, index: object) -> bool:
        return index in self._moves

    def __repr__(self) -> str:
        return f"MoveHistory({self._marker}, {list(self._moves)})"
