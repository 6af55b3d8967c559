"""Rule-based move selection for the computer opponent.

Priority, evaluated against the current board only:

1. complete one of our own lines;
2. block an opponent line;
3. take the center;
4. take a random free corner;
5. take a random free edge;
6. take any free cell.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from vanishxo.core.enums import Marker
from vanishxo.core.types import CENTER, CORNERS, EDGES, WINNING_LINES, Cell

if TYPE_CHECKING:
    from vanishxo.core.board import Board


def find_completing_cell(board: Board, marker: Marker) -> Cell | None:
    """First empty cell that would give *marker* a full line, in scan order."""
    for line in WINNING_LINES:
        cells = [board.cell_at(i) for i in line]
        if cells.count(marker) == 2 and cells.count(None) == 1:
            return line[cells.index(None)]
    return None


def choose_move(
    board: Board,
    own: Marker,
    opponent: Marker,
    rng: random.Random | None = None,
) -> Cell:
    """Pick the next cell for *own*.

    Raises:
        ValueError: if the board has no empty cell.
    """
    empty = board.empty_cells()
    if not empty:
        raise ValueError("No empty cell left to play")
    rng = rng or random.Random()

    winning = find_completing_cell(board, own)
    if winning is not None:
        return winning

    blocking = find_completing_cell(board, opponent)
    if blocking is not None:
        return blocking

    if board.is_empty(CENTER):
        return CENTER

    for group in (CORNERS, EDGES):
        free = [i for i in group if board.is_empty(i)]
        if free:
            return rng.choice(free)

    return rng.choice(empty)
