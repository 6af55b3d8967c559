"""Core domain layer — board, markers and move windows, no external deps.

Quick start::

    from vanishxo.core import Board, Marker, MoveHistory

    board = Board()
    history = MoveHistory(board, Marker.X)
    for index in (0, 1, 2, 3):
        board.place(index, Marker.X)
        history.record_move(index)   # the 4th move clears cell 0
"""

from vanishxo.core.board import Board, OccupiedCellError
from vanishxo.core.enums import Marker
from vanishxo.core.history import MoveHistory
from vanishxo.core.types import (
    BOARD_SIZE,
    CELL_COUNT,
    CENTER,
    CORNERS,
    EDGES,
    WINNING_LINES,
    Cell,
    Line,
    column_of,
    is_valid_index,
    make_index,
    row_of,
)

__all__ = [
    # Enums
    "Marker",
    # Types / helpers
    "BOARD_SIZE",
    "CELL_COUNT",
    "CENTER",
    "CORNERS",
    "EDGES",
    "WINNING_LINES",
    "Cell",
    "Line",
    "column_of",
    "is_valid_index",
    "make_index",
    "row_of",
    # Domain objects
    "Board",
    "MoveHistory",
    "OccupiedCellError",
]
