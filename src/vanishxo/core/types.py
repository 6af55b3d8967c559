"""Cell indices, winning lines and helpers for the 3x3 grid.

Cells are numbered 0..8 row by row::

    0 1 2
    3 4 5
    6 7 8
"""

from __future__ import annotations

Cell = int
Line = tuple[int, int, int]

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# Scan order: rows, then columns, then diagonals.
WINNING_LINES: tuple[Line, ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)

CENTER: Cell = 4
CORNERS: tuple[Cell, ...] = (0, 2, 6, 8)
EDGES: tuple[Cell, ...] = (1, 3, 5, 7)


def is_valid_index(index: object) -> bool:
    """True for an ``int`` in ``0..8`` (bools excluded)."""
    return isinstance(index, int) and not isinstance(index, bool) and (
        0 <= index < CELL_COUNT
    )


def row_of(index: Cell) -> int:
    return index // BOARD_SIZE


def column_of(index: Cell) -> int:
    return index % BOARD_SIZE


def make_index(row: int, column: int) -> Cell:
    return row * BOARD_SIZE + column
