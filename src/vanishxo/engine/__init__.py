"""Computer opponent: heuristic move selection."""

from vanishxo.engine.heuristic import choose_move, find_completing_cell

__all__ = [
    "choose_move",
    "find_completing_cell",
]
