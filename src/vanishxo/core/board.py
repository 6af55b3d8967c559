"""Board - marker placement on a 3x3 grid."""

from __future__ import annotations

from vanishxo.core.enums import Marker
from vanishxo.core.types import CELL_COUNT, WINNING_LINES, Cell, Line, make_index


class OccupiedCellError(ValueError):
    """Raised when placing a marker on a non-empty cell."""

    def __init__(self, index: Cell, occupant: Marker) -> None:
        super().__init__(f"Cell {index} is already occupied by {occupant}")
        self.index = index
        self.occupant = occupant


class Board:
    """Mutable 9-cell board. ``None`` marks an empty cell."""

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[Marker | None] = [None] * CELL_COUNT

    # -- Element access -----------------------------------------------------

    def cell_at(self, index: Cell) -> Marker | None:
        return self._cells[self._checked(index)]

    def __getitem__(self, index: Cell) -> Marker | None:
        return self.cell_at(index)

    def is_empty(self, index: Cell) -> bool:
        return self.cell_at(index) is None

    # -- Mutation -----------------------------------------------------------

    def place(self, index: Cell, marker: Marker) -> None:
        """Put *marker* on *index*; the cell must be empty."""
        occupant = self.cell_at(index)
        if occupant is not None:
            raise OccupiedCellError(index, occupant)
        self._cells[index] = marker

    def clear(self, index: Cell) -> None:
        self._cells[self._checked(index)] = None

    # -- Query helpers ------------------------------------------------------

    def cells(self) -> tuple[Marker | None, ...]:
        return tuple(self._cells)

    def empty_cells(self) -> list[Cell]:
        return [i for i, cell in enumerate(self._cells) if cell is None]

    def lines_matching(self, marker: Marker) -> list[Line]:
        """Winning lines whose three cells all hold *marker*, in scan order."""
        return [
            line
            for line in WINNING_LINES
            if all(self._cells[i] == marker for i in line)
        ]

    def is_full(self) -> bool:
        return all(cell is not None for cell in self._cells)

    def copy(self) -> Board:
        b = Board()
        b._cells = self._cells.copy()
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def from_string(cls, text: str) -> Board:
        """Build a board from 9 characters of ``X``, ``O`` and ``.``.

        Whitespace is ignored, so ``"X.O / ... / ..O"`` style layouts work.
        """
        chars = [c for c in text if not c.isspace() and c != "/"]
        if len(chars) != CELL_COUNT:
            raise ValueError(f"Expected {CELL_COUNT} cells, got {len(chars)}: {text!r}")
        b = cls()
        for i, c in enumerate(chars):
            if c in ".-_":
                continue
            try:
                b._cells[i] = Marker[c.upper()]
            except KeyError:
                raise ValueError(f"Invalid cell character: {c!r}") from None
        return b

    # -- Internal -----------------------------------------------------------

    @staticmethod
    def _checked(index: Cell) -> Cell:
        if not 0 <= index < CELL_COUNT:
            raise IndexError(f"Cell index out of range: {index}")
        return index

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(3):
            cells = (self._cells[make_index(row, col)] for col in range(3))
            rows.append(" ".join(str(c) if c is not None else "." for c in cells))
        return "\n".join(rows)
