"""BoardWidget — 3x3 grid of clickable cells."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QColor, QFont
from PyQt6.QtWidgets import QGridLayout, QPushButton, QSizePolicy, QWidget

from vanishxo.core.enums import Marker
from vanishxo.core.types import BOARD_SIZE, CELL_COUNT, Cell, Line, column_of, row_of
from vanishxo.ui.styles.theme import BoardTheme


def _rgba(color: QColor) -> str:
    return f"rgba({color.red()}, {color.green()}, {color.blue()}, {color.alpha()})"


class BoardWidget(QWidget):
    """Renders markers pushed by the game layer; never decides anything.

    Signals:
        cell_selected(int): A cell was clicked.
    """

    cell_selected = pyqtSignal(int)

    def __init__(
        self,
        parent: QWidget | None = None,
        theme: BoardTheme | None = None,
    ) -> None:
        super().__init__(parent)
        self._theme = theme or BoardTheme.default()
        self._markers: list[Marker | None] = [None] * CELL_COUNT
        self._fading: dict[Marker, Cell] = {}
        self._highlighted: frozenset[Cell] = frozenset()
        self._show_vanish_hint = True
        self._buttons: list[QPushButton] = []
        self._setup_ui()

    def _setup_ui(self) -> None:
        grid = QGridLayout(self)
        grid.setSpacing(6)
        grid.setContentsMargins(6, 6, 6, 6)

        font = QFont()
        font.setPointSize(36)
        font.setBold(True)

        for index in range(CELL_COUNT):
            btn = QPushButton()
            btn.setFont(font)
            btn.setMinimumSize(96, 96)
            btn.setSizePolicy(
                QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding
            )
            btn.clicked.connect(
                lambda _checked=False, i=index: self.cell_selected.emit(i)
            )
            grid.addWidget(btn, row_of(index), column_of(index))
            self._buttons.append(btn)

        for i in range(BOARD_SIZE):
            grid.setRowStretch(i, 1)
            grid.setColumnStretch(i, 1)

        self._refresh_all()

    # ── Rendering API ────────────────────────────────────────────────────

    def set_cell(self, index: Cell, marker: Marker | None) -> None:
        self._markers[index] = marker
        if marker is None:
            self._fading = {m: i for m, i in self._fading.items() if i != index}
        self._refresh(index)

    def set_vanish_hint(self, owner: Marker, index: Cell | None) -> None:
        """Mark *owner*'s oldest marker as about to vanish (or clear it)."""
        previous = self._fading.pop(owner, None)
        if index is not None:
            self._fading[owner] = index
        for i in {previous, index} - {None}:
            self._refresh(i)

    def set_winning_line(self, line: Line | None) -> None:
        self._highlighted = frozenset(line or ())
        self._refresh_all()

    def set_show_vanish_hint(self, enabled: bool) -> None:
        self._show_vanish_hint = enabled
        self._refresh_all()

    def set_interactive(self, enabled: bool) -> None:
        for btn in self._buttons:
            btn.setEnabled(enabled)

    def reset(self) -> None:
        self._markers = [None] * CELL_COUNT
        self._fading.clear()
        self._highlighted = frozenset()
        self._refresh_all()

    # ── Queries (used by tests) ──────────────────────────────────────────

    def button(self, index: Cell) -> QPushButton:
        return self._buttons[index]

    def cell_text(self, index: Cell) -> str:
        return self._buttons[index].text()

    def is_fading(self, index: Cell) -> bool:
        return self._show_vanish_hint and index in self._fading.values()

    def is_highlighted(self, index: Cell) -> bool:
        return index in self._highlighted

    # ── Internal ─────────────────────────────────────────────────────────

    def _refresh_all(self) -> None:
        for index in range(CELL_COUNT):
            self._refresh(index)

    def _refresh(self, index: Cell) -> None:
        theme = self._theme
        marker = self._markers[index]
        btn = self._buttons[index]
        btn.setText(str(marker) if marker is not None else "")

        background = theme.win_highlight if index in self._highlighted else theme.cell
        foreground = (
            theme.marker_color(marker, fading=self.is_fading(index))
            if marker is not None
            else theme.cell
        )
        btn.setStyleSheet(
            "QPushButton {"
            f" background: {_rgba(background)};"
            f" color: {_rgba(foreground)};"
            f" border: 2px solid {_rgba(theme.cell_border)};"
            " border-radius: 8px;"
            " }"
        )
