"""Visual theme constants and QSS styles for Vanishing XO."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

from vanishxo.core.enums import Marker


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the board cells."""

    cell: QColor
    cell_border: QColor
    x_marker: QColor
    o_marker: QColor
    win_highlight: QColor  # cells of the winning line
    vanish_alpha: int  # 0..255 opacity of the marker about to vanish

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            cell=QColor(55, 65, 81),  # slate
            cell_border=QColor(75, 85, 99),
            x_marker=QColor(96, 165, 250),  # blue
            o_marker=QColor(248, 113, 113),  # red
            win_highlight=QColor(16, 185, 129),  # emerald
            vanish_alpha=90,
        )

    def marker_color(self, marker: Marker, *, fading: bool = False) -> QColor:
        color = QColor(self.x_marker if marker == Marker.X else self.o_marker)
        if fading:
            color.setAlpha(self.vanish_alpha)
        return color


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #1f2937;
}

QLabel {
    color: #e0e0e0;
    font-family: "Helvetica Neue", sans-serif;
    font-size: 15px;
}

QComboBox {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 4px 8px;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}
QPushButton:disabled {
    color: #666;
    background: #2b2b2b;
}
"""
