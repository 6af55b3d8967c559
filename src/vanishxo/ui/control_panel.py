"""ControlPanel — mode selector and reset button."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QComboBox, QHBoxLayout, QLabel, QPushButton, QWidget

from vanishxo.game.interfaces import GameMode
from vanishxo.ui.strings import t

_MODES = (GameMode.HUMAN_VS_HUMAN, GameMode.HUMAN_VS_COMPUTER)


class ControlPanel(QWidget):
    """Mode combo box and a "new game" button.

    Signals:
        reset_clicked(): The user asked for a fresh game.
        mode_changed(GameMode): The user picked another mode.
    """

    reset_clicked = pyqtSignal()
    mode_changed = pyqtSignal(object)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(8)

        self._mode_label = QLabel()
        layout.addWidget(self._mode_label)

        self._mode_combo = QComboBox()
        self._mode_combo.addItems(["", ""])
        self._mode_combo.currentIndexChanged.connect(self._on_mode_index_changed)
        layout.addWidget(self._mode_combo, stretch=1)

        self._btn_reset = QPushButton()
        self._btn_reset.setMinimumHeight(32)
        self._btn_reset.clicked.connect(self.reset_clicked)
        layout.addWidget(self._btn_reset)

    def retranslate_ui(self) -> None:
        s = t()
        self._mode_label.setText(s.mode_label)
        self._mode_combo.setItemText(0, s.mode_human_vs_human)
        self._mode_combo.setItemText(1, s.mode_human_vs_computer)
        self._btn_reset.setText(s.btn_reset)

    @property
    def mode(self) -> GameMode:
        return _MODES[self._mode_combo.currentIndex()]

    def set_mode(self, mode: GameMode) -> None:
        """Select *mode* without emitting ``mode_changed``."""
        self._mode_combo.blockSignals(True)
        try:
            self._mode_combo.setCurrentIndex(_MODES.index(mode))
        finally:
            self._mode_combo.blockSignals(False)

    def _on_mode_index_changed(self, index: int) -> None:
        if 0 <= index < len(_MODES):
            self.mode_changed.emit(_MODES[index])
