"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

import logging
import random

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import QLabel, QMainWindow, QVBoxLayout, QWidget

from vanishxo.game.controller import GameController
from vanishxo.game.interfaces import GameMode
from vanishxo.ui.board_widget import BoardWidget
from vanishxo.ui.control_panel import ControlPanel
from vanishxo.ui.game_sync import GameSync
from vanishxo.ui.qt_scheduler import QtScheduler
from vanishxo.ui.settings import AppSettings
from vanishxo.ui.strings import t

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for Vanishing XO."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self._settings = settings or AppSettings()
        self.setWindowTitle(t().window_title)
        self.setMinimumSize(360, 460)

        rng = random.Random(self._settings.ai_seed)
        self._controller = GameController(
            self._settings.mode,
            scheduler=QtScheduler(self),
            ai_delay_ms=self._settings.ai_delay_ms,
            rng=rng,
        )

        self._setup_ui()
        self._game_sync = GameSync(
            controller=self._controller,
            board=self._board,
            set_status=self._status_label.setText,
        )
        self._game_sync.attach()
        self._connect_signals()

        self._control_panel.set_mode(self._settings.mode)
        self._game_sync.render_session(self._controller.session)

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(10, 10, 10, 10)
        root.setSpacing(8)

        self._control_panel = ControlPanel()
        root.addWidget(self._control_panel)

        self._board = BoardWidget()
        self._board.set_show_vanish_hint(self._settings.show_vanish_hint)
        root.addWidget(self._board, stretch=1)

        self._status_label = QLabel()
        self._status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._status_label)

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        self._board.cell_selected.connect(self._on_cell_selected)
        self._control_panel.reset_clicked.connect(self._on_reset_requested)
        self._control_panel.mode_changed.connect(self._on_mode_changed)

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def board_widget(self) -> BoardWidget:
        return self._board

    @property
    def control_panel(self) -> ControlPanel:
        return self._control_panel

    @property
    def status_text(self) -> str:
        return self._status_label.text()

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_cell_selected(self, index: int) -> None:
        self._controller.submit_move(index)

    def _on_reset_requested(self) -> None:
        self._controller.reset()

    def _on_mode_changed(self, mode: GameMode) -> None:
        _LOGGER.info("Mode changed to %s", mode.name)
        self._settings.mode = mode
        self._controller.set_mode(mode)

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._controller.cancel_pending()
        self._game_sync.detach()
        super().closeEvent(event)
