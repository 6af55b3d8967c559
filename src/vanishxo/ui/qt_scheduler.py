"""QTimer-backed scheduler for deferred computer moves."""

from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import QObject, QTimer

from vanishxo.game.interfaces import IScheduler, ScheduledTask


class _TimerTask(ScheduledTask):
    """Single-shot QTimer wrapped as a cancellable handle."""

    __slots__ = ("_timer", "_callback", "_pending")

    def __init__(
        self,
        parent: QObject | None,
        delay_ms: int,
        callback: Callable[[], None],
    ) -> None:
        self._callback = callback
        self._pending = True
        self._timer = QTimer(parent)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._fire)
        self._timer.start(max(0, delay_ms))

    @property
    def is_pending(self) -> bool:
        return self._pending

    def cancel(self) -> None:
        if not self._pending:
            return
        self._pending = False
        self._timer.stop()
        self._timer.deleteLater()

    def _fire(self) -> None:
        if not self._pending:
            return
        self._pending = False
        self._timer.deleteLater()
        self._callback()


class QtScheduler(IScheduler):
    """Runs callbacks on the Qt event loop of the thread owning *parent*."""

    __slots__ = ("_parent",)

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        return _TimerTask(self._parent, delay_ms, callback)
