"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from vanishxo.game.interfaces import IScheduler, ScheduledTask

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


def _is_ui_test(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _cleanup_qt_widgets(
    request: pytest.FixtureRequest,
) -> Iterator[None]:
    """Ensure UI tests do not leak top-level widgets into the next test."""
    if not _is_ui_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()


# ── Manual scheduler ─────────────────────────────────────────────────────────


class ManualTask(ScheduledTask):
    def __init__(self, delay_ms: int, callback: Callable[[], None]) -> None:
        self.delay_ms = delay_ms
        self.callback = callback
        self.cancelled = False
        self.fired = False

    @property
    def is_pending(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler(IScheduler):
    """Records deferred callbacks; tests fire them explicitly."""

    def __init__(self) -> None:
        self.tasks: list[ManualTask] = []

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ManualTask:
        task = ManualTask(delay_ms, callback)
        self.tasks.append(task)
        return task

    @property
    def pending(self) -> list[ManualTask]:
        return [task for task in self.tasks if task.is_pending]

    def run_pending(self) -> int:
        """Fire every pending task once; return how many ran."""
        ran = 0
        for task in self.pending:
            task.fired = True
            task.callback()
            ran += 1
        return ran

    def fire(self, task: ManualTask) -> None:
        """Fire *task* even if it was cancelled (simulates a late timer)."""
        task.fired = True
        task.callback()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()
