"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
from PyQt6.QtCore import QObject, pyqtSignal

from ucchess.engine.protocol import EngineReply, EngineRequest
from ucchess.engine.uci_process import EngineUnavailable

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


class FakeEngine(QObject):
    """In-memory stand-in for :class:`UciEngineProcess`."""

    reply_ready = pyqtSignal(object)
    unavailable = pyqtSignal(str)

    def __init__(
        self,
        command: str,
        parent: QObject | None = None,
        *,
        fail_start: bool = False,
        fail_launch: bool = False,
    ) -> None:
        super().__init__(parent)
        self.command = command
        self.fail_start = fail_start
        self.fail_launch = fail_launch
        self.commands: list[str] = []
        self.in_flight: list[int] = []
        self.started = False
        self.shutdown_calls = 0

    @property
    def is_running(self) -> bool:
        return self.started

    @property
    def is_searching(self) -> bool:
        return bool(self.in_flight)

    def start(self) -> None:
        if self.fail_start:
            raise EngineUnavailable(f"cannot start {self.command!r}")
        if self.fail_launch:
            self.unavailable.emit(f"cannot launch {self.command!r}")
            return
        self.started = True

    def send(self, request: EngineRequest) -> None:
        if not self.started:
            raise EngineUnavailable("not running")
        if request.is_search:
            self.in_flight.append(request.generation)
        self.commands.append(request.command)

    def stop_search(self) -> None:
        if self.in_flight:
            self.commands.append("stop")

    def new_game(self) -> None:
        self.commands.append("ucinewgame")

    def shutdown(self) -> None:
        self.shutdown_calls += 1
        self.started = False

    # ── Test helpers ─────────────────────────────────────────────────────

    def answer(self, best_move: str | None) -> None:
        """Emit the ``bestmove`` for the oldest outstanding search."""
        generation = self.in_flight.pop(0)
        self.reply_ready.emit(EngineReply(generation, best_move))

    def crash(self, message: str = "engine died") -> None:
        self.started = False
        self.in_flight.clear()
        self.unavailable.emit(message)


class FakeEngineFactory:
    """Engine factory recording every engine it creates."""

    def __init__(self) -> None:
        self.engines: list[FakeEngine] = []
        self.fail_start = False
        self.fail_launch = False

    def __call__(self, command: str, parent: QObject | None) -> FakeEngine:
        engine = FakeEngine(
            command,
            parent,
            fail_start=self.fail_start,
            fail_launch=self.fail_launch,
        )
        self.engines.append(engine)
        return engine

    @property
    def latest(self) -> FakeEngine:
        return self.engines[-1]


@pytest.fixture
def fake_engines() -> FakeEngineFactory:
    return FakeEngineFactory()


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _reset_language() -> Iterator[None]:
    """Reset shared i18n state between tests."""
    from ucchess.ui.i18n import set_language

    set_language("English")
    yield
    set_language("English")


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
