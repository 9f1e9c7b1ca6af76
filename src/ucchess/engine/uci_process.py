"""Qt wrapper around an external UCI engine process."""

from __future__ import annotations

import logging
import shlex
from collections import deque

from PyQt6.QtCore import QObject, QProcess, pyqtSignal

from ucchess.engine.protocol import (
    EngineReply,
    EngineRequest,
    is_bestmove,
    parse_bestmove,
)

_LOGGER = logging.getLogger(__name__)


class EngineUnavailable(RuntimeError):
    """Raised when no engine command is set or the engine is not running."""


class UciEngineProcess(QObject):
    """Owns one engine process and turns its stdout into :class:`EngineReply`.

    UCI answers every ``go`` with exactly one ``bestmove``, in order, so the
    generation of each search is queued when the ``go`` is written and popped
    when the matching ``bestmove`` line arrives.
    """

    reply_ready = pyqtSignal(object)  # EngineReply
    unavailable = pyqtSignal(str)

    _QUIT_TIMEOUT_MS = 1000

    def __init__(
        self, command: str = "stockfish", parent: QObject | None = None
    ) -> None:
        super().__init__(parent)
        self._command = command
        self._process: QProcess | None = None
        self._buffer = b""
        self._in_flight: deque[int] = deque()
        self._is_shutting_down = False
        self._reported_unavailable = False

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def command(self) -> str:
        return self._command

    @property
    def is_running(self) -> bool:
        return (
            self._process is not None
            and self._process.state() != QProcess.ProcessState.NotRunning
        )

    @property
    def is_searching(self) -> bool:
        return bool(self._in_flight)

    # ── Lifecycle ────────────────────────────────────────────────────────

    def start(self) -> None:
        """Launch the engine and queue the UCI handshake.

        Returns without waiting for the process; commands written while it is
        still starting are buffered by ``QProcess``. A binary that cannot be
        launched is reported through :attr:`unavailable`. Only an empty
        command raises :class:`EngineUnavailable`.
        """
        if self.is_running:
            return
        argv = shlex.split(self._command)
        if not argv:
            raise EngineUnavailable("No engine command configured")

        self._is_shutting_down = False
        self._reported_unavailable = False
        self._buffer = b""
        self._in_flight.clear()

        process = QProcess(self)
        process.setProgram(argv[0])
        process.setArguments(argv[1:])
        process.readyReadStandardOutput.connect(self._on_ready_read)
        process.errorOccurred.connect(self._on_error)
        process.finished.connect(self._on_finished)
        self._process = process

        process.start()
        # Some platforms report FailedToStart from inside start().
        if self._process is not process or not self.is_running:
            return

        _LOGGER.info("Starting engine %r", argv[0])
        self._write("uci")
        self._write("isready")

    def shutdown(self) -> None:
        """Ask the engine to quit, killing it if it does not exit in time."""
        if self._process is None:
            return
        self._is_shutting_down = True
        if self.is_running:
            self._write("stop")
            self._write("quit")
            if not self._process.waitForFinished(self._QUIT_TIMEOUT_MS):
                _LOGGER.warning("Engine did not quit in time; killing it")
                self._process.kill()
                self._process.waitForFinished(self._QUIT_TIMEOUT_MS)
        self._teardown()

    # ── Commands ─────────────────────────────────────────────────────────

    def send(self, request: EngineRequest) -> None:
        if not self.is_running:
            raise EngineUnavailable("Engine is not running")
        if request.is_search:
            self._in_flight.append(request.generation)
        self._write(request.command)

    def stop_search(self) -> None:
        """Interrupt the running search; its ``bestmove`` still arrives."""
        if self._in_flight and self.is_running:
            self._write("stop")

    def new_game(self) -> None:
        if not self.is_running:
            return
        self.stop_search()
        self._write("ucinewgame")
        self._write("isready")

    # ── Output handling ──────────────────────────────────────────────────

    def handle_line(self, line: str) -> None:
        """Process one line of engine output."""
        line = line.strip()
        if not line:
            return
        _LOGGER.debug("engine >> %s", line)
        if not is_bestmove(line):
            return

        generation = self._in_flight.popleft() if self._in_flight else None
        if generation is None:
            _LOGGER.debug("Unsolicited bestmove: %s", line)
        self.reply_ready.emit(EngineReply(generation, parse_bestmove(line)))

    def _on_ready_read(self) -> None:
        if self._process is None:
            return
        self._buffer += self._process.readAllStandardOutput().data()
        *lines, self._buffer = self._buffer.split(b"\n")
        for raw in lines:
            self.handle_line(raw.decode("utf-8", errors="replace"))

    def _on_error(self, error: QProcess.ProcessError) -> None:
        if self._is_shutting_down:
            return
        message = self._process.errorString() if self._process else error.name
        if error == QProcess.ProcessError.FailedToStart:
            self._in_flight.clear()
            self._report_unavailable(f"Failed to start engine: {message}")
            return
        self._report_unavailable(f"Engine error: {message}")

    def _on_finished(self, exit_code: int, _status: QProcess.ExitStatus) -> None:
        if self._is_shutting_down:
            return
        self._in_flight.clear()
        self._report_unavailable(f"Engine exited unexpectedly (code {exit_code})")

    # ── Internal helpers ─────────────────────────────────────────────────

    def _write(self, command: str) -> None:
        assert self._process is not None
        _LOGGER.debug("engine << %s", command)
        self._process.write(f"{command}\n".encode())

    def _report_unavailable(self, message: str) -> None:
        if self._reported_unavailable:
            return
        self._reported_unavailable = True
        _LOGGER.warning("%s", message)
        self.unavailable.emit(message)

    def _teardown(self) -> None:
        process = self._process
        self._process = None
        self._in_flight.clear()
        self._buffer = b""
        if process is None:
            return
        if process.state() != QProcess.ProcessState.NotRunning:
            process.kill()
            process.waitForFinished(self._QUIT_TIMEOUT_MS)
        process.deleteLater()
