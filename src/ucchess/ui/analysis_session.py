"""Best-move analysis orchestration for the UI thread."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from PyQt6.QtCore import QObject

from ucchess.core.move import Move
from ucchess.core.notation import Position, position_to_fen
from ucchess.core.rules import move_to_san
from ucchess.engine.protocol import (
    DEFAULT_SEARCH_DEPTH,
    EngineChannel,
    EngineReply,
    query_requests,
)
from ucchess.engine.uci_process import EngineUnavailable, UciEngineProcess

_LOGGER = logging.getLogger(__name__)

EngineFactory = Callable[[str, QObject | None], EngineChannel]


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Recommendation published for the latest query."""

    generation: int
    position: Position
    best_move: str | None
    san: str | None = None


def _default_engine_factory(command: str, parent: QObject | None) -> EngineChannel:
    return UciEngineProcess(command, parent)


class AnalysisCoordinator:
    """Feeds one long-lived engine with positions and publishes answers.

    Every :meth:`query` bumps ``generation``; a reply is published only when
    it carries the generation of the most recent query, so a slow answer for
    an earlier position never overwrites the recommendation for a later one.
    """

    __slots__ = (
        "__weakref__",
        "_on_best_move",
        "_on_query_started",
        "_on_unavailable",
        "_engine_factory",
        "_engine_command",
        "_parent",
        "_engine",
        "_depth",
        "_generation",
        "_pending_position",
        "_is_started",
        "_is_available",
        "_is_shutting_down",
    )

    def __init__(
        self,
        *,
        on_best_move: Callable[[AnalysisResult], None],
        on_query_started: Callable[[int], None] | None = None,
        on_unavailable: Callable[[str], None] | None = None,
        engine_command: str = "stockfish",
        depth: int = DEFAULT_SEARCH_DEPTH,
        engine_factory: EngineFactory | None = None,
        parent: QObject | None = None,
    ) -> None:
        self._on_best_move = on_best_move
        self._on_query_started = on_query_started
        self._on_unavailable = on_unavailable
        self._engine_factory = engine_factory or _default_engine_factory
        self._engine_command = engine_command
        self._parent = parent
        self._engine: EngineChannel | None = None
        self._depth = depth
        self._generation = 0
        self._pending_position: Position | None = None
        self._is_started = False
        self._is_available = False
        self._is_shutting_down = False

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_available(self) -> bool:
        return self._is_available

    @property
    def engine_command(self) -> str:
        return self._engine_command

    @property
    def depth(self) -> int:
        return self._depth

    def set_depth(self, depth: int) -> None:
        """Update search depth for subsequent queries."""
        if depth <= 0:
            raise ValueError("Analysis depth must be >= 1")
        self._depth = depth

    # ── Lifecycle ────────────────────────────────────────────────────────

    def setup(self) -> None:
        """Create and start the engine; failures leave the session usable."""
        if self._is_started:
            return
        self._is_shutting_down = False
        engine = self._engine_factory(self._engine_command, self._parent)
        engine.reply_ready.connect(self._on_engine_reply)
        engine.unavailable.connect(self._on_engine_unavailable)
        self._engine = engine
        self._is_started = True
        try:
            engine.start()
        except EngineUnavailable as exc:
            self._mark_unavailable(str(exc))
            return
        # A launch failure reported during start() already detached the engine.
        self._is_available = self._engine is engine

    def shutdown(self) -> None:
        """Stop the engine process; late replies are ignored."""
        if not self._is_started:
            return
        self._is_shutting_down = True
        self._pending_position = None
        self._is_available = False
        engine = self._engine
        self._engine = None
        if engine is not None:
            engine.shutdown()
        self._is_started = False

    def restart(self, engine_command: str | None = None) -> None:
        """Re-create the engine, e.g. after the engine path changed."""
        if engine_command is not None:
            self._engine_command = engine_command
        self.shutdown()
        self.setup()

    def new_game(self) -> None:
        """Forget the outstanding query and reset engine game state."""
        self._pending_position = None
        if self._engine is not None and self._is_available:
            self._engine.new_game()

    # ── Queries ──────────────────────────────────────────────────────────

    def query(self, position: Position) -> int:
        """Ask for the best move in *position*; returns the query generation."""
        self._generation += 1
        generation = self._generation
        self._pending_position = position
        if self._on_query_started is not None:
            self._on_query_started(generation)

        engine = self._engine
        if engine is None or not self._is_available or self._is_shutting_down:
            _LOGGER.debug("Engine unavailable; dropping query %d", generation)
            self._pending_position = None
            return generation

        try:
            if engine.is_searching:
                engine.stop_search()
            fen = position_to_fen(position)
            for request in query_requests(generation, fen, self._depth):
                engine.send(request)
        except EngineUnavailable as exc:
            self._mark_unavailable(str(exc))
        return generation

    # ── Engine callbacks ─────────────────────────────────────────────────

    def _on_engine_reply(self, reply_obj: object) -> None:
        if self._is_shutting_down:
            return
        if not isinstance(reply_obj, EngineReply):
            return
        if reply_obj.generation != self._generation:
            _LOGGER.debug(
                "Discarding stale reply for generation %s (current %d)",
                reply_obj.generation,
                self._generation,
            )
            return
        position = self._pending_position
        if position is None:
            return

        self._pending_position = None
        result = AnalysisResult(
            generation=reply_obj.generation,
            position=position,
            best_move=reply_obj.best_move,
            san=_best_move_san(position, reply_obj.best_move),
        )
        self._on_best_move(result)

    def _on_engine_unavailable(self, message: str) -> None:
        if self._is_shutting_down:
            return
        self._mark_unavailable(message)

    def _mark_unavailable(self, message: str) -> None:
        was_reported = self._engine is None and not self._is_available
        self._is_available = False
        self._pending_position = None
        engine = self._engine
        self._engine = None
        if engine is not None:
            engine.shutdown()
        if was_reported:
            return
        _LOGGER.warning("Analysis engine unavailable: %s", message)
        if self._on_unavailable is not None:
            self._on_unavailable(message)


def _best_move_san(position: Position, best_move: str | None) -> str | None:
    if best_move is None:
        return None
    try:
        return move_to_san(position, Move.from_uci(best_move))
    except ValueError:
        _LOGGER.debug("Engine move %s not playable in %s", best_move, position.fen)
        return None
