"""ReplaySession — wires navigation, autoplay and analysis together."""

from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import QObject

from ucchess.core.notation import Position
from ucchess.engine.protocol import DEFAULT_SEARCH_DEPTH
from ucchess.game.navigation import NavigationController
from ucchess.game.timeline import MoveRecord
from ucchess.ui.analysis_session import (
    AnalysisCoordinator,
    AnalysisResult,
    EngineFactory,
)
from ucchess.ui.playback import PlaybackScheduler


class ReplaySession:
    """Owns one game timeline plus its playback timer and analysis engine.

    Side-effect rules:

    * any manual navigation (including playing a move) pauses autoplay;
    * every newly played move is sent for analysis;
    * plain navigation is analysed only when ``analyze_on_navigation`` is on.
    """

    __slots__ = (
        "__weakref__",
        "navigation",
        "playback",
        "analysis",
        "_analyze_on_navigation",
        "_last_query_position",
    )

    def __init__(
        self,
        *,
        on_best_move: Callable[[AnalysisResult], None],
        on_query_started: Callable[[int], None] | None = None,
        on_engine_unavailable: Callable[[str], None] | None = None,
        on_playback_changed: Callable[[bool], None] | None = None,
        engine_command: str = "stockfish",
        depth: int = DEFAULT_SEARCH_DEPTH,
        delay_ms: int = PlaybackScheduler.DEFAULT_DELAY_MS,
        analyze_on_navigation: bool = False,
        navigation: NavigationController | None = None,
        engine_factory: EngineFactory | None = None,
        parent: QObject | None = None,
    ) -> None:
        self.navigation = navigation or NavigationController()
        self.playback = PlaybackScheduler(
            navigation=self.navigation,
            on_state_changed=on_playback_changed,
            parent=parent,
            delay_ms=delay_ms,
        )
        self.analysis = AnalysisCoordinator(
            on_best_move=on_best_move,
            on_query_started=on_query_started,
            on_unavailable=on_engine_unavailable,
            engine_command=engine_command,
            depth=depth,
            engine_factory=engine_factory,
            parent=parent,
        )
        self._analyze_on_navigation = analyze_on_navigation
        self._last_query_position: Position | None = None

        events = self.navigation.events
        events.on_manual_navigation.append(self.playback.pause)
        events.on_move_played.append(self._on_move_played)
        events.on_cursor_changed.append(self._on_cursor_changed)
        events.on_reset.append(self._on_reset)

    # ── Lifecycle ────────────────────────────────────────────────────────

    def setup(self) -> None:
        self.analysis.setup()

    def shutdown(self) -> None:
        """Cancel autoplay and stop the engine."""
        self.playback.shutdown()
        self.analysis.shutdown()

    # ── Settings ─────────────────────────────────────────────────────────

    @property
    def analyze_on_navigation(self) -> bool:
        return self._analyze_on_navigation

    def set_analyze_on_navigation(self, enabled: bool) -> None:
        self._analyze_on_navigation = enabled

    # ── Navigation event handlers ────────────────────────────────────────

    def _on_move_played(self, record: MoveRecord, _cursor: int) -> None:
        self._query(record.position_after)

    def _on_cursor_changed(self, _cursor: int, position: Position) -> None:
        if not self._analyze_on_navigation:
            return
        # play_move has already queried this position.
        if position == self._last_query_position:
            return
        self._query(position)

    def _on_reset(self, _position: Position) -> None:
        self._last_query_position = None
        self.analysis.new_game()

    def _query(self, position: Position) -> None:
        self._last_query_position = position
        self.analysis.query(position)
