"""Timed auto-playback through the recorded timeline."""

from __future__ import annotations

import logging
from collections.abc import Callable

from PyQt6.QtCore import QObject, QTimer

from ucchess.game.navigation import NavigationController

_LOGGER = logging.getLogger(__name__)


class PlaybackScheduler:
    """Advances the cursor one step per tick until the end of the timeline.

    Uses a single-shot timer that is re-armed after every tick, so the
    cursor is always re-read right before deciding to advance.
    """

    DEFAULT_DELAY_MS = 1000

    __slots__ = (
        "__weakref__",
        "_navigation",
        "_on_state_changed",
        "_timer",
        "_delay_ms",
        "_running",
        "_is_shut_down",
    )

    def __init__(
        self,
        *,
        navigation: NavigationController,
        on_state_changed: Callable[[bool], None] | None = None,
        parent: QObject | None = None,
        delay_ms: int = DEFAULT_DELAY_MS,
    ) -> None:
        self._navigation = navigation
        self._on_state_changed = on_state_changed
        self._timer = QTimer(parent)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._on_tick)
        self._delay_ms = delay_ms
        self._running = False
        self._is_shut_down = False

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def delay_ms(self) -> int:
        return self._delay_ms

    def set_delay(self, delay_ms: int) -> None:
        """Change the tick interval (takes effect on the next tick)."""
        if delay_ms <= 0:
            raise ValueError("Playback delay must be positive")
        self._delay_ms = delay_ms

    def play(self) -> bool:
        """Start autoplay from the cursor. Returns False if nothing to play."""
        if self._is_shut_down or self._running:
            return False
        if self._navigation.at_end:
            return False
        self._set_running(True)
        self._timer.start(self._delay_ms)
        return True

    def pause(self) -> None:
        self._timer.stop()
        if self._running:
            self._set_running(False)

    def toggle(self) -> bool:
        if self._running:
            self.pause()
            return False
        return self.play()

    def shutdown(self) -> None:
        """Cancel any armed tick; no tick fires after this."""
        self.pause()
        self._is_shut_down = True

    def _on_tick(self) -> None:
        if self._is_shut_down or not self._running:
            return
        if not self._navigation.at_end:
            self._navigation.step_forward(manual=False)
        if self._navigation.at_end:
            _LOGGER.debug("Playback reached end at index %d", self._navigation.cursor)
            self._set_running(False)
            return
        self._timer.start(self._delay_ms)

    def _set_running(self, running: bool) -> None:
        self._running = running
        if self._on_state_changed is not None:
            self._on_state_changed(running)
