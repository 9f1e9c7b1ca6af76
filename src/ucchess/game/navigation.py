"""NavigationController — maps user intent onto the timeline and its cursor.

Emits events via simple callbacks so the session / UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from ucchess.core.move import Move
from ucchess.core.notation import Position
from ucchess.core.rules import IllegalMove
from ucchess.game.timeline import MoveRecord, TimelineStore

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

CursorCallback = Callable[[int, Position], None]  # cursor, position
MovePlayedCallback = Callable[[MoveRecord, int], None]  # record, cursor
IllegalMoveCallback = Callable[[Move, str], None]  # move, reason
ResetCallback = Callable[[Position], None]


@dataclass
class NavigationEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_cursor_changed: list[CursorCallback] = field(default_factory=list)
    on_move_played: list[MovePlayedCallback] = field(default_factory=list)
    on_manual_navigation: list[Callable[[], None]] = field(default_factory=list)
    on_illegal_move: list[IllegalMoveCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class NavigationController:
    """Owns the cursor over a :class:`TimelineStore`.

    Boundary requests (stepping past either end, jumping outside the
    timeline) are refused or clamped; they never raise.  Every method takes
    ``manual``: manual calls notify ``on_manual_navigation`` first so that
    autoplay can be pre-empted, while the playback scheduler passes
    ``manual=False``.
    """

    __slots__ = ("_store", "_cursor", "events")

    def __init__(self, store: TimelineStore | None = None) -> None:
        self._store = store or TimelineStore()
        self._cursor = self._store.last_index
        self.events = NavigationEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def store(self) -> TimelineStore:
        return self._store

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def position(self) -> Position:
        return self._store.position_at(self._cursor)

    @property
    def at_start(self) -> bool:
        return self._cursor == 0

    @property
    def at_end(self) -> bool:
        return self._cursor == self._store.last_index

    def last_move(self) -> Move | None:
        """Move that led to the displayed position, if any."""
        if self._cursor == 0:
            return None
        return self._store.record_at(self._cursor).move

    # ── Navigation ───────────────────────────────────────────────────────

    def step_back(self, *, manual: bool = True) -> bool:
        self._notify_manual(manual)
        if self._cursor <= 0:
            return False
        return self._move_cursor(self._cursor - 1)

    def step_forward(self, *, manual: bool = True) -> bool:
        self._notify_manual(manual)
        if self._cursor >= self._store.last_index:
            return False
        return self._move_cursor(self._cursor + 1)

    def jump_to(self, index: int, *, manual: bool = True) -> bool:
        self._notify_manual(manual)
        clamped = max(0, min(index, self._store.last_index))
        if clamped != index:
            _LOGGER.debug("Clamped jump target %d to %d", index, clamped)
        if clamped == self._cursor:
            return False
        return self._move_cursor(clamped)

    def jump_to_start(self, *, manual: bool = True) -> bool:
        return self.jump_to(0, manual=manual)

    def jump_to_end(self, *, manual: bool = True) -> bool:
        return self.jump_to(self._store.last_index, manual=manual)

    def play_move(self, move: Move, *, manual: bool = True) -> bool:
        """Play *move* from the cursor. Returns True if legal and applied."""
        self._notify_manual(manual)
        try:
            record = self._store.append(move, at=self._cursor)
        except IllegalMove as exc:
            _LOGGER.warning("Illegal move %s rejected: %s", move.uci, exc)
            for cb in self.events.on_illegal_move:
                cb(move, exc.reason)
            return False

        self._cursor = self._store.last_index
        for cb in self.events.on_move_played:
            cb(record, self._cursor)
        self._emit_cursor()
        return True

    def new_game(self, fen: str | None = None) -> Position:
        """Replace the timeline with a fresh one; raises ValueError on bad FEN."""
        self._notify_manual(True)
        initial = self._store.reset(fen)
        self._cursor = 0
        for cb in self.events.on_reset:
            cb(initial)
        self._emit_cursor()
        return initial

    # ── Internal helpers ─────────────────────────────────────────────────

    def _move_cursor(self, index: int) -> bool:
        self._cursor = index
        self._emit_cursor()
        return True

    def _notify_manual(self, manual: bool) -> None:
        if not manual:
            return
        for cb in self.events.on_manual_navigation:
            cb()

    def _emit_cursor(self) -> None:
        position = self._store.position_at(self._cursor)
        for cb in self.events.on_cursor_changed:
            cb(self._cursor, position)
