"""TimelineStore — the canonical list of positions and the moves between them."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ucchess.core.move import Move
from ucchess.core.notation import Position, position_from_fen, starting_position
from ucchess.core.rules import apply_move, move_to_san, normalize_move

_LOGGER = logging.getLogger(__name__)


class OutOfRange(IndexError):
    """Raised when a timeline index falls outside ``[0, length - 1]``."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"timeline index {index} out of range [0, {length - 1}]")
        self.index = index
        self.length = length


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single applied move together with its notation and result."""

    move: Move
    san: str
    position_after: Position


class TimelineStore:
    """Owns positions ``P[0..n]`` and records ``M[1..n]``.

    ``len(positions) == len(records) + 1`` holds after every operation.
    The store has no cursor of its own: :meth:`append` receives the index of
    the position to play from and discards any history beyond it.
    """

    __slots__ = ("_positions", "_records")

    def __init__(self, initial: Position | None = None) -> None:
        self._positions: list[Position] = [initial or starting_position()]
        self._records: list[MoveRecord] = []

    # ── Mutation ─────────────────────────────────────────────────────────

    def reset(self, fen: str | None = None) -> Position:
        """Start a fresh timeline from *fen* (or the standard start)."""
        initial = position_from_fen(fen) if fen else starting_position()
        self._positions = [initial]
        self._records = []
        return initial

    def append(self, move: Move, *, at: int) -> MoveRecord:
        """Play *move* from ``P[at]``; raises ``IllegalMove`` on rejection.

        On success everything after ``P[at]`` is dropped before the new
        position is appended, so the new end index is ``at + 1``.
        """
        base = self.position_at(at)
        new_position = apply_move(base, move)
        played = normalize_move(base, move)
        record = MoveRecord(
            move=played,
            san=move_to_san(base, played),
            position_after=new_position,
        )

        dropped = len(self._records) - at
        if dropped > 0:
            _LOGGER.debug("Discarding %d future move(s) after index %d", dropped, at)
        del self._positions[at + 1 :]
        del self._records[at:]
        self._positions.append(new_position)
        self._records.append(record)
        return record

    # ── Queries ──────────────────────────────────────────────────────────

    def position_at(self, index: int) -> Position:
        if not 0 <= index < len(self._positions):
            raise OutOfRange(index, len(self._positions))
        return self._positions[index]

    def length(self) -> int:
        return len(self._positions)

    def __len__(self) -> int:
        return len(self._positions)

    @property
    def last_index(self) -> int:
        return len(self._positions) - 1

    def moves_so_far(self) -> tuple[Move, ...]:
        """All recorded moves, independent of where the cursor is."""
        return tuple(record.move for record in self._records)

    def records(self) -> tuple[MoveRecord, ...]:
        return tuple(self._records)

    def san_moves(self) -> list[str]:
        return [record.san for record in self._records]

    def record_at(self, ply: int) -> MoveRecord:
        """Record of the move that produced ``P[ply]`` (``ply >= 1``)."""
        if not 1 <= ply < len(self._positions):
            raise OutOfRange(ply, len(self._positions))
        return self._records[ply - 1]
