"""FEN parsing and serialization for :class:`Position` snapshots."""

from __future__ import annotations

from dataclasses import dataclass

import chess

STARTING_FEN = chess.STARTING_FEN


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable board snapshot identified by its canonical FEN."""

    fen: str

    def board(self) -> chess.Board:
        """Return a fresh, mutable ``chess.Board`` for this snapshot."""
        return chess.Board(self.fen)

    @property
    def white_to_move(self) -> bool:
        return self.fen.split()[1] == "w"

    @property
    def fullmove_number(self) -> int:
        return int(self.fen.split()[5])

    def __str__(self) -> str:
        return self.fen


def position_from_fen(fen: str) -> Position:
    """Parse and normalise a FEN string into a :class:`Position`."""
    try:
        board = chess.Board(fen.strip())
    except ValueError as exc:
        raise ValueError(f"Invalid FEN: {fen!r}") from exc
    if not board.is_valid():
        raise ValueError(f"Invalid FEN position ({board.status()!r}): {fen!r}")
    return Position(board.fen())


def position_to_fen(position: Position) -> str:
    """Serialize *position* to its canonical single-line FEN."""
    return position.fen


def starting_position() -> Position:
    return position_from_fen(STARTING_FEN)
