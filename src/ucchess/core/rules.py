"""Rules adapter over ``python-chess``.

Stateless helpers: every call builds its own board from the position's FEN,
so positions stay immutable and results are deterministic.
"""

from __future__ import annotations

import chess

from ucchess.core.move import Move
from ucchess.core.notation import Position

DEFAULT_PROMOTION = "q"


class IllegalMove(ValueError):
    """Raised when a candidate move is not legal in the given position."""

    def __init__(self, move: Move, position: Position, reason: str = "illegal") -> None:
        super().__init__(f"{reason} move {move.uci} in {position.fen}")
        self.move = move
        self.position = position
        self.reason = reason


def _needs_promotion(board: chess.Board, move: Move) -> bool:
    piece = board.piece_at(chess.parse_square(move.from_square))
    if piece is None or piece.piece_type != chess.PAWN:
        return False
    target_rank = chess.square_rank(chess.parse_square(move.to_square))
    return target_rank == (7 if piece.color == chess.WHITE else 0)


def to_chess_move(board: chess.Board, move: Move) -> chess.Move:
    """Convert *move* to a ``chess.Move``, defaulting promotion to queen."""
    # Promotion is only meaningful for a pawn reaching the last rank.
    if not _needs_promotion(board, move):
        promotion = None
    else:
        promotion = move.promotion or DEFAULT_PROMOTION
    uci = f"{move.from_square}{move.to_square}{promotion or ''}"
    try:
        return chess.Move.from_uci(uci)
    except ValueError as exc:
        raise IllegalMove(move, Position(board.fen()), "malformed") from exc


def from_chess_move(move: chess.Move) -> Move:
    return Move.from_uci(move.uci())


def normalize_move(position: Position, move: Move) -> Move:
    """Return *move* with its promotion field resolved against *position*."""
    return from_chess_move(to_chess_move(position.board(), move))


def apply_move(position: Position, move: Move) -> Position:
    """Return the position reached by playing *move* from *position*."""
    board = position.board()
    candidate = to_chess_move(board, move)
    if not board.is_legal(candidate):
        raise IllegalMove(move, position)
    board.push(candidate)
    return Position(board.fen())


def move_to_san(position: Position, move: Move) -> str:
    """Standard algebraic notation for a legal *move* in *position*."""
    board = position.board()
    candidate = to_chess_move(board, move)
    if not board.is_legal(candidate):
        raise IllegalMove(move, position)
    return board.san(candidate)


def legal_moves(position: Position) -> list[Move]:
    return [from_chess_move(m) for m in position.board().legal_moves]


def is_game_over(position: Position) -> bool:
    return position.board().is_game_over()


def outcome_text(position: Position) -> str | None:
    """Return a PGN-style result token ("1-0", "1/2-1/2"...) or ``None``."""
    outcome = position.board().outcome()
    if outcome is None:
        return None
    return outcome.result()
