"""Core value types and the rules/codec adapters built on python-chess."""

from ucchess.core.move import Move
from ucchess.core.notation import (
    STARTING_FEN,
    Position,
    position_from_fen,
    position_to_fen,
    starting_position,
)
from ucchess.core.rules import (
    IllegalMove,
    apply_move,
    legal_moves,
    move_to_san,
    normalize_move,
)

__all__ = [
    "STARTING_FEN",
    "IllegalMove",
    "Move",
    "Position",
    "apply_move",
    "legal_moves",
    "move_to_san",
    "normalize_move",
    "position_from_fen",
    "position_to_fen",
    "starting_position",
]
