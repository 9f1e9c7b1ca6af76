"""Tests for the python-chess rules adapter."""

import pytest

from ucchess.core.move import Move
from ucchess.core.notation import STARTING_FEN, position_from_fen, starting_position
from ucchess.core.rules import (
    IllegalMove,
    apply_move,
    is_game_over,
    legal_moves,
    move_to_san,
    normalize_move,
    outcome_text,
)

_PROMOTION_FEN = "8/4P3/8/8/8/8/k7/4K3 w - - 0 1"
_FOOLS_MATE = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"
_STALEMATE = "7k/5Q2/6K1/8/8/8/8/8 b - - 0 1"


class TestApplyMove:
    def test_legal_move(self) -> None:
        after = apply_move(starting_position(), Move("e2", "e4"))
        assert after.fen == "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq - 0 1"

    def test_input_position_unchanged(self) -> None:
        position = starting_position()
        apply_move(position, Move("e2", "e4"))
        assert position.fen == STARTING_FEN

    def test_illegal_move_raises(self) -> None:
        position = starting_position()
        with pytest.raises(IllegalMove) as info:
            apply_move(position, Move("e2", "e5"))
        assert info.value.move == Move("e2", "e5")
        assert info.value.position == position

    def test_moving_opponent_piece_is_illegal(self) -> None:
        with pytest.raises(IllegalMove):
            apply_move(starting_position(), Move("e7", "e5"))

    def test_null_move_is_illegal(self) -> None:
        with pytest.raises(IllegalMove):
            apply_move(starting_position(), Move("e2", "e2"))

    def test_illegal_move_is_value_error(self) -> None:
        assert issubclass(IllegalMove, ValueError)


class TestPromotion:
    def test_default_promotion_is_queen(self) -> None:
        position = position_from_fen(_PROMOTION_FEN)
        after = apply_move(position, Move("e7", "e8"))
        assert after.board().piece_at(60).symbol() == "Q"

    def test_explicit_underpromotion(self) -> None:
        position = position_from_fen(_PROMOTION_FEN)
        after = apply_move(position, Move("e7", "e8", "n"))
        assert after.board().piece_at(60).symbol() == "N"

    def test_promotion_suffix_ignored_on_regular_move(self) -> None:
        after = apply_move(starting_position(), Move("e2", "e4", "q"))
        assert after == apply_move(starting_position(), Move("e2", "e4"))

    def test_normalize_move(self) -> None:
        assert normalize_move(starting_position(), Move("g1", "f3", "q")) == Move(
            "g1", "f3"
        )
        position = position_from_fen(_PROMOTION_FEN)
        assert normalize_move(position, Move("e7", "e8")) == Move("e7", "e8", "q")


class TestSan:
    def test_pawn_push(self) -> None:
        assert move_to_san(starting_position(), Move("e2", "e4")) == "e4"

    def test_knight_move(self) -> None:
        assert move_to_san(starting_position(), Move("g1", "f3")) == "Nf3"

    def test_promotion(self) -> None:
        position = position_from_fen(_PROMOTION_FEN)
        assert move_to_san(position, Move("e7", "e8")) == "e8=Q"

    def test_illegal(self) -> None:
        with pytest.raises(IllegalMove):
            move_to_san(starting_position(), Move("e1", "e2"))


class TestOutcome:
    def test_starting_position_has_twenty_moves(self) -> None:
        assert len(legal_moves(starting_position())) == 20

    def test_ongoing_game(self) -> None:
        assert not is_game_over(starting_position())
        assert outcome_text(starting_position()) is None

    def test_checkmate(self) -> None:
        position = position_from_fen(_FOOLS_MATE)
        assert is_game_over(position)
        assert legal_moves(position) == []
        assert outcome_text(position) == "0-1"

    def test_stalemate(self) -> None:
        position = position_from_fen(_STALEMATE)
        assert outcome_text(position) == "1/2-1/2"
