"""Tests for FEN parsing and the Position snapshot."""

import pytest

from ucchess.core.move import Move
from ucchess.core.notation import (
    STARTING_FEN,
    Position,
    position_from_fen,
    position_to_fen,
    starting_position,
)
from ucchess.core.rules import apply_move

_AFTER_E4 = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq - 0 1"


class TestFenRoundtrip:
    def test_starting_position(self) -> None:
        assert position_to_fen(position_from_fen(STARTING_FEN)) == STARTING_FEN

    def test_custom_position(self) -> None:
        fen = "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1"
        assert position_to_fen(position_from_fen(fen)) == fen

    def test_surrounding_whitespace_is_ignored(self) -> None:
        assert position_from_fen(f"  {STARTING_FEN}\n") == starting_position()

    def test_positions_reached_by_play_roundtrip(self) -> None:
        line = [
            "e2e4", "a7a6", "e4e5", "d7d5", "e5d6", "a6a5", "g1f3", "a5a4",
            "f1e2", "a4a3", "e1g1", "a3b2", "d6c7", "b2a1q", "c7d8q",
        ]  # fmt: skip
        position = starting_position()
        fens: dict[str, list[str]] = {}
        for uci in line:
            position = apply_move(position, Move.from_uci(uci))
            assert position_from_fen(position_to_fen(position)) == position
            fens[uci] = position.fen.split()

        assert fens["d7d5"][3] == "d6"
        assert fens["e5d6"][0].startswith("rnbqkbnr/1pp1pppp/p2P4/")
        assert fens["e1g1"][0].endswith("/RNBQ1RK1")
        assert fens["e1g1"][2] == "kq"
        assert fens["b2a1q"][0].endswith("/qNBQ1RK1")
        assert fens["c7d8q"][0].startswith("rnbQkbnr/")


class TestInvalidFen:
    @pytest.mark.parametrize(
        "fen",
        [
            "",
            "not a fen",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP w KQkq - 0 1",
        ],
    )
    def test_garbage_rejected(self, fen: str) -> None:
        with pytest.raises(ValueError):
            position_from_fen(fen)

    def test_missing_king_rejected(self) -> None:
        with pytest.raises(ValueError):
            position_from_fen("8/8/8/8/8/8/8/4K3 w - - 0 1")


class TestPosition:
    def test_side_to_move(self) -> None:
        assert starting_position().white_to_move
        assert not Position(_AFTER_E4).white_to_move

    def test_fullmove_number(self) -> None:
        fen = "rnbqkbnr/pppp1ppp/8/4p3/4P3/8/PPPP1PPP/RNBQKBNR w KQkq - 0 2"
        assert position_from_fen(fen).fullmove_number == 2

    def test_board_is_a_fresh_copy(self) -> None:
        position = starting_position()
        board = position.board()
        board.push_uci("e2e4")
        assert position.fen == STARTING_FEN

    def test_equality_by_fen(self) -> None:
        assert starting_position() == Position(STARTING_FEN)
