"""Tests for the Move value object."""

import pytest

from ucchess.core.move import Move


class TestMove:
    def test_uci_without_promotion(self) -> None:
        assert Move("e2", "e4").uci == "e2e4"

    def test_uci_with_promotion(self) -> None:
        assert Move("e7", "e8", "q").uci == "e7e8q"

    def test_str_is_uci(self) -> None:
        assert str(Move("g1", "f3")) == "g1f3"

    def test_from_uci_roundtrip(self) -> None:
        move = Move.from_uci("a7a8n")
        assert move == Move("a7", "a8", "n")

    def test_from_uci_is_case_insensitive(self) -> None:
        assert Move.from_uci(" E2E4 ") == Move("e2", "e4")

    @pytest.mark.parametrize("text", ["", "e2", "e2e9", "i2e4", "e7e8k", "e2-e4"])
    def test_from_uci_rejects_malformed(self, text: str) -> None:
        with pytest.raises(ValueError):
            Move.from_uci(text)

    def test_invalid_square_rejected(self) -> None:
        with pytest.raises(ValueError):
            Move("z9", "e4")

    def test_invalid_promotion_rejected(self) -> None:
        with pytest.raises(ValueError):
            Move("e7", "e8", "k")

    def test_is_hashable_and_frozen(self) -> None:
        move = Move("e2", "e4")
        assert {move: 1}[Move("e2", "e4")] == 1
        with pytest.raises(AttributeError):
            move.from_square = "d2"  # type: ignore[misc]
