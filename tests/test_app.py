"""Tests for command-line parsing and logging setup."""

import pytest

from ucchess.app import build_parser
from ucchess.ui.bootstrap import configure_logging
from ucchess.ui.i18n import LANGUAGES, set_language, t
from ucchess.ui.playback import PlaybackScheduler


class TestArguments:
    def test_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert args.engine == "stockfish"
        assert args.depth == 15
        assert args.delay_ms == PlaybackScheduler.DEFAULT_DELAY_MS == 1000
        assert args.fen is None
        assert args.log_level == "WARNING"
        assert args.analyze_on_navigation is False

    def test_all_flags(self) -> None:
        args = build_parser().parse_args(
            [
                "--engine",
                "stockfish -q",
                "--depth",
                "20",
                "--delay-ms",
                "250",
                "--fen",
                "8/8/8/8/8/8/k7/4K3 w - - 0 1",
                "--log-level",
                "debug",
                "--analyze-on-navigation",
            ]
        )
        assert args.engine == "stockfish -q"
        assert args.depth == 20
        assert args.delay_ms == 250
        assert args.fen.startswith("8/8")
        assert args.log_level == "DEBUG"
        assert args.analyze_on_navigation is True

    @pytest.mark.parametrize("flag", ["--depth", "--delay-ms"])
    def test_non_positive_rejected(self, flag: str) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args([flag, "0"])


class TestConfigureLogging:
    def test_unknown_level(self) -> None:
        with pytest.raises(ValueError):
            configure_logging("chatty")

    def test_known_level_is_accepted(self) -> None:
        configure_logging("info")


class TestI18n:
    def test_languages(self) -> None:
        assert LANGUAGES == ["English", "Russian"]

    def test_unknown_language_falls_back_to_english(self) -> None:
        set_language("Klingon")
        assert t().menu_game == "&Game"
