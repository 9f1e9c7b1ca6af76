"""Tests for AnalysisCoordinator — generation guard and engine lifecycle."""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING

import pytest

from ucchess.core.move import Move
from ucchess.core.notation import position_from_fen, position_to_fen, starting_position
from ucchess.core.rules import apply_move
from ucchess.engine.protocol import EngineReply
from ucchess.ui.analysis_session import AnalysisCoordinator, AnalysisResult

if TYPE_CHECKING:
    from conftest import FakeEngineFactory

_MATED = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"


class _Recorder:
    def __init__(self) -> None:
        self.results: list[AnalysisResult] = []
        self.started: list[int] = []
        self.unavailable: list[str] = []


def _make(
    fake_engines: FakeEngineFactory, **kwargs: object
) -> tuple[AnalysisCoordinator, _Recorder]:
    rec = _Recorder()
    coordinator = AnalysisCoordinator(
        on_best_move=rec.results.append,
        on_query_started=rec.started.append,
        on_unavailable=rec.unavailable.append,
        engine_factory=fake_engines,
        **kwargs,  # type: ignore[arg-type]
    )
    return coordinator, rec


class TestLifecycle:
    def test_setup_connects_slots_without_weakref_error(
        self, fake_engines: FakeEngineFactory
    ) -> None:
        coordinator, _rec = _make(fake_engines)
        assert weakref.ref(coordinator)() is coordinator

        coordinator.setup()
        assert coordinator.is_available
        coordinator.shutdown()
        assert fake_engines.latest.shutdown_calls == 1

    def test_shutdown_before_setup_is_noop(
        self, fake_engines: FakeEngineFactory
    ) -> None:
        coordinator, _rec = _make(fake_engines)
        coordinator.shutdown()
        assert fake_engines.engines == []

    def test_setup_twice_creates_one_engine(
        self, fake_engines: FakeEngineFactory
    ) -> None:
        coordinator, _rec = _make(fake_engines, engine_command="my-engine --fast")
        coordinator.setup()
        coordinator.setup()
        assert len(fake_engines.engines) == 1
        assert fake_engines.latest.command == "my-engine --fast"

    def test_restart_with_new_command(self, fake_engines: FakeEngineFactory) -> None:
        coordinator, _rec = _make(fake_engines)
        coordinator.setup()
        coordinator.restart("other-engine")
        assert coordinator.engine_command == "other-engine"
        commands = [e.command for e in fake_engines.engines]
        assert commands == ["stockfish", "other-engine"]
        assert fake_engines.engines[0].shutdown_calls == 1
        assert coordinator.is_available

    def test_set_depth_validates(self, fake_engines: FakeEngineFactory) -> None:
        coordinator, _rec = _make(fake_engines)
        with pytest.raises(ValueError):
            coordinator.set_depth(0)
        coordinator.set_depth(7)
        coordinator.setup()
        coordinator.query(starting_position())
        assert fake_engines.latest.commands[-1] == "go depth 7"


class TestQuery:
    def test_query_sends_position_and_go(self, fake_engines: FakeEngineFactory) -> None:
        coordinator, rec = _make(fake_engines)
        coordinator.setup()
        position = starting_position()

        generation = coordinator.query(position)

        assert generation == 1
        assert rec.started == [1]
        assert fake_engines.latest.commands == [
            f"position fen {position_to_fen(position)}",
            "go depth 15",
        ]

    def test_reply_published_with_san(self, fake_engines: FakeEngineFactory) -> None:
        coordinator, rec = _make(fake_engines)
        coordinator.setup()
        position = starting_position()
        coordinator.query(position)

        fake_engines.latest.answer("g1f3")

        assert rec.results == [
            AnalysisResult(generation=1, position=position, best_move="g1f3", san="Nf3")
        ]

    def test_no_move_reply(self, fake_engines: FakeEngineFactory) -> None:
        coordinator, rec = _make(fake_engines)
        coordinator.setup()
        coordinator.query(position_from_fen(_MATED))

        fake_engines.latest.answer(None)

        assert rec.results[0].best_move is None
        assert rec.results[0].san is None

    def test_unplayable_best_move_keeps_uci(
        self, fake_engines: FakeEngineFactory
    ) -> None:
        coordinator, rec = _make(fake_engines)
        coordinator.setup()
        coordinator.query(starting_position())

        fake_engines.latest.answer("e2e5")

        assert rec.results[0].best_move == "e2e5"
        assert rec.results[0].san is None

    def test_stale_reply_is_discarded(self, fake_engines: FakeEngineFactory) -> None:
        coordinator, rec = _make(fake_engines)
        coordinator.setup()
        engine = fake_engines.latest
        first = starting_position()
        second = apply_move(first, Move("e2", "e4"))

        coordinator.query(first)
        coordinator.query(second)
        assert "stop" in engine.commands

        engine.answer("d2d4")  # answer for the first query arrives late
        assert rec.results == []

        engine.answer("e7e5")
        assert len(rec.results) == 1
        assert rec.results[0].generation == 2
        assert rec.results[0].position == second
        assert rec.results[0].san == "e5"

    def test_reply_published_once(self, fake_engines: FakeEngineFactory) -> None:
        coordinator, rec = _make(fake_engines)
        coordinator.setup()
        coordinator.query(starting_position())
        engine = fake_engines.latest
        engine.answer("e2e4")

        engine.reply_ready.emit(EngineReply(1, "e2e4"))
        engine.reply_ready.emit("bestmove e2e4")
        assert len(rec.results) == 1

    def test_generation_is_strictly_increasing(
        self, fake_engines: FakeEngineFactory
    ) -> None:
        coordinator, rec = _make(fake_engines)
        coordinator.setup()
        for _ in range(3):
            coordinator.query(starting_position())
        assert rec.started == [1, 2, 3]
        assert coordinator.generation == 3


class TestUnavailable:
    def test_start_failure_reports_once_and_drops_queries(
        self, fake_engines: FakeEngineFactory
    ) -> None:
        fake_engines.fail_start = True
        coordinator, rec = _make(fake_engines)
        coordinator.setup()

        assert not coordinator.is_available
        assert len(rec.unavailable) == 1

        generation = coordinator.query(starting_position())
        assert generation == 1
        assert rec.started == [1]
        assert fake_engines.latest.commands == []
        assert len(rec.unavailable) == 1

    def test_launch_failure_signalled_during_start(
        self, fake_engines: FakeEngineFactory
    ) -> None:
        fake_engines.fail_launch = True
        coordinator, rec = _make(fake_engines)
        coordinator.setup()

        assert not coordinator.is_available
        assert rec.unavailable == ["cannot launch 'stockfish'"]
        assert fake_engines.latest.shutdown_calls == 1

        coordinator.query(starting_position())
        assert fake_engines.latest.commands == []

    def test_engine_crash_mid_session(self, fake_engines: FakeEngineFactory) -> None:
        coordinator, rec = _make(fake_engines)
        coordinator.setup()
        engine = fake_engines.latest
        coordinator.query(starting_position())

        engine.crash("segfault")

        assert rec.unavailable == ["segfault"]
        assert not coordinator.is_available
        coordinator.query(starting_position())
        assert engine.commands.count("go depth 15") == 1

        engine.crash("again")
        assert rec.unavailable == ["segfault"]

    def test_reply_after_shutdown_is_ignored(
        self, fake_engines: FakeEngineFactory
    ) -> None:
        coordinator, rec = _make(fake_engines)
        coordinator.setup()
        engine = fake_engines.latest
        coordinator.query(starting_position())
        coordinator.shutdown()

        engine.answer("e2e4")

        assert rec.results == []
        assert rec.unavailable == []


class TestNewGame:
    def test_new_game_forgets_pending_query(
        self, fake_engines: FakeEngineFactory
    ) -> None:
        coordinator, rec = _make(fake_engines)
        coordinator.setup()
        engine = fake_engines.latest
        coordinator.query(starting_position())

        coordinator.new_game()
        engine.answer("e2e4")

        assert "ucinewgame" in engine.commands
        assert rec.results == []
