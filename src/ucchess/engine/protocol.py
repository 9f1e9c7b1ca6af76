"""Typed request/reply channel for talking to a UCI analysis engine."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

DEFAULT_SEARCH_DEPTH = 15
_BESTMOVE = "bestmove"
_NO_MOVE_TOKENS = frozenset({"(none)", "0000"})


@dataclass(frozen=True, slots=True)
class EngineRequest:
    """One outbound command line, tagged with the query generation."""

    generation: int
    command: str

    def __post_init__(self) -> None:
        if "\n" in self.command or "\r" in self.command:
            raise ValueError(f"Engine command must be a single line: {self.command!r}")

    @property
    def is_search(self) -> bool:
        return self.command.split(maxsplit=1)[:1] == ["go"]


@dataclass(frozen=True, slots=True)
class EngineReply:
    """A ``bestmove`` answer; ``generation`` is the query it belongs to."""

    generation: int | None
    best_move: str | None


def position_command(fen: str) -> str:
    return f"position fen {fen}"


def go_command(depth: int = DEFAULT_SEARCH_DEPTH) -> str:
    if depth <= 0:
        raise ValueError("Search depth must be >= 1")
    return f"go depth {depth}"


def query_requests(generation: int, fen: str, depth: int) -> list[EngineRequest]:
    """The command pair sent for a single analysis query."""
    return [
        EngineRequest(generation, position_command(fen)),
        EngineRequest(generation, go_command(depth)),
    ]


def is_bestmove(line: str) -> bool:
    tokens = line.split()
    return bool(tokens) and tokens[0] == _BESTMOVE


def parse_bestmove(line: str) -> str | None:
    """Return the move token of a ``bestmove`` line.

    ``None`` means the engine found no move (mate/stalemate). Any ponder
    suffix is ignored. Raises ValueError for lines that are not ``bestmove``.
    """
    tokens = line.split()
    if not tokens or tokens[0] != _BESTMOVE:
        raise ValueError(f"Not a bestmove line: {line!r}")
    if len(tokens) < 2 or tokens[1] in _NO_MOVE_TOKENS:
        return None
    return tokens[1]


class Signal(Protocol):
    def connect(self, slot: Callable[..., object]) -> object: ...


class EngineChannel(Protocol):
    """Minimal engine interface used by the analysis coordinator."""

    reply_ready: Signal
    unavailable: Signal

    @property
    def is_running(self) -> bool: ...

    @property
    def is_searching(self) -> bool: ...

    def start(self) -> None: ...

    def send(self, request: EngineRequest) -> None: ...

    def stop_search(self) -> None: ...

    def new_game(self) -> None: ...

    def shutdown(self) -> None: ...
