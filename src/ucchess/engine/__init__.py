"""External analysis engine package: UCI protocol and Qt process bridge."""

from ucchess.engine.protocol import (
    DEFAULT_SEARCH_DEPTH,
    EngineChannel,
    EngineReply,
    EngineRequest,
    go_command,
    parse_bestmove,
    position_command,
)
from ucchess.engine.uci_process import EngineUnavailable, UciEngineProcess

__all__ = [
    "DEFAULT_SEARCH_DEPTH",
    "EngineChannel",
    "EngineReply",
    "EngineRequest",
    "EngineUnavailable",
    "UciEngineProcess",
    "go_command",
    "parse_bestmove",
    "position_command",
]
