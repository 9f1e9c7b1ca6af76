"""Game timeline layer — store, cursor navigation, scoresheet.

Quick start::

    from ucchess.core import Move
    from ucchess.game import NavigationController

    nav = NavigationController()
    nav.play_move(Move.from_uci("e2e4"))
    nav.step_back()
"""

from ucchess.game.navigation import NavigationController, NavigationEvents
from ucchess.game.scoresheet import format_scoresheet, scoresheet_pairs
from ucchess.game.timeline import MoveRecord, OutOfRange, TimelineStore

__all__ = [
    "MoveRecord",
    "NavigationController",
    "NavigationEvents",
    "OutOfRange",
    "TimelineStore",
    "format_scoresheet",
    "scoresheet_pairs",
]
