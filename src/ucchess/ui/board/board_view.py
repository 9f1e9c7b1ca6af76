"""BoardView — SVG chessboard with click-to-move input."""

from __future__ import annotations

import chess
import chess.svg
from PyQt6.QtCore import QByteArray, Qt, pyqtSignal
from PyQt6.QtGui import QMouseEvent
from PyQt6.QtSvgWidgets import QSvgWidget
from PyQt6.QtWidgets import QSizePolicy, QWidget

from ucchess.core.move import Move
from ucchess.core.notation import Position, starting_position
from ucchess.ui.styles.theme import BoardColors


def square_at(
    x: float, y: float, width: float, height: float, *, flipped: bool
) -> int | None:
    """Map widget coordinates to a ``chess`` square index, or None if outside."""
    if width <= 0 or height <= 0 or not (0 <= x < width and 0 <= y < height):
        return None
    col = int(x * 8 // width)
    row = int(y * 8 // height)
    if flipped:
        return chess.square(7 - col, row)
    return chess.square(col, 7 - row)


class BoardView(QSvgWidget):
    """Renders a :class:`Position` and emits ``move_made`` on two clicks."""

    move_made = pyqtSignal(object)  # Move

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(360, 360)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self._colors = BoardColors()
        self._position = starting_position()
        self._board = self._position.board()
        self._last_move: Move | None = None
        self._best_move: str | None = None
        self._selected: int | None = None
        self._flipped = False
        self._interactive = True
        self._render()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def position(self) -> Position:
        return self._position

    @property
    def selected_square(self) -> int | None:
        return self._selected

    def set_position(self, position: Position, last_move: Move | None = None) -> None:
        self._position = position
        self._board = position.board()
        self._last_move = last_move
        self._selected = None
        self._render()

    def set_best_move(self, uci: str | None) -> None:
        """Draw an arrow for *uci* (or clear it with None)."""
        self._best_move = uci
        self._render()

    def set_flipped(self, flipped: bool) -> None:
        self._flipped = flipped
        self._render()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_interactive(self, interactive: bool) -> None:
        self._interactive = interactive
        if not interactive:
            self._selected = None
            self._render()

    # ── Input ────────────────────────────────────────────────────────────

    def mousePressEvent(self, event: QMouseEvent | None) -> None:  # noqa: N802
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return
        pos = event.position()
        square = square_at(
            pos.x(), pos.y(), self.width(), self.height(), flipped=self._flipped
        )
        if square is not None:
            self.click_square(square)

    def click_square(self, square: int) -> None:
        """Select a piece, or complete a move from the selected square."""
        if not self._interactive:
            return
        piece = self._board.piece_at(square)
        own_piece = piece is not None and piece.color == self._board.turn

        if self._selected is None or self._selected == square:
            self._selected = square if own_piece and self._selected is None else None
            self._render()
            return
        if own_piece:
            self._selected = square
            self._render()
            return

        move = Move(chess.square_name(self._selected), chess.square_name(square))
        self._selected = None
        self._render()
        self.move_made.emit(move)

    # ── Rendering ────────────────────────────────────────────────────────

    def _render(self) -> None:
        lastmove = None
        if self._last_move is not None:
            lastmove = chess.Move.from_uci(self._last_move.uci)
        arrows: list[chess.svg.Arrow] = []
        if self._best_move:
            try:
                best = chess.Move.from_uci(self._best_move)
            except ValueError:
                best = None
            if best:
                arrows.append(
                    chess.svg.Arrow(
                        best.from_square,
                        best.to_square,
                        color=self._colors.best_move_arrow,
                    )
                )
        fill: dict[int, str] = {}
        if self._selected is not None:
            fill[self._selected] = self._colors.selected
        svg = chess.svg.board(
            self._board,
            orientation=chess.BLACK if self._flipped else chess.WHITE,
            lastmove=lastmove,
            arrows=arrows,
            fill=fill,
            coordinates=False,
            colors=self._colors.svg_colors(),
        )
        self.load(QByteArray(svg.encode("utf-8")))
