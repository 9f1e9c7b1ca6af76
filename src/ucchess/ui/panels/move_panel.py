"""MovePanel — scoresheet of the recorded moves with clickable plies."""

from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QSizePolicy,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from ucchess.game.scoresheet import scoresheet_pairs
from ucchess.ui.i18n import t
from ucchess.ui.styles.theme import ACCENT, BORDER, TEXT, TEXT_MUTED

# Unicode figurine symbols: white = outline, black = filled
_FIGURINE: dict[bool, dict[str, str]] = {
    True: {"K": "♔", "Q": "♕", "R": "♖", "B": "♗", "N": "♘"},
    False: {"K": "♚", "Q": "♛", "R": "♜", "B": "♝", "N": "♞"},
}

_MOVE_BUTTON_STYLE = f"""
QToolButton {{
    background: transparent;
    color: {TEXT};
    border: none;
    border-radius: 3px;
    padding: 1px 6px;
    text-align: left;
}}
QToolButton:hover {{
    background: {BORDER};
}}
QToolButton[activeMove="true"] {{
    background: {ACCENT};
    color: #ffffff;
}}
"""


def figurine_san(san: str, *, white: bool) -> str:
    """Replace piece letters in *san* with Unicode figurine symbols."""
    table = _FIGURINE[white]

    # Leading piece letter (Nf3, Qxd5, Ke2...)
    if san and san[0] in table:
        san = table[san[0]] + san[1:]

    # Promotion target (e8=Q -> e8=♕)
    if "=" in san:
        prefix, _, promo = san.partition("=")
        san = prefix + "=" + table.get(promo[:1], promo[:1]) + promo[1:]

    return san


class MovePanel(QWidget):
    """Displays the move history as numbered white/black pairs.

    ``move_clicked`` carries the 0-based ply of the clicked move.
    """

    move_clicked = pyqtSignal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._sans: list[str] = []
        self._first_number = 1
        self._black_first = False
        self._move_buttons: dict[int, QToolButton] = {}
        self._active_ply: int | None = None
        self._use_figurine_notation = True
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._header = QLabel()
        self._header.setFont(QFont("Adwaita Sans", 12, QFont.Weight.Bold))
        self._header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._header)

        self._list = QListWidget()
        self._list.setAlternatingRowColors(True)
        self._list.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        self._list.setFont(QFont("AdwaitaMono Nerd Font", 12))
        layout.addWidget(self._list)

    def retranslate_ui(self) -> None:
        self._header.setText(t().moves_header)

    @property
    def active_ply(self) -> int | None:
        return self._active_ply

    def set_history(
        self,
        sans: Sequence[str],
        active_ply: int | None = None,
        *,
        first_number: int = 1,
        black_first: bool = False,
    ) -> None:
        """Rebuild the list from *sans*; highlight *active_ply* (0-based).

        *first_number* and *black_first* describe the starting position, so a
        game set up with black to move opens with an empty white cell.
        """
        self._sans = list(sans)
        self._first_number = first_number
        self._black_first = black_first
        self._active_ply = active_ply
        self._rebuild_list()

    def set_active_ply(self, ply: int | None) -> None:
        """Highlight the move at *ply* without rebuilding the list."""
        self._active_ply = ply
        for move_ply, btn in self._move_buttons.items():
            btn.setProperty("activeMove", move_ply == ply)
            style = btn.style()
            if style is not None:
                style.unpolish(btn)
                style.polish(btn)
            btn.update()

    def set_use_figurine_notation(self, enabled: bool) -> None:
        """Toggle move text style between figurines and standard SAN letters."""
        if self._use_figurine_notation == enabled:
            return
        self._use_figurine_notation = enabled
        self._rebuild_list()

    def clear(self) -> None:
        self.set_history([])

    def _format_san(self, san: str, *, white: bool) -> str:
        if self._use_figurine_notation:
            return figurine_san(san, white=white)
        return san

    def _create_move_button(self, text: str, ply: int) -> QToolButton:
        btn = QToolButton()
        btn.setText(text)
        btn.setCursor(Qt.CursorShape.PointingHandCursor)
        btn.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        btn.setProperty("activeMove", False)
        btn.setStyleSheet(_MOVE_BUTTON_STYLE)
        btn.clicked.connect(
            lambda _checked=False, move_ply=ply: self._on_move_clicked(move_ply)
        )
        return btn

    def _on_move_clicked(self, ply: int) -> None:
        self.set_active_ply(ply)
        self.move_clicked.emit(ply)

    def _rebuild_list(self) -> None:
        self._list.clear()
        self._move_buttons.clear()
        ply = 0
        pairs = scoresheet_pairs(
            self._sans, first_number=self._first_number, black_first=self._black_first
        )
        for number, white, black in pairs:
            row_widget = QWidget()
            row_layout = QHBoxLayout(row_widget)
            row_layout.setContentsMargins(6, 2, 6, 2)
            row_layout.setSpacing(8)

            num_label = QLabel(f"{number}.")
            num_label.setFont(QFont("Adwaita Sans", 12))
            num_label.setFixedWidth(28)
            num_label.setAlignment(
                Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
            )
            row_layout.addWidget(num_label)

            if white:
                white_btn = self._create_move_button(
                    self._format_san(white, white=True), ply
                )
                row_layout.addWidget(white_btn, 1)
                self._move_buttons[ply] = white_btn
                ply += 1
            else:
                placeholder = QLabel("…")
                placeholder.setStyleSheet(f"color: {TEXT_MUTED}; padding: 1px 6px;")
                row_layout.addWidget(placeholder, 1)

            if black:
                black_btn = self._create_move_button(
                    self._format_san(black, white=False), ply
                )
                row_layout.addWidget(black_btn, 1)
                self._move_buttons[ply] = black_btn
                ply += 1
            else:
                spacer = QWidget()
                spacer.setSizePolicy(
                    QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed
                )
                row_layout.addWidget(spacer, 1)

            item = QListWidgetItem()
            item.setSizeHint(row_widget.sizeHint())
            self._list.addItem(item)
            self._list.setItemWidget(item, row_widget)

        self.set_active_ply(self._active_ply)
        self._list.scrollToBottom()
