"""ControlPanel — timeline navigation and game action buttons."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QPushButton, QVBoxLayout, QWidget

from ucchess.ui.i18n import t


class ControlPanel(QWidget):
    """Buttons for first/back/play/forward/last plus new game and flip."""

    first_clicked = pyqtSignal()
    back_clicked = pyqtSignal()
    play_clicked = pyqtSignal()
    forward_clicked = pyqtSignal()
    last_clicked = pyqtSignal()
    new_game_clicked = pyqtSignal()
    flip_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._is_playing = False
        self._setup_ui()
        self.retranslate_ui()

    def _nav_button(self, font: QFont) -> QPushButton:
        btn = QPushButton()
        btn.setFont(font)
        btn.setMinimumHeight(36)
        return btn

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        btn_font = QFont("Adwaita Sans", 10)

        nav = QHBoxLayout()
        self._btn_first = self._nav_button(btn_font)
        self._btn_first.clicked.connect(self.first_clicked)
        nav.addWidget(self._btn_first)

        self._btn_back = self._nav_button(btn_font)
        self._btn_back.clicked.connect(self.back_clicked)
        nav.addWidget(self._btn_back)

        self._btn_play = self._nav_button(btn_font)
        self._btn_play.clicked.connect(self.play_clicked)
        nav.addWidget(self._btn_play, 2)

        self._btn_forward = self._nav_button(btn_font)
        self._btn_forward.clicked.connect(self.forward_clicked)
        nav.addWidget(self._btn_forward)

        self._btn_last = self._nav_button(btn_font)
        self._btn_last.clicked.connect(self.last_clicked)
        nav.addWidget(self._btn_last)
        layout.addLayout(nav)

        actions = QHBoxLayout()
        self._btn_new = self._nav_button(btn_font)
        self._btn_new.clicked.connect(self.new_game_clicked)
        actions.addWidget(self._btn_new)

        self._btn_flip = self._nav_button(btn_font)
        self._btn_flip.clicked.connect(self.flip_clicked)
        actions.addWidget(self._btn_flip)
        layout.addLayout(actions)

    def retranslate_ui(self) -> None:
        s = t()
        self._btn_first.setText(s.btn_first)
        self._btn_back.setText(s.btn_back)
        self._btn_play.setText(s.btn_pause if self._is_playing else s.btn_play)
        self._btn_forward.setText(s.btn_forward)
        self._btn_last.setText(s.btn_last)
        self._btn_new.setText(s.btn_new_game)
        self._btn_flip.setText(s.btn_flip)

    def set_navigation_state(self, *, can_back: bool, can_forward: bool) -> None:
        """Disable controls that would step past either end of the timeline."""
        self._btn_first.setEnabled(can_back)
        self._btn_back.setEnabled(can_back)
        self._btn_forward.setEnabled(can_forward)
        self._btn_last.setEnabled(can_forward)
        self._btn_play.setEnabled(can_forward or self._is_playing)

    def set_playing(self, playing: bool) -> None:
        self._is_playing = playing
        self.retranslate_ui()
