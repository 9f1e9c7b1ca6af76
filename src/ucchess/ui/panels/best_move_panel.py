"""BestMovePanel — shows the engine's recommendation for the current line."""

from __future__ import annotations

from enum import IntEnum, auto

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from ucchess.ui.analysis_session import AnalysisResult
from ucchess.ui.i18n import t


class BestMoveState(IntEnum):
    IDLE = auto()
    THINKING = auto()
    READY = auto()
    UNAVAILABLE = auto()


class BestMovePanel(QWidget):
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._state = BestMoveState.IDLE
        self._result: AnalysisResult | None = None
        self._is_current = True

        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        self._header = QLabel()
        self._header.setFont(QFont("Adwaita Sans", 12, QFont.Weight.Bold))
        self._header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._header)

        self._value = QLabel()
        self._value.setFont(QFont("AdwaitaMono Nerd Font", 16))
        self._value.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._value)

        self._note = QLabel()
        self._note.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._note.setStyleSheet("color: #9a9a9a;")
        layout.addWidget(self._note)

        self.retranslate_ui()

    @property
    def state(self) -> BestMoveState:
        return self._state

    @property
    def text(self) -> str:
        return self._value.text()

    def reset(self) -> None:
        self._state = BestMoveState.IDLE
        self._result = None
        self.retranslate_ui()

    def set_thinking(self) -> None:
        if self._state == BestMoveState.UNAVAILABLE:
            return
        self._state = BestMoveState.THINKING
        self._result = None
        self.retranslate_ui()

    def set_result(self, result: AnalysisResult, *, is_current: bool = True) -> None:
        self._state = BestMoveState.READY
        self._result = result
        self._is_current = is_current
        self.retranslate_ui()

    def set_is_current(self, is_current: bool) -> None:
        """Mark whether the shown result belongs to the displayed position."""
        if self._is_current == is_current:
            return
        self._is_current = is_current
        self.retranslate_ui()

    def set_unavailable(self) -> None:
        self._state = BestMoveState.UNAVAILABLE
        self._result = None
        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        self._header.setText(s.best_move_header)
        self._note.clear()

        if self._state == BestMoveState.THINKING:
            self._value.setText(s.best_move_thinking)
        elif self._state == BestMoveState.UNAVAILABLE:
            self._value.setText(s.best_move_unavailable)
        elif self._state == BestMoveState.READY and self._result is not None:
            result = self._result
            if result.best_move is None:
                self._value.setText(s.best_move_none)
            elif result.san:
                self._value.setText(f"{result.san} ({result.best_move})")
            else:
                self._value.setText(result.best_move)
            if not self._is_current:
                number = result.position.fullmove_number
                self._note.setText(s.best_move_other_position.format(number=number))
        else:
            self._value.setText(s.best_move_idle)
