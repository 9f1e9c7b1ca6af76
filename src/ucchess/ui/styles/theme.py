"""Palette, board colours and the application stylesheet."""

from __future__ import annotations

from dataclasses import dataclass

# Shared palette (slate background, teal accent)
BACKGROUND = "#23272e"
SURFACE = "#2c313a"
BORDER = "#3e4451"
TEXT = "#dcdfe4"
TEXT_MUTED = "#8b929e"
ACCENT = "#2f7d78"
ACCENT_BRIGHT = "#3fa39c"


@dataclass(frozen=True)
class BoardColors:
    """Square and marker colours handed to ``chess.svg.board``."""

    light_square: str = "#e8dcc4"
    dark_square: str = "#9c7b5b"
    last_move_light: str = "#d6d27e"
    last_move_dark: str = "#b0a94a"
    selected: str = "#3fa39c80"
    best_move_arrow: str = "#2f7d78cc"

    def svg_colors(self) -> dict[str, str]:
        return {
            "square light": self.light_square,
            "square dark": self.dark_square,
            "square light lastmove": self.last_move_light,
            "square dark lastmove": self.last_move_dark,
        }


SIDEBAR_STYLE = f"""
QListWidget {{ background: {BACKGROUND}; border: none;
    border-right: 1px solid {BORDER}; }}
QListWidget::item {{ padding: 10px 14px; color: {TEXT_MUTED}; }}
QListWidget::item:selected {{ background: {ACCENT}; color: {TEXT}; }}
"""

APP_STYLE = f"""
QMainWindow, QDialog {{
    background: {BACKGROUND};
}}

QLabel, QCheckBox {{
    color: {TEXT};
}}

QListWidget {{
    background: {SURFACE};
    color: {TEXT};
    border: 1px solid {BORDER};
    border-radius: 4px;
}}

QPushButton {{
    background: {SURFACE};
    color: {TEXT};
    border: 1px solid {BORDER};
    border-radius: 4px;
    padding: 5px 12px;
}}
QPushButton:hover {{
    border-color: {ACCENT_BRIGHT};
}}
QPushButton:pressed {{
    background: {ACCENT};
}}
QPushButton:disabled {{
    color: {TEXT_MUTED};
    border-color: {SURFACE};
}}

QLineEdit, QSpinBox, QComboBox {{
    background: {SURFACE};
    color: {TEXT};
    border: 1px solid {BORDER};
    border-radius: 3px;
    padding: 3px 6px;
}}

QStatusBar {{
    background: {SURFACE};
    color: {TEXT_MUTED};
}}

QMenuBar, QMenu {{
    background: {SURFACE};
    color: {TEXT};
}}
QMenuBar::item:selected, QMenu::item:selected {{
    background: {ACCENT};
}}
"""
