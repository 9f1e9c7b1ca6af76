"""Internationalisation strings for the UCChess UI.

Usage::

    from ucchess.ui.i18n import t, set_language

    set_language("Russian")
    print(t().btn_play)          # "Воспроизвести"
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    menu_game: str
    menu_new_game: str
    menu_new_game_fen: str
    menu_flip_board: str
    menu_quit: str
    menu_settings: str
    menu_settings_action: str

    status_ready: str
    status_position: str  # "{side} to move | Move {number} | Ply {ply}/{total}"
    status_illegal_move: str  # "Illegal move: {move}"
    status_engine_unavailable: str  # "Engine unavailable: {msg}"
    status_game_result: str  # "Game over: {result}"
    color_white: str
    color_black: str

    # FEN dialog
    fen_dialog_title: str
    fen_dialog_label: str
    fen_invalid: str  # "Invalid FEN:\n{exc}"

    # ── MovePanel ────────────────────────────────────────────────────────
    moves_header: str

    # ── ControlPanel ─────────────────────────────────────────────────────
    btn_first: str
    btn_back: str
    btn_play: str
    btn_pause: str
    btn_forward: str
    btn_last: str
    btn_new_game: str
    btn_flip: str

    # ── BestMovePanel ────────────────────────────────────────────────────
    best_move_header: str
    best_move_idle: str
    best_move_thinking: str
    best_move_none: str
    best_move_unavailable: str
    best_move_other_position: str  # "(for move {number})"

    # ── Settings dialog ──────────────────────────────────────────────────
    settings_title: str
    settings_general: str
    settings_engine: str
    settings_language: str
    settings_figurine: str
    settings_engine_path: str
    settings_engine_depth: str
    settings_engine_depth_suffix: str
    settings_delay: str
    settings_delay_suffix: str
    settings_analyze_on_navigation: str


_EN = Strings(
    menu_game="&Game",
    menu_new_game="&New Game",
    menu_new_game_fen="New Game from &FEN...",
    menu_flip_board="&Flip Board",
    menu_quit="&Quit",
    menu_settings="&Settings",
    menu_settings_action="&Preferences...",
    status_ready="Ready",
    status_position="{side} to move | Move {number} | Ply {ply}/{total}",
    status_illegal_move="Illegal move: {move}",
    status_engine_unavailable="Engine unavailable: {msg}",
    status_game_result="Game over: {result}",
    color_white="White",
    color_black="Black",
    fen_dialog_title="New Game from FEN",
    fen_dialog_label="Starting position (FEN):",
    fen_invalid="Invalid FEN:\n{exc}",
    moves_header="Moves",
    btn_first="⏮",
    btn_back="◀",
    btn_play="▶ Play",
    btn_pause="⏸ Pause",
    btn_forward="▶",
    btn_last="⏭",
    btn_new_game="New Game",
    btn_flip="Flip",
    best_move_header="Best move",
    best_move_idle="—",
    best_move_thinking="Thinking...",
    best_move_none="No move",
    best_move_unavailable="Engine unavailable",
    best_move_other_position="(for move {number})",
    settings_title="Settings",
    settings_general="General",
    settings_engine="Engine",
    settings_language="Language:",
    settings_figurine="Figurine notation",
    settings_engine_path="Engine command:",
    settings_engine_depth="Search depth:",
    settings_engine_depth_suffix=" ply",
    settings_delay="Playback delay:",
    settings_delay_suffix=" ms",
    settings_analyze_on_navigation="Analyse positions while browsing history",
)

_RU = Strings(
    menu_game="&Игра",
    menu_new_game="&Новая игра",
    menu_new_game_fen="Новая игра из &FEN...",
    menu_flip_board="&Перевернуть доску",
    menu_quit="&Выход",
    menu_settings="&Настройки",
    menu_settings_action="&Параметры...",
    status_ready="Готово",
    status_position="Ход {side} | Номер хода {number} | Полуход {ply}/{total}",
    status_illegal_move="Недопустимый ход: {move}",
    status_engine_unavailable="Движок недоступен: {msg}",
    status_game_result="Игра окончена: {result}",
    color_white="белых",
    color_black="чёрных",
    fen_dialog_title="Новая игра из FEN",
    fen_dialog_label="Начальная позиция (FEN):",
    fen_invalid="Некорректный FEN:\n{exc}",
    moves_header="Ходы",
    btn_first="⏮",
    btn_back="◀",
    btn_play="▶ Воспроизвести",
    btn_pause="⏸ Пауза",
    btn_forward="▶",
    btn_last="⏭",
    btn_new_game="Новая игра",
    btn_flip="Перевернуть",
    best_move_header="Лучший ход",
    best_move_idle="—",
    best_move_thinking="Анализ...",
    best_move_none="Нет хода",
    best_move_unavailable="Движок недоступен",
    best_move_other_position="(для хода {number})",
    settings_title="Настройки",
    settings_general="Общие",
    settings_engine="Движок",
    settings_language="Язык:",
    settings_figurine="Фигурная нотация",
    settings_engine_path="Команда движка:",
    settings_engine_depth="Глубина поиска:",
    settings_engine_depth_suffix=" пл.",
    settings_delay="Задержка воспроизведения:",
    settings_delay_suffix=" мс",
    settings_analyze_on_navigation="Анализировать позиции при просмотре истории",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
