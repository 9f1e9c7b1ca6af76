"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction, QCloseEvent, QKeySequence
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QInputDialog,
    QLabel,
    QMainWindow,
    QMessageBox,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from ucchess.core.move import Move
from ucchess.core.notation import Position
from ucchess.core.rules import outcome_text
from ucchess.game.timeline import MoveRecord
from ucchess.ui.analysis_session import AnalysisResult, EngineFactory
from ucchess.ui.board.board_view import BoardView
from ucchess.ui.dialogs.settings_dialog import AppSettings, SettingsDialog
from ucchess.ui.i18n import set_language, t
from ucchess.ui.panels.best_move_panel import BestMovePanel
from ucchess.ui.panels.control_panel import ControlPanel
from ucchess.ui.panels.move_panel import MovePanel
from ucchess.ui.replay_session import ReplaySession

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for UCChess."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        start_fen: str | None = None,
        engine_factory: EngineFactory | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("UCChess")
        self.setMinimumSize(900, 640)
        self.resize(1100, 750)

        self._settings = settings or AppSettings()
        self._last_result: AnalysisResult | None = None
        self._session = ReplaySession(
            on_best_move=self._on_best_move,
            on_query_started=self._on_query_started,
            on_engine_unavailable=self._on_engine_unavailable,
            on_playback_changed=self._on_playback_changed,
            engine_command=self._settings.engine_path,
            depth=self._settings.engine_depth,
            delay_ms=self._settings.playback_delay_ms,
            analyze_on_navigation=self._settings.analyze_on_navigation,
            engine_factory=engine_factory,
            parent=self,
        )
        self._navigation = self._session.navigation

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._connect_navigation_events()
        self._apply_settings()

        self._session.setup()
        if start_fen:
            self._start_game(start_fen)
        else:
            self._sync_view(self._navigation.cursor, self._navigation.position)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def session(self) -> ReplaySession:
        return self._session

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        # Board (center)
        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=3)

        # Right panel
        right = QVBoxLayout()
        right.setSpacing(6)

        self._best_move_panel = BestMovePanel()
        right.addWidget(self._best_move_panel)

        self._move_panel = MovePanel()
        right.addWidget(self._move_panel, stretch=1)

        self._control_panel = ControlPanel()
        right.addWidget(self._control_panel)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(300)
        root.addWidget(right_widget)

        # Status bar
        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel(t().status_ready)
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None
        s = t()

        # Game menu
        self._menu_game = menu_bar.addMenu(s.menu_game)
        assert self._menu_game is not None

        self._act_new_game = QAction(s.menu_new_game, self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._on_new_game)
        self._menu_game.addAction(self._act_new_game)

        self._act_new_game_fen = QAction(s.menu_new_game_fen, self)
        self._act_new_game_fen.setShortcut("Ctrl+Shift+N")
        self._act_new_game_fen.triggered.connect(self._on_new_game_from_fen)
        self._menu_game.addAction(self._act_new_game_fen)

        self._menu_game.addSeparator()

        self._act_flip = QAction(s.menu_flip_board, self)
        self._act_flip.setShortcut("F")
        self._act_flip.triggered.connect(self._on_flip)
        self._menu_game.addAction(self._act_flip)

        self._menu_game.addSeparator()

        self._act_quit = QAction(s.menu_quit, self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

        # Settings menu
        self._menu_settings = menu_bar.addMenu(s.menu_settings)
        assert self._menu_settings is not None

        self._act_settings = QAction(s.menu_settings_action, self)
        self._act_settings.setShortcut("Ctrl+,")
        self._act_settings.triggered.connect(self._on_settings)
        self._menu_settings.addAction(self._act_settings)

        # Navigation shortcuts (window-wide, no menu entries)
        for key, slot in (
            (QKeySequence.StandardKey.MoveToPreviousChar, self._on_back),
            (QKeySequence.StandardKey.MoveToNextChar, self._on_forward),
            (QKeySequence.StandardKey.MoveToStartOfLine, self._on_first),
            (QKeySequence.StandardKey.MoveToEndOfLine, self._on_last),
        ):
            action = QAction(self)
            action.setShortcut(QKeySequence(key))
            action.triggered.connect(slot)
            self.addAction(action)

        play_action = QAction(self)
        play_action.setShortcut("Space")
        play_action.triggered.connect(self._on_play_toggled)
        self.addAction(play_action)

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        self._board_view.move_made.connect(self._on_user_move)
        self._move_panel.move_clicked.connect(self._on_move_history_selected)
        self._control_panel.first_clicked.connect(self._on_first)
        self._control_panel.back_clicked.connect(self._on_back)
        self._control_panel.play_clicked.connect(self._on_play_toggled)
        self._control_panel.forward_clicked.connect(self._on_forward)
        self._control_panel.last_clicked.connect(self._on_last)
        self._control_panel.new_game_clicked.connect(self._on_new_game)
        self._control_panel.flip_clicked.connect(self._on_flip)

    def _connect_navigation_events(self) -> None:
        events = self._navigation.events
        events.on_cursor_changed.append(self._sync_view)
        events.on_move_played.append(self._on_move_played)
        events.on_illegal_move.append(self._on_illegal_move)
        events.on_reset.append(self._on_reset)

    # ── User actions ─────────────────────────────────────────────────────

    def _on_user_move(self, move: Move) -> None:
        """Handle a move from the board UI."""
        self._navigation.play_move(move)

    def _on_move_history_selected(self, ply: int) -> None:
        # Button for ply k shows the position after that move.
        self._navigation.jump_to(ply + 1)

    def _on_first(self) -> None:
        self._navigation.jump_to_start()

    def _on_back(self) -> None:
        self._navigation.step_back()

    def _on_forward(self) -> None:
        self._navigation.step_forward()

    def _on_last(self) -> None:
        self._navigation.jump_to_end()

    def _on_play_toggled(self) -> None:
        self._session.playback.toggle()

    def _on_new_game(self) -> None:
        self._start_game(None)

    def _on_new_game_from_fen(self) -> None:
        s = t()
        fen, ok = QInputDialog.getText(self, s.fen_dialog_title, s.fen_dialog_label)
        if not ok or not fen.strip():
            return
        self._start_game(fen)

    def _start_game(self, fen: str | None) -> bool:
        try:
            self._navigation.new_game(fen)
        except ValueError as exc:
            _LOGGER.warning("Rejected starting position: %s", exc)
            s = t()
            QMessageBox.warning(self, s.fen_dialog_title, s.fen_invalid.format(exc=exc))
            return False
        return True

    def _on_flip(self) -> None:
        self._settings.flip_board = not self._settings.flip_board
        self._board_view.set_flipped(self._settings.flip_board)

    def _on_settings(self) -> None:
        dlg = SettingsDialog(self._settings, self)
        if dlg.exec():
            self._apply_settings()

    def _apply_settings(self) -> None:
        s = self._settings

        # Language must come first so all retranslate calls use the new locale
        set_language(s.language)
        self.retranslate_ui()

        self._move_panel.set_use_figurine_notation(s.use_figurine_notation)
        self._board_view.set_flipped(s.flip_board)

        # Engine and playback (applied to subsequent queries/ticks)
        session = self._session
        session.playback.set_delay(s.playback_delay_ms)
        session.analysis.set_depth(s.engine_depth)
        session.set_analyze_on_navigation(s.analyze_on_navigation)
        if session.analysis.engine_command != s.engine_path:
            self._best_move_panel.reset()
            session.analysis.restart(s.engine_path)

    def retranslate_ui(self) -> None:
        """Update all translatable strings when the locale changes."""
        s = t()
        self._menu_game.setTitle(s.menu_game)
        self._act_new_game.setText(s.menu_new_game)
        self._act_new_game_fen.setText(s.menu_new_game_fen)
        self._act_flip.setText(s.menu_flip_board)
        self._act_quit.setText(s.menu_quit)
        self._menu_settings.setTitle(s.menu_settings)
        self._act_settings.setText(s.menu_settings_action)
        self._move_panel.retranslate_ui()
        self._control_panel.retranslate_ui()
        self._best_move_panel.retranslate_ui()
        self._update_status()

    # ── Timeline callbacks ───────────────────────────────────────────────

    def _sync_view(self, cursor: int, position: Position) -> None:
        """Show ``P[cursor]`` and refresh everything derived from it."""
        nav = self._navigation
        self._board_view.set_position(position, nav.last_move())
        self._move_panel.set_active_ply(cursor - 1 if cursor > 0 else None)
        self._control_panel.set_navigation_state(
            can_back=not nav.at_start, can_forward=not nav.at_end
        )

        result = self._last_result
        is_current = result is not None and result.position == position
        self._best_move_panel.set_is_current(is_current or result is None)
        self._board_view.set_best_move(result.best_move if is_current else None)
        self._update_status()

    def _on_move_played(self, _record: MoveRecord, cursor: int) -> None:
        store = self._navigation.store
        start = store.position_at(0)
        self._move_panel.set_history(
            store.san_moves(),
            active_ply=cursor - 1,
            first_number=start.fullmove_number,
            black_first=not start.white_to_move,
        )

    def _on_illegal_move(self, move: Move, _reason: str) -> None:
        self._status_label.setText(t().status_illegal_move.format(move=move.uci))

    def _on_reset(self, _position: Position) -> None:
        self._last_result = None
        self._move_panel.clear()
        self._best_move_panel.reset()

    # ── Session callbacks ────────────────────────────────────────────────

    def _on_query_started(self, _generation: int) -> None:
        self._last_result = None
        self._best_move_panel.set_thinking()
        self._board_view.set_best_move(None)

    def _on_best_move(self, result: AnalysisResult) -> None:
        self._last_result = result
        is_current = result.position == self._navigation.position
        self._best_move_panel.set_result(result, is_current=is_current)
        if is_current:
            self._board_view.set_best_move(result.best_move)

    def _on_engine_unavailable(self, message: str) -> None:
        self._best_move_panel.set_unavailable()
        self._status_label.setText(t().status_engine_unavailable.format(msg=message))

    def _on_playback_changed(self, running: bool) -> None:
        self._control_panel.set_playing(running)
        self._control_panel.set_navigation_state(
            can_back=not self._navigation.at_start,
            can_forward=not self._navigation.at_end,
        )

    # ── Status ───────────────────────────────────────────────────────────

    def _update_status(self) -> None:
        s = t()
        nav = self._navigation
        position = nav.position
        result = outcome_text(position)
        if result is not None:
            self._status_label.setText(s.status_game_result.format(result=result))
            return
        side = s.color_white if position.white_to_move else s.color_black
        self._status_label.setText(
            s.status_position.format(
                side=side,
                number=position.fullmove_number,
                ply=nav.cursor,
                total=nav.store.last_index,
            )
        )

    # ── Lifecycle ────────────────────────────────────────────────────────

    def closeEvent(self, event: QCloseEvent | None) -> None:  # noqa: N802
        self._session.shutdown()
        super().closeEvent(event)
