"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

    from ucchess.ui.dialogs.settings_dialog import AppSettings

_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Send ``ucchess`` log records to stderr at *level*."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level!r}")
    logging.basicConfig(level=numeric, format=_LOG_FORMAT)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from ucchess.ui.styles.theme import APP_STYLE

    app.setApplicationName("UCChess")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None,
    *,
    settings: AppSettings | None = None,
    start_fen: str | None = None,
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from ucchess.ui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(settings, start_fen=start_fen)
    window.show()
    _LOGGER.info(
        "Main window shown; engine command %r",
        window.session.analysis.engine_command,
    )

    return app.exec()
