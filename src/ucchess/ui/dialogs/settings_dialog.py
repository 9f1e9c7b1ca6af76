"""SettingsDialog — application-wide settings with a category sidebar."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QSpinBox,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from ucchess.engine.protocol import DEFAULT_SEARCH_DEPTH
from ucchess.ui.i18n import LANGUAGES, t
from ucchess.ui.playback import PlaybackScheduler
from ucchess.ui.styles.theme import SIDEBAR_STYLE

# ── Settings data class ──────────────────────────────────────────────────────


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"
    use_figurine_notation: bool = True
    flip_board: bool = False

    # Engine / playback
    engine_path: str = "stockfish"
    engine_depth: int = DEFAULT_SEARCH_DEPTH
    playback_delay_ms: int = PlaybackScheduler.DEFAULT_DELAY_MS
    analyze_on_navigation: bool = False


_TITLE_STYLE = "font-size: 15px; font-weight: 600;"

# ── Individual settings pages ────────────────────────────────────────────────


class _SettingsPage(QWidget):
    """Form page with a bold title row; subclasses add fields and ``apply``."""

    title_attr = ""

    def __init__(self) -> None:
        super().__init__()
        self._form = QFormLayout(self)
        self._form.setSpacing(10)
        self._form.setContentsMargins(18, 14, 18, 14)
        self._title = QLabel()
        self._title.setStyleSheet(_TITLE_STYLE)
        self._form.addRow(self._title)

    def retranslate_ui(self) -> None:
        self._title.setText(getattr(t(), self.title_attr))

    def apply(self, settings: AppSettings) -> None:
        raise NotImplementedError


class _GeneralPage(_SettingsPage):
    title_attr = "settings_general"

    def __init__(self, settings: AppSettings) -> None:
        super().__init__()
        self._lang_label = QLabel()
        self._lang_combo = QComboBox()
        self._lang_combo.addItems(LANGUAGES)
        idx = self._lang_combo.findText(settings.language)
        self._lang_combo.setCurrentIndex(max(0, idx))
        self._form.addRow(self._lang_label, self._lang_combo)

        self._figurine_check = QCheckBox()
        self._figurine_check.setChecked(settings.use_figurine_notation)
        self._form.addRow(self._figurine_check)

        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        super().retranslate_ui()
        s = t()
        self._lang_label.setText(s.settings_language)
        self._figurine_check.setText(s.settings_figurine)

    def apply(self, settings: AppSettings) -> None:
        settings.language = self._lang_combo.currentText()
        settings.use_figurine_notation = self._figurine_check.isChecked()


class _EnginePage(_SettingsPage):
    """Engine command, search depth and autoplay options."""

    title_attr = "settings_engine"

    def __init__(self, settings: AppSettings) -> None:
        super().__init__()
        self._path_label = QLabel()
        self._path_edit = QLineEdit(settings.engine_path)
        self._form.addRow(self._path_label, self._path_edit)

        self._depth_label = QLabel()
        self._depth_spin = QSpinBox()
        self._depth_spin.setRange(1, 40)
        self._depth_spin.setValue(settings.engine_depth)
        self._form.addRow(self._depth_label, self._depth_spin)

        self._delay_label = QLabel()
        self._delay_spin = QSpinBox()
        self._delay_spin.setRange(100, 10_000)
        self._delay_spin.setSingleStep(100)
        self._delay_spin.setValue(settings.playback_delay_ms)
        self._form.addRow(self._delay_label, self._delay_spin)

        self._nav_check = QCheckBox()
        self._nav_check.setChecked(settings.analyze_on_navigation)
        self._form.addRow(self._nav_check)

        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        super().retranslate_ui()
        s = t()
        self._path_label.setText(s.settings_engine_path)
        self._depth_label.setText(s.settings_engine_depth)
        self._depth_spin.setSuffix(s.settings_engine_depth_suffix)
        self._delay_label.setText(s.settings_delay)
        self._delay_spin.setSuffix(s.settings_delay_suffix)
        self._nav_check.setText(s.settings_analyze_on_navigation)

    def apply(self, settings: AppSettings) -> None:
        settings.engine_path = self._path_edit.text().strip() or settings.engine_path
        settings.engine_depth = self._depth_spin.value()
        settings.playback_delay_ms = self._delay_spin.value()
        settings.analyze_on_navigation = self._nav_check.isChecked()


# ── Main dialog ──────────────────────────────────────────────────────────────

_PAGE_CLASSES: tuple[type[_GeneralPage | _EnginePage], ...] = (
    _GeneralPage,
    _EnginePage,
)


class SettingsDialog(QDialog):
    """Modal dialog: category list on the left, one form page per category.

    Edits are written back into the given :class:`AppSettings` only on OK.
    """

    def __init__(
        self,
        settings: AppSettings,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setMinimumSize(600, 340)
        self._settings = settings
        self._pages: list[_SettingsPage] = [cls(settings) for cls in _PAGE_CLASSES]
        self._build_ui()
        self.retranslate_ui()

    def _build_ui(self) -> None:
        root = QHBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        self._sidebar = QListWidget()
        self._sidebar.setFixedWidth(140)
        self._sidebar.setStyleSheet(SIDEBAR_STYLE)
        self._stack = QStackedWidget()
        for page in self._pages:
            self._sidebar.addItem(QListWidgetItem())
            self._stack.addWidget(page)
        self._sidebar.currentRowChanged.connect(self._stack.setCurrentIndex)
        self._sidebar.setCurrentRow(0)
        root.addWidget(self._sidebar)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.accepted.connect(self._on_accept)
        buttons.rejected.connect(self.reject)

        right = QVBoxLayout()
        right.setContentsMargins(0, 0, 10, 10)
        right.addWidget(self._stack, 1)
        right.addWidget(buttons)
        root.addLayout(right, 1)

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.settings_title)
        for row, page in enumerate(self._pages):
            item = self._sidebar.item(row)
            if item is not None:
                item.setText(getattr(s, page.title_attr))
            page.retranslate_ui()

    def _on_accept(self) -> None:
        for page in self._pages:
            page.apply(self._settings)
        self.accept()
