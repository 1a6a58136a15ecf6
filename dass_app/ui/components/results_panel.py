"""Component showing the scores returned by the scoring service."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from dass_app.constants.instrument import SUBSCALE_MAX, TOTAL_MAX
from dass_app.constants.ui_constants import (
    RESULTS_DISCLAIMER,
    RESULTS_HEADING,
    SAVED_ID_TEMPLATE,
    TAKE_AGAIN_BUTTON,
    TOTAL_TEMPLATE,
)
from dass_app.core.models import ScoreResult
from dass_app.core.severity_presenter import SubscaleView, present_result
from dass_app.styling.color_palette import Theme
from dass_app.styling.styles import Styles


class _SubscaleRow(QGroupBox):
    """Title, severity badge and progress bar for one subscale."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout()
        self.setLayout(layout)

        header = QHBoxLayout()
        self.title_label = QLabel("", self)
        self.title_label.setStyleSheet("font-weight: 600;")
        header.addWidget(self.title_label)
        header.addStretch()
        self.badge_label = QLabel("", self)
        self.badge_label.setAlignment(Qt.AlignCenter)
        header.addWidget(self.badge_label)
        layout.addLayout(header)

        self.progress_bar = QProgressBar(self)
        self.progress_bar.setRange(0, 100)
        self.progress_bar.setValue(0)
        self.progress_bar.setTextVisible(False)
        layout.addWidget(self.progress_bar)

    def show_view(self, view: SubscaleView, theme: Theme) -> None:
        self.title_label.setText(view.title)
        self.badge_label.setText(view.severity_text)
        self.badge_label.setStyleSheet(Styles.get_badge_style(view.badge, theme))
        self.progress_bar.setValue(view.fill_percent)
        self.progress_bar.setStyleSheet(Styles.get_progress_bar_style(view.bar_color, theme))


class ResultsPanel(QWidget):
    """UI component rendering a ScoreResult without recomputing anything."""

    def __init__(
        self,
        on_take_again: Callable[[], None],
        subscale_max: int = SUBSCALE_MAX,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_take_again = on_take_again
        self._subscale_max = subscale_max
        self._theme = Theme.LIGHT
        self._result: ScoreResult | None = None

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.heading_label = QLabel(RESULTS_HEADING, self)
        self.heading_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.heading_label)

        self.disclaimer_label = QLabel(RESULTS_DISCLAIMER, self)
        self.disclaimer_label.setWordWrap(True)
        layout.addWidget(self.disclaimer_label)

        self.subscale_rows: list[_SubscaleRow] = []
        for _ in range(3):
            row = _SubscaleRow(self)
            layout.addWidget(row)
            self.subscale_rows.append(row)

        self.total_label = QLabel("", self)
        layout.addWidget(self.total_label)

        self.assessment_id_label = QLabel("", self)
        self.assessment_id_label.setVisible(False)
        layout.addWidget(self.assessment_id_label)

        button_row = QHBoxLayout()
        self.take_again_button = QPushButton(TAKE_AGAIN_BUTTON, self)
        self.take_again_button.clicked.connect(self.on_take_again)
        button_row.addWidget(self.take_again_button)
        button_row.addStretch()
        layout.addLayout(button_row)
        layout.addStretch()

    def show_result(self, result: ScoreResult) -> None:
        self._result = result
        for row, view in zip(self.subscale_rows, present_result(result, self._subscale_max)):
            row.show_view(view, self._theme)

        self.total_label.setText(
            TOTAL_TEMPLATE.format(score=result.total_score, maximum=TOTAL_MAX)
        )
        if result.assessment_id:
            self.assessment_id_label.setText(
                SAVED_ID_TEMPLATE.format(assessment_id=result.assessment_id)
            )
            self.assessment_id_label.setVisible(True)
        else:
            self.assessment_id_label.setText("")
            self.assessment_id_label.setVisible(False)

    def clear(self) -> None:
        self._result = None
        for row in self.subscale_rows:
            row.title_label.setText("")
            row.badge_label.setText("")
            row.progress_bar.setValue(0)
        self.total_label.setText("")
        self.assessment_id_label.setVisible(False)

    def apply_theme(self, theme: Theme) -> None:
        self._theme = theme
        self.assessment_id_label.setStyleSheet(Styles.get_secondary_label_style(theme))
        if self._result is not None:
            self.show_result(self._result)
