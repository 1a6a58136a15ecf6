"""Component listing the most recent stored assessments."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QGroupBox,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QVBoxLayout,
    QWidget,
)

from dass_app.constants.ui_constants import RECENT_EMPTY_STATE, RECENT_HEADING
from dass_app.core.models import RecentAssessmentSummary
from dass_app.core.services.recent_feed import format_feed_entry


class RecentAssessmentsPanel(QGroupBox):
    """Sidebar box listing recent assessments, with placeholders for missing fields."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(RECENT_HEADING, parent)
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.entry_list = QListWidget(self)
        self.entry_list.setAlternatingRowColors(True)
        self.entry_list.setVisible(False)
        layout.addWidget(self.entry_list)

        self.empty_label = QLabel(RECENT_EMPTY_STATE, self)
        self.empty_label.setWordWrap(True)
        self.empty_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.empty_label)

    def show_entries(self, summaries: list[RecentAssessmentSummary]) -> None:
        self.entry_list.clear()
        for summary in summaries:
            entry = format_feed_entry(summary)
            QListWidgetItem(f"{entry.name} · {entry.date_text}\n{entry.scores_text}", self.entry_list)
        has_entries = self.entry_list.count() > 0
        self.entry_list.setVisible(has_entries)
        self.empty_label.setVisible(not has_entries)
