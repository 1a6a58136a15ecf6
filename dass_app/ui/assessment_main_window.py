"""Qt main window hosting the questionnaire, results and sidebar."""

from __future__ import annotations

from functools import partial
import logging

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QScrollArea,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from dass_app.constants.about import (
    ABOUT_DASS_MARKDOWN,
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    FOOTER_TEXT,
    HELP_RESOURCES_MARKDOWN,
    HELP_TEXT,
)
from dass_app.constants.ui_constants import (
    DEFAULT_UI_FONT_SIZE,
    HEADER_SUBTITLE,
    SCORING_FAILED_MESSAGE,
    SYSTEM_CHECK_FAILED,
    SYSTEM_CHECK_OK,
    TOOLBAR_ABOUT,
    TOOLBAR_HELP,
    TOOLBAR_SETTINGS,
    TOOLBAR_SYSTEM_CHECK,
    WINDOW_TITLE,
)
from dass_app.core.markdown_renderer import renderer
from dass_app.core.scoring_client import ScoringClient
from dass_app.core.services.recent_feed import RecentAssessmentsFeed
from dass_app.core.services.submission_workflow import (
    SubmissionOutcome,
    SubmissionTicket,
    SubmissionWorkflow,
    WorkflowState,
)
from dass_app.styling.color_palette import Theme
from dass_app.styling.styles import Styles
from dass_app.ui.components.questionnaire_panel import QuestionnairePanel
from dass_app.ui.components.recent_panel import RecentAssessmentsPanel
from dass_app.ui.components.results_panel import ResultsPanel
from dass_app.ui.dialog_helpers import show_info, show_warning
from dass_app.ui.settings_dialog import SettingsDialog
from dass_app.ui.task_runner import BackgroundTaskRunner, TaskRunner

logger = logging.getLogger(__name__)


class AssessmentMainWindow(QMainWindow):
    """Main Qt window; every state change goes through the SubmissionWorkflow."""

    def __init__(
        self,
        workflow: SubmissionWorkflow,
        feed: RecentAssessmentsFeed,
        client: ScoringClient,
        task_runner: TaskRunner | None = None,
        load_recent: bool = True,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(1100, 800)

        self.workflow = workflow
        self.feed = feed
        self.client = client
        self.task_runner: TaskRunner = task_runner or BackgroundTaskRunner()

        self._ui_font_size: int = DEFAULT_UI_FONT_SIZE
        self._theme = Theme.LIGHT

        self._build_ui()
        self._apply_styles()
        self._refresh_view()
        if load_recent:
            self.load_recent_assessments()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_header(root_layout)

        body_row = QHBoxLayout()

        self.mode_stack = QStackedWidget(self)
        self.questionnaire_panel = QuestionnairePanel(
            self.workflow.collector,
            on_submit=self._handle_submit,
            on_reset=self._handle_reset,
            on_answers_changed=self._refresh_view,
            parent=self,
        )
        self.results_panel = ResultsPanel(on_take_again=self._handle_reset, parent=self)
        self.mode_stack.addWidget(self.questionnaire_panel)
        self.mode_stack.addWidget(self.results_panel)

        self.scroll_area = QScrollArea(self)
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setFrameShape(QFrame.NoFrame)
        self.scroll_area.setWidget(self.mode_stack)
        body_row.addWidget(self.scroll_area, stretch=2)

        body_row.addLayout(self._build_sidebar(), stretch=1)
        root_layout.addLayout(body_row, stretch=1)

        self.footer_label = QLabel(FOOTER_TEXT, self)
        self.footer_label.setAlignment(Qt.AlignCenter)
        root_layout.addWidget(self.footer_label)

    def _build_header(self, layout: QVBoxLayout) -> None:
        header_row = QHBoxLayout()

        title_column = QVBoxLayout()
        self.title_label = QLabel(WINDOW_TITLE, self)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        title_column.addWidget(self.title_label)
        self.subtitle_label = QLabel(HEADER_SUBTITLE, self)
        title_column.addWidget(self.subtitle_label)
        header_row.addLayout(title_column)
        header_row.addStretch()

        self.about_button = QPushButton(TOOLBAR_ABOUT, self)
        self.about_button.clicked.connect(self._handle_about)
        header_row.addWidget(self.about_button)

        self.help_button = QPushButton(TOOLBAR_HELP, self)
        self.help_button.clicked.connect(self._handle_help)
        header_row.addWidget(self.help_button)

        self.system_check_button = QPushButton(TOOLBAR_SYSTEM_CHECK, self)
        self.system_check_button.clicked.connect(self._handle_system_check)
        header_row.addWidget(self.system_check_button)

        self.settings_button = QPushButton(TOOLBAR_SETTINGS, self)
        self.settings_button.clicked.connect(self._handle_settings)
        header_row.addWidget(self.settings_button)

        layout.addLayout(header_row)

    def _build_sidebar(self) -> QVBoxLayout:
        sidebar = QVBoxLayout()

        self.about_label = self._markdown_label(ABOUT_DASS_MARKDOWN)
        sidebar.addWidget(self.about_label)

        self.recent_panel = RecentAssessmentsPanel(self)
        sidebar.addWidget(self.recent_panel, stretch=1)

        self.help_resources_label = self._markdown_label(HELP_RESOURCES_MARKDOWN)
        sidebar.addWidget(self.help_resources_label)

        return sidebar

    def _markdown_label(self, markdown_text: str) -> QLabel:
        label = QLabel(self)
        label.setTextFormat(Qt.RichText)
        label.setWordWrap(True)
        label.setText(renderer.render_fragment(markdown_text))
        return label

    # --- Workflow ---

    def _handle_submit(self) -> None:
        ticket = self.workflow.begin_submission(self.questionnaire_panel.metadata())
        self._refresh_view()
        if ticket is None:
            return
        self.task_runner.submit(
            partial(self.workflow.execute, ticket),
            partial(self._handle_submission_finished, ticket),
            on_error=partial(self._handle_submission_crashed, ticket),
        )

    def _handle_submission_finished(self, ticket: SubmissionTicket, outcome: SubmissionOutcome) -> None:
        self.workflow.resolve(ticket, outcome)
        self._refresh_view()

    def _handle_submission_crashed(self, ticket: SubmissionTicket, error: Exception) -> None:
        logger.error("Submission task raised unexpectedly: %s", error)
        self._handle_submission_finished(ticket, SubmissionOutcome(error=SCORING_FAILED_MESSAGE))

    def _handle_reset(self) -> None:
        self.workflow.reset()
        self.questionnaire_panel.sync_from_collector()
        self.results_panel.clear()
        self._refresh_view()

    def _refresh_view(self) -> None:
        state = self.workflow.state
        if state is WorkflowState.RESULT and self.workflow.result is not None:
            self.results_panel.show_result(self.workflow.result)
            self.mode_stack.setCurrentWidget(self.results_panel)
            return

        self.mode_stack.setCurrentWidget(self.questionnaire_panel)
        submitting = state is WorkflowState.SUBMITTING
        self.questionnaire_panel.set_submitting(submitting)
        self.questionnaire_panel.set_submit_enabled(self.workflow.can_submit())
        self.questionnaire_panel.set_error(self.workflow.error_message)

    # --- Recent assessments ---

    def load_recent_assessments(self) -> None:
        """Fetch the feed in the background; it only ever touches the sidebar."""
        self.task_runner.submit(
            self.feed.load,
            self.recent_panel.show_entries,
            on_error=lambda error: self.recent_panel.show_entries([]),
        )

    # --- Chrome ---

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details, font_point_size=self._ui_font_size)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT, font_point_size=self._ui_font_size)

    def _handle_system_check(self) -> None:
        self.system_check_button.setEnabled(False)
        self.task_runner.submit(
            self.client.check_connection,
            self._show_system_check_result,
            on_error=lambda error: self._show_system_check_result(False),
        )

    def _show_system_check_result(self, reachable: bool) -> None:
        self.system_check_button.setEnabled(True)
        url = self.client.base_url
        if reachable:
            show_info(
                self, TOOLBAR_SYSTEM_CHECK, SYSTEM_CHECK_OK.format(url=url),
                font_point_size=self._ui_font_size,
            )
        else:
            show_warning(
                self, TOOLBAR_SYSTEM_CHECK, SYSTEM_CHECK_FAILED.format(url=url),
                font_point_size=self._ui_font_size,
            )

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(self, self._ui_font_size, self._theme)
        if dialog.exec():
            self._ui_font_size = dialog.get_ui_font_size()
            self._theme = dialog.get_theme()
            self._apply_styles()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style(self._theme, self._ui_font_size))
        self.subtitle_label.setStyleSheet(Styles.get_secondary_label_style(self._theme))
        self.footer_label.setStyleSheet(Styles.get_secondary_label_style(self._theme))
        self.questionnaire_panel.apply_theme(self._theme)
        self.results_panel.apply_theme(self._theme)
