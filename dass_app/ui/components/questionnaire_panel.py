"""Component for answering the 21 items and submitting them."""

from __future__ import annotations

from collections.abc import Callable
from functools import partial

from PySide6.QtGui import QIntValidator
from PySide6.QtWidgets import (
    QButtonGroup,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QRadioButton,
    QVBoxLayout,
    QWidget,
)

from dass_app.constants.instrument import ITEM_COUNT, ITEMS, ResponseScale
from dass_app.constants.ui_constants import (
    FORM_HEADING,
    FORM_INTRO,
    PLACEHOLDER_AGE,
    PLACEHOLDER_CONTEXT,
    PLACEHOLDER_EMAIL,
    PLACEHOLDER_NAME,
    PROGRESS_TEMPLATE,
    RESET_BUTTON,
    SUBMIT_BUTTON,
    SUBMITTING_BUTTON,
)
from dass_app.core.models import MAX_AGE, MIN_AGE, RespondentMetadata
from dass_app.core.services.response_collector import ResponseCollector
from dass_app.styling.color_palette import Theme
from dass_app.styling.styles import Styles
from dass_app.ui.dialog_helpers import confirm_reset


class QuestionnairePanel(QWidget):
    """UI component holding the respondent fields and the 21 item groups."""

    def __init__(
        self,
        collector: ResponseCollector,
        on_submit: Callable[[], None],
        on_reset: Callable[[], None],
        on_answers_changed: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.collector = collector
        self.on_submit = on_submit
        self.on_reset = on_reset
        self.on_answers_changed = on_answers_changed
        self._theme = Theme.LIGHT

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.heading_label = QLabel(FORM_HEADING, self)
        self.heading_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.heading_label)

        self.intro_label = QLabel(FORM_INTRO, self)
        self.intro_label.setWordWrap(True)
        layout.addWidget(self.intro_label)

        self._build_metadata_fields(layout)

        self.button_groups: list[QButtonGroup] = []
        self.item_boxes: list[QGroupBox] = []
        for item in ITEMS:
            layout.addWidget(self._build_item_box(item.index, item.text))

        self.error_label = QLabel("", self)
        self.error_label.setWordWrap(True)
        self.error_label.setVisible(False)
        layout.addWidget(self.error_label)

        button_row = QHBoxLayout()
        self.reset_button = QPushButton(RESET_BUTTON, self)
        self.reset_button.clicked.connect(self._handle_reset_click)
        button_row.addWidget(self.reset_button)

        button_row.addStretch()
        self.progress_label = QLabel("", self)
        button_row.addWidget(self.progress_label)

        self.submit_button = QPushButton(SUBMIT_BUTTON, self)
        self.submit_button.setObjectName("primaryButton")
        self.submit_button.setEnabled(False)
        self.submit_button.clicked.connect(self._handle_submit_click)
        button_row.addWidget(self.submit_button)
        layout.addLayout(button_row)

        self.update_progress()

    def _build_metadata_fields(self, layout: QVBoxLayout) -> None:
        grid = QGridLayout()
        self.name_input = QLineEdit(self)
        self.name_input.setPlaceholderText(PLACEHOLDER_NAME)
        self.email_input = QLineEdit(self)
        self.email_input.setPlaceholderText(PLACEHOLDER_EMAIL)
        self.age_input = QLineEdit(self)
        self.age_input.setPlaceholderText(PLACEHOLDER_AGE)
        self.age_input.setValidator(QIntValidator(MIN_AGE, MAX_AGE, self))
        self.context_input = QLineEdit(self)
        self.context_input.setPlaceholderText(PLACEHOLDER_CONTEXT)

        self.metadata_inputs = [self.name_input, self.email_input, self.age_input, self.context_input]
        for position, field in enumerate(self.metadata_inputs):
            # Enter in any field submits, like the browser form this replaces.
            field.returnPressed.connect(self._handle_submit_click)
            grid.addWidget(field, position // 2, position % 2)
        layout.addLayout(grid)

    def _build_item_box(self, index: int, text: str) -> QGroupBox:
        box = QGroupBox(self)
        box_layout = QVBoxLayout()
        box.setLayout(box_layout)

        statement = QLabel(f"{index}. {text}", box)
        statement.setWordWrap(True)
        statement.setStyleSheet("font-weight: 600;")
        box_layout.addWidget(statement)

        options_row = QHBoxLayout()
        group = QButtonGroup(box)
        for scale in ResponseScale:
            button = QRadioButton(f"{scale.value}  {scale.label}", box)
            group.addButton(button, scale.value)
            options_row.addWidget(button)
        group.idClicked.connect(partial(self._handle_answer, index))
        box_layout.addLayout(options_row)

        self.button_groups.append(group)
        self.item_boxes.append(box)
        return box

    def _handle_answer(self, item_index: int, value: int) -> None:
        if self.collector.is_frozen():
            return
        self.collector.set_answer(item_index, value)
        self.update_progress()
        self.on_answers_changed()

    def _handle_submit_click(self) -> None:
        self.on_submit()

    def _handle_reset_click(self) -> None:
        answered = self.collector.answered_count()
        if answered and not confirm_reset(self, answered):
            return
        self.on_reset()

    def select_answer(self, item_index: int, value: int) -> None:
        """Programmatically click an option, as a user would."""
        self.button_groups[item_index - 1].button(value).click()

    def metadata(self) -> RespondentMetadata:
        return RespondentMetadata.from_form(
            name=self.name_input.text(),
            email=self.email_input.text(),
            age_text=self.age_input.text(),
            context=self.context_input.text(),
        )

    def sync_from_collector(self) -> None:
        """Make the radio buttons mirror the collector (e.g. after a reset)."""
        for position, group in enumerate(self.button_groups, start=1):
            answer = self.collector.get_answer(position)
            group.setExclusive(False)
            for button in group.buttons():
                button.setChecked(answer is not None and group.id(button) == int(answer))
            group.setExclusive(True)
        self.update_progress()

    def update_progress(self) -> None:
        self.progress_label.setText(
            PROGRESS_TEMPLATE.format(answered=self.collector.answered_count(), total=ITEM_COUNT)
        )

    def set_error(self, message: str | None) -> None:
        self.error_label.setText(message or "")
        self.error_label.setVisible(bool(message))

    def set_submit_enabled(self, enabled: bool) -> None:
        self.submit_button.setEnabled(enabled)

    def set_submitting(self, submitting: bool) -> None:
        """Freeze or release every input while a submission is in flight."""
        self.submit_button.setText(SUBMITTING_BUTTON if submitting else SUBMIT_BUTTON)
        self.reset_button.setEnabled(not submitting)
        for field in self.metadata_inputs:
            field.setReadOnly(submitting)
        for box in self.item_boxes:
            box.setEnabled(not submitting)

    def apply_theme(self, theme: Theme) -> None:
        self._theme = theme
        self.error_label.setStyleSheet(Styles.get_error_label_style(theme))
        self.progress_label.setStyleSheet(Styles.get_secondary_label_style(theme))
