"""Helper functions for the few dialogs the assessment UI uses.

Validation and scoring errors never go through here; they are shown inline in
the questionnaire panel.
"""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget

from dass_app.constants.instrument import ITEM_COUNT


def _message_box(
    parent: QWidget,
    icon: QMessageBox.Icon,
    title: str,
    message: str,
    font_point_size: int | None,
) -> QMessageBox:
    box = QMessageBox(parent)
    box.setIcon(icon)
    box.setWindowTitle(title)
    box.setText(message)
    if font_point_size is not None and font_point_size > 0:
        font = box.font()
        font.setPointSize(font_point_size)
        box.setFont(font)
        box.setStyleSheet(
            f"QLabel, QPushButton {{ font-size: {font_point_size}pt; }}"
        )
    return box


def confirm_reset(
    parent: QWidget,
    answered_count: int,
    *,
    font_point_size: int | None = None,
) -> bool:
    """Ask before discarding a partially completed questionnaire.

    Args:
        parent: Parent widget for the dialog
        answered_count: Number of items answered so far
        font_point_size: Optional point size matching the UI setting

    Returns:
        True if the user chose to clear the answers
    """
    box = _message_box(
        parent,
        QMessageBox.Question,
        "Clear answers?",
        f"You have answered {answered_count} of {ITEM_COUNT} statements. Clear all answers and start over?",
        font_point_size,
    )
    box.setStandardButtons(QMessageBox.Yes | QMessageBox.No)
    box.setDefaultButton(QMessageBox.No)
    box.exec()
    return box.clickedButton() is box.button(QMessageBox.Yes)


def show_info(
    parent: QWidget,
    title: str,
    message: str,
    *,
    font_point_size: int | None = None,
) -> None:
    """Show an information dialog (About, Help, a passing system check)."""
    _message_box(parent, QMessageBox.Information, title, message, font_point_size).exec()


def show_warning(
    parent: QWidget,
    title: str,
    message: str,
    *,
    font_point_size: int | None = None,
) -> None:
    """Show a warning dialog (a failing system check)."""
    _message_box(parent, QMessageBox.Warning, title, message, font_point_size).exec()
