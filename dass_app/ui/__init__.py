"""Qt UI components for the DASS-21 client."""

from .dialog_helpers import confirm_reset, show_info, show_warning
from .task_runner import BackgroundTaskRunner, TaskRunner
from .assessment_main_window import AssessmentMainWindow

__all__ = [
    "AssessmentMainWindow",
    "BackgroundTaskRunner",
    "TaskRunner",
    "confirm_reset",
    "show_info",
    "show_warning",
]
