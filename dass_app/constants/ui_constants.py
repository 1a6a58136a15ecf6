"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "DASS-21 Student Check"
HEADER_SUBTITLE: str = "Depression · Anxiety · Stress"

TOOLBAR_ABOUT: str = "About"
TOOLBAR_HELP: str = "Help"
TOOLBAR_SYSTEM_CHECK: str = "System check"
TOOLBAR_SETTINGS: str = "Settings"

FORM_HEADING: str = "Complete the DASS-21"
FORM_INTRO: str = (
    "Think about the past week and choose the option that best describes how much "
    "each statement applied to you."
)
PLACEHOLDER_NAME: str = "Name (optional)"
PLACEHOLDER_EMAIL: str = "Email (optional)"
PLACEHOLDER_AGE: str = "Age (optional)"
PLACEHOLDER_CONTEXT: str = "Class / context (optional)"

RESET_BUTTON: str = "Reset"
SUBMIT_BUTTON: str = "Submit & See Results"
SUBMITTING_BUTTON: str = "Scoring…"
PROGRESS_TEMPLATE: str = "{answered} of {total} answered"

INCOMPLETE_MESSAGE: str = "Please answer all 21 questions before submitting."
SCORING_FAILED_MESSAGE: str = "Failed to score. Please try again."

RESULTS_HEADING: str = "Your Results"
RESULTS_DISCLAIMER: str = (
    "These scores reflect the past week. If you are distressed, please speak with "
    "a counselor or a trusted adult."
)
TOTAL_TEMPLATE: str = "Total score: {score} / {maximum}"
SAVED_ID_TEMPLATE: str = "Saved with ID: {assessment_id}"
TAKE_AGAIN_BUTTON: str = "Take Again"

RECENT_HEADING: str = "Recent Assessments"
RECENT_EMPTY_STATE: str = "No records yet or database not connected."
ANONYMOUS_NAME: str = "Anonymous"
MISSING_VALUE: str = "-"

SYSTEM_CHECK_OK: str = "The scoring service at {url} is reachable."
SYSTEM_CHECK_FAILED: str = "The scoring service at {url} could not be reached."

DEFAULT_UI_FONT_SIZE: int = 10
