"""Static metadata and informational copy for the DASS-21 client.

The longer texts are markdown; the sidebar renders them through
``dass_app.core.markdown_renderer``.
"""

APP_NAME = "DASS-21 Student Check"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "DASS-21 Student Check collects answers to the 21-item Depression, Anxiety and "
    "Stress Scale, sends them to a scoring service and shows the returned screening "
    "scores. It is a screening aid, not a diagnostic tool."
)

ABOUT_DASS_MARKDOWN = (
    "### About DASS-21\n\n"
    "A 21-item screening tool that measures depression, anxiety, and stress over the "
    "past week. **It is not a diagnosis.** For concerns, consult a professional."
)

HELP_RESOURCES_MARKDOWN = (
    "### If you need help\n\n"
    "- Talk to your school counselor or mental health professional.\n"
    "- Reach out to a trusted teacher, family member, or friend.\n"
    "- If you feel unsafe, contact local emergency services immediately.\n"
)

FOOTER_TEXT = "For educational screening only, not a medical diagnosis."

HELP_TEXT = (
    "Answer every one of the 21 statements by picking how much it applied to you over "
    "the past week. Name, email, age and context are optional.\n\n"
    "Submit becomes available once all statements are answered. If scoring fails your "
    "answers are kept, so you can simply submit again. Use Reset to clear the form or "
    "Take Again after viewing your results.\n\n"
    "Set DASS_BACKEND_URL before launching to point the app at a different scoring "
    "service."
)
