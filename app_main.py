"""Application entry point for the DASS-21 Student Check client."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from dass_app.core.config import load_config
from dass_app.core.scoring_client import ScoringClient
from dass_app.core.services.recent_feed import RecentAssessmentsFeed
from dass_app.core.services.response_collector import ResponseCollector
from dass_app.core.services.submission_workflow import SubmissionWorkflow
from dass_app.ui.assessment_main_window import AssessmentMainWindow
from dass_app.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging and configuration, then launch the Qt UI."""
    logger = configure_logging()
    config = load_config()
    logger.info("Starting DASS-21 client; scoring service at %s", config.backend_url)

    client = ScoringClient(config)
    workflow = SubmissionWorkflow(ResponseCollector(), client)
    feed = RecentAssessmentsFeed(client, limit=config.recent_limit)

    app = QApplication(sys.argv)
    window = AssessmentMainWindow(workflow=workflow, feed=feed, client=client)
    window.show()
    exit_code = app.exec()
    client.close()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
