"""Shared pytest fixtures for the DASS-21 client tests."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from typing import Any

# Qt must run headless; set before PySide6 is imported anywhere.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
import respx

from dass_app.core.config import AppConfig
from dass_app.core.scoring_client import ScoringClient
from dass_app.core.services.recent_feed import RecentAssessmentsFeed
from dass_app.core.services.response_collector import ResponseCollector
from dass_app.core.services.submission_workflow import SubmissionWorkflow

BASE_URL = "http://scoring.test"

NORMAL_RESULT: dict[str, Any] = {
    "depression_score": 0,
    "anxiety_score": 0,
    "stress_score": 0,
    "depression_severity": "Normal",
    "anxiety_severity": "Normal",
    "stress_severity": "Normal",
    "total_score": 0,
}


class InlineTaskRunner:
    """Runs tasks immediately on the calling thread."""

    def submit(
        self,
        fn: Callable[[], Any],
        on_done: Callable[[Any], None],
        on_error: Callable[[Exception], None] | None = None,
    ) -> None:
        on_done(fn())


class DeferredTaskRunner:
    """Queues tasks until the test decides when (and in which order) they finish."""

    def __init__(self) -> None:
        self.tasks: list[tuple[Callable[[], Any], Callable[[Any], None]]] = []

    def submit(
        self,
        fn: Callable[[], Any],
        on_done: Callable[[Any], None],
        on_error: Callable[[Exception], None] | None = None,
    ) -> None:
        self.tasks.append((fn, on_done))

    def run(self, position: int = 0) -> None:
        fn, on_done = self.tasks.pop(position)
        on_done(fn())

    def run_all(self) -> None:
        while self.tasks:
            self.run()


def answer_all(collector: ResponseCollector, value: int = 0, skip: int | None = None) -> None:
    for index in range(1, 22):
        if index != skip:
            collector.set_answer(index, value)


@pytest.fixture
def config() -> AppConfig:
    return AppConfig(backend_url=BASE_URL)


@pytest.fixture
def client(config: AppConfig) -> Iterator[ScoringClient]:
    scoring_client = ScoringClient(config)
    yield scoring_client
    scoring_client.close()


@pytest.fixture
def scoring_api() -> Iterator[respx.MockRouter]:
    """Mocked scoring service; unmatched requests fail the test."""
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as router:
        yield router


@pytest.fixture
def collector() -> ResponseCollector:
    return ResponseCollector()


@pytest.fixture
def workflow(collector: ResponseCollector, client: ScoringClient) -> SubmissionWorkflow:
    return SubmissionWorkflow(collector, client)


@pytest.fixture
def feed(client: ScoringClient) -> RecentAssessmentsFeed:
    return RecentAssessmentsFeed(client, limit=5)


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
