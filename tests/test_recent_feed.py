"""Tests for the best-effort recent assessments feed."""

from __future__ import annotations

from datetime import datetime

import httpx
import pytest
import respx

from dass_app.core.models import RecentAssessmentSummary
from dass_app.core.scoring_client import ScoringClient
from dass_app.core.services.recent_feed import RecentAssessmentsFeed, format_feed_entry


def _record(number: int) -> dict[str, object]:
    return {
        "student_name": f"Student {number}",
        "created_at": f"2024-05-{number:02d}T09:30:00",
        "depression_score": number,
        "anxiety_score": number * 2,
        "stress_score": 0,
    }


class TestLoad:
    def test_keeps_only_first_five_in_service_order(
        self, feed: RecentAssessmentsFeed, scoring_api: respx.MockRouter
    ) -> None:
        scoring_api.get("/api/assessments").mock(
            return_value=httpx.Response(200, json=[_record(n) for n in range(1, 8)])
        )

        summaries = feed.load()

        assert [summary.student_name for summary in summaries] == [
            f"Student {n}" for n in range(1, 6)
        ]

    def test_custom_limit(self, client: ScoringClient, scoring_api: respx.MockRouter) -> None:
        scoring_api.get("/api/assessments").mock(
            return_value=httpx.Response(200, json=[_record(n) for n in range(1, 8)])
        )
        assert len(RecentAssessmentsFeed(client, limit=2).load()) == 2

    def test_odd_records_degrade_to_placeholders(
        self, feed: RecentAssessmentsFeed, scoring_api: respx.MockRouter
    ) -> None:
        scoring_api.get("/api/assessments").mock(
            return_value=httpx.Response(200, json=[None, "x", {"stress_score": "n/a"}])
        )

        assert feed.load() == [RecentAssessmentSummary()] * 3

    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(200, json={"assessments": []}),
            httpx.Response(500),
            httpx.Response(200, text="oops"),
        ],
    )
    def test_failures_yield_empty_list(
        self,
        feed: RecentAssessmentsFeed,
        scoring_api: respx.MockRouter,
        response: httpx.Response,
    ) -> None:
        scoring_api.get("/api/assessments").mock(return_value=response)
        assert feed.load() == []

    def test_unreachable_service_yields_empty_list(
        self, feed: RecentAssessmentsFeed, scoring_api: respx.MockRouter
    ) -> None:
        scoring_api.get("/api/assessments").mock(side_effect=httpx.ConnectError)
        assert feed.load() == []


class TestFormatFeedEntry:
    def test_complete_entry(self) -> None:
        summary = RecentAssessmentSummary(
            student_name="Ana",
            created_at=datetime(2024, 5, 3, 9, 30),
            depression_score=12,
            anxiety_score=8.0,
            stress_score=4.5,
        )

        view = format_feed_entry(summary)

        assert view.name == "Ana"
        assert view.date_text == "2024-05-03"
        assert view.scores_text == "D 12 · A 8 · S 4.5"

    def test_missing_fields_use_placeholders(self) -> None:
        view = format_feed_entry(RecentAssessmentSummary(student_name="   "))

        assert view.name == "Anonymous"
        assert view.date_text == "-"
        assert view.scores_text == "D - · A - · S -"


class TestFormatFeedEntryLimits:
    def test_timestamp_at_edge_of_range_uses_placeholder(self) -> None:
        summary = RecentAssessmentSummary.from_raw({"created_at": "9999-12-31T23:59:59-14:00"})
        assert summary.created_at is not None

        assert format_feed_entry(summary).date_text == "-"

    def test_near_boundary_timestamp_never_raises(self) -> None:
        summary = RecentAssessmentSummary.from_raw({"created_at": "9999-12-31T23:00:00-05:00"})
        assert format_feed_entry(summary).date_text in {"9999-12-31", "-"}

    def test_huge_score_renders_as_placeholder(self) -> None:
        summary = RecentAssessmentSummary.from_raw({"depression_score": 10**400, "stress_score": 41})
        assert format_feed_entry(summary).scores_text == "D - · A - · S 41"
