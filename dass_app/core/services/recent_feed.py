"""Best-effort feed of recently stored assessments."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
import logging

from dass_app.constants.network_constants import RECENT_ASSESSMENTS_LIMIT
from dass_app.constants.ui_constants import ANONYMOUS_NAME, MISSING_VALUE
from dass_app.core.models import RecentAssessmentSummary, ScoringServiceError
from dass_app.core.scoring_client import ScoringClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FeedEntryView:
    """Display strings for one feed row."""

    name: str
    date_text: str
    scores_text: str


class RecentAssessmentsFeed:
    """Loads the first few recent assessments; failures degrade to an empty list."""

    def __init__(self, client: ScoringClient, limit: int = RECENT_ASSESSMENTS_LIMIT) -> None:
        self._client = client
        self._limit = max(0, limit)

    def load(self) -> list[RecentAssessmentSummary]:
        try:
            records = self._client.list_assessments()
        except ScoringServiceError as exc:
            logger.info("Recent assessments unavailable: %s", exc)
            return []
        return [RecentAssessmentSummary.from_raw(record) for record in records[: self._limit]]


def format_feed_entry(summary: RecentAssessmentSummary) -> FeedEntryView:
    """Render a summary with placeholders for every missing field."""
    name = (summary.student_name or "").strip() or ANONYMOUS_NAME
    scores_text = " · ".join(
        f"{prefix} {_format_score(value)}"
        for prefix, value in (
            ("D", summary.depression_score),
            ("A", summary.anxiety_score),
            ("S", summary.stress_score),
        )
    )
    return FeedEntryView(
        name=name, date_text=_format_date(summary.created_at), scores_text=scores_text
    )


def _format_date(created: datetime | None) -> str:
    if created is None:
        return MISSING_VALUE
    if created.tzinfo is not None:
        try:
            created = created.astimezone()
        except (OverflowError, ValueError):
            # Timestamps at the edge of the datetime range cannot shift zones.
            logger.debug("Unrenderable feed timestamp %r", created)
            return MISSING_VALUE
    return created.strftime("%Y-%m-%d")


def _format_score(value: int | float | None) -> str:
    if value is None:
        return MISSING_VALUE
    if isinstance(value, int):
        return str(value)
    return f"{value:g}"
