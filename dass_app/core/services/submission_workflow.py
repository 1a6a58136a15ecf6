"""State machine driving an assessment from editing to a scored result.

The workflow is split so that only ``execute`` touches the network. It reads
no mutable workflow state and may run on a worker thread; ``begin_submission``
and ``resolve`` run on the UI thread, so state changes stay single-threaded.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
import logging

from dass_app.constants.ui_constants import INCOMPLETE_MESSAGE, SCORING_FAILED_MESSAGE
from dass_app.core.models import (
    IncompleteAnswersError,
    RespondentMetadata,
    ScoreResult,
    ScoringServiceError,
    SubmissionPayload,
)
from dass_app.core.scoring_client import ScoringClient
from dass_app.core.services.response_collector import ResponseCollector

logger = logging.getLogger(__name__)


class WorkflowState(Enum):
    """Top-level state of the current assessment round."""

    EDITING = auto()
    SUBMITTING = auto()
    RESULT = auto()


@dataclass(frozen=True, slots=True)
class SubmissionTicket:
    """Handle for one in-flight submission."""

    generation: int
    payload: SubmissionPayload


@dataclass(frozen=True, slots=True)
class SubmissionOutcome:
    """Result-or-error returned by ``SubmissionWorkflow.execute``."""

    result: ScoreResult | None = None
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.result is not None


class SubmissionWorkflow:
    """Coordinates the response collector with the scoring service."""

    def __init__(self, collector: ResponseCollector, client: ScoringClient) -> None:
        self._collector = collector
        self._client = client
        self._state = WorkflowState.EDITING
        self._result: ScoreResult | None = None
        self._error_message: str | None = None
        self._generation: int = 0

    @property
    def collector(self) -> ResponseCollector:
        return self._collector

    @property
    def state(self) -> WorkflowState:
        return self._state

    @property
    def result(self) -> ScoreResult | None:
        return self._result

    @property
    def error_message(self) -> str | None:
        return self._error_message

    def is_submitting(self) -> bool:
        return self._state is WorkflowState.SUBMITTING

    def can_submit(self) -> bool:
        return self._state is WorkflowState.EDITING and self._collector.is_complete()

    def begin_submission(self, metadata: RespondentMetadata) -> SubmissionTicket | None:
        """Move from editing to submitting if the answer set is complete.

        Returns None without side effects on the answers when a submission is
        already in flight, a result is showing, or items are unanswered (the
        last case sets the validation message).
        """
        if self._state is not WorkflowState.EDITING:
            logger.debug("Ignoring submit request in state %s", self._state.name)
            return None

        self._error_message = None
        try:
            payload = self._collector.build_payload(metadata)
        except IncompleteAnswersError as exc:
            self._error_message = INCOMPLETE_MESSAGE
            logger.info("Submission blocked: %d item(s) unanswered", len(exc.unanswered))
            return None

        self._collector.freeze()
        self._state = WorkflowState.SUBMITTING
        self._generation += 1
        logger.info("Submitting assessment (round %d)", self._generation)
        return SubmissionTicket(generation=self._generation, payload=payload)

    def execute(self, ticket: SubmissionTicket) -> SubmissionOutcome:
        """Issue the single scoring request for ``ticket``."""
        try:
            result = self._client.score(ticket.payload)
        except ScoringServiceError as exc:
            logger.warning("Scoring failed (round %d): %s", ticket.generation, exc)
            return SubmissionOutcome(error=SCORING_FAILED_MESSAGE)
        return SubmissionOutcome(result=result)

    def resolve(self, ticket: SubmissionTicket, outcome: SubmissionOutcome) -> bool:
        """Apply an outcome. Returns False if the ticket is stale and was ignored."""
        if ticket.generation != self._generation or self._state is not WorkflowState.SUBMITTING:
            logger.debug("Discarding outcome for stale round %d", ticket.generation)
            return False

        self._collector.unfreeze()
        if outcome.result is not None:
            self._result = outcome.result
            self._error_message = None
            self._state = WorkflowState.RESULT
            logger.info("Assessment scored (round %d)", ticket.generation)
        else:
            self._error_message = outcome.error or SCORING_FAILED_MESSAGE
            self._state = WorkflowState.EDITING
        return True

    def submit(self, metadata: RespondentMetadata) -> WorkflowState:
        """Run a full submission synchronously and return the resulting state."""
        ticket = self.begin_submission(metadata)
        if ticket is not None:
            self.resolve(ticket, self.execute(ticket))
        return self._state

    def reset(self) -> None:
        """Start over with a fresh answer set, dropping any result or error."""
        self._collector.reset()
        self._result = None
        self._error_message = None
        self._state = WorkflowState.EDITING
        # Invalidate any outcome still in flight.
        self._generation += 1
