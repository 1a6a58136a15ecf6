"""Tests for the editing → submitting → result state machine."""

from __future__ import annotations

import json

import httpx
import pytest
import respx

from dass_app.constants.ui_constants import INCOMPLETE_MESSAGE, SCORING_FAILED_MESSAGE
from dass_app.core.models import RespondentMetadata, ScoreResult
from dass_app.core.services.submission_workflow import (
    SubmissionOutcome,
    SubmissionWorkflow,
    WorkflowState,
)

from conftest import NORMAL_RESULT, answer_all


def _mock_score(router: respx.MockRouter, response: httpx.Response) -> respx.Route:
    return router.post("/api/score").mock(return_value=response)


class TestCompletenessGuard:
    @pytest.mark.parametrize("missing", range(1, 22))
    def test_incomplete_answers_never_reach_the_network(
        self,
        workflow: SubmissionWorkflow,
        scoring_api: respx.MockRouter,
        missing: int,
    ) -> None:
        route = _mock_score(scoring_api, httpx.Response(200, json=NORMAL_RESULT))
        answer_all(workflow.collector, value=2, skip=missing)
        before = workflow.collector.answers()

        state = workflow.submit(RespondentMetadata())

        assert state is WorkflowState.EDITING
        assert route.call_count == 0
        assert workflow.error_message == INCOMPLETE_MESSAGE
        assert workflow.collector.answers() == before
        assert not workflow.collector.is_frozen()

    def test_can_submit_tracks_completeness(self, workflow: SubmissionWorkflow) -> None:
        assert not workflow.can_submit()
        answer_all(workflow.collector)
        assert workflow.can_submit()


class TestSuccessfulSubmission:
    def test_issues_exactly_one_request_with_twenty_one_answers(
        self, workflow: SubmissionWorkflow, scoring_api: respx.MockRouter
    ) -> None:
        route = _mock_score(scoring_api, httpx.Response(200, json=NORMAL_RESULT))
        for index in range(1, 22):
            workflow.collector.set_answer(index, (index * 5) % 4)

        state = workflow.submit(RespondentMetadata())

        assert state is WorkflowState.RESULT
        assert route.call_count == 1
        body = json.loads(route.calls.last.request.content)
        assert len(body["answers"]) == 21
        assert set(body["answers"]) <= {0, 1, 2, 3}
        assert set(body) == {"answers"}

    def test_sends_present_metadata(
        self, workflow: SubmissionWorkflow, scoring_api: respx.MockRouter
    ) -> None:
        route = _mock_score(scoring_api, httpx.Response(200, json=NORMAL_RESULT))
        answer_all(workflow.collector, value=1)

        workflow.submit(RespondentMetadata(name="Ana", age=15))

        body = json.loads(route.calls.last.request.content)
        assert body["student_name"] == "Ana"
        assert body["age"] == 15
        assert "student_email" not in body
        assert "context" not in body

    def test_result_is_stored_and_error_cleared(
        self, workflow: SubmissionWorkflow, scoring_api: respx.MockRouter
    ) -> None:
        _mock_score(scoring_api, httpx.Response(200, json={**NORMAL_RESULT, "assessment_id": "a1"}))
        workflow.submit(RespondentMetadata())  # incomplete: sets the validation error
        answer_all(workflow.collector)

        workflow.submit(RespondentMetadata())

        assert workflow.result is not None
        assert workflow.result.assessment_id == "a1"
        assert workflow.error_message is None

    def test_no_new_submission_while_showing_result(
        self, workflow: SubmissionWorkflow, scoring_api: respx.MockRouter
    ) -> None:
        route = _mock_score(scoring_api, httpx.Response(200, json=NORMAL_RESULT))
        answer_all(workflow.collector)
        workflow.submit(RespondentMetadata())

        assert workflow.begin_submission(RespondentMetadata()) is None
        assert route.call_count == 1


class TestFailedSubmission:
    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(500, json={"detail": "boom"}),
            httpx.Response(422, json={"detail": "bad"}),
            httpx.Response(200, text="<html>not json</html>"),
            httpx.Response(200, json={"depression_score": 3}),
            httpx.Response(200, json={**NORMAL_RESULT, "stress_score": 10**400}),
            httpx.Response(200, json={**NORMAL_RESULT, "depression_score": 43}),
            httpx.Response(200, json={**NORMAL_RESULT, "total_score": 127}),
        ],
    )
    def test_failure_returns_to_editing_with_answers_preserved(
        self,
        workflow: SubmissionWorkflow,
        scoring_api: respx.MockRouter,
        response: httpx.Response,
    ) -> None:
        _mock_score(scoring_api, response)
        answer_all(workflow.collector, value=3)
        before = workflow.collector.answers()

        state = workflow.submit(RespondentMetadata())

        assert state is WorkflowState.EDITING
        assert workflow.error_message == SCORING_FAILED_MESSAGE
        assert workflow.result is None
        assert workflow.collector.answers() == before
        assert workflow.can_submit()

    def test_transport_error_is_recovered(
        self, workflow: SubmissionWorkflow, scoring_api: respx.MockRouter
    ) -> None:
        scoring_api.post("/api/score").mock(side_effect=httpx.ConnectError)
        answer_all(workflow.collector)

        assert workflow.submit(RespondentMetadata()) is WorkflowState.EDITING
        assert workflow.error_message == SCORING_FAILED_MESSAGE

    def test_retry_after_failure_succeeds(
        self, workflow: SubmissionWorkflow, scoring_api: respx.MockRouter
    ) -> None:
        scoring_api.post("/api/score").mock(
            side_effect=[httpx.Response(503), httpx.Response(200, json=NORMAL_RESULT)]
        )
        answer_all(workflow.collector)

        assert workflow.submit(RespondentMetadata()) is WorkflowState.EDITING
        assert workflow.submit(RespondentMetadata()) is WorkflowState.RESULT


class TestSubmittingState:
    def test_answers_are_frozen_while_in_flight(self, workflow: SubmissionWorkflow) -> None:
        answer_all(workflow.collector)
        ticket = workflow.begin_submission(RespondentMetadata())

        assert ticket is not None
        assert workflow.is_submitting()
        assert not workflow.can_submit()
        with pytest.raises(RuntimeError):
            workflow.collector.set_answer(1, 3)

    def test_second_submission_is_refused(self, workflow: SubmissionWorkflow) -> None:
        answer_all(workflow.collector)
        assert workflow.begin_submission(RespondentMetadata()) is not None
        assert workflow.begin_submission(RespondentMetadata()) is None
        assert workflow.error_message is None

    def test_outcome_after_reset_is_discarded(self, workflow: SubmissionWorkflow) -> None:
        answer_all(workflow.collector)
        ticket = workflow.begin_submission(RespondentMetadata())
        assert ticket is not None

        workflow.reset()
        applied = workflow.resolve(ticket, SubmissionOutcome(result=ScoreResult(**NORMAL_RESULT)))

        assert not applied
        assert workflow.state is WorkflowState.EDITING
        assert workflow.result is None
        assert workflow.collector.answers() == (None,) * 21


class TestReset:
    @pytest.mark.parametrize("prior", ["editing", "error", "result", "submitting"])
    def test_reset_always_yields_fresh_editing_state(
        self,
        workflow: SubmissionWorkflow,
        scoring_api: respx.MockRouter,
        prior: str,
    ) -> None:
        status = 500 if prior == "error" else 200
        _mock_score(scoring_api, httpx.Response(status, json=NORMAL_RESULT))
        answer_all(workflow.collector, value=1)
        if prior in ("error", "result"):
            workflow.submit(RespondentMetadata())
        elif prior == "submitting":
            workflow.begin_submission(RespondentMetadata())

        workflow.reset()

        assert workflow.state is WorkflowState.EDITING
        assert workflow.collector.answers() == (None,) * 21
        assert workflow.result is None
        assert workflow.error_message is None
        assert not workflow.collector.is_frozen()
