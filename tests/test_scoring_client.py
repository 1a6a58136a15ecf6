"""Tests for the httpx-backed scoring client."""

from __future__ import annotations

import json

import httpx
import pytest
import respx

from dass_app.core.config import AppConfig
from dass_app.core.models import RespondentMetadata, ScoringServiceError, SubmissionPayload
from dass_app.core.scoring_client import ScoringClient

from conftest import BASE_URL, NORMAL_RESULT


@pytest.fixture
def payload() -> SubmissionPayload:
    return SubmissionPayload.build(RespondentMetadata(context="Year 9"), [2] * 21)


class TestScore:
    def test_posts_payload_as_json(
        self, client: ScoringClient, scoring_api: respx.MockRouter, payload: SubmissionPayload
    ) -> None:
        route = scoring_api.post("/api/score").mock(
            return_value=httpx.Response(200, json={**NORMAL_RESULT, "assessment_id": "x9"})
        )

        result = client.score(payload)

        assert route.call_count == 1
        request = route.calls.last.request
        assert request.headers["content-type"] == "application/json"
        assert json.loads(request.content) == {"context": "Year 9", "answers": [2] * 21}
        assert result.assessment_id == "x9"

    def test_http_error_keeps_status_code(
        self, client: ScoringClient, scoring_api: respx.MockRouter, payload: SubmissionPayload
    ) -> None:
        scoring_api.post("/api/score").mock(return_value=httpx.Response(404))

        with pytest.raises(ScoringServiceError) as excinfo:
            client.score(payload)

        assert excinfo.value.status_code == 404

    def test_connection_error_is_wrapped(
        self, client: ScoringClient, scoring_api: respx.MockRouter, payload: SubmissionPayload
    ) -> None:
        scoring_api.post("/api/score").mock(side_effect=httpx.ConnectError)

        with pytest.raises(ScoringServiceError) as excinfo:
            client.score(payload)

        assert excinfo.value.status_code is None
        assert isinstance(excinfo.value.__cause__, httpx.ConnectError)

    def test_timeout_is_wrapped(
        self, client: ScoringClient, scoring_api: respx.MockRouter, payload: SubmissionPayload
    ) -> None:
        scoring_api.post("/api/score").mock(side_effect=httpx.ReadTimeout)

        with pytest.raises(ScoringServiceError):
            client.score(payload)

    def test_invalid_json_is_wrapped(
        self, client: ScoringClient, scoring_api: respx.MockRouter, payload: SubmissionPayload
    ) -> None:
        scoring_api.post("/api/score").mock(return_value=httpx.Response(200, text="{not json"))

        with pytest.raises(ScoringServiceError):
            client.score(payload)


class TestListAssessments:
    def test_returns_raw_array(self, client: ScoringClient, scoring_api: respx.MockRouter) -> None:
        records = [{"student_name": "Ana"}, 5, None]
        scoring_api.get("/api/assessments").mock(return_value=httpx.Response(200, json=records))

        assert client.list_assessments() == records

    @pytest.mark.parametrize("body", [{"items": []}, "text", 7, None])
    def test_non_array_body_raises(
        self, client: ScoringClient, scoring_api: respx.MockRouter, body: object
    ) -> None:
        scoring_api.get("/api/assessments").mock(return_value=httpx.Response(200, json=body))

        with pytest.raises(ScoringServiceError):
            client.list_assessments()


class TestCheckConnection:
    def test_reachable_service(self, client: ScoringClient, scoring_api: respx.MockRouter) -> None:
        scoring_api.get("/api/assessments").mock(return_value=httpx.Response(200, json=[]))
        assert client.check_connection() is True

    def test_server_error_reports_false(
        self, client: ScoringClient, scoring_api: respx.MockRouter
    ) -> None:
        scoring_api.get("/api/assessments").mock(return_value=httpx.Response(502))
        assert client.check_connection() is False

    def test_unreachable_service_reports_false(
        self, client: ScoringClient, scoring_api: respx.MockRouter
    ) -> None:
        scoring_api.get("/api/assessments").mock(side_effect=httpx.ConnectError)
        assert client.check_connection() is False


class TestLifecycle:
    def test_base_url_and_context_manager(self) -> None:
        with ScoringClient(AppConfig(backend_url=BASE_URL + "/")) as scoring_client:
            assert scoring_client.base_url == BASE_URL
