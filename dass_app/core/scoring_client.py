"""HTTP client for the external scoring service."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from dass_app.constants.network_constants import ASSESSMENTS_PATH, SCORE_PATH
from dass_app.core.config import AppConfig
from dass_app.core.models import ScoreResult, ScoringServiceError, SubmissionPayload

logger = logging.getLogger(__name__)


class ScoringClient:
    """Thin wrapper over ``httpx.Client`` bound to the configured base URL.

    Example:
        >>> with ScoringClient(load_config()) as client:
        ...     result = client.score(payload)
    """

    def __init__(self, config: AppConfig) -> None:
        self._base_url = config.backend_url
        self._client = httpx.Client(
            base_url=config.backend_url,
            timeout=httpx.Timeout(config.request_timeout_seconds),
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def __enter__(self) -> ScoringClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying connection pool."""
        self._client.close()

    def score(self, payload: SubmissionPayload) -> ScoreResult:
        """Submit a complete response set and return the validated result.

        Raises:
            ScoringServiceError: On transport failure, non-2xx status, an
                undecodable body or a body that is not ScoreResult-shaped.
        """
        data = self._request_json("POST", SCORE_PATH, json=payload.to_wire())
        return ScoreResult.from_response(data)

    def list_assessments(self) -> list[object]:
        """Fetch the raw recent-assessments array.

        Raises:
            ScoringServiceError: On any failure or when the body is not an array.
        """
        data = self._request_json("GET", ASSESSMENTS_PATH)
        if not isinstance(data, list):
            raise ScoringServiceError("Assessments response was not an array.")
        return data

    def check_connection(self) -> bool:
        """Return True when the scoring service answers the assessments endpoint."""
        try:
            response = self._client.get(ASSESSMENTS_PATH)
        except httpx.HTTPError as exc:
            logger.info("System check failed for %s: %s", self._base_url, exc)
            return False
        return response.is_success

    def _request_json(self, method: str, path: str, **kwargs: Any) -> object:
        try:
            response = self._client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning("%s %s returned HTTP %s", method, path, status)
            raise ScoringServiceError(f"HTTP {status} from {path}", status_code=status) from exc
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise ScoringServiceError(f"Request to {path} failed: {exc}") from exc

        try:
            return response.json()
        except ValueError as exc:
            logger.warning("%s %s returned a body that is not JSON", method, path)
            raise ScoringServiceError(f"Invalid JSON from {path}") from exc
