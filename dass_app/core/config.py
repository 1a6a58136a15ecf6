"""Application configuration, resolved once at startup.

The only environment-derived setting is the scoring-service base URL. The
resulting ``AppConfig`` is handed to the scoring client; nothing else reads
the environment for it.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dass_app.constants.network_constants import (
    BACKEND_URL_ENV,
    DEFAULT_BACKEND_URL,
    LEGACY_BACKEND_URL_ENV,
    RECENT_ASSESSMENTS_LIMIT,
    REQUEST_TIMEOUT_SECONDS,
)


class AppConfig(BaseModel):
    """Immutable runtime settings for the client."""

    model_config = ConfigDict(frozen=True)

    backend_url: str = DEFAULT_BACKEND_URL
    request_timeout_seconds: float = Field(default=REQUEST_TIMEOUT_SECONDS, gt=0)
    recent_limit: int = Field(default=RECENT_ASSESSMENTS_LIMIT, ge=0)

    @field_validator("backend_url")
    @classmethod
    def _normalize_url(cls, value: str) -> str:
        stripped = value.strip().rstrip("/")
        return stripped or DEFAULT_BACKEND_URL


def load_config(environ: Mapping[str, str] | None = None) -> AppConfig:
    """Resolve configuration from the environment with documented fallbacks."""
    env = os.environ if environ is None else environ
    backend_url = env.get(BACKEND_URL_ENV) or env.get(LEGACY_BACKEND_URL_ENV) or DEFAULT_BACKEND_URL
    return AppConfig(backend_url=backend_url)
