"""Network configuration constants for the scoring-service client."""

DEFAULT_BACKEND_URL: str = "http://localhost:8000"
BACKEND_URL_ENV: str = "DASS_BACKEND_URL"
LEGACY_BACKEND_URL_ENV: str = "VITE_BACKEND_URL"
REQUEST_TIMEOUT_SECONDS: float = 10.0
RECENT_ASSESSMENTS_LIMIT: int = 5

SCORE_PATH: str = "/api/score"
ASSESSMENTS_PATH: str = "/api/assessments"
