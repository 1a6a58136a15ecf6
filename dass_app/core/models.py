"""Domain and wire models for the assessment client."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from dass_app.constants.instrument import ITEM_COUNT, SUBSCALE_MAX, TOTAL_MAX

MIN_AGE = 5
MAX_AGE = 120

AnswerValue = Annotated[int, Field(ge=0, le=3)]
SubscaleScore = Annotated[int, Field(ge=0, le=SUBSCALE_MAX)]
FeedScore = Annotated[float, Field(ge=0, le=SUBSCALE_MAX)]


class ScoringServiceError(Exception):
    """Raised when the scoring service cannot produce a usable response."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class IncompleteAnswersError(ValueError):
    """Raised when a payload is requested while items are still unanswered."""

    def __init__(self, unanswered: list[int]) -> None:
        super().__init__(f"{len(unanswered)} item(s) unanswered: {unanswered}")
        self.unanswered = unanswered


class SeverityLabel(str, Enum):
    """Closed set of severity bands returned by the scoring service."""

    NORMAL = "Normal"
    MILD = "Mild"
    MODERATE = "Moderate"
    SEVERE = "Severe"
    EXTREMELY_SEVERE = "Extremely Severe"

    @classmethod
    def parse(cls, value: object) -> SeverityLabel | None:
        """Return the matching label, or None for anything outside the enumeration."""
        for label in cls:
            if label.value == value:
                return label
        return None


class RespondentMetadata(BaseModel):
    """Optional, purely descriptive information about the respondent."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    email: str | None = None
    age: int | None = None
    context: str | None = None

    @classmethod
    def from_form(
        cls,
        name: str = "",
        email: str = "",
        age_text: str = "",
        context: str = "",
    ) -> RespondentMetadata:
        """Build metadata from raw form text, treating blanks as absent."""
        return cls(
            name=_blank_to_none(name),
            email=_blank_to_none(email),
            age=_parse_age(age_text),
            context=_blank_to_none(context),
        )


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def _parse_age(age_text: str | None) -> int | None:
    stripped = (age_text or "").strip()
    if not stripped:
        return None
    try:
        age = int(stripped)
    except ValueError:
        return None
    if not MIN_AGE <= age <= MAX_AGE:
        return None
    return age


class SubmissionPayload(BaseModel):
    """Complete response set ready to be posted to ``/api/score``."""

    model_config = ConfigDict(frozen=True)

    student_name: str | None = None
    student_email: str | None = None
    age: int | None = None
    context: str | None = None
    answers: list[AnswerValue] = Field(min_length=ITEM_COUNT, max_length=ITEM_COUNT)

    @classmethod
    def build(cls, metadata: RespondentMetadata, answers: list[int]) -> SubmissionPayload:
        return cls(
            student_name=metadata.name,
            student_email=metadata.email,
            age=metadata.age,
            context=metadata.context,
            answers=answers,
        )

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON body; absent optional fields are omitted, not sent as null."""
        return self.model_dump(exclude_none=True)


class ScoreResult(BaseModel):
    """Scores and severity bands computed by the scoring service.

    Severity fields accept any string: labels outside ``SeverityLabel`` are a
    presentation concern and get a neutral style rather than failing here.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    depression_score: SubscaleScore
    anxiety_score: SubscaleScore
    stress_score: SubscaleScore
    depression_severity: str
    anxiety_severity: str
    stress_severity: str
    total_score: int = Field(ge=0, le=TOTAL_MAX)
    assessment_id: str | None = None

    @field_validator("assessment_id", mode="before")
    @classmethod
    def _coerce_identifier(cls, value: object) -> object:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @classmethod
    def from_response(cls, data: object) -> ScoreResult:
        """Validate a decoded response body.

        Raises:
            ScoringServiceError: If the body does not match the expected shape.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ScoringServiceError(
                f"Scoring response did not match the expected shape ({exc.error_count()} error(s))."
            ) from exc


class RecentAssessmentSummary(BaseModel):
    """Sparse record from the recent-assessments feed; every field may be absent."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    student_name: str | None = None
    created_at: datetime | None = None
    depression_score: SubscaleScore | FeedScore | None = None
    anxiety_score: SubscaleScore | FeedScore | None = None
    stress_score: SubscaleScore | FeedScore | None = None

    @field_validator("*", mode="wrap")
    @classmethod
    def _default_on_mismatch(cls, value: object, handler: Any) -> object:
        if isinstance(value, bool):
            return None
        try:
            return handler(value)
        except (ValidationError, OverflowError):
            return None

    @classmethod
    def from_raw(cls, raw: object) -> RecentAssessmentSummary:
        """Build a summary from an arbitrary decoded JSON value; never raises."""
        if not isinstance(raw, dict):
            return cls()
        return cls.model_validate(raw)
