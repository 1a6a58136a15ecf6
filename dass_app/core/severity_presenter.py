"""Maps scoring-service results to progress fills and severity badges.

Nothing here recomputes a severity band from a score: the labels returned by
the scoring service are authoritative, so threshold changes server-side never
disagree with what is displayed.
"""

from __future__ import annotations

from dataclasses import dataclass
import math

from dass_app.constants.instrument import SUBSCALE_MAX
from dass_app.core.models import ScoreResult, SeverityLabel
from dass_app.styling.color_palette import BadgeColors, ColorPalette, ThemeColors

_BADGES: dict[SeverityLabel, BadgeColors] = {
    SeverityLabel.NORMAL: ColorPalette.SEVERITY_NORMAL,
    SeverityLabel.MILD: ColorPalette.SEVERITY_MILD,
    SeverityLabel.MODERATE: ColorPalette.SEVERITY_MODERATE,
    SeverityLabel.SEVERE: ColorPalette.SEVERITY_SEVERE,
    SeverityLabel.EXTREMELY_SEVERE: ColorPalette.SEVERITY_EXTREMELY_SEVERE,
}


@dataclass(frozen=True, slots=True)
class SubscaleView:
    """Everything the results panel needs to draw one subscale row."""

    name: str
    title: str
    score: int
    maximum: int
    fill_percent: int
    severity_text: str
    badge: BadgeColors
    bar_color: ThemeColors
    known_label: bool


def fill_percent(score: float, maximum: float) -> int:
    """Proportional fill in whole percent, clamped to 0..100."""
    if not math.isfinite(maximum) or maximum <= 0:
        return 0
    if isinstance(score, float) and math.isnan(score):
        return 0
    # Clamp first; a huge int overflows float division.
    bounded = max(0, min(score, maximum))
    return math.floor(bounded / maximum * 100 + 0.5)


def badge_colors(label: object) -> BadgeColors:
    """Badge colors for ``label``; anything outside the known bands gets the neutral style."""
    severity = SeverityLabel.parse(label)
    if severity is None:
        return ColorPalette.SEVERITY_UNKNOWN
    return _BADGES[severity]


def present_subscale(
    name: str,
    score: int,
    maximum: int,
    label: object,
    bar_color: ThemeColors = ColorPalette.BAR_DEPRESSION,
) -> SubscaleView:
    severity_text = label if isinstance(label, str) and label else "Unknown"
    return SubscaleView(
        name=name,
        title=f"{name}: {score} / {maximum}",
        score=score,
        maximum=maximum,
        fill_percent=fill_percent(score, maximum),
        severity_text=severity_text,
        badge=badge_colors(label),
        bar_color=bar_color,
        known_label=SeverityLabel.parse(label) is not None,
    )


def present_result(result: ScoreResult, maximum: int = SUBSCALE_MAX) -> list[SubscaleView]:
    """Views for depression, anxiety and stress, in that order."""
    return [
        present_subscale(
            "Depression", result.depression_score, maximum,
            result.depression_severity, ColorPalette.BAR_DEPRESSION,
        ),
        present_subscale(
            "Anxiety", result.anxiety_score, maximum,
            result.anxiety_severity, ColorPalette.BAR_ANXIETY,
        ),
        present_subscale(
            "Stress", result.stress_score, maximum,
            result.stress_severity, ColorPalette.BAR_STRESS,
        ),
    ]
