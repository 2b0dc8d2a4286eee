"""Risk scoring — one 0-100 score, a band label and a recommendation."""

from __future__ import annotations

from collections.abc import Sequence

from creativesight.models.analysis import DesignMetrics, RiskAnalysis, RiskLabel
from creativesight.utils.math_helpers import clamp, round_half_up

PENALTY_PER_FACTOR = 5

# (inclusive lower bound, label, recommendation), highest band first
BANDS: tuple[tuple[int, RiskLabel, str], ...] = (
    (90, RiskLabel.EXCELLENT, "Your creative is ready for submission with high confidence."),
    (
        75,
        RiskLabel.GOOD,
        "Your creative is likely to pass review. Consider applying remaining suggestions.",
    ),
    (60, RiskLabel.FAIR, "Review and apply critical suggestions before submission."),
    (
        0,
        RiskLabel.NEEDS_WORK,
        "Significant improvements needed. Apply all suggestions and re-validate.",
    ),
)


def band_for(score: int) -> tuple[RiskLabel, str]:
    for lower, label, recommendation in BANDS:
        if score >= lower:
            return label, recommendation
    return BANDS[-1][1], BANDS[-1][2]


def score(metrics: DesignMetrics, risk_factors: Sequence[str]) -> RiskAnalysis:
    """Average the four metrics (rounded once), then subtract the factor penalty."""
    average = round_half_up(sum(metrics.as_list()) / 4)
    final = int(clamp(average - PENALTY_PER_FACTOR * len(risk_factors), 0, 100))
    label, recommendation = band_for(final)
    return RiskAnalysis(
        score=final,
        label=label,
        recommendation=recommendation,
        risk_factors=list(risk_factors),
    )
