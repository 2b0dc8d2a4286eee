"""Validation report — the downloadable summary of one analysis."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import Field

from creativesight.models.analysis import (
    AnalysisResult,
    ComplianceCheck,
    DesignMetrics,
    HeatmapData,
    PlacementSimulation,
    RiskAnalysis,
    Suggestion,
    WireModel,
)

# Same thresholds as the risk bands
_CONFIDENCE_BANDS = (
    (90, "High Confidence"),
    (75, "Good Confidence"),
    (60, "Moderate Confidence"),
    (0, "Low Confidence"),
)


class ReportMetadata(WireModel):
    retailer: str
    placement: str
    timestamp: str
    confidence_score: int
    confidence_label: str


class ReportAnalysis(WireModel):
    design_metrics: DesignMetrics
    compliance_checks: list[ComplianceCheck] = Field(default_factory=list)
    risk_analysis: RiskAnalysis


class ValidationReport(WireModel):
    metadata: ReportMetadata
    analysis: ReportAnalysis
    suggestions: list[Suggestion] = Field(default_factory=list)
    placement_simulations: list[PlacementSimulation] = Field(default_factory=list)
    heatmap_data: HeatmapData


def confidence_label(score: int) -> str:
    for lower, label in _CONFIDENCE_BANDS:
        if score >= lower:
            return label
    return _CONFIDENCE_BANDS[-1][1]


def summary_line(analysis: AnalysisResult) -> str:
    risk = analysis.risk_analysis
    return f"Validation Score: {risk.score}/100 - {risk.label.value}"


def build_report(
    analysis: AnalysisResult,
    retailer_name: str,
    placement_name: str,
    now: datetime | None = None,
) -> ValidationReport:
    now = now or datetime.now(timezone.utc)
    score = analysis.risk_analysis.score
    return ValidationReport(
        metadata=ReportMetadata(
            retailer=retailer_name,
            placement=placement_name,
            timestamp=now.isoformat(),
            confidence_score=score,
            confidence_label=confidence_label(score),
        ),
        analysis=ReportAnalysis(
            design_metrics=analysis.design_metrics,
            compliance_checks=analysis.compliance_checks,
            risk_analysis=analysis.risk_analysis,
        ),
        suggestions=analysis.suggestions,
        placement_simulations=analysis.placement_simulations,
        heatmap_data=analysis.heatmap_data,
    )
