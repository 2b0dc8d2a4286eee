"""Core analysis data model — the structured output of the engine.

Attributes are snake_case in Python; JSON uses the camelCase names the
presentation layer and the remote service speak (``designMetrics``,
``brandConsistency``...). Both forms are accepted on input.
"""

from __future__ import annotations

import enum
import math
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from creativesight.utils.math_helpers import clamp_score

CheckStatus = Literal["pass", "warning", "fail"]
Severity = Literal["critical", "warning", "info"]
SuggestionType = Literal["ai", "manual"]
ResultSource = Literal["remote", "partial", "local"]


class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ImageFeatureProfile(WireModel):
    """Aggregate pixel statistics for one creative. Not range-checked."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    has_text: bool
    text_density: float  # 0-100
    color_count: int  # 0-256
    brightness: int  # 0-255
    contrast: int  # 0-100
    estimated_readability: int  # 0-100


class ComplianceCheck(WireModel):
    item: str
    status: CheckStatus
    details: str = ""


class DesignMetrics(WireModel):
    compliance: int
    attention: int
    readability: int
    brand_consistency: int

    @field_validator("compliance", "attention", "readability", "brand_consistency", mode="before")
    @classmethod
    def _clamp(cls, value: object) -> int:
        if isinstance(value, str):
            value = float(value)
        if not isinstance(value, (int, float)):
            raise ValueError(f"metric must be numeric, got {type(value).__name__}")
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError("metric must be finite")
        return clamp_score(value)

    def as_list(self) -> list[int]:
        return [self.compliance, self.attention, self.readability, self.brand_consistency]


class HeatmapZone(WireModel):
    x: int
    y: int
    intensity: int
    description: str = ""

    @field_validator("x", "y", "intensity", mode="before")
    @classmethod
    def _clamp(cls, value: object) -> int:
        if not isinstance(value, (int, float)):
            raise ValueError("zone coordinates must be numeric")
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError("zone coordinates must be finite")
        return clamp_score(value)


class HeatmapData(WireModel):
    zones: list[HeatmapZone]
    focus_areas: list[str] = Field(default_factory=list)


class RiskLabel(str, enum.Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    NEEDS_WORK = "Needs Work"


class RiskAnalysis(WireModel):
    score: int = Field(ge=0, le=100)
    label: RiskLabel
    recommendation: str
    risk_factors: list[str] = Field(default_factory=list)


class Suggestion(WireModel):
    id: str
    type: SuggestionType = "ai"
    category: str = "General"
    severity: Severity = "info"
    title: str
    description: str = ""


class PlacementSimulation(WireModel):
    context: str
    description: str = ""
    recommendation: str = ""


class AnalysisResult(WireModel):
    """Complete result of one creative analysis, returned to callers."""

    compliance_checks: list[ComplianceCheck] = Field(default_factory=list)
    design_metrics: DesignMetrics
    heatmap_data: HeatmapData
    risk_analysis: RiskAnalysis
    suggestions: list[Suggestion] = Field(default_factory=list)
    placement_simulations: list[PlacementSimulation] = Field(default_factory=list)

    # Which tier produced the result: all remote, mixed, or fully local
    source: ResultSource = "local"
