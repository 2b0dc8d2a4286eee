"""API request/response models that aren't part of the analysis result itself."""

from __future__ import annotations

from creativesight.models.analysis import AnalysisResult, WireModel


class HealthResponse(WireModel):
    status: str = "ok"
    version: str = "0.1.0"
    remote_capability: bool = False


class ReportRequest(WireModel):
    analysis: AnalysisResult
    retailer_name: str = ""
    placement_name: str = ""
