"""Parse and validate JSON returned by the remote exchanges.

Every parser raises RemoteResponseError on malformed input; the adapter
catches it and substitutes that exchange's local fallback.
"""

from __future__ import annotations

import json
import re
from typing import Any

from pydantic import ValidationError

from creativesight.engine.heuristics import ComplianceFindings
from creativesight.models.analysis import (
    ComplianceCheck,
    DesignMetrics,
    HeatmapData,
    PlacementSimulation,
    Suggestion,
)

PLACEMENT_COUNT = 3

# Used when the compliance response omits designMetrics entirely
_DEFAULT_REMOTE_METRICS = {
    "compliance": 75,
    "attention": 70,
    "readability": 80,
    "brandConsistency": 75,
}

_SEVERITIES = {"critical", "warning", "info"}


class RemoteResponseError(ValueError):
    """A remote exchange returned a payload we can't use."""


def extract_json(text: str) -> dict[str, Any]:
    """Extract one JSON object from model output, tolerating fences and chatter."""
    cleaned = re.sub(r"^```(?:json)?\s*\n?", "", text.strip())
    cleaned = re.sub(r"\n?```\s*$", "", cleaned)
    cleaned = cleaned.strip()

    json_match = re.search(r"\{[\s\S]*\}", cleaned)
    if json_match:
        cleaned = json_match.group(0)

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise RemoteResponseError(f"invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise RemoteResponseError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _as_list(data: dict[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise RemoteResponseError(f"{key} must be a list")
    return value


def _normalize_suggestions(raw: list[Any]) -> list[Suggestion]:
    suggestions: list[Suggestion] = []
    for idx, s in enumerate(raw):
        if not isinstance(s, dict) or not s.get("title"):
            continue
        severity = str(s.get("severity") or "info").lower()
        suggestions.append(
            Suggestion(
                id=f"ai-{idx}",
                type="ai",
                category=str(s.get("category") or "General"),
                severity=severity if severity in _SEVERITIES else "info",
                title=str(s["title"]),
                description=str(s.get("description") or ""),
            )
        )
    return suggestions


def parse_compliance(text: str) -> ComplianceFindings:
    data = extract_json(text)
    try:
        checks = []
        for c in _as_list(data, "complianceChecks"):
            if isinstance(c, dict) and isinstance(c.get("status"), str):
                c = {**c, "status": c["status"].lower()}
            checks.append(ComplianceCheck.model_validate(c))
        metrics = DesignMetrics.model_validate(data.get("designMetrics") or _DEFAULT_REMOTE_METRICS)
    except ValidationError as e:
        raise RemoteResponseError(f"compliance payload failed validation: {e}") from e

    return ComplianceFindings(
        design_metrics=metrics,
        compliance_checks=checks,
        suggestions=_normalize_suggestions(_as_list(data, "suggestions")),
        risk_factors=[str(f) for f in _as_list(data, "riskFactors")],
    )


def parse_heatmap(text: str) -> HeatmapData:
    data = extract_json(text)
    if not _as_list(data, "zones"):
        raise RemoteResponseError("heatmap payload has no zones")
    try:
        return HeatmapData.model_validate(data)
    except ValidationError as e:
        raise RemoteResponseError(f"heatmap payload failed validation: {e}") from e


def parse_placements(text: str) -> list[PlacementSimulation]:
    data = extract_json(text)
    raw = _as_list(data, "placements")
    if len(raw) < PLACEMENT_COUNT:
        raise RemoteResponseError(
            f"expected {PLACEMENT_COUNT} placements, got {len(raw)}"
        )
    try:
        return [PlacementSimulation.model_validate(p) for p in raw[:PLACEMENT_COUNT]]
    except ValidationError as e:
        raise RemoteResponseError(f"placement payload failed validation: {e}") from e
