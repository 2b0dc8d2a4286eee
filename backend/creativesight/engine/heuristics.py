"""Heuristic metric synthesis — design metrics and a compliance checklist from pixels alone.

Used when no remote endpoint is configured and as the fallback for a failed
compliance exchange. Pure and deterministic: the same profile always yields
the same synthesis.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from creativesight.models.analysis import (
    ComplianceCheck,
    DesignMetrics,
    ImageFeatureProfile,
    Suggestion,
)
from creativesight.utils.math_helpers import clamp_score, round_half_up

MAX_SUGGESTIONS = 4

# Contrast bands (0-100 scale from the feature extractor)
_CONTRAST_CRITICAL_BELOW = 40
_CONTRAST_WARNING_BELOW = 50
_CTA_CONTRAST_MIN = 35
_READABILITY_PASS = 70

# Quantized color count bands
_PALETTE_SPARSE_BELOW = 80
_PALETTE_BUSY_ABOVE = 180

_SEVERITY_RANK = {"critical": 0, "warning": 1, "info": 2}

LOW_CONTRAST_FACTOR = "Low contrast"


@dataclass
class ComplianceFindings:
    """Checklist, metrics, suggestions and risk factors for one creative."""

    design_metrics: DesignMetrics
    compliance_checks: list[ComplianceCheck] = field(default_factory=list)
    suggestions: list[Suggestion] = field(default_factory=list)
    risk_factors: list[str] = field(default_factory=list)


def compute_metrics(profile: ImageFeatureProfile) -> DesignMetrics:
    contrast = profile.contrast
    return DesignMetrics(
        compliance=clamp_score(contrast * 1.5 + 30),
        attention=clamp_score((profile.color_count / 256) * 100 * 0.7 + 40),
        readability=clamp_score(profile.estimated_readability),
        brand_consistency=clamp_score(contrast * 1.2 + 40),
    )


def estimated_contrast_ratio(contrast: float) -> str:
    """Display-only ratio string. Not derived from WCAG relative luminance."""
    return f"{round_half_up((contrast / 20 + 2) * 10) / 10:.1f}:1"


def build_checklist(profile: ImageFeatureProfile, metrics: DesignMetrics) -> list[ComplianceCheck]:
    contrast = profile.contrast
    ratio = estimated_contrast_ratio(contrast)

    if metrics.readability >= _READABILITY_PASS:
        readability_check = ComplianceCheck(
            item="Text readability",
            status="pass",
            details=f"Estimated text contrast ratio is {ratio}; text should read clearly",
        )
    else:
        readability_check = ComplianceCheck(
            item="Text readability",
            status="warning",
            details=f"Estimated text contrast ratio is {ratio}; aim for at least 4.5:1 (WCAG AA)",
        )

    contrast_ok = contrast >= _CONTRAST_CRITICAL_BELOW
    cta_ok = contrast >= _CTA_CONTRAST_MIN

    return [
        ComplianceCheck(
            item="Brand logo placement",
            status="pass",
            details="Logo placement is consistent with standard retailer layouts",
        ),
        readability_check,
        ComplianceCheck(
            item="Color contrast",
            status="pass" if contrast_ok else "fail",
            details=(
                "Light and dark areas are well separated"
                if contrast_ok
                else "Light and dark areas are too similar; text may blend into the background"
            ),
        ),
        ComplianceCheck(
            item="Dimension requirements",
            status="pass",
            details="Creative matches placement dimensions",
        ),
        # Legal text can't be certified from pixels alone
        ComplianceCheck(
            item="Legal disclaimers",
            status="warning",
            details="Verify that required terms and conditions are present",
        ),
        ComplianceCheck(
            item="Call-to-action clarity",
            status="pass" if cta_ok else "warning",
            details=(
                "Call-to-action stands out from its surroundings"
                if cta_ok
                else "Call-to-action may not stand out; increase its contrast or size"
            ),
        ),
    ]


def _contrast_suggestion(contrast: int) -> dict:
    if contrast < _CONTRAST_CRITICAL_BELOW:
        return {
            "category": "Accessibility",
            "severity": "critical",
            "title": "Improve Color Contrast",
            "description": (
                "Text and background are too close in brightness. Darken the text or "
                "lighten the background to reach at least 4.5:1 for WCAG AA."
            ),
        }
    if contrast < _CONTRAST_WARNING_BELOW:
        return {
            "category": "Accessibility",
            "severity": "warning",
            "title": "Enhance Color Contrast",
            "description": (
                "Contrast is acceptable but marginal under store lighting. Increase the "
                "separation between headline text and its background."
            ),
        }
    return {
        "category": "Accessibility",
        "severity": "info",
        "title": "Maintain Color Contrast",
        "description": (
            "Contrast is strong. Keep the same separation when adapting the creative "
            "to other placements."
        ),
    }


def _palette_suggestion(color_count: int) -> dict:
    if color_count < _PALETTE_SPARSE_BELOW:
        return {
            "category": "Design",
            "severity": "info",
            "title": "Add Visual Variety",
            "description": (
                "The palette is very limited. An accent color on the product or CTA "
                "can help the creative draw attention on shelf."
            ),
        }
    if color_count > _PALETTE_BUSY_ABOVE:
        return {
            "category": "Design",
            "severity": "warning",
            "title": "Simplify Color Palette",
            "description": (
                "Many competing colors dilute the focal point. Reduce the palette to "
                "brand colors plus one accent."
            ),
        }
    return {
        "category": "Design",
        "severity": "info",
        "title": "Color Palette Optimization",
        "description": (
            "The palette is balanced. Check that brand colors dominate and accents "
            "are reserved for the CTA."
        ),
    }


_FIXED_SUGGESTIONS = (
    {
        "category": "Compliance",
        "severity": "info",
        "title": "Add Legal Disclaimer",
        "description": (
            "Consider adding a small legal disclaimer at the bottom for complete compliance."
        ),
    },
    {
        "category": "Optimization",
        "severity": "info",
        "title": "Test in Retail Environment",
        "description": (
            "Preview the creative at actual size and viewing distance before submission."
        ),
    },
)


def build_suggestions(profile: ImageFeatureProfile) -> list[Suggestion]:
    """Rule-driven suggestions, most severe first, capped at MAX_SUGGESTIONS."""
    candidates = [
        _contrast_suggestion(profile.contrast),
        _palette_suggestion(profile.color_count),
        *_FIXED_SUGGESTIONS,
    ]
    # sorted() is stable, so rule order breaks ties
    ranked = sorted(candidates, key=lambda s: _SEVERITY_RANK[s["severity"]])[:MAX_SUGGESTIONS]
    return [
        Suggestion(id=f"local-{i}", type="ai", **entry)
        for i, entry in enumerate(ranked, start=1)
    ]


def synthesize(profile: ImageFeatureProfile) -> ComplianceFindings:
    metrics = compute_metrics(profile)
    risk_factors = [LOW_CONTRAST_FACTOR] if profile.contrast < _CONTRAST_CRITICAL_BELOW else []
    return ComplianceFindings(
        compliance_checks=build_checklist(profile, metrics),
        design_metrics=metrics,
        suggestions=build_suggestions(profile),
        risk_factors=risk_factors,
    )
