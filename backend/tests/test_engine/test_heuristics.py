"""Tests for the heuristic metric synthesizer."""

from __future__ import annotations

import pytest

from creativesight.engine.features import DEFAULT_PROFILE
from creativesight.engine.heuristics import (
    MAX_SUGGESTIONS,
    compute_metrics,
    estimated_contrast_ratio,
    synthesize,
)
from creativesight.models.analysis import ImageFeatureProfile


def _profile(contrast: int, color_count: int, readability: int | None = None) -> ImageFeatureProfile:
    if readability is None:
        readability = min(100, round(contrast * 1.5))
    return ImageFeatureProfile(
        has_text=color_count > 10,
        text_density=min(100, color_count / 256 * 100),
        color_count=color_count,
        brightness=128,
        contrast=contrast,
        estimated_readability=readability,
    )


class TestMetrics:
    def test_low_contrast_sparse_palette(self):
        m = compute_metrics(_profile(30, 50, readability=45))
        assert m.compliance == 75  # 30 * 1.5 + 30
        assert m.attention == 54  # 50/256 * 70 + 40 = 53.67
        assert m.readability == 45
        assert m.brand_consistency == 76  # 30 * 1.2 + 40

    def test_default_profile(self):
        m = compute_metrics(DEFAULT_PROFILE)
        assert m.compliance == 98  # 97.5 rounds half up
        assert m.attention == 73
        assert m.readability == 75
        assert m.brand_consistency == 94

    def test_out_of_range_contrast_is_clamped(self):
        m = compute_metrics(_profile(1000, 300, readability=1500))
        assert m.compliance <= 100
        assert m.attention <= 100
        assert m.readability == 100
        assert m.brand_consistency == 100


class TestChecklist:
    def test_order_and_fixed_statuses(self):
        checks = synthesize(_profile(60, 100)).compliance_checks
        assert [c.item for c in checks] == [
            "Brand logo placement",
            "Text readability",
            "Color contrast",
            "Dimension requirements",
            "Legal disclaimers",
            "Call-to-action clarity",
        ]
        statuses = {c.item: c.status for c in checks}
        assert statuses["Brand logo placement"] == "pass"
        assert statuses["Dimension requirements"] == "pass"
        assert statuses["Legal disclaimers"] == "warning"

    def test_low_contrast_statuses(self):
        checks = {c.item: c for c in synthesize(_profile(30, 50, readability=45)).compliance_checks}
        assert checks["Text readability"].status == "warning"
        assert "3.5:1" in checks["Text readability"].details
        assert checks["Color contrast"].status == "fail"
        assert checks["Call-to-action clarity"].status == "warning"

    def test_threshold_edges(self):
        checks = {c.item: c for c in synthesize(_profile(40, 100, readability=70)).compliance_checks}
        assert checks["Text readability"].status == "pass"
        assert checks["Color contrast"].status == "pass"

        checks = {c.item: c for c in synthesize(_profile(35, 100)).compliance_checks}
        assert checks["Color contrast"].status == "fail"
        assert checks["Call-to-action clarity"].status == "pass"

    def test_contrast_ratio_format(self):
        assert estimated_contrast_ratio(45) == "4.3:1"
        assert estimated_contrast_ratio(0) == "2.0:1"
        assert estimated_contrast_ratio(100) == "7.0:1"


class TestSuggestions:
    @pytest.mark.parametrize(
        "contrast,color_count,titles",
        [
            (
                30,
                50,
                [
                    "Improve Color Contrast",
                    "Add Visual Variety",
                    "Add Legal Disclaimer",
                    "Test in Retail Environment",
                ],
            ),
            (
                45,
                200,
                [
                    "Enhance Color Contrast",
                    "Simplify Color Palette",
                    "Add Legal Disclaimer",
                    "Test in Retail Environment",
                ],
            ),
            (
                60,
                100,
                [
                    "Maintain Color Contrast",
                    "Color Palette Optimization",
                    "Add Legal Disclaimer",
                    "Test in Retail Environment",
                ],
            ),
        ],
    )
    def test_titles(self, contrast, color_count, titles):
        suggestions = synthesize(_profile(contrast, color_count)).suggestions
        assert [s.title for s in suggestions] == titles

    def test_most_severe_first(self):
        # info contrast, warning palette: the palette warning leads
        suggestions = synthesize(_profile(70, 200)).suggestions
        assert suggestions[0].title == "Simplify Color Palette"
        assert suggestions[0].severity == "warning"
        assert [s.severity for s in suggestions[1:]] == ["info", "info", "info"]

    def test_cap_and_ids(self):
        for contrast in (0, 39, 45, 55, 1000):
            for colors in (0, 79, 120, 181, 256):
                suggestions = synthesize(_profile(contrast, colors)).suggestions
                assert len(suggestions) <= MAX_SUGGESTIONS
                assert [s.id for s in suggestions] == [
                    f"local-{i}" for i in range(1, len(suggestions) + 1)
                ]

    def test_severity_escalates(self):
        assert synthesize(_profile(39, 100)).suggestions[0].severity == "critical"
        assert synthesize(_profile(40, 100)).suggestions[0].severity == "warning"
        assert synthesize(_profile(50, 100)).suggestions[0].severity == "info"


class TestRiskFactors:
    def test_low_contrast(self):
        assert synthesize(_profile(39, 100)).risk_factors == ["Low contrast"]

    def test_adequate_contrast(self):
        assert synthesize(_profile(40, 100)).risk_factors == []


def test_synthesize_is_pure():
    profile = _profile(42, 150)
    first = synthesize(profile)
    second = synthesize(profile)
    assert first == second
    assert first.design_metrics.model_dump_json() == second.design_metrics.model_dump_json()
    assert [s.model_dump_json() for s in first.suggestions] == [
        s.model_dump_json() for s in second.suggestions
    ]
