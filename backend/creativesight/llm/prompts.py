"""Prompt templates per remote exchange. Each asks for bare JSON matching one schema."""

from __future__ import annotations

_COMPLIANCE_TEMPLATE = """You are an expert retail advertising compliance analyst. Analyze this creative for the following retailer context: {retailer_context}, Placement: {placement_context}.

Provide a detailed JSON response with:
1. complianceChecks: Array of {{item, status (pass/warning/fail), details}}
2. designMetrics: {{compliance (0-100), attention (0-100), readability (0-100), brandConsistency (0-100)}}
3. riskFactors: Array of identified risk factors
4. suggestions: Array of {{category, severity (critical/warning/info), title, description}}

Focus on:
- Text readability and contrast ratios
- Brand logo placement and sizing
- Legal disclaimer presence
- Dimension compliance
- Color contrast (WCAG standards)
- Visual hierarchy
- Call-to-action prominence
- Product visibility

Return ONLY valid JSON, no markdown formatting."""

_HEATMAP_TEMPLATE = """Based on this creative description and analysis, predict eye-tracking heatmap zones. The creative has these characteristics: {metrics_json}.

Return a JSON object with:
{{
  "zones": [
    {{"x": 0-100, "y": 0-100, "intensity": 0-100, "description": "area description"}}
  ],
  "focusAreas": ["primary focus area", "secondary focus area"]
}}

Zones should represent predicted viewer attention based on:
- Text prominence and size
- Color contrast and saturation
- Logo placement
- CTA button location
- Product imagery
- Movement or visual weight

Return ONLY valid JSON."""

_PLACEMENTS_TEMPLATE = """Simulate how this creative would appear in different retail contexts: {retailer_context}.

Generate 3 placement scenarios with:
{{
  "placements": [
    {{
      "context": "location name",
      "description": "how it appears in this context",
      "recommendation": "optimization for this context"
    }}
  ]
}}

Consider:
- Shelf placement visibility
- Surrounding product competition
- Lighting conditions
- Viewing distance and angles
- Digital vs physical display differences

Return ONLY valid JSON."""

_TEMPLATES = {
    "compliance": _COMPLIANCE_TEMPLATE,
    "heatmap": _HEATMAP_TEMPLATE,
    "placements": _PLACEMENTS_TEMPLATE,
}


def get_prompt_template(task: str) -> str:
    return _TEMPLATES[task]


def get_all_templates() -> dict[str, str]:
    return dict(_TEMPLATES)
