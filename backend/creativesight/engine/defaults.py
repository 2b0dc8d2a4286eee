"""Fixed fallback data used when the heatmap or placement exchange is unavailable."""

from __future__ import annotations

from creativesight.models.analysis import HeatmapData, HeatmapZone, PlacementSimulation


def default_heatmap() -> HeatmapData:
    """Typical retail-creative attention layout: headline, CTA, logo, product, fine print."""
    return HeatmapData(
        zones=[
            HeatmapZone(x=50, y=30, intensity=95, description="Primary headline - high attention"),
            HeatmapZone(x=50, y=60, intensity=85, description="Call-to-action button"),
            HeatmapZone(x=20, y=15, intensity=75, description="Brand logo"),
            HeatmapZone(x=70, y=50, intensity=70, description="Product image"),
            HeatmapZone(x=50, y=85, intensity=40, description="Fine print disclaimer"),
        ],
        focus_areas=["Headline", "CTA Button", "Product Image"],
    )


def default_placements() -> list[PlacementSimulation]:
    return [
        PlacementSimulation(
            context="Shelf Edge Display",
            description=(
                "Creative appears on shelf edge at eye level with good visibility "
                "from 6-8 feet away"
            ),
            recommendation=(
                "Ensure text is readable from distance; increase font size by 15% "
                "for optimal visibility"
            ),
        ),
        PlacementSimulation(
            context="Endcap Placement",
            description=(
                "High-traffic area with multiple viewing angles; creative competes "
                "with surrounding products"
            ),
            recommendation=(
                "Increase color contrast and make CTA more prominent to stand out "
                "in busy environment"
            ),
        ),
        PlacementSimulation(
            context="Digital Display",
            description=(
                "Creative displayed on digital screen with bright backlighting and "
                "potential glare"
            ),
            recommendation=(
                "Verify color accuracy on backlit displays; test with various "
                "lighting conditions"
            ),
        ),
    ]
