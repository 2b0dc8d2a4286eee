"""Engine orchestrator — features, remote-or-local findings, risk score, one result.

The remote capability is decided once, when the engine is built. Without an
API key the engine runs fully local; that is a configuration state, not an
error. analyze() never fails on analysis-quality problems.
"""

from __future__ import annotations

import asyncio
import logging
import os
import time
from typing import IO, Union

from creativesight.config import Settings, settings as default_settings
from creativesight.engine.defaults import default_heatmap, default_placements
from creativesight.engine.features import extract_features_async
from creativesight.engine.heuristics import ComplianceFindings, synthesize
from creativesight.engine.risk import score
from creativesight.models.analysis import (
    AnalysisResult,
    HeatmapData,
    PlacementSimulation,
    ResultSource,
)

logger = logging.getLogger(__name__)

ImageInput = Union[bytes, bytearray, str, os.PathLike, IO[bytes]]


def format_context(name: str, identifier: str) -> str:
    return f"{name} ({identifier})"


def assemble_result(
    findings: ComplianceFindings,
    heatmap: HeatmapData,
    placements: list[PlacementSimulation],
    source: ResultSource,
) -> AnalysisResult:
    return AnalysisResult(
        compliance_checks=findings.compliance_checks,
        design_metrics=findings.design_metrics,
        heatmap_data=heatmap,
        risk_analysis=score(findings.design_metrics, findings.risk_factors),
        suggestions=findings.suggestions,
        placement_simulations=placements,
        source=source,
    )


class CreativeEngine:
    """Stateless across calls; holds only configuration and the adapter."""

    def __init__(self, settings: Settings | None = None, adapter=None) -> None:
        self.settings = settings or default_settings
        if adapter is None and self.settings.has_remote_credentials:
            from creativesight.llm.adapter import RemoteAnalysisAdapter
            from creativesight.llm.client import AnthropicClient

            adapter = RemoteAnalysisAdapter(AnthropicClient(self.settings))
        self.adapter = adapter
        self.has_remote_capability = adapter is not None

        if not self.has_remote_capability:
            logger.info("No ANTHROPIC_API_KEY configured; creative analysis runs locally")

    async def analyze(
        self,
        image: bytes,
        retailer_id: str,
        placement_id: str,
        retailer_name: str,
        placement_name: str,
    ) -> AnalysisResult:
        start = time.perf_counter()
        profile = await extract_features_async(image)

        payload = None
        if self.has_remote_capability:
            try:
                payload = await self.adapter.request_remote_analysis(
                    image,
                    format_context(retailer_name, retailer_id),
                    format_context(placement_name, placement_id),
                    profile,
                )
            except Exception as e:
                logger.error("Remote adapter failed outright, analyzing locally: %s", e)

        if payload is None:
            result = assemble_result(
                synthesize(profile), default_heatmap(), default_placements(), "local"
            )
        else:
            result = assemble_result(
                payload.compliance.value,
                payload.heatmap.value,
                payload.placements.value,
                payload.source,
            )

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Analysis for %s / %s: score=%d (%s), source=%s in %.0fms",
            retailer_name,
            placement_name,
            result.risk_analysis.score,
            result.risk_analysis.label.value,
            result.source,
            elapsed,
        )
        return result


def read_image_bytes(image_file: ImageInput) -> bytes:
    """Read the caller's input. Errors here are the caller's and propagate unchanged."""
    if isinstance(image_file, (bytes, bytearray)):
        return bytes(image_file)
    if isinstance(image_file, (str, os.PathLike)):
        with open(image_file, "rb") as fh:
            return fh.read()
    return image_file.read()


_engine: CreativeEngine | None = None


def get_engine() -> CreativeEngine:
    global _engine
    if _engine is None:
        _engine = CreativeEngine()
    return _engine


async def analyze_creative(
    image_file: ImageInput,
    retailer_id: str,
    placement_id: str,
    retailer_name: str,
    placement_name: str,
    engine: CreativeEngine | None = None,
) -> AnalysisResult:
    """Public entry point: analyze one creative for a retailer placement."""
    image = await asyncio.to_thread(read_image_bytes, image_file)
    engine = engine or get_engine()
    return await engine.analyze(image, retailer_id, placement_id, retailer_name, placement_name)
