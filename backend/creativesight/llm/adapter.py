"""Remote analysis adapter — three exchanges, each with its own local fallback.

1. compliance (multimodal): image + retailer/placement context
2. heatmap (text): the metrics from exchange 1
3. placements (text): retailer context only

Each exchange is attempted once. A failed call or an unparseable response
replaces only that exchange's result, so a heatmap failure never discards a
good compliance answer. request_remote_analysis() never raises.
"""

from __future__ import annotations

import asyncio
import json
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, Literal, TypeVar

from creativesight.engine.defaults import default_heatmap, default_placements
from creativesight.engine.heuristics import ComplianceFindings, synthesize
from creativesight.llm.client import CompletionClient
from creativesight.llm.parsing import parse_compliance, parse_heatmap, parse_placements
from creativesight.llm.prompts import get_prompt_template
from creativesight.models.analysis import (
    HeatmapData,
    ImageFeatureProfile,
    PlacementSimulation,
    ResultSource,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Exchange(Generic[T]):
    """Outcome of one exchange: remote data, or the local fallback plus the reason."""

    value: T
    source: Literal["remote", "fallback"]
    error: str | None = None

    @property
    def is_remote(self) -> bool:
        return self.source == "remote"


@dataclass(frozen=True)
class RemotePayload:
    compliance: Exchange[ComplianceFindings]
    heatmap: Exchange[HeatmapData]
    placements: Exchange[list[PlacementSimulation]]

    @property
    def source(self) -> ResultSource:
        flags = [self.compliance.is_remote, self.heatmap.is_remote, self.placements.is_remote]
        if all(flags):
            return "remote"
        if any(flags):
            return "partial"
        return "local"


async def run_exchange(
    name: str,
    request: Callable[[], Awaitable[str]],
    parse: Callable[[str], T],
    fallback: Callable[[], T],
) -> Exchange[T]:
    t0 = time.perf_counter()
    try:
        text = await request()
        value = parse(text)
    except Exception as e:
        logger.warning("Remote %s exchange failed, using local fallback: %s", name, e)
        return Exchange(value=fallback(), source="fallback", error=str(e) or type(e).__name__)

    elapsed = (time.perf_counter() - t0) * 1000
    logger.debug("Remote %s exchange completed in %.0fms", name, elapsed)
    return Exchange(value=value, source="remote")


class RemoteAnalysisAdapter:
    """Drives the three remote exchanges through a CompletionClient."""

    def __init__(self, client: CompletionClient) -> None:
        self.client = client

    async def request_remote_analysis(
        self,
        image_bytes: bytes,
        retailer_context: str,
        placement_context: str,
        profile: ImageFeatureProfile,
    ) -> RemotePayload:
        # Heatmap depends on the compliance metrics; placements need neither
        async def compliance_then_heatmap():
            compliance = await self._compliance(
                image_bytes, retailer_context, placement_context, profile
            )
            heatmap = await self._heatmap(compliance.value)
            return compliance, heatmap

        (compliance, heatmap), placements = await asyncio.gather(
            compliance_then_heatmap(),
            self._placements(retailer_context),
        )
        payload = RemotePayload(compliance=compliance, heatmap=heatmap, placements=placements)
        logger.info(
            "Remote analysis: compliance=%s heatmap=%s placements=%s",
            compliance.source,
            heatmap.source,
            placements.source,
        )
        return payload

    async def _compliance(
        self,
        image_bytes: bytes,
        retailer_context: str,
        placement_context: str,
        profile: ImageFeatureProfile,
    ) -> Exchange[ComplianceFindings]:
        prompt = get_prompt_template("compliance").format(
            retailer_context=retailer_context,
            placement_context=placement_context,
        )
        return await run_exchange(
            "compliance",
            lambda: self.client.complete_vision(image_bytes, prompt, "compliance"),
            parse_compliance,
            lambda: synthesize(profile),
        )

    async def _heatmap(self, findings: ComplianceFindings) -> Exchange[HeatmapData]:
        metrics_json = json.dumps(findings.design_metrics.model_dump(by_alias=True))
        prompt = get_prompt_template("heatmap").format(metrics_json=metrics_json)
        return await run_exchange(
            "heatmap",
            lambda: self.client.complete_text(prompt, "heatmap"),
            parse_heatmap,
            default_heatmap,
        )

    async def _placements(self, retailer_context: str) -> Exchange[list[PlacementSimulation]]:
        prompt = get_prompt_template("placements").format(retailer_context=retailer_context)
        return await run_exchange(
            "placements",
            lambda: self.client.complete_text(prompt, "placements"),
            parse_placements,
            default_placements,
        )
