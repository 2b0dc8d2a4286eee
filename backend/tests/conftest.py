"""Shared test fixtures."""

from __future__ import annotations

import io
import json

import numpy as np
import pytest
from PIL import Image

from creativesight.config import Settings


def png_bytes(pixels: np.ndarray) -> bytes:
    buf = io.BytesIO()
    Image.fromarray(pixels.astype(np.uint8)).save(buf, format="PNG")
    return buf.getvalue()


def split_pixels() -> np.ndarray:
    """10x10: left half black, right half white. Equal dark/light counts."""
    arr = np.zeros((10, 10, 3), dtype=np.uint8)
    arr[:, 5:] = 255
    return arr


def mostly_light_pixels() -> np.ndarray:
    """4x4: 12 white pixels, 4 black pixels."""
    arr = np.full((4, 4, 3), 255, dtype=np.uint8)
    arr[0, :] = 0
    return arr


def palette_pixels() -> np.ndarray:
    """216x1: one pixel in every quantization bucket (6 x 6 x 6)."""
    values = [
        (r * 50, g * 50, b * 50)
        for r in range(6)
        for g in range(6)
        for b in range(6)
    ]
    return np.array([values], dtype=np.uint8)


REMOTE_COMPLIANCE = {
    "complianceChecks": [
        {"item": "Brand logo placement", "status": "pass", "details": "Top-left, correct size"},
        {"item": "Legal disclaimers", "status": "fail", "details": "No terms and conditions"},
    ],
    "designMetrics": {
        "compliance": 92,
        "attention": 85,
        "readability": 88,
        "brandConsistency": 90,
    },
    "riskFactors": [],
    "suggestions": [
        {
            "category": "Compliance",
            "severity": "critical",
            "title": "Add Legal Disclaimer",
            "description": "Add terms at the bottom in 8pt or larger.",
        }
    ],
}

REMOTE_HEATMAP = {
    "zones": [
        {"x": 40, "y": 20, "intensity": 90, "description": "Headline"},
        {"x": 60, "y": 70, "intensity": 80, "description": "CTA"},
    ],
    "focusAreas": ["Headline", "CTA"],
}

REMOTE_PLACEMENTS = {
    "placements": [
        {"context": "Aisle", "description": "Seen from 3m", "recommendation": "Bigger logo"},
        {"context": "Checkout", "description": "Close range", "recommendation": "Shorter copy"},
        {"context": "App banner", "description": "Small screen", "recommendation": "Crop tighter"},
    ]
}


class FakeClient:
    """CompletionClient stand-in: canned text per task, or an exception to raise."""

    def __init__(self, responses: dict[str, object]) -> None:
        self.responses = responses
        self.prompts: dict[str, str] = {}

    def _answer(self, task: str, prompt: str) -> str:
        self.prompts[task] = prompt
        answer = self.responses.get(task, ConnectionError("unreachable"))
        if isinstance(answer, BaseException):
            raise answer
        if isinstance(answer, dict):
            return json.dumps(answer)
        return str(answer)

    async def complete_vision(self, image_bytes: bytes, prompt: str, task: str) -> str:
        return self._answer(task, prompt)

    async def complete_text(self, prompt: str, task: str) -> str:
        return self._answer(task, prompt)


@pytest.fixture
def local_settings() -> Settings:
    return Settings(anthropic_api_key="")


@pytest.fixture
def split_png() -> bytes:
    return png_bytes(split_pixels())


@pytest.fixture
def mostly_light_png() -> bytes:
    return png_bytes(mostly_light_pixels())


@pytest.fixture
def palette_png() -> bytes:
    return png_bytes(palette_pixels())
