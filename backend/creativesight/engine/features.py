"""Pixel feature extraction — aggregate statistics over the decoded creative.

Every pixel contributes to four accumulators in one pass:

1. mean brightness, with per-pixel brightness = (r + g + b) / 3
2. a set of quantized colors (each channel bucketed by floor(c / 50),
   giving 6 buckets 0..5 per channel), approximating perceptual variety
3. dark pixels (brightness < 85)
4. light pixels (brightness > 170)

The contrast figure is |dark - light| / total, a proxy for bimodal luminance
separation rather than a perceptual contrast metric.

Decoding failures never propagate: a malformed image yields DEFAULT_PROFILE
so the rest of the engine keeps working.
"""

from __future__ import annotations

import asyncio
import io
import logging

import numpy as np
from numpy.typing import NDArray
from PIL import Image, UnidentifiedImageError

from creativesight.models.analysis import ImageFeatureProfile
from creativesight.utils.math_helpers import round_half_up

logger = logging.getLogger(__name__)

# Channel quantization: floor(c / 50) maps 0..255 onto 6 buckets (0..5).
_BUCKET_WIDTH = 50
_BUCKETS_PER_CHANNEL = 6
_MAX_COLOR_COUNT = 256

# Brightness thresholds splitting 0..255 into thirds.
_DARK_BELOW = 85
_LIGHT_ABOVE = 170

# Quantized colors needed before we assume text is present.
_TEXT_COLOR_THRESHOLD = 10
_READABILITY_GAIN = 1.5

# Pillow signals unreadable or truncated data through several exception types
_DECODE_ERRORS = (
    UnidentifiedImageError,
    OSError,
    ValueError,
    EOFError,
    SyntaxError,
    Image.DecompressionBombError,
)

DEFAULT_PROFILE = ImageFeatureProfile(
    has_text=True,
    text_density=65,
    color_count=120,
    brightness=128,
    contrast=45,
    estimated_readability=75,
)


def decode_pixels(image_bytes: bytes) -> NDArray[np.uint8]:
    """Decode image bytes into an (H, W, 3) RGB uint8 buffer.

    Raises on anything Pillow cannot read; callers that must not fail use
    extract_features().
    """
    if not image_bytes:
        raise ValueError("empty image payload")
    with Image.open(io.BytesIO(image_bytes)) as img:
        rgb = img.convert("RGB")
        arr = np.asarray(rgb, dtype=np.uint8)
    if arr.size == 0:
        raise ValueError("image has no pixels")
    return arr


def profile_from_pixels(pixels: NDArray[np.uint8]) -> ImageFeatureProfile:
    """Compute the feature profile from an (H, W, 3) RGB buffer."""
    flat = pixels.reshape(-1, 3).astype(np.int32)
    total = flat.shape[0]

    # (r + g + b) / 3 per pixel, kept fractional
    brightness = flat.sum(axis=1) / 3.0

    buckets = flat // _BUCKET_WIDTH
    codes = (
        buckets[:, 0] * _BUCKETS_PER_CHANNEL * _BUCKETS_PER_CHANNEL
        + buckets[:, 1] * _BUCKETS_PER_CHANNEL
        + buckets[:, 2]
    )
    color_count = min(_MAX_COLOR_COUNT, int(np.unique(codes).size))

    dark = int(np.count_nonzero(brightness < _DARK_BELOW))
    light = int(np.count_nonzero(brightness > _LIGHT_ABOVE))

    contrast = round_half_up(100 * abs(dark - light) / total)

    return ImageFeatureProfile(
        has_text=color_count > _TEXT_COLOR_THRESHOLD,
        text_density=min(100.0, color_count / _MAX_COLOR_COUNT * 100),
        color_count=color_count,
        brightness=round_half_up(float(brightness.mean())),
        contrast=contrast,
        estimated_readability=min(100, round_half_up(contrast * _READABILITY_GAIN)),
    )


def extract_features(image_bytes: bytes) -> ImageFeatureProfile:
    """Decode and profile a creative. Never raises; falls back to DEFAULT_PROFILE."""
    try:
        pixels = decode_pixels(image_bytes)
    except _DECODE_ERRORS as e:
        logger.warning("Image decode failed, using default feature profile: %s", e)
        return DEFAULT_PROFILE

    profile = profile_from_pixels(pixels)
    logger.debug(
        "Features: %dx%d px, %d colors, brightness=%d contrast=%d",
        pixels.shape[1],
        pixels.shape[0],
        profile.color_count,
        profile.brightness,
        profile.contrast,
    )
    return profile


async def extract_features_async(image_bytes: bytes) -> ImageFeatureProfile:
    """extract_features() on a worker thread so decoding doesn't stall the loop."""
    return await asyncio.to_thread(extract_features, image_bytes)
