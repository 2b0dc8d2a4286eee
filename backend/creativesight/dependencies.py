"""FastAPI dependency injection."""

from __future__ import annotations

from creativesight.config import settings
from creativesight.engine.orchestrator import CreativeEngine, get_engine as _get_engine


def get_settings():
    return settings


def get_engine() -> CreativeEngine:
    return _get_engine()
