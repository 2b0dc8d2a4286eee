"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from creativesight.dependencies import get_engine
from creativesight.engine.orchestrator import CreativeEngine
from creativesight.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(engine: CreativeEngine = Depends(get_engine)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        remote_capability=engine.has_remote_capability,
    )


@router.get("/prompts")
async def prompts() -> dict[str, str]:
    from creativesight.llm.prompts import get_all_templates

    return get_all_templates()
