"""POST /api/analyze — creative upload → full analysis; POST /api/report — validation report."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from creativesight.config import Settings
from creativesight.dependencies import get_engine, get_settings
from creativesight.engine.orchestrator import CreativeEngine
from creativesight.engine.report import ValidationReport, build_report
from creativesight.models.analysis import AnalysisResult
from creativesight.models.responses import ReportRequest

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/analyze", response_model=AnalysisResult)
async def analyze(
    file: UploadFile = File(...),
    retailer_id: str = Form(...),
    placement_id: str = Form(...),
    retailer_name: str = Form(""),
    placement_name: str = Form(""),
    engine: CreativeEngine = Depends(get_engine),
    settings: Settings = Depends(get_settings),
) -> AnalysisResult:
    limit = settings.max_upload_bytes
    too_large = HTTPException(status_code=413, detail=f"Upload exceeds {limit} bytes")
    if file.size is not None and file.size > limit:
        raise too_large

    # Never buffer more than one byte past the limit
    try:
        content = await file.read(limit + 1)
    except OSError as e:
        raise HTTPException(status_code=400, detail=f"Could not read upload: {e}") from e

    if not content:
        raise HTTPException(status_code=400, detail="Uploaded file is empty")
    if len(content) > limit:
        raise too_large

    logger.info("Analyze %s (%d bytes) for %s / %s", file.filename, len(content), retailer_id, placement_id)
    return await engine.analyze(
        content,
        retailer_id,
        placement_id,
        retailer_name or retailer_id,
        placement_name or placement_id,
    )


@router.post("/report", response_model=ValidationReport)
async def report(req: ReportRequest) -> ValidationReport:
    return build_report(req.analysis, req.retailer_name, req.placement_name)
