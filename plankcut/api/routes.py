"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter

from plankcut.models import CutSummary, ProjectConfig
from plankcut.services.cut_service import CutService
from plankcut.api.schemas import (
    AnalyzeRequest, AnalyzeResponse, ScoreRequest,
)

router = APIRouter()

# Shared service instance
_service = CutService()


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze(request: AnalyzeRequest) -> AnalyzeResponse:
    """Work out the cut list for a flooring layout."""
    cut_list = _service.analyze(request.config)
    return AnalyzeResponse(
        cut_list=cut_list,
        summary=_service.summarize(cut_list),
    )


@router.post("/score", response_model=CutSummary)
async def score(request: ScoreRequest) -> CutSummary:
    """Summarize the cut list a candidate set of row offsets would produce."""
    cut_list = _service.analyze_offsets(request.config, request.row_offsets)
    return _service.summarize(cut_list)


@router.get("/defaults", response_model=ProjectConfig)
async def defaults() -> ProjectConfig:
    return _service.default_config()


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
