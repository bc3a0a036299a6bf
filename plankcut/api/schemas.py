"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from plankcut.models import CutList, CutSummary, ProjectConfig


class AnalyzeRequest(BaseModel):
    """Request body for the /analyze endpoint."""
    config: ProjectConfig = ProjectConfig()


class AnalyzeResponse(BaseModel):
    """Response from the /analyze endpoint."""
    cut_list: CutList
    summary: CutSummary


class ScoreRequest(BaseModel):
    """A candidate set of row offsets to evaluate against a config."""
    config: ProjectConfig = ProjectConfig()
    row_offsets: list[float]
