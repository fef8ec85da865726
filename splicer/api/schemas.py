"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from splicer.models import (
    JointSpec, DraftingParams, DrawingSummary,
)
from splicer.sinks.recording import RecordedDrawing


class DrawingRequest(BaseModel):
    """Request body for the /drawing and /preview endpoints."""
    joint: JointSpec
    params: DraftingParams = DraftingParams()


class PreviewResponse(BaseModel):
    """Response from the /preview endpoint."""
    drawing: RecordedDrawing
    summary: DrawingSummary


class ViewInfo(BaseModel):
    id: str
    name: str
