"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import Response

from splicer.config import DrawingInput
from splicer.services.drawing_service import DrawingService
from splicer.sinks.dxf import DxfSink
from splicer.sinks.recording import RecordingSink
from splicer.api.schemas import DrawingRequest, PreviewResponse, ViewInfo

router = APIRouter()

# Shared service instance
_service = DrawingService()

DXF_MEDIA_TYPE = "application/dxf"


def _to_input(request: DrawingRequest) -> DrawingInput:
    return DrawingInput(joint=request.joint, params=request.params)


@router.post("/drawing")
async def create_drawing(request: DrawingRequest) -> Response:
    """Draw the joint and return the DXF file."""
    sink = DxfSink()
    _service.render(_to_input(request), sink)
    return Response(
        content=sink.to_string(),
        media_type=DXF_MEDIA_TYPE,
        headers={"Content-Disposition": 'attachment; filename="splice.dxf"'},
    )


@router.post("/preview", response_model=PreviewResponse)
async def preview_drawing(request: DrawingRequest) -> PreviewResponse:
    """Return the primitives of the drawing as JSON."""
    sink = RecordingSink()
    summary = _service.render(_to_input(request), sink)
    return PreviewResponse(drawing=sink.drawing, summary=summary)


@router.get("/views", response_model=list[ViewInfo])
async def list_views() -> list[ViewInfo]:
    """List the views in draw order."""
    return [ViewInfo(**v) for v in _service.list_views()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
