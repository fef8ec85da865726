"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from splicer.api.routes import router
from splicer.errors import GeometryContractViolation, SinkError


def create_app() -> FastAPI:
    app = FastAPI(
        title="Beam Splice Drawing Generator",
        description="Elevation and cross-section drafting of bolted H-section splices",
        version="0.1.0",
    )

    @app.exception_handler(GeometryContractViolation)
    async def geometry_violation(request: Request, exc: GeometryContractViolation) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": exc.problems})

    @app.exception_handler(SinkError)
    async def sink_failure(request: Request, exc: SinkError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    app.include_router(router, prefix="/api")
    return app


app = create_app()
