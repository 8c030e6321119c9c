"""FastAPI application factory."""
from __future__ import annotations
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from matchsight import __version__
from matchsight.domain.exceptions import (
    IngestionError, MissingColumnsError, NotFoundError, SchemaResolutionError,
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="matchsight API",
        version=__version__,
    )

    # Import routers inside create_app() to avoid circular imports at module load time
    from matchsight.api.routers.datasets import router as datasets_router
    from matchsight.api.routers.analysis import router as analysis_router
    from matchsight.api.routers.outcomes import router as outcomes_router
    from matchsight.api.routers.matchups import router as matchups_router
    from matchsight.api.routers.slips import router as slips_router

    app.include_router(datasets_router)
    app.include_router(analysis_router)
    app.include_router(outcomes_router)
    app.include_router(matchups_router)
    app.include_router(slips_router)

    @app.exception_handler(NotFoundError)
    def _not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": exc.message})

    @app.exception_handler(IngestionError)
    def _ingestion(request: Request, exc: IngestionError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": exc.message})

    @app.exception_handler(SchemaResolutionError)
    def _schema(request: Request, exc: SchemaResolutionError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": exc.message, "field": exc.field})

    @app.exception_handler(MissingColumnsError)
    def _missing_columns(request: Request, exc: MissingColumnsError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": exc.message, "columns": exc.columns})

    @app.get("/health", tags=["ops"])
    def health() -> dict:
        return {"status": "ok"}

    return app
