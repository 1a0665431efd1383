import json
import logging
import time
from contextlib import asynccontextmanager
from typing import Any, Optional
from uuid import uuid4

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from robot_analytics import __version__
from robot_analytics.config import Settings, get_settings
from robot_analytics.database import Database
from robot_analytics.routers import (
    cumulative_router,
    environmental_router,
    performance_router,
    real_time_router,
)
from robot_analytics.routers.common import MISSING_FIELDS

logger = logging.getLogger("robot_analytics")


def _json(data: dict[str, Any]) -> str:
    return json.dumps(data, default=str)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed requests as 400 and name the offending fields."""
    errors = exc.errors()
    fields = sorted({
        ".".join(str(part) for part in err.get("loc", ())[1:]) or str(err.get("loc", ("body",))[0])
        for err in errors
    })
    missing = any(err.get("type") == "missing" for err in errors)
    detail = MISSING_FIELDS if missing else "Invalid field values"
    logger.info("Rejected %s %s: %s %s", request.method, request.url.path, detail, fields)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": detail, "fields": fields},
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Build the API.

    A ``database`` passed in stays owned by the caller; otherwise one is
    opened from ``settings.database_url`` and disposed on shutdown.
    """
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan for startup/shutdown events."""
        db = database or Database(settings.database_url)
        if settings.create_schema_on_startup:
            db.create_schema()
        app.state.database = db
        logger.info("Connected to database %s", db.safe_url)
        yield
        if database is None:
            db.dispose()

    app = FastAPI(
        title="Cleanup Robot Analytics API",
        description="Telemetry store and query API for the cleanup robot dashboard",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Dashboard may be served from anywhere
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def structured_logging_middleware(request: Request, call_next):
        start = time.perf_counter()
        req_id = request.headers.get("X-Request-ID", str(uuid4()))
        request.state.request_id = req_id

        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers["X-Request-ID"] = req_id
            return response
        finally:
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            logger.info(_json({
                "request_id": req_id,
                "path": request.url.path,
                "method": request.method,
                "status": status_code,
                "duration_ms": duration_ms,
            }))

    app.include_router(real_time_router)
    app.include_router(cumulative_router)
    app.include_router(performance_router)
    app.include_router(environmental_router)

    @app.get("/health")
    def health_check(request: Request):
        """Liveness plus a store round trip."""
        try:
            request.app.state.database.ping()
        except Exception:
            logger.exception("Health check could not reach the database")
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "degraded", "database": "error"},
            )
        return {"status": "healthy", "database": "ok"}

    @app.get("/")
    def root():
        """Root endpoint with API information."""
        return {
            "name": "Cleanup Robot Analytics API",
            "version": __version__,
            "docs": "/docs",
            "endpoints": {
                "real_time": "/api/real-time",
                "real_time_history": "/api/real-time/history?hours=24",
                "cumulative": "/api/cumulative",
                "performance": "/api/performance",
                "performance_history": "/api/performance/history?days=7",
                "environmental_impact": "/api/environmental-impact",
            },
        }

    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "robot_analytics.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
