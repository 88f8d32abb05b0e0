"""Demo backend exposing the routes the validator probes."""
from __future__ import annotations

import time
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import settings
from core.logging.logger import get_logger

VERSION = "1.0.0"

USERS = [
    {"id": 1, "name": "John Doe", "email": "john@example.com"},
    {"id": 2, "name": "Jane Smith", "email": "jane@example.com"},
]

log = get_logger(__name__, service="demo-server")


def _now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def create_app(environment: str | None = None) -> FastAPI:
    app = FastAPI(title="Validator Demo Backend", version=VERSION)
    app.state.started = time.monotonic()
    env = environment or settings.APP_ENV

    def uptime() -> float:
        return round(time.monotonic() - app.state.started, 3)

    @app.get("/")
    def root():
        return {
            "message": "Backend service is running!",
            "timestamp": _now(),
            "status": "healthy",
            "environment": env,
        }

    @app.get("/health")
    def health():
        return {"status": "ok", "timestamp": _now(), "service": "backend", "uptime": uptime()}

    @app.get("/api/status")
    def api_status():
        return {"api": "available", "version": VERSION, "uptime": uptime(), "timestamp": _now()}

    @app.get("/users")
    def users():
        return USERS

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == 404:
            return JSONResponse(status_code=404, content={"error": "Route not found"})
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception) -> JSONResponse:
        log.error(lambda: f"unhandled error on {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Something went wrong!"})

    return app


app = create_app()
