# -*- coding: utf-8 -*-
"""
NutriTrack API

Roster login, food-intake questionnaire and food quality scoring.
"""

from __future__ import annotations

import logging
import os

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .app_db import init_app_db
from .auth.api import router as auth_router
from .auth.security import current_user
from .config import settings
from .data_loader import DatasetUnavailableError
from .questionnaire.api import router as questionnaire_router
from .scoring.api import router as scoring_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title="NutriTrack",
    description="Food quality scores from the HEIFA roster",
    version="0.1.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def _startup_init_db() -> None:
    init_app_db(settings.app_db_path)


# Ensure the app DB exists even when lifespan events are not triggered (e.g. some test clients).
init_app_db(settings.app_db_path)


_AUTH_EXEMPT_PREFIXES = (
    "/api/auth/login",
    "/api/auth/users",
    "/api/docs",
    "/api/redoc",
    "/api/openapi.json",
)


def _dataset_unavailable_response(exc: DatasetUnavailableError) -> JSONResponse:
    logger.error("User dataset unavailable: %s", exc)
    return JSONResponse(status_code=500, content={"detail": "User dataset unavailable"})


@app.middleware("http")
async def _auth_gate(request: Request, call_next):
    path = request.url.path
    if path.startswith("/api") and path != "/api/health" and not any(path.startswith(p) for p in _AUTH_EXEMPT_PREFIXES):
        try:
            user = current_user(request)
            request.state.user = user
        except HTTPException as exc:
            return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})
        except DatasetUnavailableError as exc:
            return _dataset_unavailable_response(exc)
    return await call_next(request)


@app.exception_handler(DatasetUnavailableError)
async def _dataset_unavailable(request: Request, exc: DatasetUnavailableError):
    return _dataset_unavailable_response(exc)


app.include_router(auth_router)
app.include_router(questionnaire_router)
app.include_router(scoring_router)


@app.get("/api/health")
def health() -> dict:
    return {"ok": True, "dataset": settings.data_file.is_file()}


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    host = os.environ.get("NUTRITRACK_HOST") or os.environ.get("HOST") or "127.0.0.1"
    port_raw = os.environ.get("NUTRITRACK_PORT") or os.environ.get("PORT") or "8000"
    try:
        port = int(port_raw)
    except ValueError:
        port = 8000

    uvicorn.run("nutritrack.api:app", host=host, port=port, reload=False)
