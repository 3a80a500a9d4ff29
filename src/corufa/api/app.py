"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

import threading
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from corufa.api.routes import expediente, health, io, limits
from corufa.core.config import AppSettings
from corufa.core.exceptions import FieldUpdateError, ParseError
from corufa.core.logging import setup_logging
from corufa.persistence import create_repository
from corufa.persistence.repository import StateRepository


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load persisted state once; routes commit through the repository."""
    settings: AppSettings = getattr(app.state, "settings", None) or AppSettings()
    setup_logging(settings.log_level)
    repository: StateRepository = getattr(app.state, "repository", None) or create_repository(settings)
    app.state.settings = settings
    app.state.repository = repository
    app.state.app_state = repository.load()
    yield


async def _parse_error(request: Request, exc: ParseError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


async def _field_error(request: Request, exc: FieldUpdateError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def create_app(
    settings: AppSettings | None = None,
    repository: StateRepository | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="CORUFA Pre-Plenario Checklist",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.repository = repository
    app.state.state_lock = threading.Lock()
    app.add_exception_handler(ParseError, _parse_error)
    app.add_exception_handler(FieldUpdateError, _field_error)
    app.include_router(health.router)
    app.include_router(expediente.router, prefix="/expediente")
    app.include_router(limits.router, prefix="/limits")
    app.include_router(io.router)
    return app
