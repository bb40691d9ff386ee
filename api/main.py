"""
api/main.py - punkt wejścia FastAPI (host HTTP interpretera).

Lifespan:
  - Tworzy InMemorySessionStore (limit sesji z config.max_sessions)
  - Przy zamknięciu porzuca sesje - środowiska nie są utrwalane
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from adapters.session_store.memory_session_store import InMemorySessionStore
from api.routers import evaluate, sessions
from api.schemas import HealthResponse
from config import Settings

logger = logging.getLogger("rachmistrz")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    app.state.session_store = InMemorySessionStore(max_sessions=settings.max_sessions)

    logger.info("Rachmistrz API ready.")
    yield

    logger.info("Shutting down - dropping %d session(s).", len(app.state.session_store))


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Routers
    app.include_router(evaluate.router)
    app.include_router(sessions.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health(request: Request):
        return HealthResponse(
            status="ok",
            version=settings.app_version,
            sessions=len(request.app.state.session_store),
        )

    # Globalny handler błędów
    @app.exception_handler(KeyError)
    async def key_error_handler(request: Request, exc: KeyError):
        return JSONResponse(status_code=404, content={"detail": str(exc.args[0]) if exc.args else str(exc)})

    return app


app = create_app()
