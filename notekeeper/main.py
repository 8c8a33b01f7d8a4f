"""
NoteKeeper Backend - FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() builds the NoteStore, registers middleware, exception
       handlers and routers, and returns the app.
Who:   uvicorn (via `python -m notekeeper` or `uvicorn notekeeper.main:app`)
       and the test suite.

Application Layout:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  Request ID → Logging → GZip → CORS    │
    │                                                     │
    │  Routes:      /  /create  /get/{id}                 │
    │               /update/{id}  /delete/{id}  /health   │
    │                                                     │
    │  State:       app.state.note_store (one NoteStore)  │
    │                                                     │
    │  Errors:      NotFoundError→404  other→500          │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    The NoteStore is created with the app and dies with the process. There
    is nothing to flush or close on shutdown; all notes are lost.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from notekeeper import __version__
from notekeeper.config import settings
from notekeeper.exceptions import NoteKeeperError, NotFoundError
from notekeeper.middleware.logging import RequestLoggingMiddleware
from notekeeper.middleware.request_id import (
    REQUEST_ID_HEADER,
    RequestIDMiddleware,
    request_id_var,
)
from notekeeper.routes import health, notes
from notekeeper.services.note_store import NoteStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the whole process.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # uvicorn's own access log duplicates RequestLoggingMiddleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("NoteKeeper %s starting up", __version__)
    logger.info("Listening on http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info(
        "NoteKeeper shutting down, discarding %d notes",
        await app.state.note_store.count(),
    )


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to JSON error responses.

    Handler hierarchy:
        NotFoundError           → 404 Not Found
        NoteKeeperError (base)  → 500 Internal Server Error
        Exception (fallback)    → 500 Internal Server Error

    Responses never include stack traces or context dicts; those are logged.
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        logger.info("[%s] Not found: %s", rid, exc.message)
        return JSONResponse(
            status_code=404,
            content={
                "error": "not_found",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(NoteKeeperError)
    async def handle_app_error(request: Request, exc: NoteKeeperError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": exc.message,
                "request_id": rid,
            },
        )

    # Starlette runs this handler outside every middleware, so the response
    # never passes back through RequestIDMiddleware; set the header here.
    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again.",
                "request_id": rid,
            },
            headers={REQUEST_ID_HEADER: rid} if rid else None,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(store: Optional[NoteStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: NoteStore to serve. A fresh empty store is created when omitted;
               tests pass their own to inspect it directly.

    Returns:
        Configured FastAPI instance.
    """
    app = FastAPI(
        title="NoteKeeper API",
        description="In-memory note storage: create, get, update and delete short notes.",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.note_store = store if store is not None else NoteStore()

    # Middleware executes in reverse order of addition:
    # RequestID → Logging → GZip → CORS → route
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(notes.router)
    app.include_router(health.router)

    return app


app = create_app()
