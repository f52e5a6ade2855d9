"""
Recordbook: FastAPI Application Factory
==========================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() builds the engine, session factory and RecordStore,
       attaches them to app.state, registers middleware, exception handlers
       and routes, and returns the app.
Who:   uvicorn (`uvicorn recordbook.main:app`, or the `recordbook` script)
       and the test suite.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐                   │
    │  │ Req ID   │→│  Logging        │                   │
    │  └──────────┘ └─────────────────┘                   │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────────────┐ ┌─────────────────┐       │
    │  │ /users, /users/{id}  │ │ GET /health     │       │
    │  └──────────────────────┘ └─────────────────┘       │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation→400 │ NotFound→404 │ Database→500 │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:   configure logging, create the records table if missing
    Shutdown:  dispose the database engine
"""

import logging
import sys
import uuid
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from recordbook import __version__
from recordbook.config import Settings, settings
from recordbook.database import (
    build_engine,
    build_session_factory,
    create_schema,
    dispose_engine,
)
from recordbook.exceptions import DatabaseError, NotFoundError, ValidationError
from recordbook.middleware.logging import RequestLoggingMiddleware
from recordbook.middleware.request_id import RequestIDMiddleware, request_id_var
from recordbook.routes import health, records
from recordbook.services.record_store import RecordStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(config: Settings) -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Access lines come from RequestLoggingMiddleware instead
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    config: Settings = app.state.settings

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(config)
    logger.info("Recordbook %s starting up...", __version__)

    await create_schema(app.state.engine)
    logger.info("Database ready: %s", config.database_url)
    logger.info("Server ready at http://%s:%d", config.backend_host, config.backend_port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Recordbook shutting down...")
    await dispose_engine(app.state.engine)
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to HTTP status codes and JSON error bodies.

    Handler hierarchy:
        ValidationError         → 400 Bad Request
        RequestValidationError  → 400 Bad Request (FastAPI's own input checks)
        NotFoundError           → 404 Not Found
        DatabaseError           → 500 Internal Server Error
        Exception (fallback)    → 500 Internal Server Error

    The message of a handled error is the text of the underlying failure.
    Only the fallback hides it; its stack trace goes to the log.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ):
        rid = request_id_var.get("")
        message = "; ".join(
            f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}"
            for err in exc.errors()
        )
        logger.warning("[%s] Request validation error: %s", rid, message)
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": message or "Invalid request",
                "details": None,
                "request_id": rid,
            },
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        return JSONResponse(
            status_code=404,
            content={
                "error": "not_found",
                "message": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": exc.message,
                "details": None,
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        # Runs in ServerErrorMiddleware, outside RequestIDMiddleware, so the
        # header has to be set here.
        rid = (
            getattr(request.state, "request_id", "")
            or request_id_var.get("")
            or request.headers.get("X-Request-ID")
            or str(uuid.uuid4())[:8]
        )
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred.",
                "details": None,
                "request_id": rid,
            },
            headers={"X-Request-ID": rid},
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(config: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Settings to build the app from; the module-level `settings`
                singleton when omitted.

    The engine and store are created here but no connection is opened until
    the first request (or the lifespan's create_schema) needs one.
    """
    config = config or settings

    app = FastAPI(
        title="Recordbook API",
        description="Create, read, update and delete person records (name and age).",
        version=__version__,
        lifespan=lifespan,
    )

    engine = build_engine(config)
    app.state.settings = config
    app.state.engine = engine
    app.state.record_store = RecordStore(build_session_factory(engine))

    # Last added runs first: RequestID → Logging → routes
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(records.router)
    app.include_router(health.router)

    return app


def run() -> None:
    """Console entry point: serve the module-level app with uvicorn."""
    uvicorn.run(app, host=settings.backend_host, port=settings.backend_port)


app = create_app()
