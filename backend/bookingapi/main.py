"""
Booking API - FastAPI Application Factory
==========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       with its own Database (engine + session factory) on app.state.
Who:   Called by uvicorn (uvicorn bookingapi.main:app) and by the tests.

Application Architecture:
    ┌───────────────────────────────────────────────────────┐
    │                     FastAPI App                       │
    │                                                       │
    │  Middleware Chain:                                    │
    │  ┌──────────────┐ ┌──────────┐ ┌─────────┐ ┌──────┐   │
    │  │  Body Limit  │→│ Req ID   │→│ Logging │→│ CORS │   │
    │  └──────────────┘ └──────────┘ └─────────┘ └──────┘   │
    │                                                       │
    │  Routes:                                              │
    │  /api/register /api/login   /api/slots[/book]         │
    │  /data /api/latestdata /getData                       │
    │  /api/blogs[/id] /api/blogsfilter /api/categories     │
    │  /add-category /api/getcategories   /health  /        │
    │                                                       │
    │  Exception Handlers:                                  │
    │  Validation/Conflict→400  Auth→401  NotFound→404      │
    │  PayloadTooLarge→413      DB / unexpected→500         │
    └───────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, validate configuration
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookingapi import __version__
from bookingapi.config import Settings, settings as default_settings
from bookingapi.database import Database
from bookingapi.exceptions import BookingAPIError, DatabaseError
from bookingapi.middleware.body_limit import BodySizeLimitMiddleware
from bookingapi.middleware.logging import RequestLoggingMiddleware
from bookingapi.middleware.request_id import RequestIDMiddleware, request_id_var
from bookingapi.routes import auth, blogs, categories, health, intake, slots

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output: stdout (captured by the container runtime)
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Per-query and per-request noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    app_settings: Settings = app.state.settings

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(app_settings.log_level)
    logger.info("=" * 60)
    logger.info("Booking API %s starting up...", __version__)

    try:
        app_settings.validate_required_for_production()
    except ValueError as e:
        # Keep serving so /health can report the problem
        logger.error("Configuration error: %s", str(e))

    logger.info("Request body limit: %d bytes", app_settings.max_body_size)
    logger.info("Server ready at http://%s:%d", app_settings.backend_host, app_settings.backend_port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Booking API shutting down...")
    await app.state.db.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _describe_validation_error(exc: RequestValidationError) -> str:
    """Turn the first pydantic error into a one-line message, e.g. "title: Field required"."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    field = ".".join(loc)
    msg = first.get("msg", "Invalid value")
    return f"{field}: {msg}" if field else msg


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Every error body is {"message": str}. Handler hierarchy:
        RequestValidationError  → 400 (missing/malformed field)
        HTTPException           → its own status (unknown route, bad method)
        DatabaseError           → 500, generic message, details logged
        BookingAPIError         → exc.status_code (400/401/404/413)
        Exception (fallback)    → 500, stack trace logged only
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        message = _describe_validation_error(exc)
        logger.warning("[%s] Request validation failed: %s", request_id_var.get(""), message)
        return JSONResponse(status_code=400, content={"message": message})

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(status_code=500, content={"message": exc.message})

    @app.exception_handler(BookingAPIError)
    async def handle_booking_error(request: Request, exc: BookingAPIError):
        rid = request_id_var.get("")
        if exc.status_code >= 500:
            logger.error("[%s] %s: %s | Context: %s", rid, type(exc).__name__, exc.message, exc.context)
        else:
            logger.info("[%s] %s: %s", rid, type(exc).__name__, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return JSONResponse(status_code=500, content={"message": "Server error"})


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: configuration to use; defaults to the environment-backed
                      module settings. Tests pass their own (SQLite URL).

    Returns:
        FastAPI instance with app.state.settings and app.state.db populated.
    """
    app_settings = app_settings or default_settings

    app = FastAPI(
        title="Booking API",
        description=(
            "Appointment slot booking, intake submissions, admin login and a "
            "small blog/category catalog."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    app.state.db = Database(app_settings)

    # ── Register Middleware ───────────────────────────────────────────────
    # Executes in REVERSE order of addition:
    # BodyLimit → RequestID → Logging → CORS → route
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(BodySizeLimitMiddleware, max_body_size=app_settings.max_body_size)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(auth.router)
    app.include_router(slots.router)
    app.include_router(intake.router)
    app.include_router(blogs.router)
    app.include_router(categories.router)
    app.include_router(health.router)

    return app


# uvicorn expects `bookingapi.main:app` to be importable
app = create_app()
