"""
StudyPlanner Backend: FastAPI Application Factory
==================================================

What:  Creates and configures the FastAPI application instance.
How:   `create_app()` wires repositories into the resource routers, registers
       middleware and exception handlers, and returns the app.
Who:   uvicorn (`uvicorn studyplanner.main:app`) and the test suite, which
       passes stand-in repositories.

Application Architecture:
    ┌──────────────────────────────────────────────────────┐
    │                    FastAPI App                       │
    │                                                      │
    │  Middleware: Request ID → Access Log → GZip → CORS   │
    │                                                      │
    │  Routes (BaseHandler.dispatch):                      │
    │   /login  /students  /courses  /assignments          │
    │   /schedules                          + GET /health  │
    │                                                      │
    │  Exception Handlers:                                 │
    │   StudyPlannerError → its status, {"error": msg}     │
    │   HTTPException     → {"error": detail}              │
    │   Exception         → 500 {"error": ...}             │
    └──────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from studyplanner import __version__
from studyplanner.config import settings
from studyplanner.database import async_session_factory, dispose_engine
from studyplanner.exceptions import StudyPlannerError
from studyplanner.middleware.logging import RequestLoggingMiddleware
from studyplanner.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware, request_id_var
from studyplanner.repositories import Repositories, build_repositories
from studyplanner.responses import error_response
from studyplanner.routes import assignments, courses, health, login, schedules, students
from studyplanner.services.auth_service import AuthService

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the whole process.

    Format: 2024-01-15T12:00:00 [INFO] studyplanner.access: GET /courses/1 200 ...
    Called once at startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("passlib").setLevel(logging.ERROR)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging, validate settings, log the listen address.
    Shutdown: dispose the engine so pooled connections are closed.
    """
    setup_logging()
    logger.info("=" * 60)
    logger.info("StudyPlanner Backend %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        logger.error("Configuration error: %s", str(e))
        raise

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("StudyPlanner Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map anything that escapes a handler to the `{"error": message}` body.

        StudyPlannerError        → exc.status_code
        HTTPException (routing)  → exc.status_code, e.g. unknown path 404
        RequestValidationError   → 400
        Exception (fallback)     → 500, traceback logged server-side only
    """

    @app.exception_handler(StudyPlannerError)
    async def handle_app_error(request: Request, exc: StudyPlannerError):
        return error_response(exc)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": "Bad Request"})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
            headers={REQUEST_ID_HEADER: rid} if rid else None,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(repositories: Optional[Repositories] = None) -> FastAPI:
    """
    Assemble the application.

    Args:
        repositories: Data-access collaborators. Defaults to repositories
            bound to the configured database's session factory.
    """
    if repositories is None:
        repositories = build_repositories(async_session_factory)

    app = FastAPI(
        title="StudyPlanner API",
        description="Students, courses, weekly schedules and assignments.",
        version=__version__,
        lifespan=lifespan,
    )

    # ── Middleware (last added runs first) ────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    # ── Routes ────────────────────────────────────────────────────────────
    app.include_router(login.create_router(AuthService(repositories.students)))
    app.include_router(students.create_router(repositories.students))
    app.include_router(courses.create_router(repositories.courses))
    app.include_router(assignments.create_router(repositories.assignments))
    app.include_router(schedules.create_router(repositories.schedules, repositories.courses))
    app.include_router(health.router)

    return app


app = create_app()
