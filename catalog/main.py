"""FastAPI application entry point."""

import logging
import sys
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from catalog import __version__
from catalog.api.deps import enforce_rate_limit
from catalog.api.errors import register_exception_handlers
from catalog.api.rate_limit import InMemoryRateLimiter
from catalog.api.routes import languages_router, materials_router, modules_router
from catalog.api.security import TokenVerifier
from catalog.config import Settings, get_settings
from catalog.db import Database

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """Build the application around an explicitly constructed database handle."""
    settings = settings or get_settings()
    settings.validate_for_production()
    if database is None:
        database = Database(settings.database_url, echo=settings.db_echo)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        if settings.db_create_all:
            await database.create_all()
        logger.info("Course catalog started (%s)", settings.app_env)
        yield
        await database.dispose()

    app = FastAPI(
        title="Course Catalog Service",
        description="Programming languages, course modules and learning materials",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.database = database
    app.state.token_verifier = TokenVerifier(settings.jwt_secret_key, settings.jwt_algorithm)
    app.state.rate_limiter = (
        InMemoryRateLimiter(settings.rate_limit_max_requests, settings.rate_limit_window_seconds)
        if settings.rate_limit_enabled
        else None
    )
    app.state.started_at = time.monotonic()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s %s %.1fms",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response

    register_exception_handlers(app, expose_errors=not settings.is_production)

    rate_limited = [Depends(enforce_rate_limit)]
    app.include_router(languages_router, prefix=settings.api_prefix, dependencies=rate_limited)
    app.include_router(modules_router, prefix=settings.api_prefix, dependencies=rate_limited)
    app.include_router(materials_router, prefix=settings.api_prefix, dependencies=rate_limited)

    if settings.health_check_enabled:

        @app.get("/health")
        async def health_check() -> dict:
            """Health check endpoint."""
            return {
                "status": "ok",
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "uptime": round(time.monotonic() - app.state.started_at, 3),
                "environment": settings.app_env,
            }

    @app.get("/")
    async def root() -> dict:
        """Root endpoint."""
        return {
            "service": "Course Catalog Service",
            "version": __version__,
            "docs": "/docs",
            "api": settings.api_prefix,
        }

    return app


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings)
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.app_port)
