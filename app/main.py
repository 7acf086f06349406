"""Main FastAPI application."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import sentry_sdk
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

from app.api.v1 import api_router
from app.config import Settings, settings as default_settings
from app.core.exceptions import AppError
from app.core.logging import setup_logging
from app.core.middleware import RoleRoutingMiddleware
from app.db.session import Database
from app.routers import dashboards

logger = logging.getLogger(__name__)


def init_sentry(settings: Settings) -> None:
    """Initialize Sentry for error tracking (only if DSN is properly configured)."""
    if settings.SENTRY_DSN and settings.SENTRY_DSN.startswith("https://"):
        sentry_sdk.init(
            dsn=settings.SENTRY_DSN,
            environment=settings.SENTRY_ENVIRONMENT,
            traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
            integrations=[
                FastApiIntegration(),
                LoggingIntegration(
                    level=None,  # Capture all logs
                    event_level="ERROR",  # Only send ERROR and above as events
                ),
            ],
            release=settings.APP_VERSION,
            attach_stacktrace=True,
            send_default_pii=False,
        )
    else:
        logger.info("Sentry DSN not configured - error tracking disabled")


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(p) for p in error.get("loc", ()) if p != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts) or "Invalid request"


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": _validation_message(exc)},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler."""
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "Internal server error",
                "message": str(exc) if settings.DEBUG else "An error occurred",
            },
        )


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Build the application.

    The database handle is created in the lifespan unless one is passed in,
    and is always reachable as ``app.state.database``.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        # Startup
        if getattr(app.state, "database", None) is None:
            app.state.database = Database.from_settings(settings)
        if settings.DEBUG:
            await app.state.database.create_all()
        logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} started ({settings.ENVIRONMENT})")
        yield
        # Shutdown
        await app.state.database.dispose()
        app.state.database = None

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Recruitment pipeline, candidates and hiring analytics",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        swagger_ui_parameters={
            "persistAuthorization": True,  # Persist authorization after page refresh
        },
    )
    app.state.database = database

    app.add_middleware(RoleRoutingMiddleware)

    # CORS middleware (outermost)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include API router
    app.include_router(api_router, prefix="/api/v1")

    # Role dashboards (no prefix - uses /admin and /employee)
    app.include_router(dashboards.router, tags=["Dashboards"])

    @app.get("/", tags=["Health"])
    async def root():
        """Root endpoint."""
        return {
            "message": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "status": "operational",
        }

    @app.get("/health", tags=["Health"])
    async def health_check():
        return {"status": "healthy", "environment": settings.ENVIRONMENT}

    register_exception_handlers(app, settings)
    return app


# Setup logging
setup_logging()
init_sentry(default_settings)

app = create_app()
