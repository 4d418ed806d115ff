# colholidays/main.py
"""
FastAPI application entry point.
"""

import os
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from colholidays import __version__
from colholidays.core.config import SUPPORTED_LANGUAGES
from colholidays.core.logging_config import get_logger, setup_logging
from colholidays.core.request_logging import RequestLoggingMiddleware
from colholidays.core.resolver import get_resolver
from colholidays.core.sentry_config import init_sentry
from colholidays.routes.holidays import router as holidays_router

# Setup logging FIRST (before any other imports that might log)
setup_logging()
logger = get_logger(__name__)

# Initialize Sentry for error tracking (production only)
sentry_enabled = init_sentry()


def validate_holiday_configs() -> None:
    """
    Load the holiday configuration for every supported language.

    Raises:
        RuntimeError: If any configuration is missing, invalid or not ready
    """
    for lang in SUPPORTED_LANGUAGES:
        config = get_resolver(lang).config
        if not config.is_ready:
            logger.error("Holiday configuration is not ready", extra={"extra_fields": {"lang": lang}})
            raise RuntimeError(f"Holiday configuration for '{lang}' is not ready")

    logger.info("Validated holiday configurations for %s", ", ".join(SUPPORTED_LANGUAGES))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(
        "Application starting up",
        extra={
            "extra_fields": {
                "production": os.getenv("PRODUCTION", "false").lower() == "true",
                "python_version": sys.version,
            }
        },
    )

    try:
        validate_holiday_configs()
    except Exception as e:
        logger.exception("Holiday configuration validation failed: %s", e)
        raise

    yield

    logger.info("Application shutting down")


app = FastAPI(
    title="colholidays",
    description="Colombian public holidays, Ley Emiliani shifts included",
    version=__version__,
    lifespan=lifespan,
)

# CORS Configuration
IS_PRODUCTION = os.getenv("PRODUCTION", "false").lower() == "true"
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "").split(",") if origin.strip()]

if IS_PRODUCTION:
    if not CORS_ORIGINS:
        logger.warning(
            "Production mode but no CORS_ORIGINS set. CORS will block all cross-origin requests. "
            "Set CORS_ORIGINS environment variable if you need to allow specific origins."
        )
    allowed_origins = CORS_ORIGINS
    logger.info(f"CORS configured for production with origins: {allowed_origins}")
else:
    allowed_origins = ["*"]
    logger.info("CORS configured for development (permissive)")

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],
)

app.add_middleware(RequestLoggingMiddleware)

app.include_router(holidays_router)


@app.get("/health", tags=["health"])
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "colholidays",
        "version": __version__,
    }
