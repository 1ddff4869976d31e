"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
See hradmin.core.lifespan and hradmin.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and optionally
clear get_settings cache) before importing or calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from hradmin.api.v1 import api_router
from hradmin.core.config import get_settings
from hradmin.core.exception_handlers import register_exception_handlers
from hradmin.core.lifespan import create_lifespan
from hradmin.core.limiter import limiter
from hradmin.infrastructure.cache.scoped_read_cache import ScopedReadCache
from hradmin.shared.telemetry import setup_logging
from hradmin.shared.telemetry.telemetry import TelemetryConfig


def create_app() -> FastAPI:
    """Build and return the FastAPI application. Settings are resolved here (deferred from import)."""
    settings = get_settings()
    setup_logging()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    # One read cache per process; the authenticated admin owns its scope.
    app.state.read_cache = ScopedReadCache(settings.read_cache_ttl_seconds)
    app.state.firestore = None
    app.state.telemetry = None

    app.state.limiter = limiter
    limiter.enabled = settings.rate_limit_enabled
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    register_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.telemetry_enabled:
        telemetry = TelemetryConfig.from_settings(settings)
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        telemetry.instrument_fastapi(app)
        app.state.telemetry = telemetry

    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()
