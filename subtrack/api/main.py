"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from subtrack.api.middleware import RequestIDMiddleware, MetricsMiddleware
from subtrack.api.v1 import billing, catalog, subscriptions, entitlements
from subtrack.infrastructure.observability.logging import setup_logging
from subtrack.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="SubTrack Core",
        description="Renewal schedules, cost normalization and feature gates for tracked subscriptions",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # RequestIDMiddleware wraps MetricsMiddleware, so request_id is set before timing starts
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(billing.router, prefix="/v1", tags=["billing"])
    app.include_router(subscriptions.router, prefix="/v1", tags=["subscriptions"])
    app.include_router(entitlements.router, prefix="/v1", tags=["entitlements"])
    app.include_router(catalog.router, prefix="/v1", tags=["catalog"])

    return app


app = create_app()
