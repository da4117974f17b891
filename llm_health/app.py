"""LLM Health Check API: FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from llm_health.config import Settings, get_settings
from llm_health.middleware import (
    configure_cors,
    configure_error_handlers,
    configure_rate_limiting,
    configure_request_logging,
    lifespan,
)
from llm_health.routers import docs, health
from llm_health.services.oracle_client import Oracle, OracleClient


def create_app(settings: Settings | None = None, oracle: Oracle | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = get_settings()
    if oracle is None:
        oracle = OracleClient(settings)

    app = FastAPI(
        title=settings.app_name,
        description="System health checks judged by a language model",
        version=settings.app_version,
        lifespan=lifespan,
    )

    # Store settings and the oracle on app state
    app.state.settings = settings
    app.state.oracle = oracle

    # Middleware
    configure_request_logging(app)
    configure_rate_limiting(app, settings)
    configure_cors(app, settings)
    configure_error_handlers(app, settings)

    # Routers
    app.include_router(docs.router)
    app.include_router(health.router)

    return app


# Default app instance for uvicorn
app = create_app()
