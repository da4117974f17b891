"""Application middleware: rate limiting, CORS, logging, error handlers, lifespan."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from contextlib import asynccontextmanager
from typing import Any

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from llm_health.config import Settings
from llm_health.schemas.health import ErrorResponse, utc_timestamp

logger = structlog.get_logger()


def get_limiter(settings: Settings) -> Limiter:
    """Create a rate limiter instance."""
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
    )


def configure_cors(app: FastAPI, settings: Settings) -> None:
    """Add CORS middleware to the application."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-RateLimit-Remaining"],
    )


def configure_rate_limiting(app: FastAPI, settings: Settings) -> None:
    """Apply the default rate limit to every inbound request."""
    limiter = get_limiter(settings)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)


async def logging_middleware(request: Request, call_next) -> Response:
    """Structured logging middleware: logs every request."""
    start_time = time.monotonic()
    response = await call_next(request)
    duration_ms = round((time.monotonic() - start_time) * 1000, 2)

    logger.info(
        "http_request",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=duration_ms,
        client_ip=request.client.host if request.client else "unknown",
    )

    return response


def configure_request_logging(app: FastAPI) -> None:
    app.middleware("http")(logging_middleware)


def configure_structured_logging(settings: Settings) -> None:
    """Configure structlog for JSON or console output."""
    logging.basicConfig(format="%(message)s", level=settings.log_level.upper())

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _error_body(**fields: Any) -> dict[str, Any]:
    return ErrorResponse(**fields).model_dump(exclude_none=True)


def validation_error_details(errors: Sequence[dict[str, Any]]) -> list[dict[str, Any]]:
    """JSON-safe validation errors. The offending input is left out, it may be inf or NaN."""
    return jsonable_encoder([{k: v for k, v in error.items() if k != "input"} for error in errors])


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed request bodies before any oracle call is made."""
    logger.warning("request_validation_failed", path=request.url.path, errors=len(exc.errors()))
    return JSONResponse(
        status_code=400,
        content=_error_body(
            message="Invalid request body",
            errors=validation_error_details(exc.errors()),
            timestamp=utc_timestamp(),
        ),
    )


def configure_error_handlers(app: FastAPI, settings: Settings) -> None:
    """Map boundary validation errors to 400 and anything unexpected to 500."""

    async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("unhandled_error", path=request.url.path, error_type=type(exc).__name__)
        error = str(exc) if settings.is_development else "Something went wrong"
        return JSONResponse(
            status_code=500,
            content=_error_body(message="Internal server error", error=error),
        )

    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: logging setup and optional oracle connection check."""
    settings = app.state.settings
    configure_structured_logging(settings)

    logger.info(
        "application_starting",
        version=settings.app_version,
        environment=settings.environment,
        port=settings.port,
        oracle_model=settings.oracle_model,
    )

    if settings.oracle_check_on_startup:
        test_connection = getattr(app.state.oracle, "test_connection", None)
        if test_connection is not None:
            reachable = await test_connection()
            logger.info("oracle_startup_check", reachable=reachable)

    yield

    logger.info("application_shutting_down")
