"""Oracle-backed health check endpoints."""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from llm_health.middleware import validation_error_details
from llm_health.schemas.health import (
    BasicHealthResponse,
    ComprehensiveCheckRequest,
    DependencyCheckRequest,
    DependencyCheckResponse,
    DependencyVerdict,
    ErrorResponse,
    FormattedResponse,
    HealthVerdict,
    utc_timestamp,
)
from llm_health.services.checks import check_dependencies, check_health
from llm_health.services.formatter import run_health_check
from llm_health.services.oracle_client import Oracle, OracleUnavailable
from llm_health.services.prompts import format_dependencies
from llm_health.services.simulation import fill_defaults, random_metrics
from llm_health.services.validation import InvalidOracleResponse

logger = structlog.get_logger()

router = APIRouter(prefix="/api/health", tags=["health"])

CHECK_FAILURES = (OracleUnavailable, InvalidOracleResponse)


def get_oracle(request: Request) -> Oracle:
    """Return the oracle configured on the application."""
    return request.app.state.oracle


def _failure_response(message: str, exc: Exception) -> JSONResponse:
    body = ErrorResponse(message=message, error=str(exc), timestamp=utc_timestamp())
    return JSONResponse(status_code=500, content=body.model_dump(exclude_none=True))


@router.get(
    "/basic",
    response_model=BasicHealthResponse,
    responses={500: {"model": ErrorResponse}},
)
async def basic_health_check(oracle: Oracle = Depends(get_oracle)) -> JSONResponse:
    """Classify a simulated metrics snapshot."""
    metrics = random_metrics()
    logger.info("basic_health_check_started", metrics=metrics.model_dump())

    try:
        verdict = await check_health(oracle, metrics)
    except CHECK_FAILURES as exc:
        logger.error("basic_health_check_failed", error_type=type(exc).__name__, error=str(exc))
        return _failure_response("Health check system failure", exc)

    healthy = verdict is HealthVerdict.HEALTHY
    body = BasicHealthResponse(
        status="healthy" if healthy else "unhealthy",
        message="All systems operational" if healthy else "System health check failed",
        metrics=metrics,
        timestamp=utc_timestamp(),
    )
    return JSONResponse(
        status_code=200 if healthy else 500,
        content=body.model_dump(mode="json", by_alias=True),
    )


@router.post(
    "/comprehensive",
    response_model=FormattedResponse,
    responses={500: {"model": ErrorResponse}},
)
async def comprehensive_health_check(
    request: ComprehensiveCheckRequest | None = None,
    oracle: Oracle = Depends(get_oracle),
) -> JSONResponse:
    """Run both checks concurrently and respond with the merged verdict."""
    if request is None:
        request = ComprehensiveCheckRequest()

    check_input = fill_defaults(request)
    logger.info(
        "comprehensive_health_check_started",
        metrics=check_input.metrics.model_dump(),
        dependencies=len(check_input.dependencies),
    )

    try:
        result = await run_health_check(oracle, check_input)
    except CHECK_FAILURES as exc:
        return _failure_response("Comprehensive health check system failure", exc)

    return JSONResponse(
        status_code=result.http_status,
        content=result.model_dump(mode="json", by_alias=True),
    )


@router.post(
    "/dependencies",
    response_model=DependencyCheckResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def dependency_health_check(
    payload: Any = Body(default=None),
    oracle: Oracle = Depends(get_oracle),
) -> JSONResponse:
    """Classify only the supplied service dependencies."""
    raw_dependencies = payload.get("dependencies") if isinstance(payload, dict) else None
    if not isinstance(raw_dependencies, list):
        body = ErrorResponse(message="Dependencies array is required in request body")
        return JSONResponse(status_code=400, content=body.model_dump(exclude_none=True))

    try:
        request = DependencyCheckRequest.model_validate({"dependencies": raw_dependencies})
    except ValidationError as exc:
        body = ErrorResponse(
            message="Invalid dependency entries",
            errors=validation_error_details(exc.errors()),
        )
        return JSONResponse(status_code=400, content=body.model_dump(exclude_none=True))

    logger.info("dependency_check_started", dependencies=format_dependencies(request.dependencies))

    try:
        verdict = await check_dependencies(oracle, request.dependencies)
    except CHECK_FAILURES as exc:
        logger.error("dependency_check_failed", error_type=type(exc).__name__, error=str(exc))
        return _failure_response("Dependency check system failure", exc)

    healthy = verdict is DependencyVerdict.DEPENDENCIES_HEALTHY
    body = DependencyCheckResponse(
        status="healthy" if healthy else "unhealthy",
        dependency_health=verdict,
        dependencies=request.dependencies,
        message="All dependencies are healthy" if healthy else "Some dependencies are failing",
        timestamp=utc_timestamp(),
    )
    return JSONResponse(
        status_code=200 if healthy else 500,
        content=body.model_dump(mode="json", by_alias=True),
    )
