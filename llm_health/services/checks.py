"""Oracle-backed checks: render a prompt, ask the oracle, validate the verdict."""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from llm_health.schemas.health import (
    DependencyStatus,
    DependencyVerdict,
    HealthVerdict,
    SystemMetrics,
)
from llm_health.services.oracle_client import Oracle
from llm_health.services.prompts import render_dependency_prompt, render_health_prompt
from llm_health.services.validation import (
    InvalidOracleResponse,
    validate_dependency_response,
    validate_health_response,
)

logger = structlog.get_logger()


async def check_health(oracle: Oracle, metrics: SystemMetrics) -> HealthVerdict:
    """Classify system metrics as HEALTHY or UNHEALTHY. Invalid answers are not retried."""
    raw = await oracle.classify(render_health_prompt(metrics))
    try:
        verdict = validate_health_response(raw)
    except InvalidOracleResponse:
        logger.warning("oracle_response_invalid", check="health", raw_response=raw[:200])
        raise
    logger.debug("health_check_classified", verdict=verdict.value)
    return verdict


async def check_dependencies(
    oracle: Oracle,
    dependencies: Sequence[DependencyStatus],
) -> DependencyVerdict:
    """Classify a dependency list into one of the three dependency verdicts."""
    raw = await oracle.classify(render_dependency_prompt(dependencies))
    try:
        verdict = validate_dependency_response(raw)
    except InvalidOracleResponse:
        logger.warning("oracle_response_invalid", check="dependencies", raw_response=raw[:200])
        raise
    logger.debug(
        "dependency_check_classified",
        verdict=verdict.value,
        dependency_count=len(dependencies),
    )
    return verdict
