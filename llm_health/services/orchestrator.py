"""Comprehensive health check: concurrent sub-checks merged into one verdict."""

from __future__ import annotations

import asyncio
from datetime import datetime

import structlog
from pydantic import BaseModel, ConfigDict

from llm_health.schemas.health import (
    CheckedComponents,
    ComprehensiveResult,
    DependencyStatus,
    DependencyVerdict,
    HealthVerdict,
    SystemMetrics,
    utc_timestamp,
)
from llm_health.services.checks import check_dependencies, check_health
from llm_health.services.oracle_client import Oracle

logger = structlog.get_logger()

SYSTEM_REASONS: dict[HealthVerdict, str] = {
    HealthVerdict.UNHEALTHY: "System metrics indicate unhealthy state",
    HealthVerdict.HEALTHY: "System metrics are within healthy ranges",
}

DEPENDENCY_REASONS: dict[DependencyVerdict, str] = {
    DependencyVerdict.DEPENDENCY_FAILURE: "Critical dependencies are failing",
    DependencyVerdict.PARTIAL_DEPENDENCY: "Some non-critical dependencies are down",
    DependencyVerdict.DEPENDENCIES_HEALTHY: "All dependencies are healthy",
}


class HealthCheckInput(BaseModel):
    """Fully populated input of a comprehensive check."""

    model_config = ConfigDict(frozen=True)

    metrics: SystemMetrics
    dependencies: tuple[DependencyStatus, ...]


def merge_verdicts(
    system_health: HealthVerdict,
    dependency_health: DependencyVerdict,
) -> tuple[HealthVerdict, list[str]]:
    """Combine both verdicts into an overall status and its reasoning.

    The overall status starts HEALTHY and can only escalate to UNHEALTHY:
    an unhealthy system or a critical dependency failure escalates it, a
    partial dependency failure alone never does. Reasoning always lists the
    system message first and the dependency message second.
    """
    overall = HealthVerdict.HEALTHY
    if system_health is HealthVerdict.UNHEALTHY:
        overall = HealthVerdict.UNHEALTHY
    if dependency_health is DependencyVerdict.DEPENDENCY_FAILURE:
        overall = HealthVerdict.UNHEALTHY

    reasoning = [SYSTEM_REASONS[system_health], DEPENDENCY_REASONS[dependency_health]]
    return overall, reasoning


def _checked_components(check_input: HealthCheckInput) -> CheckedComponents:
    metrics = check_input.metrics
    return CheckedComponents(
        cpu=metrics.cpu_usage,
        memory=metrics.memory_usage,
        disk=metrics.disk_usage,
        response_time=metrics.response_time,
        error_rate=metrics.error_rate,
        dependencies=len(check_input.dependencies),
    )


async def evaluate(
    oracle: Oracle,
    check_input: HealthCheckInput,
    now: datetime | None = None,
) -> ComprehensiveResult:
    """Run the system and dependency checks concurrently and merge them.

    The first check to fail fails the whole evaluation straight away: the
    other check is cancelled and no partial result is ever built.
    """
    health_task = asyncio.ensure_future(check_health(oracle, check_input.metrics))
    dependency_task = asyncio.ensure_future(check_dependencies(oracle, check_input.dependencies))
    tasks = (health_task, dependency_task)

    try:
        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    finally:
        for task in tasks:
            if not task.done():
                task.cancel()

    if pending:
        await asyncio.gather(*pending, return_exceptions=True)

    for task in tasks:
        if task in done and task.exception() is not None:
            error = task.exception()
            logger.error(
                "comprehensive_check_failed",
                error_type=type(error).__name__,
                error=str(error),
            )
            raise error

    system_health = health_task.result()
    dependency_health = dependency_task.result()
    overall, reasoning = merge_verdicts(system_health, dependency_health)

    result = ComprehensiveResult(
        status=overall,
        system_health=system_health,
        dependency_health=dependency_health,
        reasoning=reasoning,
        timestamp=utc_timestamp(now),
        checked_components=_checked_components(check_input),
    )
    logger.info(
        "comprehensive_check_completed",
        status=overall.value,
        system_health=system_health.value,
        dependency_health=dependency_health.value,
    )
    return result
