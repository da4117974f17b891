"""Simulated inputs for fields the caller did not supply."""

from __future__ import annotations

import random

from llm_health.schemas.health import (
    ComprehensiveCheckRequest,
    DependencyStatus,
    SystemMetrics,
)
from llm_health.services.orchestrator import HealthCheckInput

# Upper bounds of the simulated measurements
MAX_PERCENTAGE = 100.0
MAX_RESPONSE_TIME_MS = 3000.0
MAX_ERROR_RATE = 10.0

EXTERNAL_API_DOWN_PROBABILITY = 0.3


def _rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def random_metrics(rng: random.Random | None = None) -> SystemMetrics:
    """Generate a random metrics snapshot."""
    rng = _rng(rng)
    return SystemMetrics(
        cpu_usage=rng.random() * MAX_PERCENTAGE,
        memory_usage=rng.random() * MAX_PERCENTAGE,
        disk_usage=rng.random() * MAX_PERCENTAGE,
        response_time=rng.random() * MAX_RESPONSE_TIME_MS,
        error_rate=rng.random() * MAX_ERROR_RATE,
    )


def default_dependencies(rng: random.Random | None = None) -> list[DependencyStatus]:
    """Two critical services that are up and a flaky non-critical external API."""
    rng = _rng(rng)
    external_down = rng.random() < EXTERNAL_API_DOWN_PROBABILITY
    return [
        DependencyStatus(name="Database", status="up", critical=True),
        DependencyStatus(name="Cache", status="up", critical=True),
        DependencyStatus(
            name="External API",
            status="down" if external_down else "up",
            critical=False,
        ),
    ]


def fill_defaults(
    request: ComprehensiveCheckRequest,
    rng: random.Random | None = None,
) -> HealthCheckInput:
    """Complete a partial request, simulating each missing field independently."""
    rng = _rng(rng)
    simulated = random_metrics(rng)

    def pick(supplied: float | None, fallback: float) -> float:
        return fallback if supplied is None else supplied

    metrics = SystemMetrics(
        cpu_usage=pick(request.cpu_usage, simulated.cpu_usage),
        memory_usage=pick(request.memory_usage, simulated.memory_usage),
        disk_usage=pick(request.disk_usage, simulated.disk_usage),
        response_time=pick(request.response_time, simulated.response_time),
        error_rate=pick(request.error_rate, simulated.error_rate),
    )
    dependencies = request.dependencies
    if dependencies is None:
        dependencies = default_dependencies(rng)
    return HealthCheckInput(metrics=metrics, dependencies=tuple(dependencies))
