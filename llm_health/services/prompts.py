"""Prompt templates for the health analysis and dependency checks."""

from __future__ import annotations

from collections.abc import Sequence

from llm_health.schemas.health import DependencyStatus, SystemMetrics

HEALTH_ANALYSIS_TEMPLATE = """
You are a system health analyzer. Analyze the following system metrics and determine if the system is healthy.

System Metrics:
- CPU Usage: {cpu_usage}%
- Memory Usage: {memory_usage}%
- Disk Usage: {disk_usage}%
- Response Time: {response_time}ms
- Error Rate: {error_rate}%

Rules for Health Assessment:
- CPU Usage > 80% = UNHEALTHY
- Memory Usage > 85% = UNHEALTHY
- Disk Usage > 90% = UNHEALTHY
- Response Time > 2000ms = UNHEALTHY
- Error Rate > 5% = UNHEALTHY
- Otherwise = HEALTHY

Respond with exactly one word: either "HEALTHY" or "UNHEALTHY"
"""

DEPENDENCY_CHECK_TEMPLATE = """
You are a service dependency analyzer. Check if the system's dependencies are healthy.

Service Dependencies:
{dependencies}

Rules:
- If ANY critical service is down, respond with "DEPENDENCY_FAILURE"
- If all critical services are up but some non-critical are down, respond with "PARTIAL_DEPENDENCY"
- If all services are up, respond with "DEPENDENCIES_HEALTHY"

Respond with exactly one of these three options.
"""


def _render_number(value: int | float) -> str:
    """Render a measurement verbatim, dropping the '.0' of integral values."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def render_health_prompt(metrics: SystemMetrics) -> str:
    """Fill the health analysis template. Out-of-range values are not checked."""
    return HEALTH_ANALYSIS_TEMPLATE.format(
        cpu_usage=_render_number(metrics.cpu_usage),
        memory_usage=_render_number(metrics.memory_usage),
        disk_usage=_render_number(metrics.disk_usage),
        response_time=_render_number(metrics.response_time),
        error_rate=_render_number(metrics.error_rate),
    )


def format_dependency_line(dependency: DependencyStatus) -> str:
    criticality = "Critical" if dependency.critical else "Non-Critical"
    return f"- {dependency.name}: {dependency.status} ({criticality})"


def format_dependencies(dependencies: Sequence[DependencyStatus]) -> str:
    return "\n".join(format_dependency_line(dep) for dep in dependencies)


def render_dependency_prompt(dependencies: Sequence[DependencyStatus]) -> str:
    """Fill the dependency check template, one line per dependency in input order."""
    return DEPENDENCY_CHECK_TEMPLATE.format(dependencies=format_dependencies(dependencies))
