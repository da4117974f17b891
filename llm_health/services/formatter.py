"""Response formatting for comprehensive health check results."""

from __future__ import annotations

from llm_health.schemas.health import (
    ComprehensiveResult,
    DependencyVerdict,
    FormattedResponse,
    HealthVerdict,
)
from llm_health.services.oracle_client import Oracle
from llm_health.services.orchestrator import HealthCheckInput, evaluate

RESOURCE_RECOMMENDATION = "Check system resources and optimize performance"
DEPENDENCY_RECOMMENDATION = "Investigate and restore critical service dependencies"


def _healthy_response(result: ComprehensiveResult) -> FormattedResponse:
    return FormattedResponse(
        http_status=200,
        message="System is healthy",
        details=result,
        recommendations=[],
    )


def _unhealthy_response(result: ComprehensiveResult) -> FormattedResponse:
    recommendations = []
    if result.system_health is HealthVerdict.UNHEALTHY:
        recommendations.append(RESOURCE_RECOMMENDATION)
    # A partial dependency failure alone gets no recommendation
    if result.dependency_health is DependencyVerdict.DEPENDENCY_FAILURE:
        recommendations.append(DEPENDENCY_RECOMMENDATION)

    return FormattedResponse(
        http_status=500,
        message="System is unhealthy",
        details=result,
        recommendations=recommendations,
    )


_FORMATTERS = {
    HealthVerdict.HEALTHY: _healthy_response,
    HealthVerdict.UNHEALTHY: _unhealthy_response,
}


def format_response(result: ComprehensiveResult) -> FormattedResponse:
    """Build the final payload and HTTP status for a comprehensive result."""
    return _FORMATTERS[result.status](result)


async def run_health_check(oracle: Oracle, check_input: HealthCheckInput) -> FormattedResponse:
    """Evaluate the input and format the outcome."""
    result = await evaluate(oracle, check_input)
    return format_response(result)
