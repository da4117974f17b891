"""Tests for the response formatter and the evaluate-then-format pipeline."""

from __future__ import annotations

import asyncio

import pytest

from llm_health.schemas.health import (
    CheckedComponents,
    ComprehensiveResult,
    DependencyStatus,
    DependencyVerdict,
    HealthVerdict,
)
from llm_health.services.formatter import (
    DEPENDENCY_RECOMMENDATION,
    RESOURCE_RECOMMENDATION,
    format_response,
    run_health_check,
)
from llm_health.services.orchestrator import HealthCheckInput, merge_verdicts
from llm_health.services.validation import InvalidOracleResponse

from conftest import ScriptedOracle


def _result(system: HealthVerdict, dependency: DependencyVerdict) -> ComprehensiveResult:
    status, reasoning = merge_verdicts(system, dependency)
    return ComprehensiveResult(
        status=status,
        system_health=system,
        dependency_health=dependency,
        reasoning=reasoning,
        timestamp="2025-01-01T00:00:00.000Z",
        checked_components=CheckedComponents(
            cpu=1, memory=2, disk=3, response_time=4, error_rate=5, dependencies=0,
        ),
    )


class TestFormatResponse:
    """Tests for the healthy/unhealthy branch."""

    def test_healthy(self):
        response = format_response(_result(HealthVerdict.HEALTHY, DependencyVerdict.DEPENDENCIES_HEALTHY))
        assert response.http_status == 200
        assert response.message == "System is healthy"
        assert response.recommendations == []

    def test_healthy_with_partial_dependency(self):
        response = format_response(_result(HealthVerdict.HEALTHY, DependencyVerdict.PARTIAL_DEPENDENCY))
        assert response.http_status == 200
        assert response.recommendations == []

    def test_unhealthy_system_only(self):
        response = format_response(_result(HealthVerdict.UNHEALTHY, DependencyVerdict.DEPENDENCIES_HEALTHY))
        assert response.http_status == 500
        assert response.message == "System is unhealthy"
        assert response.recommendations == [RESOURCE_RECOMMENDATION]

    def test_unhealthy_system_with_partial_dependency(self):
        """A partial dependency failure adds no recommendation of its own."""
        response = format_response(_result(HealthVerdict.UNHEALTHY, DependencyVerdict.PARTIAL_DEPENDENCY))
        assert response.recommendations == [RESOURCE_RECOMMENDATION]

    def test_dependency_failure_only(self):
        response = format_response(_result(HealthVerdict.HEALTHY, DependencyVerdict.DEPENDENCY_FAILURE))
        assert response.http_status == 500
        assert response.recommendations == [DEPENDENCY_RECOMMENDATION]

    def test_both_failures_in_order(self):
        response = format_response(_result(HealthVerdict.UNHEALTHY, DependencyVerdict.DEPENDENCY_FAILURE))
        assert response.recommendations == [RESOURCE_RECOMMENDATION, DEPENDENCY_RECOMMENDATION]

    def test_details_carry_result(self):
        result = _result(HealthVerdict.HEALTHY, DependencyVerdict.DEPENDENCIES_HEALTHY)
        assert format_response(result).details == result

    def test_wire_field_names(self):
        response = format_response(_result(HealthVerdict.UNHEALTHY, DependencyVerdict.DEPENDENCY_FAILURE))
        data = response.model_dump(mode="json", by_alias=True)
        assert set(data) == {"httpStatus", "message", "details", "recommendations"}
        assert data["details"]["systemHealth"] == "UNHEALTHY"
        assert data["details"]["dependencyHealth"] == "DEPENDENCY_FAILURE"
        assert data["details"]["checkedComponents"]["responseTime"] == 4


class TestRunHealthCheck:
    """End-to-end pipeline against a scripted oracle."""

    @pytest.fixture
    def check_input(self, calm_metrics):
        return HealthCheckInput(
            metrics=calm_metrics,
            dependencies=(DependencyStatus(name="DB", status="up", critical=True),),
        )

    def test_healthy_example(self, check_input):
        oracle = ScriptedOracle(health="HEALTHY", dependencies="DEPENDENCIES_HEALTHY")
        response = asyncio.run(run_health_check(oracle, check_input))
        assert response.details.status is HealthVerdict.HEALTHY
        assert response.http_status == 200
        assert response.recommendations == []

    def test_unhealthy_example(self, check_input):
        oracle = ScriptedOracle(health="UNHEALTHY", dependencies="DEPENDENCY_FAILURE")
        response = asyncio.run(run_health_check(oracle, check_input))
        assert response.details.status is HealthVerdict.UNHEALTHY
        assert response.http_status == 500
        assert response.recommendations == [RESOURCE_RECOMMENDATION, DEPENDENCY_RECOMMENDATION]

    def test_invalid_answer_produces_no_response(self, check_input):
        oracle = ScriptedOracle(dependencies="ALL GOOD")
        with pytest.raises(InvalidOracleResponse):
            asyncio.run(run_health_check(oracle, check_input))
