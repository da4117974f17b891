"""Self-describing documentation endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request

from llm_health.schemas.health import DependencyVerdict, HealthVerdict

router = APIRouter(tags=["docs"])

ENDPOINTS = {
    "GET /api/health/basic": "Basic system health check on simulated metrics",
    "POST /api/health/comprehensive": "Comprehensive health check with custom parameters",
    "POST /api/health/dependencies": "Check only service dependencies",
    "GET /api/health/chains": "Information about the available checks",
}


@router.get("/")
async def api_index(request: Request) -> dict[str, Any]:
    """API documentation index."""
    settings = request.app.state.settings
    return {
        "message": settings.app_name,
        "version": settings.app_version,
        "endpoints": ENDPOINTS,
        "documentation": {
            "checks": "Each check renders a prompt, asks the oracle for a one-word verdict and validates it",
            "usage": "Each endpoint returns 200 for healthy systems and 500 for unhealthy systems",
            "openapi": "/docs",
        },
    }


@router.get("/api/health/chains")
async def describe_checks() -> dict[str, Any]:
    """Describe the checks, their inputs and their possible verdicts."""
    return {
        "availableChains": {
            "healthAnalysis": {
                "name": "System Health Analysis",
                "description": "Analyzes system metrics to determine overall health",
                "inputs": ["cpuUsage", "memoryUsage", "diskUsage", "responseTime", "errorRate"],
                "outputs": [verdict.value for verdict in HealthVerdict],
            },
            "dependencyCheck": {
                "name": "Dependency Check",
                "description": "Checks the health of external service dependencies",
                "inputs": ["dependencies"],
                "outputs": [verdict.value for verdict in DependencyVerdict],
            },
            "comprehensive": {
                "name": "Comprehensive Health Check",
                "description": "Combines system and dependency health checks",
                "inputs": ["systemMetrics", "dependencies"],
                "outputs": ["Complete health report with recommendations"],
            },
        },
        "chainArchitecture": {
            "flow": "Input -> (Health Analysis || Dependency Check) -> Merge -> Conditional Response -> Output",
            "errorHandling": "Any oracle failure or invalid verdict aborts the whole check",
            "performance": "Both checks of a comprehensive request run concurrently",
        },
    }
