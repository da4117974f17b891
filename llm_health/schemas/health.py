"""Schemas for the oracle-backed health check endpoints."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utc_timestamp(now: datetime | None = None) -> str:
    """Return an ISO-8601 UTC timestamp with millisecond precision, e.g. 2025-01-01T12:00:00.000Z."""
    if now is None:
        now = datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class HealthVerdict(str, Enum):
    """Verdict of the system metrics check, also used as the overall status."""

    HEALTHY = "HEALTHY"
    UNHEALTHY = "UNHEALTHY"


class DependencyVerdict(str, Enum):
    """Verdict of the dependency check."""

    DEPENDENCY_FAILURE = "DEPENDENCY_FAILURE"
    PARTIAL_DEPENDENCY = "PARTIAL_DEPENDENCY"
    DEPENDENCIES_HEALTHY = "DEPENDENCIES_HEALTHY"


class CamelModel(BaseModel):
    """Base model exchanged on the wire with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False)


class FrozenCamelModel(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False, frozen=True)


# ─── Domain ──────────────────────────────────────────────────────────────────

class SystemMetrics(FrozenCamelModel):
    """A snapshot of system measurements. Ranges are judged by the oracle, not here."""

    cpu_usage: int | float
    memory_usage: int | float
    disk_usage: int | float
    response_time: int | float
    error_rate: int | float


class DependencyStatus(FrozenCamelModel):
    """A single service dependency as reported by the caller."""

    name: str
    status: str = Field(..., description="Usually 'up' or 'down'; any string is passed to the oracle")
    critical: bool


class CheckedComponents(FrozenCamelModel):
    """Echo of the raw inputs a comprehensive check was run against."""

    cpu: int | float
    memory: int | float
    disk: int | float
    response_time: int | float
    error_rate: int | float
    dependencies: int


class ComprehensiveResult(FrozenCamelModel):
    """Merged outcome of the system and dependency checks."""

    status: HealthVerdict
    system_health: HealthVerdict
    dependency_health: DependencyVerdict
    reasoning: list[str]
    timestamp: str
    checked_components: CheckedComponents


class FormattedResponse(FrozenCamelModel):
    """Final payload of a comprehensive check, carrying its HTTP status."""

    http_status: int
    message: str
    details: ComprehensiveResult
    recommendations: list[str]


# ─── Requests ────────────────────────────────────────────────────────────────

class ComprehensiveCheckRequest(CamelModel):
    """Comprehensive check input. Missing fields are simulated."""

    cpu_usage: int | float | None = None
    memory_usage: int | float | None = None
    disk_usage: int | float | None = None
    response_time: int | float | None = None
    error_rate: int | float | None = None
    dependencies: list[DependencyStatus] | None = None


class DependencyCheckRequest(CamelModel):
    """Dependency-only check input."""

    dependencies: list[DependencyStatus]


# ─── Responses ───────────────────────────────────────────────────────────────

class BasicHealthResponse(CamelModel):
    """Result of the basic (metrics only) health check."""

    status: str
    message: str
    metrics: SystemMetrics
    timestamp: str


class DependencyCheckResponse(CamelModel):
    """Result of the dependency-only check."""

    status: str
    dependency_health: DependencyVerdict
    dependencies: list[DependencyStatus]
    message: str
    timestamp: str


class ErrorResponse(CamelModel):
    """Error body returned when a check cannot be completed."""

    status: str = "error"
    message: str
    error: str | None = None
    timestamp: str | None = None
    errors: list[dict[str, Any]] | None = None
