"""Validation of raw oracle answers into closed verdict enumerations."""

from __future__ import annotations

from llm_health.schemas.health import DependencyVerdict, HealthVerdict


class InvalidOracleResponse(Exception):
    """Raised when the oracle answers outside the expected verdicts."""

    def __init__(self, check: str, raw_response: str) -> None:
        super().__init__(f"Invalid {check} response: {raw_response}")
        self.check = check
        self.raw_response = raw_response


def normalize_response(raw: str) -> str:
    """Trim surrounding whitespace and uppercase."""
    return raw.strip().upper()


def validate_health_response(raw: str) -> HealthVerdict:
    """Map an oracle answer to a HealthVerdict.

    Raises:
        InvalidOracleResponse: If the normalised text is not exactly
            HEALTHY or UNHEALTHY.
    """
    try:
        return HealthVerdict(normalize_response(raw))
    except ValueError:
        raise InvalidOracleResponse("health check", raw) from None


def validate_dependency_response(raw: str) -> DependencyVerdict:
    """Map an oracle answer to a DependencyVerdict.

    Raises:
        InvalidOracleResponse: If the normalised text is not one of the
            three dependency verdicts.
    """
    try:
        return DependencyVerdict(normalize_response(raw))
    except ValueError:
        raise InvalidOracleResponse("dependency check", raw) from None
