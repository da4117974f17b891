"""Shared test fixtures for the LLM Health Check API test suite."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from llm_health.app import create_app
from llm_health.config import Settings
from llm_health.schemas.health import DependencyStatus, SystemMetrics


class ScriptedOracle:
    """Oracle double answering per check type and recording every prompt.

    An answer that is an exception instance is raised instead of returned.
    """

    def __init__(self, health: str | Exception = "HEALTHY", dependencies: str | Exception = "DEPENDENCIES_HEALTHY") -> None:
        self.health_answer = health
        self.dependency_answer = dependencies
        self.prompts: list[str] = []

    async def classify(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if "system health analyzer" in prompt:
            answer = self.health_answer
        elif "service dependency analyzer" in prompt:
            answer = self.dependency_answer
        else:
            raise AssertionError(f"Unexpected prompt: {prompt[:80]}")
        if isinstance(answer, Exception):
            raise answer
        return answer

    @property
    def health_prompts(self) -> list[str]:
        return [p for p in self.prompts if "system health analyzer" in p]

    @property
    def dependency_prompts(self) -> list[str]:
        return [p for p in self.prompts if "service dependency analyzer" in p]


def _test_settings() -> Settings:
    """Return settings suitable for testing."""
    return Settings(
        environment="development",
        debug=True,
        log_format="console",
        rate_limit_default="1000/minute",
        allowed_origins="http://localhost:3000,http://localhost:5015",
        openai_api_key="test-key",
    )


@pytest.fixture
def settings():
    """Test settings."""
    return _test_settings()


@pytest.fixture
def oracle():
    """Scripted oracle that reports a healthy system by default."""
    return ScriptedOracle()


@pytest.fixture
def app(settings, oracle):
    """Create a fresh FastAPI app wired to the scripted oracle."""
    return create_app(settings, oracle=oracle)


@pytest.fixture
def client(app):
    """HTTP test client."""
    return TestClient(app)


@pytest.fixture
def calm_metrics():
    """Metrics well within every threshold."""
    return SystemMetrics(
        cpu_usage=10,
        memory_usage=10,
        disk_usage=10,
        response_time=50,
        error_rate=0,
    )


@pytest.fixture
def sample_dependencies():
    """A critical database that is up and a non-critical API that is down."""
    return [
        DependencyStatus(name="Database", status="up", critical=True),
        DependencyStatus(name="External API", status="down", critical=False),
    ]
