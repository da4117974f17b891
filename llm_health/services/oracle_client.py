"""Client for the text-completion service that classifies health inputs."""

from __future__ import annotations

from typing import Any, Protocol

import httpx
import structlog

from llm_health.config import Settings

logger = structlog.get_logger()

CONNECTION_TEST_PROMPT = "Hello, how is it going?"


class OracleUnavailable(Exception):
    """Raised when the completion service cannot produce an answer."""


class Oracle(Protocol):
    """Anything that turns a rendered prompt into raw answer text."""

    async def classify(self, prompt: str) -> str: ...


class OracleClient:
    """HTTP client for an OpenAI-compatible chat completions API.

    There is no retry and, unless ``oracle_timeout_seconds`` is set, no
    timeout: a stalled remote call stalls the caller.
    """

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = settings.openai_api_key
        self.base_url = settings.openai_base_url.rstrip("/")
        self.model = settings.oracle_model
        self.temperature = settings.oracle_temperature
        self.timeout = settings.oracle_timeout_seconds
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        if not self.api_key:
            raise OracleUnavailable("Oracle API key is not configured")
        return {"Authorization": f"Bearer {self.api_key}"}

    async def complete(self, prompt: str, temperature: float | None = None) -> str:
        """Send a single-message completion request and return the reply text."""
        headers = self._headers()
        payload: dict[str, Any] = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self.temperature if temperature is None else temperature,
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    f"{self.base_url}/chat/completions",
                    headers=headers,
                    json=payload,
                )
        except httpx.HTTPError as exc:
            raise OracleUnavailable(f"Oracle request failed: {exc}") from exc

        if response.status_code != 200:
            raise OracleUnavailable(
                f"Oracle returned {response.status_code}: {response.text[:200]}"
            )

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            raise OracleUnavailable("Oracle returned a malformed completion payload") from exc
        if not isinstance(content, str):
            raise OracleUnavailable("Oracle returned a completion without text content")
        return content

    async def classify(self, prompt: str) -> str:
        """Ask the oracle for a short verdict at the configured low temperature."""
        return await self.complete(prompt)

    async def test_connection(self) -> bool:
        """Test if the oracle answers at all."""
        try:
            reply = await self.complete(CONNECTION_TEST_PROMPT, temperature=0.0)
        except OracleUnavailable as exc:
            logger.warning("oracle_connection_failed", model=self.model, error=str(exc))
            return False
        logger.info("oracle_connection_ok", model=self.model, reply_length=len(reply))
        return True
