"""
Ollama client implementation for LLM inference.

Communicates with the Ollama API using httpx AsyncClient. Supports:
- Non-streaming generation via POST /api/generate
- Connection reuse across lines via a persistent client
- Uniform InferenceError reporting (no retries)
"""

import time
from typing import Optional
import httpx
import structlog
from pydantic import ValidationError

from line_filter.llm.base_client import BaseLLMClient
from line_filter.llm.exceptions import (
    InferenceConnectionError,
    InferenceError,
    InferenceResponseError,
    InferenceStatusError,
    InferenceTimeoutError,
)
from line_filter.models.llm_models import (
    GenerationRequest,
    GenerationResponse,
    OllamaGeneratePayload,
)


logger = structlog.get_logger(__name__)


class OllamaClient(BaseLLMClient):
    """
    Ollama-specific LLM client using httpx for async HTTP communication.

    API Endpoints:
    - POST /api/generate: Generate a completion (stream disabled)

    Every failure (unreachable server, timeout, non-200 status, undecodable
    body) is raised as an InferenceError subclass; nothing is retried.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        connection_limits: Optional[httpx.Limits] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Ollama client.

        Args:
            base_url: Ollama server URL (Settings.OLLAMA_BASE_URL by default in the CLI)
            timeout: Request timeout in seconds
            connection_limits: httpx connection pool limits (default: 10 max connections)
            transport: Custom httpx transport (used by tests)
        """
        super().__init__(base_url, timeout)

        if connection_limits is None:
            connection_limits = httpx.Limits(
                max_keepalive_connections=5,
                max_connections=10,
                keepalive_expiry=30.0
            )

        self._client: Optional[httpx.AsyncClient] = None
        self._connection_limits = connection_limits
        self._transport = transport

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                limits=self._connection_limits,
                transport=self._transport,
                follow_redirects=True
            )
            logger.debug("Created new httpx AsyncClient", base_url=self.base_url)
        return self._client

    async def generate(self, request: GenerationRequest) -> GenerationResponse:
        """
        Generate completion using Ollama API.

        POST /api/generate with payload:
        {
            "model": "llama3.1:latest",
            "prompt": "...",
            "stream": false
        }

        Response:
        {
            "model": "llama3.1:latest",
            "created_at": "2026-10-19T...",
            "response": "yes",
            "done": true,
            "eval_count": 2,
            "prompt_eval_count": 40
        }
        """
        start_time = time.monotonic()

        payload = {
            "model": request.model,
            "prompt": request.prompt,
            "stream": False,
        }

        logger.debug(
            "Sending generation request to Ollama",
            model=request.model,
            prompt_length=len(request.prompt),
        )

        try:
            client = await self._get_client()
            response = await client.post("/api/generate", json=payload)
        except httpx.TimeoutException as e:
            raise InferenceTimeoutError(
                f"Ollama request timed out after {self.timeout}s",
                details={"timeout": self.timeout, "error_type": type(e).__name__}
            ) from e
        except httpx.TransportError as e:
            raise InferenceConnectionError(
                f"Failed to connect to Ollama at {self.base_url} (is it running?): {e}",
                details={"base_url": self.base_url, "error_type": type(e).__name__}
            ) from e
        except httpx.HTTPError as e:
            raise InferenceError(
                f"Ollama request failed: {e}",
                details={"error_type": type(e).__name__}
            ) from e

        if response.status_code != httpx.codes.OK:
            raise InferenceStatusError(
                f"Ollama API error (status {response.status_code}): {response.text}",
                details={"status": response.status_code, "model": request.model}
            )

        try:
            data = OllamaGeneratePayload.model_validate(response.json())
        except ValidationError as e:
            raise InferenceResponseError(
                "Failed to decode Ollama response: missing or invalid 'response' field",
                details={"errors": e.errors(include_url=False)}
            ) from e
        except ValueError as e:
            # json.JSONDecodeError and UnicodeDecodeError
            raise InferenceResponseError(
                f"Failed to decode Ollama response: {e}",
                details={"parse_error": str(e)}
            ) from e

        latency_ms = int((time.monotonic() - start_time) * 1000)

        logger.debug(
            "Ollama generation complete",
            model=data.model or request.model,
            latency_ms=latency_ms,
            prompt_tokens=data.prompt_eval_count,
            completion_tokens=data.eval_count,
            done=data.done,
        )

        return GenerationResponse(
            content=data.response,
            model_version=data.model or request.model,
            done=data.done,
            latency_ms=latency_ms,
            prompt_tokens=data.prompt_eval_count,
            completion_tokens=data.eval_count,
            created_at=data.created_at,
            raw_metadata={
                "total_duration": data.total_duration,
                "load_duration": data.load_duration,
                "eval_duration": data.eval_duration,
            }
        )

    async def close(self):
        """Close the HTTP client connection."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("Closed Ollama client connection")
