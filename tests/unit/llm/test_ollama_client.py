"""Unit tests for OllamaClient using httpx.MockTransport (no real server)."""

import json

import httpx
import pytest

from line_filter.llm.exceptions import (
    InferenceConnectionError,
    InferenceError,
    InferenceResponseError,
    InferenceStatusError,
    InferenceTimeoutError,
)
from line_filter.llm.ollama_client import OllamaClient
from line_filter.models.llm_models import GenerationRequest


def ollama_body(response="yes", **extra):
    body = {
        "model": "llama3.1:latest",
        "created_at": "2026-10-19T10:00:00Z",
        "response": response,
        "done": True,
        "prompt_eval_count": 42,
        "eval_count": 2,
        "total_duration": 150000000,
    }
    body.update(extra)
    return body


@pytest.fixture
def request_obj():
    return GenerationRequest(model="llama3.1:latest", prompt="Question: Q?\n\nContent:\nPython")


def client_with(handler, base_url="http://ollama:11434") -> OllamaClient:
    return OllamaClient(base_url=base_url, timeout=5, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_generate_posts_expected_payload(request_obj):
    """Request goes to /api/generate with model, prompt and stream=false."""
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=ollama_body("yes"))

    async with client_with(handler) as client:
        response = await client.generate(request_obj)

    assert seen["method"] == "POST"
    assert seen["url"] == "http://ollama:11434/api/generate"
    assert seen["body"] == {
        "model": "llama3.1:latest",
        "prompt": "Question: Q?\n\nContent:\nPython",
        "stream": False,
    }
    assert response.content == "yes"
    assert response.model_version == "llama3.1:latest"
    assert response.prompt_tokens == 42
    assert response.completion_tokens == 2
    assert response.done is True


@pytest.mark.asyncio
async def test_trailing_slash_in_base_url_is_ignored(request_obj):
    urls = []

    def handler(request):
        urls.append(str(request.url))
        return httpx.Response(200, json=ollama_body())

    async with client_with(handler, base_url="http://ollama:11434/") as client:
        await client.generate(request_obj)

    assert urls == ["http://ollama:11434/api/generate"]


@pytest.mark.asyncio
async def test_minimal_body_with_only_response(request_obj):
    """Only the response field is required."""
    async with client_with(lambda r: httpx.Response(200, json={"response": " No \n"})) as client:
        response = await client.generate(request_obj)

    assert response.content == " No \n"
    assert response.model_version == "llama3.1:latest"


@pytest.mark.asyncio
async def test_empty_response_text_is_not_an_error(request_obj):
    async with client_with(lambda r: httpx.Response(200, json=ollama_body(""))) as client:
        response = await client.generate(request_obj)

    assert response.content == ""


@pytest.mark.asyncio
async def test_non_200_status_raises(request_obj):
    handler = lambda r: httpx.Response(404, json={"error": "model 'llama3.1:latest' not found"})

    async with client_with(handler) as client:
        with pytest.raises(InferenceStatusError) as exc_info:
            await client.generate(request_obj)

    assert "status 404" in exc_info.value.message
    assert "not found" in exc_info.value.message
    assert exc_info.value.details["status"] == 404


@pytest.mark.asyncio
async def test_server_error_is_not_retried(request_obj):
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(500, text="out of memory")

    async with client_with(handler) as client:
        with pytest.raises(InferenceStatusError):
            await client.generate(request_obj)

    assert len(calls) == 1


@pytest.mark.asyncio
async def test_invalid_json_raises(request_obj):
    handler = lambda r: httpx.Response(200, text="<html>not json</html>")

    async with client_with(handler) as client:
        with pytest.raises(InferenceResponseError):
            await client.generate(request_obj)


@pytest.mark.asyncio
async def test_missing_response_field_raises(request_obj):
    handler = lambda r: httpx.Response(200, json={"model": "llama3.1:latest", "done": True})

    async with client_with(handler) as client:
        with pytest.raises(InferenceResponseError):
            await client.generate(request_obj)


@pytest.mark.asyncio
async def test_non_string_response_field_raises(request_obj):
    handler = lambda r: httpx.Response(200, json=ollama_body(response=1))

    async with client_with(handler) as client:
        with pytest.raises(InferenceResponseError):
            await client.generate(request_obj)


@pytest.mark.asyncio
async def test_connection_error_raises(request_obj):
    def handler(request):
        raise httpx.ConnectError("Connection refused", request=request)

    async with client_with(handler) as client:
        with pytest.raises(InferenceConnectionError) as exc_info:
            await client.generate(request_obj)

    assert "is it running?" in exc_info.value.message


@pytest.mark.asyncio
async def test_timeout_raises(request_obj):
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    async with client_with(handler) as client:
        with pytest.raises(InferenceTimeoutError) as exc_info:
            await client.generate(request_obj)

    # All failures share a single base class callers can catch
    assert isinstance(exc_info.value, InferenceError)
    assert exc_info.value.details["timeout"] == 5


@pytest.mark.asyncio
async def test_close_closes_http_client(request_obj):
    client = client_with(lambda r: httpx.Response(200, json=ollama_body()))
    await client.generate(request_obj)
    http_client = client._client

    await client.close()

    assert http_client.is_closed


def test_base_url_is_required():
    with pytest.raises(TypeError):
        OllamaClient()
