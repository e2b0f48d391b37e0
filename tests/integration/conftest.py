"""Integration test fixtures (service checks and prerequisites).

Integration tests are skipped if the Ollama server is not running.
"""

import os

import httpx
import pytest


OLLAMA_URL = os.environ.get("OLLAMA_BASE_URL", "http://localhost:11434")


@pytest.fixture(scope="session")
def ollama_models() -> list[str]:
    """Models available on the local Ollama server.

    Skips tests if Ollama is not reachable or has no models pulled.
    """
    try:
        response = httpx.get(f"{OLLAMA_URL}/api/tags", timeout=5)
    except httpx.HTTPError as e:
        pytest.skip(f"Ollama not available: {e}")
    if response.status_code != 200:
        pytest.skip("Ollama not available (non-200 status)")
    models = [m["name"] for m in response.json().get("models", [])]
    if not models:
        pytest.skip("No models available in Ollama")
    return models
