"""Unit test fixtures (mocks and stubs).

Provides a deterministic stand-in for the inference backend so classifier,
driver and CLI tests never touch the network.
"""

import asyncio
from unittest.mock import AsyncMock

import pytest

from line_filter.classification.classifier import Classifier
from line_filter.llm.base_client import BaseLLMClient
from line_filter.llm.exceptions import InferenceConnectionError
from line_filter.models.llm_models import GenerationRequest, GenerationResponse


def content_of(prompt: str) -> str:
    """Extract the content line from a prompt built with the default template."""
    return prompt.split("Content:\n", 1)[1].rsplit("\n\nAnswer with only", 1)[0]


class ScriptedLLMClient(BaseLLMClient):
    """
    Inference backend answering from a fixed script.

    Args:
        answers: content line -> raw answer text (unknown lines answer "no")
        failing: content lines whose request fails with InferenceConnectionError
        delays: content line -> seconds to wait before answering
    """

    def __init__(self, answers=None, failing=(), delays=None):
        super().__init__("http://scripted:11434")
        self.answers = answers or {}
        self.failing = set(failing)
        self.delays = delays or {}
        self.requests: list[GenerationRequest] = []
        self.in_flight = 0
        self.max_in_flight = 0
        self.closed = False

    async def generate(self, request: GenerationRequest) -> GenerationResponse:
        self.requests.append(request)
        content = content_of(request.prompt)

        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(content, 0))
        finally:
            self.in_flight -= 1

        if content in self.failing:
            raise InferenceConnectionError(
                "Failed to connect to Ollama (is it running?): connection refused",
                details={"base_url": self.base_url},
            )
        return GenerationResponse(
            content=self.answers.get(content, "no"),
            model_version=request.model,
            latency_ms=1,
        )

    async def close(self):
        self.closed = True

    @property
    def classified_lines(self) -> list[str]:
        return [content_of(r.prompt) for r in self.requests]


@pytest.fixture
def language_answers():
    """Answers to "Is this a programming language?"."""
    return {"Python": "yes", "English": "no", "Rust": "Yes", "French": "NO"}


@pytest.fixture
def scripted_client(language_answers):
    """Scripted backend with the language answers."""
    return ScriptedLLMClient(answers=language_answers)


@pytest.fixture
def make_scripted_client(language_answers):
    """Factory fixture for scripted backends with failures or delays.

    Usage:
        def test_something(make_scripted_client):
            client = make_scripted_client(failing={"Broken"})
    """
    def _create(answers=None, failing=(), delays=None) -> ScriptedLLMClient:
        return ScriptedLLMClient(
            answers=answers if answers is not None else language_answers,
            failing=failing,
            delays=delays,
        )

    return _create


@pytest.fixture
def make_classifier():
    """Factory fixture building a Classifier around a backend."""
    def _create(llm_client: BaseLLMClient, model: str = "llama3.1:latest") -> Classifier:
        return Classifier(llm_client=llm_client, model=model)

    return _create


@pytest.fixture
def mock_llm_client():
    """Mock LLM client (AsyncMock) answering "yes"."""
    mock = AsyncMock(spec=BaseLLMClient)
    mock.generate = AsyncMock(return_value=GenerationResponse(
        content="yes",
        model_version="llama3.1:latest",
        latency_ms=120,
    ))
    return mock
