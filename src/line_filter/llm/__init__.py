"""
LLM client abstraction and implementations.

Components:
- BaseLLMClient: Abstract base class for LLM clients
- OllamaClient: Implementation for Ollama inference server
- PromptBuilder: Constructs the yes/no prompt for one line
- exceptions: LLM-specific exceptions
"""

from line_filter.llm.base_client import BaseLLMClient
from line_filter.llm.ollama_client import OllamaClient
from line_filter.llm.prompt_builder import PromptBuilder, build_prompt
from line_filter.llm.exceptions import (
    InferenceError,
    InferenceConnectionError,
    InferenceTimeoutError,
    InferenceStatusError,
    InferenceResponseError,
)

__all__ = [
    "BaseLLMClient",
    "OllamaClient",
    "PromptBuilder",
    "build_prompt",
    "InferenceError",
    "InferenceConnectionError",
    "InferenceTimeoutError",
    "InferenceStatusError",
    "InferenceResponseError",
]
