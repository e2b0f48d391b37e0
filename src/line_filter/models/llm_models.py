"""
LLM-specific data models for request/response cycle.

These models are internal to the LLM layer and handle the raw communication
with the inference server. They are separate from the filtering models to
allow swapping the underlying LLM client implementation.
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field, ConfigDict


class GenerationRequest(BaseModel):
    """
    Internal request model for LLM generation.

    This is the standardized format sent to any LLM client implementation.
    It abstracts away provider-specific details.
    """
    model_config = ConfigDict(frozen=True)

    prompt: str = Field(..., description="Complete prompt text")
    model: str = Field(..., min_length=1, description="Model name/identifier (e.g., 'llama3.1:latest')")
    stream: bool = Field(default=False, description="Whether to stream response (always False)")


class GenerationResponse(BaseModel):
    """
    Internal response model from LLM generation.

    Contains the raw generated text plus metadata for logging.
    Interpretation of the text happens in the classification layer.
    """
    model_config = ConfigDict(frozen=True)

    content: str = Field(..., description="Generated text, untrusted and unconstrained")
    model_version: str = Field(..., description="Model reported by the server")
    done: bool = Field(default=True, description="Whether the server finished generating")
    latency_ms: int = Field(..., ge=0, description="Round-trip latency in milliseconds")
    prompt_tokens: Optional[int] = Field(default=None, description="Tokens in prompt")
    completion_tokens: Optional[int] = Field(default=None, description="Tokens in completion")
    created_at: Optional[str] = Field(default=None, description="ISO timestamp from server")
    raw_metadata: Dict[str, Any] = Field(
        default_factory=dict,
        description="Provider-specific metadata (for debugging)"
    )


class OllamaGeneratePayload(BaseModel):
    """
    Body returned by Ollama's POST /api/generate with stream=false.

    Only ``response`` is required; everything else is informational.
    """
    model_config = ConfigDict(extra="ignore")

    response: str = Field(..., strict=True)
    model: Optional[str] = None
    created_at: Optional[str] = None
    done: bool = True
    total_duration: Optional[int] = None
    load_duration: Optional[int] = None
    prompt_eval_count: Optional[int] = None
    prompt_eval_duration: Optional[int] = None
    eval_count: Optional[int] = None
    eval_duration: Optional[int] = None
