"""
Pydantic data models for the line filter.

Includes:
- Enums (KeepPolicy, DisplayMode)
- LLM models (GenerationRequest, GenerationResponse, OllamaGeneratePayload)
- Filter models (FilterOptions, FilterStats)
"""

from line_filter.models.enums import KeepPolicy, DisplayMode
from line_filter.models.llm_models import (
    GenerationRequest,
    GenerationResponse,
    OllamaGeneratePayload,
)
from line_filter.models.filter_models import FilterOptions, FilterStats

__all__ = [
    # Enums
    "KeepPolicy",
    "DisplayMode",
    # LLM models
    "GenerationRequest",
    "GenerationResponse",
    "OllamaGeneratePayload",
    # Filter models
    "FilterOptions",
    "FilterStats",
]
