"""
Filtering data models: run options and per-run statistics.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from line_filter.models.enums import DisplayMode, KeepPolicy


class FilterOptions(BaseModel):
    """
    Options fixed for a whole filtering run.

    The question is asked verbatim for every line; it must contain
    something other than whitespace.
    """
    model_config = ConfigDict(frozen=True)

    question: str = Field(..., description="Yes/no question asked about each line")
    keep_policy: KeepPolicy = Field(default=KeepPolicy.YES)
    display_mode: DisplayMode = Field(default=DisplayMode.FILTER)
    concurrency: int = Field(default=1, ge=1, description="Max in-flight classifications")

    @field_validator("question")
    @classmethod
    def question_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("question must not be empty")
        return v


class FilterStats(BaseModel):
    """Counters for one filtering run, logged as a summary when it ends."""

    lines_read: int = 0
    skipped_empty: int = 0
    classified: int = 0
    kept: int = 0
    dropped: int = 0
    failed: int = 0
