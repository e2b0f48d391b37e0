"""
Configuration settings for the LLM line filter.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development. Command-line flags override them.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Application ===
    ENVIRONMENT: str = "development"  # "production" switches logs to JSON
    LOG_LEVEL: str = "WARNING"  # stderr stays quiet unless something fails

    # === Ollama Configuration ===
    OLLAMA_BASE_URL: str = "http://localhost:11434"
    OLLAMA_MODEL: str = "llama3.1:latest"
    OLLAMA_TIMEOUT: float = 30.0  # seconds

    # === Filtering ===
    PROMPT_TEMPLATE_PATH: Optional[str] = None  # Jinja2 template, default is built in
    FILTER_CONCURRENCY: int = 1  # In-flight classifications; 1 = strictly sequential


def get_settings() -> Settings:
    """Load settings from the current environment."""
    return Settings()
