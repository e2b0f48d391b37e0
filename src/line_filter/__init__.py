"""
LLM line filter.

Reads lines of text, asks an Ollama-served model a yes/no question about
each one and keeps or drops the line based on the answer:
- Prompt construction (question + content)
- Inference via Ollama /api/generate
- Permissive yes/no answer normalization (unrecognized answers count as "no")
- Filter or annotate output, always in input order

Architecture: typer CLI + async httpx client + structlog diagnostics on stderr
"""

__version__ = "0.1.0"
