"""
Unit tests for the LLM line filter.

Test individual components in isolation:
- Data models (validation, constraints)
- Prompt builder (exact shape, custom templates)
- Answer normalizer and classifier (scripted backends)
- Ollama client (httpx.MockTransport)
- Filter driver (keep policy, display mode, ordering, failures)
- CLI (typer CliRunner)
"""
