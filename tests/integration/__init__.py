"""
Integration tests for the LLM line filter.

Test components against a real Ollama server (skipped when unreachable):
- Ollama client (real calls)
- Full pipeline (line -> prompt -> model -> normalized answer -> output)
"""
