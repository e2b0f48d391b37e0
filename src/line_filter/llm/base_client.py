"""
Abstract base client for LLM inference.

Defines the single operation the classifier needs from an inference backend:
generate text for a prompt under a named model. Concrete bindings (Ollama,
test doubles) can be swapped without touching the classifier.
"""

from abc import ABC, abstractmethod
import structlog

from line_filter.models.llm_models import GenerationRequest, GenerationResponse


logger = structlog.get_logger(__name__)


class BaseLLMClient(ABC):
    """
    Abstract base class for LLM inference clients.

    Responsibilities:
    - Send generation requests to the inference server
    - Parse responses into GenerationResponse
    - Report every failure as an InferenceError subclass

    Does NOT handle:
    - Prompt construction (that's PromptBuilder's job)
    - Interpreting the answer (that's the normalizer's job)
    - Retries (a failed line is reported and skipped)
    """

    def __init__(self, base_url: str, timeout: float = 30.0):
        """
        Initialize base client.

        Args:
            base_url: Base URL of the inference server (e.g., http://localhost:11434)
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

        logger.debug(
            "Initialized LLM client",
            client_class=self.__class__.__name__,
            base_url=self.base_url,
            timeout=timeout,
        )

    @abstractmethod
    async def generate(self, request: GenerationRequest) -> GenerationResponse:
        """
        Generate a completion for ``request.prompt`` under ``request.model``.

        Args:
            request: Standardized generation request

        Returns:
            GenerationResponse with the completed answer text

        Raises:
            InferenceError: Any connectivity, status or decoding failure
        """
        pass

    async def close(self):
        """
        Close client connections and cleanup resources.

        Default implementation does nothing. Subclasses holding persistent
        connections override it.
        """
        logger.debug("Closing LLM client", client_class=self.__class__.__name__)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"base_url={self.base_url}, "
            f"timeout={self.timeout}s)"
        )
