"""
Line classifier.

Orchestrates one classification: build the prompt, ask the inference
backend, normalize the answer. Backend failures propagate untouched.
"""

import structlog

from line_filter.classification.normalizer import normalize_answer
from line_filter.llm.base_client import BaseLLMClient
from line_filter.llm.prompt_builder import PromptBuilder
from line_filter.models.llm_models import GenerationRequest


logger = structlog.get_logger(__name__)


class Classifier:
    """
    Answer a yes/no question about a line of content via an LLM.

    Attributes:
        llm_client: Inference backend (any BaseLLMClient)
        prompt_builder: Renders the question/content prompt
        model: Model identifier sent with every request
    """

    def __init__(
        self,
        llm_client: BaseLLMClient,
        model: str,
        prompt_builder: PromptBuilder | None = None,
    ) -> None:
        self.llm_client = llm_client
        self.model = model
        self.prompt_builder = prompt_builder or PromptBuilder()

    async def classify(self, question: str, content: str) -> bool:
        """
        Classify one line of content against the question.

        Returns:
            True for an affirmative answer, False for a negative or
            unrecognized one

        Raises:
            InferenceError: The backend call failed (not retried)
        """
        prompt = self.prompt_builder.build(question, content)
        request = GenerationRequest(model=self.model, prompt=prompt)

        response = await self.llm_client.generate(request)
        classification = normalize_answer(response.content)

        logger.debug(
            "Line classified",
            classification=classification,
            answer=response.content[:80],
            latency_ms=response.latency_ms,
        )
        return classification
