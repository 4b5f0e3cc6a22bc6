from abc import ABC, abstractmethod


class BaseAnalysisClient(ABC):
    """Contract for provider-specific generative-language clients."""

    @abstractmethod
    def generate(
        self,
        *,
        model: str,
        prompt: str,
        temperature: float,
        top_p: float,
        max_output_tokens: int,
    ) -> str:
        """Return the model's answer to ``prompt`` as plain text.

        Raises:
            AnalysisError: on any provider failure, including unknown models.
        """
